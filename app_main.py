"""Application entry point for the Quiz Author widget showcase."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from quiz_author.constants.about import APP_NAME, APP_VERSION
from quiz_author.ui.showcase_window import ShowcaseWindow
from quiz_author.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    app = QApplication(sys.argv)
    window = ShowcaseWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
