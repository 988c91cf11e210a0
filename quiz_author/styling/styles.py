"""Centralized stylesheets for the widget showcase."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_BG.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_BORDER.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.GROUP_BORDER.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_die_label_style() -> str:
        return "font-size: 20pt; font-weight: bold;"

    @staticmethod
    def get_roll_result_style(won: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.WIN.get(theme) if won else ColorPalette.LOSE.get(theme)
        return f"color: {color}; font-weight: bold;"
