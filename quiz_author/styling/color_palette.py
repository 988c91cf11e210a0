"""Color palette for Quiz Author widgets supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """A color value per theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the widgets."""

    TEXT_PRIMARY = ThemeColors(light="#1B1B1B", dark="#F0F0F0")
    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    GROUP_BORDER = ThemeColors(light="#C8C8C8", dark="#4F4F4F")

    BUTTON_BG = ThemeColors(light="#EEF3FA", dark="#34404F")
    BUTTON_HOVER_BG = ThemeColors(light="#DCE7F5", dark="#435266")
    BUTTON_BORDER = ThemeColors(light="#9FB6D3", dark="#5D728C")

    # Dice results
    WIN = ThemeColors(light="#107C10", dark="#6FCF6F")
    LOSE = ThemeColors(light="#D13438", dark="#FF6B6B")
