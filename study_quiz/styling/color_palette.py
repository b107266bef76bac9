"""Color palette for StudyQuiz supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#1F2937", dark="#F5F5F5")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#F5F5F5", dark="#2D2D2D")

    ACCENT_PRIMARY = ThemeColors(light="#1890FF", dark="#4A9EFF")

    # Answer feedback
    SUCCESS = ThemeColors(light="#3F8600", dark="#6FCF6F")
    SUCCESS_BORDER = ThemeColors(light="#52C41A", dark="#6FCF6F")
    SUCCESS_BG = ThemeColors(light="#F6FFED", dark="#1F3A1F")
    ERROR = ThemeColors(light="#CF1322", dark="#FF6B6B")
    ERROR_BORDER = ThemeColors(light="#FF4D4F", dark="#FF6B6B")
    ERROR_BG = ThemeColors(light="#FFF1F0", dark="#3A1F1F")

    BORDER_PRIMARY = ThemeColors(light="#D9D9D9", dark="#555555")

    BUTTON_PRIMARY_BG = ThemeColors(light="#1890FF", dark="#4A9EFF")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")
    BUTTON_SECONDARY_BG = ThemeColors(light="#FAFAFA", dark="#3A3A3A")
    BUTTON_HOVER_BG = ThemeColors(light="#F0F0F0", dark="#505050")
