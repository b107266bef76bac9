"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:default {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
            QGroupBox {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
            QProgressBar {{
                border: none;
                border-radius: 4px;
                background-color: {ColorPalette.BORDER_PRIMARY.get(theme)};
                max-height: 8px;
            }}
            QProgressBar::chunk {{
                border-radius: 4px;
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_option_style(is_correct_option: bool, is_wrong_choice: bool, theme: Theme = Theme.LIGHT) -> str:
        """Border and background for an answer option once feedback is shown."""
        if is_correct_option:
            border, background = ColorPalette.SUCCESS_BORDER.get(theme), ColorPalette.SUCCESS_BG.get(theme)
            width = 2
        elif is_wrong_choice:
            border, background = ColorPalette.ERROR_BORDER.get(theme), ColorPalette.ERROR_BG.get(theme)
            width = 2
        else:
            border, background = ColorPalette.BORDER_PRIMARY.get(theme), ColorPalette.BACKGROUND_PRIMARY.get(theme)
            width = 1
        return (
            f"QRadioButton {{ padding: 12px; border: {width}px solid {border}; "
            f"border-radius: 6px; background-color: {background}; }}"
        )

    @staticmethod
    def get_score_style(passed: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.SUCCESS.get(theme) if passed else ColorPalette.ERROR.get(theme)
        return f"font-size: 20pt; font-weight: bold; color: {color};"
