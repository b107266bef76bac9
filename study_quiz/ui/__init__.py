"""Qt UI components for the desktop quiz application."""

from .dialog_helpers import confirm_leave_quiz, show_info
from .question_renderer import render_option_text, render_question_html
from .quiz_main_window import QuizMainWindow

__all__ = [
    "QuizMainWindow",
    "confirm_leave_quiz",
    "show_info",
    "render_option_text",
    "render_question_html",
]
