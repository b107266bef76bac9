"""Question rendering utilities for the desktop quiz view."""

from __future__ import annotations

from study_quiz.core.prompt_renderer import renderer


def render_question_html(question_text: str, font_size: int = 14) -> str:
    """Render a question prompt as an HTML document for a QTextBrowser.

    Args:
        question_text: The prompt; newlines and tabs are preserved
        font_size: Font size in points for the prompt (default 14)

    Returns:
        HTML string ready for ``QTextBrowser.setHtml``
    """
    fragment = renderer.render_fragment(question_text)
    return (
        f"<html><body style=\"font-size: {font_size}pt; font-weight: 600;\">"
        f"{fragment}</body></html>"
    )


def render_option_text(option_text: str) -> str:
    """Plain-text label for a radio button; tabs become spaces."""
    return option_text.replace("\t", "    ")
