"""Layout-preserving HTML rendering for question prompts and options.

Prompts are stored as plain text in which newlines and tabs matter (code
listings, indented pseudo-code). Plain prose goes through markdown-it with
``breaks`` enabled so that every newline survives; text that looks like
source code is fenced so that markdown-it emits it verbatim in a ``<pre>``
block.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re

from markdown_it import MarkdownIt

from study_quiz.constants.quiz_constants import TAB_WIDTH

_CODE_MARKERS = ("#include", "printf", "scanf", "{", "}")
_FENCE_RUN = re.compile(r"`{3,}")


def looks_like_code(text: str) -> bool:
    return "\t" in text or any(marker in text for marker in _CODE_MARKERS)


def expand_tabs(text: str) -> str:
    return text.replace("\t", " " * TAB_WIDTH)


@dataclass(slots=True)
class PromptRenderer:
    """Converts prompt text into HTML fragments."""

    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": False, "breaks": True})

    def render_fragment(self, text: str) -> str:
        if not text.strip():
            return "<p><em>No content provided.</em></p>"
        if looks_like_code(text):
            return self._markdown.render(self._fence(expand_tabs(text)))
        return self._markdown.render(text.strip())

    def render_options(self, options: list[str]) -> list[str]:
        return [self.render_fragment(option) for option in options]

    @staticmethod
    def _fence(text: str) -> str:
        longest = max((len(run) for run in _FENCE_RUN.findall(text)), default=2)
        fence = "`" * (longest + 1)
        return f"{fence}\n{text.strip(chr(10))}\n{fence}\n"


renderer = PromptRenderer()
