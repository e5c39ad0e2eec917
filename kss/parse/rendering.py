"""Rich-text rendering of section descriptions."""

from __future__ import annotations

import re
from typing import Protocol

import markdown

_WRAPPING_PARAGRAPH = re.compile(r"^<p>(.*)</p>$", re.DOTALL)


class Renderer(Protocol):
    """Capability that renders description text to HTML."""

    def render(self, text: str) -> str:
        """Render block-level text."""
        ...

    def render_inline(self, text: str) -> str:
        """Render text without a top-level wrapping element."""
        ...


class MarkdownRenderer:
    """Renderer backed by Python-Markdown.

    One instance is created per parse run and shared by every section.
    """

    def __init__(self, extensions: list[str] | None = None) -> None:
        """Initialize the Markdown processor.

        Args:
            extensions: Python-Markdown extension names to enable.
        """
        self._md = markdown.Markdown(extensions=extensions or [])

    def render(self, text: str) -> str:
        if not text:
            return ""
        return self._md.reset().convert(text)

    def render_inline(self, text: str) -> str:
        if not text:
            return ""
        html = self._md.reset().convert(text)
        # A single paragraph loses its <p>; anything richer is left alone
        match = _WRAPPING_PARAGRAPH.match(html)
        if match and "<p>" not in match.group(1):
            return match.group(1)
        return html
