"""Lexer that extracts comment blocks from CSS, Less and Sass source."""

from __future__ import annotations

import re
from enum import Enum

SINGLE_LINE = re.compile(r"^\s*//")
SINGLE_LINE_MARKER = re.compile(r"^\s*//\s?")
DOCBLOCK_START = re.compile(r"^\s*/\*\*\s*$")
MULTI_START = re.compile(r"^\s*/\*+\s*$")
MULTI_FINISH = re.compile(r"^\s*\*/\s*$")
DOCBLOCK_MARKER = re.compile(r"^\s*\*\s?")
LEADING_WHITESPACE = re.compile(r"^\s*")


class LexerState(Enum):
    """What kind of comment the lexer is currently inside."""

    IDLE = "idle"
    SINGLE_RUN = "single_run"
    MULTI_BLOCK = "multi_block"
    DOC_BLOCK = "doc_block"


def normalize_newlines(text: str) -> str:
    """Convert CRLF and CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class BlockExtractor:
    """Split source text into the text of its comment blocks.

    Recognized forms:

    - runs of ``//`` line comments, joined with newlines;
    - ``/**`` docblocks, with the leading ``*`` of each line removed;
    - ``/*`` comments, with the indentation of the first non-blank line
      removed from every line.

    Comment markers must stand on their own lines. No interpretation of the
    comment text happens here.
    """

    def __init__(self) -> None:
        self.blocks: list[str] = []
        self._reset()

    def _reset(self) -> None:
        self.state = LexerState.IDLE
        self._lines: list[str] = []
        self._indent: str | None = None

    def _flush(self) -> None:
        block = "\n".join(self._lines).strip("\n")
        if block:
            self.blocks.append(block)
        self._reset()

    def feed_line(self, line: str) -> None:
        """Advance the lexer by one line of source."""
        line = line.rstrip()

        if self.state in (LexerState.MULTI_BLOCK, LexerState.DOC_BLOCK):
            if MULTI_FINISH.match(line):
                self._flush()
            elif self.state == LexerState.DOC_BLOCK:
                self._lines.append(DOCBLOCK_MARKER.sub("", line, count=1))
            else:
                self._add_indented(line)
            return

        if SINGLE_LINE.match(line):
            if self.state == LexerState.IDLE:
                self.state = LexerState.SINGLE_RUN
            # Blank comment lines before any text do not open a paragraph
            if self._lines or line.strip() != "//":
                self._lines.append(SINGLE_LINE_MARKER.sub("", line, count=1))
            return

        if self.state == LexerState.SINGLE_RUN:
            self._flush()

        if DOCBLOCK_START.match(line):
            self.state = LexerState.DOC_BLOCK
        elif MULTI_START.match(line):
            self.state = LexerState.MULTI_BLOCK

    def _add_indented(self, line: str) -> None:
        if self._indent is None:
            if line == "":
                return
            self._indent = LEADING_WHITESPACE.match(line).group(0)
        if line.startswith(self._indent):
            line = line[len(self._indent):]
        self._lines.append(line)

    def close(self) -> list[str]:
        """Flush any unterminated block and return all blocks found."""
        if self._lines:
            self._flush()
        self._reset()
        return self.blocks


def find_blocks(text: str) -> list[str]:
    """Return the comment blocks found in text, in document order.

    Args:
        text: Source text of one stylesheet.

    Returns:
        Block strings with comment markers removed and leading and trailing
        blank lines trimmed.
    """
    extractor = BlockExtractor()
    for line in normalize_newlines(text).split("\n"):
        extractor.feed_line(line)
    return extractor.close()
