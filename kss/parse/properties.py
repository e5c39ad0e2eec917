"""Extraction of labeled "Name: value" paragraphs from a comment block."""

from __future__ import annotations

import math
import re
from typing import Callable

from kss.parse.phonetic import PhoneticMatcher

# Leading words of a line followed by a colon, e.g. "Markup:" or "Mark up:"
_FUZZY_LABEL = re.compile(r"^\s*([a-z ]*):\s?", re.IGNORECASE)


def _label_pattern(label: str) -> re.Pattern[str]:
    return re.compile(rf"^\s*{re.escape(label)}:\s?", re.IGNORECASE)


def match_label(
    text: str,
    label: str,
    matcher: PhoneticMatcher | None = None,
) -> re.Match[str] | None:
    """Match ``label:`` at the very start of text.

    Args:
        text: Text to test.
        label: Label name without the colon.
        matcher: When given, a leading label that merely sounds like
            ``label`` also matches.

    Returns:
        The match covering the label, colon and one following whitespace
        character, or None.
    """
    match = _label_pattern(label).match(text)
    if match or matcher is None:
        return match

    match = _FUZZY_LABEL.match(text)
    if match and matcher.equal(match.group(1).strip(), label):
        return match
    return None


def has_prefix(text: str, label: str, matcher: PhoneticMatcher | None = None) -> bool:
    """Check if any line of text starts with ``label:``.

    Used for status flags such as "Deprecated:" and "Experimental:" that may
    appear at the start of any description paragraph.
    """
    return any(match_label(line, label, matcher) for line in text.split("\n"))


def extract_property(
    label: str,
    paragraphs: list[str],
    matcher: PhoneticMatcher | None = None,
    normalize: Callable[[str], object] | None = None,
) -> tuple[object | None, list[str]]:
    """Find and remove the first paragraph with a line labeled ``label:``.

    The label is matched at the start of any line, the same way as
    has_prefix(). Only the label is removed from that line; the other lines
    of the paragraph stay in the value.

    Args:
        label: Property label, e.g. "Markup".
        paragraphs: Paragraphs of a comment block.
        matcher: Phonetic matcher enabling typo tolerance, or None.
        normalize: Optional function applied to the captured value.

    Returns:
        The value (None when no paragraph matched) and a new paragraph list
        without the matched paragraph.
    """
    for index, paragraph in enumerate(paragraphs):
        value = _strip_label(paragraph, label, matcher)
        if value is None:
            continue
        if normalize is not None:
            value = normalize(value)
        return value, paragraphs[:index] + paragraphs[index + 1:]

    return None, list(paragraphs)


def _strip_label(
    paragraph: str,
    label: str,
    matcher: PhoneticMatcher | None,
) -> str | None:
    lines = paragraph.split("\n")
    for number, line in enumerate(lines):
        match = match_label(line, label, matcher)
        if not match:
            continue
        rest = line[match.end():]
        # "Markup:" alone on its line introduces a value on the next lines
        replacement = [rest] if rest else []
        return "\n".join(lines[:number] + replacement + lines[number + 1:])
    return None


def to_weight(value: str) -> int | float:
    """Parse a weight value, falling back to 0."""
    try:
        weight = float(value.strip())
    except ValueError:
        return 0
    if not math.isfinite(weight):
        return 0
    if weight.is_integer():
        return int(weight)
    return weight
