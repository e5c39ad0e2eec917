"""Detection of the "styleguide <reference>" marker."""

from __future__ import annotations

import re

from kss.parse.phonetic import PhoneticMatcher

KEYWORD = "styleguide"

_TRAILING_PUNCTUATION = re.compile(r"[-:]$")


def _is_keyword(word: str, matcher: PhoneticMatcher | None) -> bool:
    word = _TRAILING_PUNCTUATION.sub("", word)
    if word.lower() == KEYWORD:
        return True
    return matcher is not None and matcher.equal(word.replace("-", ""), KEYWORD)


def detect_reference(
    paragraphs: list[str],
    matcher: PhoneticMatcher | None = None,
) -> str | None:
    """Find the style guide reference in the last paragraph of a block.

    The paragraph must start with "styleguide" (or "style guide"), optionally
    followed by ":" or "-", and the remaining words form the reference:
    "Styleguide 2.1.3" gives "2.1.3" and "Style guide: Forms - Buttons" gives
    "Forms - Buttons".

    Args:
        paragraphs: Paragraphs of a comment block.
        matcher: Phonetic matcher enabling typo tolerance, or None.

    Returns:
        The reference, or None when the block has no reference.
    """
    if not paragraphs:
        return None

    words = paragraphs[-1].split()
    if len(words) < 2:
        return None

    if _is_keyword(words[0], matcher):
        remaining = words[1:]
    elif _is_keyword(words[0] + words[1], matcher):
        remaining = words[2:]
    else:
        return None

    return " ".join(remaining) or None
