"""Phonetic comparison used to tolerate typos in labels and keywords."""

from __future__ import annotations

import re
from typing import Protocol

import jellyfish

_NON_LETTERS = re.compile(r"[^A-Za-z]+")


class PhoneticMatcher(Protocol):
    """Capability that decides whether two words sound alike."""

    def equal(self, first: str, second: str) -> bool:
        """Return True when both words have the same phonetic encoding."""
        ...


class MetaphoneMatcher:
    """PhoneticMatcher comparing Metaphone encodings."""

    def encode(self, word: str) -> str:
        """Encode a word, ignoring anything that is not a letter."""
        letters = _NON_LETTERS.sub("", word)
        if not letters:
            return ""
        return jellyfish.metaphone(letters)

    def equal(self, first: str, second: str) -> bool:
        encoded = self.encode(first)
        return bool(encoded) and encoded == self.encode(second)
