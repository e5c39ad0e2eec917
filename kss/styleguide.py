"""Style guide aggregation of parsed sections."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

from kss.config import KssOptions
from kss.errors import KssInputError
from kss.parse.parser import SectionParser
from kss.parse.phonetic import PhoneticMatcher
from kss.parse.rendering import Renderer
from kss.parse.schemas import Section

logger = logging.getLogger(__name__)

_URI_UNSAFE = re.compile(r"[^\w-]+", re.ASCII)


def reference_delimiter(reference: str) -> str:
    """Return the delimiter between the levels of a reference."""
    return " - " if " - " in reference else "."


def split_reference(reference: str) -> list[str]:
    """Split a reference into its hierarchy levels.

    "2.1.3" gives ["2", "1", "3"]; "Forms - Buttons" gives ["Forms", "Buttons"].
    """
    delimiter = reference_delimiter(reference)
    return [part.strip() for part in reference.split(delimiter) if part.strip()]


def reference_uri(reference: str) -> str:
    """Encode a reference as a URI fragment, e.g. "Forms - Buttons" -> "forms-buttons"."""
    return _URI_UNSAFE.sub("-", reference.replace(" - ", "-")).lower()


class StyleGuide:
    """All sections parsed from a set of stylesheets.

    Sections keep the order in which they were parsed. When several sections
    share a reference, all are kept and lookups return the last one.
    """

    def __init__(self, sections: list[Section] | None = None, files: list[str] | None = None) -> None:
        """Initialize style guide.

        Args:
            sections: Sections in emission order.
            files: Names of the files the sections were parsed from.
        """
        self.sections: list[Section] = []
        self.files: list[str] = sorted(files or [])
        self._by_reference: dict[str, Section] = {}
        for section in sections or []:
            self.add(section)

    def add(self, section: Section) -> None:
        """Append a section."""
        if section.reference in self._by_reference:
            logger.warning("Duplicate style guide reference: %s", section.reference)
        self._by_reference[section.reference] = section
        self.sections.append(section)

    def __len__(self) -> int:
        return len(self.sections)

    def __iter__(self):
        return iter(self.sections)

    def section(self, reference: str) -> Section | None:
        """Find a section by its exact reference."""
        return self._by_reference.get(reference)

    def sections_matching(self, query: str) -> list[Section]:
        """Find sections below a reference.

        A query ending in ".*" returns all descendants of the prefix, one
        ending in ".x" only its direct children. Any other query behaves like
        section().
        """
        if query.endswith((".*", ".x")):
            parts = split_reference(query[:-2])
            children_only = query.endswith(".x")
        else:
            found = self.section(query)
            return [found] if found else []

        matches = []
        for section in self.sections:
            levels = split_reference(section.reference)
            if len(levels) <= len(parts) or levels[: len(parts)] != parts:
                continue
            if children_only and len(levels) != len(parts) + 1:
                continue
            matches.append(section)
        return matches

    def depth(self, section: Section) -> int:
        """Get the number of hierarchy levels in a section's reference."""
        return len(split_reference(section.reference))

    def reference_uri(self, section: Section) -> str:
        """Get the URI fragment for a section."""
        return reference_uri(section.reference)

    def sorted_sections(self) -> list[Section]:
        """Get sections in hierarchical order.

        At each level, sections are ordered by the weight of the section
        owning that level, then numerically or alphabetically. Parents come
        before their children and ties keep the parse order.
        """
        weights = {
            tuple(split_reference(section.reference)): section.weight
            for section in self.sections
        }

        def sort_key(section: Section) -> list[tuple[Any, ...]]:
            levels = split_reference(section.reference)
            key = []
            for depth, level in enumerate(levels, start=1):
                weight = weights.get(tuple(levels[:depth]), 0)
                if level.isdigit():
                    key.append((weight, 0, int(level), ""))
                else:
                    key.append((weight, 1, 0, level.lower()))
            return key

        return sorted(self.sections, key=sort_key)

    def to_dict(self, sort: bool = False) -> dict[str, Any]:
        """Convert style guide to a JSON-ready dictionary.

        Args:
            sort: List sections in hierarchical order instead of parse order.
        """
        sections = []
        for section in self.sorted_sections() if sort else self.sections:
            data = section.to_dict()
            data["referenceURI"] = self.reference_uri(section)
            data["depth"] = self.depth(section)
            sections.append(data)
        return {"files": list(self.files), "sections": sections}


def _normalize_input(source: Any) -> tuple[list[str], list[str]]:
    """Return the buffers to parse and their file names."""
    if isinstance(source, str):
        return [source], []

    if isinstance(source, Mapping):
        names, texts = [], []
        for name, text in source.items():
            if not isinstance(text, str):
                raise KssInputError(f"Content of {name!r} must be a string, not {type(text).__name__}")
            names.append(str(name))
            texts.append(text)
        return texts, names

    if isinstance(source, (list, tuple)):
        names, texts = [], []
        for index, item in enumerate(source):
            if isinstance(item, str):
                texts.append(item)
                continue
            if (
                isinstance(item, tuple)
                and len(item) == 2
                and (item[0] is None or isinstance(item[0], str))
                and isinstance(item[1], str)
            ):
                if item[0] is not None:
                    names.append(item[0])
                texts.append(item[1])
                continue
            raise KssInputError(
                f"Input item {index} must be a string or a (name, text) pair, "
                f"not {type(item).__name__}"
            )
        return texts, names

    raise KssInputError(
        f"Cannot parse input of type {type(source).__name__}; "
        "expected a string, a sequence of strings or (name, text) pairs, "
        "or a mapping of file names to strings"
    )


def parse(
    source: str | Sequence[str | tuple[str | None, str]] | Mapping[str, str],
    options: KssOptions | None = None,
    renderer: Renderer | None = None,
    matcher: PhoneticMatcher | None = None,
) -> StyleGuide:
    """Parse documented stylesheets into a style guide.

    Args:
        source: One stylesheet's text, a sequence whose items are texts or
            (name, text) pairs with an optional name, or a mapping of file
            names to texts. Texts are parsed in the order given.
        options: Parsing options.
        renderer: Rich-text renderer to use instead of the default.
        matcher: Phonetic matcher to use instead of the default.

    Returns:
        The style guide holding every section found.

    Raises:
        KssInputError: If the input is not one of the accepted shapes.
    """
    texts, names = _normalize_input(source)
    parser = SectionParser(options, renderer=renderer, matcher=matcher)

    styleguide = StyleGuide(files=names)
    for text in texts:
        # A stylesheet's sections are only added once it is fully parsed
        for section in parser.parse_chunk(text):
            styleguide.add(section)

    logger.debug("Parsed %d sections from %d inputs", len(styleguide), len(texts))
    return styleguide
