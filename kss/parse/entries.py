"""Builders for modifier and parameter lists."""

from __future__ import annotations

import re
from typing import TypeVar

from kss.parse.rendering import Renderer
from kss.parse.schemas import Modifier, Parameter

# "<name> - <description>", where the name has no whitespace
ENTRY_START = re.compile(r"^\s*\S+\s+-\s")
ENTRY_SEPARATOR = re.compile(r"\s+-\s+")

EntryT = TypeVar("EntryT", Modifier, Parameter)


def collect_entry_lines(paragraph: str) -> list[str] | None:
    """Split a candidate paragraph into one line per entry.

    Lines that do not start a new entry continue the description of the
    previous entry.

    Args:
        paragraph: The paragraph that may list modifiers or parameters.

    Returns:
        One line per entry, or None when the first line is not an entry, in
        which case the paragraph is ordinary description text.
    """
    lines = paragraph.split("\n")
    if not ENTRY_START.match(lines[0]):
        return None

    entries: list[str] = []
    for line in lines:
        if ENTRY_START.match(line):
            entries.append(line)
        else:
            entries[-1] = f"{entries[-1]} {line.strip()}"
    return entries


def build_entries(
    lines: list[str],
    entry_type: type[EntryT],
    renderer: Renderer | None = None,
) -> tuple[EntryT, ...]:
    """Turn "name - description" lines into entries.

    Args:
        lines: Entry lines as returned by collect_entry_lines().
        entry_type: Modifier or Parameter.
        renderer: When given, descriptions are rendered as inline rich text.

    Returns:
        Entries in line order.
    """
    entries = []
    for line in lines:
        parts = ENTRY_SEPARATOR.split(line, maxsplit=1)
        name = parts[0].strip()
        description = parts[1] if len(parts) > 1 else ""
        if renderer is not None:
            description = renderer.render_inline(description)
        entries.append(entry_type(name=name, description=description))
    return tuple(entries)


def build_modifiers(lines: list[str], renderer: Renderer | None = None) -> tuple[Modifier, ...]:
    """Build modifiers for a section that has markup."""
    return build_entries(lines, Modifier, renderer)


def build_parameters(lines: list[str], renderer: Renderer | None = None) -> tuple[Parameter, ...]:
    """Build parameters for a section without markup."""
    return build_entries(lines, Parameter, renderer)
