"""Section data structures produced by the parser."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Parameter:
    """A documented argument of a section without markup (e.g. a mixin)."""

    name: str
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"name": self.name, "description": self.description}


@dataclass(frozen=True)
class Modifier:
    """A documented class or state variant of a section with markup."""

    name: str
    description: str = ""

    @property
    def class_name(self) -> str:
        """The modifier name as a CSS class attribute value.

        ``.btn.is-big`` becomes ``btn is-big`` and ``:hover`` becomes
        ``pseudo-class-hover``.
        """
        return self.name.replace(".", " ").replace(":", " pseudo-class-").strip()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "description": self.description,
            "className": self.class_name,
        }


@dataclass(frozen=True)
class Section:
    """One documented, referenceable unit of a style guide.

    A Section is built once per accepted comment block and is never
    modified afterwards. ``markup`` is None when the block declared no
    markup; ``modifiers`` are only populated when it did, ``parameters``
    only when it did not. ``custom`` is a read-only view of a private copy.
    """

    reference: str
    raw: str = ""
    header: str = ""
    description: str = ""
    weight: int | float = 0
    markup: str | None = None
    modifiers: tuple[Modifier, ...] = ()
    parameters: tuple[Parameter, ...] = ()
    deprecated: bool = False
    experimental: bool = False
    custom: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not self.reference:
            raise ValueError("A section requires a non-empty reference")
        if self.modifiers and self.parameters:
            raise ValueError("A section cannot have both modifiers and parameters")
        object.__setattr__(self, "custom", MappingProxyType(dict(self.custom)))

    @property
    def has_markup(self) -> bool:
        """Check if the section declared markup."""
        return self.markup is not None

    def custom_property(self, name: str) -> str | None:
        """Get a custom property by label name (case-insensitive)."""
        return self.custom.get(name.lower())

    def to_dict(self) -> dict[str, Any]:
        """Convert section to a JSON-ready dictionary."""
        data: dict[str, Any] = {
            "header": self.header,
            "description": self.description,
            "deprecated": self.deprecated,
            "experimental": self.experimental,
            "reference": self.reference,
            "weight": self.weight,
            "markup": self.markup,
            "modifiers": [m.to_dict() for m in self.modifiers],
            "parameters": [p.to_dict() for p in self.parameters],
        }
        for name, value in self.custom.items():
            if value and name not in data:
                data[name] = value
        return data
