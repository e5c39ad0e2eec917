"""Parsing options and configuration file loading."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from kss.errors import KssConfigError

CONFIG_PATH = Path(".kss") / "config.yaml"
DEFAULT_MASK = "*.css|*.less|*.sass|*.scss|*.styl|*.stylus"


@dataclass(frozen=True)
class KssOptions:
    """Options controlling how comment blocks are parsed.

    Attributes:
        markdown: Render descriptions as Markdown.
        header: Remove the header paragraph from the description.
        typos: Accept labels and keywords that sound like the expected ones.
        custom: Extra "Label: value" properties to extract from each block.
    """

    markdown: bool = True
    header: bool = True
    typos: bool = False
    custom: tuple[str, ...] = ()

    def merge(self, **overrides: Any) -> KssOptions:
        """Return a copy with every override that is not None applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "custom" in changes:
            changes["custom"] = tuple(changes["custom"])
        return replace(self, **changes)


@dataclass
class KssConfig:
    """Contents of a kss configuration file."""

    options: KssOptions = field(default_factory=KssOptions)
    mask: str = DEFAULT_MASK
    source: list[str] = field(default_factory=list)


def _expect(data: dict[str, Any], key: str, kind: type, path: Path) -> Any:
    value = data[key]
    if not isinstance(value, kind):
        raise KssConfigError(f"'{key}' must be of type {kind.__name__}", str(path))
    return value


def load_config(path: Path | str | None = None) -> KssConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML file. Defaults to .kss/config.yaml in the
            current directory.

    Returns:
        The loaded configuration; defaults when no path was given and the
        default file does not exist.

    Raises:
        KssConfigError: If a given file does not exist, is not valid YAML or
            has values of the wrong type.
    """
    if path is None:
        if not CONFIG_PATH.exists():
            return KssConfig()
        path = CONFIG_PATH
    path = Path(path)
    if not path.exists():
        raise KssConfigError("file not found", str(path))

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise KssConfigError(f"invalid YAML: {e}", str(path)) from e

    if not isinstance(data, dict):
        raise KssConfigError("expected a mapping at the top level", str(path))

    config = KssConfig()
    overrides: dict[str, Any] = {}
    for key in ("markdown", "header", "typos"):
        if key in data:
            overrides[key] = _expect(data, key, bool, path)
    if "custom" in data:
        custom = _expect(data, "custom", list, path)
        overrides["custom"] = [str(name) for name in custom]
    config.options = config.options.merge(**overrides)

    if "mask" in data:
        config.mask = _expect(data, "mask", str, path)
    if "source" in data:
        if isinstance(data["source"], str):
            config.source = [data["source"]]
        else:
            config.source = [str(item) for item in _expect(data, "source", list, path)]

    return config
