"""Discovery of stylesheets to parse."""

from __future__ import annotations

import fnmatch
import logging
from pathlib import Path

from kss.config import DEFAULT_MASK, KssOptions
from kss.parse.phonetic import PhoneticMatcher
from kss.parse.rendering import Renderer
from kss.styleguide import StyleGuide, parse

logger = logging.getLogger(__name__)


def matches_mask(path: Path, mask: str) -> bool:
    """Check a file name against a "|"-separated list of glob patterns."""
    return any(fnmatch.fnmatch(path.name, pattern.strip()) for pattern in mask.split("|"))


def discover_files(directories: str | Path | list[str | Path], mask: str = DEFAULT_MASK) -> list[Path]:
    """Find stylesheets below one or more directories.

    Args:
        directories: Directory or list of directories to search recursively.
        mask: "|"-separated glob patterns file names must match.

    Returns:
        Matching files, sorted by path within each directory, directories in
        the order given.

    Raises:
        FileNotFoundError: If a directory does not exist.
    """
    if isinstance(directories, (str, Path)):
        directories = [directories]

    files: list[Path] = []
    for directory in directories:
        directory = Path(directory)
        if not directory.exists():
            raise FileNotFoundError(f"Source directory not found: {directory}")
        if directory.is_file():
            files.append(directory)
            continue
        found = [p for p in directory.rglob("*") if p.is_file() and matches_mask(p, mask)]
        files.extend(sorted(found))
    return files


def read_files(paths: list[Path]) -> dict[str, str]:
    """Read files as UTF-8, skipping any that cannot be decoded."""
    contents: dict[str, str] = {}
    for path in paths:
        try:
            contents[str(path)] = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.warning("Skipping %s: %s", path, e)
            continue
        logger.debug("Read %s", path)
    return contents


def traverse(
    directories: str | Path | list[str | Path],
    options: KssOptions | None = None,
    mask: str = DEFAULT_MASK,
    renderer: Renderer | None = None,
    matcher: PhoneticMatcher | None = None,
) -> StyleGuide:
    """Parse every stylesheet found below the given directories.

    Args:
        directories: Directory or list of directories to search.
        options: Parsing options.
        mask: "|"-separated glob patterns of files to parse.
        renderer: Rich-text renderer to use instead of the default.
        matcher: Phonetic matcher to use instead of the default.

    Returns:
        The style guide of all files, parsed in discovery order.
    """
    files = discover_files(directories, mask)
    return parse(read_files(files), options, renderer=renderer, matcher=matcher)
