"""Pytest fixtures for kss tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from kss.config import KssOptions
from kss.parse.parser import SectionParser

BUTTONS_CSS = """\
/*
Buttons

Your standard button suitable for clicking.

Markup: <button class="button {{modifier_class}}">Click</button>

:hover    - Highlights when hovering.
.primary  - The primary action.
.disabled - Dims the button to indicate
            it cannot be used.

Styleguide 2.1.1
*/
.button {
  padding: 4px;
}

/* Not documentation, just a note. */
.button.primary {
  color: blue;
}
"""

FORMS_LESS = """\
// Forms
//
// Deprecated: use the new form layout instead.
//
// Styleguide 2
.form { margin: 0; }

/**
 * Text inputs
 *
 * Weight: -1
 *
 * Styleguide 2.2
 */
.input { border: 1px solid; }
"""

MIXINS_SCSS = """\
// Rounded corners
//
// Adds rounded corners to an element.
//
// $radius - The radius of each corner.
// $clip   - Whether to clip the background.
//
// Styleguide 3.1
@mixin rounded($radius, $clip) {}
"""


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for tests."""
    return tmp_path


@pytest.fixture
def styles_dir(temp_dir: Path) -> Path:
    """Create a directory of documented stylesheets.

    Structure:
    - styles/buttons.css
    - styles/forms.less
    - styles/mixins/_rounded.scss
    - styles/readme.txt (not a stylesheet)
    """
    styles = temp_dir / "styles"
    (styles / "mixins").mkdir(parents=True)
    (styles / "buttons.css").write_text(BUTTONS_CSS)
    (styles / "forms.less").write_text(FORMS_LESS)
    (styles / "mixins" / "_rounded.scss").write_text(MIXINS_SCSS)
    (styles / "readme.txt").write_text("// Ignored\n//\n// Styleguide 9\n")
    return styles


@pytest.fixture
def plain_options() -> KssOptions:
    """Options with Markdown rendering disabled."""
    return KssOptions(markdown=False)


@pytest.fixture
def plain_parser(plain_options: KssOptions) -> SectionParser:
    """A parser that leaves descriptions as plain text."""
    return SectionParser(plain_options)


@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Create a project directory with a .kss directory."""
    (temp_dir / ".kss").mkdir()
    return temp_dir


@pytest.fixture
def buttons_css() -> str:
    """A CSS file documenting a section with markup and modifiers."""
    return BUTTONS_CSS


@pytest.fixture
def forms_less() -> str:
    """A Less file documenting two sections."""
    return FORMS_LESS


@pytest.fixture
def mixins_scss() -> str:
    """A Sass file documenting a mixin with parameters."""
    return MIXINS_SCSS
