"""KSS: parse style guide documentation from CSS, Less and Sass comments."""

from kss.config import KssConfig, KssOptions, load_config
from kss.errors import KssConfigError, KssError, KssInputError
from kss.parse import Modifier, Parameter, Section, SectionParser
from kss.styleguide import StyleGuide, parse
from kss.traverse import traverse

__version__ = "0.1.0"

__all__ = [
    "KssConfig",
    "KssConfigError",
    "KssError",
    "KssInputError",
    "KssOptions",
    "Modifier",
    "Parameter",
    "Section",
    "SectionParser",
    "StyleGuide",
    "load_config",
    "parse",
    "traverse",
]
