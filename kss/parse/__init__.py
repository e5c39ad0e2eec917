"""Comment block extraction and KSS section parsing."""

from kss.parse.blocks import BlockExtractor, find_blocks
from kss.parse.entries import build_modifiers, build_parameters
from kss.parse.parser import SectionParser
from kss.parse.phonetic import MetaphoneMatcher, PhoneticMatcher
from kss.parse.properties import extract_property, has_prefix
from kss.parse.reference import detect_reference
from kss.parse.rendering import MarkdownRenderer, Renderer
from kss.parse.schemas import Modifier, Parameter, Section

__all__ = [
    "BlockExtractor",
    "MarkdownRenderer",
    "MetaphoneMatcher",
    "Modifier",
    "Parameter",
    "PhoneticMatcher",
    "Renderer",
    "Section",
    "SectionParser",
    "build_modifiers",
    "build_parameters",
    "detect_reference",
    "extract_property",
    "find_blocks",
    "has_prefix",
]
