"""Parser turning KSS comment blocks into sections."""

from __future__ import annotations

import logging
import re

from kss.config import KssOptions
from kss.parse.blocks import find_blocks, normalize_newlines
from kss.parse.entries import build_modifiers, build_parameters, collect_entry_lines
from kss.parse.phonetic import MetaphoneMatcher, PhoneticMatcher
from kss.parse.properties import extract_property, has_prefix, to_weight
from kss.parse.reference import detect_reference
from kss.parse.rendering import MarkdownRenderer, Renderer
from kss.parse.schemas import Modifier, Parameter, Section

logger = logging.getLogger(__name__)

BLANK_LINES = re.compile(r"\n\s+\n")
FIRST_PARAGRAPH = re.compile(r"^.*?\n{2,}", re.DOTALL)


def split_paragraphs(block: str) -> list[str]:
    """Split a comment block into paragraphs separated by blank lines."""
    text = BLANK_LINES.sub("\n\n", normalize_newlines(block)).strip()
    return text.split("\n\n")


class SectionParser:
    """Parser for the KSS documentation comments of stylesheets."""

    def __init__(
        self,
        options: KssOptions | None = None,
        renderer: Renderer | None = None,
        matcher: PhoneticMatcher | None = None,
    ) -> None:
        """Initialize parser with options and capabilities.

        Args:
            options: Parsing options; defaults are used when omitted.
            renderer: Rich-text renderer. A MarkdownRenderer is created when
                rendering is enabled and none is given.
            matcher: Phonetic matcher. A MetaphoneMatcher is created when
                typo tolerance is enabled and none is given.
        """
        self.options = options or KssOptions()
        self.renderer: Renderer | None = None
        self.matcher: PhoneticMatcher | None = None
        if self.options.markdown:
            self.renderer = renderer or MarkdownRenderer()
        if self.options.typos:
            self.matcher = matcher or MetaphoneMatcher()

    def parse_chunk(self, text: str) -> list[Section]:
        """Parse the sections documented in one stylesheet.

        Args:
            text: Full source text of the stylesheet.

        Returns:
            Sections in document order.
        """
        sections = []
        for block in find_blocks(text):
            section = self.parse_block(block)
            if section is not None:
                sections.append(section)
        return sections

    def parse_block(self, block: str) -> Section | None:
        """Parse a single comment block.

        Args:
            block: Comment text with comment markers removed.

        Returns:
            The section, or None when the block has no style guide reference.
        """
        paragraphs = split_paragraphs(block)

        markup, paragraphs = extract_property("Markup", paragraphs, self.matcher)
        weight, paragraphs = extract_property("Weight", paragraphs, self.matcher, to_weight)
        custom: dict[str, str] = {}
        for label in self.options.custom:
            value, paragraphs = extract_property(label, paragraphs, self.matcher)
            if value is not None:
                custom[label.lower()] = value

        reference = detect_reference(paragraphs, self.matcher)
        if not reference:
            logger.debug("Skipping comment without a style guide reference: %.40r", block)
            return None

        header, description, entry_lines = self._split_content(paragraphs, reference)
        header = header.replace("\n", " ")

        deprecated = has_prefix(description, "Deprecated", self.matcher)
        experimental = has_prefix(description, "Experimental", self.matcher)

        if self.options.header:
            description = self._strip_header(description)

        modifiers: tuple[Modifier, ...] = ()
        parameters: tuple[Parameter, ...] = ()
        if entry_lines:
            if markup is not None:
                modifiers = build_modifiers(entry_lines, self.renderer)
            else:
                parameters = build_parameters(entry_lines, self.renderer)

        if self.renderer is not None:
            description = self.renderer.render(description)

        return Section(
            raw=block,
            reference=reference,
            header=header,
            description=description,
            weight=weight if weight is not None else 0,
            markup=markup,
            modifiers=modifiers,
            parameters=parameters,
            deprecated=deprecated,
            experimental=experimental,
            custom=custom,
        )

    def _split_content(
        self, paragraphs: list[str], reference: str
    ) -> tuple[str, str, list[str]]:
        """Classify the paragraphs left after properties were removed.

        The last paragraph holds the reference. With three or more
        paragraphs, the one before it may list modifiers or parameters.

        Returns:
            Header, description and entry lines (empty when there are none).
        """
        if len(paragraphs) == 1:
            return reference, "", []
        if len(paragraphs) == 2:
            return paragraphs[0], paragraphs[0], []

        header = paragraphs[0]
        description = "\n\n".join(paragraphs[:-2])
        candidate = paragraphs[-2]

        entry_lines = collect_entry_lines(candidate)
        if entry_lines is None:
            logger.debug("Treating paragraph as description: %.40r", candidate)
            return header, f"{description}\n\n{candidate}", []
        return header, description, entry_lines

    @staticmethod
    def _strip_header(description: str) -> str:
        """Remove the first paragraph, which repeats the header."""
        if "\n\n" not in description:
            return ""
        return FIRST_PARAGRAPH.sub("", description, count=1)
