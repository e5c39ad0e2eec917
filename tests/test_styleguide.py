"""Tests for parse() and the StyleGuide aggregate."""

import logging

import pytest

from kss.config import KssOptions
from kss.errors import KssInputError
from kss.parse.schemas import Modifier, Parameter, Section
from kss.styleguide import StyleGuide, parse, reference_uri, split_reference


class TestParseInput:
    """Tests for the input shapes accepted by parse()."""

    def test_string(self, plain_options: KssOptions, buttons_css: str) -> None:
        """Test parsing a single stylesheet."""
        styleguide = parse(buttons_css, plain_options)

        assert [s.reference for s in styleguide] == ["2.1.1"]
        assert styleguide.files == []

    def test_list_keeps_order(
        self, plain_options: KssOptions, buttons_css: str, forms_less: str, mixins_scss: str
    ) -> None:
        """Test that stylesheets are parsed in the order given."""
        styleguide = parse([mixins_scss, buttons_css, forms_less], plain_options)
        assert [s.reference for s in styleguide] == ["3.1", "2.1.1", "2", "2.2"]

    def test_mapping_records_sorted_files(
        self, plain_options: KssOptions, buttons_css: str, forms_less: str
    ) -> None:
        """Test that file names are kept sorted while parse order follows the mapping."""
        styleguide = parse({"b.less": forms_less, "a.css": buttons_css}, plain_options)

        assert styleguide.files == ["a.css", "b.less"]
        assert [s.reference for s in styleguide] == ["2", "2.2", "2.1.1"]

    def test_named_pairs(self, plain_options: KssOptions, buttons_css: str, forms_less: str) -> None:
        """Test parsing (name, text) pairs in order, with optional names."""
        styleguide = parse(
            [("z.less", forms_less), (None, "// Extra\n//\n// Styleguide 5\n"), ("a.css", buttons_css)],
            plain_options,
        )

        assert [s.reference for s in styleguide] == ["2", "2.2", "5", "2.1.1"]
        assert styleguide.files == ["a.css", "z.less"]

    def test_pairs_mixed_with_strings(self, plain_options: KssOptions, buttons_css: str) -> None:
        """Test that unnamed strings and named pairs can be combined."""
        styleguide = parse([buttons_css, ("mixins.scss", "// Mixin\n//\n// Styleguide 3\n")], plain_options)

        assert [s.reference for s in styleguide] == ["2.1.1", "3"]
        assert styleguide.files == ["mixins.scss"]

    @pytest.mark.parametrize(
        "bad_input",
        [
            None,
            42,
            ["ok", 3],
            {"a.css": b"bytes"},
            [("a.css", b"bytes")],
            [(1, "text")],
            [("a.css", "text", "extra")],
        ],
    )
    def test_invalid_input(self, bad_input: object) -> None:
        """Test that unsupported input raises KssInputError."""
        with pytest.raises(KssInputError):
            parse(bad_input)

    def test_no_sections_is_not_an_error(self) -> None:
        """Test that undocumented input yields an empty style guide."""
        styleguide = parse(".a { color: red; }\n/* note */\n")
        assert len(styleguide) == 0

    def test_parsed_fields(
        self, plain_options: KssOptions, buttons_css: str, forms_less: str, mixins_scss: str
    ) -> None:
        """Test the sections parsed from the sample stylesheets."""
        styleguide = parse([buttons_css, forms_less, mixins_scss], plain_options)

        buttons = styleguide.section("2.1.1")
        assert buttons.header == "Buttons"
        assert buttons.description == "Your standard button suitable for clicking."
        assert [m.name for m in buttons.modifiers] == [":hover", ".primary", ".disabled"]
        assert buttons.modifiers[2].description == "Dims the button to indicate it cannot be used."

        forms = styleguide.section("2")
        assert forms.deprecated
        assert forms.header == "Forms"

        inputs = styleguide.section("2.2")
        assert inputs.weight == -1
        assert inputs.header == "Text inputs"

        rounded = styleguide.section("3.1")
        assert [p.name for p in rounded.parameters] == ["$radius", "$clip"]
        assert rounded.modifiers == ()


class TestStyleGuide:
    """Tests for lookups and ordering."""

    @pytest.fixture
    def styleguide(self) -> StyleGuide:
        """Create a style guide of hand-built sections."""
        return StyleGuide(
            sections=[
                Section(reference="2.10", header="Ten"),
                Section(reference="2", header="Two"),
                Section(reference="1", header="One", weight=5),
                Section(reference="2.2", header="Two two"),
                Section(reference="2.2.1", header="Deep"),
                Section(reference="2.1", header="Light", weight=-1),
            ],
            files=["z.css", "a.css"],
        )

    def test_files_sorted(self, styleguide: StyleGuide) -> None:
        """Test that file names are sorted."""
        assert styleguide.files == ["a.css", "z.css"]

    def test_section_lookup(self, styleguide: StyleGuide) -> None:
        """Test finding a section by exact reference."""
        assert styleguide.section("2.2").header == "Two two"
        assert styleguide.section("9") is None

    def test_descendants(self, styleguide: StyleGuide) -> None:
        """Test the ".*" query."""
        found = styleguide.sections_matching("2.*")
        assert [s.reference for s in found] == ["2.10", "2.2", "2.2.1", "2.1"]

    def test_children(self, styleguide: StyleGuide) -> None:
        """Test the ".x" query."""
        found = styleguide.sections_matching("2.x")
        assert [s.reference for s in found] == ["2.10", "2.2", "2.1"]

    def test_exact_query(self, styleguide: StyleGuide) -> None:
        """Test that other queries match one reference."""
        assert [s.header for s in styleguide.sections_matching("2.2.1")] == ["Deep"]
        assert styleguide.sections_matching("7") == []

    def test_sorted_sections(self, styleguide: StyleGuide) -> None:
        """Test ordering by weight, then numerically, parents first."""
        ordered = [s.reference for s in styleguide.sorted_sections()]
        assert ordered == ["2", "2.1", "2.2", "2.2.1", "2.10", "1"]

    def test_duplicate_reference(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that duplicates are kept and lookups return the last one."""
        with caplog.at_level(logging.WARNING, logger="kss.styleguide"):
            styleguide = StyleGuide([Section(reference="1", header="A"), Section(reference="1", header="B")])

        assert len(styleguide) == 2
        assert styleguide.section("1").header == "B"
        assert "Duplicate style guide reference: 1" in caplog.text

    def test_to_dict(self, styleguide: StyleGuide) -> None:
        """Test the JSON-ready representation."""
        data = styleguide.to_dict()

        assert data["files"] == ["a.css", "z.css"]
        first = data["sections"][0]
        assert first["reference"] == "2.10"
        assert first["referenceURI"] == "2-10"
        assert first["depth"] == 2
        assert first["markup"] is None

        assert data["sections"][0]["reference"] != styleguide.to_dict(sort=True)["sections"][0]["reference"]


class TestReferenceHelpers:
    """Tests for reference utilities."""

    def test_split_reference(self) -> None:
        """Test splitting numeric and named references."""
        assert split_reference("2.1.3") == ["2", "1", "3"]
        assert split_reference("2.1.") == ["2", "1"]
        assert split_reference("Forms - Text inputs") == ["Forms", "Text inputs"]

    def test_reference_uri(self) -> None:
        """Test URI fragment encoding."""
        assert reference_uri("2.1.3") == "2-1-3"
        assert reference_uri("Forms - Text inputs") == "forms-text-inputs"
        assert reference_uri("Forms.Buttons") == "forms-buttons"

    def test_section_requires_reference(self) -> None:
        """Test that a section cannot be built without a reference."""
        with pytest.raises(ValueError):
            Section(reference="")

    def test_section_rejects_modifiers_and_parameters(self) -> None:
        """Test that modifiers and parameters are mutually exclusive."""
        with pytest.raises(ValueError):
            Section(reference="1", modifiers=(Modifier(".a"),), parameters=(Parameter("$a"),))

    def test_section_custom_is_read_only(self) -> None:
        """Test that custom properties cannot be changed after construction."""
        custom = {"colors": "red"}
        section = Section(reference="1", custom=custom)

        with pytest.raises(TypeError):
            section.custom["colors"] = "blue"
        custom["colors"] = "blue"

        assert section.custom_property("Colors") == "red"

    def test_section_hashable(self) -> None:
        """Test that sections can be hashed and compared."""
        first = Section(reference="1", custom={"colors": "red"})
        second = Section(reference="1", custom={"colors": "red"})

        assert first == second
        assert hash(first) == hash(second)
        assert first != Section(reference="1", custom={"colors": "blue"})
