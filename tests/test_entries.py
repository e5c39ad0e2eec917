"""Tests for modifier and parameter building."""

from kss.parse.entries import build_modifiers, build_parameters, collect_entry_lines
from kss.parse.rendering import MarkdownRenderer
from kss.parse.schemas import Modifier, Parameter


class TestCollectEntryLines:
    """Tests for the modifier paragraph heuristic."""

    def test_one_line_per_entry(self) -> None:
        """Test a plain list of entries."""
        paragraph = ":hover - Subtle hover\n:disabled - Dims the button"
        assert collect_entry_lines(paragraph) == [":hover - Subtle hover", ":disabled - Dims the button"]

    def test_continuation_lines_joined(self) -> None:
        """Test that lines without a separator extend the previous entry."""
        paragraph = ".big - Makes it\n   bigger\n.small - Makes it smaller"
        assert collect_entry_lines(paragraph) == [".big - Makes it bigger", ".small - Makes it smaller"]

    def test_first_line_must_be_entry(self) -> None:
        """Test that prose is rejected even if later lines look like entries."""
        paragraph = "Some ordinary text.\n.big - Makes it bigger"
        assert collect_entry_lines(paragraph) is None

    def test_markdown_list_is_not_entry(self) -> None:
        """Test that a bullet list is not mistaken for modifiers."""
        assert collect_entry_lines("- first item\n- second item") is None

    def test_name_with_spaces_rejected(self) -> None:
        """Test that an entry name must not contain whitespace."""
        assert collect_entry_lines("Use this class - sparingly") is None


class TestBuildEntries:
    """Tests for building Modifier and Parameter objects."""

    def test_build_modifiers(self) -> None:
        """Test name and description splitting."""
        modifiers = build_modifiers(["  .primary   -   The main action", ":hover - Hover state"])

        assert modifiers == (
            Modifier(name=".primary", description="The main action"),
            Modifier(name=":hover", description="Hover state"),
        )

    def test_split_on_first_separator(self) -> None:
        """Test that later separators stay in the description."""
        modifiers = build_modifiers([".a - one - two"])
        assert modifiers[0].description == "one - two"

    def test_hyphenated_names(self) -> None:
        """Test that hyphens inside names are kept."""
        parameters = build_parameters(["$font-size - Base size"])
        assert parameters == (Parameter(name="$font-size", description="Base size"),)

    def test_duplicates_kept_in_order(self) -> None:
        """Test that entries are not de-duplicated."""
        modifiers = build_modifiers([".a - first", ".a - second"])
        assert [m.description for m in modifiers] == ["first", "second"]

    def test_inline_rendering(self) -> None:
        """Test that descriptions are rendered without a wrapping paragraph."""
        modifiers = build_modifiers([".a - Uses *emphasis*"], MarkdownRenderer())
        assert modifiers[0].description == "Uses <em>emphasis</em>"

    def test_class_name(self) -> None:
        """Test conversion of modifier names to class attribute values."""
        assert Modifier(name=".btn.is-big").class_name == "btn is-big"
        assert Modifier(name=":hover").class_name == "pseudo-class-hover"
        assert Modifier(name=".btn:focus").class_name == "btn pseudo-class-focus"
