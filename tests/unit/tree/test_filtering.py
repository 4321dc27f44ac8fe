"""Tests for glob-based name filtering."""

import pytest
from canopy.tree.filtering import PatternFilter, PatternSyntaxError, compile_pattern


class TestCompilePattern:
    """Tests for pattern validation and compilation."""

    @pytest.mark.parametrize("pattern", ["*.py", "?.txt", "[abc]*", "[!.]*", "[a-z]", "[]]", "**"])
    def test_valid_patterns_compile(self, pattern: str) -> None:
        """Well-formed globs compile without error."""
        compile_pattern(pattern)

    def test_unterminated_class_rejected(self) -> None:
        """An unclosed character class is a syntax error."""
        with pytest.raises(PatternSyntaxError, match="unterminated character class"):
            compile_pattern("file[0-9")

    def test_empty_class_rejected(self) -> None:
        """``[]`` never closes because a leading ``]`` is literal."""
        with pytest.raises(PatternSyntaxError):
            compile_pattern("[]")

    def test_reversed_range_rejected(self) -> None:
        """A range whose bounds are reversed is a syntax error."""
        with pytest.raises(PatternSyntaxError, match="invalid range"):
            compile_pattern("[z-a]")

    def test_recursive_wildcard_must_be_whole_component(self) -> None:
        """``**`` joined to other characters is rejected."""
        with pytest.raises(PatternSyntaxError, match="whole component"):
            compile_pattern("a**")

    def test_triple_star_rejected(self) -> None:
        """More than two consecutive stars are rejected."""
        with pytest.raises(PatternSyntaxError):
            compile_pattern("***")

    def test_error_carries_pattern_and_position(self) -> None:
        """PatternSyntaxError records the pattern text and position."""
        with pytest.raises(PatternSyntaxError) as exc_info:
            compile_pattern("ab[cd")

        assert exc_info.value.pattern == "ab[cd"
        assert exc_info.value.position == 2
        assert isinstance(exc_info.value, ValueError)

    def test_star_matches_leading_dot(self) -> None:
        """``*`` matches names starting with a dot."""
        assert compile_pattern("*").match(".hidden")


class TestPatternFilter:
    """Tests for PatternFilter.matches."""

    def test_empty_filter_accepts_everything(self) -> None:
        """With no patterns every name is accepted."""
        pattern_filter = PatternFilter()
        assert pattern_filter.matches("anything.txt")
        assert pattern_filter.matches(".hidden")

    def test_empty_include_accepts_names_not_excluded(self) -> None:
        """With only exclude patterns, non-excluded names are accepted."""
        pattern_filter = PatternFilter()
        pattern_filter.add_exclude("*.pyc")

        assert pattern_filter.matches("main.py")
        assert not pattern_filter.matches("main.pyc")

    def test_include_requires_a_match(self) -> None:
        """With include patterns, only matching names are accepted."""
        pattern_filter = PatternFilter()
        pattern_filter.add_include("*.py")
        pattern_filter.add_include("*.md")

        assert pattern_filter.matches("setup.py")
        assert pattern_filter.matches("README.md")
        assert not pattern_filter.matches("data.csv")

    @pytest.mark.parametrize("name", ["test_a.py", "test_b.py", "test_.py"])
    def test_exclude_wins_over_include(self, name: str) -> None:
        """A name matching both an include and an exclude is rejected."""
        pattern_filter = PatternFilter()
        pattern_filter.add_include("*.py")
        pattern_filter.add_exclude("test_*")

        assert not pattern_filter.matches(name)

    def test_case_sensitive_by_default(self) -> None:
        """Matching respects case unless ignore_case is set."""
        pattern_filter = PatternFilter()
        pattern_filter.add_include("*.TXT")

        assert pattern_filter.matches("NOTES.TXT")
        assert not pattern_filter.matches("notes.txt")

    def test_ignore_case_lowercases_patterns_and_names(self) -> None:
        """With ignore_case both pattern and name are lowercased."""
        pattern_filter = PatternFilter(ignore_case=True)
        pattern_filter.add_include("*.TXT")
        pattern_filter.add_exclude("SECRET*")

        assert pattern_filter.matches("notes.txt")
        assert pattern_filter.matches("NOTES.TXT")
        assert not pattern_filter.matches("secret.txt")
        assert pattern_filter.include_patterns == ("*.txt",)

    def test_invalid_pattern_raises_on_registration(self) -> None:
        """Malformed patterns fail when added, and are not registered."""
        pattern_filter = PatternFilter()

        with pytest.raises(PatternSyntaxError):
            pattern_filter.add_exclude("[oops")

        assert pattern_filter.exclude_patterns == ()

    def test_question_mark_matches_single_character(self) -> None:
        """``?`` matches exactly one character."""
        pattern_filter = PatternFilter()
        pattern_filter.add_include("?.txt")

        assert pattern_filter.matches("a.txt")
        assert not pattern_filter.matches("ab.txt")

    def test_negated_class(self) -> None:
        """``[!...]`` matches characters outside the class."""
        pattern_filter = PatternFilter()
        pattern_filter.add_include("[!a]*")

        assert pattern_filter.matches("beta")
        assert not pattern_filter.matches("alpha")
