"""Tests for stgseries.series.parser module."""

import pytest

from stgseries.series import (
    ParseError,
    ParseErrorKind,
    PatchRecord,
    PatchState,
    parse_patch_line,
    parse_series,
)


class TestParsePatchLine:
    """Tests for parse_patch_line function."""

    def test_applied_patch(self):
        """Test a plain applied patch line."""
        record = parse_patch_line(" +patch-a # add foo")

        assert record.name == "patch-a"
        assert record.state == PatchState.APPLIED
        assert record.is_empty is False
        assert record.is_marked is False
        assert record.description == "add foo"

    def test_empty_current_patch(self):
        """Test a current patch with the empty flag set."""
        record = parse_patch_line("*>current-fix # fix the thing")

        assert record.name == "current-fix"
        assert record.state == PatchState.CURRENT
        assert record.is_empty is True
        assert record.empty_flag == "*"
        assert record.description == "fix the thing"

    def test_stg_prefix_layout(self):
        """Test the layout stg prints: flags, space, padded name."""
        record = parse_patch_line("0- docs          # Document the CLI")

        assert record.name == "docs"
        assert record.state == PatchState.UNAPPLIED
        assert record.is_empty is True
        assert record.description == "Document the CLI"

    @pytest.mark.parametrize(
        "flag,state",
        [
            (">", PatchState.CURRENT),
            ("+", PatchState.APPLIED),
            ("-", PatchState.UNAPPLIED),
            ("!", PatchState.HIDDEN),
        ],
    )
    def test_state_flags(self, flag, state):
        """Test every state flag maps to its state."""
        record = parse_patch_line(f" {flag} p # d")
        assert record.state == state

    def test_unknown_state_flag(self):
        """Test that an unknown state flag is a hard error."""
        with pytest.raises(ParseError) as exc_info:
            parse_patch_line("?X bogus # x")

        assert exc_info.value.kind == ParseErrorKind.UNKNOWN_STATE
        assert exc_info.value.flag == "X"
        assert "Unknown stgit patch state" in str(exc_info.value)

    def test_missing_empty_column_reads_name_as_state(self):
        """Test that a line without the empty column shifts into the state flag."""
        with pytest.raises(ParseError) as exc_info:
            parse_patch_line("+patch-a # no empty column")

        assert exc_info.value.kind == ParseErrorKind.UNKNOWN_STATE
        assert exc_info.value.flag == "p"

    def test_name_directly_after_state_flag(self):
        """Test that the space between state flag and name is optional."""
        glued = parse_patch_line(" +patch-a # add foo")
        spaced = parse_patch_line(" + patch-a # add foo")

        assert glued == spaced
        assert glued.name == "patch-a"

    def test_only_one_separator_space(self):
        """Test that two spaces before the name are not a valid layout."""
        with pytest.raises(ParseError) as exc_info:
            parse_patch_line(" +  patch-a # add foo")

        assert exc_info.value.kind == ParseErrorKind.MALFORMED_LINE

    @pytest.mark.parametrize(
        "line",
        [
            " + patch-a without separator",
            " + # missing name",
            " +",
            "garbage",
        ],
    )
    def test_malformed_lines(self, line):
        """Test that lines not matching the format are rejected."""
        with pytest.raises(ParseError) as exc_info:
            parse_patch_line(line)

        assert exc_info.value.kind == ParseErrorKind.MALFORMED_LINE
        assert exc_info.value.line == line

    def test_empty_description(self):
        """Test a line that ends right after the separator."""
        record = parse_patch_line(" + no-message #")
        assert record.description == ""

    def test_description_keeps_hashes(self):
        """Test that the description is everything after the first separator."""
        record = parse_patch_line(" + p # fix #123 # again")
        assert record.description == "fix #123 # again"

    def test_is_deterministic(self):
        """Test that the same line always gives the same record."""
        line = " >fix # fix it"
        assert parse_patch_line(line) == parse_patch_line(line)


class TestParseSeries:
    """Tests for parse_series function."""

    def test_empty_input(self):
        """Test that empty text yields no records and no error."""
        assert list(parse_series("")) == []

    def test_preserves_order(self, sample_series_output, sample_patch_names):
        """Test that records come out in input order."""
        records = list(parse_series(sample_series_output))
        assert [r.name for r in records] == sample_patch_names

    def test_skips_blank_lines(self):
        """Test that blank lines are ignored."""
        text = "\n + a # one\n\n   \n - b # two\n"
        records = list(parse_series(text))
        assert [r.name for r in records] == ["a", "b"]

    def test_marks_matching_patch(self, sample_series_output):
        """Test that only the marked patch has is_marked set."""
        records = list(parse_series(sample_series_output, marked_patch="docs"))

        marked = [r.name for r in records if r.is_marked]
        assert marked == ["docs"]

    def test_marked_patch_example(self):
        """Test the marked current-empty example."""
        records = list(parse_series("*>current-fix # fix the thing", marked_patch="current-fix"))

        assert records == [
            PatchRecord(
                name="current-fix",
                state=PatchState.CURRENT,
                is_empty=True,
                is_marked=True,
                description="fix the thing",
                empty_flag="*",
            )
        ]

    def test_mark_depends_only_on_marked_patch(self):
        """Test that marking changes nothing but is_marked."""
        text = " + a # one"
        unmarked = next(parse_series(text))
        marked = next(parse_series(text, marked_patch="a"))

        assert marked.is_marked and not unmarked.is_marked
        assert marked.model_copy(update={"is_marked": False}) == unmarked

    def test_unknown_mark_marks_nothing(self, sample_series_output):
        """Test that a marked patch not in the series marks nothing."""
        records = list(parse_series(sample_series_output, marked_patch="gone"))
        assert not any(r.is_marked for r in records)

    def test_is_lazy(self):
        """Test that records before a bad line are produced before the error."""
        records = parse_series(" + a # one\nbroken line\n + b # two")

        assert next(records).name == "a"
        with pytest.raises(ParseError):
            next(records)

    def test_fails_on_first_error(self):
        """Test that a bad line aborts the whole listing."""
        with pytest.raises(ParseError) as exc_info:
            list(parse_series(" + a # one\n?X bogus # x\nbroken"))

        assert exc_info.value.kind == ParseErrorKind.UNKNOWN_STATE

    def test_multiple_current_not_rejected(self):
        """Test that several current patches are accepted as-is."""
        records = list(parse_series(" > a # one\n > b # two"))
        assert [r.state for r in records] == [PatchState.CURRENT, PatchState.CURRENT]

    def test_duplicate_names_not_rejected(self):
        """Test that duplicate names are accepted as-is."""
        records = list(parse_series(" + a # one\n - a # two"))
        assert [r.name for r in records] == ["a", "a"]
