"""Tests for the clean prompt's selection parsing and resolution."""

from sproutee.core.selection import (
    AllSelection,
    CancelSelection,
    CleanSelection,
    IndexSelection,
    parse_selection,
)


class TestParseSelection:

    def test_keywords(self):
        assert parse_selection("cancel") == CancelSelection()
        assert parse_selection("all") == AllSelection()
        assert parse_selection("clean") == CleanSelection()

    def test_surrounding_whitespace_is_trimmed(self):
        assert parse_selection("  all \n") == AllSelection()

    def test_keywords_are_case_sensitive(self):
        assert parse_selection("ALL") == IndexSelection(())

    def test_comma_separated_indices(self):
        assert parse_selection("1, 3 ,5") == IndexSelection((1, 3, 5))

    def test_invalid_tokens_are_dropped(self):
        assert parse_selection("1,abc,,2") == IndexSelection((1, 2))

    def test_duplicates_are_kept(self):
        assert parse_selection("2,2") == IndexSelection((2, 2))

    def test_empty_input(self):
        assert parse_selection("") == IndexSelection(())


class TestResolveSelection:

    def test_all_yields_every_index_ascending(self, sample_analyses):
        assert AllSelection().resolve(sample_analyses) == [1, 2, 3]

    def test_clean_yields_only_clean_worktrees(self, sample_analyses):
        assert CleanSelection().resolve(sample_analyses) == [1, 3]

    def test_clean_with_no_clean_worktrees_is_empty(self, sample_analyses):
        assert CleanSelection().resolve([sample_analyses[1]]) == []

    def test_out_of_range_indices_are_dropped(self, sample_analyses):
        two = sample_analyses[:2]
        assert parse_selection("1,99,2").resolve(two) == [1, 2]

    def test_zero_and_negative_are_out_of_range(self, sample_analyses):
        assert parse_selection("0,-1,3").resolve(sample_analyses) == [3]

    def test_selection_order_is_preserved(self, sample_analyses):
        assert parse_selection("3,1").resolve(sample_analyses) == [3, 1]

    def test_cancel_resolves_to_nothing(self, sample_analyses):
        assert CancelSelection().resolve(sample_analyses) == []
