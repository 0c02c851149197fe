"""Tests for bracket grouping of raw tokens."""

from __future__ import annotations

import pytest

from pageres.args.grouper import _split_brackets, group_tokens
from pageres.errors import MalformedGroupingError


# ---------------------------------------------------------------------------
# _split_brackets
# ---------------------------------------------------------------------------

class TestSplitBrackets:
    def test_plain_token_untouched(self) -> None:
        assert _split_brackets("yeoman.io") == ["yeoman.io"]

    def test_standalone_brackets(self) -> None:
        assert _split_brackets("[") == ["["]
        assert _split_brackets("]") == ["]"]

    def test_glued_open(self) -> None:
        assert _split_brackets("[yeoman.io") == ["[", "yeoman.io"]

    def test_glued_close(self) -> None:
        assert _split_brackets("1600x900]") == ["1600x900", "]"]

    def test_glued_both_sides(self) -> None:
        assert _split_brackets("[todomvc.com]") == ["[", "todomvc.com", "]"]

    def test_empty_pair(self) -> None:
        assert _split_brackets("[]") == ["[", "]"]


# ---------------------------------------------------------------------------
# group_tokens
# ---------------------------------------------------------------------------

class TestGroupTokens:
    def test_flat_input_is_one_implicit_group(self) -> None:
        tokens = ["todomvc.com", "yeoman.io", "1366x768", "1600x900"]
        groups = group_tokens(tokens)
        assert len(groups) == 1
        assert groups[0].tokens == tokens
        assert groups[0].explicit is False

    def test_empty_input_has_no_groups(self) -> None:
        assert group_tokens([]) == []

    def test_explicit_groups_keep_order(self) -> None:
        tokens = [
            "[", "yeoman.io", "1366x768", "1600x900", "]",
            "[", "todomvc.com", "1024x768", "480x320", "]",
        ]
        groups = group_tokens(tokens)
        assert [g.tokens for g in groups] == [
            ["yeoman.io", "1366x768", "1600x900"],
            ["todomvc.com", "1024x768", "480x320"],
        ]
        assert all(g.explicit for g in groups)

    def test_glued_brackets_group_like_standalone(self) -> None:
        groups = group_tokens(["[yeoman.io", "1366x768]", "[todomvc.com]"])
        assert [g.tokens for g in groups] == [["yeoman.io", "1366x768"], ["todomvc.com"]]

    def test_loose_tokens_form_trailing_implicit_group(self) -> None:
        tokens = ["a.com", "[", "b.com", "1024x768", "]", "800x600", "iphone"]
        groups = group_tokens(tokens)
        assert [g.tokens for g in groups] == [["b.com", "1024x768"], ["a.com", "800x600", "iphone"]]
        assert [g.explicit for g in groups] == [True, False]

    def test_groups_partition_tokens(self) -> None:
        tokens = ["x.com", "[", "a.com", "1024x768", "]", "y.org", "[", "b.com", "]", "800x600"]
        groups = group_tokens(tokens)
        flat = sorted(t for g in groups for t in g.tokens)
        assert flat == sorted(t for t in tokens if t not in ("[", "]"))

    def test_empty_bracket_pair_is_empty_group(self) -> None:
        groups = group_tokens(["[", "]"])
        assert len(groups) == 1
        assert groups[0].tokens == []
        assert groups[0].explicit is True

    @pytest.mark.parametrize(
        "tokens",
        [
            ["[", "a.com"],
            ["a.com", "]"],
            ["[", "a.com", "]", "]"],
            ["[", "[", "a.com", "]", "]"],
            ["[a.com", "[b.com]"],
        ],
    )
    def test_malformed_grouping_raises(self, tokens: list[str]) -> None:
        with pytest.raises(MalformedGroupingError):
            group_tokens(tokens)
