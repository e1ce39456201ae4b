"""Tests for the lexical scanner (string and line-comment masking)."""

from __future__ import annotations

import types

from brackets import Position, Role, match, scan
from brackets.scanner import iter_tokens_in_line
from brackets.types import ScanState


def _positions(document) -> list[tuple[int, int]]:
    return [(t.position.line, t.position.column) for t in scan(document)]


def test_scan_is_lazy() -> None:
    """scan() returns a generator rather than a materialized list."""
    assert isinstance(scan("()"), types.GeneratorType)


def test_roles_and_columns_are_one_based() -> None:
    """Open and close delimiters carry 1-based positions and their role."""
    tokens = list(scan("a<b>"))
    assert [(t.char, t.role) for t in tokens] == [("<", Role.OPEN), (">", Role.CLOSE)]
    assert tokens[0].position == Position(1, 2)
    assert tokens[1].position == Position(1, 4)


def test_string_masks_delimiters() -> None:
    """Delimiters inside a quoted string produce no tokens."""
    assert list(scan('"([{""')) == []


def test_skipped_string_still_advances_columns() -> None:
    """Columns after a string count the raw characters inside it."""
    assert _positions('"(" ()') == [(1, 5), (1, 6)]


def test_line_comment_masks_rest_of_line() -> None:
    """Only foo() is tokenized; the trailing comment is ignored."""
    pairs = match(scan("foo() // bar(baz)"))
    assert len(pairs) == 1
    assert pairs[0].open.position == Position(1, 4)
    assert pairs[0].close.position == Position(1, 5)


def test_line_comment_does_not_carry_to_next_line() -> None:
    """A // comment ends at the newline."""
    assert _positions("a // (\n()") == [(2, 1), (2, 2)]


def test_comment_marker_inside_string_is_inert() -> None:
    """// inside a string does not start a comment."""
    assert _positions('"http://x" (a)') == [(1, 12), (1, 14)]


def test_other_quote_kind_inside_string_is_inert() -> None:
    """An apostrophe inside a double-quoted string neither opens nor closes it."""
    assert _positions("\"it's (x)\" ()") == [(1, 12), (1, 13)]


def test_escaped_quote_does_not_close_string() -> None:
    """A quote preceded by a backslash stays inside the string."""
    assert _positions('"a\\"b" ()') == [(1, 8), (1, 9)]


def test_escaped_backslash_before_quote_keeps_string_open() -> None:
    """One-character lookbehind treats the quote in "a\\\\" as escaped."""
    lines = [r'"a\\" (b)', r'" ()']
    assert _positions(lines) == [(2, 3), (2, 4)]


def test_string_state_carries_across_lines() -> None:
    """An unterminated string masks delimiters on the following line."""
    text = 'x = "abc\n(still string)"\n()'
    assert _positions(text) == [(3, 1), (3, 2)]


def test_iter_tokens_in_line_updates_state() -> None:
    """The per-line step leaves the string state for the next line."""
    state = ScanState()
    tokens = list(iter_tokens_in_line("f('(", 1, state))
    assert [(t.char, t.position) for t in tokens] == [("(", Position(1, 2))]
    assert state.inside_string is True
    assert state.string_char == "'"

    tokens = list(iter_tokens_in_line("')", 2, state))
    assert [(t.char, t.position) for t in tokens] == [(")", Position(2, 2))]
    assert state.inside_string is False
