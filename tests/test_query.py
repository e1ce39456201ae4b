"""Tests for cursor lookup and the depth-to-palette mapping."""

from __future__ import annotations

import pytest

from brackets import (
    PALETTE_SIZE,
    Position,
    color_index_for_depth,
    find_pair_at_cursor,
    match,
    max_depth,
    pairs_on_line,
    scan,
)


@pytest.fixture
def pairs():
    # line 2: "(" at column 5, ")" at column 9
    return match(scan("\n    (abc)\n{[]}"))


def test_cursor_on_open_or_close_finds_pair(pairs) -> None:
    """Both endpoints of a pair activate it."""
    on_open = find_pair_at_cursor(pairs, 2, 5)
    on_close = find_pair_at_cursor(pairs, 2, 9)
    assert on_open is not None
    assert on_open is on_close
    assert on_open.open.position == Position(2, 5)
    assert on_open.close.position == Position(2, 9)


def test_cursor_inside_span_finds_nothing(pairs) -> None:
    """No nearest-pair fallback: inside the span means no active pair."""
    assert find_pair_at_cursor(pairs, 2, 6) is None
    assert find_pair_at_cursor(pairs, 1, 1) is None


def test_cursor_on_nested_pair_returns_inner(pairs) -> None:
    """The cursor on [ selects the inner pair, not the enclosing braces."""
    pair = find_pair_at_cursor(pairs, 3, 2)
    assert pair is not None
    assert (pair.open.char, pair.close.char, pair.depth) == ("[", "]", 1)


def test_cursor_lookup_on_empty_set() -> None:
    """An empty pair set never has an active pair."""
    assert find_pair_at_cursor([], 1, 1) is None


@pytest.mark.parametrize("depth", range(0, 40))
def test_palette_index_is_periodic(depth: int) -> None:
    """Depth d and d + 8 share a colour, always within the palette."""
    assert PALETTE_SIZE == 8
    index = color_index_for_depth(depth)
    assert 0 <= index < PALETTE_SIZE
    assert index == color_index_for_depth(depth + PALETTE_SIZE)


def test_palette_index_custom_size() -> None:
    """A smaller palette wraps sooner."""
    assert color_index_for_depth(5, palette_size=3) == 2


def test_palette_index_rejects_bad_arguments() -> None:
    """Negative depths and empty palettes are invalid."""
    with pytest.raises(ValueError):
        color_index_for_depth(-1)
    with pytest.raises(ValueError):
        color_index_for_depth(0, palette_size=0)


def test_pairs_on_line_and_max_depth(pairs) -> None:
    """Helpers used by renderers: per-line pairs and deepest level."""
    assert [p.open.char for p in pairs_on_line(pairs, 3)] == ["{", "["]
    assert pairs_on_line(pairs, 1) == []
    assert max_depth(pairs) == 1
    assert max_depth([]) == -1
