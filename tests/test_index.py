"""Tests for BracketIndex and document input handling."""

from __future__ import annotations

import dataclasses
import pathlib

import pytest

from brackets import (
    BracketIndex,
    MalformedInputError,
    MatchPolicy,
    Position,
    read_document,
    split_document,
)

SOURCE = """\
function f(a: Array<number>) {
  const s = "({[";   // (
  return g(a[0], [1]);
}
"""


def test_rescan_is_idempotent() -> None:
    """Two scans of identical text give identical pair sets."""
    first = BracketIndex.build(SOURCE)
    second = BracketIndex.build(SOURCE)
    assert first.pairs == second.pairs
    assert first.report.issues == second.report.issues


def test_index_exposes_pairs_and_lookup() -> None:
    """The index answers cursor queries and iterates its pairs."""
    index = BracketIndex.build(SOURCE)
    assert len(index) == len(list(index)) == 6
    assert index.report.is_balanced
    assert index.line_count == 5
    assert index.policy is MatchPolicy.LENIENT

    outer = index.pair_at(1, 30)
    assert outer is not None
    assert outer.close.position == Position(4, 1)
    assert outer.depth == 0
    assert index.color_index(outer) == 0

    assert [p.open.char for p in index.pairs_on_line(2)] == []


def test_index_from_file(tmp_path: pathlib.Path) -> None:
    """from_file decodes the file and builds the same index as build()."""
    path = tmp_path / "f.ts"
    path.write_text(SOURCE, encoding="utf-8")
    assert BracketIndex.from_file(path).pairs == BracketIndex.build(SOURCE).pairs


def test_index_accepts_bytes_and_line_sequences() -> None:
    """bytes and lists of lines are valid document inputs."""
    from_bytes = BracketIndex.build(SOURCE.encode("utf-8"))
    from_lines = BracketIndex.build(SOURCE.split("\n"))
    assert from_bytes.pairs == from_lines.pairs == BracketIndex.build(SOURCE).pairs


def test_strict_policy_is_carried_by_index() -> None:
    """The policy argument reaches the matcher."""
    index = BracketIndex.build("(]", policy="strict")
    assert index.policy is MatchPolicy.STRICT
    assert len(index) == 0
    assert len(index.report.issues) == 2


def test_report_is_shared_read_only() -> None:
    """The index hands out its report without letting callers change it."""
    index = BracketIndex.build("{(]}", policy="strict")
    assert index.report.pairs == index.pairs
    with pytest.raises(dataclasses.FrozenInstanceError):
        index.report.issues = ()  # type: ignore[misc]
    assert len(index.report.issues) == 2


def test_split_document_keeps_carriage_return() -> None:
    """CRLF input keeps \\r in the line so columns stay raw."""
    assert split_document("a(\r\n)") == ["a(\r", ")"]
    index = BracketIndex.build("a(\r\n)")
    assert index.pair_at(2, 1) is index.pair_at(1, 2)


def test_undecodable_bytes_raise_malformed_input(tmp_path: pathlib.Path) -> None:
    """Invalid UTF-8 is the one failure surfaced to the caller."""
    with pytest.raises(MalformedInputError):
        split_document(b"\xff\xfe(")

    path = tmp_path / "bad.ts"
    path.write_bytes(b"(\xff)")
    with pytest.raises(MalformedInputError):
        read_document(path)


def test_non_text_input_raises_malformed_input() -> None:
    """Non-text documents and non-text lines are rejected."""
    with pytest.raises(MalformedInputError):
        split_document(42)  # type: ignore[arg-type]
    with pytest.raises(MalformedInputError):
        split_document(["ok", 3])  # type: ignore[list-item]


def test_malformed_input_is_a_value_error() -> None:
    """Callers catching ValueError also catch malformed input."""
    assert issubclass(MalformedInputError, ValueError)


def test_unknown_encoding_raises_malformed_input() -> None:
    """An unknown codec name is reported as malformed input."""
    with pytest.raises(MalformedInputError):
        split_document(b"()", encoding="no-such-codec")
