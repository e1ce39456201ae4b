"""
brackets/index.py — BracketIndex: wynik jednego przebiegu skan + dopasowanie.

Indeks jest niemutowalny. Po każdej zmianie treści wywołujący buduje nowy
indeks i podmienia stary w całości; poprzedni wynik nigdy nie jest
modyfikowany w miejscu.
"""

from __future__ import annotations

import logging
import pathlib
from collections.abc import Iterator, Sequence

from .document import DEFAULT_ENCODING, read_document, split_document
from .matcher import match_report
from .query import (
    PALETTE_SIZE,
    color_index_for_depth,
    find_pair_at_cursor,
    pairs_on_line,
)
from .scanner import scan
from .types import BracketPair, MatchPolicy, MatchReport

log = logging.getLogger(__name__)


class BracketIndex:
    """
    Indeks par nawiasów jednego stanu dokumentu.

    Użycie:
        index = BracketIndex.build(text)
        pair  = index.pair_at(cursor_line, cursor_column)
        if pair is not None:
            color = palette[index.color_index(pair)]
    """

    __slots__ = ("_pairs", "_report", "_line_count", "_policy")

    def __init__(
        self,
        report: MatchReport,
        line_count: int,
        policy: MatchPolicy,
    ) -> None:
        self._pairs: tuple[BracketPair, ...] = report.pairs
        self._report = report
        self._line_count = line_count
        self._policy = policy

    # ------------------------------------------------------------------
    # Konstruktory fabryczne
    # ------------------------------------------------------------------

    @classmethod
    def build(
        cls,
        document: str | bytes | Sequence[str],
        policy: MatchPolicy = MatchPolicy.LENIENT,
    ) -> BracketIndex:
        """Skanuje i dopasowuje cały dokument."""
        lines = split_document(document)
        policy = MatchPolicy(policy)
        report = match_report(scan(lines), policy)
        log.debug(
            "Indeks: %d linii, %d par, %d problemów",
            len(lines), len(report.pairs), len(report.issues),
        )
        return cls(report, len(lines), policy)

    @classmethod
    def from_file(
        cls,
        path: str | pathlib.Path,
        encoding: str = DEFAULT_ENCODING,
        policy: MatchPolicy = MatchPolicy.LENIENT,
    ) -> BracketIndex:
        return cls.build(read_document(path, encoding=encoding), policy)

    # ------------------------------------------------------------------
    # Dostęp
    # ------------------------------------------------------------------

    @property
    def pairs(self) -> tuple[BracketPair, ...]:
        return self._pairs

    @property
    def report(self) -> MatchReport:
        return self._report

    @property
    def line_count(self) -> int:
        return self._line_count

    @property
    def policy(self) -> MatchPolicy:
        return self._policy

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[BracketPair]:
        return iter(self._pairs)

    # ------------------------------------------------------------------
    # Zapytania
    # ------------------------------------------------------------------

    def pair_at(self, line: int, column: int) -> BracketPair | None:
        """Aktywna para dla kursora (dokładne trafienie w nawias) albo None."""
        return find_pair_at_cursor(self._pairs, line, column)

    def pairs_on_line(self, line: int) -> list[BracketPair]:
        return pairs_on_line(self._pairs, line)

    def color_index(self, pair: BracketPair, palette_size: int = PALETTE_SIZE) -> int:
        return color_index_for_depth(pair.depth, palette_size)
