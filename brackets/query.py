"""
brackets/query.py — zapytania punktowe na zbiorze par.

find_pair_at_cursor(pairs, line, column) → para zakotwiczona dokładnie
    na kursorze (otwarcie lub zamknięcie) albo None. Bez szukania
    "najbliższej" pary — kursor wewnątrz zakresu to brak aktywnej pary.
color_index_for_depth(depth) → depth mod PALETTE_SIZE
"""

from __future__ import annotations

from collections.abc import Iterable

from .types import BracketPair, Position

PALETTE_SIZE = 8


def find_pair_at_cursor(
    pairs: Iterable[BracketPair],
    line: int,
    column: int,
) -> BracketPair | None:
    """Pierwsza para (kolejność dokumentu), której koniec leży na (line, column)."""
    cursor = Position(line, column)
    hits = [p for p in pairs if p.touches(cursor)]
    if not hits:
        return None
    return min(hits, key=lambda p: p.open.position)


def color_index_for_depth(depth: int, palette_size: int = PALETTE_SIZE) -> int:
    """
    Indeks koloru w palecie dla danej głębokości.

    Raises:
        ValueError dla ujemnej głębokości lub niedodatniego rozmiaru palety.
    """
    if depth < 0:
        raise ValueError(f"Głębokość nie może być ujemna: {depth}")
    if palette_size <= 0:
        raise ValueError(f"Rozmiar palety musi być dodatni: {palette_size}")
    return depth % palette_size


def pairs_on_line(pairs: Iterable[BracketPair], line: int) -> list[BracketPair]:
    """Pary, których otwarcie lub zamknięcie leży w danej linii."""
    return [
        p for p in pairs
        if p.open.position.line == line or p.close.position.line == line
    ]


def max_depth(pairs: Iterable[BracketPair]) -> int:
    """Największa głębokość w zbiorze; -1 gdy zbiór jest pusty."""
    return max((p.depth for p in pairs), default=-1)
