"""
brackets/scanner.py — skaner leksykalny: strumień nawiasów strukturalnych.

Reguły (linia po linii, od lewej do prawej):
  - poza stringiem: cudzysłów (", ', `) bez '\\' bezpośrednio przed nim
    otwiera string i zapamiętuje znak otwierający
  - w stringu: ten sam cudzysłów bez '\\' przed nim zamyka string;
    pozostałe znaki (także inne cudzysłowy) są obojętne
  - poza stringiem: "//" kończy skanowanie bieżącej linii (tylko tej linii)
  - poza stringiem i komentarzem: ([{< → OPEN, )]}> → CLOSE

Ograniczenia:
  - Escape wykrywany wyłącznie po jednym znaku wstecz w tej samej linii,
    więc "a\\\\" (escapowany backslash + prawdziwy cudzysłów) NIE zamyka stringu.
  - Stan stringu przechodzi na kolejną linię; komentarz nie.
  - Komentarze blokowe /* ... */ nie są rozpoznawane.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from .document import split_document
from .types import (
    CLOSE_CHARS,
    ESCAPE_CHAR,
    LINE_COMMENT,
    OPEN_CHARS,
    QUOTE_CHARS,
    Position,
    Role,
    ScanState,
    StructuralToken,
)

log = logging.getLogger(__name__)


def iter_tokens_in_line(
    line: str,
    line_no: int,
    state: ScanState,
) -> Iterator[StructuralToken]:
    """
    Skanuje jedną linię, aktualizując `state` w miejscu.

    line_no: numer linii (1-based), trafia do pozycji tokenów.
    """
    length = len(line)
    for col in range(length):
        char = line[col]
        escaped = col > 0 and line[col - 1] == ESCAPE_CHAR

        if char in QUOTE_CHARS and not escaped:
            if not state.inside_string:
                state.inside_string = True
                state.string_char = char
                continue
            if char == state.string_char:
                state.inside_string = False
                state.string_char = None
                continue

        if state.inside_string:
            continue

        if line.startswith(LINE_COMMENT, col):
            return

        if char in OPEN_CHARS:
            yield StructuralToken(Position(line_no, col + 1), char, Role.OPEN)
        elif char in CLOSE_CHARS:
            yield StructuralToken(Position(line_no, col + 1), char, Role.CLOSE)


def scan(document: str | bytes | Sequence[str]) -> Iterator[StructuralToken]:
    """
    Leniwy strumień tokenów strukturalnych całego dokumentu.

    Każde wywołanie ma własny ScanState — brak stanu między wywołaniami.
    """
    lines = split_document(document)
    state = ScanState()
    for line_no, line in enumerate(lines, start=1):
        yield from iter_tokens_in_line(line, line_no, state)

    if state.inside_string:
        log.debug(
            "Koniec dokumentu wewnątrz stringu (otwarty znakiem %r)",
            state.string_char,
        )
