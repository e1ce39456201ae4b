"""
brackets/types.py — typy danych indeksu par nawiasów.

Position        — pozycja znaku w dokumencie (linia, kolumna; obie 1-based)
DelimiterKind   — rodzaj nawiasu: (), [], {}, <>
StructuralToken — nawias nie zamaskowany przez string ani komentarz
BracketPair     — dopasowana para open/close wraz z głębokością zagnieżdżenia
MatchReport     — pary + lista problemów (niedopasowane otwarcia/zamknięcia)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeAlias

# ---------------------------------------------------------------------------
# Stałe leksykalne (założenie: rodzina C)
# ---------------------------------------------------------------------------

OPEN_TO_CLOSE: dict[str, str] = {
    "(": ")",
    "[": "]",
    "{": "}",
    "<": ">",
}
CLOSE_TO_OPEN: dict[str, str] = {c: o for o, c in OPEN_TO_CLOSE.items()}

OPEN_CHARS:  frozenset[str] = frozenset(OPEN_TO_CLOSE)
CLOSE_CHARS: frozenset[str] = frozenset(CLOSE_TO_OPEN)

QUOTE_CHARS:  tuple[str, ...] = ('"', "'", "`")
LINE_COMMENT: str = "//"
ESCAPE_CHAR:  str = "\\"


# ---------------------------------------------------------------------------
# Pozycja
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Pozycja znaku: linia i kolumna, obie liczone od 1. Porządek = kolejność czytania."""
    line:   int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


# ---------------------------------------------------------------------------
# Rodzaje nawiasów
# ---------------------------------------------------------------------------

class DelimiterKind(StrEnum):
    """Cztery rodziny nawiasów. Wartość = znak otwierający + zamykający."""
    PAREN   = "()"
    BRACKET = "[]"
    BRACE   = "{}"
    ANGLE   = "<>"

    @property
    def open_char(self) -> str:
        return self.value[0]

    @property
    def close_char(self) -> str:
        return self.value[1]

    @classmethod
    def of(cls, char: str) -> DelimiterKind:
        """Zwraca rodzaj dla znaku otwierającego lub zamykającego."""
        for kind in cls:
            if char in kind.value:
                return kind
        raise ValueError(f"Znak {char!r} nie jest nawiasem")


class Role(StrEnum):
    OPEN  = "open"
    CLOSE = "close"


class MatchPolicy(StrEnum):
    """
    Polityka dopasowania zamknięć.

    - LENIENT: zamknięcie zawsze zdejmuje wierzchołek stosu (best-effort,
               `(` może zostać zamknięty przez `]`)
    - STRICT:  zamknięcie zdejmuje wierzchołek, ale paruje go tylko gdy rodzaj
               się zgadza; inaczej oba nawiasy zostają niedopasowane
    """
    LENIENT = "lenient"
    STRICT  = "strict"


# ---------------------------------------------------------------------------
# Tokeny i pary
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StructuralToken:
    """Nawias poza stringiem i komentarzem, wyemitowany przez skaner."""
    position: Position
    char:     str
    role:     Role

    @property
    def kind(self) -> DelimiterKind:
        return DelimiterKind.of(self.char)


@dataclass(frozen=True, slots=True)
class BracketEnd:
    """Jeden koniec pary: pozycja + dosłowny znak."""
    position: Position
    char:     str

    def to_dict(self) -> dict[str, Any]:
        return {
            "line":   self.position.line,
            "column": self.position.column,
            "char":   self.char,
        }


@dataclass(frozen=True, slots=True)
class BracketPair:
    """
    Dopasowana para nawiasów.

    - open:  otwarcie (zawsze przed close w kolejności czytania)
    - close: zamknięcie
    - depth: liczba wciąż otwartych nawiasów w chwili położenia open na stos
             (0 = para najwyższego poziomu)
    """
    open:  BracketEnd
    close: BracketEnd
    depth: int

    @property
    def is_kind_consistent(self) -> bool:
        """True gdy otwarcie i zamknięcie należą do tej samej rodziny."""
        return OPEN_TO_CLOSE.get(self.open.char) == self.close.char

    def touches(self, position: Position) -> bool:
        """Czy któryś z końców pary leży dokładnie na danej pozycji?"""
        return self.open.position == position or self.close.position == position

    def to_dict(self) -> dict[str, Any]:
        return {
            "open":  self.open.to_dict(),
            "close": self.close.to_dict(),
            "depth": self.depth,
        }


# ---------------------------------------------------------------------------
# Stan wewnętrzny skanera i matchera
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class ScanState:
    """
    Stan skanera przenoszony między liniami.

    Stan stringu NIE jest zerowany na końcu linii (stringi wieloliniowe);
    komentarz `//` obowiązuje tylko do końca bieżącej linii i nie ma tu pola.
    """
    inside_string: bool = False
    string_char:   str | None = None


@dataclass(frozen=True, slots=True)
class OpenStackEntry:
    position:      Position
    char:          str
    depth_at_push: int


# ---------------------------------------------------------------------------
# Raport dopasowania
# ---------------------------------------------------------------------------

class IssueCode(StrEnum):
    """Kody problemów wykrytych przez matcher. Żaden nie jest wyjątkiem."""
    UNMATCHED_OPEN  = "E_UNMATCHED_OPEN"
    UNMATCHED_CLOSE = "E_UNMATCHED_CLOSE"
    KIND_MISMATCH   = "W_KIND_MISMATCH"


@dataclass(frozen=True, slots=True)
class MatchIssue:
    """
    Pojedynczy problem dopasowania.

    - code:     IssueCode
    - position: pozycja nawiasu, którego dotyczy problem
    - char:     dosłowny znak nawiasu
    - message:  czytelny opis
    """
    code:     IssueCode
    position: Position
    char:     str
    message:  str

    def to_dict(self) -> dict[str, Any]:
        return {
            "code":    str(self.code),
            "line":    self.position.line,
            "column":  self.position.column,
            "char":    self.char,
            "message": self.message,
        }


@dataclass(frozen=True, slots=True)
class MatchReport:
    """
    Wynik przebiegu matchera.

    - pairs:  pary w kolejności dokumentu (wg pozycji otwarcia)
    - issues: niedopasowane otwarcia/zamknięcia i pary mieszanych rodzajów
    """
    pairs:  tuple[BracketPair, ...] = ()
    issues: tuple[MatchIssue, ...] = ()

    @property
    def is_balanced(self) -> bool:
        return not self.issues

    @property
    def unmatched_open(self) -> list[MatchIssue]:
        return [i for i in self.issues if i.code is IssueCode.UNMATCHED_OPEN]

    @property
    def unmatched_close(self) -> list[MatchIssue]:
        return [i for i in self.issues if i.code is IssueCode.UNMATCHED_CLOSE]

    @property
    def kind_mismatches(self) -> list[MatchIssue]:
        return [i for i in self.issues if i.code is IssueCode.KIND_MISMATCH]


# Dokument jako uporządkowana lista linii (bez znaków "\n").
DocumentLines: TypeAlias = list[str]
