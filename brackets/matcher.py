"""
brackets/matcher.py — dopasowanie par nawiasów na stosie.

match(tokens, policy)        → list[BracketPair]
match_report(tokens, policy) → MatchReport (pary + problemy)

Algorytm:
  - OPEN:  push {pozycja, znak, głębokość = liczba wpisów na stosie}
  - CLOSE: pusty stos → zamknięcie odrzucone (E_UNMATCHED_CLOSE)
           LENIENT → pop wierzchołka i para, nawet dla różnych rodzajów
                     (dodatkowo W_KIND_MISMATCH)
           STRICT  → pop wierzchołka; para tylko dla pasującego rodzaju,
                     inaczej oba nawiasy niedopasowane (E_UNMATCHED_OPEN
                     + E_UNMATCHED_CLOSE)
  - koniec wejścia: pozostałe wpisy → E_UNMATCHED_OPEN, bez pary

Niedopasowania to normalny stan edytowanego kodu, nie wyjątek.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .types import (
    OPEN_TO_CLOSE,
    BracketEnd,
    BracketPair,
    IssueCode,
    MatchIssue,
    MatchPolicy,
    MatchReport,
    OpenStackEntry,
    Role,
    StructuralToken,
)

log = logging.getLogger(__name__)


def _pair_from(entry: OpenStackEntry, token: StructuralToken) -> BracketPair:
    return BracketPair(
        open=BracketEnd(entry.position, entry.char),
        close=BracketEnd(token.position, token.char),
        depth=entry.depth_at_push,
    )


def match_report(
    tokens: Iterable[StructuralToken],
    policy: MatchPolicy = MatchPolicy.LENIENT,
) -> MatchReport:
    """
    Dopasowuje tokeny i zwraca MatchReport.

    Pary są posortowane wg pozycji otwarcia (kolejność dokumentu).
    """
    policy = MatchPolicy(policy)
    stack:  list[OpenStackEntry] = []
    pairs:  list[BracketPair] = []
    issues: list[MatchIssue] = []

    for token in tokens:
        if token.role is Role.OPEN:
            stack.append(OpenStackEntry(token.position, token.char, len(stack)))
            continue

        if not stack:
            issues.append(MatchIssue(
                code=IssueCode.UNMATCHED_CLOSE,
                position=token.position,
                char=token.char,
                message=f"Zamknięcie {token.char!r} bez otwarcia",
            ))
            continue

        top = stack.pop()
        kind_ok = OPEN_TO_CLOSE[top.char] == token.char

        # STRICT: otwarcie i zamknięcie złego rodzaju przepadają oba
        if not kind_ok and policy is MatchPolicy.STRICT:
            issues.append(MatchIssue(
                code=IssueCode.UNMATCHED_OPEN,
                position=top.position,
                char=top.char,
                message=(
                    f"Otwarcie {top.char!r} zamknięte przez {token.char!r} "
                    f"z {token.position}"
                ),
            ))
            issues.append(MatchIssue(
                code=IssueCode.UNMATCHED_CLOSE,
                position=token.position,
                char=token.char,
                message=(
                    f"Zamknięcie {token.char!r} nie pasuje do otwarcia "
                    f"{top.char!r} z {top.position}"
                ),
            ))
            continue

        pairs.append(_pair_from(top, token))
        if not kind_ok:
            issues.append(MatchIssue(
                code=IssueCode.KIND_MISMATCH,
                position=token.position,
                char=token.char,
                message=(
                    f"Para mieszanych rodzajów: {top.char!r} z {top.position} "
                    f"zamknięte przez {token.char!r}"
                ),
            ))

    for entry in stack:
        issues.append(MatchIssue(
            code=IssueCode.UNMATCHED_OPEN,
            position=entry.position,
            char=entry.char,
            message=f"Otwarcie {entry.char!r} bez zamknięcia",
        ))

    pairs.sort(key=lambda p: p.open.position)
    issues.sort(key=lambda i: i.position)

    log.debug(
        "Dopasowanie (%s): %d par, %d problemów",
        policy, len(pairs), len(issues),
    )
    return MatchReport(pairs=tuple(pairs), issues=tuple(issues))


def match(
    tokens: Iterable[StructuralToken],
    policy: MatchPolicy = MatchPolicy.LENIENT,
) -> list[BracketPair]:
    """Zwraca wyłącznie pary (bez raportu problemów)."""
    return list(match_report(tokens, policy).pairs)
