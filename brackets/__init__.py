"""
brackets — indeks par nawiasów ("rainbow brackets") dla dekoracji edytora.

Interfejs publiczny:
    scan(document)                       → strumień StructuralToken
    match(tokens, policy)                → list[BracketPair]
    match_report(tokens, policy)         → MatchReport (pary + problemy)
    find_pair_at_cursor(pairs, l, c)     → BracketPair | None
    color_index_for_depth(depth)         → int w [0, PALETTE_SIZE)
    BracketIndex                         — fasada: build / from_file / pair_at
    split_document, read_document        — wejście (MalformedInputError)

Typowe użycie:
    from brackets import BracketIndex

    index = BracketIndex.build(text)
    pair  = index.pair_at(cursor_line, cursor_column)
    for p in index:
        print(p.open.position, p.close.position, p.depth)
"""

from .types import (
    BracketEnd,
    BracketPair,
    DelimiterKind,
    IssueCode,
    MatchIssue,
    MatchPolicy,
    MatchReport,
    Position,
    Role,
    StructuralToken,
)
from .document import MalformedInputError, read_document, split_document
from .scanner import scan
from .matcher import match, match_report
from .query import (
    PALETTE_SIZE,
    color_index_for_depth,
    find_pair_at_cursor,
    max_depth,
    pairs_on_line,
)
from .index import BracketIndex

__all__ = [
    # types
    "BracketEnd",
    "BracketPair",
    "DelimiterKind",
    "IssueCode",
    "MatchIssue",
    "MatchPolicy",
    "MatchReport",
    "Position",
    "Role",
    "StructuralToken",
    # document
    "MalformedInputError",
    "read_document",
    "split_document",
    # scanner / matcher
    "scan",
    "match",
    "match_report",
    # query
    "PALETTE_SIZE",
    "color_index_for_depth",
    "find_pair_at_cursor",
    "max_depth",
    "pairs_on_line",
    # index
    "BracketIndex",
]
