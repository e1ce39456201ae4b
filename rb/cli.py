"""
rb — narzędzie CLI indeksu par nawiasów ("rainbow brackets").

Użycie:
  rb [-v] <komenda> [opcje]

Komendy:
  scan      Listuje dopasowane pary nawiasów z głębokością i indeksem koloru.
  pair-at   Zwraca parę zakotwiczoną na pozycji kursora (LINIA KOLUMNA).
  check     Raportuje niedopasowane i mieszane nawiasy (kod wyjścia 1 przy błędach).
  show      Wyświetla plik z nawiasami pokolorowanymi wg głębokości.

Konfiguracja: zmienne RB_MATCH_POLICY, RB_ENCODING, RB_PALETTE (patrz rb/_config.py).
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.logging import RichHandler

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from rb.commands import scan as cmd_scan
from rb.commands import pair_at as cmd_pair_at
from rb.commands import check as cmd_check
from rb.commands import show as cmd_show

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rb",
        description="Rainbow brackets — indeks par nawiasów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"rb {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Włącz logi diagnostyczne (DEBUG).",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_scan.add_parser(subparsers)
    cmd_pair_at.add_parser(subparsers)
    cmd_check.add_parser(subparsers)
    cmd_show.add_parser(subparsers)

    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
