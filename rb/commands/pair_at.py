"""Komenda: rb pair-at — aktywna para nawiasów dla pozycji kursora."""

from __future__ import annotations

import argparse
import json
import sys

from rich.console import Console
from rich.text import Text

from rb._load import (
    add_policy_argument,
    get_settings,
    load_index,
    positive_int,
    resolve_policy,
)

console = Console()


def run(args: argparse.Namespace) -> None:
    settings = get_settings(console)
    policy   = resolve_policy(args, settings)
    index    = load_index(args.file, policy, settings.encoding, console)

    pair = index.pair_at(args.line, args.column)

    if args.json_output:
        print(json.dumps(
            {"cursor": {"line": args.line, "column": args.column},
             "pair": pair.to_dict() if pair is not None else None},
            ensure_ascii=False,
            indent=2,
        ))
    elif pair is None:
        console.print(
            f"[yellow]Brak aktywnej pary[/yellow] na {args.line}:{args.column} "
            f"[dim](kursor musi stać na nawiasie)[/dim]"
        )
    else:
        color = settings.palette[index.color_index(pair, len(settings.palette))]
        line = Text()
        line.append(pair.open.char, style=f"bold {color}")
        line.append(f" {pair.open.position}  →  ")
        line.append(pair.close.char, style=f"bold {color}")
        line.append(f" {pair.close.position}  ")
        line.append(f"głębokość {pair.depth}", style="dim")
        console.print(line)

    if pair is None:
        sys.exit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "pair-at",
        help="Zwraca parę nawiasów zakotwiczoną na pozycji kursora.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Szuka pary, której otwarcie lub zamknięcie leży dokładnie na LINIA:KOLUMNA
(obie liczone od 1). Kursor wewnątrz zakresu pary nie wystarcza.
Kod wyjścia 1, gdy na tej pozycji nie ma nawiasu należącego do pary.

Przykłady:
  rb pair-at main.ts 2 5
  rb pair-at main.ts 2 5 --json-output
        """,
    )
    p.add_argument("file", metavar="PLIK", help="Plik źródłowy.")
    p.add_argument("line", type=positive_int, metavar="LINIA", help="Linia kursora (od 1).")
    p.add_argument("column", type=positive_int, metavar="KOLUMNA", help="Kolumna kursora (od 1).")
    add_policy_argument(p)
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz wynik jako JSON na stdout.",
    )
    p.set_defaults(func=run)
