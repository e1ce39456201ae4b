"""Komenda: rb scan — lista par nawiasów w pliku."""

from __future__ import annotations

import argparse
import json

from rich import box
from rich.console import Console
from rich.table import Table
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

    pairs = index.pairs_on_line(args.line) if args.line is not None else list(index.pairs)
    palette_size = len(settings.palette)

    if args.json_output:
        out = {
            "file":   args.file,
            "policy": str(policy),
            "pairs": [
                {**p.to_dict(), "color_index": index.color_index(p, palette_size)}
                for p in pairs
            ],
        }
        print(json.dumps(out, ensure_ascii=False, indent=2))
        return

    if not pairs:
        console.print("[yellow]Brak par nawiasów.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
    )
    table.add_column("OPEN",  no_wrap=True)
    table.add_column("CLOSE", no_wrap=True)
    table.add_column("PARA",  no_wrap=True, justify="center")
    table.add_column("GŁĘB.", no_wrap=True, justify="right")
    table.add_column("KOLOR", no_wrap=True, justify="right")

    for p in pairs:
        color_idx = index.color_index(p, palette_size)
        chars = Text(p.open.char + p.close.char, style=f"bold {settings.palette[color_idx]}")
        table.add_row(
            str(p.open.position),
            str(p.close.position),
            chars,
            str(p.depth),
            str(color_idx),
        )

    total = len(pairs)
    console.print()
    console.print(table)
    _pl = "para" if total == 1 else ("pary" if 2 <= total % 10 <= 4 and total % 100 not in range(12, 15) else "par")
    console.print(f"  [dim]{total} {_pl} · polityka: {policy}[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "scan",
        help="Listuje dopasowane pary nawiasów z głębokością.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Skanuje plik (stringi i komentarze // są pomijane) i listuje pary nawiasów
(), [], {}, <> z pozycjami (linia:kolumna, od 1), głębokością i indeksem koloru.

Przykłady:
  rb scan main.ts
  rb scan main.ts --line 12
  rb scan main.ts --policy strict --json-output
        """,
    )
    p.add_argument("file", metavar="PLIK", help="Plik źródłowy do przeskanowania.")
    p.add_argument(
        "--line", "-l",
        type=positive_int,
        default=None,
        metavar="N",
        help="Pokaż tylko pary z końcem w linii N.",
    )
    add_policy_argument(p)
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz pary jako JSON na stdout.",
    )
    p.set_defaults(func=run)
