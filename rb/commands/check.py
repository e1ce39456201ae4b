"""Komenda: rb check — raport niedopasowanych nawiasów."""

from __future__ import annotations

import argparse
import json
import sys

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from brackets import IssueCode
from rb._load import add_policy_argument, get_settings, load_index, resolve_policy

console = Console()

CODE_STYLE: dict[IssueCode, str] = {
    IssueCode.UNMATCHED_OPEN:  "red",
    IssueCode.UNMATCHED_CLOSE: "red",
    IssueCode.KIND_MISMATCH:   "yellow",
}


def run(args: argparse.Namespace) -> None:
    settings = get_settings(console)
    policy   = resolve_policy(args, settings)

    results = []
    for file in args.files:
        index = load_index(file, policy, settings.encoding, console)
        results.append((file, index.report))

    all_balanced = all(report.is_balanced for _, report in results)

    if args.json_output:
        out = [
            {
                "file":        file,
                "is_balanced": report.is_balanced,
                "pairs":       len(report.pairs),
                "issues":      [i.to_dict() for i in report.issues],
            }
            for file, report in results
        ]
        print(json.dumps(out, ensure_ascii=False, indent=2))
    else:
        for file, report in results:
            if report.is_balanced:
                console.print(
                    f"[green]OK[/green]  [bold]{file}[/bold] — "
                    f"{len(report.pairs)} par, wszystkie nawiasy dopasowane."
                )
                continue

            console.print(
                f"[red]BŁĄD[/red]  [bold]{file}[/bold] — "
                f"{len(report.issues)} problem(ów)."
            )
            table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
            table.add_column("Kod",      no_wrap=True)
            table.add_column("Pozycja", style="cyan", no_wrap=True)
            table.add_column("Znak",     justify="center")
            table.add_column("Komunikat")
            for issue in report.issues:
                table.add_row(
                    Text(issue.code, style=CODE_STYLE[issue.code]),
                    str(issue.position),
                    Text(issue.char),
                    Text(issue.message),
                )
            console.print(table)

    if not all_balanced:
        sys.exit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check",
        help="Raportuje niedopasowane i mieszane nawiasy.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Sprawdza pliki i raportuje:

  E_UNMATCHED_OPEN   otwarcie bez zamknięcia
  E_UNMATCHED_CLOSE  zamknięcie bez otwarcia (w strict: także zły rodzaj)
  W_KIND_MISMATCH    para mieszanych rodzajów, np. ( zamknięte przez ]
                     (tylko polityka lenient)

Kod wyjścia 1, gdy którykolwiek plik ma problemy.

Przykłady:
  rb check main.ts
  rb check src/a.ts src/b.ts --policy strict
  rb check main.ts --json-output
        """,
    )
    p.add_argument("files", nargs="+", metavar="PLIK", help="Pliki do sprawdzenia.")
    add_policy_argument(p)
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz raport jako JSON na stdout.",
    )
    p.set_defaults(func=run)
