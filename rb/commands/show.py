"""Komenda: rb show — podgląd pliku z kolorowymi ("tęczowymi") nawiasami."""

from __future__ import annotations

import argparse
import re

from rich.console import Console
from rich.text import Text

from brackets import BracketIndex, BracketPair
from rb._load import add_policy_argument, get_settings, load_lines, resolve_policy

console = Console()

_CURSOR_RE = re.compile(r"^\s*(\d+)\s*:\s*(\d+)\s*$")

# Legenda pokazuje tylko pierwsze poziomy, jak panel w edytorze.
LEGEND_LEVELS = 4


def _parse_cursor(raw: str) -> tuple[int, int]:
    m = _CURSOR_RE.match(raw)
    if not m:
        raise argparse.ArgumentTypeError(
            f"Nieprawidłowy kursor: '{raw}' (oczekiwano LINIA:KOLUMNA)"
        )
    return int(m.group(1)), int(m.group(2))


def render_lines(
    lines: list[str],
    index: BracketIndex,
    palette: tuple[str, ...],
    active: BracketPair | None = None,
) -> list[Text]:
    """
    Zwraca linie jako rich.Text z pokolorowanymi końcami par.

    Kolor = palette[depth mod len(palette)]; aktywna para dodatkowo
    w odwróconych kolorach.
    """
    out = [Text(line) for line in lines]
    for pair in index:
        color = palette[index.color_index(pair, len(palette))]
        style = f"bold reverse {color}" if pair == active else f"bold {color}"
        for end in (pair.open, pair.close):
            line_no, col = end.position.line, end.position.column
            out[line_no - 1].stylize(style, col - 1, col)
    return out


def _print_legend(palette: tuple[str, ...]) -> None:
    legend = Text("Głębokość nawiasów: ", style="dim")
    for level, color in enumerate(palette[:LEGEND_LEVELS], start=1):
        legend.append("■ ", style=color)
        legend.append(f"poziom {level}  ", style="dim")
    console.print(legend)


def run(args: argparse.Namespace) -> None:
    settings = get_settings(console)
    policy   = resolve_policy(args, settings)
    lines    = load_lines(args.file, settings.encoding, console)
    index    = BracketIndex.build(lines, policy)

    active = index.pair_at(*args.cursor) if args.cursor else None

    width = len(str(len(lines)))
    for line_no, text in enumerate(render_lines(lines, index, settings.palette, active), start=1):
        gutter = Text(f"{line_no:>{width}} │ ", style="dim")
        console.print(gutter + text, soft_wrap=True, highlight=False)

    if args.cursor and active is None:
        line, column = args.cursor
        console.print(f"[dim]Brak aktywnej pary na {line}:{column}.[/dim]")

    if args.legend:
        console.print()
        _print_legend(settings.palette)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "show",
        help="Wyświetla plik z nawiasami pokolorowanymi wg głębokości.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wypisuje plik z numerami linii; oba końce każdej dopasowanej pary są
pokolorowane wg głębokości (paleta 8 kolorów, RB_PALETTE nadpisuje).
Z --cursor para zakotwiczona na kursorze jest wyróżniona.

Przykłady:
  rb show main.ts
  rb show main.ts --cursor 2:5
  rb show main.ts --legend
        """,
    )
    p.add_argument("file", metavar="PLIK", help="Plik źródłowy.")
    p.add_argument(
        "--cursor", "-c",
        type=_parse_cursor,
        default=None,
        metavar="LINIA:KOLUMNA",
        help="Pozycja kursora (od 1) — wyróżnia aktywną parę.",
    )
    p.add_argument(
        "--legend",
        action="store_true",
        help="Pokaż legendę kolorów pierwszych poziomów.",
    )
    add_policy_argument(p)
    p.set_defaults(func=run)
