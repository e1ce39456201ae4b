"""Wspólne wczytywanie ustawień i indeksu dla komend rb."""

from __future__ import annotations

import argparse
import pathlib

from rich.console import Console

from brackets import BracketIndex, MalformedInputError, MatchPolicy, read_document
from rb._config import Settings, load_settings


def get_settings(console: Console) -> Settings:
    try:
        return load_settings()
    except ValueError as exc:
        console.print(f"[red]Błąd konfiguracji:[/red] {exc}")
        raise SystemExit(1)


def resolve_policy(args: argparse.Namespace, settings: Settings) -> MatchPolicy:
    """Flaga --policy ma pierwszeństwo przed RB_MATCH_POLICY."""
    if getattr(args, "policy", None):
        return MatchPolicy(args.policy)
    return settings.policy


def load_lines(path_str: str, encoding: str, console: Console) -> list[str]:
    path = pathlib.Path(path_str)
    if not path.is_file():
        console.print(f"[red]Brak pliku:[/red] {path}")
        raise SystemExit(1)

    try:
        return read_document(path, encoding=encoding)
    except MalformedInputError as exc:
        console.print(f"[red]Nieprawidłowe wejście:[/red] {path}: {exc}")
        raise SystemExit(1)
    except OSError as exc:
        console.print(f"[red]Nie można odczytać pliku:[/red] {path}: {exc.strerror or exc}")
        raise SystemExit(1)


def load_index(
    path_str: str,
    policy: MatchPolicy,
    encoding: str,
    console: Console,
) -> BracketIndex:
    return BracketIndex.build(load_lines(path_str, encoding, console), policy)


def positive_int(raw: str) -> int:
    """Typ argparse: liczba całkowita >= 1 (linie i kolumny liczone od 1)."""
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Nieprawidłowa liczba: '{raw}'") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"Wartość musi być >= 1: {value}")
    return value


def add_policy_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--policy", "-p",
        choices=[m.value for m in MatchPolicy],
        default=None,
        help="Polityka dopasowania (domyślnie: RB_MATCH_POLICY albo lenient).",
    )
