"""
Konfiguracja rb — przez zmienne środowiskowe.

Zmienne:
  RB_MATCH_POLICY   lenient (domyślnie) | strict
  RB_ENCODING       kodowanie plików wejściowych (domyślnie utf-8)
  RB_PALETTE        kolory palety podglądu, rozdzielone przecinkami (#rrggbb)

Opcjonalnie plik .env w katalogu głównym projektu, np.:
  RB_MATCH_POLICY=strict
"""

from __future__ import annotations

import os
import pathlib
import re
from dataclasses import dataclass

from dotenv import load_dotenv

from brackets import MatchPolicy

ROOT = pathlib.Path(__file__).resolve().parent.parent

# Paleta z komponentu edytora: kolejne poziomy zagnieżdżenia.
DEFAULT_PALETTE: tuple[str, ...] = (
    "#e6b422",  # złoty
    "#da70d6",  # orchidea
    "#3498db",  # niebieski
    "#2ecc71",  # zielony
    "#e74c3c",  # czerwony
    "#9b59b6",  # fioletowy
    "#1abc9c",  # morski
    "#f39c12",  # pomarańczowy
)

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


@dataclass(slots=True)
class Settings:
    policy:   MatchPolicy
    encoding: str
    palette:  tuple[str, ...]


def _parse_policy(raw: str) -> MatchPolicy:
    try:
        return MatchPolicy(raw.strip().lower())
    except ValueError:
        allowed = ", ".join(p.value for p in MatchPolicy)
        raise ValueError(
            f"Nieprawidłowa wartość RB_MATCH_POLICY: '{raw}' (dozwolone: {allowed})"
        ) from None


def _parse_palette(raw: str) -> tuple[str, ...]:
    colors = tuple(c.strip() for c in raw.split(",") if c.strip())
    if not colors:
        raise ValueError("RB_PALETTE nie zawiera żadnego koloru")
    bad = [c for c in colors if not _HEX_COLOR_RE.match(c)]
    if bad:
        raise ValueError(f"Nieprawidłowe kolory w RB_PALETTE: {', '.join(bad)}")
    return colors


def load_settings(env_file: pathlib.Path | None = None) -> Settings:
    """
    Wczytuje ustawienia ze środowiska (i pliku .env, jeśli istnieje).

    Zmienne już ustawione w środowisku mają pierwszeństwo przed .env.

    Raises:
        ValueError przy nieprawidłowej wartości którejś zmiennej.
    """
    load_dotenv(env_file or ROOT / ".env", override=False)

    palette_raw = os.getenv("RB_PALETTE")
    return Settings(
        policy   = _parse_policy(os.getenv("RB_MATCH_POLICY", "lenient")),
        encoding = os.getenv("RB_ENCODING", "utf-8"),
        palette  = _parse_palette(palette_raw) if palette_raw else DEFAULT_PALETTE,
    )
