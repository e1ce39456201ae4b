"""
brackets/document.py — wejście indeksu: tekst dokumentu jako lista linii.

Akceptowane formy:
  - str              → podział na "\\n" (znak "\\r" zostaje w linii, jest obojętny)
  - bytes/bytearray  → dekodowanie (domyślnie UTF-8, tryb strict), potem jak str
  - sekwencja str    → kopia listy linii

Wszystko inne (oraz bajty, których nie da się zdekodować) → MalformedInputError.
To jedyny błąd, który indeks zgłasza wywołującemu.
"""

from __future__ import annotations

import pathlib
from collections.abc import Sequence

from .types import DocumentLines

DEFAULT_ENCODING = "utf-8"


class MalformedInputError(ValueError):
    """Wejście nie jest tekstem albo nie daje się zdekodować."""


def split_document(
    source: str | bytes | bytearray | Sequence[str],
    encoding: str = DEFAULT_ENCODING,
) -> DocumentLines:
    """
    Zwraca dokument jako listę linii.

    Raises:
        MalformedInputError dla bajtów niezgodnych z kodowaniem
        lub dla wartości niebędącej tekstem.
    """
    if isinstance(source, (bytes, bytearray)):
        try:
            source = bytes(source).decode(encoding)
        except UnicodeDecodeError as exc:
            raise MalformedInputError(
                f"Nie można zdekodować dokumentu jako {encoding}: {exc}"
            ) from exc
        except LookupError as exc:
            raise MalformedInputError(f"Nieznane kodowanie: {encoding}") from exc

    if isinstance(source, str):
        return source.split("\n")

    if isinstance(source, Sequence):
        lines = list(source)
        for i, line in enumerate(lines, start=1):
            if not isinstance(line, str):
                raise MalformedInputError(
                    f"Linia {i} nie jest tekstem (typ: {type(line).__name__})"
                )
        return lines

    raise MalformedInputError(
        f"Nieobsługiwany typ dokumentu: {type(source).__name__}"
    )


def read_document(
    path: str | pathlib.Path,
    encoding: str = DEFAULT_ENCODING,
) -> DocumentLines:
    """Wczytuje plik (bajty) i dzieli go na linie przez split_document()."""
    data = pathlib.Path(path).read_bytes()
    return split_document(data, encoding=encoding)
