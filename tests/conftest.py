"""Shared fixtures for the bracket index tests."""

from __future__ import annotations

import os
import pathlib

import pytest

_ENV_VARS = ("RB_MATCH_POLICY", "RB_ENCODING", "RB_PALETTE")


@pytest.fixture(autouse=True)
def clean_env():
    """Each test starts without RB_* settings; anything set (e.g. by .env) is undone."""
    saved = {name: os.environ.pop(name, None) for name in _ENV_VARS}
    yield
    for name, value in saved.items():
        if value is None:
            os.environ.pop(name, None)
        else:
            os.environ[name] = value


@pytest.fixture
def write_source(tmp_path: pathlib.Path):
    """Write text to a file under tmp_path and return its path as str."""

    def _write(text: str, name: str = "sample.ts") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write
