"""Small file helpers."""

from __future__ import annotations

from pathlib import Path


def read_file(path):
    """Return the whole contents of a text file."""
    return Path(path).read_text(encoding="utf-8")