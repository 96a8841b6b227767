"""Keeping a single number, such as the bank balance, in a text file."""

from __future__ import annotations

import math
import os
from pathlib import Path


def load_float(path: str | os.PathLike[str]) -> float:
    """Return the first non-zero number at the start of the file, or 0.0 if there is none."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return 0.0
    for token in text.split():
        try:
            number = float(token)
        except ValueError:
            break
        if not math.isfinite(number):
            break
        if number != 0:
            return number
    return 0.0


def save_float(path: str | os.PathLike[str], value: float) -> None:
    """Write ``value`` to the file so that load_float reads it back."""
    Path(path).write_text(f"{float(value)!r}\n", encoding="utf-8")