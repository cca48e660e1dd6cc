"""Coloured status lines for warnings and successes."""

from __future__ import annotations

import os
import sys

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _console() -> Console:
    return Console(file=sys.stdout, highlight=False, soft_wrap=True)


def _emit(symbol: str, message: str, colour: str) -> None:
    line = Text.assemble((symbol, colour), " ", (message, colour))
    _console().print(line)


def warn(message: str) -> None:
    """Print a red warning line."""
    _emit("!" if no_emoji() else "⚠️ ", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _emit("✓" if no_emoji() else "✅", message, "green")