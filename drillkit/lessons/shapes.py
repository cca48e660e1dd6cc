"""Rectangles and choosing the longer of two strings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with positive width and height."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")


def longest(x: str, y: str) -> str:
    """The longer string by byte length; the second one on a tie."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y