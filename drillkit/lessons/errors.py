"""Error handling: name tags, token costs and positive integers."""

from __future__ import annotations

from dataclasses import dataclass

_I32 = 32
_I64 = 64


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer strictly: optional sign, then ASCII digits only."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    negative = text.startswith("-")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not all(c in "0123456789" for c in digits):
        raise ValueError("invalid digit found in string")
    value = -int(digits) if negative else int(digits)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Five tokens per item plus a one-token fee; the quantity must be a number."""
    processing_fee = 1
    cost_per_item = 5
    return _parse_int(item_quantity, _I32) * cost_per_item + processing_fee


class CreationError(ValueError):
    """A positive non-zero integer could not be created."""


class NegativeValueError(CreationError):
    """The value was negative."""

    def __init__(self) -> None:
        super().__init__("number is negative")


class ZeroValueError(CreationError):
    """The value was zero."""

    def __init__(self) -> None:
        super().__init__("number is zero")


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer that is greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeValueError()
        if self.value == 0:
            raise ZeroValueError()


class ParsePosNonzeroError(ValueError):
    """Parsing failed, either as an integer or as a positive non-zero one."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse a string into a PositiveNonzeroInteger."""
    try:
        value = _parse_int(s, _I64)
        return PositiveNonzeroInteger(value)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc