"""Conversions: people from text, colours from numbers, byte and char counts."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_CHANNEL_MAX = 255


def _parse_usize(text: str) -> int:
    """Parse an unsigned integer: an optional '+' then ASCII digits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text.startswith("+") else text
    if not digits or not all(c in "0123456789" for c in digits):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


class ParsePersonError(ValueError):
    """Text could not be parsed into a Person."""

    EMPTY = "empty"
    BAD_LEN = "bad_len"
    NO_NAME = "no_name"
    PARSE_INT = "parse_int"

    _MESSAGES = {
        EMPTY: "input is empty",
        BAD_LEN: "expected exactly a name and an age",
        NO_NAME: "name is empty",
        PARSE_INT: "age is not a valid number",
    }

    def __init__(self, kind: str) -> None:
        super().__init__(self._MESSAGES[kind])
        self.kind = kind


@dataclass(frozen=True)
class Person:
    """A person with a name and an age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        """The fallback person: John, 30."""
        return cls(name="John", age=30)

    @classmethod
    def parse(cls, s: str) -> Person:
        """Parse "name,age"; fall back to the default person on any problem."""
        if not s:
            return cls.default()
        fields = s.split(",")
        name = fields[0]
        if not name or len(fields) < 2:
            return cls.default()
        try:
            age = _parse_usize(fields[1])
        except ValueError:
            return cls.default()
        return cls(name=name, age=age)

    @classmethod
    def from_str(cls, s: str) -> Person:
        """Parse exactly "name,age"; raise ParsePersonError otherwise."""
        if not s:
            raise ParsePersonError(ParsePersonError.EMPTY)
        fields = s.split(",")
        if len(fields) != 2:
            raise ParsePersonError(ParsePersonError.BAD_LEN)
        name, age_text = fields
        if not name:
            raise ParsePersonError(ParsePersonError.NO_NAME)
        try:
            age = _parse_usize(age_text)
        except ValueError as exc:
            raise ParsePersonError(ParsePersonError.PARSE_INT) from exc
        return cls(name=name, age=age)


class IntoColorError(ValueError):
    """Numbers could not be turned into a Color."""

    BAD_LEN = "bad_len"
    INT_CONVERSION = "int_conversion"

    _MESSAGES = {
        BAD_LEN: "expected exactly three values",
        INT_CONVERSION: "values must be in the range 0 to 255",
    }

    def __init__(self, kind: str) -> None:
        super().__init__(self._MESSAGES[kind])
        self.kind = kind


@dataclass(frozen=True)
class Color:
    """An RGB colour with channels from 0 to 255."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_values(cls, values: Sequence[int]) -> Color:
        """Build a colour from exactly three integers in 0..=255."""
        if len(values) != 3:
            raise IntoColorError(IntoColorError.BAD_LEN)
        if not all(0 <= value <= _CHANNEL_MAX for value in values):
            raise IntoColorError(IntoColorError.INT_CONVERSION)
        red, green, blue = values
        return cls(red=red, green=green, blue=blue)


def byte_counter(arg: str) -> int:
    """Number of bytes in the UTF-8 encoding of the text."""
    return len(arg.encode("utf-8"))


def char_counter(arg: str) -> int:
    """Number of characters in the text."""
    return len(arg)


def num_sq(arg: MutableSequence[int]) -> None:
    """Square the number held in a one-item box in place."""
    if len(arg) != 1:
        raise ValueError(f"expected a box holding one number, got {len(arg)} items")
    arg[0] = arg[0] * arg[0]