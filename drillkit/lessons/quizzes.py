"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def calculate_price_of_apples(apples: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought."""
    return apples if apples > 40 else apples * 2


@dataclass(frozen=True)
class Uppercase:
    """Turn the string to upper case."""


@dataclass(frozen=True)
class Trim:
    """Strip whitespace from both ends."""


@dataclass(frozen=True)
class Append:
    """Append "bar" the given number of times."""

    times: int


Command = Uppercase | Trim | Append


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    output = []
    for text, command in items:
        match command:
            case Uppercase():
                output.append(text.upper())
            case Trim():
                output.append(text.strip())
            case Append(times=times):
                output.append(text + "bar" * times)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


def _format_grade(grade: float | str) -> str:
    if isinstance(grade, float) and grade.is_integer():
        return str(int(grade))
    return str(grade)


@dataclass
class ReportCard:
    """A report card with a numeric or alphabetical grade."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        """The report line for this card."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_format_grade(self.grade)}"
        )