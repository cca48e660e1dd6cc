"""Factorials and counting exercise progress."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping


class Progress(enum.Enum):
    """How far an exercise has got."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def factorial(num: int) -> int:
    """The product of 1 to num; 1 for zero."""
    if num < 0:
        raise ValueError(f"factorial of a negative number: {num}")
    return math.prod(range(1, num + 1))


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress, one at a time."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count matching entries across several maps, one at a time."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count matching entries across several maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)