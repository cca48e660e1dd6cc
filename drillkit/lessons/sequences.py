"""Lists: doubling, extending, cons lists and clone-on-write sequences."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from dataclasses import dataclass


def vec_loop(v: MutableSequence[int]) -> MutableSequence[int]:
    """Double every element in place and return the sequence."""
    for index, element in enumerate(v):
        v[index] = element * 2
    return v


def vec_map(v: Sequence[int]) -> list[int]:
    """A new list with every element doubled."""
    return [element * 2 for element in v]


def fill_vec(vec: Sequence[int]) -> list[int]:
    """A new list holding the elements followed by 88."""
    return [*vec, 88]


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list; the list ends with None."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons | None:
    """A cons list holding 1, 2 and 3."""
    return Cons(1, Cons(2, Cons(3)))


class Cow:
    """A sequence that is borrowed until it must be changed, then copied."""

    def __init__(self, data: Sequence[int], *, owned: bool = False) -> None:
        self._data: Sequence[int] = data
        self._owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> Cow:
        """Wrap data without copying it."""
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: Sequence[int]) -> Cow:
        """Take ownership of data."""
        return cls(list(data), owned=True)

    @property
    def is_owned(self) -> bool:
        """True once the data belongs to this Cow."""
        return self._owned

    def to_mut(self) -> list[int]:
        """A mutable list of the data, copying it first if it is borrowed."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"Cow.{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only when needed."""
    for index, value in enumerate(list(cow)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow