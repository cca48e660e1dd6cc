"""Structs, enums and generic wrappers: orders, packages, messages and state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

MIN_PACKAGE_WEIGHT = 10


@dataclass
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """An order to copy from when making new ones."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A package sent from one country to another."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < MIN_PACKAGE_WEIGHT:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        """True when sender and recipient countries differ."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Shipping fee in cents."""
        return self.weight_in_grams * cents_per_gram


@dataclass
class Point:
    """A position on a grid."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Set the colour to the given RGB triple."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    """Replace the stored message."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Request to quit."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """State changed by processing messages."""

    color: tuple[int, int, int]
    position: Point
    quit_requested: bool
    message: str

    def change_color(self, color: tuple[int, int, int]) -> None:
        """Set the colour."""
        self.color = color

    def quit(self) -> None:
        """Mark that quitting was requested."""
        self.quit_requested = True

    def echo(self, s: str) -> None:
        """Replace the message."""
        self.message = s

    def move_position(self, p: Point) -> None:
        """Move to a new position."""
        self.position = p

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red=red, green=green, blue=blue):
                self.change_color((red, green, blue))
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"unknown message: {message!r}")


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T