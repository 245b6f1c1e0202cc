"""Structured data: orders, packages and a message-driven state."""

from __future__ import annotations

from dataclasses import dataclass, field

_MIN_WEIGHT = 10
_U32_MAX = 2**32 - 1


@dataclass(frozen=True)
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
    """The template order other orders are derived from."""
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
    """A package to ship; it must weigh at least 10 grams."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < _MIN_WEIGHT:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        """True when sender and recipient countries differ."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Shipping fee in cents."""
        fee = self.weight_in_grams * cents_per_gram
        if fee > _U32_MAX:
            raise OverflowError("fee does not fit in 32 unsigned bits")
        return fee


@dataclass(frozen=True)
class Point:
    """A position on the board."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Message: set the colour."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    """Message: store some text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Message: move to a point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Message: stop."""


@dataclass
class State:
    """State updated by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False
    message: str = ""

    def process(self, message: ChangeColor | Echo | Move | Quit) -> None:
        """Apply a message to the state."""
        match message:
            case ChangeColor(red, green, blue):
                self.color = (red, green, blue)
            case Echo(text):
                self.message = text
            case Move(point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")