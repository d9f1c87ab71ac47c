"""Struct and enum exercises: colours, orders, packages and a message-driven state."""

from __future__ import annotations

from dataclasses import dataclass, field

_U8_MAX = 255


def _check_u8(name: str, value: int) -> None:
    if not 0 <= value <= _U8_MAX:
        raise ValueError(f"{name} must be in 0..=255, got {value}")


@dataclass
class ColorClassicStruct:
    """A colour with named components."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class UnitLikeStruct:
    """A struct without fields."""

    def __repr__(self) -> str:
        return "UnitLikeStruct"


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
    """The order that new orders are based on."""
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
    """A package to ship; its weight must be positive."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        """True when sender and recipient are in different countries."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Shipping cost for the given rate."""
        return self.weight_in_grams * cents_per_gram


@dataclass(frozen=True)
class Point:
    """A position with coordinates in 0..=255."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8("x", self.x)
        _check_u8("y", self.y)


@dataclass(frozen=True)
class Quit:
    """Ask the state to quit."""


@dataclass(frozen=True)
class Echo:
    """Print the text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class ChangeColor:
    """Change the colour to the given RGB components."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_u8("red", self.red)
        _check_u8("green", self.green)
        _check_u8("blue", self.blue)


Message = Quit | Echo | Move | ChangeColor


@dataclass
class State:
    """Colour, position and quit flag, changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case Quit():
                self.quit = True
            case Echo(text=text):
                print(text)
            case Move(point=point):
                self.position = point
            case ChangeColor(red=red, green=green, blue=blue):
                self.color = (red, green, blue)
            case _:
                raise TypeError(f"unknown message: {message!r}")