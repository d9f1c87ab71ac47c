"""Error-handling exercises: nametags, token costs and positive integers."""

from __future__ import annotations

from dataclasses import dataclass

_DIGITS = frozenset("0123456789")

PROCESSING_FEE = 1
COST_PER_ITEM = 5


class _ParseIntError(ValueError):
    """Text could not be parsed as an integer of the given width."""


def _parse_int(text: str, bits: int) -> int:
    if not text:
        raise _ParseIntError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not set(digits) <= _DIGITS:
        raise _ParseIntError("invalid digit found in string")
    value = int(text)
    if value > (1 << (bits - 1)) - 1:
        raise _ParseIntError("number too large to fit in target type")
    if value < -(1 << (bits - 1)):
        raise _ParseIntError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a nametag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity, including the processing fee."""
    quantity = _parse_int(item_quantity, 32)
    return quantity * COST_PER_ITEM + PROCESSING_FEE


def buy(tokens: int, item_quantity: str) -> str:
    """Try to spend tokens on items and describe the outcome."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationError(ValueError):
    """A value that is not a positive, non-zero integer."""

    _DESCRIPTIONS = {"negative": "number is negative", "zero": "number is zero"}

    def __init__(self, reason: str) -> None:
        if reason not in self._DESCRIPTIONS:
            raise ValueError(f"unknown creation error: {reason!r}")
        super().__init__(self._DESCRIPTIONS[reason])
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.reason == other.reason

    def __hash__(self) -> int:
        return hash(self.reason)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError("negative")
        if self.value == 0:
            raise CreationError("zero")


class ParsePosNonzeroError(ValueError):
    """Parsing failed, or the parsed number was not positive."""

    def __init__(self, error: ValueError) -> None:
        super().__init__(str(error))
        self.error = error

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsePosNonzeroError):
            return NotImplemented
        return type(self.error) is type(other.error) and (
            self.error == other.error or str(self.error) == str(other.error)
        )

    def __hash__(self) -> int:
        return hash(str(self.error))


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger."""
    try:
        number = _parse_int(s, 64)
    except _ParseIntError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(number)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err