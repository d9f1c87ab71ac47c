"""Introductory exercises: conditions, functions, strings, options, vectors and moves."""

from __future__ import annotations

from collections.abc import Iterable

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def bigger(a: int, b: int) -> int:
    """The bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    """True for even numbers."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The number multiplied by itself."""
    return num * num


def is_a_color_word(attempt: str) -> bool:
    """True for "green", "blue" or "red"."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove surrounding whitespace."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!"."""
    return text + " world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour; None for hours past midnight."""
    if time_of_day < 0:
        raise ValueError("time of day cannot be negative")
    if time_of_day <= 10:
        return 5
    if time_of_day <= 24:
        return 0
    return None


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a vector holding the same elements."""
    return (10, 20, 30, 40), [10, 20, 30, 40]


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    for index, value in enumerate(values):
        values[index] = value * 2
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """A new list with every element doubled."""
    return [value * 2 for value in values]


def longest(x: str, y: str) -> str:
    """The string with more UTF-8 bytes; the second one on a tie."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y


def fill_vec(values: Iterable[int]) -> list[int]:
    """A new list with 22, 44 and 66 appended."""
    return [*values, 22, 44, 66]


def get_char(data: str) -> str:
    """The last character of the text."""
    if not data:
        raise ValueError("cannot take the last character of an empty string")
    return data[-1]


def string_uppercase(data: str) -> str:
    """Print and return the upper-cased text."""
    upper = data.upper()
    print(upper)
    return upper