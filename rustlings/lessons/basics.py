"""Branching, small functions, strings, optional values and list updates."""

from __future__ import annotations

from collections.abc import Iterable

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Where an animal lives, or "Unknown"."""
    habitats = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}
    return habitats.get(animal, "Unknown")


def is_even(num: int) -> bool:
    """True when num is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return num squared."""
    return num * num


def is_a_color_word(attempt: str) -> bool:
    """True for the colour words green, blue and red."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!" to text."""
    return text + " world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour; None for hours past 23."""
    if 1 < time_of_day < 22:
        return 5
    if time_of_day > 23:
        return None
    return 0


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    for index, element in enumerate(values):
        values[index] = element * 2
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [element * 2 for element in values]