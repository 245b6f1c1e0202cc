"""Apple pricing and a small string transforming machine."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_ACTIONS = ("uppercase", "trim", "append")


def calculate_price_of_apples(apples: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return apples if apples > 40 else apples * 2


@dataclass(frozen=True)
class Command:
    """What to do to a string: uppercase it, trim it, or append "bar" n times."""

    action: str
    times: int = 0

    def __post_init__(self) -> None:
        if self.action not in _ACTIONS:
            raise ValueError(f"unknown command action: {self.action!r}")
        if self.times < 0:
            raise ValueError("append count must not be negative")

    @classmethod
    def uppercase(cls) -> Command:
        return cls("uppercase")

    @classmethod
    def trim(cls) -> Command:
        return cls("trim")

    @classmethod
    def append(cls, times: int) -> Command:
        return cls("append", times)


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    output = []
    for text, command in items:
        match command.action:
            case "uppercase":
                output.append(text.upper())
            case "trim":
                output.append(text.strip())
            case "append":
                output.append(text + "bar" * command.times)
    return output