"""A cons list and a clone-on-write sequence."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons list cell: a value and the rest of the list."""

    value: int
    next: Cons | Nil


def create_empty_list() -> Nil:
    """An empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding a single value."""
    return Cons(4, Nil())


class Cow:
    """A sequence that is borrowed until it must be changed, then copied."""

    def __init__(self, data: Sequence[int], owned: bool = False) -> None:
        self._data: Sequence[int] = data
        self.owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> Cow:
        return cls(data, owned=False)

    @classmethod
    def from_owned(cls, data: list[int]) -> Cow:
        return cls(data, owned=True)

    @property
    def data(self) -> Sequence[int]:
        return self._data

    def to_mut(self) -> list[int]:
        """Return a mutable list, copying the borrowed data first if needed."""
        if not self.owned:
            self._data = list(self._data)
            self.owned = True
        return self._data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __repr__(self) -> str:
        kind = "Owned" if self.owned else "Borrowed"
        return f"Cow.{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only if a change is needed."""
    for index, value in enumerate(cow.data):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow