"""Appending "Bar" to strings and to lists of strings."""

from __future__ import annotations

from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or add "Bar" as a new element to a list."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return f"{value}Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]