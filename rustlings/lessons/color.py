"""Checked conversion of integer triples and sequences into RGB colours."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

_CHANNEL_RANGE = range(0, 256)


@dataclass(frozen=True)
class Color:
    """An RGB colour with channels in 0..=255."""

    red: int
    green: int
    blue: int


class ColorErrorKind(Enum):
    """Why a conversion into a Color failed."""

    BAD_LEN = "incorrect length of sequence"
    INT_CONVERSION = "channel value out of range 0..=255"


class IntoColorError(ValueError):
    """Conversion into a Color failed."""

    def __init__(self, kind: ColorErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def color_from_triple(red: int, green: int, blue: int) -> Color:
    """Build a Color from three channels; raise IntoColorError if any is out of range."""
    if any(channel not in _CHANNEL_RANGE for channel in (red, green, blue)):
        raise IntoColorError(ColorErrorKind.INT_CONVERSION)
    return Color(red=red, green=green, blue=blue)


def color_from_sequence(values: Sequence[int]) -> Color:
    """Build a Color from exactly three values; raise IntoColorError otherwise."""
    if len(values) != 3:
        raise IntoColorError(ColorErrorKind.BAD_LEN)
    red, green, blue = values
    return color_from_triple(red, green, blue)