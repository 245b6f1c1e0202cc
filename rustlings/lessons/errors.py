"""Error handling: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_signed(text: str, bits: int) -> int:
    """Parse a signed decimal integer of the given width with strict rules."""
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not all("0" <= c <= "9" for c in digits):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value >= 2 ** (bits - 1):
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return name tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity; raise ValueError if it is not a number."""
    quantity = _parse_signed(item_quantity, 32)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(2**31) <= cost < 2**31:
        raise OverflowError("attempt to compute total cost with overflow")
    return cost


def purchase(tokens: int, item_quantity: str) -> str:
    """Describe the outcome of buying the typed quantity with the given tokens."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationErrorKind(Enum):
    """Why a PositiveNonzeroInteger could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value was not positive and non-zero."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing text into a PositiveNonzeroInteger failed."""

    def __init__(
        self,
        *,
        creation: CreationError | None = None,
        parse_int: ValueError | None = None,
    ) -> None:
        cause = creation if creation is not None else parse_int
        super().__init__(str(cause))
        self.creation = creation
        self.parse_int = parse_int


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a positive non-zero integer; raise ParsePosNonzeroError otherwise."""
    try:
        value = _parse_signed(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(parse_int=err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(creation=err) from err