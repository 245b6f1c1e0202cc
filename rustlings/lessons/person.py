"""Building a Person from "name,age" text, leniently or strictly."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_USIZE_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_usize(text: str) -> int:
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass(frozen=True)
class Person:
    """A person with a name and an age."""

    name: str
    age: int


def default_person() -> Person:
    """The fallback person: John, aged 30."""
    return Person(name="John", age=30)


def person_from(text: str) -> Person:
    """Build a Person from "name,age", falling back to the default on bad input."""
    if not text:
        return default_person()
    fields = text.split(",")
    if len(fields) < 2:
        return default_person()
    name, age_text = fields[0], fields[1]
    try:
        age = _parse_usize(age_text)
    except ValueError:
        return default_person()
    if not name:
        return default_person()
    return Person(name=name, age=age)


class PersonErrorKind(Enum):
    """Why strict parsing of a Person failed."""

    EMPTY = "empty input"
    BAD_LEN = "incorrect number of fields"
    NO_NAME = "empty name field"
    PARSE_INT = "invalid age"


class ParsePersonError(ValueError):
    """Strict parsing of a Person failed."""

    def __init__(self, kind: PersonErrorKind, detail: str | None = None) -> None:
        message = kind.value if detail is None else f"{kind.value}: {detail}"
        super().__init__(message)
        self.kind = kind
        self.detail = detail


def parse_person(text: str) -> Person:
    """Parse exactly "name,age"; raise ParsePersonError otherwise."""
    if text == "":
        raise ParsePersonError(PersonErrorKind.EMPTY)
    fields = text.split(",")
    if len(fields) != 2:
        raise ParsePersonError(PersonErrorKind.BAD_LEN)
    name, age_text = fields
    if not name:
        raise ParsePersonError(PersonErrorKind.NO_NAME)
    try:
        age = _parse_usize(age_text)
    except ValueError as err:
        raise ParsePersonError(PersonErrorKind.PARSE_INT, str(err)) from err
    return Person(name=name, age=age)