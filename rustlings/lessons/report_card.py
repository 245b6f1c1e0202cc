"""Report cards with numeric or alphabetic grades."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ReportCard:
    """A student's report card; the grade may be any printable value."""

    grade: Any
    student_name: str
    student_age: int

    def __post_init__(self) -> None:
        if not 0 <= self.student_age <= 255:
            raise ValueError("student age must be in 0..=255")

    def render(self) -> str:
        """Render the card as one line of text."""
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"