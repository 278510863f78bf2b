"""Review quizzes: pricing apples, a string transformer and report cards."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

_U32_MAX = 2**32 - 1
_BULK_THRESHOLD = 40
_APPENDED = "bar"

G = TypeVar("G")


def calculate_price_of_apples(num: int) -> int:
    """Return the price of ``num`` apples: 2 each, or 1 each above 40 apples.

    Raises ValueError for a negative count and OverflowError when the price
    does not fit an unsigned 32-bit number.
    """
    if num < 0:
        raise ValueError(f"{num} is not a valid number of apples")
    if num > _U32_MAX:
        raise OverflowError(f"{num} is not an unsigned 32-bit number")
    price = num * 2 if num <= _BULK_THRESHOLD else num
    if price > _U32_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return price


class CommandKind(Enum):
    """What the transformer does to a string."""

    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A transformation; ``count`` is how many times ``bar`` is appended."""

    kind: CommandKind
    count: int = 0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("the append count cannot be negative")


def _apply(text: str, command: Command) -> str:
    match command.kind:
        case CommandKind.UPPERCASE:
            return text.upper()
        case CommandKind.TRIM:
            return text.strip()
        case CommandKind.APPEND:
            return text + _APPENDED * command.count
    raise ValueError(f"unknown command {command.kind!r}")


def transformer(commands: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    return [_apply(text, command) for text, command in commands]


def _display(value: object) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class ReportCard(Generic[G]):
    """A student's report card; the grade may be numeric or alphabetic."""

    grade: G
    student_name: str
    student_age: int

    def render(self) -> str:
        """Return the printable line of the report card."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_display(self.grade)}"
        )