"""Reporting failure with exceptions: name tags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer strictly: optional sign, ASCII digits, within ``bits`` bits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    number = int(text)
    if number > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if number < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return number


def _check_i32(number: int, operation: str) -> int:
    if not -(2**31) <= number <= 2**31 - 1:
        raise OverflowError(f"attempt to {operation} with overflow")
    return number


def generate_nametag_text(name: str) -> str:
    """Return the text of a name tag; raise ValueError when ``name`` is empty."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Return the token cost of buying the typed quantity of items.

    Raises ValueError when the quantity is not a 32-bit integer.
    """
    qty = _parse_int(item_quantity, 32)
    subtotal = _check_i32(qty * _COST_PER_ITEM, "multiply")
    return _check_i32(subtotal + _PROCESSING_FEE, "add")


def remaining_tokens(tokens: int, item_quantity: str) -> int:
    """Return the tokens left after buying; raise ValueError if unaffordable or unparsable."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationErrorKind(Enum):
    """Why a number is not a positive nonzero integer."""

    NEGATIVE = "negative"
    ZERO = "zero"


class CreationError(ValueError):
    """A number could not become a PositiveNonzeroInteger."""

    def __init__(self, kind: CreationErrorKind):
        message = "number is negative" if kind is CreationErrorKind.NEGATIVE else "number is zero"
        super().__init__(message)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero; construction raises CreationError otherwise."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed into a PositiveNonzeroInteger.

    ``cause`` is the CreationError for out-of-range numbers, or the ValueError
    raised while parsing the text.
    """

    def __init__(self, cause: ValueError):
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse a 64-bit integer and make it positive nonzero; raise ParsePosNonzeroError."""
    try:
        number = _parse_int(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(number)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err