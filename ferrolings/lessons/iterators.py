"""Working with iterators: capitalising words, dividing lists and counting progress."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum

_U64_MAX = 2**64 - 1
_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def capitalize_first(text: str) -> str:
    """Return ``text`` with its first character upper-cased."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them without separators."""
    return "".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """A division that does not give a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int):
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))

    def __repr__(self) -> str:
        return f"NotDivisibleError(dividend={self.dividend}, divisor={self.divisor})"


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)

    def __repr__(self) -> str:
        return "DivideByZeroError()"


def divide(a: int, b: int) -> int:
    """Return ``a / b`` when it divides evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    quotient, remainder = divmod(a, b)
    if remainder != 0:
        raise NotDivisibleError(a, b)
    return quotient


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as err:
        return err


def result_with_list() -> list[int]:
    """Divide the sample numbers by 27; raise the first DivisionError met."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide the sample numbers by 27, keeping each quotient or error in place."""
    return [_try_divide(n, _DIVISOR) for n in _NUMBERS]


def factorial(num: int) -> int:
    """Return ``num!`` as an unsigned 64-bit number; raise OverflowError past that range."""
    if num < 0:
        raise ValueError(f"{num} is negative")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


class Progress(Enum):
    """How far an exercise has come."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count the entries with the given progress, one by one."""
    count = 0
    for progress in mapping.values():
        if progress is value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count the entries with the given progress."""
    return sum(1 for progress in mapping.values() if progress is value)


def count_collection_for(collection: Sequence[Mapping[str, Progress]], value: Progress) -> int:
    """Count the entries with the given progress across maps, one by one."""
    count = 0
    for mapping in collection:
        for progress in mapping.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count the entries with the given progress across maps."""
    return sum(count_iterator(mapping, value) for mapping in collection)