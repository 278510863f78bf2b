"""First steps: functions, conditions, options, generics and lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

_ARRAY = (10, 20, 30, 40)


def ring_messages(num: int) -> list[str]:
    """Return one ring message for each of ``num`` calls."""
    return [f"Ring! Call number {i + 1}" for i in range(num)]


def is_even(num: int) -> bool:
    """Return True when ``num`` is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return ``num`` squared."""
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map ``fizz`` to ``foo``, ``fuzz`` to ``bar`` and anything else to ``baz``."""
    match fizzish:
        case "fizz":
            return "foo"
        case "fuzz":
            return "bar"
        case _:
            return "baz"


def maybe_icecream(time_of_day: int) -> int | None:
    """Return the ice creams left at this hour, or None for an hour past 23.

    Raises ValueError for a negative hour.
    """
    if time_of_day < 0:
        raise ValueError(f"{time_of_day} is not a valid hour")
    if time_of_day <= 21:
        return 5
    if time_of_day <= 23:
        return 0
    return None


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed tuple and a list holding the same elements."""
    return _ARRAY, list(_ARRAY)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of ``values`` in place and return the list."""
    for index, value in enumerate(values):
        values[index] = value * 2
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def fill_vec(values: list[int]) -> list[int]:
    """Return ``values`` followed by 22, 44 and 66."""
    return [*values, 22, 44, 66]