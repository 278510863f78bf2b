"""Records with data and behaviour: colours, orders, packages and rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1


@dataclass(frozen=True)
class ColorClassic:
    """A colour with named channels."""

    red: int
    green: int
    blue: int


class ColorTuple(NamedTuple):
    """A colour whose channels are reached by position."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class UnitLike:
    """A record with no fields."""

    def __repr__(self) -> str:
        return "UnitLike"


@dataclass(frozen=True)
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the order that new orders are copied from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A parcel; construction raises ValueError when it weighs nothing."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        """Return True when sender and recipient are in different countries."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Return the fee in cents as an unsigned 32-bit number."""
        fee = self.weight_in_grams * cents_per_gram
        if not _I32_MIN <= fee <= _I32_MAX:
            raise OverflowError("attempt to multiply with overflow")
        return fee % 2**32


@dataclass(frozen=True)
class Rectangle:
    """A rectangle; construction raises ValueError unless both sides are positive."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")