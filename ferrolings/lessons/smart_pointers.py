"""Recursive lists and copy-on-write sequences."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value and the rest of the list, None marking the end."""

    value: int
    rest: Cons | None = None


def create_empty_list() -> Cons | None:
    """Return the empty list."""
    return None


def create_non_empty_list() -> Cons:
    """Return a list holding a single zero."""
    return Cons(0, None)


class CopyOnWrite:
    """A sequence that borrows its data until it is first changed.

    A borrowed sequence is copied into an owned list the first time
    ``to_mut`` is called; an owned one is changed in place.
    """

    def __init__(self, data: Sequence[int], owned: bool = False):
        self._data: Sequence[int] = list(data) if owned else data
        self._owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> CopyOnWrite:
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: Sequence[int]) -> CopyOnWrite:
        return cls(data, owned=True)

    @property
    def is_owned(self) -> bool:
        return self._owned

    @property
    def data(self) -> Sequence[int]:
        return self._data

    def to_mut(self) -> list[int]:
        """Return the owned list, copying the borrowed data first if needed."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        kind = "owned" if self._owned else "borrowed"
        return f"CopyOnWrite({list(self._data)!r}, {kind})"


def abs_all(values: CopyOnWrite) -> CopyOnWrite:
    """Make every element non-negative, copying borrowed data only when needed."""
    negatives = [index for index, value in enumerate(values) if value < 0]
    for index in negatives:
        target = values.to_mut()
        target[index] = -target[index]
    return values