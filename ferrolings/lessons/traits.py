"""Shared behaviour through base classes: appending, licensing and combined traits."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch

_SUFFIX = "Bar"


@singledispatch
def append_bar(value: object) -> object:
    """Append ``Bar`` to a string, or add it as a new item to a list of strings."""
    raise TypeError(f"cannot append {_SUFFIX!r} to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + _SUFFIX


@append_bar.register
def _(value: list) -> list:
    return [*value, _SUFFIX]


class Licensed:
    """Something that carries licensing information."""

    def licensing_info(self) -> str:
        """Return the licensing text shared by every licensed item."""
        return "Some information"


@dataclass(frozen=True)
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int = 0


@dataclass(frozen=True)
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Return True when both items carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    """A capability answering ``some_function``."""

    def some_function(self) -> bool:
        return True


class OtherTrait:
    """A capability answering ``other_function``."""

    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    """Has both capabilities."""


class OtherStruct(SomeTrait, OtherTrait):
    """Has both capabilities as well."""


def some_func(item: SomeTrait) -> bool:
    """Return True when ``item`` answers yes to both capabilities.

    Raises TypeError when ``item`` lacks either capability.
    """
    if not (isinstance(item, SomeTrait) and isinstance(item, OtherTrait)):
        raise TypeError(f"{type(item).__name__} does not have both capabilities")
    return item.some_function() and item.other_function()