"""Working with text: colours, trimming, composing, replacing and comparing lengths."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    """Return the favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Return True for one of the known colour words."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Return ``text`` without leading and trailing whitespace."""
    return text.strip()


def compose_me(text: str) -> str:
    """Return ``text`` followed by ``world!``."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every ``cars`` in ``text`` with ``balloons``."""
    return text.replace("cars", "balloons")


def longest(x: str, y: str) -> str:
    """Return the string with more UTF-8 bytes; ``y`` when they are equal."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y