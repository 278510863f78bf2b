"""Messages of several shapes, dispatched by pattern matching."""

from __future__ import annotations

from dataclasses import dataclass, field

_U8_MAX = 255


def _check_u8(*values: int) -> None:
    for value in values:
        if not 0 <= value <= _U8_MAX:
            raise ValueError(f"{value} is not in the range 0..=255")


@dataclass(frozen=True)
class Point:
    """A position with coordinates in 0..=255."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8(self.x, self.y)


@dataclass(frozen=True)
class ChangeColor:
    """Set the colour to these channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_u8(self.red, self.green, self.blue)


@dataclass(frozen=True)
class Echo:
    """Print this text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to this point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Stop."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """What the messages act on."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message; raise TypeError for anything that is not a message."""
        match message:
            case ChangeColor(red=red, green=green, blue=blue):
                self.color = (red, green, blue)
            case Echo(text=text):
                print(text)
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"not a message: {message!r}")