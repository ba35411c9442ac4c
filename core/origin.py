"""Physical input references (Origin) and logical control names (Destination)"""
import enum
import re
from dataclasses import dataclass


class OriginType(enum.Enum):
    AXIS = "a"
    BUTTON = "b"


_ORIGIN_RE = re.compile(r"^(-?)([ab])(\d+)$")


@dataclass(frozen=True)
class Origin:
    type: OriginType
    index: int
    reversed: bool = False

    def __post_init__(self):
        if self.index < 0:
            raise ValueError(f"origin index must be non-negative, got {self.index}")

    @classmethod
    def axis(cls, index: int, reversed: bool = False) -> "Origin":
        return cls(OriginType.AXIS, index, reversed)

    @classmethod
    def button(cls, index: int) -> "Origin":
        return cls(OriginType.BUTTON, index)

    @classmethod
    def parse(cls, text: str) -> "Origin":
        """Parse `[-]a3` / `b12`. Raises ValueError on anything else."""
        m = _ORIGIN_RE.match(text.strip())
        if not m:
            raise ValueError(f"invalid origin: {text!r}")
        sign, type_char, index = m.groups()
        return cls(OriginType(type_char), int(index), sign == "-")

    def __str__(self):
        return f"{'-' if self.reversed else ''}{self.type.value}{self.index}"


class Destination(enum.Enum):
    """Logical controls. Values are persisted and must never change."""

    A = "a"
    B = "b"
    X = "x"
    Y = "y"
    START = "start"
    BACK = "back"
    HOME = "home"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    LEFT_LEFT = "leftleft"
    LEFT_RIGHT = "leftright"
    LEFT_UP = "leftup"
    LEFT_DOWN = "leftdown"
    RIGHT_LEFT = "rightleft"
    RIGHT_RIGHT = "rightright"
    RIGHT_UP = "rightup"
    RIGHT_DOWN = "rightdown"
    LEFT_STICK = "leftstick"
    RIGHT_STICK = "rightstick"
    LEFT_BUMPER = "leftbumper"
    RIGHT_BUMPER = "rightbumper"
    LEFT_TRIGGER = "lefttrigger"
    RIGHT_TRIGGER = "righttrigger"

    @classmethod
    def parse(cls, text: str) -> "Destination":
        try:
            return cls(text.strip())
        except ValueError:
            raise ValueError(f"unknown destination: {text!r}") from None

    def __str__(self):
        return self.value


def destination_to_string(destination: Destination) -> str:
    return destination.value


# (negative half, positive half) of each stick axis
AXIS_PAIRS = (
    (Destination.LEFT_LEFT, Destination.LEFT_RIGHT),
    (Destination.LEFT_UP, Destination.LEFT_DOWN),
    (Destination.RIGHT_LEFT, Destination.RIGHT_RIGHT),
    (Destination.RIGHT_UP, Destination.RIGHT_DOWN),
)
