"""Classification of raw snapshots into known/unknown gamepads and named-control access"""
import logging
from typing import List, Optional, Tuple

from calibrate import estimate_origin
from core.origin import Destination, Origin, OriginType
from core.state import RawDeviceState, Snapshot
from database import Database
from mapper import ButtonMap

LOG = logging.getLogger("padmap.gamepad")

PRESS_THRESHOLD = 0.1

D = Destination

# W3C "standard" gamepad layout
STANDARD_LAYOUT = [
    (D.A, Origin.button(0)),
    (D.B, Origin.button(1)),
    (D.X, Origin.button(2)),
    (D.Y, Origin.button(3)),
    (D.LEFT_BUMPER, Origin.button(4)),
    (D.RIGHT_BUMPER, Origin.button(5)),
    (D.LEFT_TRIGGER, Origin.button(6)),
    (D.RIGHT_TRIGGER, Origin.button(7)),
    (D.BACK, Origin.button(8)),
    (D.START, Origin.button(9)),
    (D.LEFT_STICK, Origin.button(10)),
    (D.RIGHT_STICK, Origin.button(11)),
    (D.UP, Origin.button(12)),
    (D.DOWN, Origin.button(13)),
    (D.LEFT, Origin.button(14)),
    (D.RIGHT, Origin.button(15)),
    (D.HOME, Origin.button(16)),
    (D.LEFT_LEFT, Origin.axis(0, reversed=True)),
    (D.LEFT_RIGHT, Origin.axis(0)),
    (D.LEFT_UP, Origin.axis(1, reversed=True)),
    (D.LEFT_DOWN, Origin.axis(1)),
    (D.RIGHT_LEFT, Origin.axis(2, reversed=True)),
    (D.RIGHT_RIGHT, Origin.axis(2)),
    (D.RIGHT_UP, Origin.axis(3, reversed=True)),
    (D.RIGHT_DOWN, Origin.axis(3)),
]

STANDARD_MAPS = {
    "standard": ButtonMap.from_pairs(STANDARD_LAYOUT),
}


def resolve_map(raw: RawDeviceState, database: Database) -> Optional[ButtonMap]:
    """Device id in the database first, then the self-reported layout tag."""
    button_map = database.get(raw.id)
    if button_map is not None:
        return button_map
    if raw.mapping:
        return STANDARD_MAPS.get(raw.mapping)
    return None


class Gamepad:
    """A live device paired with its resolved button map.

    Y conventions differ: `left_y` / `right_y` grow towards down like the raw
    stick axes, while `dpad_y` is +1 for up.
    """

    def __init__(self, button_map: ButtonMap, raw: RawDeviceState):
        self.button_map = button_map
        self.raw = raw

    @property
    def id(self) -> str:
        return self.raw.id

    @property
    def index(self) -> int:
        return self.raw.index

    def _read(self, origin: Origin) -> float:
        val = self.raw.axis(origin.index)
        return -val if origin.reversed else val

    def pressed(self, destination: Destination) -> bool:
        origin = self.button_map.get(destination)
        if origin is None:
            return False
        if origin.type is OriginType.AXIS:
            return self._read(origin) > PRESS_THRESHOLD
        # pressed flag only; the analog component is not consulted
        return bool(self.raw.button(origin.index).pressed)

    def value(self, destination: Destination) -> float:
        origin = self.button_map.get(destination)
        if origin is None:
            return 0.0
        if origin.type is OriginType.AXIS:
            return self._read(origin)
        return float(self.raw.button(origin.index).value)

    def axis(self, negative: Destination, positive: Destination) -> float:
        val = self.value(positive) - self.value(negative)
        return max(-1.0, min(1.0, val))

    # Face and system buttons
    @property
    def a(self) -> bool:
        return self.pressed(D.A)

    @property
    def b(self) -> bool:
        return self.pressed(D.B)

    @property
    def x(self) -> bool:
        return self.pressed(D.X)

    @property
    def y(self) -> bool:
        return self.pressed(D.Y)

    @property
    def start(self) -> bool:
        return self.pressed(D.START)

    @property
    def back(self) -> bool:
        return self.pressed(D.BACK)

    @property
    def home(self) -> bool:
        return self.pressed(D.HOME)

    @property
    def left_bumper(self) -> bool:
        return self.pressed(D.LEFT_BUMPER)

    @property
    def right_bumper(self) -> bool:
        return self.pressed(D.RIGHT_BUMPER)

    @property
    def left_stick(self) -> bool:
        return self.pressed(D.LEFT_STICK)

    @property
    def right_stick(self) -> bool:
        return self.pressed(D.RIGHT_STICK)

    @property
    def left_trigger(self) -> float:
        return self.value(D.LEFT_TRIGGER)

    @property
    def right_trigger(self) -> float:
        return self.value(D.RIGHT_TRIGGER)

    # D-pad
    @property
    def dpad_up(self) -> bool:
        return self.pressed(D.UP)

    @property
    def dpad_down(self) -> bool:
        return self.pressed(D.DOWN)

    @property
    def dpad_left(self) -> bool:
        return self.pressed(D.LEFT)

    @property
    def dpad_right(self) -> bool:
        return self.pressed(D.RIGHT)

    @property
    def dpad_x(self) -> int:
        return int(self.dpad_right) - int(self.dpad_left)

    @property
    def dpad_y(self) -> int:
        return int(self.dpad_up) - int(self.dpad_down)

    # Sticks, Y grows downwards like the raw axes
    @property
    def left_x(self) -> float:
        return self.axis(D.LEFT_LEFT, D.LEFT_RIGHT)

    @property
    def left_y(self) -> float:
        return self.axis(D.LEFT_UP, D.LEFT_DOWN)

    @property
    def right_x(self) -> float:
        return self.axis(D.RIGHT_LEFT, D.RIGHT_RIGHT)

    @property
    def right_y(self) -> float:
        return self.axis(D.RIGHT_UP, D.RIGHT_DOWN)

    def __repr__(self):
        return f"Gamepad(index={self.index}, id={self.id!r})"


class UnknownGamepad:
    """A live device with no resolvable map."""

    def __init__(self, raw: RawDeviceState):
        self.raw = raw

    @property
    def id(self) -> str:
        return self.raw.id

    @property
    def index(self) -> int:
        return self.raw.index

    def estimate_origin(self) -> Optional[Origin]:
        return estimate_origin(self.raw)

    def with_map(self, button_map: ButtonMap) -> Gamepad:
        return Gamepad(button_map, self.raw)

    def __repr__(self):
        return f"UnknownGamepad(index={self.index}, id={self.id!r})"


def get_gamepads(snapshot: Snapshot, database: Database) -> Tuple[List[Gamepad], List[UnknownGamepad]]:
    known: List[Gamepad] = []
    unknown: List[UnknownGamepad] = []
    for raw in snapshot:
        if raw is None or not raw.live:
            continue
        button_map = resolve_map(raw, database)
        if button_map is None:
            unknown.append(UnknownGamepad(raw))
        else:
            known.append(Gamepad(button_map, raw))
    LOG.debug("classified %d known, %d unknown", len(known), len(unknown))
    return known, unknown
