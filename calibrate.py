"""Calibration primitives: guess the control being actuated and store the result"""
import logging
import math
from typing import Iterable, List, Optional, Tuple

from core.origin import Destination, Origin
from core.state import RawDeviceState
from database import Database
from mapper import Pair

LOG = logging.getLogger("padmap.calibrate")

MIN_CONFIDENCE = 0.5

D = Destination

# Order a remapping tool walks the user through
CALIBRATION_ORDER = (
    D.A,
    D.B,
    D.X,
    D.Y,
    D.LEFT_BUMPER,
    D.RIGHT_BUMPER,
    D.LEFT_TRIGGER,
    D.RIGHT_TRIGGER,
    D.BACK,
    D.START,
    D.HOME,
    D.LEFT_STICK,
    D.RIGHT_STICK,
    D.UP,
    D.DOWN,
    D.LEFT,
    D.RIGHT,
    D.LEFT_LEFT,
    D.LEFT_RIGHT,
    D.LEFT_UP,
    D.LEFT_DOWN,
    D.RIGHT_LEFT,
    D.RIGHT_RIGHT,
    D.RIGHT_UP,
    D.RIGHT_DOWN,
)


def candidates(raw: RawDeviceState) -> List[Tuple[Origin, float]]:
    """Every input of the device with a confidence, axes first."""
    out = []
    for i, val in enumerate(raw.axes):
        out.append((Origin.axis(i, reversed=val < 0), abs(val)))
    for i, btn in enumerate(raw.buttons):
        out.append((Origin.button(i), 1.0 if btn.pressed else 0.0))
    return out


def estimate_origin(raw: RawDeviceState) -> Optional[Origin]:
    """Return the input the user is most likely holding, or None.

    Ties go to the earliest candidate, so axes beat buttons and lower
    indices beat higher ones.
    """
    # NaN from a broken report would otherwise win every comparison
    cands = [c for c in candidates(raw) if math.isfinite(c[1])]
    if not cands:
        return None
    origin, confidence = max(cands, key=lambda c: c[1])
    if confidence < MIN_CONFIDENCE:
        return None
    LOG.debug("device %r: estimated %s (confidence %.2f)", raw.id, origin, confidence)
    return origin


def remap(database: Database, device_id: str, pairs: Iterable[Pair]) -> Database:
    """Encode the recorded pairs and store them for `device_id`."""
    return database.insert(device_id, list(pairs))
