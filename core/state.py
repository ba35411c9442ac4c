"""State models and lightweight DTOs"""
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class RawButton:
    pressed: bool = False
    value: float = 0.0  # analog component, 0..1


@dataclass(frozen=True)
class RawDeviceState:
    """One device slot as reported by the acquisition layer.

    `mapping` is the self-reported layout tag ("standard" or empty).
    """

    id: str = ""
    index: int = 0
    axes: Tuple[float, ...] = field(default_factory=tuple)  # -1..1
    buttons: Tuple[RawButton, ...] = field(default_factory=tuple)
    connected: bool = True
    timestamp: float = 0.0
    mapping: str = ""

    def __post_init__(self):
        object.__setattr__(self, "axes", tuple(float(v) for v in self.axes))
        object.__setattr__(self, "buttons", make_buttons(self.buttons))

    @property
    def live(self) -> bool:
        # Some platforms report phantom pads flagged connected with a zero timestamp
        return bool(self.connected) and self.timestamp > 0

    def axis(self, index: int) -> float:
        if 0 <= index < len(self.axes):
            return float(self.axes[index])
        return 0.0

    def button(self, index: int) -> RawButton:
        if 0 <= index < len(self.buttons):
            return self.buttons[index]
        return RawButton()


Snapshot = Sequence[Optional[RawDeviceState]]


def make_buttons(pairs) -> Tuple[RawButton, ...]:
    """Build buttons from (pressed, value) pairs or bare bools."""
    out = []
    for p in pairs:
        if isinstance(p, RawButton):
            out.append(p)
        elif isinstance(p, bool):
            out.append(RawButton(p, 1.0 if p else 0.0))
        else:
            pressed, value = p
            out.append(RawButton(bool(pressed), float(value)))
    return tuple(out)
