"""Snapshot reader backed by pygame.joystick

This module provides `PygameSnapshotReader`, which polls every joystick pygame
knows about and emits a snapshot (list of RawDeviceState, one per slot) to
subscribers.
"""
import threading
import time
import logging

try:
    import pygame
except Exception:
    pygame = None

from core.reader import SnapshotReader
from core.state import RawButton, RawDeviceState

LOG = logging.getLogger("padmap.pygame")


def read_joystick(js) -> RawDeviceState:
    """Convert one pygame joystick into a RawDeviceState.

    Hats are appended after the real axes as an (x, y) axis pair each, with
    y flipped so that down is positive like the sticks.
    """
    axes = [js.get_axis(i) for i in range(js.get_numaxes())]
    for i in range(js.get_numhats()):
        hx, hy = js.get_hat(i)
        axes.extend([float(hx), float(-hy)])
    buttons = []
    for i in range(js.get_numbuttons()):
        pressed = bool(js.get_button(i))
        buttons.append(RawButton(pressed, 1.0 if pressed else 0.0))
    name = js.get_name() or ""
    return RawDeviceState(
        id=f"{name} ({js.get_guid()})",
        index=js.get_instance_id(),
        axes=tuple(axes),
        buttons=tuple(buttons),
        connected=bool(js.get_init()),
        timestamp=time.monotonic() * 1000.0,
        # SDL does not report the W3C layout tag
        mapping="",
    )


class PygameSnapshotReader(SnapshotReader):
    """Reads all attached joysticks via pygame.

    Emits lists like:
      [RawDeviceState(id='Xbox Controller (0300...)', index=0, axes=(...), ...), ...]
    """

    def __init__(self, hz: int = 60):
        self.hz = hz
        self._subs = []
        self._t = None
        self._stop = threading.Event()
        self._joysticks = {}
        self._ready = False

    def _init(self):
        if self._ready:
            return True
        if pygame is None:
            LOG.warning("pygame not available — PygameSnapshotReader disabled")
            return False
        pygame.init()
        pygame.joystick.init()
        self._ready = True
        return True

    def _refresh(self):
        # keyed by instance id so a swap between polls with the same count is noticed
        current = {}
        for i in range(pygame.joystick.get_count()):
            js = pygame.joystick.Joystick(i)
            instance_id = js.get_instance_id()
            if instance_id not in self._joysticks:
                js.init()
                LOG.info(f"Found joystick: {js.get_name()} (index {i}, axes={js.get_numaxes()}, buttons={js.get_numbuttons()}, hats={js.get_numhats()})")
                current[instance_id] = js
            else:
                current[instance_id] = self._joysticks[instance_id]
        for instance_id in set(self._joysticks) - set(current):
            LOG.info("Joystick %d removed", instance_id)
        self._joysticks = current

    def poll(self):
        if not self._init():
            return []
        pygame.event.pump()
        self._refresh()
        return [read_joystick(js) for _, js in sorted(self._joysticks.items())]

    def subscribe(self, callback):
        self._subs.append(callback)

    def start(self):
        self._stop.clear()
        self._t = threading.Thread(target=self._loop, name="PygameSnapshotReader", daemon=True)
        self._t.start()

    def stop(self):
        self._stop.set()
        if self._t:
            self._t.join(timeout=1.0)

    def _emit(self, snapshot):
        LOG.debug("raw snapshot -> %s", snapshot)
        for cb in self._subs:
            try:
                cb(snapshot)
            except Exception:
                LOG.exception("subscriber callback failed")

    def _loop(self):
        while not self._stop.is_set():
            try:
                self._emit(self.poll())
                time.sleep(1.0 / self.hz)
            except Exception:
                LOG.exception("error reading joysticks; will retry")
                self._joysticks = {}
                time.sleep(1.0)
