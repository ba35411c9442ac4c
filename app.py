"""Entry point for padmap

Polls attached gamepads, classifies them against a button map database and
logs named control state for known pads and the estimated active input for
unknown ones.
"""
import argparse
import logging
import threading
import time

from core.config import LOG_LEVELS, Settings
from database import Database
from devices.pygame_source import PygameSnapshotReader
from gamepad import Gamepad, UnknownGamepad, get_gamepads

LOG = logging.getLogger("padmap")


def describe(pad) -> str:
    if isinstance(pad, UnknownGamepad):
        origin = pad.estimate_origin()
        return f"[{pad.index}] unknown {pad.id!r} active={origin if origin else '-'}"
    if not isinstance(pad, Gamepad):
        raise TypeError(f"expected Gamepad or UnknownGamepad, got {type(pad).__name__}")
    held = [name for name in ("a", "b", "x", "y", "start", "back", "home",
                              "left_bumper", "right_bumper", "left_stick", "right_stick")
            if getattr(pad, name)]
    return (
        f"[{pad.index}] {pad.id!r} "
        f"L=({pad.left_x:+.2f},{pad.left_y:+.2f}) R=({pad.right_x:+.2f},{pad.right_y:+.2f}) "
        f"LT={pad.left_trigger:.2f} RT={pad.right_trigger:.2f} "
        f"dpad=({pad.dpad_x:+d},{pad.dpad_y:+d}) held={','.join(held) or '-'}"
    )


def changed_lines(last: dict, classified) -> list:
    """Describe pads whose state changed since the previous call.

    `last` maps slot index -> previous line; slots no longer present are pruned.
    """
    known, unknown = classified
    pads = [*known, *unknown]
    for index in set(last) - {pad.index for pad in pads}:
        del last[index]
    out = []
    for pad in pads:
        line = describe(pad)
        if last.get(pad.index) != line:
            last[pad.index] = line
            out.append(line)
    return out


def build_settings(args) -> Settings:
    settings = Settings.load(args.config) if args.config else Settings()
    for name in ("database", "hz", "log_level", "log_format"):
        val = getattr(args, name)
        if val is not None:
            setattr(settings, name, val)
    if args.debug_modules:
        settings.debug_modules = list(args.debug_modules)
    return settings


def main(argv=None):
    parser = argparse.ArgumentParser(description="padmap: gamepad button map monitor")
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument("--db", dest="database", help="Button map database file")
    parser.add_argument("--hz", type=int, help="Poll frequency")
    parser.add_argument("--once", action="store_true", help="Classify one snapshot and exit")
    parser.add_argument("--log-level", choices=list(LOG_LEVELS),
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-format",
                        help="Logging format string (default: %%(levelname)s:%%(name)s:%%(message)s)")
    parser.add_argument("--debug-modules", nargs="*", default=[],
                        help="Modules to set to DEBUG level (e.g., 'mapper', 'database', 'gamepad', 'pygame')")
    args = parser.parse_args(argv)

    settings = build_settings(args)
    logging.basicConfig(level=LOG_LEVELS[settings.log_level], format=settings.log_format)
    for module in settings.debug_modules:
        logging.getLogger(f"padmap.{module}").setLevel(logging.DEBUG)

    database = Database.load(settings.database)
    reader = PygameSnapshotReader(hz=settings.hz)

    if args.once:
        known, unknown = get_gamepads(reader.poll(), database)
        for pad in [*known, *unknown]:
            print(describe(pad))
        return 0

    last = {}

    def on_snapshot(snapshot):
        for line in changed_lines(last, get_gamepads(snapshot, database)):
            LOG.info("%s", line)

    reader.subscribe(on_snapshot)
    stop_event = threading.Event()
    try:
        reader.start()
        LOG.info("padmap running with %d stored map(s) — press Ctrl+C to stop", len(database))
        while not stop_event.is_set():
            time.sleep(0.5)
    except KeyboardInterrupt:
        LOG.info("shutdown requested")
    finally:
        reader.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
