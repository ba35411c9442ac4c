"""Button map codec: Destination -> Origin pairs <-> compact `dest:[-]{a|b}N,...` text"""
import logging
from typing import Dict, Iterable, Iterator, Optional, Tuple

from core.origin import AXIS_PAIRS, Destination, Origin, OriginType

LOG = logging.getLogger("padmap.mapper")

ENTRY_SEP = ","
KEY_SEP = ":"

Pair = Tuple[Destination, Origin]


def _group(pairs: Iterable[Pair]) -> Dict[Destination, Origin]:
    grouped = {}
    for dest, origin in pairs:
        grouped[dest] = origin  # last write wins
    return grouped


def decouple_axes(grouped: Dict[Destination, Origin]) -> Dict[Destination, Origin]:
    """Drop the negative half when both halves of a stick read the same axis.

    Both halves bound to one axis would otherwise be subtracted twice and
    read as double the magnitude.
    """
    out = dict(grouped)
    for negative, positive in AXIS_PAIRS:
        neg = out.get(negative)
        pos = out.get(positive)
        if neg is None or pos is None:
            continue
        if neg.type is OriginType.AXIS and pos.type is OriginType.AXIS and neg.index == pos.index:
            LOG.debug("%s and %s share axis %d; dropping %s", negative, positive, neg.index, negative)
            del out[negative]
    return out


def render_entry(dest: Destination, origin: Origin) -> str:
    return f"{dest.value}{KEY_SEP}{origin}"


class ButtonMap:
    """Parsed Destination -> Origin relation for one device.

    The encoded text is kept alongside the parsed lookup; `str()` returns it
    unchanged so a map read from a database is written back as-is.
    """

    def __init__(self, text: str = ""):
        self._text = text
        self._origins: Dict[Destination, Origin] = {}
        self.dropped = 0
        for segment in text.split(ENTRY_SEP):
            if not segment.strip():
                continue
            name, sep, origin_text = segment.partition(KEY_SEP)
            if not sep:
                self.dropped += 1
                continue
            try:
                dest = Destination.parse(name)
                origin = Origin.parse(origin_text)
            except ValueError:
                LOG.debug("skipping unparseable map entry %r", segment)
                self.dropped += 1
                continue
            # first matching segment wins
            self._origins.setdefault(dest, origin)

    @classmethod
    def parse(cls, text: str) -> "ButtonMap":
        return cls(text)

    @staticmethod
    def encode(pairs: Iterable[Pair]) -> str:
        grouped = decouple_axes(_group(pairs))
        entries = sorted(render_entry(d, o) for d, o in grouped.items())
        return ENTRY_SEP.join(entries)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Pair]) -> "ButtonMap":
        return cls(cls.encode(pairs))

    def get(self, destination: Destination) -> Optional[Origin]:
        return self._origins.get(destination)

    def items(self):
        return self._origins.items()

    def __getitem__(self, destination: Destination) -> Origin:
        return self._origins[destination]

    def __contains__(self, destination) -> bool:
        return destination in self._origins

    def __iter__(self) -> Iterator[Destination]:
        return iter(self._origins)

    def __len__(self) -> int:
        return len(self._origins)

    def __eq__(self, other):
        if not isinstance(other, ButtonMap):
            return NotImplemented
        return self._origins == other._origins

    def __hash__(self):
        return hash(frozenset(self._origins.items()))

    def __str__(self):
        return self._text

    def __repr__(self):
        return f"ButtonMap({self._text!r})"


def lookup(text: str, destination: Destination) -> Optional[Origin]:
    """Resolve one destination straight from encoded text."""
    return ButtonMap(text).get(destination)
