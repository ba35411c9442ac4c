"""Button map database: device id -> ButtonMap, persisted as `id,,,map` lines"""
import logging
import os
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Union

from mapper import ButtonMap, Pair

LOG = logging.getLogger("padmap.database")

DIVIDER = ",,,"


class Database:
    """Immutable id -> ButtonMap table.

    `insert` and `remove` return a new Database; existing references never
    see the change. `dropped` counts lines discarded by `decode`.
    """

    def __init__(self, maps: Optional[Mapping[str, ButtonMap]] = None, dropped: int = 0):
        self._maps: Mapping[str, ButtonMap] = MappingProxyType(dict(maps or {}))
        self.dropped = dropped

    @classmethod
    def decode(cls, text: str) -> "Database":
        maps: Dict[str, ButtonMap] = {}
        dropped = 0
        for line in (text or "").split("\n"):
            line = line.rstrip("\r")
            if not line.strip():
                continue
            fields = line.split(DIVIDER)
            if len(fields) != 2:
                LOG.debug("dropping malformed database line %r", line)
                dropped += 1
                continue
            device_id, map_text = fields
            maps[device_id] = ButtonMap(map_text)
        if dropped:
            LOG.warning("dropped %d malformed database line(s)", dropped)
        return cls(maps, dropped)

    def encode(self) -> str:
        lines = sorted(f"{device_id}{DIVIDER}{bm}" for device_id, bm in self._maps.items())
        return "".join(line + "\n" for line in lines)

    def insert(self, device_id: str, button_map: Union[ButtonMap, Iterable[Pair]]) -> "Database":
        if not isinstance(button_map, ButtonMap):
            button_map = ButtonMap.from_pairs(button_map)
        maps = dict(self._maps)
        maps[device_id] = button_map
        LOG.info("stored map for %r: %s", device_id, button_map)
        return Database(maps)

    def remove(self, device_id: str) -> "Database":
        maps = dict(self._maps)
        maps.pop(device_id, None)
        return Database(maps)

    @classmethod
    def load(cls, path: str) -> "Database":
        if not os.path.exists(path):
            LOG.info("no database at %s, starting empty", path)
            return cls()
        with open(path, "r", encoding="utf-8") as f:
            return cls.decode(f.read())

    def save(self, path: str):
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(self.encode())

    def get(self, device_id: str, default=None) -> Optional[ButtonMap]:
        return self._maps.get(device_id, default)

    def __getitem__(self, device_id: str) -> ButtonMap:
        return self._maps[device_id]

    def __contains__(self, device_id) -> bool:
        return device_id in self._maps

    def __iter__(self) -> Iterator[str]:
        return iter(self._maps)

    def __len__(self) -> int:
        return len(self._maps)

    def items(self):
        return self._maps.items()

    def __eq__(self, other):
        if not isinstance(other, Database):
            return NotImplemented
        return dict(self._maps) == dict(other._maps)

    def __repr__(self):
        return f"Database({len(self._maps)} maps)"
