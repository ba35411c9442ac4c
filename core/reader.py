"""Base snapshot reader abstraction"""
import abc
from typing import List, Optional

from core.state import RawDeviceState


class SnapshotReader(abc.ABC):
    @abc.abstractmethod
    def poll(self) -> List[Optional[RawDeviceState]]:
        """Read one snapshot synchronously."""
        raise NotImplementedError

    @abc.abstractmethod
    def start(self):
        raise NotImplementedError

    @abc.abstractmethod
    def stop(self):
        raise NotImplementedError

    @abc.abstractmethod
    def subscribe(self, callback):
        raise NotImplementedError
