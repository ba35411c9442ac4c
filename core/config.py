"""Monitor settings loaded from a YAML file"""
import logging
from dataclasses import dataclass, field, fields
from typing import List

import yaml

LOG = logging.getLogger("padmap.config")

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass
class Settings:
    database: str = "padmap.db"
    hz: int = 60
    log_level: str = "INFO"
    log_format: str = "%(levelname)s:%(name)s:%(message)s"
    debug_modules: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        known = {f.name: f for f in fields(cls)}
        unknown = set(data) - set(known)
        if unknown:
            raise ValueError(f"unknown settings: {', '.join(sorted(unknown))}")
        settings = cls(**data)
        if not isinstance(settings.hz, int) or settings.hz <= 0:
            raise ValueError(f"hz must be a positive integer, got {settings.hz!r}")
        if settings.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {settings.log_level!r}")
        if not isinstance(settings.debug_modules, list):
            raise ValueError("debug_modules must be a list")
        return settings

    @classmethod
    def load(cls, path: str) -> "Settings":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping at top level")
        LOG.debug("loaded settings from %s: %s", path, data)
        return cls.from_dict(data)
