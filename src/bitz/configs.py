# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import toml

from bitz.constants import DEFAULT_CAPACITY, DEFAULT_LOGGER_DIR, DEFAULT_RENDER_WIDTH
from bitz.errors import ConfigError

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class BitSetConfig:
    capacity: int = DEFAULT_CAPACITY
    fill: bool = False


@dataclass
class RenderConfig:
    width: int = DEFAULT_RENDER_WIDTH
    start: int = 0


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    file: Optional[str] = None
    log_dir: str = DEFAULT_LOGGER_DIR


@dataclass
class BitzConfig:
    bitset: BitSetConfig = field(default_factory=BitSetConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_toml(cls, path: Optional[str]) -> "BitzConfig":
        config = cls()
        if path:
            config.apply_toml(path)
        return config

    def apply_toml(self, path: str) -> None:
        try:
            config = toml.load(path)
        except (OSError, toml.TomlDecodeError) as e:
            raise ConfigError(f"Cannot load config file {path}: {e}") from e

        if "bitset" in config:
            bitset = config["bitset"]
            self.bitset.capacity = self._non_negative_int(
                bitset, "capacity", self.bitset.capacity
            )
            self.bitset.fill = self._bool(bitset, "fill", self.bitset.fill)

        if "render" in config:
            render = config["render"]
            self.render.width = self._non_negative_int(render, "width", self.render.width)
            self.render.start = self._non_negative_int(render, "start", self.render.start)

        if "logging" in config:
            logging = config["logging"]
            level = str(logging.get("level", self.logging.level)).upper()
            if level not in LOG_LEVELS:
                raise ConfigError(f"Unknown log level: {level}")
            self.logging.level = level
            self.logging.file = self._empty_str(self._str(logging, "file", self.logging.file))
            self.logging.log_dir = self._str(logging, "log-dir", self.logging.log_dir)

    @property
    def capacity(self) -> int:
        return self.bitset.capacity

    @property
    def fill(self) -> bool:
        return self.bitset.fill

    @property
    def width(self) -> int:
        return self.render.width

    @property
    def start(self) -> int:
        return self.render.start

    @staticmethod
    def _non_negative_int(section: Dict[str, Any], key: str, default: int) -> int:
        value = section.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"'{key}' must be an integer, got {value!r}")
        if value < 0:
            raise ConfigError(f"'{key}' must be non-negative, got {value}")
        return value

    @staticmethod
    def _bool(section: Dict[str, Any], key: str, default: bool) -> bool:
        value = section.get(key, default)
        if not isinstance(value, bool):
            raise ConfigError(f"'{key}' must be a boolean, got {value!r}")
        return value

    @staticmethod
    def _str(section: Dict[str, Any], key: str, default: Optional[str]) -> Optional[str]:
        value = section.get(key, default)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"'{key}' must be a string, got {value!r}")
        return value

    @staticmethod
    def _empty_str(value: Optional[str]) -> Optional[str]:
        if value == "":
            return None
        return value
