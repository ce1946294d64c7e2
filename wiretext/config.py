"""Configuration management for wiretext."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from wiretext.buffer import DEFAULT_MAX_CAPACITY
from wiretext.exceptions import ConfigError
from wiretext.quote import MIN_GROWTH, RENDER_BUFFER_SIZE
from wiretext.util import env_bool, parse_bool

TRACE_ENV = "WIRETEXT_TRACE"


def get_config_dir() -> Path:
    """Get platform-appropriate configuration directory.

    - Windows: %APPDATA%/wiretext
    - macOS: ~/Library/Application Support/wiretext
    - Linux: ~/.config/wiretext (following XDG spec)
    """
    if sys.platform == "win32":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "wiretext"
        return Path.home() / ".wiretext"
    elif sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "wiretext"
    else:
        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            return Path(xdg_config) / "wiretext"
        return Path.home() / ".config" / "wiretext"


def _trace_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return parse_bool(value)
    raise ConfigError(f"trace must be a boolean, got {value!r}")


@dataclass
class Config:
    """wiretext configuration."""

    render_buffer_size: int = RENDER_BUFFER_SIZE
    max_capacity: int = DEFAULT_MAX_CAPACITY
    trace: bool = False

    def __post_init__(self) -> None:
        if self.render_buffer_size < 1:
            raise ConfigError(
                f"render_buffer_size must be at least 1, got {self.render_buffer_size}"
            )
        if self.max_capacity < MIN_GROWTH:
            raise ConfigError(
                f"max_capacity must be at least {MIN_GROWTH}, got {self.max_capacity}"
            )

    @classmethod
    def load(cls, config_dir: Path | None = None) -> Config:
        """Load configuration from disk.

        Missing or corrupted files give the defaults; values that are present
        but out of range raise ConfigError.
        """
        if config_dir is None:
            config_dir = get_config_dir()

        config_file = config_dir / "config.json"
        if not config_file.exists():
            return cls()

        try:
            data = json.loads(config_file.read_text())
            return cls(
                render_buffer_size=int(data.get("render_buffer_size", cls.render_buffer_size)),
                max_capacity=int(data.get("max_capacity", cls.max_capacity)),
                trace=_trace_flag(data.get("trace", False)),
            )
        except (json.JSONDecodeError, AttributeError):
            # Return defaults if config is corrupted
            return cls()
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid value in {config_file}: {e}") from e

    def save(self, config_dir: Path | None = None) -> None:
        """Save configuration to disk."""
        if config_dir is None:
            config_dir = get_config_dir()

        config_dir.mkdir(parents=True, exist_ok=True)
        config_file = config_dir / "config.json"

        data = {
            "render_buffer_size": self.render_buffer_size,
            "max_capacity": self.max_capacity,
        }
        if self.trace:
            data["trace"] = self.trace

        config_file.write_text(json.dumps(data, indent=2))

    def apply_env(self, environ: Mapping[str, str] | None = None) -> Config:
        """Turn tracing on when ``WIRETEXT_TRACE`` is set to a true value."""
        if env_bool(TRACE_ENV, environ):
            self.trace = True
        return self
