"""Serialization options.

Config is immutable; use Config.replace() to derive a modified copy.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from svg_serializer.exceptions import ConfigError

logger = logging.getLogger(__name__)

SUPPORTED_UNITS = ("em", "ex", "px", "in", "cm", "mm", "pt", "pc")

DEFAULT_UNIT = "mm"
DEFAULT_DECIMALS = 10000

CONFIG_ENV_VAR = "SVG_SERIALIZER_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/svg-serializer/config.yaml")

# Keys that may appear in a YAML config file
_FILE_KEYS = ("unit", "decimals")

StatusCallback = Callable[[float], None]


@dataclass(frozen=True)
class Config:
    """Options for one serialize() call.

    Attributes:
        unit: Length unit of the document width/height attributes.
        decimals: Number of subdivisions coordinates are rounded to
            (10000 rounds to 1/10000).
        status_callback: Optional progress sink, called with a value in 0..100.
    """

    unit: str = DEFAULT_UNIT
    decimals: int = DEFAULT_DECIMALS
    status_callback: Optional[StatusCallback] = None

    def __post_init__(self) -> None:
        if self.unit not in SUPPORTED_UNITS:
            raise ConfigError(
                f"Unsupported unit {self.unit!r}; expected one of {', '.join(SUPPORTED_UNITS)}"
            )
        # bool is an int subclass, reject it explicitly
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise ConfigError(f"decimals must be an integer, got {self.decimals!r}")
        if self.decimals <= 0:
            raise ConfigError(f"decimals must be positive, got {self.decimals}")
        if self.status_callback is not None and not callable(self.status_callback):
            raise ConfigError("status_callback must be callable")

    def replace(self, **changes: Any) -> Config:
        """Return a copy with the given fields changed."""
        return replace(self, **changes)

    def report(self, progress: float) -> None:
        """Forward progress to the status callback, if one is set."""
        if self.status_callback is not None:
            self.status_callback(progress)

    @classmethod
    def from_options(cls, options: Config | Mapping[str, Any] | None) -> Config:
        """Build a Config from None, a mapping of overrides, or a Config."""
        if options is None:
            return cls()
        if isinstance(options, Config):
            return options
        if not isinstance(options, Mapping):
            raise ConfigError(f"options must be a Config or a mapping, got {type(options).__name__}")

        known = {f.name for f in fields(cls)}
        # camelCase alias used by callers porting option objects
        values = dict(options)
        if "statusCallback" in values:
            values["status_callback"] = values.pop("statusCallback")
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigError(f"Unknown option(s): {', '.join(unknown)}")
        return cls(**values)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> Config:
        """Load options from a YAML file.

        Lookup order: ``path``, then $SVG_SERIALIZER_CONFIG, then
        ~/.config/svg-serializer/config.yaml. Defaults are returned when no
        file is found. An explicit ``path`` that does not exist is an error.
        """
        explicit = path is not None
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            if env_path:
                path = env_path
                explicit = True
            else:
                path = DEFAULT_CONFIG_PATH.expanduser()

        config_path = Path(path)
        if not config_path.is_file():
            if explicit:
                raise ConfigError(f"Config file not found: {config_path}")
            return cls()

        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")

        unknown = sorted(set(data) - set(_FILE_KEYS))
        if unknown:
            raise ConfigError(f"Unknown key(s) in {config_path}: {', '.join(unknown)}")

        logger.debug("Loaded config from %s: %s", config_path, data)
        return cls(**data)
