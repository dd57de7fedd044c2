from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

from .errors import ConfigurationError


@dataclass
class CaveConfig:
    width: int = 80
    height: int = 60
    fill_percent: int = 47
    smoothing_iterations: int = 5
    wall_threshold: int = 50
    room_threshold: int = 50
    connect_rooms: bool = True
    passage_radius: int = 1
    border_size: int = 1
    seed: Optional[str] = None
    use_random_seed: bool = False
    enable_metrics: bool = True

    def validate(self) -> "CaveConfig":
        """Reject out-of-range parameters before any stage runs. Returns self."""
        for name in ("width", "height"):
            value = _require_int(self, name)
            if value <= 0:
                raise ConfigurationError(name, f"must be > 0, got {value}")
        fill = _require_int(self, "fill_percent")
        if not 0 <= fill <= 100:
            raise ConfigurationError("fill_percent", f"must be within 0..100, got {fill}")
        for name in ("smoothing_iterations", "wall_threshold", "room_threshold", "passage_radius", "border_size"):
            value = _require_int(self, name)
            if value < 0:
                raise ConfigurationError(name, f"must be >= 0, got {value}")
        for name in ("connect_rooms", "use_random_seed", "enable_metrics"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(name, "must be a bool")
        if self.seed is not None and not isinstance(self.seed, str):
            raise ConfigurationError("seed", "must be a string or None")
        return self


def _require_int(config: CaveConfig, name: str) -> int:
    value = getattr(config, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(name, f"must be an int, got {value!r}")
    return value


ENV_PREFIX = "CAVEGEN_"
_FALSY = {"0", "false", "no", ""}


def apply_env_overrides(config: CaveConfig, environ: Optional[Mapping[str, str]] = None) -> CaveConfig:
    """Apply ``CAVEGEN_<FIELD>`` environment variables onto ``config`` in place.

    Field names map upper-cased (``CAVEGEN_FILL_PERCENT`` -> ``fill_percent``).
    Bool fields treat 0/false/no/empty as False; int fields must parse.
    """
    env = os.environ if environ is None else environ
    for f in fields(config):
        key = ENV_PREFIX + f.name.upper()
        if key not in env:
            continue
        raw = env[key].strip()
        current = getattr(config, f.name)
        if isinstance(current, bool):
            setattr(config, f.name, raw.lower() not in _FALSY)
        elif f.name == "seed":
            setattr(config, f.name, raw or None)
        else:
            try:
                setattr(config, f.name, int(raw))
            except ValueError:
                raise ConfigurationError(f.name, f"{key}={raw!r} is not an integer") from None
    return config


__all__ = ["CaveConfig", "apply_env_overrides", "ENV_PREFIX"]
