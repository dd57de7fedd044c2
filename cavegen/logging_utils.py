"""Minimal structured logging helper.

Emits one ``key=value`` line per event with a timestamp and level, or a
compact JSON object when JSON mode is on. Generation code logs events rather
than prose so that diagnostics scripts can grep or parse them.

Usage:
    from cavegen.logging_utils import get_logger
    log = get_logger("cavegen.pipeline")
    log.info(event="cave_generated", seed="abc", rooms=4)

Environment:
    CAVEGEN_LOG_LEVEL  debug|info|warn|error (default info)
    CAVEGEN_LOG_JSON   1/true/yes/on to switch to JSON lines

Reserved keys: level, ts, logger. ``None`` values are dropped.
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Optional, TextIO

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_TRUTHY = ("1", "true", "TRUE", "yes", "on")

_settings = {
    "level": LEVELS.get(os.getenv("CAVEGEN_LOG_LEVEL", "info"), 20),
    "json": os.getenv("CAVEGEN_LOG_JSON", "0") in _TRUTHY,
}


def configure(level: Optional[str] = None, json_mode: Optional[bool] = None) -> None:
    """Override the level / output mode picked up from the environment."""
    if level is not None:
        if level not in LEVELS:
            raise ValueError(f"unknown log level {level!r}")
        _settings["level"] = LEVELS[level]
    if json_mode is not None:
        _settings["json"] = bool(json_mode)


def _format(level: str, **fields) -> str:
    if _settings["json"]:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            parts.append(f"{k}={str(v).replace(' ', '_')}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str, stream: Optional[TextIO] = None):
        self.name = name
        self.stream = stream

    def enabled(self, lvl: str) -> bool:
        return LEVELS[lvl] >= _settings["level"]

    def _log(self, lvl: str, **fields):
        if not self.enabled(lvl):
            return
        fields.setdefault("logger", self.name)
        out = self.stream or (sys.stderr if lvl == "error" else sys.stdout)
        print(_format(lvl, **fields), file=out)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("cavegen")

__all__ = ["LEVELS", "configure", "get_logger", "log"]
