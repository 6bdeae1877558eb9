# logger_utils.py - leveled logging and timing metrics for the autocompleter

from __future__ import annotations

import os
import sys
import time
from datetime import datetime
from typing import Dict, Optional, TextIO

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}

# shared state for every Log handed out by get_logger()
_DEFAULTS = {"level": "INFO", "path": None, "use_color": True}
_LOGGERS: Dict[str, "Log"] = {}


class Log:
    """Lightweight logger for writing messages and tracking metrics."""

    COLORS = {
        "DEBUG": "\033[90m",  # gray
        "INFO": "\033[94m",  # blue
        "WARNING": "\033[93m",  # yellow
        "ERROR": "\033[91m",  # red
        "RESET": "\033[0m",
    }

    def __init__(
        self,
        name: str = "catalog_autocompleter",
        level: str = "INFO",
        path: Optional[str] = None,
        stream: Optional[TextIO] = None,
        use_color: bool = True,
    ) -> None:
        self.name = name
        self.set_level(level)
        self.path = path
        self.stream = stream
        self.use_color = use_color

    def set_level(self, level: str) -> None:
        level = level.upper()
        if level not in LEVELS:
            raise ValueError(f"unknown log level {level!r}")
        self.level = level

    def enabled(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS[self.level]

    def write(self, level: str, msg: str) -> None:
        """
        Emit one log line if `level` passes the threshold.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | name | message
        """
        if not self.enabled(level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {self.name} | {msg}"

        if self.path:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")

        # stream is resolved late so pytest's capsys sees the output
        out = self.stream or sys.stderr
        if self.use_color and out.isatty():
            out.write(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}\n")
        else:
            out.write(line + "\n")

    def debug(self, msg: str) -> None:
        self.write("DEBUG", msg)

    def info(self, msg: str) -> None:
        self.write("INFO", msg)

    def warning(self, msg: str) -> None:
        self.write("WARNING", msg)

    def error(self, msg: str) -> None:
        self.write("ERROR", msg)

    def metric(self, tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timing, counts).
        Example: bulk load done: 0.123s
        """
        self.info(f"{tag}: {value}{unit}")

    def time_block(self, label: str) -> "_Timer":
        """
        Helper for measuring execution time of a code block.
            with log.time_block("catalog load"):
                trie.load_many(words)
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, log: Log, label: str) -> None:
        self.log = log
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self) -> "_Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed, 3), "s")


def get_logger(name: str) -> Log:
    """Return the shared Log for `name`, created with the current defaults."""
    log = _LOGGERS.get(name)
    if log is None:
        log = Log(
            name,
            level=_DEFAULTS["level"],
            path=_DEFAULTS["path"],
            use_color=_DEFAULTS["use_color"],
        )
        _LOGGERS[name] = log
    return log


def configure(
    level: Optional[str] = None,
    path: Optional[str] = None,
    use_color: Optional[bool] = None,
) -> None:
    """Adjust the defaults and every logger handed out so far."""
    if level is not None:
        level = level.upper()
        if level not in LEVELS:
            raise ValueError(f"unknown log level {level!r}")
        _DEFAULTS["level"] = level
    if path is not None:
        # empty string switches file logging off
        _DEFAULTS["path"] = path or None
    if use_color is not None:
        _DEFAULTS["use_color"] = use_color
    for log in _LOGGERS.values():
        log.set_level(_DEFAULTS["level"])
        log.path = _DEFAULTS["path"]
        log.use_color = _DEFAULTS["use_color"]
