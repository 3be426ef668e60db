"""
Leveled diagnostics for the static router.

The loader and the forwarding engine never print directly. They are handed
a Diagnostics object and emit events into it; the collector keeps the events
for inspection and, when echo is on, renders them on a stream separate from
the decision output.
"""

import sys
import threading
from dataclasses import dataclass
from typing import Optional, TextIO

from .colors import error, warn, info, debug


# Verbosity levels. An event is kept when its level <= the collector level.
SILENT = 0
ERROR = 1
WARN = 2
INFO = 3
DEBUG = 4

LEVEL_NAMES = {
    ERROR: "error",
    WARN: "warning",
    INFO: "info",
    DEBUG: "debug",
}

_RENDERERS = {
    ERROR: error,
    WARN: warn,
    INFO: info,
    DEBUG: debug,
}


@dataclass(frozen=True)
class DiagnosticEvent:
    """A single diagnostic message."""
    level: int
    message: str

    @property
    def level_name(self) -> str:
        return LEVEL_NAMES.get(self.level, str(self.level))


class Diagnostics:
    """
    Collects leveled diagnostic events and optionally echoes them.

    With record=False events are only echoed, so long batch runs do not
    accumulate them.
    """

    def __init__(self, level: int = WARN, echo: bool = True,
                 stream: Optional[TextIO] = None, record: bool = True):
        if level < SILENT:
            raise ValueError(f"Invalid diagnostic level: {level}")
        self.level = level
        self.echo = echo
        self.stream = stream
        self.record = record
        self.events: list[DiagnosticEvent] = []
        self._lock = threading.Lock()

    def enabled(self, level: int) -> bool:
        """Return True if events at this level would be recorded."""
        return SILENT < level <= self.level

    def emit(self, level: int, message: str) -> None:
        """Record an event and render it if echo is enabled."""
        if not self.enabled(level):
            return
        event = DiagnosticEvent(level, message)
        with self._lock:
            if self.record:
                self.events.append(event)
            if self.echo:
                renderer = _RENDERERS.get(min(level, DEBUG), debug)
                renderer(message, file=self.stream or sys.stderr)

    def error(self, message: str) -> None:
        self.emit(ERROR, message)

    def warn(self, message: str) -> None:
        self.emit(WARN, message)

    def info(self, message: str) -> None:
        self.emit(INFO, message)

    def debug(self, message: str) -> None:
        self.emit(DEBUG, message)

    def messages(self, level: Optional[int] = None) -> list[str]:
        """Return recorded messages, optionally only those at one level."""
        with self._lock:
            return [e.message for e in self.events if level is None or e.level == level]
