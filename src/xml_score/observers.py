"""Event sinks handed to the conversion components.

Components report what happened through an observer instead of reaching for a
module-level logger, so tests can inspect the exact events a conversion
emitted.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, Tuple

from xml_score.logging_setup import get_logger


class ConversionObserver(Protocol):
    def info(self, event: str, **fields: Any) -> None: ...

    def warning(self, event: str, **fields: Any) -> None: ...

    def error(self, event: str, **fields: Any) -> None: ...


class LoggingObserver:
    """Forward events to a structlog logger."""

    def __init__(self, name: str = "xml_score", logger=None):
        self._log = logger if logger is not None else get_logger(name)

    def info(self, event: str, **fields: Any) -> None:
        self._log.info(event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._log.warning(event, **fields)

    def error(self, event: str, **fields: Any) -> None:
        self._log.error(event, **fields)


class RecordingObserver:
    """Keep every event in memory, in emission order."""

    def __init__(self) -> None:
        self.events: List[Tuple[str, str, Dict[str, Any]]] = []

    def _record(self, level: str, event: str, fields: Dict[str, Any]) -> None:
        self.events.append((level, event, dict(fields)))

    def info(self, event: str, **fields: Any) -> None:
        self._record("info", event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._record("warning", event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._record("error", event, fields)

    def by_level(self, level: str) -> List[Tuple[str, Dict[str, Any]]]:
        return [(event, fields) for lvl, event, fields in self.events if lvl == level]


def resolve_observer(observer: Optional[ConversionObserver]) -> ConversionObserver:
    return observer if observer is not None else LoggingObserver()
