import asyncio
import json
import logging
from pathlib import Path
from typing import Iterable, Protocol

from ..config import settings

logger = logging.getLogger(__name__)


class LogSink(Protocol):
    async def write(self, payload: dict) -> None: ...


def _append_record(path: Path, record: str) -> None:
    with path.open("a", encoding="utf-8") as handle:
        handle.write(record)


class FileLogSink:
    """Append access events to a JSON-lines file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = asyncio.Lock()

    async def write(self, payload: dict) -> None:
        record = json.dumps(payload, sort_keys=True, default=str) + "\n"
        async with self._lock:
            await asyncio.to_thread(_append_record, self.path, record)


class CompositeLogSink:
    """Fan a payload out to several sinks; one failing sink does not stop the others."""

    def __init__(self, sinks: Iterable[LogSink]) -> None:
        self._sinks = tuple(sinks)

    async def write(self, payload: dict) -> None:
        if not self._sinks:
            return
        results = await asyncio.gather(
            *(sink.write(payload) for sink in self._sinks), return_exceptions=True
        )
        for sink, result in zip(self._sinks, results):
            if isinstance(result, Exception):
                logger.error("%s write failed: %s", type(sink).__name__, result)


def build_default_sink() -> LogSink:
    sinks: list[LogSink] = []
    if settings.access_log_enabled:
        sinks.append(FileLogSink(settings.access_log_path))
    return CompositeLogSink(sinks)
