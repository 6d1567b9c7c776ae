"""Process-wide request counters for exporter self-observability."""

from __future__ import annotations

import threading


class RequestCounter:
    """Counts scrape requests that started and that completed with metrics."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._start = 0
        self._end = 0

    def count_start(self) -> None:
        with self._lock:
            self._start += 1

    def count_end(self) -> None:
        with self._lock:
            self._end += 1

    @property
    def started(self) -> int:
        return self._start

    @property
    def completed(self) -> int:
        return self._end
