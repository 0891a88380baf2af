"""Background thread that runs a maintenance task on a fixed interval."""

import threading
from collections.abc import Callable

from loguru import logger


class CacheMonitor:
    """Calls `task` every `interval_seconds` until stopped."""

    def __init__(self, task: Callable[[], object], interval_seconds: float):
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds}")
        self._task = task
        self.interval_seconds = interval_seconds
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self.runs = 0

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> "CacheMonitor":
        if self.running:
            return self
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="cache-monitor", daemon=True)
        self._thread.start()
        logger.info("Cache monitoring started (interval: {}s)", self.interval_seconds)
        return self

    def _loop(self) -> None:
        while not self._stop.wait(self.interval_seconds):
            try:
                self._task()
            except Exception:
                logger.exception("Cache maintenance task failed")
            self.runs += 1

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("Cache monitoring stopped")
