"""Background garbage collector that periodically runs a clean-up callable."""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Callable


class GarbageCollectorConfigError(ValueError):
    """Raised when a garbage collector is configured with invalid values."""


class GarbageCollector:
    """Runs ``cleanup`` every ``interval`` seconds on a daemon thread.

    ``cleanup`` returns the number of items it removed. If it raises, the
    error is reported and collection carries on at the next tick.
    """

    def __init__(self, interval: float, cleanup: Callable[[], int]) -> None:
        if interval <= 0:
            raise GarbageCollectorConfigError(
                "bad GarbageCollector config: interval must be >0"
            )
        self._interval = interval
        self._cleanup = cleanup
        self._stop_event = threading.Event()
        self._stop_lock = threading.Lock()
        self._stop_requested = False
        self._thread: threading.Thread | None = None
        self._state_lock = threading.Lock()
        self._running = False

    def start(self) -> None:
        """Start automatic garbage collection."""
        with self._state_lock:
            self._running = True
        print(f"GarbageCollector: [{datetime.now()}] starting automatic clean-up...")
        self._thread = threading.Thread(
            target=self._loop, name="expirycache-gc", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop garbage collection and wait for the worker to finish.

        Calling this more than once is harmless.
        """
        with self._stop_lock:
            if self._stop_requested:
                return
            self._stop_requested = True
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def is_running(self) -> bool:
        """Report whether the collector's worker is active."""
        with self._state_lock:
            return self._running

    def _loop(self) -> None:
        while not self._stop_event.wait(self._interval):
            self._run()
        with self._state_lock:
            self._running = False
        print(f"GarbageCollector: [{datetime.now()}] stopped running...")

    def _run(self) -> None:
        try:
            deleted = self._cleanup()
        except Exception as exc:  # reported, never fatal to the worker
            print(f"GarbageCollector: [{datetime.now()}] - error: `{exc}`")
            return
        print(
            f"GarbageCollector: [{datetime.now()}] - ran clean up - "
            f"{deleted} items deleted"
        )