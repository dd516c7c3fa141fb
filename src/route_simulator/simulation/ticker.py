"""Tick drivers: a wall-clock interval thread and a manual one for tests."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

_logger = logging.getLogger(__name__)


class ManualTicker:
    """Ticker driven explicitly via :meth:`fire`; no wall clock involved."""

    def __init__(self) -> None:
        self._callback: Callable[[], None] | None = None
        self.interval_s: float | None = None
        self.initial_delay_s: float | None = None

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(
        self,
        callback: Callable[[], None],
        interval_s: float,
        initial_delay_s: float = 0.0,
    ) -> None:
        self._callback = callback
        self.interval_s = interval_s
        self.initial_delay_s = initial_delay_s

    def stop(self) -> None:
        self._callback = None

    def fire(self, n: int = 1) -> int:
        """Invoke the callback up to *n* times; returns how many ran.

        Stops early if the callback stops the ticker (e.g. on arrival).
        """
        fired = 0
        for _ in range(n):
            if self._callback is None:
                break
            self._callback()
            fired += 1
        return fired


class IntervalTicker:
    """Calls *callback* every *interval_s* seconds on a daemon thread.

    The first tick fires after *initial_delay_s* (immediately by default).
    Exceptions raised by the callback are logged and do not stop the ticker.
    A ``stop()`` issued from inside a tick only ends the run that tick
    belongs to, even if a newer run has been started meanwhile.
    """

    def __init__(self, name: str = "SimulationTicker", join_timeout_s: float = 2.0) -> None:
        self._name = name
        self._join_timeout_s = join_timeout_s
        self._lock = threading.Lock()
        self._start_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._run_events: dict[threading.Thread, threading.Event] = {}

    @property
    def running(self) -> bool:
        with self._lock:
            return self._thread is not None and not self._stop_event.is_set()

    def start(
        self,
        callback: Callable[[], None],
        interval_s: float,
        initial_delay_s: float = 0.0,
    ) -> None:
        """Start ticking; an already running ticker is stopped first."""
        if interval_s <= 0:
            raise ValueError("interval_s must be > 0")
        with self._start_lock:
            self.stop()
            stop_event = threading.Event()
            thread = threading.Thread(
                target=self._run,
                args=(callback, interval_s, initial_delay_s, stop_event),
                daemon=True,
                name=self._name,
            )
            with self._lock:
                self._stop_event = stop_event
                self._thread = thread
                self._run_events[thread] = stop_event
            thread.start()

    def stop(self) -> None:
        """Signal the tick thread to stop and join it (unless called from it)."""
        current = threading.current_thread()
        with self._lock:
            own_event = self._run_events.get(current)
            if own_event is not None:
                own_event.set()
                if self._thread is current:
                    self._thread = None
                return
            self._stop_event.set()
            thread = self._thread
            self._thread = None
        if thread is not None:
            thread.join(timeout=self._join_timeout_s)

    def _run(
        self,
        callback: Callable[[], None],
        interval_s: float,
        initial_delay_s: float,
        stop_event: threading.Event,
    ) -> None:
        try:
            if initial_delay_s > 0:
                stop_event.wait(initial_delay_s)
            while not stop_event.is_set():
                try:
                    callback()
                except Exception:
                    _logger.exception("Tick callback failed")
                stop_event.wait(interval_s)
        finally:
            with self._lock:
                self._run_events.pop(threading.current_thread(), None)
