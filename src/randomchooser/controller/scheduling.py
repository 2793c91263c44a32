"""
Tick Scheduling
===============
Decouples the selection controller from any particular timer primitive.

Why is this file needed?
------------------------
1. Testability: The controller only talks to the Scheduler protocol, so tests
   can fire ticks by hand instead of waiting on a real clock.
2. Qt integration: QtScheduler maps the protocol onto QTimer, which delivers
   its timeouts on the GUI thread and never blocks it.

Classes:
    Scheduler: Protocol for a repeating tick plus deferred one-shot calls.
    QtScheduler: QTimer-backed implementation.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from PySide6.QtCore import QObject, QTimer, Qt

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    def start_repeating(self, interval_ms: int, callback: Callable[[], None]) -> None: ...
    def stop_repeating(self) -> None: ...
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None: ...


class QtScheduler(QObject):
    """
    One repeating QTimer for spin ticks, single-shot timers for deferred work.

    Deferred calls are fire-and-forget: they are not cancelled here. Callers
    that need to ignore stale callbacks must check a token of their own.
    """

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._timer = QTimer(self)
        self._timer.setTimerType(Qt.PreciseTimer)
        self._timer.timeout.connect(self._on_timeout)
        self._callback: Optional[Callable[[], None]] = None

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    def start_repeating(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._timer.setInterval(interval_ms)
        self._timer.start()
        logger.debug(f"Tick timer armed at {interval_ms} ms")

    def stop_repeating(self) -> None:
        self._timer.stop()
        self._callback = None
        logger.debug("Tick timer disarmed")

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        QTimer.singleShot(delay_ms, self, callback)

    def _on_timeout(self) -> None:
        # A timeout already queued when stop_repeating() ran must not tick
        if self._callback is not None:
            self._callback()
