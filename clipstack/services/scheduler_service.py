#!/usr/bin/env python3
"""
Scheduler Service - Repeating timers on background threads
"""
import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class RepeatingTimer:
    """Calls a function every interval seconds until cancelled"""

    def __init__(self, interval: float, callback: Callable[[], None]):
        self.interval = interval
        self.callback = callback
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._worker, daemon=True, name="clipstack-timer")

    def start(self):
        self._thread.start()

    def _worker(self):
        """Background loop; an exception in one tick does not stop the timer"""
        while not self._stopped.wait(self.interval):
            try:
                self.callback()
            except Exception as e:
                logger.error(f"Timer callback error: {e}")

    def cancel(self):
        self._stopped.set()

    @property
    def cancelled(self) -> bool:
        return self._stopped.is_set()


class ThreadingScheduler:
    """Scheduler handing out RepeatingTimer instances"""

    def schedule(self, interval: float, callback: Callable[[], None]) -> RepeatingTimer:
        """
        Start calling callback every interval seconds

        Args:
            interval: Seconds between calls, must be positive
            callback: Function to call

        Returns:
            The running timer; call cancel() to stop it
        """
        if interval <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval}")
        timer = RepeatingTimer(interval, callback)
        timer.start()
        logger.info(f"Scheduled timer every {interval}s")
        return timer
