"""Background task that periodically mutates one random node."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from .store import NodeStore

logger = logging.getLogger(__name__)


class UpdateLoop:
    """
    Calls ``NodeStore.update_random`` once every ``interval`` seconds.

    Scheduling is fixed-delay: the next wait starts when the previous update
    returns, so updates are at least ``interval`` apart and ticks are never
    coalesced. The first update happens one interval after ``start``.
    """

    def __init__(self, store: NodeStore, interval: float) -> None:
        if interval <= 0:
            raise ValueError(f"update interval must be greater than zero, got {interval}")
        self.store = store
        self.interval = interval
        self.ticks = 0
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return (
            self._thread is not None
            and self._thread.is_alive()
            and not self._stop_event.is_set()
        )

    def start(self) -> None:
        if self.is_running:
            return
        # Each run gets its own event; a thread left over from a timed-out
        # stop keeps its already-set event and exits on its own.
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run, args=(self._stop_event,), name="NodeUpdateLoop", daemon=True
        )
        self._thread.start()
        logger.info("Update loop started (interval %.2fs)", self.interval)

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        self._stop_event.set()
        thread = self._thread
        if thread is None:
            return
        thread.join(timeout=timeout)
        if thread.is_alive():
            logger.warning("Update loop did not stop within %.2fs", timeout)
            return
        self._thread = None
        logger.info("Update loop stopped after %d updates", self.ticks)

    def _run(self, stop_event: threading.Event) -> None:
        # Event.wait returns True once stop() has been requested.
        while not stop_event.wait(self.interval):
            try:
                self.store.update_random()
            except Exception:  # pylint: disable=broad-except
                logger.exception("Background node update failed")
                continue
            self.ticks += 1
