"""Thread-safe container for the simulated node records."""

from __future__ import annotations

import logging
import random
from contextlib import contextmanager
from datetime import datetime, timezone
from threading import Condition, Lock
from typing import Callable, Iterator, List, Optional

from .models import NodeRecord, node_name

logger = logging.getLogger(__name__)

VALUE_RANGE = 100


class StoreNotInitializedError(RuntimeError):
    """Raised when the store is used before ``initialize`` was called."""


class ReadWriteLock:
    """
    Shared/exclusive lock.

    Any number of readers may hold the lock together; a writer holds it alone.
    A waiting writer blocks new readers so updates are not starved by reads.
    """

    def __init__(self) -> None:
        self._cond = Condition(Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NodeStore:
    """Owns the node collection; the only path to read or change it."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._rng = rng or random.Random()
        self._clock = clock
        self._lock = ReadWriteLock()
        self._nodes: Optional[List[NodeRecord]] = None
        self._generation = 0

    @property
    def generation(self) -> int:
        """Number of times the store has been (re)initialized."""
        with self._lock.read_locked():
            return self._generation

    @property
    def is_initialized(self) -> bool:
        with self._lock.read_locked():
            return self._nodes is not None

    @property
    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._require_nodes())

    def initialize(self, count: int) -> None:
        """Replace the collection with ``count`` freshly generated records."""
        if count <= 0:
            raise ValueError(f"node count must be greater than zero, got {count}")

        with self._lock.write_locked():
            self._nodes = [
                NodeRecord(
                    id=index,
                    name=node_name(index),
                    value=self._rng.randrange(VALUE_RANGE),
                    time=self._clock(),
                )
                for index in range(count)
            ]
            self._generation += 1
            generation = self._generation

        logger.info("Initialized %d nodes (generation %d)", count, generation)

    def snapshot(self) -> List[NodeRecord]:
        """Return a point-in-time copy of every record, ordered by id."""
        with self._lock.read_locked():
            return list(self._require_nodes())

    def update_random(self) -> NodeRecord:
        """Give one uniformly chosen record a new value and timestamp."""
        with self._lock.write_locked():
            nodes = self._require_nodes()
            index = self._rng.randrange(len(nodes))
            current = nodes[index]
            # Never move a record's time backwards if the wall clock is stepped back.
            updated = current.model_copy(
                update={
                    "value": self._rng.randrange(VALUE_RANGE),
                    "time": max(self._clock(), current.time),
                }
            )
            nodes[index] = updated

        logger.debug("Updated %s: value=%d", updated.name, updated.value)
        return updated

    def _require_nodes(self) -> List[NodeRecord]:
        if self._nodes is None:
            raise StoreNotInitializedError("NodeStore.initialize() must be called before use")
        return self._nodes
