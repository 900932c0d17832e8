"""
Reader/writer lock.

Any number of readers may hold the lock together; a writer holds it alone.
Writers are preferred: once a writer is waiting, new readers wait behind it.
"""

import threading
from contextlib import contextmanager


class ReadWriteLock:
    """Non-reentrant, writer-preferring reader/writer lock built on a condition variable."""

    def __init__(self):
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writers_waiting = 0
        self._writing = False

    def acquire_read(self) -> None:
        with self._condition:
            while self._writing or self._writers_waiting > 0:
                self._condition.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._condition:
            if self._readers == 0:
                raise RuntimeError("release_read() called without a matching acquire_read()")
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def acquire_write(self) -> None:
        with self._condition:
            self._writers_waiting += 1
            try:
                while self._writing or self._readers > 0:
                    self._condition.wait()
            except BaseException:
                # Readers queued behind this writer must not stay blocked
                self._writers_waiting -= 1
                self._condition.notify_all()
                raise
            self._writers_waiting -= 1
            self._writing = True

    def release_write(self) -> None:
        with self._condition:
            if not self._writing:
                raise RuntimeError("release_write() called without a matching acquire_write()")
            self._writing = False
            self._condition.notify_all()

    @contextmanager
    def read_locked(self):
        self.acquire_read()
        try:
            yield self
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self):
        self.acquire_write()
        try:
            yield self
        finally:
            self.release_write()

    @property
    def readers(self) -> int:
        """Number of readers currently holding the lock."""
        with self._condition:
            return self._readers

    @property
    def is_write_locked(self) -> bool:
        with self._condition:
            return self._writing

    @property
    def writers_waiting(self) -> int:
        """Number of writers blocked in acquire_write()."""
        with self._condition:
            return self._writers_waiting
