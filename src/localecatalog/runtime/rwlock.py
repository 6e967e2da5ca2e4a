"""Readers-writer lock guarding the registry and each value store.

Two lock scopes use this class:
- Registry: locale tag -> store mapping and the priority list.
  Writers: configure (first creation of a tag), set_translation_priority, clear.
  Readers: match, snapshot, validate.
- ValueStore: entry ID -> entry mapping.
  Writers: put, rebind. Readers: get, entries, format.

Properties:
- Multiple concurrent readers OR one exclusive writer
- Writer preference, so a steady stream of lookups cannot starve imports
- Reentrant reads (same thread may nest read sections)
- Optional timeout per acquisition, or a default timeout per lock
- Upgrades, downgrades and nested writes raise RuntimeError instead of deadlocking

Critical sections are short and never nested across scopes: callers copy
what they need out of the protected mapping, release, and then compute.

Python 3.13+.
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     pass  # shared
        >>> with lock.write():
        ...     pass  # exclusive
        >>> bounded = RWLock(default_timeout=0.5)
        >>> with bounded.write():  # TimeoutError after 0.5s of contention
        ...     pass
    """

    __slots__ = (
        "_active_readers",
        "_active_writer",
        "_condition",
        "_default_timeout",
        "_reader_threads",
        "_waiting_writers",
    )

    def __init__(self, default_timeout: float | None = None) -> None:
        """Initialize readers-writer lock.

        Args:
            default_timeout: Timeout applied when read()/write() are called
                without an explicit timeout. None waits indefinitely.

        Raises:
            ValueError: If default_timeout is negative.
        """
        _check_timeout(default_timeout)
        self._condition = threading.Condition(threading.Lock())
        self._default_timeout = default_timeout
        self._active_readers: int = 0
        self._active_writer: int | None = None
        self._waiting_writers: int = 0
        # thread id -> nesting depth of its read sections
        self._reader_threads: dict[int, int] = {}

    @contextmanager
    def read(self, timeout: float | None = None) -> Generator[None]:
        """Acquire read lock (shared access).

        Args:
            timeout: Maximum seconds to wait; falls back to the lock's
                default timeout when None.

        Raises:
            RuntimeError: If thread holds write lock (downgrade prohibited).
            TimeoutError: If lock cannot be acquired within timeout.
            ValueError: If timeout is negative.
        """
        self._acquire_read(self._effective(timeout))
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self, timeout: float | None = None) -> Generator[None]:
        """Acquire write lock (exclusive access).

        Args:
            timeout: Maximum seconds to wait; falls back to the lock's
                default timeout when None.

        Raises:
            RuntimeError: If thread holds a read lock (upgrade prohibited)
                or already holds the write lock.
            TimeoutError: If lock cannot be acquired within timeout.
            ValueError: If timeout is negative.
        """
        self._acquire_write(self._effective(timeout))
        try:
            yield
        finally:
            self._release_write()

    def _effective(self, timeout: float | None) -> float | None:
        _check_timeout(timeout)
        return self._default_timeout if timeout is None else timeout

    def _wait(self, deadline: float | None, kind: str) -> None:
        """Wait on the condition once, honoring an absolute deadline."""
        if deadline is None:
            self._condition.wait()
            return
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            msg = f"Timed out waiting for {kind} lock"
            raise TimeoutError(msg)
        self._condition.wait(timeout=remaining)

    def _acquire_read(self, timeout: float | None) -> None:
        current = threading.get_ident()

        with self._condition:
            if current in self._reader_threads:
                self._reader_threads[current] += 1
                return

            if self._active_writer == current:
                msg = (
                    "Cannot acquire read lock while holding write lock. "
                    "Release the write lock before acquiring a read lock."
                )
                raise RuntimeError(msg)

            deadline = time.monotonic() + timeout if timeout is not None else None
            while self._active_writer is not None or self._waiting_writers > 0:
                self._wait(deadline, "read")

            self._active_readers += 1
            self._reader_threads[current] = 1

    def _release_read(self) -> None:
        current = threading.get_ident()

        with self._condition:
            if current not in self._reader_threads:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)

            self._reader_threads[current] -= 1
            if self._reader_threads[current] == 0:
                del self._reader_threads[current]
                self._active_readers -= 1
                if self._active_readers == 0:
                    self._condition.notify_all()

    def _acquire_write(self, timeout: float | None) -> None:
        current = threading.get_ident()

        with self._condition:
            if current in self._reader_threads:
                msg = (
                    "Cannot upgrade read lock to write lock. "
                    "Release read lock before acquiring write lock."
                )
                raise RuntimeError(msg)

            if self._active_writer == current:
                msg = (
                    "Cannot acquire write lock: already holding write lock. "
                    "Release the write lock before acquiring it again."
                )
                raise RuntimeError(msg)

            deadline = time.monotonic() + timeout if timeout is not None else None
            self._waiting_writers += 1
            try:
                while self._active_readers > 0 or self._active_writer is not None:
                    self._wait(deadline, "write")
                self._active_writer = current
            finally:
                # Readers blocked on writer preference must re-check even when
                # this writer gave up with TimeoutError.
                self._waiting_writers -= 1
                self._condition.notify_all()

    def _release_write(self) -> None:
        current = threading.get_ident()

        with self._condition:
            if self._active_writer != current:
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)
            self._active_writer = None
            self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Number of distinct threads currently holding read locks."""
        with self._condition:
            return self._active_readers

    @property
    def writer_active(self) -> bool:
        """True if any thread currently holds the write lock."""
        with self._condition:
            return self._active_writer is not None

    @property
    def writers_waiting(self) -> int:
        """Number of threads blocked waiting for the write lock."""
        with self._condition:
            return self._waiting_writers


def _check_timeout(timeout: float | None) -> None:
    if timeout is not None and timeout < 0:
        msg = f"Timeout must be non-negative, got {timeout}"
        raise ValueError(msg)
