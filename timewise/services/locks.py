# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Per-owner, per-day advisory locks.

The daily capacity check reads sibling entries and then writes. Two
writers for the same (owner, date) could otherwise both pass the check
against a snapshot that misses the other's write. Holding the key's lock
from the capacity read until commit serializes them within this process.
"""

import threading
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date

LockKey = tuple[uuid.UUID, date]


class DailyLockRegistry:
    """Hands out one lock per (owner_id, date).

    A key's lock lives only while some writer holds or waits for it, so the
    registry stays as small as the number of days being written right now.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[LockKey, threading.Lock] = {}
        self._holders: dict[LockKey, int] = {}

    def _checkout(self, key: LockKey) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            self._holders[key] = self._holders.get(key, 0) + 1
            return lock

    def _checkin(self, key: LockKey) -> None:
        with self._guard:
            self._holders[key] -= 1
            if self._holders[key] == 0:
                del self._holders[key]
                del self._locks[key]

    @contextmanager
    def hold(self, *keys: LockKey) -> Iterator[None]:
        """Hold the locks for all given keys.

        Keys are deduplicated and acquired in sorted order so that an update
        moving an entry between two dates cannot deadlock with the reverse
        move.
        """
        ordered = sorted(set(keys), key=lambda k: (str(k[0]), k[1]))
        checked_out: list[LockKey] = []
        acquired: list[threading.Lock] = []
        try:
            for key in ordered:
                lock = self._checkout(key)
                checked_out.append(key)
                lock.acquire()
                acquired.append(lock)
            yield
        finally:
            for lock in reversed(acquired):
                lock.release()
            for key in reversed(checked_out):
                self._checkin(key)

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


daily_locks = DailyLockRegistry()
