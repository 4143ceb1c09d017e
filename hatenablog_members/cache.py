"""Member list cache guarded by a reader/writer lock"""

import threading
from contextlib import contextmanager
from typing import Iterable, List, Optional

from .models import BlogMember


class ReadWriteLock:
    """
    Many readers or one writer.

    Waiting writers block new readers so a steady stream of reads
    cannot starve a write.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self):
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self):
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self):
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self):
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self):
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class MembersCache:
    """
    Snapshot of the blog's member list.

    Either unpopulated (None) or a complete list from the last successful
    fetch. Callers always get their own list, never the stored one.
    """

    def __init__(self):
        self._lock = ReadWriteLock()
        self._members: Optional[List[BlogMember]] = None

    @property
    def populated(self) -> bool:
        with self._lock.read_locked():
            return self._members is not None

    def get(self) -> Optional[List[BlogMember]]:
        with self._lock.read_locked():
            if self._members is None:
                return None
            return list(self._members)

    def store(self, members: Iterable[BlogMember]) -> None:
        snapshot = list(members)
        with self._lock.write_locked():
            self._members = snapshot

    def invalidate(self) -> None:
        with self._lock.write_locked():
            self._members = None
