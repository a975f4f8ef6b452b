"""
In-process read cache for items.

``ItemCache`` maps item ids to :class:`ItemRead` values.  One cache
object is created per application and shared by every request thread,
so the whole map is guarded by a single :class:`ReadWriteLock`:
lookups proceed in parallel, while ``put`` and ``delete`` hold the lock
exclusively for the duration of one dictionary operation.

The cache is only coherent with the store for writes made through this
process.  Rows changed by another process keep being served from the
cache until they are overwritten or deleted here.
"""

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from items_api.app.schemas.item import ItemRead


class ReadWriteLock:
    """Many readers or a single writer.

    A waiting writer blocks new readers from entering, so a steady
    stream of lookups cannot starve ``put`` and ``delete``.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
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
                # Readers parked behind waiting writers must re-check, even
                # when this writer gave up because wait() raised.
                if self._writers_waiting == 0:
                    self._cond.notify_all()
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


class ItemCache:
    """Thread-safe id -> item map."""

    def __init__(self) -> None:
        self._items: Dict[int, ItemRead] = {}
        self._lock = ReadWriteLock()

    def get(self, item_id: int) -> Optional[ItemRead]:
        """Return the cached item or ``None``.

        Items are frozen models, so the returned value cannot be used to
        mutate the cache.
        """
        with self._lock.read_locked():
            return self._items.get(item_id)

    def put(self, item_id: int, item: ItemRead) -> None:
        with self._lock.write_locked():
            self._items[item_id] = item

    def delete(self, item_id: int) -> None:
        with self._lock.write_locked():
            self._items.pop(item_id, None)

    def clear(self) -> None:
        with self._lock.write_locked():
            self._items.clear()

    def __contains__(self, item_id: object) -> bool:
        with self._lock.read_locked():
            return item_id in self._items

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._items)
