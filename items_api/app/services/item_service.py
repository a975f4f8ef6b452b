"""
Service layer for items.

``ItemService`` combines the durable :class:`ItemStore` with the
shared :class:`ItemCache`.  Single-item reads are served from the cache
when possible; every write goes to the store first and updates the
cache only after the store call succeeded.  Cache locks are never held
across a store call.

Two concurrent requests for the same id may update the store and the
cache in different orders, so the cache reflects the last cache write,
not necessarily the last store write.

By default ``update_item`` writes ``{id, title}`` to the cache even
when no row matched, which leaves a phantom entry for an id the store
does not hold.  Pass ``report_missing_rows=True`` to raise
:class:`ItemNotFoundError` instead.
"""

from __future__ import annotations

import logging
from typing import List

from items_api.app.core.errors import ItemNotFoundError
from items_api.app.schemas.item import ItemRead
from items_api.app.services.item_cache import ItemCache
from items_api.app.services.item_store import ItemStore

logger = logging.getLogger(__name__)


class ItemService:
    """Orchestrates store and cache for each item operation."""

    def __init__(self, store: ItemStore, cache: ItemCache, report_missing_rows: bool = False) -> None:
        self.store = store
        self.cache = cache
        self.report_missing_rows = report_missing_rows

    def create_item(self, title: str) -> ItemRead:
        """Insert a new item and cache it under its generated id."""
        item_id = self.store.insert(title)
        item = ItemRead(id=item_id, title=title)
        self.cache.put(item.id, item)
        logger.info("Created item %s", item.id)
        return item

    def get_item(self, item_id: int) -> ItemRead:
        """Return an item, preferring the cached copy.

        A store miss raises :class:`ItemNotFoundError` and leaves the
        cache untouched.
        """
        cached = self.cache.get(item_id)
        if cached is not None:
            logger.debug("Cache hit for item %s", item_id)
            return cached
        logger.debug("Cache miss for item %s", item_id)
        item = self.store.get_by_id(item_id)
        self.cache.put(item.id, item)
        return item

    def list_items(self) -> List[ItemRead]:
        """Return every stored item.  The cache is not consulted."""
        return self.store.get_all()

    def update_item(self, item_id: int, title: str) -> None:
        affected = self.store.update_by_id(item_id, title)
        if affected == 0:
            if self.report_missing_rows:
                raise ItemNotFoundError(item_id)
            logger.warning("Update matched no row for item %s; caching it anyway", item_id)
        self.cache.put(item_id, ItemRead(id=item_id, title=title))
        logger.info("Updated item %s", item_id)

    def delete_item(self, item_id: int) -> None:
        affected = self.store.delete_by_id(item_id)
        self.cache.delete(item_id)
        if affected == 0 and self.report_missing_rows:
            raise ItemNotFoundError(item_id)
        logger.info("Deleted item %s", item_id)
