"""
Item endpoints for API v1.

A single resource path, ``/items``, dispatched on the HTTP method and
on whether an ``id`` query parameter is present:

* ``POST /items`` – create an item (201).
* ``GET /items`` – list every item straight from the store.
* ``GET /items?id=N`` – read one item, served from the cache when present.
* ``PUT /items?id=N`` – replace the title of item ``N``.
* ``DELETE /items?id=N`` – delete item ``N``.

Any other method on ``/items`` is answered with 405 by the router.
Errors raised by the service layer are translated to status codes by
the handler registered in ``main.create_app``.

The handlers are plain functions, so FastAPI runs each request in its
threadpool and a slow store call only blocks the thread serving it.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query, status

from items_api.app.core.config import Settings
from items_api.app.schemas.item import ItemCreate, ItemRead, ItemUpdate
from items_api.app.services.item_service import ItemService

from .deps import get_item_service, get_settings, parse_item_id

router = APIRouter()


@router.post("", response_model=ItemRead, status_code=status.HTTP_201_CREATED)
def create_item(
    item_in: ItemCreate,
    service: ItemService = Depends(get_item_service),
) -> ItemRead:
    """Create a new item and return it with its generated id."""
    return service.create_item(item_in.title)


@router.get("", response_model=Union[ItemRead, List[ItemRead]])
def read_items(
    item_id: Optional[str] = Query(None, alias="id", description="Item id; omit to list all items"),
    service: ItemService = Depends(get_item_service),
    settings: Settings = Depends(get_settings),
) -> Union[ItemRead, List[ItemRead]]:
    """Return one item when ``id`` is given, otherwise every item.

    The list is always read from the store and is ``[]`` when there are
    no rows.  A single item may come from the cache.
    """
    if item_id is None or item_id == "":
        return service.list_items()
    return service.get_item(parse_item_id(item_id, settings.lenient_id_parsing))


@router.put("", response_model=str)
def update_item(
    item_in: ItemUpdate,
    item_id: Optional[str] = Query(None, alias="id", description="Id of the item to update"),
    service: ItemService = Depends(get_item_service),
    settings: Settings = Depends(get_settings),
) -> str:
    """Replace the title of an item.

    Unless ``REPORT_MISSING_ROWS`` is enabled, the response is 200 even
    when no row had this id.
    """
    service.update_item(parse_item_id(item_id, settings.lenient_id_parsing), item_in.title)
    return "Item updated successfully"


@router.delete("", response_model=str)
def delete_item(
    item_id: Optional[str] = Query(None, alias="id", description="Id of the item to delete"),
    service: ItemService = Depends(get_item_service),
    settings: Settings = Depends(get_settings),
) -> str:
    """Delete an item and drop it from the cache."""
    service.delete_item(parse_item_id(item_id, settings.lenient_id_parsing))
    return "Item deleted successfully"
