"""
Information endpoint for API v1.

Returns the service name and version together with the number of
items currently held in the read cache.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from items_api.app.core.config import Settings
from items_api.app.services.item_service import ItemService

from .deps import get_item_service, get_settings

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
def get_info(
    service: ItemService = Depends(get_item_service),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    return {
        "name": settings.project_name,
        "version": settings.api_version,
        "cached_items": len(service.cache),
    }
