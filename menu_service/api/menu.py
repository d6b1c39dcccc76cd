"""Menu API endpoints."""
import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request
from pydantic import BaseModel

from menu_service.core.dependencies import get_menu_repository
from menu_service.services.menu.base import MenuItem
from menu_service.services.menu.repository import MenuRepository


router = APIRouter()
logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Menu item deleted successfully"


class MenuItemDeletedResponse(BaseModel):
    """Delete confirmation response model."""
    message: str
    deleted_item: MenuItem


@router.get("/api/menu", response_model=List[MenuItem])
async def list_menu_items(
    request: Request,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Get the full menu."""
    logger.debug(
        f"[MENU] List requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    items = menu_repository.list_items()
    logger.info(f"[MENU] Returning {len(items)} items")
    return items


@router.get("/api/menu/{item_id}", response_model=MenuItem)
async def get_menu_item(
    item_id: str,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Get a single menu item."""
    return menu_repository.get_item(item_id)


@router.post("/api/menu", response_model=MenuItem, status_code=201)
async def create_menu_item(
    payload: Any = Body(default=None),
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Create a menu item."""
    return menu_repository.create_item(payload)


@router.put("/api/menu/{item_id}", response_model=MenuItem)
async def update_menu_item(
    item_id: str,
    payload: Any = Body(default=None),
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Replace a menu item's fields."""
    return menu_repository.update_item(item_id, payload)


@router.delete("/api/menu/{item_id}", response_model=MenuItemDeletedResponse)
async def delete_menu_item(
    item_id: str,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Delete a menu item."""
    deleted_item = menu_repository.delete_item(item_id)
    return MenuItemDeletedResponse(message=DELETED_MESSAGE, deleted_item=deleted_item)
