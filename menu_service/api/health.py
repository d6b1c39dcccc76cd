"""Health check endpoint."""
import logging
from fastapi import APIRouter, Depends, Request

from menu_service.core.dependencies import get_menu_repository
from menu_service.services.menu.repository import MenuRepository

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(
    request: Request,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Report service health and the current menu size."""
    logger.debug(
        f"[HEALTH] Health check requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    return {"status": "healthy", "items": menu_repository.count()}
