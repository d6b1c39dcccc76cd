"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from menu_service.core.config import settings
from menu_service.core.dependencies import get_menu_repository
from menu_service.core.errors import MenuItemNotFoundError, MenuValidationError
from menu_service.core.logging import setup_logging
from menu_service.core.middleware import log_requests
from menu_service.api import health, menu

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    repository = get_menu_repository()
    logger.info(f"[STARTUP] {settings.app_name} ready with {repository.count()} menu items")
    yield


app = FastAPI(
    title=settings.app_name,
    description="In-memory CRUD service for a restaurant menu",
    version=VERSION,
    lifespan=lifespan,
)

app.middleware("http")(log_requests)

app.include_router(health.router, tags=["health"])
app.include_router(menu.router, tags=["menu"])


@app.exception_handler(MenuItemNotFoundError)
async def menu_item_not_found_handler(request: Request, exc: MenuItemNotFoundError):
    logger.warning(f"[MENU] {request.method} {request.url.path} - no item with id {exc.item_id!r}")
    return JSONResponse(status_code=404, content={"message": str(exc)})


@app.exception_handler(MenuValidationError)
async def menu_validation_handler(request: Request, exc: MenuValidationError):
    logger.warning(f"[MENU] {request.method} {request.url.path} - {exc}")
    return JSONResponse(
        status_code=400,
        content={"errors": [violation.model_dump(mode="json") for violation in exc.violations]},
    )


@app.get("/")
async def root():
    """Service information."""
    return {"message": settings.app_name, "version": VERSION}


def run() -> None:
    """Start the API server."""
    uvicorn.run(
        "menu_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
