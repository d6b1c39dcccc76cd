"""Logging configuration."""
import logging
import sys

from menu_service.core.config import settings


def setup_logging() -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )

    # Requests are already logged by our own middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
