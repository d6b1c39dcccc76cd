"""FastAPI dependencies."""
from functools import lru_cache

from menu_service.core.config import settings
from menu_service.services.menu.repository import MenuRepository
from menu_service.services.menu.in_memory_menu import InMemoryMenuStore


@lru_cache(maxsize=1)
def get_menu_repository() -> MenuRepository:
    """Get the process-wide menu repository, seeded on first use."""
    return MenuRepository(store=InMemoryMenuStore.from_yaml(settings.menu_seed_file))
