"""In-memory menu store."""
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import yaml

from menu_service.core.errors import MenuSeedError
from menu_service.services.menu.base import MenuItem, MenuStore
from menu_service.services.menu.validation import ValidationFailure, validate_menu_item

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path(__file__).parent / "data" / "menu.yaml"


def load_seed_items(seed_file: Union[str, Path]) -> List[MenuItem]:
    """
    Load and validate menu items from a YAML seed file.

    The file holds an ``items`` list; every entry needs a positive integer
    ``id`` plus the fields a client would send on create.

    Raises:
        MenuSeedError: If the file is missing, malformed, or any entry is invalid
    """
    seed_path = Path(seed_file)
    if not seed_path.exists():
        raise MenuSeedError(f"Menu seed file not found: {seed_path}")

    with open(seed_path, "r") as f:
        data = yaml.safe_load(f) or {}

    entries = data.get("items", []) if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise MenuSeedError(f"Menu seed file {seed_path} must contain an 'items' list")

    items = []
    for position, entry in enumerate(entries):
        item_id = entry.get("id") if isinstance(entry, dict) else None
        if isinstance(item_id, bool) or not isinstance(item_id, int) or item_id < 1:
            raise MenuSeedError(
                f"Seed entry {position} in {seed_path} needs a positive integer id"
            )

        result = validate_menu_item(entry)
        if isinstance(result, ValidationFailure):
            problems = "; ".join(f"{v.field}: {v.message}" for v in result.violations)
            raise MenuSeedError(f"Seed item {item_id} in {seed_path} is invalid - {problems}")

        items.append(MenuItem(id=item_id, **result.candidate.model_dump()))

    logger.debug(f"[MENU STORE] Loaded {len(items)} seed items from {seed_path}")
    return items


class InMemoryMenuStore(MenuStore):
    """List-backed menu store, kept in insertion order."""

    def __init__(self, items: Optional[Iterable[MenuItem]] = None):
        """Initialize with optional starting items."""
        self._items: List[MenuItem] = []
        self._lock = threading.RLock()
        for item in items or []:
            if self._index_of(item.id) is not None:
                raise MenuSeedError(f"Duplicate menu item id: {item.id}")
            self._items.append(item)

    @classmethod
    def from_yaml(cls, seed_file: Optional[Union[str, Path]] = None) -> "InMemoryMenuStore":
        """Create a store seeded from a YAML file (the packaged menu by default)."""
        return cls(load_seed_items(seed_file or DEFAULT_SEED_FILE))

    def _index_of(self, item_id: int) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    def _next_id(self) -> int:
        return max((item.id for item in self._items), default=0) + 1

    def all_items(self) -> List[MenuItem]:
        """Get every item in insertion order."""
        with self._lock:
            return list(self._items)

    def find(self, item_id: int) -> Optional[MenuItem]:
        """Get an item by id."""
        with self._lock:
            index = self._index_of(item_id)
            return self._items[index] if index is not None else None

    def add(self, fields: Dict[str, Any]) -> MenuItem:
        """Store a new item under max(id) + 1, or 1 when empty."""
        with self._lock:
            item = MenuItem(**{**fields, "id": self._next_id()})
            self._items.append(item)
            return item

    def replace(self, item_id: int, fields: Dict[str, Any]) -> Optional[MenuItem]:
        """Override the fields of an existing item, keeping its id and position."""
        with self._lock:
            index = self._index_of(item_id)
            if index is None:
                return None
            merged = {**self._items[index].model_dump(), **fields, "id": item_id}
            self._items[index] = MenuItem(**merged)
            return self._items[index]

    def remove(self, item_id: int) -> Optional[MenuItem]:
        """Remove exactly one item. Remaining ids are untouched."""
        with self._lock:
            index = self._index_of(item_id)
            if index is None:
                return None
            return self._items.pop(index)

    def count(self) -> int:
        """Get the number of stored items."""
        with self._lock:
            return len(self._items)
