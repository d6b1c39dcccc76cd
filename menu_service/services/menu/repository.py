"""Menu repository."""
import logging
import re
from typing import Any, List, Optional, Union

from menu_service.core.errors import MenuItemNotFoundError, MenuValidationError
from menu_service.services.menu.base import MenuItem, MenuStore
from menu_service.services.menu.validation import (
    MenuItemCandidate,
    ValidationFailure,
    validate_menu_item,
)

logger = logging.getLogger(__name__)

ITEM_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_item_id(raw_id: Union[int, str]) -> Optional[int]:
    """Parse a path identifier. Returns None unless it is optionally signed ASCII digits."""
    if isinstance(raw_id, bool):
        return None
    if isinstance(raw_id, int):
        return raw_id
    text = str(raw_id).strip()
    if not ITEM_ID_PATTERN.fullmatch(text):
        return None
    return int(text, 10)


class MenuRepository:
    """Owns the menu collection and enforces validation and id rules."""

    def __init__(self, store: MenuStore):
        self.store = store

    def _validated(self, payload: Any) -> MenuItemCandidate:
        result = validate_menu_item(payload)
        if isinstance(result, ValidationFailure):
            raise MenuValidationError(result.violations)
        return result.candidate

    def list_items(self) -> List[MenuItem]:
        """Get the full menu in insertion order."""
        return self.store.all_items()

    def get_item(self, item_id: Union[int, str]) -> MenuItem:
        """Get an item by id."""
        parsed_id = parse_item_id(item_id)
        item = self.store.find(parsed_id) if parsed_id is not None else None
        if item is None:
            raise MenuItemNotFoundError(item_id)
        return item

    def create_item(self, payload: Any) -> MenuItem:
        """Validate a candidate and append it under the next id."""
        candidate = self._validated(payload)
        item = self.store.add(candidate.model_dump())
        logger.info(f"[MENU] Created item {item.id} ({item.name})")
        return item

    def update_item(self, item_id: Union[int, str], payload: Any) -> MenuItem:
        """
        Replace an item's fields with a validated candidate.

        The id always comes from ``item_id``. When the candidate omits
        ``available`` the stored value is kept.

        Raises:
            MenuValidationError: If the candidate is invalid (checked first)
            MenuItemNotFoundError: If no item has this id
        """
        candidate = self._validated(payload)
        parsed_id = parse_item_id(item_id)
        item = None
        if parsed_id is not None:
            item = self.store.replace(parsed_id, candidate.model_dump(exclude_unset=True))
        if item is None:
            raise MenuItemNotFoundError(item_id)
        logger.info(f"[MENU] Updated item {item.id} ({item.name})")
        return item

    def delete_item(self, item_id: Union[int, str]) -> MenuItem:
        """Remove an item and return it."""
        parsed_id = parse_item_id(item_id)
        item = self.store.remove(parsed_id) if parsed_id is not None else None
        if item is None:
            raise MenuItemNotFoundError(item_id)
        logger.info(f"[MENU] Deleted item {item.id} ({item.name})")
        return item

    def count(self) -> int:
        """Get the number of items on the menu."""
        return self.store.count()
