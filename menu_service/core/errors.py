"""Domain errors raised by the menu service."""
from typing import List

from menu_service.services.menu.base import Violation


NOT_FOUND_MESSAGE = "Menu item not found"


class MenuServiceError(Exception):
    """Base class for menu service errors."""


class MenuItemNotFoundError(MenuServiceError):
    """No menu item matches the requested identifier."""

    def __init__(self, item_id: object):
        super().__init__(NOT_FOUND_MESSAGE)
        self.item_id = item_id


class MenuValidationError(MenuServiceError):
    """A candidate menu item violated one or more field rules."""

    def __init__(self, violations: List[Violation]):
        fields = ", ".join(v.field for v in violations)
        super().__init__(f"Invalid menu item: {fields}")
        self.violations = violations


class MenuSeedError(MenuServiceError, ValueError):
    """Seed data could not be loaded into the menu store."""
