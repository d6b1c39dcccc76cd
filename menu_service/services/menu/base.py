"""Menu models and store interface."""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class MenuCategory(str, Enum):
    """Categories a menu item can belong to."""

    APPETIZER = "appetizer"
    ENTREE = "entree"
    DESSERT = "dessert"
    BEVERAGE = "beverage"


class MenuItem(BaseModel):
    """Menu item as stored and returned by the API."""

    id: int
    name: str
    description: str
    price: float
    category: MenuCategory
    ingredients: List[str]
    available: bool = True


class Violation(BaseModel):
    """A single field-level validation failure."""

    field: str
    message: str
    value: Any = None


class MenuStore(ABC):
    """Abstract base class for menu item storage."""

    @abstractmethod
    def all_items(self) -> List[MenuItem]:
        """Get every item in insertion order."""
        pass

    @abstractmethod
    def find(self, item_id: int) -> Optional[MenuItem]:
        """Get an item by id."""
        pass

    @abstractmethod
    def add(self, fields: Dict[str, Any]) -> MenuItem:
        """Store a new item under the next free id."""
        pass

    @abstractmethod
    def replace(self, item_id: int, fields: Dict[str, Any]) -> Optional[MenuItem]:
        """Override the fields of an existing item. Returns None if absent."""
        pass

    @abstractmethod
    def remove(self, item_id: int) -> Optional[MenuItem]:
        """Remove an item. Returns None if absent."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Get the number of stored items."""
        pass
