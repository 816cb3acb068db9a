"""Menu data models.

These models describe menu items as the API stores and returns them. They are
only ever built from payloads that already passed the menu validator, so the
field constraints here mirror the validator's rules rather than replace them.
"""

from enum import Enum

from pydantic import BaseModel, Field


class MenuCategory(str, Enum):
    """Enumeration of menu categories."""

    APPETIZER = "appetizer"
    ENTREE = "entree"
    DESSERT = "dessert"
    BEVERAGE = "beverage"


class MenuItemFields(BaseModel):
    """Writable fields of a menu item (everything except the id)."""

    name: str = Field(..., description="Item name", min_length=3)
    description: str = Field(..., description="Item description", min_length=10)
    price: int | float = Field(..., description="Item price", gt=0)
    category: MenuCategory = Field(..., description="Menu category")
    ingredients: list[str] = Field(..., description="Ordered list of ingredients", min_length=1)
    available: bool = Field(default=True, description="Whether item is currently available")


class MenuItem(MenuItemFields):
    """Menu item as held by the repository."""

    id: int = Field(..., description="Unique identifier for the menu item", ge=1)

    @classmethod
    def from_fields(cls, item_id: int, fields: MenuItemFields) -> "MenuItem":
        """Attach an id to a validated set of fields.

        Args:
            item_id: Identifier assigned by the repository
            fields: Validated item fields

        Returns:
            MenuItem: The stored representation
        """
        return cls(id=item_id, **fields.model_dump())

    def to_response(self) -> dict:
        """Serialize to the JSON shape returned by the API, id first."""
        data = self.model_dump(mode="json")
        return {"id": data.pop("id"), **data}
