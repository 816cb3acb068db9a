"""In-memory repository for menu items.

The repository owns the ordered sequence of menu items, assigns ids and
performs every mutation. Expected misses are reported with ``None`` rather
than exceptions; the API layer decides how to render them.
"""

import logging

from restaurant_menu_api.models.menu_models import MenuItem, MenuItemFields
from restaurant_menu_api.observability.decorators import traced

logger = logging.getLogger(__name__)

ID_POLICIES = ("counter", "length")


class MenuItemRepository:
    """Repository for menu item CRUD operations.

    Items are kept in insertion order. Two id policies are supported:

    - ``"counter"``: one more than the highest id ever assigned, so ids stay
      unique after deletions.
    - ``"length"``: current number of items plus one. This can hand out an id
      that is already in use once items have been deleted; a warning is logged
      when that happens.
    """

    def __init__(self, items: list[MenuItem] | None = None, id_policy: str = "counter") -> None:
        """Initialize repository.

        Args:
            items: Initial menu items, in order
            id_policy: Id assignment policy, ``"counter"`` or ``"length"``

        Raises:
            ValueError: If the id policy is unknown or the initial ids are not unique
        """
        if id_policy not in ID_POLICIES:
            raise ValueError(f"Unknown id policy '{id_policy}', expected one of {ID_POLICIES}")

        self.id_policy = id_policy
        self._items: list[MenuItem] = list(items or [])

        ids = [item.id for item in self._items]
        if len(ids) != len(set(ids)):
            raise ValueError("Initial menu items must have unique ids")

        self._highest_id = max(ids, default=0)

    def __len__(self) -> int:
        return len(self._items)

    def _index_of(self, item_id: int | None) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    def _next_id(self) -> int:
        if self.id_policy == "length":
            next_id = len(self._items) + 1
            if self._index_of(next_id) is not None:
                logger.warning(f"Length-based id {next_id} collides with an existing menu item")
            return next_id

        return self._highest_id + 1

    @traced("menu_repository.list_all")
    def list_all(self) -> list[MenuItem]:
        """List every menu item in insertion order.

        Returns:
            list: Copy of the stored sequence
        """
        return list(self._items)

    @traced("menu_repository.get_by_id")
    def get_by_id(self, item_id: int | None) -> MenuItem | None:
        """Retrieve a menu item by id.

        Args:
            item_id: Menu item identifier (None never matches)

        Returns:
            MenuItem if found, None otherwise
        """
        index = self._index_of(item_id)
        return self._items[index] if index is not None else None

    @traced("menu_repository.create")
    def create(self, fields: MenuItemFields) -> MenuItem:
        """Append a new menu item.

        Args:
            fields: Validated item fields

        Returns:
            MenuItem: The stored item with its assigned id
        """
        item = MenuItem.from_fields(self._next_id(), fields)
        self._items.append(item)
        self._highest_id = max(self._highest_id, item.id)

        logger.info(f"Created menu item {item.id} ({item.name})")
        return item

    @traced("menu_repository.update")
    def update(self, item_id: int | None, fields: MenuItemFields) -> MenuItem | None:
        """Replace every field of an existing menu item, keeping its id and position.

        Args:
            item_id: Menu item identifier
            fields: Validated replacement fields

        Returns:
            MenuItem if updated, None if no item has that id
        """
        index = self._index_of(item_id)
        if index is None:
            return None

        item = MenuItem.from_fields(self._items[index].id, fields)
        self._items[index] = item

        logger.info(f"Updated menu item {item.id}")
        return item

    @traced("menu_repository.delete")
    def delete(self, item_id: int | None) -> MenuItem | None:
        """Remove a menu item.

        Args:
            item_id: Menu item identifier

        Returns:
            MenuItem that was removed, None if no item has that id
        """
        index = self._index_of(item_id)
        if index is None:
            return None

        item = self._items.pop(index)
        logger.info(f"Deleted menu item {item.id}")
        return item
