"""Field-level validation for menu item write payloads.

``validate_menu_payload`` is a pure function over the raw, untyped request
body. Every rule is evaluated and every failing message is collected, in rule
order. ``parse_menu_payload`` is the boundary that turns a raw payload into a
typed ``MenuItemFields`` record, or raises with all the messages.
"""

import logging
import math
from collections.abc import Callable, Mapping
from typing import Any

from restaurant_menu_api.errors import MenuValidationError
from restaurant_menu_api.models.menu_models import MenuCategory, MenuItemFields

logger = logging.getLogger(__name__)

_MISSING = object()

CATEGORY_VALUES = tuple(category.value for category in MenuCategory)

NAME_MESSAGE = "Name must be at least 3 characters long"
DESCRIPTION_MESSAGE = "Description must be at least 10 characters long"
PRICE_MESSAGE = "Price must be a number greater than 0"
CATEGORY_MESSAGE = "Category must be appetizer, entree, dessert, or beverage"
INGREDIENTS_MESSAGE = "Ingredients must be an array with at least one item"
INGREDIENT_TYPE_MESSAGE = "Ingredients must contain only strings"
AVAILABLE_MESSAGE = "Available must be a boolean (true or false)"


def _is_string_of_length(value: Any, min_length: int) -> bool:
    return isinstance(value, str) and len(value) >= min_length


def _check_name(payload: Mapping[str, Any]) -> list[str]:
    if _is_string_of_length(payload.get("name", _MISSING), 3):
        return []
    return [NAME_MESSAGE]


def _check_description(payload: Mapping[str, Any]) -> list[str]:
    if _is_string_of_length(payload.get("description", _MISSING), 10):
        return []
    return [DESCRIPTION_MESSAGE]


def _check_price(payload: Mapping[str, Any]) -> list[str]:
    price = payload.get("price", _MISSING)
    # bool is an int subclass; true/false are not prices
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return [PRICE_MESSAGE]
    try:
        value = float(price)
    except OverflowError:
        # integers beyond float range
        return [PRICE_MESSAGE]
    if not math.isfinite(value) or value <= 0:
        return [PRICE_MESSAGE]
    return []


def _check_category(payload: Mapping[str, Any]) -> list[str]:
    category = payload.get("category", _MISSING)
    if isinstance(category, str) and category in CATEGORY_VALUES:
        return []
    return [CATEGORY_MESSAGE]


def _check_ingredients(payload: Mapping[str, Any]) -> list[str]:
    ingredients = payload.get("ingredients", _MISSING)
    if not isinstance(ingredients, list) or len(ingredients) < 1:
        return [INGREDIENTS_MESSAGE]
    if not all(isinstance(ingredient, str) for ingredient in ingredients):
        return [INGREDIENT_TYPE_MESSAGE]
    return []


def _check_available(payload: Mapping[str, Any]) -> list[str]:
    available = payload.get("available", _MISSING)
    if available is _MISSING or isinstance(available, bool):
        return []
    return [AVAILABLE_MESSAGE]


RULES: tuple[Callable[[Mapping[str, Any]], list[str]], ...] = (
    _check_name,
    _check_description,
    _check_price,
    _check_category,
    _check_ingredients,
    _check_available,
)


def validate_menu_payload(payload: Any) -> list[str]:
    """Validate a raw menu item payload.

    Args:
        payload: Decoded JSON request body. Anything other than a JSON object
            is treated as an empty object.

    Returns:
        list: Human-readable error messages, empty when the payload is valid
    """
    if not isinstance(payload, Mapping):
        payload = {}

    messages: list[str] = []
    for rule in RULES:
        messages.extend(rule(payload))
    return messages


def parse_menu_payload(payload: Any) -> MenuItemFields:
    """Validate a raw payload and build the typed write record.

    ``available`` defaults to True when the caller left it out. Keys that are
    not menu item fields are dropped.

    Args:
        payload: Decoded JSON request body

    Returns:
        MenuItemFields: The validated record

    Raises:
        MenuValidationError: If any field rule fails
    """
    messages = validate_menu_payload(payload)
    if messages:
        logger.info(f"Menu payload rejected with {len(messages)} validation error(s)")
        raise MenuValidationError(messages)

    return MenuItemFields(
        name=payload["name"],
        description=payload["description"],
        price=payload["price"],
        category=MenuCategory(payload["category"]),
        ingredients=list(payload["ingredients"]),
        available=payload.get("available", True),
    )
