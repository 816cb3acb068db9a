"""FastAPI application for the menu API endpoints."""

import logging
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from restaurant_menu_api.errors import MenuApiError, MenuItemNotFoundError
from restaurant_menu_api.handlers.request_dependencies import parse_item_id, validated_menu_fields
from restaurant_menu_api.middleware.request_logging import RequestLoggingMiddleware
from restaurant_menu_api.models.menu_models import MenuItemFields
from restaurant_menu_api.observability.metrics import (
    record_item_created,
    record_item_deleted,
    record_item_updated,
    record_not_found,
    track_menu_size,
)
from restaurant_menu_api.repositories.menu_repository import MenuItemRepository

logger = logging.getLogger(__name__)

MENU_ITEM_NOT_FOUND = "Menu item not found"
ITEM_NOT_FOUND = "Item not found"


async def handle_menu_api_error(request: Request, exc: MenuApiError) -> JSONResponse:
    """Render a MenuApiError as its JSON error body."""
    logger.info(f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.error}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


def create_app(repository: MenuItemRepository) -> FastAPI:
    """Create and configure the FastAPI application.

    Building the app does not bind a socket; pass it to uvicorn to serve it or
    to ``TestClient`` to exercise the routes in-process.

    Args:
        repository: Menu item store the routes read and mutate

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Restaurant Menu API",
        description="CRUD operations over the restaurant's menu items",
        version="1.0.0",
    )

    app.state.repository = repository
    track_menu_size(repository)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(MenuApiError, handle_menu_api_error)  # type: ignore[arg-type]

    @app.get("/", tags=["Info"])
    async def index() -> dict[str, Any]:
        """Describe the API."""
        return {
            "message": "Welcome to the Restaurant API",
            "endpoints": {
                "GET /api/menu": "Retrieve all menu items",
                "GET /api/menu/:id": "Retrieve a specific menu item",
            },
        }

    @app.get("/api/menu", tags=["Menu"])
    async def list_menu_items() -> list[dict[str, Any]]:
        """Retrieve all menu items in insertion order."""
        return [item.to_response() for item in app.state.repository.list_all()]

    @app.get("/api/menu/{item_id}", tags=["Menu"])
    async def get_menu_item(item_id: str) -> dict[str, Any]:
        """Retrieve a specific menu item.

        Raises:
            MenuItemNotFoundError: If no item has the id
        """
        item = app.state.repository.get_by_id(parse_item_id(item_id))
        if item is None:
            record_not_found("GET")
            raise MenuItemNotFoundError(MENU_ITEM_NOT_FOUND)
        return item.to_response()

    @app.post("/api/menu", status_code=201, tags=["Menu"])
    async def create_menu_item(
        fields: MenuItemFields = Depends(validated_menu_fields),
    ) -> dict[str, Any]:
        """Add a new menu item."""
        item = app.state.repository.create(fields)
        record_item_created(item.category.value)
        return item.to_response()

    @app.put("/api/menu/{item_id}", tags=["Menu"])
    async def update_menu_item(
        item_id: str,
        fields: MenuItemFields = Depends(validated_menu_fields),
    ) -> dict[str, Any]:
        """Replace every field of an existing menu item.

        Raises:
            MenuItemNotFoundError: If no item has the id; nothing is created
        """
        item = app.state.repository.update(parse_item_id(item_id), fields)
        if item is None:
            record_not_found("PUT")
            raise MenuItemNotFoundError(ITEM_NOT_FOUND)

        record_item_updated(item.category.value)
        return item.to_response()

    @app.delete("/api/menu/{item_id}", tags=["Menu"])
    async def delete_menu_item(item_id: str) -> dict[str, Any]:
        """Remove a menu item.

        Raises:
            MenuItemNotFoundError: If no item has the id
        """
        item = app.state.repository.delete(parse_item_id(item_id))
        if item is None:
            record_not_found("DELETE")
            raise MenuItemNotFoundError(ITEM_NOT_FOUND)

        record_item_deleted(item.category.value)
        return {"message": "Item successfully deleted", "item": item.to_response()}

    return app
