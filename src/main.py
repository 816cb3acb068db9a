"""Main application entry point for the restaurant menu API.

This module provides the FastAPI application factory and configuration
for running the service locally.
"""

import logging
import os

from fastapi import FastAPI

from restaurant_menu_api.handlers.api_handler import create_app
from restaurant_menu_api.observability import configure_logging, setup_observability
from restaurant_menu_api.repositories.menu_repository import MenuItemRepository
from restaurant_menu_api.repositories.seed_data import default_menu_items

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


def get_port() -> int:
    """Listen port from PORT, defaulting to 3000.

    Raises:
        ValueError: If PORT is set but is not an integer
    """
    return int(os.getenv("PORT", str(DEFAULT_PORT)))


def create_repository() -> MenuItemRepository:
    """Create the menu repository preloaded with the default menu.

    Returns:
        MenuItemRepository using the id policy from MENU_ID_POLICY
    """
    id_policy = os.getenv("MENU_ID_POLICY", "counter")
    repository = MenuItemRepository(items=default_menu_items(), id_policy=id_policy)
    logger.info(f"Menu repository seeded with {len(repository)} items ({id_policy} id policy)")
    return repository


def create_application(repository: MenuItemRepository | None = None) -> FastAPI:
    """Create and configure the FastAPI application with all dependencies.

    Args:
        repository: Menu repository to serve; a freshly seeded one when omitted

    Returns:
        Configured FastAPI application instance
    """
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))

    logger.info("Initializing restaurant menu API...")

    if repository is None:
        repository = create_repository()

    app = create_app(repository=repository)

    setup_observability(
        app=app,
        enable_exporters=bool(os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")),
    )

    logger.info("Restaurant menu API initialized successfully")
    return app


# Build the module-level app only outside tests, so importing this module in
# tests does not reconfigure logging or telemetry
if os.getenv("ENVIRONMENT") != "test":  # noqa: SIM108
    app = create_application()
else:
    app = FastAPI()


if __name__ == "__main__":
    import uvicorn

    port = get_port()
    host = os.getenv("HOST", "0.0.0.0")

    logger.info(f"Menu API server running at http://localhost:{port}")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
        log_config=None,
    )
