"""OpenTelemetry instrumentation and logging setup."""

from restaurant_menu_api.observability.config import configure_logging, setup_observability
from restaurant_menu_api.observability.decorators import traced

__all__ = ["setup_observability", "configure_logging", "traced"]
