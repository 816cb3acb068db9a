"""Custom metrics for the menu API."""

import weakref
from collections.abc import Iterable, Sized

from opentelemetry import metrics
from opentelemetry.metrics import CallbackOptions, Observation

meter = metrics.get_meter("menu-api")

menu_items_created_counter = meter.create_counter(
    name="menu_items_created_total",
    description="Total number of menu items created",
    unit="1",
)

menu_items_updated_counter = meter.create_counter(
    name="menu_items_updated_total",
    description="Total number of menu items updated",
    unit="1",
)

menu_items_deleted_counter = meter.create_counter(
    name="menu_items_deleted_total",
    description="Total number of menu items deleted",
    unit="1",
)

validation_failure_counter = meter.create_counter(
    name="menu_validation_failures_total",
    description="Total number of write requests rejected by validation",
    unit="1",
)

not_found_counter = meter.create_counter(
    name="menu_item_not_found_total",
    description="Total number of requests for a menu item id that does not exist",
    unit="1",
)

# Repositories whose size is reported; entries vanish with their repository
_tracked_repositories: "weakref.WeakSet[Sized]" = weakref.WeakSet()


def observe_menu_size(options: CallbackOptions) -> Iterable[Observation]:  # noqa: ARG001
    """Report the number of items currently held by the tracked repositories."""
    return [Observation(sum(len(repository) for repository in list(_tracked_repositories)))]


menu_size_gauge = meter.create_observable_gauge(
    name="menu_items_stored",
    callbacks=[observe_menu_size],
    description="Current number of menu items in the repository",
    unit="1",
)


def track_menu_size(repository: Sized) -> None:
    """Include a repository in the ``menu_items_stored`` gauge.

    Args:
        repository: Menu repository served by the application
    """
    _tracked_repositories.add(repository)


def record_item_created(category: str) -> None:
    """Record a created menu item.

    Args:
        category: Category of the new item
    """
    menu_items_created_counter.add(1, {"category": category})


def record_item_updated(category: str) -> None:
    """Record an updated menu item.

    Args:
        category: Category of the item after the update
    """
    menu_items_updated_counter.add(1, {"category": category})


def record_item_deleted(category: str) -> None:
    """Record a deleted menu item.

    Args:
        category: Category of the removed item
    """
    menu_items_deleted_counter.add(1, {"category": category})


def record_validation_failure(method: str, message_count: int) -> None:
    """Record a write request rejected by validation.

    Args:
        method: HTTP method of the rejected request
        message_count: Number of failed field rules
    """
    validation_failure_counter.add(1, {"method": method, "message_count": message_count})


def record_not_found(method: str) -> None:
    """Record a lookup of an unknown menu item id.

    Args:
        method: HTTP method of the request
    """
    not_found_counter.add(1, {"method": method})
