"""Exceptions raised while handling menu API requests.

Each exception carries the HTTP status and the ``error`` text it is rendered
with, so handlers raise and a single exception handler builds the response.
"""

from typing import Any


class MenuApiError(Exception):
    """Base class for request-local API failures."""

    status_code = 500

    def __init__(self, error: str) -> None:
        super().__init__(error)
        self.error = error

    def to_response(self) -> dict[str, Any]:
        """JSON body for this error."""
        return {"error": self.error}


class MenuValidationError(MenuApiError):
    """Write payload failed one or more field rules."""

    status_code = 400

    def __init__(self, messages: list[str]) -> None:
        super().__init__("Validation failed")
        self.messages = list(messages)

    def to_response(self) -> dict[str, Any]:
        return {"error": self.error, "messages": self.messages}


class MenuItemNotFoundError(MenuApiError):
    """Requested id has no stored menu item."""

    status_code = 404

    def __init__(self, error: str = "Item not found") -> None:
        super().__init__(error)


class MalformedRequestBodyError(MenuApiError):
    """Request body could not be parsed as JSON."""

    status_code = 400

    def __init__(self, error: str = "Malformed JSON in request body") -> None:
        super().__init__(error)
