"""FastAPI dependencies for menu API requests.

Provides JSON body parsing, the write-payload validation step, and id path
parameter parsing.
"""

import json
import re
from typing import Any

from fastapi import Request

from restaurant_menu_api.errors import MalformedRequestBodyError, MenuValidationError
from restaurant_menu_api.models.menu_models import MenuItemFields
from restaurant_menu_api.observability.metrics import record_validation_failure
from restaurant_menu_api.validation.menu_validator import parse_menu_payload

_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


def parse_item_id(raw_id: str) -> int | None:
    """Parse an id path parameter.

    Leading whitespace and a sign are accepted and anything after the leading
    digits is ignored, so ``"12abc"`` is 12. Values with no leading integer
    give None, which matches no stored item.

    Args:
        raw_id: Path segment as received

    Returns:
        int if the segment starts with an integer, None otherwise
    """
    match = _LEADING_INTEGER.match(raw_id)
    if match is None:
        return None
    return int(match.group(1))


async def read_json_body(request: Request) -> Any:
    """Decode the request body as JSON. An empty body reads as ``{}``.

    Raises:
        MalformedRequestBodyError: If the body is not valid JSON
    """
    raw_body = await request.body()
    if not raw_body.strip():
        return {}

    try:
        return json.loads(raw_body)
    except (ValueError, RecursionError) as e:
        raise MalformedRequestBodyError() from e


async def validated_menu_fields(request: Request) -> MenuItemFields:
    """FastAPI dependency that turns a write request body into validated fields.

    Args:
        request: Incoming request (injected by FastAPI)

    Returns:
        MenuItemFields: Validated fields with ``available`` defaulted

    Raises:
        MalformedRequestBodyError: 400 if the body is not JSON
        MenuValidationError: 400 if any field rule fails
    """
    payload = await read_json_body(request)
    try:
        return parse_menu_payload(payload)
    except MenuValidationError as e:
        record_validation_failure(request.method, len(e.messages))
        raise
