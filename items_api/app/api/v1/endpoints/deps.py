"""
Shared request dependencies for the v1 endpoints.

The service and settings are attached to ``app.state`` by
``create_app``; these helpers hand them to route functions through
``Depends`` so handlers never reach for module globals.
"""

import re
from typing import Optional

from fastapi import Request

from items_api.app.core.config import Settings
from items_api.app.core.errors import InvalidItemIdError
from items_api.app.services.item_service import ItemService

_DECIMAL_ID = re.compile(r"[+-]?[0-9]+")

# SQLite stores integers as signed 64-bit values.
_MIN_ID = -(2 ** 63)
_MAX_ID = 2 ** 63 - 1

_MIN_LENIENT_ID = -(2 ** 31)
_MAX_LENIENT_ID = 2 ** 31 - 1
_PREFIX_BASES = {"0x": 16, "0o": 8, "0b": 2}


def get_item_service(request: Request) -> ItemService:
    return request.app.state.item_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _parse_lenient(raw: Optional[str]) -> int:
    """Parse like a C-style integer literal, clamped to 32 bits.

    A ``0x``/``0o``/``0b`` prefix or a bare leading ``0`` (octal) picks
    the base.  Values outside the signed 32-bit range are clamped to
    its bounds; anything unparseable is ``0``.
    """
    digits = raw or ""
    sign = 1
    if digits[:1] in ("+", "-"):
        sign = -1 if digits[0] == "-" else 1
        digits = digits[1:]
    base = 10
    if digits[:2].lower() in _PREFIX_BASES:
        base = _PREFIX_BASES[digits[:2].lower()]
        digits = digits[2:]
    elif len(digits) > 1 and digits[0] == "0":
        base = 8
        digits = digits[1:]
    # int() would otherwise tolerate surrounding whitespace and a second sign.
    if not digits or digits[:1] in ("+", "-", "_") or digits != digits.strip():
        return 0
    try:
        value = sign * int(digits, base)
    except ValueError:
        return 0
    return max(_MIN_LENIENT_ID, min(_MAX_LENIENT_ID, value))


def parse_item_id(raw: Optional[str], lenient: bool = False) -> int:
    """Convert the ``id`` query parameter to an integer.

    Strict mode accepts base-10 integers only and raises
    :class:`InvalidItemIdError` for anything else, including a missing
    value.  Lenient mode reproduces the legacy behaviour described in
    :func:`_parse_lenient`.
    """
    if lenient:
        return _parse_lenient(raw)

    if raw is None or raw == "":
        raise InvalidItemIdError("Missing id query parameter")
    if not _DECIMAL_ID.fullmatch(raw):
        raise InvalidItemIdError(f"Invalid item id: {raw!r}")
    value = int(raw)
    if not _MIN_ID <= value <= _MAX_ID:
        raise InvalidItemIdError(f"Item id out of range: {raw}")
    return value
