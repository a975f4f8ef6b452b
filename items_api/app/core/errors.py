"""
Error taxonomy for the Items API.

Services raise these exceptions and never build HTTP responses
themselves.  Each class carries the status code the API layer answers
with; ``main.create_app`` registers a single handler for the base
class.
"""

from fastapi import status


class ItemsApiError(Exception):
    """Base class for errors that terminate a request."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class DecodeError(ItemsApiError):
    """The request body or parameters could not be decoded."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidItemIdError(DecodeError):
    """The ``id`` query parameter is missing or not an integer."""


class ItemNotFoundError(ItemsApiError):
    """No row matches the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, item_id: int) -> None:
        super().__init__("Item not found")
        self.item_id = item_id


class StoreError(ItemsApiError):
    """Any other database failure: connectivity, syntax, constraint, decoding."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
