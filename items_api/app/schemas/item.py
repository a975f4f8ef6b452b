"""
Pydantic schemas for items.

An item is an ``(id, title)`` pair.  The id is assigned by the store
on insert and never changes afterwards.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ItemCreate(BaseModel):
    """Schema for creating a new item.

    A body without ``title`` is valid and creates an item with an empty
    title; only malformed JSON or a non-string title is rejected.
    """

    title: str = Field("", description="Title of the item; empty when omitted")


class ItemUpdate(BaseModel):
    """Schema for replacing an item's title.

    An ``id`` in the body is accepted for compatibility with clients
    that echo the full item back, but it is ignored: the target id is
    always taken from the ``id`` query parameter.
    """

    title: str = Field("", description="New title of the item; empty when omitted")
    id: Optional[int] = Field(None, description="Ignored; use the id query parameter")


class ItemRead(BaseModel):
    """Schema for reading an item.

    Instances are frozen so a cached item can be handed to several
    concurrent readers without copying.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
