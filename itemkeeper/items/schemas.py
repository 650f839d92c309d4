"""Pydantic schemas for items."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ItemCreate(BaseModel):
    """Create request body. The title is checked by the service."""

    title: Any = None
    description: str | None = None


class ItemUpdate(BaseModel):
    """Partial update body.

    Only fields present in the request are applied; use
    ``model_dump(exclude_unset=True)`` to tell an explicit ``false`` from an
    omitted field.
    """

    title: Any = None
    description: str | None = None
    completed: bool | None = None


class Item(BaseModel):
    """Stored item. Serialized with ``ownerId`` on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: str = ""
    completed: bool = False
    owner_id: int = Field(..., alias="ownerId")
