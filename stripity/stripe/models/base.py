"""Base model shared by every API object."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StripeObject(BaseModel):
    """An object returned by the API.

    Fields the model does not declare are kept (``extra="allow"``) so responses
    from newer API versions still parse.
    """

    id: str = Field(..., min_length=1)
    object: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class Deleted(BaseModel):
    """Result of a DELETE request."""

    id: str
    object: str | None = None
    deleted: bool = True

    model_config = ConfigDict(frozen=True, extra="allow")


def card_or_raw(value: Any) -> Any:
    """Promote a raw ``{"object": "card", ...}`` payload to a Card."""
    from .card import Card

    if isinstance(value, dict) and value.get("object") == "card":
        return Card.model_validate(value)
    return value
