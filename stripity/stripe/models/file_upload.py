"""File upload data model."""

from __future__ import annotations

from datetime import datetime

from .base import StripeObject


class FileUpload(StripeObject):
    """A file uploaded to Stripe, such as dispute evidence or an identity document."""

    created: datetime | None = None
    filename: str | None = None
    purpose: str | None = None
    size: int | None = None
    type: str | None = None
    url: str | None = None
