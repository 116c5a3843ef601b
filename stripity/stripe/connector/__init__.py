"""Stripe connector implementation."""

from .rest.provider import StripeRESTConnector

__all__ = ["StripeRESTConnector"]
