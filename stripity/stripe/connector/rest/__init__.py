"""Stripe REST connector."""

from .provider import StripeRESTConnector

__all__ = ["StripeRESTConnector"]
