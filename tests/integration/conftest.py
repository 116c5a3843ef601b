"""Shared fixtures for integration tests."""

import os
from pathlib import Path

import pytest
import pytest_asyncio

from stripity.stripe.connector import StripeRESTConnector
from stripity.stripe.core import StripeConfig

_HERE = Path(__file__).parent


def pytest_collection_modifyitems(config, items):
    """Skip all integration tests unless RUN_STRIPITY_NETWORK_TESTS=1 and a key is set."""
    if os.environ.get("RUN_STRIPITY_NETWORK_TESTS") == "1" and os.environ.get("STRIPE_API_KEY"):
        return
    skip = pytest.mark.skip(
        reason="Requires network access and a test key. "
        "Set RUN_STRIPITY_NETWORK_TESTS=1 and STRIPE_API_KEY"
    )
    for item in items:
        if _HERE in item.path.parents:
            item.add_marker(skip)


@pytest_asyncio.fixture
async def stripe():
    """Connector configured from STRIPE_* environment variables."""
    async with StripeRESTConnector(StripeConfig.from_env()) as connector:
        yield connector
