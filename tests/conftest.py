"""Test configuration and fixtures."""

import os

import logfire
import pytest

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__ADMIN_CLAIM_TOKEN", "test-operator-token")

# Local-only tracing; nothing leaves the test process
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def operator_token() -> str:
    """Operator secret configured for the admin claim path."""
    return os.environ["AUTH__ADMIN_CLAIM_TOKEN"]
