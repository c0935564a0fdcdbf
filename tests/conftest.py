"""
Pytest configuration for request validation API tests.

Sets up test environment and global fixtures.
"""
import os
import pytest

# Disable config validation during tests
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "INFO")

from fastapi import Request  # noqa: E402

from validation_api.filters import FilterContext  # noqa: E402


def make_request(method: str = "POST", path: str = "/users") -> Request:
    """Bare Starlette request for exercising filters without a server."""
    return Request({
        "type": "http",
        "method": method,
        "path": path,
        "headers": [],
        "query_string": b"",
    })


@pytest.fixture
def filter_context():
    """Factory for FilterContext objects with the given bound arguments."""
    def _make(*arguments):
        return FilterContext(request=make_request(), arguments=list(arguments))
    return _make
