"""
Pytest plugin for gistkit testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["gistkit.testing.conftest"]

Or import the fixtures directly:

    from gistkit.testing.fixtures import mock_client, sample_gist
"""

# Re-export all fixtures for pytest auto-discovery
from gistkit.testing.fixtures import (
    mock_client,
    mock_client_with_gist,
    mock_gist_id,
    sample_comment,
    sample_gist,
)

__all__ = [
    "mock_client",
    "mock_gist_id",
    "sample_gist",
    "sample_comment",
    "mock_client_with_gist",
]
