"""gistkit testing utilities.

Provides mock clients and fixtures for testing applications that use gistkit.
"""

from gistkit.testing.fixtures import create_mock_comment, create_mock_gist
from gistkit.testing.mock import MockCall, MockGistKitClient, MockResponse

__all__ = [
    # Mock client
    "MockGistKitClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_gist",
    "create_mock_comment",
]
