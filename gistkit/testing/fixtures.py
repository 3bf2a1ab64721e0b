"""
Pytest fixtures for gistkit testing.

Provides common fixtures for testing applications that use gistkit.
"""

from datetime import datetime
from typing import Any, Generator

import pytest

from gistkit.testing.mock import MockGistKitClient
from gistkit.types.gists import Gist, GistComment, GistFile, GistOwner


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGistKitClient, None, None]:
    """
    Provide a MockGistKitClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.gists.configure("create", response=my_gist)
            result = my_function(mock_client)
            assert mock_client.was_called("gists.create")
        ```
    """
    client = MockGistKitClient(login="test-user")
    yield client
    client.reset()


@pytest.fixture
def mock_gist_id() -> str:
    """Provide a test gist ID."""
    return "aa5a315d61ae9438b18d"


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_gist() -> Gist:
    """Provide a sample Gist object."""
    return create_mock_gist(
        gist_id="aa5a315d61ae9438b18d",
        description="Hello world examples",
        public=True,
        files={"hello_world.py": "print('hello world')"},
    )


@pytest.fixture
def sample_comment() -> GistComment:
    """Provide a sample GistComment object."""
    return create_mock_comment(comment_id=1, body="Just commenting for the sake of commenting")


@pytest.fixture
def mock_client_with_gist(
    mock_client: MockGistKitClient,
    sample_gist: Gist,
) -> MockGistKitClient:
    """Provide a mock client whose get() and list() return the sample gist."""
    mock_client.gists.configure("get", response=sample_gist)
    mock_client.gists.configure("list", response=[sample_gist])
    return mock_client


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_gist(
    gist_id: str = "test-gist-id",
    owner: str = "test-user",
    files: dict[str, str] | None = None,
    **kwargs: Any,
) -> Gist:
    """
    Create a Gist with customizable fields.

    Args:
        gist_id: Gist ID
        owner: Owner login
        files: Mapping of filename to content
        **kwargs: Additional fields to override

    Returns:
        Gist object
    """
    gist_files = {
        name: GistFile(filename=name, content=content, size=len(content))
        for name, content in (files or {"file.txt": "content"}).items()
    }
    defaults = {
        "description": None,
        "public": False,
        "owner": GistOwner(login=owner, id=1),
        "html_url": f"https://gist.github.com/{owner}/{gist_id}",
        "comments": 0,
        "created_at": datetime(2024, 1, 15, 10, 30, 0),
        "updated_at": datetime(2024, 1, 15, 10, 30, 0),
    }
    defaults.update(kwargs)
    return Gist(
        id=gist_id,
        files=gist_files,
        **defaults,
    )


def create_mock_comment(
    comment_id: int = 1,
    body: str = "Test comment",
    user: str = "test-user",
    **kwargs: Any,
) -> GistComment:
    """
    Create a GistComment with customizable fields.

    Args:
        comment_id: Comment ID
        body: Comment text
        user: Author login
        **kwargs: Additional fields to override

    Returns:
        GistComment object
    """
    defaults = {
        "user": GistOwner(login=user, id=1),
        "created_at": datetime(2024, 1, 15, 10, 30, 0),
        "updated_at": datetime(2024, 1, 15, 10, 30, 0),
    }
    defaults.update(kwargs)
    return GistComment(
        id=comment_id,
        body=body,
        **defaults,
    )


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "mock_client",
    "mock_gist_id",
    "sample_gist",
    "sample_comment",
    "mock_client_with_gist",
    # Helper functions
    "create_mock_gist",
    "create_mock_comment",
]
