"""Shared fixtures for gistkit tests."""

import httpx
import pytest

from gistkit.client import GistKitClient
from gistkit.testing.fixtures import (  # noqa: F401
    mock_client,
    mock_client_with_gist,
    mock_gist_id,
    sample_comment,
    sample_gist,
)
from gistkit.transport import RetryConfig

from tests.fake_api import FakeGistAPI


@pytest.fixture
def api() -> FakeGistAPI:
    """Provide an empty fake gists API."""
    return FakeGistAPI()


@pytest.fixture
def client(api: FakeGistAPI):
    """Provide an authenticated client wired to the fake API, without retries."""
    with GistKitClient(
        token="ghp_testtoken0000000000000000",
        retry_config=RetryConfig(max_retries=0),
        transport=httpx.MockTransport(api),
    ) as gist_client:
        yield gist_client
