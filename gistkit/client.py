"""
gistkit main client.

Provides the primary interface for interacting with the GitHub gists API.
"""

import os
from typing import Any

import httpx

from gistkit.clients import GistsClient
from gistkit.exceptions import ConfigurationError
from gistkit.transport import DEFAULT_USER_AGENT, HTTPTransport, RetryConfig

_TRUTHY = {"1", "true", "yes", "on"}


class GistKitClient:
    """
    Main client for interacting with the GitHub gists API.

    Owns the HTTP transport and the resource clients built on it.

    Example:
        ```python
        from gistkit import GistKitClient

        # Create client with explicit configuration
        client = GistKitClient(token="ghp_...")

        # Or create from environment variables
        client = GistKitClient.from_env()

        gist = client.gists.create({"notes.md": "# Notes"}, description="notes")
        client.gists.star(gist.id)
        ```
    """

    DEFAULT_BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
        auto_paginate: bool = False,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            token: GitHub access token (anonymous if None)
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
            auto_paginate: Follow pagination links on list requests
            user_agent: User-Agent header value
            transport: Custom httpx transport, mainly for testing
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            retry_config=retry_config,
            auto_paginate=auto_paginate,
            user_agent=user_agent,
            transport=transport,
        )

        self.gists = GistsClient(self._transport)

    @classmethod
    def from_env(
        cls,
        retry_config: RetryConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> "GistKitClient":
        """
        Create a client from environment variables.

        Environment variables:
            GITHUB_TOKEN: Access token (optional, falls back to GISTKIT_TOKEN)
            GISTKIT_BASE_URL: Base URL for API (optional, default: https://api.github.com)
            GISTKIT_TIMEOUT: Request timeout in seconds (optional, default: 30)
            GISTKIT_AUTO_PAGINATE: "1", "true", "yes" or "on" to follow pagination links

        Raises:
            ConfigurationError: If an environment variable has an invalid value
        """
        token = os.environ.get("GITHUB_TOKEN") or os.environ.get("GISTKIT_TOKEN")
        base_url = os.environ.get("GISTKIT_BASE_URL", cls.DEFAULT_BASE_URL)
        timeout_str = os.environ.get("GISTKIT_TIMEOUT")
        auto_paginate = os.environ.get("GISTKIT_AUTO_PAGINATE", "").lower() in _TRUTHY

        if not base_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"Invalid GISTKIT_BASE_URL: {base_url}. Must be an http(s) URL"
            )

        timeout = cls.DEFAULT_TIMEOUT
        if timeout_str:
            try:
                timeout = float(timeout_str)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid GISTKIT_TIMEOUT: {timeout_str}. Must be a number of seconds"
                ) from None
            if timeout <= 0:
                raise ConfigurationError("GISTKIT_TIMEOUT must be positive")

        return cls(
            token=token,
            base_url=base_url,
            timeout=timeout,
            retry_config=retry_config,
            auto_paginate=auto_paginate,
            transport=transport,
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GistKitClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
