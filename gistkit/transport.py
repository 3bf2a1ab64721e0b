"""
HTTP Transport for gistkit.

Resolves named relations to paths, sends requests with automatic retry logic,
follows pagination links and maps error responses to typed exceptions.
"""

import random
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any

import httpx

from gistkit.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    GistKitError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from gistkit.logging import get_logger, log_http_request, log_http_response
from gistkit.relations import GIST_RELATIONS, RelationMap

logger = get_logger("transport")

GITHUB_API_VERSION = "2022-11-28"
DEFAULT_USER_AGENT = "gistkit-python"

# Methods whose options are sent as the query string rather than a JSON body
_QUERY_METHODS = frozenset({"GET", "DELETE"})


@dataclass
class RetryConfig:
    """Configuration for automatic retry behavior."""

    max_retries: int = 3
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [429, 500, 502, 503])
    respect_retry_after: bool = True
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


@dataclass
class Response:
    """
    Result of a single API call.

    ``data`` is the decoded JSON payload (``None`` for empty bodies such as
    204 responses). ``links`` maps Link header relations (``next``,
    ``last``, ...) to URLs.
    """

    status: int
    data: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)
    links: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status < 300

    @property
    def request_id(self) -> str | None:
        return self.headers.get("x-github-request-id")


class HTTPTransport:
    """
    HTTP transport layer with relation resolution and retry logic.

    Handles:
    - Relation name + URI parameters to path resolution
    - Bearer token authentication and GitHub API headers
    - Exponential backoff with jitter for retries
    - Retry-After header respect for rate limiting
    - Link header pagination (when ``auto_paginate`` is enabled)
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
        auto_paginate: bool = False,
        user_agent: str = DEFAULT_USER_AGENT,
        relations: RelationMap | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: Access token sent as a Bearer token (anonymous if None)
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
            auto_paginate: Follow ``next`` links on list requests
            user_agent: User-Agent header value
            relations: Relation map used to resolve relation names
            transport: Custom httpx transport (e.g. ``httpx.MockTransport``)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()
        self.auto_paginate = auto_paginate
        self.relations = relations or GIST_RELATIONS

        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "User-Agent": user_agent,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    @property
    def authenticated(self) -> bool:
        return "Authorization" in self._client.headers

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(
        self,
        rel: str,
        options: Mapping[str, Any] | None = None,
        uri: Mapping[str, Any] | None = None,
        *,
        raise_for_status: bool = True,
    ) -> Response:
        return self.request("GET", rel, options, uri, raise_for_status=raise_for_status)

    def post(
        self,
        rel: str,
        options: Mapping[str, Any] | None = None,
        uri: Mapping[str, Any] | None = None,
        *,
        raise_for_status: bool = True,
    ) -> Response:
        return self.request("POST", rel, options, uri, raise_for_status=raise_for_status)

    def patch(
        self,
        rel: str,
        options: Mapping[str, Any] | None = None,
        uri: Mapping[str, Any] | None = None,
        *,
        raise_for_status: bool = True,
    ) -> Response:
        return self.request("PATCH", rel, options, uri, raise_for_status=raise_for_status)

    def put(
        self,
        rel: str,
        options: Mapping[str, Any] | None = None,
        uri: Mapping[str, Any] | None = None,
        *,
        raise_for_status: bool = True,
    ) -> Response:
        return self.request("PUT", rel, options, uri, raise_for_status=raise_for_status)

    def delete(
        self,
        rel: str,
        options: Mapping[str, Any] | None = None,
        uri: Mapping[str, Any] | None = None,
        *,
        raise_for_status: bool = True,
    ) -> Response:
        return self.request("DELETE", rel, options, uri, raise_for_status=raise_for_status)

    def request(
        self,
        method: str,
        rel: str,
        options: Mapping[str, Any] | None = None,
        uri: Mapping[str, Any] | None = None,
        *,
        raise_for_status: bool = True,
    ) -> Response:
        """
        Resolve a relation and send a request to it.

        Args:
            method: HTTP method (GET, POST, PATCH, PUT, DELETE)
            rel: Relation name (e.g., "gists", "star", "comments")
            options: Query parameters for GET/DELETE, JSON body otherwise
            uri: Values for the relation's URI template variables
            raise_for_status: Raise a typed exception on 4xx/5xx responses.
                When False, every status is returned as a Response.

        Returns:
            Response with status, decoded data, headers and links

        Raises:
            RelationError: If the relation is unknown or missing parameters
            GistKitError: On API errors (when raise_for_status is True)
        """
        method = method.upper()
        relation = self.relations[rel]
        path = relation.expand(**dict(uri or {}))
        options = dict(options or {})

        if method in _QUERY_METHODS:
            params, body = options or None, None
        else:
            params, body = None, options or None

        if method == "GET" and self.auto_paginate and relation.is_listing(uri):
            return self._paginate(path, params or {}, raise_for_status)

        response = self._send(method, path, params, body, raise_for_status)
        return self._to_response(response)

    def _paginate(
        self,
        path: str,
        params: dict[str, Any],
        raise_for_status: bool,
    ) -> Response:
        """Fetch a listing and every page reachable through ``next`` links."""
        params.setdefault("per_page", 100)
        result = self._to_response(self._send("GET", path, params, None, raise_for_status))
        if not result.ok or not isinstance(result.data, list):
            return result

        items = list(result.data)
        while "next" in result.links:
            next_url = result.links["next"]
            logger.debug("Following next page: %s", next_url)
            result = self._to_response(
                self._send("GET", next_url, None, None, raise_for_status)
            )
            if not result.ok or not isinstance(result.data, list):
                break
            items.extend(result.data)

        return Response(
            status=result.status,
            data=items,
            headers=result.headers,
            links=result.links,
        )

    def _send(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None,
        body: dict[str, Any] | None,
        raise_for_status: bool,
    ) -> httpx.Response:
        def make_request() -> httpx.Response:
            log_http_request(method, url, dict(self._client.headers), body)
            started = time.monotonic()
            response = self._client.request(method, url, params=params, json=body)
            log_http_response(
                response.status_code,
                url,
                elapsed_ms=(time.monotonic() - started) * 1000,
                request_id=response.headers.get("x-github-request-id"),
            )
            return response

        return self._execute_with_retry(make_request, raise_for_status)

    def _execute_with_retry(
        self,
        request_fn: Callable[[], httpx.Response],
        raise_for_status: bool = True,
    ) -> httpx.Response:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Function that makes the HTTP request
            raise_for_status: Raise on a final error status instead of
                returning the response

        Returns:
            The final httpx response

        Raises:
            GistKitError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                response = request_fn()
            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e

                last_error = e
                wait_time = self._get_backoff_time(attempt, None)
                logger.warning(
                    "Request failed (%s), retrying in %.2fs", e, wait_time
                )
                time.sleep(wait_time)
                continue

            if response.status_code < 400:
                return response

            if self._should_retry(response.status_code, attempt):
                retry_after = response.headers.get("Retry-After")
                wait_time = self._get_backoff_time(attempt, retry_after)
                logger.warning(
                    "Got HTTP %d, retrying in %.2fs", response.status_code, wait_time
                )
                time.sleep(wait_time)
                continue

            if raise_for_status:
                raise self._parse_error_response(response)
            return response

        # Should not reach here, but just in case
        if last_error:
            if isinstance(last_error, GistKitError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")

    def _should_retry(self, status_code: int, attempt: int) -> bool:
        if attempt >= self.retry_config.max_retries:
            return False

        return status_code in self.retry_config.retry_on

    def _get_backoff_time(
        self, attempt: int, retry_after: str | None
    ) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter, respecting Retry-After header
        if present.

        Args:
            attempt: Current attempt number (0-indexed)
            retry_after: Value of Retry-After header (if present)

        Returns:
            Time to wait in seconds
        """
        if retry_after and self.retry_config.respect_retry_after:
            try:
                return float(retry_after)
            except ValueError:
                pass  # Fall through to exponential backoff

        base_wait = self.retry_config.backoff_factor ** attempt

        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        return min(wait_time, self.retry_config.max_backoff)

    @staticmethod
    def _to_response(response: httpx.Response) -> Response:
        return Response(
            status=response.status_code,
            data=_decode_body(response),
            headers=response.headers,
            links={
                rel: link["url"]
                for rel, link in response.links.items()
                if "url" in link
            },
        )

    def _parse_error_response(self, response: httpx.Response) -> GistKitError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate GistKitError subclass
        """
        data = _decode_body(response)
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        code = _status_code_name(status_code)
        message = data.get("message") or f"HTTP {status_code}"
        errors = data.get("errors")
        if errors:
            message = f"{message}: {errors}"
        request_id = response.headers.get("x-github-request-id")

        if status_code == 429 or (
            status_code == 403 and response.headers.get("x-ratelimit-remaining") == "0"
        ):
            return RateLimitedError(
                "RATE_LIMITED",
                message,
                _retry_after_seconds(response.headers),
                status_code,
                request_id,
            )
        elif status_code == 401:
            return AuthenticationError(code, message, status_code, request_id)
        elif status_code == 403:
            return AuthorizationError(code, message, status_code, request_id)
        elif status_code == 404:
            return NotFoundError(code, message, status_code, request_id)
        elif status_code == 409:
            return ConflictError(code, message, status_code, request_id)
        elif status_code >= 500:
            return ServerError(code, message, status_code, request_id)
        else:
            return ValidationError(code, message, status_code, request_id)


def _decode_body(response: httpx.Response) -> Any:
    if response.status_code == 204 or not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _status_code_name(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase.upper().replace(" ", "_").replace("-", "_")
    except ValueError:
        return "HTTP_ERROR"


def _retry_after_seconds(headers: Mapping[str, str]) -> int:
    """Seconds to wait from Retry-After, else X-RateLimit-Reset, else 60."""
    retry_after = headers.get("retry-after")
    if retry_after:
        try:
            return int(retry_after)
        except ValueError:
            pass

    reset = headers.get("x-ratelimit-reset")
    if reset:
        try:
            return max(int(reset) - int(time.time()), 0)
        except ValueError:
            pass

    return 60
