"""gistkit - Python client for the GitHub gists API."""

from gistkit.client import GistKitClient
from gistkit.clients import GistsClient
from gistkit.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    GistKitError,
    NotFoundError,
    RateLimitedError,
    RelationError,
    ServerError,
    ValidationError,
)
from gistkit.logging import configure_logging, get_logger
from gistkit.relations import GIST_RELATIONS, Relation, RelationMap
from gistkit.transport import HTTPTransport, Response, RetryConfig
from gistkit.types import Gist, GistComment, GistCommit, GistFile, GistFork, GistOwner

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Client
    "GistKitClient",
    "GistsClient",
    # Types
    "Gist",
    "GistComment",
    "GistCommit",
    "GistFile",
    "GistFork",
    "GistOwner",
    # Exceptions
    "GistKitError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "ConfigurationError",
    "RelationError",
    # Relations
    "Relation",
    "RelationMap",
    "GIST_RELATIONS",
    # Transport
    "HTTPTransport",
    "Response",
    "RetryConfig",
    # Logging
    "configure_logging",
    "get_logger",
]
