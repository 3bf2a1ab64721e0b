"""gistkit exception classes."""


class GistKitError(Exception):
    """Base exception for all gistkit errors."""

    def __init__(
        self,
        code: str,
        message: str,
        status: int | None = None,
        request_id: str | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.status = status
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GistKitError):
    """Raised when client configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class RelationError(GistKitError):
    """Raised when a relation is unknown or cannot be expanded."""

    def __init__(self, message: str) -> None:
        super().__init__("RELATION_ERROR", message)


class AuthenticationError(GistKitError):
    """Raised when credentials are missing or rejected (401)."""

    pass


class AuthorizationError(GistKitError):
    """Raised when access is denied (403)."""

    pass


class NotFoundError(GistKitError):
    """Raised when a resource is not found."""

    pass


class ConflictError(GistKitError):
    """Raised on conflicts (409)."""

    pass


class RateLimitedError(GistKitError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        status: int | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, status, request_id)
        self.retry_after = retry_after


class ValidationError(GistKitError):
    """Raised on validation errors (400, 422 and other 4xx)."""

    pass


class ServerError(GistKitError):
    """Raised on server errors (5xx) and connection failures."""

    pass
