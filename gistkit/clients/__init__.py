"""gistkit resource clients."""

from gistkit.clients.gists import GistsClient

__all__ = [
    "GistsClient",
]
