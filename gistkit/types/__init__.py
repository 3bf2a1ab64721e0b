"""gistkit type definitions.

This module exports all data model types used by the package.
"""

from gistkit.types.gists import (
    Gist,
    GistComment,
    GistCommit,
    GistFile,
    GistFork,
    GistOwner,
)

__all__ = [
    "Gist",
    "GistComment",
    "GistCommit",
    "GistFile",
    "GistFork",
    "GistOwner",
]
