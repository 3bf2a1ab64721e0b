"""Gist-related data models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class GistOwner:
    """Owner of a gist or author of a comment."""

    login: str
    id: int
    html_url: str | None = None


@dataclass
class GistFile:
    """A single file inside a gist."""

    filename: str
    content: str | None = None
    language: str | None = None
    size: int = 0
    raw_url: str | None = None
    truncated: bool = False


@dataclass
class Gist:
    """Gist information."""

    id: str
    description: str | None
    public: bool
    files: dict[str, GistFile]
    owner: GistOwner | None
    html_url: str | None
    comments: int
    created_at: datetime | None
    updated_at: datetime | None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


@dataclass
class GistComment:
    """A comment on a gist."""

    id: int
    body: str
    user: GistOwner | None
    created_at: datetime | None
    updated_at: datetime | None


@dataclass
class GistCommit:
    """One entry in a gist's revision history."""

    version: str
    committed_at: datetime | None
    additions: int
    deletions: int
    total: int
    user: GistOwner | None


@dataclass
class GistFork:
    """A fork of a gist."""

    id: str
    owner: GistOwner | None
    url: str | None
    created_at: datetime | None
