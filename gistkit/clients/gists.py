"""Gists resource client.

Covers listing, fetching, creating, editing, starring, forking and deleting
gists, plus comments, commits and forks nested under a gist.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any

from gistkit.relations import normalize_gist_id
from gistkit.types.gists import (
    Gist,
    GistComment,
    GistCommit,
    GistFile,
    GistFork,
    GistOwner,
)

if TYPE_CHECKING:
    from gistkit.transport import HTTPTransport

# A file is given as its content, as a mapping with "content" and/or
# "filename" (rename), or as None to delete it on edit.
FileSpec = str | Mapping[str, Any] | None


def _parse_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value.rstrip("Z"))


def _parse_owner(data: dict[str, Any] | None) -> GistOwner | None:
    if not data:
        return None
    return GistOwner(
        login=data["login"],
        id=data["id"],
        html_url=data.get("html_url"),
    )


def _parse_gist(data: dict[str, Any]) -> Gist:
    files = {
        name: GistFile(
            filename=file.get("filename") or name,
            content=file.get("content"),
            language=file.get("language"),
            size=file.get("size", 0),
            raw_url=file.get("raw_url"),
            truncated=file.get("truncated", False),
        )
        for name, file in (data.get("files") or {}).items()
        if file is not None
    }
    return Gist(
        id=str(data["id"]),
        description=data.get("description"),
        public=data.get("public", False),
        files=files,
        owner=_parse_owner(data.get("owner")),
        html_url=data.get("html_url"),
        comments=data.get("comments", 0),
        created_at=_parse_datetime(data.get("created_at")),
        updated_at=_parse_datetime(data.get("updated_at")),
        raw=data,
    )


def _parse_comment(data: dict[str, Any]) -> GistComment:
    return GistComment(
        id=data["id"],
        body=data["body"],
        user=_parse_owner(data.get("user")),
        created_at=_parse_datetime(data.get("created_at")),
        updated_at=_parse_datetime(data.get("updated_at")),
    )


def _parse_commit(data: dict[str, Any]) -> GistCommit:
    status = data.get("change_status") or {}
    return GistCommit(
        version=data["version"],
        committed_at=_parse_datetime(data.get("committed_at")),
        additions=status.get("additions", 0),
        deletions=status.get("deletions", 0),
        total=status.get("total", 0),
        user=_parse_owner(data.get("user")),
    )


def _parse_fork(data: dict[str, Any]) -> GistFork:
    return GistFork(
        id=str(data["id"]),
        owner=_parse_owner(data.get("owner") or data.get("user")),
        url=data.get("url"),
        created_at=_parse_datetime(data.get("created_at")),
    )


def _files_payload(files: Mapping[str, FileSpec]) -> dict[str, Any]:
    """Wrap plain-string contents as ``{"content": ...}``; keep None as null."""
    payload: dict[str, Any] = {}
    for filename, spec in files.items():
        if spec is None:
            payload[filename] = None
        elif isinstance(spec, str):
            payload[filename] = {"content": spec}
        else:
            payload[filename] = dict(spec)
    return payload


def _merge(options: Mapping[str, Any] | None, **fields: Any) -> dict[str, Any]:
    """Copy ``options`` and add every field that is not None."""
    merged = dict(options or {})
    merged.update({key: value for key, value in fields.items() if value is not None})
    return merged


class GistsClient:
    """
    Client for gist operations.

    Every method accepts an ``options`` mapping: it is sent as the query
    string for GET and DELETE requests and merged into the JSON body for
    POST, PATCH and PUT requests. The caller's mapping is never modified.

    Errors raised by the transport propagate unchanged. Methods returning
    ``bool`` never raise for an HTTP status: anything other than 204 is
    ``False``.
    """

    def __init__(self, transport: HTTPTransport) -> None:
        """
        Initialize the gists client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list(
        self,
        username: str | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> list[Gist]:
        """
        List gists for a user, or the root gists listing.

        Without a username this is the authenticated user's gists, or all
        public gists for an anonymous client.

        Args:
            username: Optional user to filter the listing
            options: Query parameters (``since``, ``per_page``, ``page``)

        Returns:
            List of Gist objects

        Example:
            ```python
            client.gists.list("octocat")
            client.gists.list()
            ```
        """
        if username is None:
            response = self.transport.get("gists", options)
        else:
            response = self.transport.get("user_gists", options, {"user": username})
        return [_parse_gist(gist) for gist in response.data or []]

    def list_public(self, options: Mapping[str, Any] | None = None) -> list[Gist]:
        """List all public gists."""
        response = self.transport.get("public_gists", options)
        return [_parse_gist(gist) for gist in response.data or []]

    def list_starred(self, options: Mapping[str, Any] | None = None) -> list[Gist]:
        """
        List the authenticated user's starred gists.

        Raises:
            AuthenticationError: If the client is not authenticated
        """
        response = self.transport.get("starred_gists", options)
        return [_parse_gist(gist) for gist in response.data or []]

    def get(self, gist_id: str | int, options: Mapping[str, Any] | None = None) -> Gist:
        """
        Get a single gist.

        Args:
            gist_id: ID or URL of the gist

        Raises:
            NotFoundError: If the gist does not exist
        """
        response = self.transport.get(
            "self", options, {"gist_id": normalize_gist_id(gist_id)}
        )
        return _parse_gist(response.data)

    def get_revision(
        self,
        gist_id: str | int,
        sha: str,
        options: Mapping[str, Any] | None = None,
    ) -> Gist:
        """Get a gist as it was at a given revision."""
        response = self.transport.get(
            "revision", options, {"gist_id": normalize_gist_id(gist_id), "sha": sha}
        )
        return _parse_gist(response.data)

    def create(
        self,
        files: Mapping[str, FileSpec],
        description: str | None = None,
        public: bool = False,
        options: Mapping[str, Any] | None = None,
    ) -> Gist:
        """
        Create a gist.

        Args:
            files: Files that make up the gist, keyed by filename. Values are
                the file content, or a mapping with a ``content`` key.
            description: Optional gist description
            public: Whether the gist is public (default: secret)
            options: Additional body fields

        Returns:
            The newly created Gist

        Example:
            ```python
            gist = client.gists.create(
                {"hello.py": "print('hello')"},
                description="Greeting",
                public=True,
            )
            ```
        """
        body = _merge(
            options,
            description=description,
            public=public,
            files=_files_payload(files),
        )
        response = self.transport.post("gists", body)
        return _parse_gist(response.data)

    def edit(
        self,
        gist_id: str | int,
        description: str | None = None,
        files: Mapping[str, FileSpec] | None = None,
        public: bool | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> Gist:
        """
        Edit a gist.

        Files from the previous version that are not named in ``files`` are
        carried over unchanged. A file mapped to ``None`` is deleted; a file
        mapped to ``{"filename": "new.py"}`` is renamed.

        Args:
            gist_id: ID or URL of the gist
            description: New description (unchanged if None)
            files: Files to add, change, rename or delete
            public: New visibility (unchanged if None)
            options: Additional body fields

        Returns:
            The updated Gist
        """
        body = _merge(
            options,
            description=description,
            files=_files_payload(files) if files is not None else None,
            public=public,
        )
        response = self.transport.patch(
            "self", body, {"gist_id": normalize_gist_id(gist_id)}
        )
        return _parse_gist(response.data)

    def star(self, gist_id: str | int, options: Mapping[str, Any] | None = None) -> bool:
        """Star a gist. Returns True if the gist was starred."""
        response = self.transport.put(
            "star",
            options,
            {"gist_id": normalize_gist_id(gist_id)},
            raise_for_status=False,
        )
        return response.status == 204

    def unstar(self, gist_id: str | int, options: Mapping[str, Any] | None = None) -> bool:
        """Unstar a gist. Returns True if the gist was unstarred."""
        response = self.transport.delete(
            "star",
            options,
            {"gist_id": normalize_gist_id(gist_id)},
            raise_for_status=False,
        )
        return response.status == 204

    def is_starred(
        self, gist_id: str | int, options: Mapping[str, Any] | None = None
    ) -> bool:
        """
        Check if a gist is starred by the authenticated user.

        A missing gist and an unstarred gist both return False; use
        ``transport.get("star", uri=..., raise_for_status=False)`` to tell
        them apart by status.
        """
        response = self.transport.get(
            "star",
            options,
            {"gist_id": normalize_gist_id(gist_id)},
            raise_for_status=False,
        )
        return response.status == 204

    def fork(self, gist_id: str | int, options: Mapping[str, Any] | None = None) -> Gist:
        """Fork a gist. Returns the new gist."""
        response = self.transport.post(
            "fork", options, {"gist_id": normalize_gist_id(gist_id)}
        )
        return _parse_gist(response.data)

    def list_forks(
        self, gist_id: str | int, options: Mapping[str, Any] | None = None
    ) -> list[GistFork]:
        """List forks of a gist."""
        response = self.transport.get(
            "forks", options, {"gist_id": normalize_gist_id(gist_id)}
        )
        return [_parse_fork(fork) for fork in response.data or []]

    def list_commits(
        self, gist_id: str | int, options: Mapping[str, Any] | None = None
    ) -> list[GistCommit]:
        """List the revision history of a gist."""
        response = self.transport.get(
            "commits", options, {"gist_id": normalize_gist_id(gist_id)}
        )
        return [_parse_commit(commit) for commit in response.data or []]

    def delete(self, gist_id: str | int, options: Mapping[str, Any] | None = None) -> bool:
        """Delete a gist. Returns True only on a 204 response."""
        response = self.transport.delete(
            "self",
            options,
            {"gist_id": normalize_gist_id(gist_id)},
            raise_for_status=False,
        )
        return response.status == 204

    def list_comments(
        self, gist_id: str | int, options: Mapping[str, Any] | None = None
    ) -> list[GistComment]:
        """
        List comments on a gist.

        Example:
            ```python
            client.gists.list_comments("3528645")
            ```
        """
        response = self.transport.get(
            "comments", options, {"gist_id": normalize_gist_id(gist_id)}
        )
        return [_parse_comment(comment) for comment in response.data or []]

    def get_comment(
        self,
        gist_id: str | int,
        comment_id: int,
        options: Mapping[str, Any] | None = None,
    ) -> GistComment:
        """Get a single gist comment."""
        response = self.transport.get(
            "comment",
            options,
            {"gist_id": normalize_gist_id(gist_id), "comment_id": comment_id},
        )
        return _parse_comment(response.data)

    def create_comment(
        self,
        gist_id: str | int,
        body: str,
        options: Mapping[str, Any] | None = None,
    ) -> GistComment:
        """
        Create a comment on a gist.

        Requires an authenticated client.

        Example:
            ```python
            client.gists.create_comment("3528645", "This is very helpful.")
            ```
        """
        response = self.transport.post(
            "comments",
            _merge(options, body=body),
            {"gist_id": normalize_gist_id(gist_id)},
        )
        return _parse_comment(response.data)

    def update_comment(
        self,
        gist_id: str | int,
        comment_id: int,
        body: str,
        options: Mapping[str, Any] | None = None,
    ) -> GistComment:
        """Update a gist comment. Requires an authenticated client."""
        response = self.transport.patch(
            "comment",
            _merge(options, body=body),
            {"gist_id": normalize_gist_id(gist_id), "comment_id": comment_id},
        )
        return _parse_comment(response.data)

    def delete_comment(
        self,
        gist_id: str | int,
        comment_id: int,
        options: Mapping[str, Any] | None = None,
    ) -> bool:
        """Delete a gist comment. Returns True only on a 204 response."""
        response = self.transport.delete(
            "comment",
            options,
            {"gist_id": normalize_gist_id(gist_id), "comment_id": comment_id},
            raise_for_status=False,
        )
        return response.status == 204
