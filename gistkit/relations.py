"""
Named relations for the gists API.

Each relation maps a name (``gists``, ``star``, ``comments``, ...) to an
RFC 6570 URI template and the parameters it cannot be expanded without.
Resource clients refer to endpoints by relation name only; the transport
resolves the name to a path through a ``RelationMap``.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit

from uritemplate import URITemplate

from gistkit.exceptions import RelationError


@dataclass(frozen=True)
class Relation:
    """A named, templated link to a resource or action."""

    name: str
    template: str
    required: tuple[str, ...] = ()
    collection: bool = False
    _uri: URITemplate = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        uri = URITemplate(self.template)
        unknown = set(self.required) - uri.variable_names
        if unknown:
            raise RelationError(
                f"Relation '{self.name}' requires parameters not in its template: "
                f"{', '.join(sorted(unknown))}"
            )
        object.__setattr__(self, "_uri", uri)

    @property
    def params(self) -> frozenset[str]:
        """All variable names appearing in the template."""
        return frozenset(self._uri.variable_names)

    def expand(self, **params: Any) -> str:
        """
        Expand the template into a path.

        Args:
            **params: Values for the template variables. ``None`` values are
                treated as absent.

        Returns:
            The expanded path, e.g. ``/gists/aa5a315d/comments/1``

        Raises:
            RelationError: If a required parameter is missing or empty, or an
                unknown parameter is given
        """
        unknown = set(params) - self.params
        if unknown:
            raise RelationError(
                f"Unknown parameters for relation '{self.name}': "
                f"{', '.join(sorted(unknown))}"
            )

        values = {
            key: str(value) for key, value in params.items() if value is not None
        }

        missing = [key for key in self.required if not values.get(key)]
        if missing:
            raise RelationError(
                f"Relation '{self.name}' requires: {', '.join(missing)}"
            )

        return self._uri.expand(values)

    def is_listing(self, params: Mapping[str, Any] | None = None) -> bool:
        """
        Whether expanding with ``params`` addresses a paginated listing.

        A collection relation stops being a listing once any of its optional
        variables is given: ``gists`` with a ``gist_id`` is a single gist.
        """
        if not self.collection:
            return False
        given = {key for key, value in (params or {}).items() if value is not None}
        return not given - set(self.required)


class RelationMap:
    """A lookup of relations by name."""

    def __init__(self, relations: Iterable[Relation]) -> None:
        self._relations: dict[str, Relation] = {}
        for relation in relations:
            self._relations[relation.name] = relation

    def __contains__(self, name: object) -> bool:
        return name in self._relations

    def __getitem__(self, name: str) -> Relation:
        try:
            return self._relations[name]
        except KeyError:
            raise RelationError(f"Unknown relation: {name}") from None

    def __iter__(self):
        return iter(self._relations.values())

    def __len__(self) -> int:
        return len(self._relations)

    def resolve(self, name: str, params: Mapping[str, Any] | None = None) -> str:
        """Expand the named relation with the given URI parameters."""
        return self[name].expand(**dict(params or {}))


GIST_RELATIONS = RelationMap([
    # Root relations
    Relation("gists", "/gists{/gist_id}", collection=True),
    Relation("public_gists", "/gists/public", collection=True),
    Relation("starred_gists", "/gists/starred", collection=True),
    Relation("user_gists", "/users/{user}/gists", required=("user",), collection=True),
    # Gist relations
    Relation("self", "/gists/{gist_id}", required=("gist_id",)),
    Relation("star", "/gists/{gist_id}/star", required=("gist_id",)),
    Relation("fork", "/gists/{gist_id}/forks", required=("gist_id",)),
    Relation("forks", "/gists/{gist_id}/forks", required=("gist_id",), collection=True),
    Relation("commits", "/gists/{gist_id}/commits", required=("gist_id",), collection=True),
    Relation("revision", "/gists/{gist_id}/{sha}", required=("gist_id", "sha")),
    Relation("comments", "/gists/{gist_id}/comments", required=("gist_id",), collection=True),
    Relation(
        "comment",
        "/gists/{gist_id}/comments/{comment_id}",
        required=("gist_id", "comment_id"),
    ),
])


def normalize_gist_id(gist: str | int) -> str:
    """
    Normalize a gist reference to its bare ID.

    Accepts a bare ID or a gist URL such as
    ``https://gist.github.com/octocat/aa5a315d`` or
    ``https://api.github.com/gists/aa5a315d``.

    Raises:
        RelationError: If no ID can be extracted
    """
    if isinstance(gist, int):
        return str(gist)

    value = gist.strip()
    if "/" in value:
        path = urlsplit(value).path if "://" in value else value
        segments = [segment for segment in path.split("/") if segment]
        value = segments[-1] if segments else ""
        if value.endswith(".git"):
            value = value[: -len(".git")]

    if not value:
        raise RelationError(f"Cannot determine gist ID from {gist!r}")
    return value
