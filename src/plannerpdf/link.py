"""Link targets attached to drawing objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from .errors import InvalidArgumentShape
from .geometry import Bounds


@dataclass(frozen=True)
class GoToLink:
    """Jump to the page with id `page` in the same document."""

    page: int


@dataclass(frozen=True)
class UriLink:
    """Open an external URI."""

    uri: str


Link = Union[GoToLink, UriLink]


@dataclass(frozen=True)
class LinkAnnotation:
    """A clickable region produced from an object tree."""

    bounds: Bounds
    depth: int
    link: Link


def coerce_link(value: Any) -> Link | None:
    """Normalize a link from a page id, a URI string or a `{"type", ...}` mapping."""
    if value is None or isinstance(value, (GoToLink, UriLink)):
        return value
    if isinstance(value, bool):
        msg = "link cannot be a boolean."
        raise InvalidArgumentShape(msg)
    if isinstance(value, int):
        return GoToLink(value)
    if isinstance(value, str):
        return UriLink(value)
    if isinstance(value, Mapping):
        link_type = value.get("type")
        if link_type == "goto" and set(value) == {"type", "page"}:
            page = value["page"]
            if isinstance(page, bool) or not isinstance(page, int):
                msg = f"goto link page must be an integer page id, got {page!r}."
                raise InvalidArgumentShape(msg)
            return GoToLink(page)
        if link_type == "uri" and set(value) == {"type", "uri"}:
            return UriLink(str(value["uri"]))
        msg = f"malformed link mapping: {dict(value)!r}."
        raise InvalidArgumentShape(msg)
    msg = f"cannot interpret {value!r} as a link."
    raise InvalidArgumentShape(msg)
