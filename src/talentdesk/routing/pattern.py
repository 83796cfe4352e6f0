"""Path patterns shared by the server router and the client route table.

Segments are static (``/talents``), named parameters (``/:id`` or
``/{id}``), or a trailing wildcard (``/*``) that swallows the rest of the
path. Matching is case-sensitive and ignores leading/trailing slashes.
"""

from dataclasses import dataclass

from talentdesk.errors import ConfigurationError

WILDCARD = "*"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:   ``/users``  (param_name=None)
    Param:    ``/:id``    (param_name="id")
    Wildcard: ``/*``      (param_name="*", is_wildcard=True)
    """

    value: str
    param_name: str | None = None

    @property
    def is_param(self) -> bool:
        return self.param_name is not None

    @property
    def is_wildcard(self) -> bool:
        return self.param_name == WILDCARD


def _split(path: str) -> list[str]:
    return [part for part in path.strip("/").split("/") if part]


def parse_path(path: str) -> tuple[PathSegment, ...]:
    """Parse a route path string into segments.

    Examples::

        "/"                   -> ()
        "/talents"            -> (PathSegment("talents"),)
        "/talent/:id"         -> (PathSegment("talent"), PathSegment(":id", "id"))
        "/presentation/{id}"  -> (PathSegment("presentation"), PathSegment("{id}", "id"))
        "/media/*"            -> (PathSegment("media"), PathSegment("*", "*"))

    Raises:
        ConfigurationError: For an unnamed parameter or a wildcard that is
            not the last segment.
    """
    parts = _split(path)
    segments: list[PathSegment] = []
    for i, part in enumerate(parts):
        if part == WILDCARD:
            if i != len(parts) - 1:
                msg = f"Wildcard must be the last segment in {path!r}"
                raise ConfigurationError(msg)
            segments.append(PathSegment(value=part, param_name=WILDCARD))
        elif part.startswith(":") or (part.startswith("{") and part.endswith("}")):
            name = part[1:] if part.startswith(":") else part[1:-1]
            if not name:
                msg = f"Unnamed path parameter in {path!r}"
                raise ConfigurationError(msg)
            segments.append(PathSegment(value=part, param_name=name))
        else:
            segments.append(PathSegment(value=part))
    return tuple(segments)


class PathPattern:
    """A compiled path pattern.

    Usage::

        pattern = PathPattern("/talent/:id")
        pattern.match("/talent/42")   # {"id": "42"}
        pattern.match("/talent")      # None
    """

    __slots__ = ("_segments", "path")

    def __init__(self, path: str) -> None:
        self.path = path
        self._segments = parse_path(path)

    @property
    def segments(self) -> tuple[PathSegment, ...]:
        return self._segments

    def match(self, path: str) -> dict[str, str] | None:
        """Return captured parameters, or ``None`` if *path* does not match."""
        parts = _split(path)
        params: dict[str, str] = {}
        for i, seg in enumerate(self._segments):
            if seg.is_wildcard:
                params[WILDCARD] = "/".join(parts[i:])
                return params
            if i >= len(parts):
                return None
            if seg.param_name is not None:
                params[seg.param_name] = parts[i]
            elif seg.value != parts[i]:
                return None
        if len(parts) != len(self._segments):
            return None
        return params

    def __repr__(self) -> str:
        return f"PathPattern({self.path!r})"
