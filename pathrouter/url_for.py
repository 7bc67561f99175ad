"""Generation of URLs for named routes."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from pathrouter.http import Request

_SEGMENT_SAFE = "!$&'()*+,;=:@"


class MissingParameter(LookupError):
    """Raised when a glob needs a parameter that was not supplied."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No value for key {key}")
        self.key = key


def _is_dynamic(segment: str) -> bool:
    return len(segment) > 1 and segment[0] in ":*"


def build_url(url: str, glob: str, params: Mapping[str, object] | None = None) -> str:
    """Replace the path of ``url`` with ``glob`` filled in from ``params``.

    Parameters not used in the path become query parameters; any existing
    query and fragment are dropped.
    """
    remaining = {key: str(value) for key, value in (params or {}).items()}
    segments: list[str] = []
    for segment in glob.split("/"):
        if _is_dynamic(segment):
            key = segment[1:]
            try:
                value = remaining.pop(key)
            except KeyError:
                raise MissingParameter(key) from None
        else:
            value = segment
        if not segments and not value:
            # Empty segments before the first real one collapse into the root.
            continue
        segments.append(quote(value, safe=_SEGMENT_SAFE))

    parts = urlsplit(url)
    path = "/" + "/".join(segments)
    query = urlencode(list(remaining.items())) if remaining else ""
    return urlunsplit((parts.scheme, parts.netloc, path, query, ""))


def url_for(request: Request, route_id: str, params: Mapping[str, object] | None = None) -> str:
    """Build a URL for ``route_id`` based on the URL of ``request``.

    ``params`` fill the route's dynamic segments; the rest are appended as
    query parameters. The request must have been dispatched by a router.
    """
    router = request.router
    if router is None:
        raise LookupError("Couldn't find router set up properly.")
    try:
        glob = router.route_ids[route_id]
    except KeyError:
        raise KeyError(f"No route with that ID: {route_id}") from None
    return build_url(request.url, glob, params)