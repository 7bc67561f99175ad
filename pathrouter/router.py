"""Routing of requests to handlers by method and path glob."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from http import HTTPStatus
from types import MappingProxyType
from typing import Any
from urllib.parse import urlsplit, urlunsplit

from pathrouter.http import HttpError, Method, Request, Response
from pathrouter.recognizer import Match, Recognizer

Handler = Any

_OPTIONS_METHODS = (
    Method.GET,
    Method.POST,
    Method.PUT,
    Method.DELETE,
    Method.HEAD,
    Method.PATCH,
)

_BUILDER_METHODS = frozenset(
    {"get", "post", "put", "delete", "head", "patch", "options", "any"}
)

_UNMATCHED = object()


class NoRoute(HttpError):
    """Raised when no route matches; carries a 404 response."""

    description = "No Route"

    def __init__(self) -> None:
        super().__init__(Response(HTTPStatus.NOT_FOUND), "No matching route found.")


class TrailingSlash(HttpError):
    """Raised when a request is redirected by adding or removing a trailing slash."""

    description = "Trailing Slash"

    def __init__(self, location: str) -> None:
        response = Response(HTTPStatus.MOVED_PERMANENTLY, headers={"Location": location})
        super().__init__(response, "The request had a trailing slash.")
        self.location = location


class DuplicateRouteId(ValueError):
    """Raised when a route id is reused for a different glob."""

    def __init__(self, route_id: str) -> None:
        super().__init__(f"Duplicate route_id: {route_id}")
        self.route_id = route_id


def _check_handler(handler: Handler) -> None:
    if not (callable(getattr(handler, "handle", None)) or callable(handler)):
        raise TypeError(f"not a handler: {handler!r}")


def _invoke(handler: Handler, request: Request) -> Response:
    handle = getattr(handler, "handle", None)
    if callable(handle):
        return handle(request)
    return handler(request)


class Router:
    """Dispatches requests to handlers registered by method and glob.

    A handler is a callable taking a request, or an object with a
    ``handle(request)`` method; it returns a Response or raises HttpError.
    """

    def __init__(self) -> None:
        self._routers: dict[str, Recognizer[Handler]] = {}
        self._wildcard: Recognizer[Handler] = Recognizer()
        self._route_ids: dict[str, str] = {}

    @property
    def route_ids(self) -> Mapping[str, str]:
        """Route ids mapped to the globs they were registered with."""
        return MappingProxyType(self._route_ids)

    def _register_id(self, route_id: str, glob: str) -> None:
        existing = self._route_ids.get(route_id)
        if existing is not None and existing != glob:
            raise DuplicateRouteId(route_id)
        self._route_ids[route_id] = glob

    def route(self, method: Method | str, glob: str, handler: Handler, route_id: str) -> Router:
        """Register ``handler`` for ``method`` requests whose path matches ``glob``."""
        _check_handler(handler)
        method = Method.parse(method)
        self._register_id(route_id, glob)
        self._routers.setdefault(method, Recognizer()).add(glob, handler)
        return self

    def get(self, glob: str, handler: Handler, route_id: str) -> Router:
        """Register a GET route."""
        return self.route(Method.GET, glob, handler, route_id)

    def post(self, glob: str, handler: Handler, route_id: str) -> Router:
        """Register a POST route."""
        return self.route(Method.POST, glob, handler, route_id)

    def put(self, glob: str, handler: Handler, route_id: str) -> Router:
        """Register a PUT route."""
        return self.route(Method.PUT, glob, handler, route_id)

    def delete(self, glob: str, handler: Handler, route_id: str) -> Router:
        """Register a DELETE route."""
        return self.route(Method.DELETE, glob, handler, route_id)

    def head(self, glob: str, handler: Handler, route_id: str) -> Router:
        """Register a HEAD route."""
        return self.route(Method.HEAD, glob, handler, route_id)

    def patch(self, glob: str, handler: Handler, route_id: str) -> Router:
        """Register a PATCH route."""
        return self.route(Method.PATCH, glob, handler, route_id)

    def options(self, glob: str, handler: Handler, route_id: str) -> Router:
        """Register an OPTIONS route."""
        return self.route(Method.OPTIONS, glob, handler, route_id)

    def any(self, glob: str, handler: Handler, route_id: str) -> Router:
        """Register a route for every method; method-specific routes take precedence."""
        _check_handler(handler)
        self._register_id(route_id, glob)
        self._wildcard.add(glob, handler)
        return self

    def recognize(self, method: Method | str, path: str) -> Match[Handler] | None:
        """Find the route for ``method`` and ``path``, falling back to ``any`` routes."""
        specific = self._routers.get(method)
        if specific is not None:
            found = specific.recognize(path)
            if found is not None:
                return found
        return self._wildcard.recognize(path)

    def handle_options(self, path: str) -> Response:
        """Answer an OPTIONS request with the methods routed for ``path``."""
        allowed = [
            method
            for method in _OPTIONS_METHODS
            if (recognizer := self._routers.get(method)) is not None
            and recognizer.recognize(path) is not None
        ]
        if Method.GET in allowed and Method.HEAD not in allowed:
            allowed.append(Method.HEAD)
        return Response(HTTPStatus.OK, headers={"Allow": ", ".join(allowed)})

    def _redirect_slash(self, request: Request) -> None:
        path = request.path()
        if path:
            path = path[:-1] if path.endswith("/") else path + "/"
        if self.recognize(request.method, path) is None:
            return
        parts = urlsplit(request.url)
        raise TrailingSlash(urlunsplit(parts._replace(path="/" + path)))

    def _handle_method(self, request: Request, path: str) -> Any:
        matched = self.recognize(request.method, path)
        if matched is None:
            self._redirect_slash(request)
            return _UNMATCHED
        request.params = matched.params
        request.router = self
        return _invoke(matched.handler, request)

    def handle(self, request: Request) -> Response:
        """Dispatch ``request`` to its handler.

        Raises TrailingSlash when the path matches only with a trailing slash
        added or removed, and NoRoute when nothing matches.
        """
        path = request.path()
        response = self._handle_method(request, path)
        if response is not _UNMATCHED:
            return response
        if request.method == Method.OPTIONS:
            return self.handle_options(path)
        if request.method == Method.HEAD:
            request.method = Method.GET
            response = self._handle_method(request, path)
            if response is not _UNMATCHED:
                return response
        raise NoRoute()


def build_router(*routes: tuple[str, str, str, Handler]) -> Router:
    """Build a router from ``(route_id, method, glob, handler)`` tuples.

    ``method`` is a lowercase name: get, post, put, delete, head, patch,
    options or any.
    """
    if not routes:
        raise ValueError("build_router needs at least one route")
    router = Router()
    for route_id, method, glob, handler in routes:
        if method not in _BUILDER_METHODS:
            raise ValueError(f"unsupported method: {method!r}")
        register: Callable[[str, Handler, str], Router] = getattr(router, method)
        register(glob, handler, route_id)
    return router