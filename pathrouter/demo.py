"""Example applications built on the router, and a WSGI adapter to serve them."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any
from wsgiref.simple_server import make_server
from wsgiref.util import request_uri

from pathrouter.http import HttpError, Method, Request, Response
from pathrouter.router import NoRoute, Router, build_router
from pathrouter.url_for import url_for

logger = logging.getLogger(__name__)


def _call(handler: Any, request: Request) -> Response:
    handle = getattr(handler, "handle", None)
    if callable(handle):
        return handle(request)
    return handler(request)


@dataclass
class MessageHandler:
    """A handler that always answers with a fixed message."""

    message: str

    def handle(self, request: Request) -> Response:
        """Return the message with a 200 status."""
        return Response(HTTPStatus.OK, self.message)


def with_custom_404(handler: Any) -> Callable[[Request], Response]:
    """Wrap ``handler`` so that an unmatched route yields a custom 404 response."""

    def wrapped(request: Request) -> Response:
        try:
            return _call(handler, request)
        except NoRoute:
            logger.info("Hitting custom 404 middleware")
            return Response(HTTPStatus.NOT_FOUND, "Custom 404 response")

    return wrapped


def _ok(request: Request) -> Response:
    return Response(HTTPStatus.OK, "OK")


def _query(request: Request) -> Response:
    return Response(HTTPStatus.OK, request.params.find("query") or "/")


def make_simple_router() -> Router:
    """A router answering ``/`` with OK and ``/:query`` with the query segment."""
    return build_router(
        ("root", "get", "/", _ok),
        ("query", "get", "/:query", _query),
    )


def _please_go_to(request: Request) -> Response:
    target = url_for(request, "id_2", {"query": "test", "extraparam": "foo"})
    return Response(HTTPStatus.OK, f"Please go to: {target}")


def make_url_for_router() -> Router:
    """A router whose index page links to a generated URL for another route."""
    return build_router(
        ("id_1", "get", "/", _please_go_to),
        ("id_2", "get", "/:query", _query),
    )


def _make_custom_404_app() -> Callable[[Request], Response]:
    router = Router()
    router.get("/", lambda request: Response(HTTPStatus.OK, "Handling response"), "example")
    return with_custom_404(router)


def _make_struct_handler_router() -> Router:
    router = Router()
    router.get("/", MessageHandler("You've found the index page!"), "index")
    return router


_EXAMPLES: dict[str, Callable[[], Any]] = {
    "simple": make_simple_router,
    "url_for": make_url_for_router,
    "custom_404": _make_custom_404_app,
    "struct_handler": _make_struct_handler_router,
}


def _status_line(code: int) -> str:
    try:
        phrase = HTTPStatus(code).phrase
    except ValueError:
        phrase = "Unknown"
    return f"{int(code)} {phrase}"


def _request_from_environ(environ: dict[str, Any]) -> Request:
    headers = {
        key[5:].replace("_", "-").title(): value
        for key, value in environ.items()
        if key.startswith("HTTP_")
    }
    if environ.get("CONTENT_TYPE"):
        headers["Content-Type"] = environ["CONTENT_TYPE"]
    try:
        length = int(environ.get("CONTENT_LENGTH") or 0)
    except ValueError:
        length = 0
    stream = environ.get("wsgi.input")
    body = stream.read(length) if stream is not None and length > 0 else b""
    return Request(
        method=environ.get("REQUEST_METHOD", "GET"),
        url=request_uri(environ, include_query=True),
        headers=headers,
        body=body,
    )


def as_wsgi(handler: Any) -> Callable[[dict[str, Any], Callable[..., Any]], Iterable[bytes]]:
    """Expose ``handler`` as a WSGI application."""

    def app(environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        request = _request_from_environ(environ)
        is_head = request.method == Method.HEAD
        try:
            response = _call(handler, request)
        except HttpError as error:
            response = error.response
        body = response.body.encode("utf-8") if isinstance(response.body, str) else bytes(response.body)
        headers = dict(response.headers)
        headers.setdefault("Content-Type", "text/plain; charset=utf-8")
        headers["Content-Length"] = str(len(body))
        start_response(_status_line(response.status), list(headers.items()))
        return [b"" if is_head else body]

    return app


def main(argv: list[str] | None = None) -> None:
    """Serve one of the example applications over HTTP."""
    parser = argparse.ArgumentParser(description="Serve an example router application.")
    parser.add_argument("--example", choices=sorted(_EXAMPLES), default="simple")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    app = as_wsgi(_EXAMPLES[args.example]())
    with make_server(args.host, args.port, app) as server:
        logger.info("Serving %s on http://%s:%d", args.example, args.host, args.port)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass


if __name__ == "__main__":
    main()