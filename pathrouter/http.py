"""Requests, responses and errors exchanged with route handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from http import HTTPStatus
from typing import Any
from urllib.parse import urlsplit

from pathrouter.recognizer import Params


class Method(str, Enum):
    """The standard HTTP methods. Other method names are kept as plain strings."""

    OPTIONS = "OPTIONS"
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    TRACE = "TRACE"
    CONNECT = "CONNECT"
    PATCH = "PATCH"

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def parse(value: str) -> Method | str:
        """Return the standard method named ``value``, or ``value`` itself.

        Method names are case-sensitive. An empty name is rejected.
        """
        if isinstance(value, Method):
            return value
        if not value:
            raise ValueError("empty HTTP method")
        try:
            return Method(value)
        except ValueError:
            return str(value)


@dataclass
class Request:
    """An incoming request as seen by the router and its handlers."""

    method: Method | str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    params: Params = field(default_factory=Params)
    router: Any = None

    def __post_init__(self) -> None:
        self.method = Method.parse(self.method)

    def path(self) -> str:
        """The URL path without its leading slash."""
        path = urlsplit(self.url).path
        return path[1:] if path.startswith("/") else path


@dataclass
class Response:
    """A response produced by a handler."""

    status: int = HTTPStatus.OK
    body: str | bytes = ""
    headers: dict[str, str] = field(default_factory=dict)


class HttpError(Exception):
    """An error raised while handling a request, with the response to send."""

    def __init__(self, response: Response, message: str = "") -> None:
        super().__init__(message)
        self.response = response