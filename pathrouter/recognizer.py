"""Glob-pattern recognition of request paths.

A glob is split on ``/`` into segments. A segment starting with ``:`` captures
one non-empty path segment, a segment starting with ``*`` captures the
non-empty rest of the path (slashes included), and any other segment must
match literally. A leading ``/`` on globs and paths is ignored.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class Params(Mapping[str, str]):
    """Values captured from the dynamic segments of a matched path."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def find(self, key: str) -> str | None:
        """Return the value captured under ``key``, or None."""
        return self._values.get(key)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Params({self._values!r})"


@dataclass(frozen=True)
class Match(Generic[T]):
    """A recognized route: its handler and the captured parameters."""

    handler: T
    params: Params


@dataclass(frozen=True)
class _Route(Generic[T]):
    pattern: re.Pattern[str]
    names: tuple[str, ...]
    rank: tuple[int, int, int]
    handler: T


def _strip_leading_slash(text: str) -> str:
    return text[1:] if text.startswith("/") else text


def _compile(glob: str) -> tuple[re.Pattern[str], tuple[str, ...], tuple[int, int, int]]:
    parts: list[str] = []
    names: list[str] = []
    stars = dynamics = statics = 0
    for segment in _strip_leading_slash(glob).split("/"):
        if segment.startswith(":"):
            parts.append("([^/]+)")
            names.append(segment[1:])
            dynamics += 1
        elif segment.startswith("*"):
            parts.append("(.+)")
            names.append(segment[1:])
            stars += 1
        else:
            parts.append(re.escape(segment))
            statics += 1
    # Fewer stars win, then fewer dynamic segments, then more static ones.
    rank = (-stars, -dynamics, statics)
    return re.compile("/".join(parts), re.DOTALL), tuple(names), rank


class Recognizer(Generic[T]):
    """A set of glob patterns, each bound to a handler."""

    def __init__(self) -> None:
        self._routes: list[_Route[T]] = []

    def add(self, glob: str, handler: T) -> None:
        """Register ``handler`` for paths matching ``glob``."""
        pattern, names, rank = _compile(glob)
        self._routes.append(_Route(pattern, names, rank, handler))

    def recognize(self, path: str) -> Match[T] | None:
        """Return the most specific route matching ``path``, or None."""
        path = _strip_leading_slash(path)
        best: _Route[T] | None = None
        best_match: re.Match[str] | None = None
        for route in self._routes:
            found = route.pattern.fullmatch(path)
            if found is None:
                continue
            if best is None or route.rank > best.rank:
                best, best_match = route, found
        if best is None or best_match is None:
            return None
        return Match(best.handler, Params(dict(zip(best.names, best_match.groups()))))

    def __len__(self) -> int:
        return len(self._routes)