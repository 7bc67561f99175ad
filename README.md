# pathrouter

Routing for small HTTP applications. A request is matched by its method and a glob
pattern on its path, and then handed to a handler. Routes have ids, so URLs can be
built from them again. The package has no dependencies outside the standard library.

## Installing

```
pip install pathrouter
```

For running the tests:

```
pip install "pathrouter[test]"
pytest
```

## Requests, responses and handlers

`pathrouter.http` holds the types handlers work with:

- `Request(method, url, headers={}, body=b"")` — the method is turned into a
  `Method` member when it names a standard method (names are case-sensitive) and
  kept as a plain string otherwise; an empty method raises `ValueError`.
  `Request.path()` returns the URL path without its leading slash. After dispatch,
  `request.params` holds the captured path parameters and `request.router` the
  router that dispatched it.
- `Response(status=200, body="", headers={})`.
- `HttpError(response, message="")` — an exception carrying the response to send.

A handler is either a callable taking a `Request`, or an object with a
`handle(request)` method. It returns a `Response` or raises `HttpError`. Anything
else passed as a handler raises `TypeError` when the route is added.

## Routes

A `Router` collects routes. Each route has an HTTP method, a glob pattern, a handler
and a route id:

```python
from pathrouter.router import Router

router = Router()
router.get("/", index, "index")
router.get("/users/:userid/:friendid", user_friend, "user_friend")
router.post("/users", create_user, "create_user")
router.any("/ping", ping, "ping")
```

Glob patterns are split on `/`; a leading `/` is ignored:

- `:name` matches one non-empty path segment and stores it under `name`. Handlers
  read it with `request.params.find("name")`, which returns `None` when absent.
  `Params` is also a read-only mapping.
- `*name` matches the non-empty rest of the path, slashes included, and stores it
  under `name`. A bare `*` does the same and stores it under the empty name.
- Any other segment must match literally.

When several globs match, the one with fewer `*` segments wins, then the one with
fewer `:` segments, then the one with more literal segments.

`get`, `post`, `put`, `delete`, `head`, `patch` and `options` add a route for one
method; `route(method, glob, handler, route_id)` takes the method as a `Method` or a
string. `any` adds a route that accepts every method, including non-standard ones;
a route registered for the request's method is preferred to it. Every registering
method returns the router, so calls can be chained.

Each route id names exactly one glob. Giving the same id to a different glob raises
`DuplicateRouteId` (a `ValueError`). `Router.route_ids` is a read-only view of the
ids and their globs.

`build_router` creates and fills a router in one call from
`(route_id, method, glob, handler)` tuples, where `method` is one of `get`, `post`,
`put`, `delete`, `head`, `patch`, `options` or `any`:

```python
from pathrouter.router import build_router

router = build_router(
    ("root", "get", "/", index),
    ("query", "get", "/:query", show_query),
)
```

It raises `ValueError` when given no routes or an unsupported method name.

## Handling requests

`Router.handle(request)` finds the route for a `Request` and returns its handler's
`Response`. If no route matches:

- when adding or removing a trailing slash would match a route, it raises
  `TrailingSlash`, an `HttpError` whose response is a 301 with a `Location` header
  for that URL (also available as `.location`);
- `OPTIONS` requests get a 200 response whose `Allow` header lists, comma
  separated, the methods among GET, POST, PUT, DELETE, HEAD and PATCH routed for
  the path, with `HEAD` added whenever `GET` is there;
- `HEAD` requests are retried as `GET` (the request's method is changed to `GET`);
- anything else raises `NoRoute`, an `HttpError` whose response is a 404.

`Router.recognize(method, path)` looks up a route without calling its handler and
returns a `Match` (with `handler` and `params`), or `None` when nothing matches.
`Router.handle_options(path)` builds the `OPTIONS` response described above.

The glob matching itself lives in `pathrouter.recognizer.Recognizer`, with `add(glob,
handler)` and `recognize(path)`.

## Building URLs

`url_for(request, route_id, params)` in `pathrouter.url_for` builds a URL from the URL
of a request the router has dispatched. Parameters named in the route's glob fill in
its path segments; the others become the query string. The request's own query and
fragment are dropped. A glob parameter with no value raises `MissingParameter` (a
`LookupError`); an unknown route id raises `KeyError`, and a request not dispatched
by a router raises `LookupError`.

`build_url(url, glob, params)` does the same for a URL and glob given directly:

```python
from pathrouter.url_for import build_url

build_url("http://localhost/foo/bar/baz", "/foo/:user", {"user": "bam"})
# 'http://localhost/foo/bam'
build_url("http://localhost/foo/bar/baz", "/foo/:user/", {"user": "bam"})
# 'http://localhost/foo/bam/'
```

## Demo server

`pathrouter.demo` has small example applications and a WSGI adapter:

- `make_simple_router()` answers `/` with `OK` and `/:query` with the query segment;
- `make_url_for_router()` answers `/` with `Please go to: ...`, a URL generated for
  the `/:query` route, and `/:query` with the segment;
- `MessageHandler(message)` answers every request with a fixed message;
- `with_custom_404(handler)` turns a `NoRoute` error into a 404 response with the
  body `Custom 404 response`;
- `as_wsgi(handler)` serves any handler as a WSGI application, turning `HttpError`
  into its response and sending no body for `HEAD` requests.

To start the demo server (standard library `wsgiref`):

```
pathrouter-demo
pathrouter-demo --example url_for --host localhost --port 3000
```

`--example` is one of `simple` (the default), `url_for`, `custom_404` and
`struct_handler`. Then open `http://localhost:3000/` for the index page and, with the
`simple` or `url_for` example, `http://localhost:3000/test` to see a path parameter
returned.

## What it does not do

The package is a router, not a web server: beyond the single-threaded development
server of the demo it has no production server, no middleware chain, and no
request body or header parsing beyond what `as_wsgi` copies into a `Request`.