import pytest

from pathrouter.http import Request, Response
from pathrouter.router import Router
from pathrouter.url_for import MissingParameter, build_url, url_for


def test_no_trailing_slash():
    url = build_url("http://localhost/foo/bar/baz", "/foo/:user", {"user": "bam"})
    assert url == "http://localhost/foo/bam"


def test_trailing_slash():
    url = build_url("http://localhost/foo/bar/baz", "/foo/:user/", {"user": "bam"})
    assert url == "http://localhost/foo/bam/"


def test_missing_parameter():
    with pytest.raises(MissingParameter) as info:
        build_url("http://localhost/", "/foo/:user", {})
    assert info.value.key == "user"


def test_star_segment_is_filled():
    url = build_url("http://localhost/", "/upload/*filename", {"filename": "a.txt"})
    assert url == "http://localhost/upload/a.txt"


def test_extra_params_become_query():
    url = build_url("http://localhost/x", "/:query", {"query": "test", "extraparam": "foo"})
    assert url == "http://localhost/test?extraparam=foo"


def test_existing_query_and_fragment_are_dropped():
    url = build_url("http://localhost/a?x=1#frag", "/b", {})
    assert url == "http://localhost/b"


def test_root_glob():
    assert build_url("http://localhost/a/b", "/", {}) == "http://localhost/"


def test_lone_colon_is_literal():
    assert build_url("http://localhost/", "/:", {}) == "http://localhost/:"


def test_segments_are_escaped():
    url = build_url("http://localhost/", "/:name", {"name": "a/b c"})
    assert url == "http://localhost/a%2Fb%20c"


def _dispatch(router, url):
    return router.handle(Request("GET", url))


def test_url_for_through_router():
    router = Router()
    router.get("/", lambda req: Response(body=url_for(req, "user", {"user": "bam"})), "index")
    router.get("/users/:user", lambda req: Response(body=req.params.find("user")), "user")
    response = _dispatch(router, "http://localhost:3000/")
    assert response.body == "http://localhost:3000/users/bam"


def test_url_for_unknown_route_id():
    router = Router()
    router.get("/", lambda req: Response(body=url_for(req, "missing")), "index")
    with pytest.raises(KeyError):
        _dispatch(router, "http://localhost/")


def test_url_for_without_router():
    with pytest.raises(LookupError):
        url_for(Request("GET", "http://localhost/"), "index", {})