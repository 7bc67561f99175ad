import pytest

from pathrouter.recognizer import Match, Params, Recognizer


def test_static_route_matches_exactly():
    rec = Recognizer()
    rec.add("/foo/bar", "h")
    assert rec.recognize("/foo/bar").handler == "h"
    assert rec.recognize("foo/bar").handler == "h"
    assert rec.recognize("/foo") is None
    assert rec.recognize("/foo/bar/") is None


def test_dynamic_segment_captures_one_segment():
    rec = Recognizer()
    rec.add("/users/:id", "u")
    found = rec.recognize("/users/42")
    assert found.handler == "u"
    assert found.params.find("id") == "42"
    assert rec.recognize("/users/") is None
    assert rec.recognize("/users/42/more") is None


def test_star_segment_captures_rest_of_path():
    rec = Recognizer()
    rec.add("/upload/*filename", "s")
    found = rec.recognize("/upload/dir/file.txt")
    assert found.params["filename"] == "dir/file.txt"
    assert rec.recognize("/upload/") is None


def test_bare_star_matches_any_nonempty_path():
    rec = Recognizer()
    rec.add("*", "any")
    assert rec.recognize("/foo").handler == "any"
    assert rec.recognize("/foo/bar").handler == "any"
    assert rec.recognize("") is None


def test_root_glob_matches_empty_path():
    rec = Recognizer()
    rec.add("/", "root")
    assert rec.recognize("").handler == "root"
    assert rec.recognize("/").handler == "root"
    assert rec.recognize("/x") is None


def test_static_preferred_over_dynamic():
    rec = Recognizer()
    rec.add("/users/:id", "dynamic")
    rec.add("/users/new", "static")
    assert rec.recognize("/users/new").handler == "static"
    assert rec.recognize("/users/7").handler == "dynamic"


def test_dynamic_preferred_over_star():
    rec = Recognizer()
    rec.add("/files/*rest", "star")
    rec.add("/files/:name", "dynamic")
    assert rec.recognize("/files/a").handler == "dynamic"
    assert rec.recognize("/files/a/b").handler == "star"


def test_regex_characters_in_static_segments_are_literal():
    rec = Recognizer()
    rec.add("/a.b", "dot")
    assert rec.recognize("/axb") is None
    assert rec.recognize("/a.b").handler == "dot"


def test_multiple_params_are_all_captured():
    rec = Recognizer()
    rec.add("/users/:userid/:friendid", "f")
    found = rec.recognize("/users/alice/bob")
    assert dict(found.params) == {"userid": "alice", "friendid": "bob"}
    assert len(rec) == 1


def test_params_mapping_behaviour():
    params = Params({"a": "1", "b": "2"})
    assert params.find("a") == "1"
    assert params.find("missing") is None
    assert len(params) == 2
    assert sorted(params) == ["a", "b"]
    assert params == {"a": "1", "b": "2"}
    with pytest.raises(KeyError):
        params["missing"]


def test_match_holds_handler_and_params():
    params = Params({"k": "v"})
    found = Match("h", params)
    assert found.handler == "h"
    assert found.params.find("k") == "v"