"""Tests for request context, SimpleRouter and URL utilities."""

import pytest

from linkhelper import RoutingError
from linkhelper.routing import (
    RequestContext,
    SimpleRouter,
    build_query_string,
    join_path,
)


class TestRequestContext:
    def test_from_params_splits_location(self):
        ctx = RequestContext.from_params(
            {"controller": "posts", "action": "show", "id": "3", "page": "2"}
        )
        assert ctx.controller == "posts"
        assert ctx.action == "show"
        assert ctx.id == "3"
        assert dict(ctx.params) == {"page": "2"}

    def test_params_without_location_strips_location_keys(self):
        ctx = RequestContext(controller="c", params={"controller": "x", "q": "1"})
        assert ctx.params_without_location() == {"q": "1"}

    def test_is_frozen(self):
        ctx = RequestContext(controller="c")
        with pytest.raises(AttributeError):
            ctx.controller = "d"


class TestUrls:
    def test_build_query_string(self):
        assert build_query_string({"name": "test", "count": 5}) == "?name=test&count=5"

    def test_build_query_string_skips_none_and_formats_bools(self):
        assert build_query_string({"a": None, "b": True, "c": False}) == "?b=true&c=false"

    def test_build_query_string_empty(self):
        assert build_query_string({}) == ""

    def test_join_path_drops_trailing_missing_segments(self):
        assert join_path("pages", "show", 5) == "/pages/show/5"
        assert join_path("pages", None, None) == "/pages"

    def test_join_path_quotes_segments(self):
        assert join_path("files", "a b/c") == "/files/a%20b%2Fc"


class TestSimpleRouter:
    def test_string_options_pass_through(self):
        assert SimpleRouter().resolve("http://example.com/x") == "http://example.com/x"

    def test_only_path(self):
        router = SimpleRouter()
        options = {"controller": "posts", "action": "show", "id": 3, "only_path": True}
        assert router.resolve(options) == "/posts/show/3"

    def test_full_url_uses_host_and_protocol(self):
        router = SimpleRouter(host="example.com", protocol="https")
        assert router.resolve({"controller": "posts"}) == "https://example.com/posts"

    def test_option_host_overrides_router_host(self):
        router = SimpleRouter(host="example.com")
        url = router.resolve({"controller": "posts", "host": "other.org"})
        assert url == "http://other.org/posts"

    def test_params_and_anchor(self):
        router = SimpleRouter()
        options = {
            "controller": "posts",
            "action": "index",
            "params": {"page": 2},
            "anchor": "comments",
            "only_path": True,
        }
        assert router.resolve(options) == "/posts/index?page=2#comments"

    def test_controller_defaults_to_current_request(self):
        router = SimpleRouter(request=RequestContext(controller="pages"))
        assert router.resolve({"action": "about", "only_path": True}) == "/pages/about"

    def test_missing_controller_raises(self):
        with pytest.raises(RoutingError):
            SimpleRouter().resolve({"action": "about", "only_path": True})

    def test_full_url_without_host_raises(self):
        with pytest.raises(RoutingError):
            SimpleRouter().resolve({"controller": "posts"})


class TestNestedParams:
    def test_nested_mapping(self):
        assert build_query_string({"post": {"title": "Hi", "tag": "news"}}) == (
            "?post%5Btitle%5D=Hi&post%5Btag%5D=news"
        )

    def test_lists_repeat_the_key(self):
        assert build_query_string({"ids": [1, 2]}) == "?ids%5B%5D=1&ids%5B%5D=2"

    def test_none_inside_nested_values_is_dropped(self):
        assert build_query_string({"post": {"title": None}, "page": 1}) == "?page=1"

    def test_router_appends_nested_params(self):
        options = {"controller": "posts", "params": {"q": {"tag": "a b"}}, "only_path": True}
        assert SimpleRouter().resolve(options) == "/posts?q%5Btag%5D=a+b"


def test_join_path_rejects_gap():
    with pytest.raises(ValueError):
        join_path("posts", None, 3)


def test_router_rejects_id_without_action():
    with pytest.raises(RoutingError):
        SimpleRouter().resolve({"controller": "posts", "id": 3, "only_path": True})
