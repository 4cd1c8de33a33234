from __future__ import annotations

import json
from urllib.parse import parse_qsl, urlsplit

import pytest

from core.domain.endpoints import Endpoint
from core.domain.models import HTTPMethod
from core.errors import BadURLError
from core.services.request_assembler import append_query, assemble_request, coerce_param


class TestQueryMode:
    def test_params_become_query_items(self):
        req = assemble_request(Endpoint.USERS, {"a": "1", "b": "2"})
        parts = urlsplit(req.url)
        assert sorted(parse_qsl(parts.query)) == [("a", "1"), ("b", "2")]
        assert req.url.startswith(Endpoint.USERS.url + "?")
        assert req.body is None
        assert req.method is HTTPMethod.GET

    def test_no_params_keeps_url(self):
        req = assemble_request(Endpoint.POSTS)
        assert req.url == Endpoint.POSTS.url
        assert req.body is None

    def test_empty_params_keeps_url(self):
        assert assemble_request(Endpoint.POSTS, {}).url == Endpoint.POSTS.url

    def test_non_string_values_are_coerced_not_dropped(self):
        req = assemble_request(Endpoint.POSTS, {"userId": 1, "ratio": 0.5, "draft": False})
        query = dict(parse_qsl(urlsplit(req.url).query))
        assert query == {"userId": "1", "ratio": "0.5", "draft": "false"}

    def test_values_are_percent_encoded(self):
        req = assemble_request(Endpoint.USERS, {"q": "a b&c"})
        assert dict(parse_qsl(urlsplit(req.url).query)) == {"q": "a b&c"}

    def test_empty_key_is_bad_url(self):
        with pytest.raises(BadURLError):
            assemble_request(Endpoint.USERS, {"": "x"})

    def test_unsupported_value_type(self):
        with pytest.raises(TypeError, match="when"):
            assemble_request(Endpoint.USERS, {"when": object()})

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float_is_rejected(self, value):
        with pytest.raises(ValueError, match="ratio"):
            assemble_request(Endpoint.POSTS, {"ratio": value})

    def test_existing_query_is_kept(self):
        url = append_query("https://example.com/items?page=2", {"size": 10})
        assert parse_qsl(urlsplit(url).query) == [("page", "2"), ("size", "10")]

    def test_relative_url_is_bad_url(self):
        with pytest.raises(BadURLError):
            append_query("/users", {"a": "1"})

    def test_headers_are_verbatim(self):
        req = assemble_request(Endpoint.POSTS, {"userId": 1})
        assert req.headers == {"Content-Type": "application/json"}


class TestJsonMode:
    def test_params_become_json_body(self):
        params = {"title": "t", "body": "b", "userId": 1, "id": 101}
        req = assemble_request(Endpoint.CREATE, params)
        assert req.method is HTTPMethod.POST
        assert req.url == Endpoint.CREATE.url
        assert urlsplit(req.url).query == ""
        assert json.loads(req.body) == params

    def test_no_params_no_body(self):
        req = assemble_request(Endpoint.CREATE)
        assert req.body is None
        assert req.url == Endpoint.CREATE.url

    def test_unsupported_value_type(self):
        with pytest.raises(TypeError):
            assemble_request(Endpoint.CREATE, {"tags": ["a", "b"]})

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float_is_rejected(self, value):
        with pytest.raises(ValueError, match="ratio"):
            assemble_request(Endpoint.CREATE, {"title": "t", "ratio": value})

    def test_body_is_strict_json(self):
        req = assemble_request(Endpoint.CREATE, {"ratio": 0.5, "userId": 1})

        def reject(constant):
            raise ValueError(constant)

        assert json.loads(req.body, parse_constant=reject) == {"ratio": 0.5, "userId": 1}

    def test_headers_are_verbatim(self):
        req = assemble_request(Endpoint.CREATE, {"title": "t"})
        assert req.headers == Endpoint.CREATE.headers


class TestCoerceParam:
    @pytest.mark.parametrize(
        "value,expected",
        [("x", "x"), (True, "true"), (False, "false"), (0, "0"), (-3, "-3"), (1.25, "1.25")],
    )
    def test_every_variant_has_a_string_form(self, value, expected):
        assert coerce_param("k", value) == expected

    def test_none_is_rejected(self):
        with pytest.raises(TypeError):
            coerce_param("k", None)


def test_each_call_builds_a_fresh_request():
    first = assemble_request(Endpoint.USERS, {"a": "1"})
    second = assemble_request(Endpoint.USERS, {"a": "1"})
    assert first == second
    assert first is not second
    first.headers["X-Test"] = "1"
    assert "X-Test" not in second.headers
    assert "X-Test" not in Endpoint.USERS.headers
