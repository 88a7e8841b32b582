"""Tests for wayfinder.http.response: Response chaining and Redirect."""

import json

import pytest

from wayfinder.http.response import Redirect, Response


class TestResponse:
    def test_defaults(self) -> None:
        r = Response()
        assert r.body == ""
        assert r.status == 200
        assert r.content_type == "text/html; charset=utf-8"
        assert r.headers == ()

    def test_chaining_returns_new_objects(self) -> None:
        r1 = Response()
        r2 = r1.with_status(204)
        r3 = r2.with_header("X-Foo", "bar")

        assert r1.status == 200
        assert r2.headers == ()
        assert r3.headers == (("X-Foo", "bar"),)

    def test_header_lookup_case_insensitive(self) -> None:
        r = Response().with_header("HX-Redirect", "/a")
        assert r.header("hx-redirect") == "/a"
        assert r.header("Location") is None

    def test_hx_redirect(self) -> None:
        assert Response().with_hx_redirect("/next").headers == (("HX-Redirect", "/next"),)

    def test_hx_trigger_string(self) -> None:
        assert Response().with_hx_trigger("closeModal").header("HX-Trigger") == "closeModal"

    def test_hx_trigger_payload(self) -> None:
        r = Response().with_hx_trigger({"wayfinder:load": [{"address": "/a"}]})
        assert json.loads(r.header("HX-Trigger") or "") == {"wayfinder:load": [{"address": "/a"}]}

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Response().status = 404  # type: ignore[misc]


class TestRedirect:
    def test_defaults(self) -> None:
        assert Redirect("/login").status == 302

    def test_to_response(self) -> None:
        response = Redirect("/x", status=303).to_response()
        assert response.status == 303
        assert response.headers == (("Location", "/x"),)
