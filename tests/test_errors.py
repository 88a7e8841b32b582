"""Tests for wayfinder.errors: exception hierarchy and error messages."""

import pytest

from wayfinder.errors import (
    ConfigurationError,
    InvalidShowModeError,
    InvalidTemplateError,
    InvalidUrlTypeError,
    LinkError,
    MissingTargetError,
    NavigationQueueClosedError,
    UnsupportedNavigationError,
    WayfinderError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type",
        [MissingTargetError, InvalidShowModeError, InvalidUrlTypeError, InvalidTemplateError],
    )
    def test_directive_errors_are_configuration_errors(self, exc_type: type) -> None:
        assert issubclass(exc_type, ConfigurationError)

    @pytest.mark.parametrize(
        "exc_type",
        [ConfigurationError, LinkError, NavigationQueueClosedError, UnsupportedNavigationError],
    )
    def test_all_are_wayfinder_errors(self, exc_type: type) -> None:
        assert issubclass(exc_type, WayfinderError)

    def test_link_error_is_not_configuration_error(self) -> None:
        assert not issubclass(LinkError, ConfigurationError)


class TestMessages:
    def test_missing_target_default_message(self) -> None:
        assert "Missing 'resource' or binding" in str(MissingTargetError())

    def test_invalid_show_keeps_value(self) -> None:
        err = InvalidShowModeError("popup")
        assert err.value == "popup"
        assert "'popup'" in str(err)

    def test_invalid_url_type_keeps_value(self) -> None:
        err = InvalidUrlTypeError("action")
        assert err.value == "action"
        assert "url-type" in str(err)

    def test_link_error_with_detail(self) -> None:
        err = LinkError("http://[broken", "Invalid IPv6 URL")
        assert str(err) == "Cannot resolve 'http://[broken': Invalid IPv6 URL"

    def test_link_error_without_detail(self) -> None:
        assert str(LinkError("x")) == "Cannot resolve 'x'"

    def test_link_error_can_be_raised(self) -> None:
        with pytest.raises(LinkError) as exc_info:
            raise LinkError("x", "bad")
        assert exc_info.value.value == "x"

    def test_invalid_template_message(self) -> None:
        err = InvalidTemplateError("/a/{{ b", "unexpected end of template")
        assert err.expression == "/a/{{ b"
        assert str(err) == "Invalid resource template '/a/{{ b': unexpected end of template"
