"""Tests for wayfinder.templating: kida-backed resource templates."""

import pytest

from wayfinder.errors import ConfigurationError, InvalidTemplateError
from wayfinder.templating import KidaTemplateEvaluator, is_template


class TestIsTemplate:
    @pytest.mark.parametrize("expr", ["/orders/{{ id }}", "{% if x %}/a{% endif %}"])
    def test_templates(self, expr: str) -> None:
        assert is_template(expr) is True

    @pytest.mark.parametrize("expr", ["page2.xhtml", "/a/{b}", "#top", ""])
    def test_literals(self, expr: str) -> None:
        assert is_template(expr) is False


class TestKidaTemplateEvaluator:
    def test_renders_variable(self) -> None:
        evaluator = KidaTemplateEvaluator()
        assert evaluator.evaluate("/orders/{{ order_id }}", {"order_id": 42}) == "/orders/42"

    def test_no_autoescape(self) -> None:
        evaluator = KidaTemplateEvaluator()
        assert evaluator.evaluate("{{ path }}", {"path": "/a?x=1&y=2"}) == "/a?x=1&y=2"

    def test_empty_result_is_none(self) -> None:
        evaluator = KidaTemplateEvaluator()
        assert evaluator.evaluate("{{ path }}", {"path": ""}) is None

    def test_whitespace_result_is_none(self) -> None:
        evaluator = KidaTemplateEvaluator()
        assert evaluator.evaluate("  {{ path }}  ", {"path": ""}) is None

    def test_result_is_stripped(self) -> None:
        evaluator = KidaTemplateEvaluator()
        assert evaluator.evaluate(" {{ path }}\n", {"path": "/a"}) == "/a"

    def test_missing_variable_is_none(self) -> None:
        evaluator = KidaTemplateEvaluator()
        assert evaluator.evaluate("/orders/{{ order_id }}", {"other": 1}) is None

    def test_malformed_template_is_configuration_error(self) -> None:
        evaluator = KidaTemplateEvaluator()
        with pytest.raises(InvalidTemplateError) as exc_info:
            evaluator.evaluate("/a/{{ b", {"b": 1})
        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.expression == "/a/{{ b"
