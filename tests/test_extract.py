"""Tests for wayfinder.extract: target selection and no-op rules."""

from collections.abc import Mapping
from typing import Any

import pytest

from wayfinder.directive import NavigationDirective
from wayfinder.extract import RawTarget, TargetSource, extract_target
from wayfinder.outcome import NoOp


class RecordingEvaluator:
    """Returns a canned result and records what it was asked."""

    def __init__(self, result: str | None = "/evaluated") -> None:
        self.result = result
        self.calls: list[tuple[str, Mapping[str, Any]]] = []

    def evaluate(self, expression: str, context: Mapping[str, Any]) -> str | None:
        self.calls.append((expression, context))
        return self.result


class TestBothSources:
    @pytest.mark.parametrize(
        ("resource", "bound_value"),
        [("page2.xhtml", "/next"), ("", ""), ("{{ x }}", None)],
    )
    def test_binding_and_resource_is_noop(self, resource: str, bound_value: str | None) -> None:
        d = NavigationDirective(resource=resource, bound=True, bound_value=bound_value)
        result = extract_target(d, RecordingEvaluator())
        assert isinstance(result, NoOp)
        assert "both" in result.reason


class TestBinding:
    def test_bound_value(self) -> None:
        d = NavigationDirective(bound=True, bound_value="/orders/42")
        assert extract_target(d, RecordingEvaluator()) == RawTarget(
            "/orders/42", TargetSource.BOUND
        )

    def test_absent_value_is_noop(self) -> None:
        result = extract_target(NavigationDirective(bound=True), RecordingEvaluator())
        assert result == NoOp("binding has no value")

    def test_empty_value_is_noop(self) -> None:
        d = NavigationDirective(bound=True, bound_value="")
        assert isinstance(extract_target(d, RecordingEvaluator()), NoOp)

    def test_value_is_encoded(self) -> None:
        d = NavigationDirective(bound=True, bound_value="/a b")
        result = extract_target(d, RecordingEvaluator())
        assert isinstance(result, RawTarget)
        assert result.value == "/a%20b"

    def test_encode_spaces_off(self) -> None:
        d = NavigationDirective(bound=True, bound_value="/a b")
        result = extract_target(d, RecordingEvaluator(), encode_spaces=False)
        assert isinstance(result, RawTarget)
        assert result.value == "/a b"


class TestResource:
    def test_literal_skips_evaluator(self) -> None:
        evaluator = RecordingEvaluator()
        result = extract_target(NavigationDirective(resource="page2.xhtml"), evaluator)
        assert result == RawTarget("page2.xhtml", TargetSource.RESOURCE)
        assert evaluator.calls == []

    def test_template_is_evaluated(self) -> None:
        evaluator = RecordingEvaluator("/orders/7")
        d = NavigationDirective(resource="/orders/{{ id }}", context={"id": 7})
        result = extract_target(d, evaluator)
        assert result == RawTarget("/orders/7", TargetSource.RESOURCE)
        assert evaluator.calls == [("/orders/{{ id }}", {"id": 7})]

    def test_template_without_context_is_noop(self) -> None:
        evaluator = RecordingEvaluator()
        result = extract_target(NavigationDirective(resource="/orders/{{ id }}"), evaluator)
        assert result == NoOp("resource template has no context item")
        assert evaluator.calls == []

    def test_empty_template_result_is_noop(self) -> None:
        d = NavigationDirective(resource="{{ next }}", context={})
        result = extract_target(d, RecordingEvaluator(None))
        assert result == NoOp("resource template returned an empty result")

    def test_evaluated_value_is_encoded(self) -> None:
        d = NavigationDirective(resource="{{ q }}", context={})
        result = extract_target(d, RecordingEvaluator("/search?q=a b"))
        assert isinstance(result, RawTarget)
        assert result.value == "/search?q=a%20b"

    def test_bound_lone_surrogate_is_escaped(self) -> None:
        d = NavigationDirective(bound=True, bound_value="/a\udc80")
        result = extract_target(d, RecordingEvaluator())
        assert result == RawTarget("/a%ED%B2%80", TargetSource.BOUND)
