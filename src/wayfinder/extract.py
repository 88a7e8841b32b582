"""Target extraction: what a directive points at, if anything.

A directive gets its target either from a single-node binding or from
its ``resource`` expression. Configuring both makes the directive inert;
so does a binding with no value, or a template that renders nothing.
The value that survives is HRRI-encoded before rewriting.
"""

from dataclasses import dataclass
from enum import Enum

from wayfinder.directive import NavigationDirective
from wayfinder.errors import MissingTargetError
from wayfinder.http.encoding import encode_hrri
from wayfinder.outcome import NoOp
from wayfinder.templating import TemplateEvaluator, is_template


class TargetSource(Enum):
    BOUND = "bound"
    RESOURCE = "resource"


@dataclass(frozen=True, slots=True)
class RawTarget:
    """An encoded target, not yet rewritten."""

    value: str
    source: TargetSource


def extract_target(
    directive: NavigationDirective,
    evaluator: TemplateEvaluator,
    *,
    encode_spaces: bool = True,
) -> RawTarget | NoOp:
    """Pick the directive's target, or explain why there is none.

    Raises ``MissingTargetError`` if neither source is configured.
    """
    if directive.bound and directive.resource is not None:
        return NoOp("both a binding and a resource are configured")

    if directive.bound:
        if not directive.bound_value:
            return NoOp("binding has no value")
        value = directive.bound_value
        source = TargetSource.BOUND
    elif directive.resource is not None:
        expression = directive.resource
        if is_template(expression):
            if directive.context is None:
                return NoOp("resource template has no context item")
            evaluated = evaluator.evaluate(expression, directive.context)
            if evaluated is None:
                return NoOp("resource template returned an empty result")
            value = evaluated
        else:
            value = expression
        source = TargetSource.RESOURCE
    else:
        raise MissingTargetError

    return RawTarget(encode_hrri(value, encode_spaces=encode_spaces), source)
