"""Resource template evaluation via kida.

A resource expression containing kida delimiters is a template and is
rendered against the directive's context mapping; anything else is a
literal and never reaches the engine.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from kida import Environment
from kida.environment.exceptions import TemplateSyntaxError, UndefinedError

from wayfinder.errors import InvalidTemplateError

_DELIMITERS = ("{{", "{%")


def is_template(expression: str) -> bool:
    """True if *expression* needs evaluating before use."""
    return any(d in expression for d in _DELIMITERS)


class TemplateEvaluator(Protocol):
    def evaluate(self, expression: str, context: Mapping[str, Any]) -> str | None:
        """Return the evaluated expression, or ``None`` for an empty result."""
        ...


class KidaTemplateEvaluator:
    """Evaluate resource templates with a kida ``Environment``.

    Autoescaping is off: the result is an address, not markup, and is
    percent-encoded afterwards. A variable missing from the context
    evaluates to ``None``, like an empty result; a template that does
    not compile raises ``InvalidTemplateError``.
    """

    __slots__ = ("_env",)

    def __init__(self, env: Environment | None = None) -> None:
        self._env = env if env is not None else Environment(autoescape=False)

    def evaluate(self, expression: str, context: Mapping[str, Any]) -> str | None:
        try:
            result = self._env.from_string(expression).render(dict(context))
        except TemplateSyntaxError as exc:
            raise InvalidTemplateError(expression, str(exc)) from exc
        except UndefinedError:
            return None
        if not result.strip():
            return None
        return result.strip()
