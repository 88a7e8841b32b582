"""Navigation resolver: extract, rewrite, schedule.

Each stage can short-circuit to "no navigation" without invoking the
next. Resolution is a pure function of the directive and the
deployment context; ``execute()`` adds the single side effect of
appending to the cycle's pending queue.
"""

import logging
from collections.abc import Mapping
from typing import Any

from wayfinder.config import ResolverConfig
from wayfinder.context import DeploymentContext, ProcessingCycle
from wayfinder.directive import NavigationDirective
from wayfinder.errors import LinkError
from wayfinder.extract import extract_target
from wayfinder.outcome import Failed, Navigated, NoOp, Outcome
from wayfinder.policy import RewriteKind, apply_plan, effective_show_progress, plan_rewrite
from wayfinder.rewrite import PathRewriter, URLRewriter
from wayfinder.scheduler import ResolvedNavigation, schedule
from wayfinder.templating import KidaTemplateEvaluator, TemplateEvaluator

logger = logging.getLogger("wayfinder.resolver")


class NavigationResolver:
    """Turn navigation directives into scheduled navigations.

    Usage::

        resolver = NavigationResolver(ResolverConfig(context_path="/app"))
        cycle = ProcessingCycle(DeploymentContext.from_config(resolver.config))

        outcome = resolver.execute(directive, cycle)

    ``rewriter`` defaults to a ``PathRewriter`` built from the config;
    ``evaluator`` defaults to kida.
    """

    __slots__ = ("config", "evaluator", "rewriter")

    def __init__(
        self,
        config: ResolverConfig | None = None,
        *,
        rewriter: URLRewriter | None = None,
        evaluator: TemplateEvaluator | None = None,
    ) -> None:
        self.config = config or ResolverConfig()
        self.rewriter = rewriter or PathRewriter.from_config(self.config)
        self.evaluator = evaluator or KidaTemplateEvaluator()

    def resolve(
        self, directive: NavigationDirective, deployment: DeploymentContext
    ) -> Outcome:
        """Resolve *directive* without scheduling anything."""
        target = extract_target(
            directive, self.evaluator, encode_spaces=self.config.encode_spaces
        )
        if isinstance(target, NoOp):
            logger.debug(
                "navigation ignored: %s (resource=%r)", target.reason, directive.resource
            )
            return target

        plan = plan_rewrite(
            target.value, directive.url_type, directive.no_rewrite, deployment
        )
        try:
            address = apply_plan(plan, target.value, self.rewriter)
        except LinkError as exc:
            if self.config.strict_links:
                return Failed(exc)
            logger.warning("%s; navigating to the unrewritten value", exc)
            address = target.value

        return Navigated(
            ResolvedNavigation(
                external_address=address,
                target=directive.target,
                url_type=directive.url_type,
                replace=directive.replace,
                show_progress=effective_show_progress(address, directive.show_progress),
                rewrite_deferred=plan.kind is RewriteKind.RENDER and plan.skip_rewrite,
            )
        )

    def execute(self, directive: NavigationDirective, cycle: ProcessingCycle) -> Outcome:
        """Resolve *directive* and queue the result on *cycle*."""
        outcome = self.resolve(directive, cycle.deployment)
        if isinstance(outcome, Navigated):
            schedule(cycle, outcome.navigation)
        return outcome

    def run(
        self,
        attrs: Mapping[str, str | None],
        cycle: ProcessingCycle,
        *,
        bound: bool = False,
        bound_value: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> Outcome:
        """Build a directive from raw attributes and execute it.

        Raises ``ConfigurationError`` for malformed attributes.
        """
        directive = NavigationDirective.from_attributes(
            attrs, bound=bound, bound_value=bound_value, context=context
        )
        return self.execute(directive, cycle)
