"""``wayfinder resolve``: run one literal target through the resolver.

Prints the resolved navigation as JSON, or the reason nothing happens.
With ``--emit`` the cycle is also handed to the executor and the
response it would send is included.
"""

import argparse
import json
import logging
import sys

from wayfinder.config import ResolverConfig
from wayfinder.context import DeploymentContext, HostingMode, LifecyclePhase, ProcessingCycle
from wayfinder.errors import ConfigurationError, UnsupportedNavigationError
from wayfinder.executor import navigation_response
from wayfinder.http.response import Redirect
from wayfinder.outcome import Failed, Navigated, NoOp
from wayfinder.resolver import NavigationResolver


def _emitted(cycle: ProcessingCycle, config: ResolverConfig) -> dict[str, object] | None:
    """The executor's response for *cycle*, as JSON-ready data."""
    try:
        result = navigation_response(cycle.navigations.drain(), cycle.deployment, config)
    except UnsupportedNavigationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    if result is None:
        return None
    response = result.to_response() if isinstance(result, Redirect) else result
    return {"status": response.status, "headers": dict(response.headers)}


def run_resolve(args: argparse.Namespace) -> None:
    """Resolve ``args.resource`` under the requested deployment."""
    config = ResolverConfig(
        hosting_mode=HostingMode(args.hosting),
        context_path=args.context_path,
        base_path=args.base_path,
        strict_links=args.strict,
        log_level=args.log_level,
    )
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    resolver = NavigationResolver(config)
    cycle = ProcessingCycle(
        DeploymentContext.from_config(config, LifecyclePhase(args.phase))
    )
    attrs = {
        "resource": args.resource,
        "show": args.show,
        "target": args.target,
        "url-type": args.url_type,
        "url-norewrite": "true" if args.no_rewrite else None,
        "show-progress": "false" if args.no_progress else None,
    }

    try:
        outcome = resolver.run(attrs, cycle)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    match outcome:
        case Navigated(navigation):
            data: dict[str, object] = {"outcome": "navigated", **navigation.as_dict()}
        case NoOp(reason):
            data = {"outcome": "noop", "reason": reason}
        case Failed(error):
            print(f"Error: {error}", file=sys.stderr)
            raise SystemExit(1)

    if args.emit:
        data["response"] = _emitted(cycle, config)
    print(json.dumps(data, indent=2))
