"""URL rewrite policy: which rewrite a navigation target gets.

Planning is a pure function of the raw value, the directive's url-type
and rewrite opt-out, and the deployment context. Applying a plan
delegates to a ``URLRewriter``.

Render addresses follow a topology/phase table. When the rewrite is
skipped the target resolves to an absolute path *without* the context
prefix or container encoding, and the layer that emits the server-side
redirect adds both. Otherwise the address is complete, because it is
sent to the client as data describing where to go.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from wayfinder.context import DeploymentContext, HostingMode, LifecyclePhase
from wayfinder.directive import UrlType
from wayfinder.rewrite import RewriteMode, URLRewriter

RENDER_SKIP_REWRITE: Mapping[tuple[HostingMode, LifecyclePhase], bool] = MappingProxyType(
    {
        (HostingMode.STANDALONE, LifecyclePhase.INITIALIZING): False,
        (HostingMode.STANDALONE, LifecyclePhase.STEADY_STATE): False,
        (HostingMode.EMBEDDED_PROXY, LifecyclePhase.INITIALIZING): True,
        (HostingMode.EMBEDDED_PROXY, LifecyclePhase.STEADY_STATE): False,
        # Initializing is not supported by container hosts; the executor fails there
        (HostingMode.CONTAINER, LifecyclePhase.INITIALIZING): True,
        (HostingMode.CONTAINER, LifecyclePhase.STEADY_STATE): True,
    }
)
"""Whether render addresses skip context prefixing and container encoding."""


class RewriteKind(Enum):
    VERBATIM = "verbatim"
    RESOURCE = "resource"
    RENDER = "render"


@dataclass(frozen=True, slots=True)
class RewritePlan:
    """How one target is turned into an external address."""

    kind: RewriteKind
    skip_rewrite: bool = False


def render_skips_rewrite(deployment: DeploymentContext) -> bool:
    return RENDER_SKIP_REWRITE[deployment.hosting_mode, deployment.lifecycle_phase]


def plan_rewrite(
    value: str,
    url_type: UrlType | None,
    no_rewrite: bool,
    deployment: DeploymentContext,
) -> RewritePlan:
    """Choose the rewrite for *value*. Rules apply in order:

    1. Same-document fragments and ``no_rewrite`` keep the value as-is.
    2. ``resource`` url-type rewrites as an absolute-path-or-relative
       resource address.
    3. Otherwise (``render``, the default) consult ``RENDER_SKIP_REWRITE``.
    """
    if value.startswith("#") or no_rewrite:
        return RewritePlan(RewriteKind.VERBATIM)
    if url_type is UrlType.RESOURCE:
        return RewritePlan(RewriteKind.RESOURCE)
    return RewritePlan(RewriteKind.RENDER, skip_rewrite=render_skips_rewrite(deployment))


def apply_plan(plan: RewritePlan, value: str, rewriter: URLRewriter) -> str:
    match plan.kind:
        case RewriteKind.VERBATIM:
            return value
        case RewriteKind.RESOURCE:
            return rewriter.resolve_resource(value, RewriteMode.ABSOLUTE_PATH_OR_RELATIVE)
        case RewriteKind.RENDER:
            return rewriter.resolve_render(value, skip_rewrite=plan.skip_rewrite)
    msg = f"Unknown rewrite kind: {plan.kind!r}"
    raise ValueError(msg)


def resolve_address(
    value: str,
    url_type: UrlType | None,
    no_rewrite: bool,
    deployment: DeploymentContext,
    rewriter: URLRewriter,
) -> str:
    """Produce the external address for *value*.

    Raises ``LinkError`` when the rewriter cannot parse the value.
    """
    plan = plan_rewrite(value, url_type, no_rewrite, deployment)
    return apply_plan(plan, value, rewriter)


def effective_show_progress(address: str, requested: bool) -> bool:
    """Script pseudo-addresses never show a progress indicator."""
    if address.startswith("javascript:"):
        return False
    return requested
