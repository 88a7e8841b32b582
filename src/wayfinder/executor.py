"""Navigation executor: turn a drained queue into a response.

Runs once, at the end of a processing cycle:

- Initial render: the first replacing navigation becomes a server-side
  ``Redirect``. Other navigations are left to the rendered page.
- Incremental update: every navigation is delivered to the client as a
  ``wayfinder:load`` event in ``HX-Trigger``; the first untargeted
  replacing navigation also sets ``HX-Redirect``.

Addresses whose rewrite was deferred get their context prefix here, the
one place that knows the response is actually being emitted.
"""

import logging
from collections.abc import Sequence
from urllib.parse import urlencode, urlsplit, urlunsplit

from wayfinder.config import ResolverConfig
from wayfinder.context import DeploymentContext
from wayfinder.errors import UnsupportedNavigationError
from wayfinder.http.response import Redirect, Response
from wayfinder.rewrite import PathRewriter
from wayfinder.scheduler import ResolvedNavigation

logger = logging.getLogger("wayfinder.executor")

LOAD_EVENT = "wayfinder:load"


def _with_query_param(url: str, name: str, value: str) -> str:
    parts = urlsplit(url)
    extra = urlencode({name: value})
    query = f"{parts.query}&{extra}" if parts.query else extra
    return urlunsplit(parts._replace(query=query))


def _first_replace(
    navigations: Sequence[ResolvedNavigation], *, untargeted: bool = False
) -> ResolvedNavigation | None:
    for navigation in navigations:
        if not navigation.replace or navigation.is_script:
            continue
        if untargeted and navigation.target is not None:
            continue
        return navigation
    return None


def emitted_address(navigation: ResolvedNavigation, rewriter: PathRewriter) -> str:
    """The address as it must appear in the response."""
    address = navigation.external_address
    if not navigation.rewrite_deferred or not address.startswith("/") or address.startswith("//"):
        return address
    full = rewriter.with_context(address)
    if rewriter.encode_url is not None:
        return rewriter.encode_url(full)
    return full


def navigation_response(
    navigations: Sequence[ResolvedNavigation],
    deployment: DeploymentContext,
    config: ResolverConfig | None = None,
    rewriter: PathRewriter | None = None,
) -> Redirect | Response | None:
    """Build the response for a cycle's pending navigations.

    Returns ``None`` when nothing needs to be emitted. Pass *rewriter*
    to apply a container encoding hook to deferred addresses. Raises
    ``UnsupportedNavigationError`` for a redirect requested while a
    container-hosted view is initializing.
    """
    if not navigations:
        return None
    config = config or ResolverConfig()
    rewriter = rewriter or PathRewriter.from_config(config)

    if deployment.is_initializing:
        return _initial_redirect(navigations, deployment, config, rewriter)

    payload = []
    for navigation in navigations:
        entry = navigation.as_dict()
        entry["address"] = emitted_address(navigation, rewriter)
        payload.append(entry)
    response = Response().with_hx_trigger({LOAD_EVENT: payload})

    first = _first_replace(navigations, untargeted=True)
    if first is not None:
        response = response.with_hx_redirect(emitted_address(first, rewriter))
    logger.debug("delivering %d navigation(s) to the client", len(payload))
    return response


def _initial_redirect(
    navigations: Sequence[ResolvedNavigation],
    deployment: DeploymentContext,
    config: ResolverConfig,
    rewriter: PathRewriter,
) -> Redirect | None:
    first = _first_replace(navigations)
    if first is None:
        logger.debug("no replacing navigation; %d left to the page", len(navigations))
        return None
    if deployment.is_container:
        msg = (
            f"Cannot redirect to {first.external_address!r} while a "
            "container-hosted view is initializing"
        )
        raise UnsupportedNavigationError(msg)

    url = emitted_address(first, rewriter)
    if deployment.is_embedded:
        url = _with_query_param(url, config.embeddable_param, "true")
    if len(navigations) > 1:
        logger.debug(
            "redirecting to %s; ignoring %d other navigation(s)", url, len(navigations) - 1
        )
    return Redirect(url)
