"""Wayfinder: resolve declarative navigation directives.

Decides where a "load" directive goes, rewrites the target for the
hosting topology, and queues the navigation until the processing cycle
ends.

Basic usage::

    from wayfinder import (
        DeploymentContext,
        NavigationDirective,
        NavigationResolver,
        ProcessingCycle,
        ResolverConfig,
        navigation_response,
    )

    resolver = NavigationResolver(ResolverConfig(context_path="/app"))
    cycle = ProcessingCycle(DeploymentContext())

    resolver.execute(NavigationDirective(resource="page2.xhtml"), cycle)
    response = navigation_response(cycle.navigations.drain(), cycle.deployment)
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "DeploymentContext",
    "Failed",
    "HostingMode",
    "LifecyclePhase",
    "LinkError",
    "MissingTargetError",
    "NavigationDirective",
    "NavigationResolver",
    "Navigated",
    "NoOp",
    "PathRewriter",
    "ProcessingCycle",
    "Redirect",
    "ResolvedNavigation",
    "ResolverConfig",
    "Response",
    "ShowMode",
    "UrlType",
    "WayfinderError",
    "encode_hrri",
    "navigation_response",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wayfinder`` fast while providing a clean top-level API.
    """
    if name == "NavigationResolver":
        from wayfinder.resolver import NavigationResolver

        return NavigationResolver

    if name == "ResolverConfig":
        from wayfinder.config import ResolverConfig

        return ResolverConfig

    if name in ("DeploymentContext", "HostingMode", "LifecyclePhase", "ProcessingCycle"):
        from wayfinder import context as _ctx

        return getattr(_ctx, name)

    if name in ("NavigationDirective", "ShowMode", "UrlType"):
        from wayfinder import directive as _directive

        return getattr(_directive, name)

    if name in ("Failed", "Navigated", "NoOp"):
        from wayfinder import outcome as _outcome

        return getattr(_outcome, name)

    if name == "ResolvedNavigation":
        from wayfinder.scheduler import ResolvedNavigation

        return ResolvedNavigation

    if name == "PathRewriter":
        from wayfinder.rewrite import PathRewriter

        return PathRewriter

    if name in ("Redirect", "Response"):
        from wayfinder.http import response as _resp

        return getattr(_resp, name)

    if name == "encode_hrri":
        from wayfinder.http.encoding import encode_hrri

        return encode_hrri

    if name == "navigation_response":
        from wayfinder.executor import navigation_response

        return navigation_response

    if name in ("ConfigurationError", "LinkError", "MissingTargetError", "WayfinderError"):
        from wayfinder import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
