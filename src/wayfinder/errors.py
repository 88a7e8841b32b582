"""Wayfinder exception hierarchy.

Shared across the extractor, rewrite policy, scheduler, and executor so
every stage raises and catches the same types.
"""

from dataclasses import dataclass


class WayfinderError(Exception):
    """Base for all wayfinder-specific errors."""


class ConfigurationError(WayfinderError):
    """Raised when a navigation directive is malformed.

    Fatal to the directive, never to the process. Surfaced to the caller
    when the directive is constructed.
    """


class MissingTargetError(ConfigurationError):
    """Neither a single-node binding nor a ``resource`` is configured."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(
            detail or "Missing 'resource' or binding on navigation directive."
        )


class InvalidShowModeError(ConfigurationError):
    """``show`` is neither ``replace`` nor ``new``."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid value for 'show' on navigation directive: {value!r}")


class InvalidUrlTypeError(ConfigurationError):
    """``url-type`` is neither ``resource`` nor ``render``."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid value for 'url-type' on navigation directive: {value!r}"
        )


class InvalidTemplateError(ConfigurationError):
    """A templated ``resource`` does not compile."""

    def __init__(self, expression: str, detail: str = "") -> None:
        self.expression = expression
        msg = f"Invalid resource template {expression!r}"
        super().__init__(f"{msg}: {detail}" if detail else msg)


@dataclass(frozen=True, slots=True)
class LinkError(WayfinderError):
    """A navigation target could not be turned into an address.

    Raised by URL rewriters. Only reported to the caller when
    ``ResolverConfig.strict_links`` is on.
    """

    value: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"Cannot resolve {self.value!r}: {self.detail}"
        return f"Cannot resolve {self.value!r}"


class NavigationQueueClosedError(WayfinderError):
    """The pending navigation queue was already drained for this cycle."""


class UnsupportedNavigationError(WayfinderError):
    """The executor cannot honour a navigation in the current topology.

    Container-hosted components cannot perform a server-side redirect
    while the view is initializing.
    """
