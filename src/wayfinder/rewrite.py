"""Address rewriting collaborators.

The rewrite policy decides *which* rewrite applies; a ``URLRewriter``
performs it. ``PathRewriter`` is the default: it resolves targets
against a base path, adds the hosting application's context prefix,
and optionally applies a container-specific encoding hook (proxy or
session token encoding) to fully rewritten render addresses.

Absolute URLs (with a scheme or an authority) pass through untouched,
which covers ``javascript:`` pseudo-addresses.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Protocol
from urllib.parse import SplitResult, urljoin, urlsplit

from wayfinder.errors import LinkError

if TYPE_CHECKING:
    from wayfinder.config import ResolverConfig


class RewriteMode(Enum):
    ABSOLUTE_PATH_OR_RELATIVE = "absolute_path_or_relative"
    ABSOLUTE_PATH = "absolute_path"
    ABSOLUTE_PATH_NO_CONTEXT = "absolute_path_no_context"


class URLRewriter(Protocol):
    """What the rewrite policy needs from an address rewriter.

    Implementations raise ``LinkError`` for targets they cannot parse.
    """

    def resolve_resource(
        self, value: str, mode: RewriteMode = RewriteMode.ABSOLUTE_PATH_OR_RELATIVE
    ) -> str: ...

    def resolve_render(self, value: str, *, skip_rewrite: bool) -> str: ...


def _split(value: str) -> SplitResult:
    try:
        return urlsplit(value)
    except ValueError as exc:
        raise LinkError(value, str(exc)) from None


def _is_external(parts: SplitResult) -> bool:
    return bool(parts.scheme or parts.netloc)


class PathRewriter:
    """Rewrite targets relative to a context prefix and a base path.

    Usage::

        rewriter = PathRewriter(context_path="/app-context")
        rewriter.resolve_render("page2.xhtml", skip_rewrite=False)
        # "/app-context/page2.xhtml"
        rewriter.resolve_render("page2.xhtml", skip_rewrite=True)
        # "/page2.xhtml"
    """

    __slots__ = ("base_path", "context_path", "encode_url")

    def __init__(
        self,
        context_path: str = "",
        base_path: str = "/",
        encode_url: Callable[[str], str] | None = None,
    ) -> None:
        self.context_path = context_path.rstrip("/")
        # An empty base leaves resource targets relative to the current document
        if base_path and not base_path.startswith("/"):
            base_path = f"/{base_path}"
        self.base_path = base_path
        self.encode_url = encode_url

    @classmethod
    def from_config(
        cls,
        config: ResolverConfig,
        encode_url: Callable[[str], str] | None = None,
    ) -> PathRewriter:
        return cls(
            context_path=config.context_path,
            base_path=config.base_path,
            encode_url=encode_url,
        )

    def with_context(self, path: str) -> str:
        """Prefix an absolute path with the context path."""
        if self.context_path and path.startswith("/") and not path.startswith("//"):
            return self.context_path + path
        return path

    def absolute_path(self, value: str) -> str:
        """Resolve *value* against the base path."""
        return urljoin(self.base_path or "/", value)

    def resolve_resource(
        self, value: str, mode: RewriteMode = RewriteMode.ABSOLUTE_PATH_OR_RELATIVE
    ) -> str:
        parts = _split(value)
        if _is_external(parts) or value.startswith("#"):
            return value
        match mode:
            case RewriteMode.ABSOLUTE_PATH_OR_RELATIVE:
                resolved = urljoin(self.base_path, value) if self.base_path else value
                return self.with_context(resolved) if resolved.startswith("/") else resolved
            case RewriteMode.ABSOLUTE_PATH:
                return self.with_context(self.absolute_path(value))
            case RewriteMode.ABSOLUTE_PATH_NO_CONTEXT:
                return self.absolute_path(value)
        msg = f"Unknown rewrite mode: {mode!r}"
        raise ValueError(msg)

    def resolve_render(self, value: str, *, skip_rewrite: bool) -> str:
        parts = _split(value)
        if _is_external(parts):
            return value
        path = self.absolute_path(value)
        if skip_rewrite:
            return path
        full = self.with_context(path)
        if self.encode_url is not None:
            return self.encode_url(full)
        return full

    def __repr__(self) -> str:
        return f"PathRewriter(context_path={self.context_path!r}, base_path={self.base_path!r})"
