"""Response values produced by the navigation executor.

Both types are immutable. ``Response`` is built through chainable
``.with_*()`` transformations, each returning a new instance; it is
what an incremental (htmx) update carries back to the client.
``Redirect`` is what the initial render turns into.
"""

from __future__ import annotations

import json as json_module
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations."""

    body: str = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def header(self, name: str) -> str | None:
        """Return the first value of header *name* (case-insensitive)."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None

    # -- htmx response headers --

    def with_hx_redirect(self, url: str) -> Response:
        """Tell htmx to do a full-page redirect (like entering a URL).

        Sets the ``HX-Redirect`` response header.
        """
        return self.with_header("HX-Redirect", url)

    def with_hx_trigger(self, event: str | dict[str, Any]) -> Response:
        """Trigger a client-side event after the response is received.

        Accepts a plain event name or a dict for events with payloads::

            .with_hx_trigger({"wayfinder:load": [{"address": "/next"}]})
        """
        value = event if isinstance(event, str) else json_module.dumps(event)
        return self.with_header("HX-Trigger", value)


@dataclass(frozen=True, slots=True)
class Redirect:
    """A server-side redirect to ``url``."""

    url: str
    status: int = 302

    def to_response(self) -> Response:
        """Materialize as a ``Response`` with a ``Location`` header."""
        return Response(body="").with_status(self.status).with_header("Location", self.url)
