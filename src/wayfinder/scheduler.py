"""Navigation scheduler: queue resolved navigations for the executor.

Navigations never take effect immediately. Each one is appended to the
cycle's ``PendingNavigationQueue``; the downstream executor drains the
queue once, when the cycle completes, and decides how to reconcile
several pending navigations.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from wayfinder.errors import NavigationQueueClosedError

if TYPE_CHECKING:
    from wayfinder.context import ProcessingCycle
    from wayfinder.directive import UrlType

logger = logging.getLogger("wayfinder.scheduler")


@dataclass(frozen=True, slots=True)
class ResolvedNavigation:
    """A navigation ready for the executor. Immutable once created."""

    external_address: str
    target: str | None = None
    url_type: UrlType | None = None
    replace: bool = True
    show_progress: bool = True
    # Context prefix and container encoding left to the emitting layer
    rewrite_deferred: bool = False

    @property
    def is_script(self) -> bool:
        """True for ``javascript:`` pseudo-addresses."""
        return self.external_address.startswith("javascript:")

    def as_dict(self) -> dict[str, object]:
        return {
            "address": self.external_address,
            "target": self.target,
            "url_type": self.url_type.value if self.url_type is not None else None,
            "replace": self.replace,
            "show_progress": self.show_progress,
        }


@dataclass(slots=True)
class PendingNavigationQueue:
    """Append-only FIFO of navigations for one processing cycle."""

    _items: list[ResolvedNavigation] = field(default_factory=list)
    _drained: bool = False

    def append(self, navigation: ResolvedNavigation) -> None:
        if self._drained:
            msg = f"Cannot schedule {navigation.external_address!r}: queue already drained"
            raise NavigationQueueClosedError(msg)
        self._items.append(navigation)

    def add(
        self,
        address: str,
        *,
        target: str | None = None,
        url_type: UrlType | None = None,
        replace: bool = True,
        show_progress: bool = True,
        rewrite_deferred: bool = False,
    ) -> ResolvedNavigation:
        """Create a navigation from its parts and append it."""
        navigation = ResolvedNavigation(
            external_address=address,
            target=target,
            url_type=url_type,
            replace=replace,
            show_progress=show_progress,
            rewrite_deferred=rewrite_deferred,
        )
        self.append(navigation)
        return navigation

    def drain(self) -> tuple[ResolvedNavigation, ...]:
        """Return every pending navigation and close the queue.

        May be called once per cycle.
        """
        if self._drained:
            msg = "Pending navigations were already drained for this cycle"
            raise NavigationQueueClosedError(msg)
        self._drained = True
        items = tuple(self._items)
        self._items.clear()
        return items

    @property
    def drained(self) -> bool:
        return self._drained

    def __iter__(self) -> Iterator[ResolvedNavigation]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


def schedule(cycle: ProcessingCycle, navigation: ResolvedNavigation) -> None:
    """Append *navigation* to the cycle's pending queue."""
    cycle.navigations.append(navigation)
    logger.debug(
        "scheduled navigation %s (replace=%s, target=%s)",
        navigation.external_address,
        navigation.replace,
        navigation.target,
    )
