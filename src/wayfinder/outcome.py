"""Resolution outcome: navigated, nothing to do, or failed.

Three distinct types so callers cannot confuse "nothing to do" with
"something went wrong"::

    match resolver.execute(directive, cycle):
        case Navigated(navigation):
            ...
        case NoOp(reason):
            ...
        case Failed(error):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from wayfinder.errors import WayfinderError
    from wayfinder.scheduler import ResolvedNavigation


@dataclass(frozen=True, slots=True)
class Navigated:
    """A navigation was resolved."""

    navigation: ResolvedNavigation

    def raise_for_failure(self) -> None:
        return None

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class NoOp:
    """The directive is well-formed but has nothing to navigate to."""

    reason: str

    def raise_for_failure(self) -> None:
        return None

    def __bool__(self) -> bool:
        """Falsy, so ``if not outcome:`` skips both no-ops and failures."""
        return False


@dataclass(frozen=True, slots=True)
class Failed:
    """The target could not be resolved (strict link checking only)."""

    error: WayfinderError

    def raise_for_failure(self) -> None:
        raise self.error

    def __bool__(self) -> bool:
        return False


Outcome: TypeAlias = Navigated | NoOp | Failed
