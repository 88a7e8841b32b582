"""Deployment and processing-cycle context.

Provides:
- ``HostingMode`` / ``LifecyclePhase``: the two axes of the render
  rewrite matrix.
- ``DeploymentContext``: read-only snapshot handed to each resolution.
- ``ProcessingCycle``: owns the pending navigation queue for one cycle
  of one document.

A cycle is passed explicitly to the resolver and the executor. There is
no module-level queue: concurrent documents each own an independent
cycle, so no locks are needed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from wayfinder.scheduler import PendingNavigationQueue

if TYPE_CHECKING:
    from wayfinder.config import ResolverConfig


class HostingMode(Enum):
    """How the application is deployed."""

    STANDALONE = "standalone"
    EMBEDDED_PROXY = "embedded"
    CONTAINER = "container"


class LifecyclePhase(Enum):
    """Whether the cycle is the initial render or an incremental update."""

    INITIALIZING = "initializing"
    STEADY_STATE = "steady"


@dataclass(frozen=True, slots=True)
class DeploymentContext:
    """Hosting topology and lifecycle phase for one resolution."""

    hosting_mode: HostingMode = HostingMode.STANDALONE
    lifecycle_phase: LifecyclePhase = LifecyclePhase.STEADY_STATE

    @classmethod
    def from_config(
        cls,
        config: ResolverConfig,
        phase: LifecyclePhase = LifecyclePhase.STEADY_STATE,
    ) -> DeploymentContext:
        return cls(hosting_mode=config.hosting_mode, lifecycle_phase=phase)

    @property
    def is_embedded(self) -> bool:
        return self.hosting_mode is HostingMode.EMBEDDED_PROXY

    @property
    def is_container(self) -> bool:
        return self.hosting_mode is HostingMode.CONTAINER

    @property
    def is_initializing(self) -> bool:
        return self.lifecycle_phase is LifecyclePhase.INITIALIZING


@dataclass(slots=True)
class ProcessingCycle:
    """One processing cycle of one document instance.

    Created when the cycle starts; the executor drains ``navigations``
    exactly once when it ends.

    Usage::

        cycle = ProcessingCycle(DeploymentContext(HostingMode.EMBEDDED_PROXY))
        resolver.execute(directive, cycle)
        response = navigation_response(cycle.navigations.drain(), cycle.deployment)
    """

    deployment: DeploymentContext = field(default_factory=DeploymentContext)
    navigations: PendingNavigationQueue = field(default_factory=PendingNavigationQueue)
