"""Resolver configuration.

ResolverConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from wayfinder.context import HostingMode


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Resolver configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ResolverConfig(
            hosting_mode=HostingMode.EMBEDDED_PROXY,
            context_path="/orders",
        )
    """

    # Deployment
    hosting_mode: HostingMode = HostingMode.STANDALONE
    context_path: str = ""  # e.g. "/app-context"; empty when mounted at the root
    base_path: str = "/"  # Relative targets resolve against this; "" keeps resources relative

    # Embedding: query parameter added to server-side redirects
    embeddable_param: str = "embeddable"

    # Encoding
    encode_spaces: bool = True

    # Link checking: report unresolvable targets as Failed(LinkError)
    strict_links: bool = False

    # Logging
    log_level: str = "info"
