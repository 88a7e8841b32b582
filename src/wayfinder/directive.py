"""Navigation directive: a single declarative "load" instruction.

The caller evaluates attribute templates and data bindings first; the
directive only holds the resulting strings. Malformed directives fail
here, at construction, never during resolution.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from wayfinder.errors import InvalidShowModeError, InvalidUrlTypeError, MissingTargetError


class ShowMode(Enum):
    """Replace the current view, or open a new one."""

    REPLACE = "replace"
    NEW = "new"

    @classmethod
    def parse(cls, value: str | None) -> ShowMode:
        if value is None:
            return cls.REPLACE
        try:
            return cls(value)
        except ValueError:
            raise InvalidShowModeError(value) from None


class UrlType(Enum):
    """Which rewrite branch applies to the target."""

    RESOURCE = "resource"
    RENDER = "render"

    @classmethod
    def parse(cls, value: str | None) -> UrlType | None:
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            raise InvalidUrlTypeError(value) from None


@dataclass(frozen=True, slots=True)
class NavigationDirective:
    """A navigate instruction with its attributes already evaluated.

    ``bound`` records that a single-node binding is configured, even
    when the bound node has no value (``bound_value is None``).
    ``resource`` is the literal-or-template resource expression.

    ``context`` is the mapping a templated ``resource`` is evaluated
    against; ``None`` means there is no context item.
    """

    resource: str | None = None
    bound: bool = False
    bound_value: str | None = None
    show: ShowMode = ShowMode.REPLACE
    target: str | None = None
    url_type: UrlType | None = None
    no_rewrite: bool = False
    show_progress: bool = True
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        if not self.bound and self.resource is None:
            raise MissingTargetError
        if not isinstance(self.show, ShowMode):
            raise InvalidShowModeError(str(self.show))
        if self.url_type is not None and not isinstance(self.url_type, UrlType):
            raise InvalidUrlTypeError(str(self.url_type))

    @property
    def replace(self) -> bool:
        return self.show is ShowMode.REPLACE

    @classmethod
    def from_attributes(
        cls,
        attrs: Mapping[str, str | None],
        *,
        bound: bool = False,
        bound_value: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> NavigationDirective:
        """Build a directive from the element's raw attribute values.

        Recognised attributes: ``resource``, ``show``, ``target``,
        ``url-type``, ``url-norewrite`` and ``show-progress``.
        """
        return cls(
            resource=attrs.get("resource"),
            bound=bound,
            bound_value=bound_value,
            show=ShowMode.parse(attrs.get("show")),
            target=attrs.get("target"),
            url_type=UrlType.parse(attrs.get("url-type")),
            no_rewrite=attrs.get("url-norewrite") == "true",
            show_progress=attrs.get("show-progress") != "false",
            context=context,
        )
