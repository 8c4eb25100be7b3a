"""Wayfinder exception hierarchy.

Shared across the route table, selector, resolver, and navigation manager
so every module raises and catches the same types.
"""

from dataclasses import dataclass
from typing import Any


class WayfinderError(Exception):
    """Base for all wayfinder-specific errors."""


class ConfigurationError(WayfinderError):
    """Raised when navigation setup is invalid.

    Typically raised while the route table is being built at startup.
    """


class MalformedTemplate(ConfigurationError):  # noqa: N818 — mirrors RouteNotFound
    """A route pattern breaks the structural rules of the template grammar.

    Raised at table-construction time so a bad ``{*catch_all}`` placement
    surfaces at startup instead of during navigation.
    """

    def __init__(self, pattern: str, reason: str, owner: Any = None) -> None:
        self.pattern = pattern
        self.reason = reason
        self.owner = owner
        where = f" registered for {describe_target(owner)}" if owner is not None else ""
        super().__init__(f"Malformed route template {pattern!r}{where}: {reason}")


class RouteNotFound(WayfinderError):  # noqa: N818 — conventional name, like NotFound
    """No route was registered for a view-model class or key."""

    def __init__(self, target: Any) -> None:
        self.target = target
        super().__init__(f"No route registered for {describe_target(target)}")


@dataclass(frozen=True, slots=True)
class DuplicateRegistration:
    """Diagnostic record for a view-model or key registered twice.

    Not an exception: the first registration wins and table construction
    continues. Collected on ``RouteTable.duplicates``.
    """

    target: Any
    existing: str
    ignored: str

    def __str__(self) -> str:
        return (
            f"Duplicate registration for {describe_target(self.target)}: "
            f"kept {self.existing!r}, ignored {self.ignored!r}"
        )


def describe_target(target: Any) -> str:
    """Human-readable name for a navigation target.

    Classes render as their qualified name, keys as their ``repr``.
    """
    if isinstance(target, type):
        return f"view model {target.__module__}.{target.__qualname__}"
    return f"key {target!r}"
