"""Navigation by view model or key.

The manager looks a target up in the route table, picks the best
template for the caller's parameters, resolves it against the current
hosting context, and hands the URI to the platform navigator.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Protocol

from wayfinder.config import NavigationConfig
from wayfinder.errors import describe_target
from wayfinder.navigation.hosting import HostingContext
from wayfinder.navigation.resolver import build_uri, resolve_navigation_uri
from wayfinder.routing.selector import select_best_template
from wayfinder.routing.table import RouteTable
from wayfinder.routing.template import RouteTemplate

logger = logging.getLogger("wayfinder.navigation")


@dataclass(frozen=True, slots=True)
class NavigationOptions:
    """Options forwarded to the navigator with a navigation request."""

    force_load: bool = False
    replace_history_entry: bool = False
    history_entry_state: str | None = None


class Navigator(Protocol):
    """The platform's browser/UI navigation primitive.

    ``base_uri`` is the absolute URI of the app root. Implementations
    that are not ready yet raise ``RuntimeError`` when it is read.
    """

    @property
    def base_uri(self) -> str: ...

    def navigate_to(self, uri: str, *, force_load: bool = False, replace: bool = False) -> None: ...

    def navigate_to_with_options(self, uri: str, options: NavigationOptions) -> None: ...


class NavigationManager:
    """Resolve and navigate to view models and keys.

    Usage::

        manager = NavigationManager(table, navigator)
        manager.get_uri(CounterViewModel)               # "counter"
        manager.navigate_to(UserPostViewModel, "1/101")  # -> "users/1/posts/101"
        manager.navigate_to("Settings", "?tab=profile")

    Classes are resolved among registered view models, any other
    hashable among keys.
    """

    __slots__ = ("_config", "_navigator", "_table")

    def __init__(
        self,
        table: RouteTable,
        navigator: Navigator,
        config: NavigationConfig | None = None,
    ) -> None:
        self._table = table
        self._navigator = navigator
        self._config = config or table.config

    @property
    def table(self) -> RouteTable:
        return self._table

    @property
    def navigator(self) -> Navigator:
        return self._navigator

    def hosting_context(self) -> HostingContext:
        """Snapshot the hosting context for one navigation call."""
        try:
            base_uri = self._navigator.base_uri
        except RuntimeError:
            logger.debug("Navigator not initialized; assuming root hosting")
            base_uri = None
        return HostingContext(base_uri=base_uri, base_path=self._config.base_path)

    def select_template(self, target: Any, parameters: str | None = None) -> RouteTemplate:
        """Pick the template *target* resolves to for *parameters*.

        Raises ``RouteNotFound`` if nothing is registered for *target*.
        """
        collection = self._table.templates_for(target)
        if not self._config.multi_route_templates:
            return collection.primary

        template = select_best_template(collection, parameters)
        logger.debug(
            "Selected route template %r for %s from %d available templates",
            template.pattern,
            describe_target(target),
            len(collection.all_routes),
        )
        return template

    def get_uri(self, target: Any) -> str:
        """Resolve the primary route of *target* without substitution.

        Suited to link generation: the result is relative to the base URI.

        Raises ``RouteNotFound`` if nothing is registered for *target*.
        """
        pattern = self._table.primary_route(target)
        return resolve_navigation_uri(pattern, None, self.hosting_context())

    def resolve(self, target: Any, parameters: str | None = None) -> str:
        """Resolve *target* and *parameters* to a URI relative to the base URI.

        *parameters* may be empty, ``?k=v`` (query only), ``v1/v2`` (path
        values), or ``v1/v2?k=v`` (both). Path values a keyed route has no
        placeholder for are appended to it as extra segments.

        Raises ``RouteNotFound`` if nothing is registered for *target*.
        """
        template = self.select_template(target, parameters)
        uri = resolve_navigation_uri(
            template.pattern,
            parameters,
            self.hosting_context(),
            append_unused=not isinstance(target, type),
        )
        logger.debug("Resolved %s from %r to %r", describe_target(target), template.pattern, uri)
        return uri

    def navigate_to(
        self,
        target: Any,
        parameters: str | None = None,
        *,
        force_load: bool = False,
        replace: bool = False,
        options: NavigationOptions | None = None,
    ) -> str:
        """Resolve *target* and navigate to it.

        A query-only *parameters* string is applied to the absolute URI
        of the primary route. When *options* is given it takes precedence
        over *force_load* and *replace*.

        Returns the URI handed to the navigator.

        Raises ``RouteNotFound`` if nothing is registered for *target*.
        """
        if parameters is not None and parameters.startswith("?"):
            hosting = self.hosting_context()
            uri = build_uri(hosting.to_absolute(self.resolve(target)), parameters)
        else:
            uri = self.resolve(target, parameters)

        logger.debug("Navigating to %s with uri %r", describe_target(target), uri)
        if options is not None:
            self._navigator.navigate_to_with_options(uri, dataclasses.replace(options))
        else:
            self._navigator.navigate_to(uri, force_load=force_load, replace=replace)
        return uri
