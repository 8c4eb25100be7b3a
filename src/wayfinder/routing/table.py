"""Startup route table mapping view models and keys to route templates.

Built once from the result of an application's registration pass and
read-only afterwards, so any number of navigation calls may read it
without locking.
"""

import logging
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from wayfinder.config import NavigationConfig
from wayfinder.errors import ConfigurationError, DuplicateRegistration, MalformedTemplate, RouteNotFound
from wayfinder.routing.parser import parse_templates, validate_template
from wayfinder.routing.template import RouteTemplateCollection

logger = logging.getLogger("wayfinder.routing")


@dataclass(frozen=True, slots=True)
class Registration:
    """One entry of the registration pass: a view and the patterns it declares.

    A view may be reachable by its view-model class, by a key, or both.

    Attributes:
        patterns: Route patterns in declaration order.
        view_model: The view-model class, if the view has one.
        key: An opaque hashable key for keyed navigation.
        view: Label for the declaring view, used only in diagnostics.
    """

    patterns: tuple[str, ...]
    view_model: type | None = None
    key: Hashable | None = None
    view: str | None = None


class RouteTable:
    """Immutable lookup from view models and keys to their route templates.

    Usage::

        table = RouteTable([
            Registration(("/counter",), view_model=CounterViewModel),
            Registration(("/users", "/users/{id}"), view_model=UsersViewModel),
            Registration(("/keyed",), key="Keyed"),
        ])
        table.templates_for(UsersViewModel).primary_route  # "/users"

    Duplicate view models or keys keep their first registration; later
    ones are dropped and recorded on :attr:`duplicates`.
    """

    __slots__ = ("_config", "_duplicates", "_keyed_templates", "_view_model_templates")

    def __init__(
        self,
        registrations: Iterable[Registration],
        config: NavigationConfig | None = None,
    ) -> None:
        self._config = config or NavigationConfig()
        self._view_model_templates: dict[type, RouteTemplateCollection] = {}
        self._keyed_templates: dict[Hashable, RouteTemplateCollection] = {}
        self._duplicates: list[DuplicateRegistration] = []
        self._build(registrations)

    # -- construction -----------------------------------------------------

    def _build(self, registrations: Iterable[Registration]) -> None:
        logger.debug("Building route table")
        for registration in registrations:
            owner = registration.view_model if registration.view_model is not None else registration.key
            if not registration.patterns:
                logger.debug("View %s declares no route patterns", registration.view or repr(owner))
                continue
            try:
                collection = self._collect(registration, owner)
            except MalformedTemplate:
                if self._config.strict_templates:
                    raise
                logger.warning("Skipping registration for %r with a malformed template", owner, exc_info=True)
                continue

            if registration.view_model is not None:
                self._insert(self._view_model_templates, registration.view_model, collection, registration.view)
            if registration.key is not None:
                self._insert(self._keyed_templates, registration.key, collection, registration.view)

        logger.debug(
            "Route table built: %d view models, %d keys, %d duplicates",
            len(self._view_model_templates),
            len(self._keyed_templates),
            len(self._duplicates),
        )

    def _collect(self, registration: Registration, owner: Any) -> RouteTemplateCollection:
        if owner is None:
            msg = f"Registration for {registration.view or 'an unnamed view'} has neither a view model nor a key."
            raise ConfigurationError(msg)
        if isinstance(registration.patterns, str):
            msg = f"Registration patterns for {owner!r} must be a sequence of strings, not a single string."
            raise ConfigurationError(msg)
        templates = parse_templates(self._apply_base_path(p) for p in registration.patterns)
        for template in templates:
            validate_template(template, owner)
        return RouteTemplateCollection.from_templates(templates)

    def _apply_base_path(self, pattern: str) -> str:
        """Prepend the deprecated static ``base_path``, if one is configured."""
        base_path = self._config.base_path
        if base_path and base_path.strip():
            return f"{base_path.rstrip('/')}/{pattern.lstrip('/')}"
        return pattern

    def _insert(
        self,
        target_map: dict[Any, RouteTemplateCollection],
        target: Any,
        collection: RouteTemplateCollection,
        view: str | None,
    ) -> None:
        existing = target_map.get(target)
        if existing is not None:
            duplicate = DuplicateRegistration(
                target=target,
                existing=existing.primary_route,
                ignored=collection.primary_route,
            )
            self._duplicates.append(duplicate)
            logger.warning("%s", duplicate)
            return

        target_map[target] = collection
        logger.debug(
            "Caching route %r for %r (view %s, %d templates)",
            collection.primary_route,
            target,
            view or "?",
            len(collection.all_routes),
        )

    # -- read-only views --------------------------------------------------

    @property
    def view_model_routes(self) -> Mapping[type, str]:
        """View-model class -> primary pattern."""
        return MappingProxyType({t: c.primary_route for t, c in self._view_model_templates.items()})

    @property
    def keyed_routes(self) -> Mapping[Hashable, str]:
        """Key -> primary pattern."""
        return MappingProxyType({k: c.primary_route for k, c in self._keyed_templates.items()})

    @property
    def view_model_templates(self) -> Mapping[type, RouteTemplateCollection]:
        return MappingProxyType(self._view_model_templates)

    @property
    def keyed_templates(self) -> Mapping[Hashable, RouteTemplateCollection]:
        return MappingProxyType(self._keyed_templates)

    @property
    def duplicates(self) -> tuple[DuplicateRegistration, ...]:
        return tuple(self._duplicates)

    @property
    def config(self) -> NavigationConfig:
        return self._config

    # -- lookup -----------------------------------------------------------

    def templates_for(self, target: Any) -> RouteTemplateCollection:
        """Return the template collection for a view-model class or key.

        Classes are looked up among view models, anything else among keys.

        Raises ``TypeError`` if *target* is ``None``.
        Raises ``RouteNotFound`` if nothing is registered for *target*.
        """
        if target is None:
            msg = "Navigation target must not be None."
            raise TypeError(msg)
        source = self._view_model_templates if isinstance(target, type) else self._keyed_templates
        try:
            return source[target]
        except KeyError:
            raise RouteNotFound(target) from None
        except TypeError:
            # Unhashable keys can never have been registered
            raise RouteNotFound(target) from None

    def primary_route(self, target: Any) -> str:
        """Return the primary pattern for a view-model class or key."""
        return self.templates_for(target).primary_route

    def __contains__(self, target: object) -> bool:
        try:
            self.templates_for(target)
        except (RouteNotFound, TypeError):
            return False
        return True

    def __len__(self) -> int:
        return len(self._view_model_templates) + len(self._keyed_templates)
