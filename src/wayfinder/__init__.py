"""Wayfinder — navigate by view model, not by URL.

Maps view-model classes and keys to route templates once at startup,
then resolves navigation requests to URIs that are correct whether the
app is served from the root, a configured sub-path, or a sub-path a
reverse proxy assigns per request.

Basic usage::

    from wayfinder import NavigationManager, Registration, RouteTable

    table = RouteTable([
        Registration(("/counter",), view_model=CounterViewModel),
        Registration(("/users/{userId}/posts/{postId}",), view_model=UserPostViewModel),
        Registration(("/settings",), key="Settings"),
    ])
    manager = NavigationManager(table, navigator)

    manager.navigate_to(UserPostViewModel, "1/101?sort=desc")
    # navigator.navigate_to("users/1/posts/101?sort=desc")

Template links (kida)::

    from wayfinder.templating.links import register_link_globals
    register_link_globals(env, manager)
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "DuplicateRegistration",
    "HostingContext",
    "MalformedTemplate",
    "NavigationConfig",
    "NavigationManager",
    "NavigationOptions",
    "Navigator",
    "Registration",
    "RouteNotFound",
    "RouteParameter",
    "RouteTable",
    "RouteTemplate",
    "RouteTemplateCollection",
    "WayfinderError",
    "parse_template",
    "select_best_template",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wayfinder`` fast while providing a clean top-level API.
    """
    if name == "NavigationConfig":
        from wayfinder.config import NavigationConfig

        return NavigationConfig

    if name in ("RouteParameter", "RouteTemplate", "RouteTemplateCollection"):
        from wayfinder.routing import template as _template

        return getattr(_template, name)

    if name == "parse_template":
        from wayfinder.routing.parser import parse_template

        return parse_template

    if name in ("Registration", "RouteTable"):
        from wayfinder.routing import table as _table

        return getattr(_table, name)

    if name == "select_best_template":
        from wayfinder.routing.selector import select_best_template

        return select_best_template

    if name == "HostingContext":
        from wayfinder.navigation.hosting import HostingContext

        return HostingContext

    if name in ("NavigationManager", "NavigationOptions", "Navigator"):
        from wayfinder.navigation import manager as _manager

        return getattr(_manager, name)

    if name in (
        "ConfigurationError",
        "DuplicateRegistration",
        "MalformedTemplate",
        "RouteNotFound",
        "WayfinderError",
    ):
        from wayfinder import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
