"""Kida template globals for navigation links.

Registered on an application's kida Environment so templates can link
to view models and keys without hard-coding route patterns::

    register_link_globals(env, manager)

    <a href="{{ nav_uri('Settings') }}">Settings</a>
    {{ nav_link(post_vm, "Read more", parameters=user_id ~ "/" ~ post_id) }}
"""

import html
from collections.abc import Callable
from typing import Any

from kida import Environment
from kida.template import Markup

from wayfinder.navigation.manager import NavigationManager


def make_link_globals(manager: NavigationManager) -> dict[str, Callable[..., Any]]:
    """Build the ``nav_uri`` and ``nav_link`` globals bound to *manager*."""

    def nav_uri(target: Any, parameters: str | None = None) -> str:
        return manager.resolve(target, parameters)

    def nav_link(
        target: Any,
        text: str,
        parameters: str | None = None,
        cls: str = "",
        active: str = "",
    ) -> Markup:
        """Render an anchor to *target*.

        *active* is appended to the class list when the link points at
        the navigator's current location.
        """
        href = manager.resolve(target, parameters)
        classes = [cls] if cls else []
        if active and _is_current(manager, href):
            classes.append(active)
        class_attr = f' class="{html.escape(" ".join(classes))}"' if classes else ""
        return Markup(f'<a href="{html.escape(href)}"{class_attr}>{html.escape(str(text))}</a>')

    return {"nav_uri": nav_uri, "nav_link": nav_link}


def _is_current(manager: NavigationManager, href: str) -> bool:
    # Navigators expose the current location as ``uri`` when they track one
    try:
        current = getattr(manager.navigator, "uri", None)
    except RuntimeError:
        return False
    if current is None:
        return False
    hosting = manager.hosting_context()
    return hosting.to_absolute(href).rstrip("/") == str(current).rstrip("/")


def register_link_globals(env: Environment, manager: NavigationManager) -> Environment:
    """Add the navigation link globals to *env* and return it."""
    for name, value in make_link_globals(manager).items():
        env.add_global(name, value)
    return env
