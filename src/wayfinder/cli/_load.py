"""Import resolution — resolves ``"module:attribute"`` strings to objects.

Shared by ``wayfinder routes`` and ``wayfinder resolve`` to locate a
route table and view-model classes from user-supplied import strings.
"""

import importlib
from typing import Any

from wayfinder.routing.table import RouteTable


def import_object(import_string: str, default_attr: str) -> Any:
    """Import ``"module:attribute"``, defaulting the attribute to *default_attr*.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
    """
    module_path, _, attr_name = import_string.partition(":")
    module = importlib.import_module(module_path)
    obj: Any = module
    for part in (attr_name or default_attr).split("."):
        obj = getattr(obj, part)
    return obj


def load_table(import_string: str) -> RouteTable:
    """Resolve an import string to a :class:`RouteTable`.

    Accepts ``"module:attribute"``; the attribute defaults to ``"table"``.
    A callable that is not already a table is treated as a factory and
    called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a ``RouteTable``.
    """
    obj = import_object(import_string, "table")

    if callable(obj) and not isinstance(obj, RouteTable):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, RouteTable):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a wayfinder RouteTable"
        raise TypeError(msg)

    return obj


def load_target(target: str, *, key: bool = False) -> Any:
    """Interpret a CLI target: ``module:Class`` imports a class, anything else is a key.

    With *key* set the target is always a key, so keys such as
    ``"admin:settings"`` stay reachable.
    """
    if key or ":" not in target:
        return target
    obj = import_object(target, "")
    if not isinstance(obj, type):
        msg = f"{target!r} resolved to {type(obj).__name__}, not a view-model class"
        raise TypeError(msg)
    return obj
