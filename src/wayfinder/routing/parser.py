"""Route pattern parsing.

Understands the common web-routing placeholder forms::

    {name}              required
    {name?}             optional
    {*name}             catch-all (must be the last parameter)
    {name:constraint}   constraint text kept as-is, never evaluated

Anything between braces that does not fit this grammar is left as
literal text rather than rejected.
"""

import re
from collections.abc import Iterable
from typing import Any

from wayfinder.errors import MalformedTemplate
from wayfinder.routing.template import RouteParameter, RouteTemplate

# {  *?  name  ??  (:constraint)?  }
PARAMETER_RE = re.compile(r"\{(\*)?(\w+)(\?)?(?::([^}]+))?\}")


def parse_template(pattern: str) -> RouteTemplate:
    """Parse a route pattern into a :class:`RouteTemplate`.

    Examples::

        "/users"                -> RouteTemplate("/users", ())
        "/users/{id}"           -> (RouteParameter("id"),)
        "/files/{*path}"        -> (RouteParameter("path", is_catch_all=True),)
        "/users/{id:int}/{tab?}" -> (RouteParameter("id", constraint="int"),
                                     RouteParameter("tab", is_optional=True))

    Raises ``TypeError`` if *pattern* is ``None``.
    """
    if pattern is None:
        msg = "Route pattern must not be None."
        raise TypeError(msg)

    parameters = tuple(
        RouteParameter(
            name=match.group(2),
            is_catch_all=match.group(1) is not None,
            is_optional=match.group(3) is not None,
            constraint=match.group(4),
        )
        for match in PARAMETER_RE.finditer(pattern)
    )
    return RouteTemplate(pattern=pattern, parameters=parameters)


def parse_templates(patterns: Iterable[str]) -> tuple[RouteTemplate, ...]:
    """Parse several patterns, keeping their order."""
    if patterns is None:
        msg = "Route patterns must not be None."
        raise TypeError(msg)
    return tuple(parse_template(p) for p in patterns)


def validate_template(template: RouteTemplate, owner: Any = None) -> None:
    """Check the structural rules the grammar alone cannot express.

    Raises ``MalformedTemplate`` when a template has more than one
    catch-all, a catch-all that is not the final parameter, or the same
    parameter name twice.
    """
    catch_alls = [i for i, p in enumerate(template.parameters) if p.is_catch_all]
    if len(catch_alls) > 1:
        raise MalformedTemplate(template.pattern, "only one catch-all parameter is allowed", owner)
    if catch_alls and catch_alls[0] != template.parameter_count - 1:
        raise MalformedTemplate(template.pattern, "a catch-all parameter must be the last parameter", owner)

    seen: set[str] = set()
    for parameter in template.parameters:
        key = parameter.name.lower()
        if key in seen:
            raise MalformedTemplate(template.pattern, f"parameter {parameter.name!r} appears more than once", owner)
        seen.add(key)
