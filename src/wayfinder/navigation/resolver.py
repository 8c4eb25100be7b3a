"""Route resolution: parameter substitution and hosting-prefix rewriting.

Every function here is pure. Degraded inputs (too few values, a route
outside the hosting prefix) resolve to a deterministic fallback and a
debug log, never an exception.
"""

import logging
import re
from urllib.parse import quote, urlsplit, urlunsplit

from wayfinder.navigation.hosting import HostingContext

logger = logging.getLogger("wayfinder.navigation")

# Any braced span, including ones the template grammar does not recognise
PLACEHOLDER_RE = re.compile(r"\{([^}]+)\}")

# Characters allowed unescaped in a path value; "%" keeps pre-encoded values intact
_SEGMENT_SAFE = "!$&'()*+,;=:@%~-._"


def split_parameters(parameters: str) -> tuple[str, str | None]:
    """Split a parameter string into its path part and query string.

    The query string keeps its leading ``?``::

        "1/101?sort=desc" -> ("1/101", "?sort=desc")
        "1/101"           -> ("1/101", None)
        "?sort=desc"      -> ("", "?sort=desc")
    """
    index = parameters.find("?")
    if index < 0:
        return parameters, None
    return parameters[:index], parameters[index:]


def substitute_parameters(pattern: str, parameters: str, *, append_unused: bool = False) -> str:
    """Fill the pattern's placeholders with ``/``-separated values, left to right.

    A catch-all placeholder (``{*path}``) takes every remaining value.
    Placeholders left without a value stay in the output as written.
    Values beyond the last placeholder are dropped, or appended as extra
    path segments when *append_unused* is set. A query string in
    *parameters* is appended verbatim.

    Examples::

        substitute_parameters("/users/{userId}/posts/{postId}", "1/101")
        -> "/users/1/posts/101"
        substitute_parameters("/users/{userId}/posts/{postId}", "1")
        -> "/users/1/posts/{postId}"
        substitute_parameters("/keyed-test", "admin/users", append_unused=True)
        -> "/keyed-test/admin/users"
    """
    path_part, query = split_parameters(parameters)
    values = [v for v in path_part.split("/") if v]
    remaining = iter(values)
    used = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal used
        if match.group(1).startswith("*"):
            rest = list(remaining)
            if not rest:
                return match.group(0)
            used += len(rest)
            return "/".join(_encode(v) for v in rest)
        value = next(remaining, None)
        if value is None:
            return match.group(0)
        used += 1
        return _encode(value)

    result = PLACEHOLDER_RE.sub(_replace, pattern)

    if used < len(values) and append_unused:
        unused = values[used:]
        result = "/".join([result.rstrip("/"), *(_encode(v) for v in unused)])
        logger.debug("Appended %d unused parameter values to %r", len(unused), pattern)
    elif used < len(values):
        logger.debug("Dropped %d unused parameter values for %r", len(values) - used, pattern)
    elif PLACEHOLDER_RE.search(result):
        logger.debug("Not enough parameter values for %r; leaving placeholders in %r", pattern, result)

    if query is not None:
        result += query
    return result


def _encode(value: str) -> str:
    return quote(value, safe=_SEGMENT_SAFE)


def to_relative_path(route: str, hosting: HostingContext) -> str:
    """Rewrite an absolute route into a path relative to the base URI.

    The base URI already carries the hosting prefix, so the prefix is
    stripped from the route to keep it from appearing twice::

        "/fu/bar/counter", prefix "fu/bar" -> "counter"
        "/fu/bar",         prefix "fu/bar" -> ""
        "/counter",        no prefix       -> "counter"
        "/other/counter",  prefix "fu/bar" -> "other/counter"

    The root route ``/`` resolves to the base URI's own path.
    Routes that do not start with ``/`` are returned unchanged.
    """
    path, _, query = route.partition("?")
    suffix = f"?{query}" if "?" in route else ""

    if path == "/":
        root = hosting.root_path
        logger.debug("Root route %r resolved to %r", route, root)
        return root + suffix

    if not path.startswith("/"):
        logger.debug("Route %r returned unchanged", route)
        return route

    prefix = hosting.active_prefix
    if prefix:
        path = _strip_prefix(path, prefix, route)

    relative = path[1:]
    logger.debug("Converted %r to relative path %r", route, relative + suffix)
    return relative + suffix


def _strip_prefix(path: str, prefix: str, route: str) -> str:
    # Compared segment by segment: casefold() may change a segment's length
    prefix_parts = prefix.split("/")
    parts = path.split("/")[1:]
    head = parts[: len(prefix_parts)]
    if len(head) < len(prefix_parts) or any(a.casefold() != b.casefold() for a, b in zip(head, prefix_parts)):
        logger.debug("Route %r is outside base path %r; resolving as relative", route, f"/{prefix}")
        return path

    rest = parts[len(prefix_parts) :]
    if not rest:
        logger.debug("Route %r is the base path root", route)
        return "/"
    logger.debug("Removed base path %r from %r", f"/{prefix}", route)
    return "/" + "/".join(rest)


def resolve_navigation_uri(
    pattern: str,
    parameters: str | None,
    hosting: HostingContext,
    *,
    append_unused: bool = False,
) -> str:
    """Resolve a route pattern and parameter string to a navigable URI.

    Substitutes parameters (when any are given), then rewrites the
    result relative to the hosting context.
    """
    logger.debug("Resolving route template %r", pattern)
    route = pattern
    if parameters is not None and parameters.strip():
        route = substitute_parameters(pattern, parameters, append_unused=append_unused)
        logger.debug("Substituted %r into %r giving %r", parameters, pattern, route)
    return to_relative_path(route, hosting)


def build_uri(uri: str, relative_uri: str | None) -> str:
    """Append a relative path and/or query string to an absolute URI.

    A leading ``?`` replaces the URI's query; a path is joined onto the
    URI's path with exactly one ``/`` between them. Characters that are
    not allowed in a path (such as unfilled ``{placeholder}`` braces)
    are percent-encoded::

        build_uri("https://host/app/counter", "?a=1")   -> "https://host/app/counter?a=1"
        build_uri("https://host/app/", "page/2?a=1")    -> "https://host/app/page/2?a=1"
    """
    if relative_uri is None or not relative_uri.strip():
        return uri

    scheme, netloc, path, query, fragment = urlsplit(uri)

    if relative_uri.startswith("?"):
        query = relative_uri[1:]
    else:
        relative_path, sep, relative_query = relative_uri.partition("?")
        path = f"{path.rstrip('/')}/{relative_path.lstrip('/')}"
        if sep:
            query = relative_query

    path = quote(path or "/", safe="/" + _SEGMENT_SAFE)
    return urlunsplit((scheme, netloc, path, query, fragment))
