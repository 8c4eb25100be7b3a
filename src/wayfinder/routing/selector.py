"""Template selection for views that declare several route patterns.

A pure function of the collection and the caller's parameter string:
identical inputs always pick the identical template.
"""

import logging

from wayfinder.routing.template import RouteTemplate, RouteTemplateCollection

logger = logging.getLogger("wayfinder.routing")


def count_path_segments(parameters: str) -> int:
    """Count the ``/``-separated path values before any query string.

    Examples::

        "1/101"             -> 2
        "1/101?sort=desc"   -> 2
        "/a//b/"            -> 2
    """
    path_part, _, _ = parameters.partition("?")
    return sum(1 for segment in path_part.split("/") if segment)


def can_accommodate(template: RouteTemplate, segment_count: int) -> bool:
    """Whether *template* can take *segment_count* path values.

    Catch-all templates take any number. Otherwise the count must lie
    between the required and total parameter counts.
    """
    if template.has_catch_all:
        return True
    return template.required_parameter_count <= segment_count <= template.parameter_count


def _rank(template: RouteTemplate) -> tuple[int, int, bool]:
    # Most parameters first, then fewest optional, then catch-all last
    return (-template.parameter_count, template.optional_parameter_count, template.has_catch_all)


def select_best_template(templates: RouteTemplateCollection, parameters: str | None) -> RouteTemplate:
    """Pick the template that best fits the supplied parameter string.

    - No parameters, or a query string only (``?a=1``): the primary template.
    - Path values (``a/b`` or ``a/b?x=1``): among templates that can take
      that many values, the most specific one. Ties keep declaration order.
    - No template can take that many values: the primary template. Extra
      values are then dropped during substitution.

    Raises ``TypeError`` if *templates* is ``None``.
    """
    if templates is None:
        msg = "Route template collection must not be None."
        raise TypeError(msg)

    if parameters is None or not parameters.strip():
        logger.debug("Using primary route %r: no parameters provided", templates.primary_route)
        return templates.primary

    if parameters.startswith("?"):
        logger.debug("Using primary route %r: query string only", templates.primary_route)
        return templates.primary

    segment_count = count_path_segments(parameters)
    logger.debug("Analyzing %d path segments in %r", segment_count, parameters)

    candidates = [t for t in templates.all_routes if can_accommodate(t, segment_count)]
    if candidates:
        # sorted() is stable: equal ranks stay in declaration order
        selected = sorted(candidates, key=_rank)[0]
        logger.debug(
            "Selected template %r (%d parameters, %d required)",
            selected.pattern,
            selected.parameter_count,
            selected.required_parameter_count,
        )
        return selected

    logger.debug(
        "Using primary route %r: no template takes %d path segments",
        templates.primary_route,
        segment_count,
    )
    return templates.primary
