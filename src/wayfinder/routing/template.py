"""RouteParameter, RouteTemplate, and RouteTemplateCollection frozen dataclasses."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouteParameter:
    """A placeholder parsed out of a route pattern.

    Required:  ``{id}``       (name="id")
    Optional:  ``{id?}``      (is_optional=True)
    Catch-all: ``{*path}``    (is_catch_all=True)
    Typed:     ``{id:int}``   (constraint="int", passed through unevaluated)
    """

    name: str
    is_optional: bool = False
    is_catch_all: bool = False
    constraint: str | None = None


@dataclass(frozen=True, slots=True)
class RouteTemplate:
    """A parsed route pattern.

    ``pattern`` is kept verbatim; ``parameters`` are in left-to-right
    placeholder order.
    """

    pattern: str
    parameters: tuple[RouteParameter, ...] = ()

    @property
    def parameter_count(self) -> int:
        return len(self.parameters)

    @property
    def required_parameter_count(self) -> int:
        return sum(1 for p in self.parameters if not p.is_optional)

    @property
    def optional_parameter_count(self) -> int:
        return sum(1 for p in self.parameters if p.is_optional)

    @property
    def has_catch_all(self) -> bool:
        return any(p.is_catch_all for p in self.parameters)


@dataclass(frozen=True, slots=True)
class RouteTemplateCollection:
    """Every template registered for one view model or key.

    ``primary_route`` is the pattern of the simplest template (fewest
    parameters, then shortest pattern, then first registered) and always
    appears verbatim in ``all_routes``.
    """

    primary_route: str
    all_routes: tuple[RouteTemplate, ...]

    def __post_init__(self) -> None:
        if not any(t.pattern == self.primary_route for t in self.all_routes):
            msg = f"Primary route {self.primary_route!r} is not one of the collection's templates."
            raise ValueError(msg)

    @property
    def primary(self) -> RouteTemplate:
        """The template whose pattern is ``primary_route``."""
        return next(t for t in self.all_routes if t.pattern == self.primary_route)

    @classmethod
    def from_templates(cls, templates: tuple[RouteTemplate, ...]) -> "RouteTemplateCollection":
        """Build a collection, choosing the primary template.

        Raises ``ValueError`` if *templates* is empty.
        """
        if not templates:
            msg = "A route template collection needs at least one template."
            raise ValueError(msg)
        # min() keeps the first of equal keys, so ties go to the earliest registration
        primary = min(templates, key=lambda t: (t.parameter_count, len(t.pattern)))
        return cls(primary_route=primary.pattern, all_routes=templates)
