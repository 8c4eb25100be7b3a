"""Tests for wayfinder.routing.template — RouteParameter, RouteTemplate, RouteTemplateCollection."""

import pytest

from wayfinder.routing.parser import parse_template
from wayfinder.routing.template import RouteParameter, RouteTemplate, RouteTemplateCollection


class TestRouteParameter:
    def test_defaults(self) -> None:
        param = RouteParameter(name="id")
        assert param.name == "id"
        assert param.is_optional is False
        assert param.is_catch_all is False
        assert param.constraint is None

    def test_frozen(self) -> None:
        param = RouteParameter(name="id")
        with pytest.raises(AttributeError):
            param.name = "other"  # type: ignore[misc]


class TestRouteTemplate:
    def test_counts(self) -> None:
        template = RouteTemplate(
            pattern="/a/{x}/{y?}/{*rest}",
            parameters=(
                RouteParameter("x"),
                RouteParameter("y", is_optional=True),
                RouteParameter("rest", is_catch_all=True),
            ),
        )
        assert template.parameter_count == 3
        assert template.required_parameter_count == 2
        assert template.optional_parameter_count == 1
        assert template.has_catch_all is True

    def test_no_parameters(self) -> None:
        template = RouteTemplate(pattern="/counter")
        assert template.parameter_count == 0
        assert template.required_parameter_count == 0
        assert template.has_catch_all is False

    def test_equality(self) -> None:
        assert parse_template("/users/{id}") == parse_template("/users/{id}")


class TestRouteTemplateCollection:
    def test_primary_fewest_parameters(self) -> None:
        templates = (parse_template("/test/{echo}"), parse_template("/test"))
        collection = RouteTemplateCollection.from_templates(templates)
        assert collection.primary_route == "/test"
        assert collection.primary is templates[1]

    def test_primary_shortest_pattern_on_equal_parameters(self) -> None:
        templates = (parse_template("/longer-route"), parse_template("/short"))
        collection = RouteTemplateCollection.from_templates(templates)
        assert collection.primary_route == "/short"

    def test_primary_first_registered_on_full_tie(self) -> None:
        templates = (parse_template("/aaa"), parse_template("/bbb"))
        collection = RouteTemplateCollection.from_templates(templates)
        assert collection.primary_route == "/aaa"

    def test_keeps_declaration_order(self) -> None:
        templates = (parse_template("/b/{x}"), parse_template("/a"))
        collection = RouteTemplateCollection.from_templates(templates)
        assert [t.pattern for t in collection.all_routes] == ["/b/{x}", "/a"]

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one"):
            RouteTemplateCollection.from_templates(())

    def test_primary_must_be_in_all_routes(self) -> None:
        with pytest.raises(ValueError, match="not one of"):
            RouteTemplateCollection(primary_route="/missing", all_routes=(parse_template("/a"),))
