"""Tests for wayfinder.errors — exception hierarchy and diagnostics."""

from wayfinder.errors import (
    ConfigurationError,
    DuplicateRegistration,
    MalformedTemplate,
    RouteNotFound,
    WayfinderError,
    describe_target,
)


class SampleViewModel:
    pass


class TestHierarchy:
    def test_configuration_error(self) -> None:
        assert issubclass(ConfigurationError, WayfinderError)

    def test_malformed_template(self) -> None:
        assert issubclass(MalformedTemplate, ConfigurationError)

    def test_route_not_found(self) -> None:
        assert issubclass(RouteNotFound, WayfinderError)
        assert not issubclass(RouteNotFound, ConfigurationError)


class TestMessages:
    def test_route_not_found_for_class(self) -> None:
        exc = RouteNotFound(SampleViewModel)
        assert exc.target is SampleViewModel
        assert str(exc).startswith("No route registered for view model ")
        assert str(exc).endswith("SampleViewModel")

    def test_route_not_found_for_key(self) -> None:
        assert str(RouteNotFound("Settings")) == "No route registered for key 'Settings'"

    def test_malformed_template_without_owner(self) -> None:
        exc = MalformedTemplate("/{*a}/{b}", "a catch-all parameter must be the last parameter")
        assert str(exc) == "Malformed route template '/{*a}/{b}': a catch-all parameter must be the last parameter"
        assert exc.owner is None

    def test_malformed_template_with_owner(self) -> None:
        exc = MalformedTemplate("/{*a}/{b}", "bad", owner="Files")
        assert str(exc) == "Malformed route template '/{*a}/{b}' registered for key 'Files': bad"

    def test_duplicate_registration(self) -> None:
        dup = DuplicateRegistration(target="Dup", existing="/a", ignored="/b")
        assert str(dup) == "Duplicate registration for key 'Dup': kept '/a', ignored '/b'"


class TestDescribeTarget:
    def test_class(self) -> None:
        assert describe_target(SampleViewModel) == f"view model {__name__}.SampleViewModel"

    def test_key(self) -> None:
        assert describe_target(42) == "key 42"
