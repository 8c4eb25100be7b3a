"""Tests for wayfinder.cli — entrypoint, argument parsing, and subcommands."""

import sys
import types

import pytest

from wayfinder.cli import main
from wayfinder.routing.table import Registration, RouteTable


class PostViewModel:
    pass


@pytest.fixture
def _fake_routes_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with a route table on sys.modules."""
    mod = types.ModuleType("_fake_wayfinder_routes")
    mod.PostViewModel = PostViewModel  # type: ignore[attr-defined]
    mod.table = RouteTable(  # type: ignore[attr-defined]
        [
            Registration(("/posts", "/posts/{postId}"), view_model=PostViewModel),
            Registration(("/fu/bar/counter",), key="Counter"),
            Registration(("/admin/settings",), key="admin:settings"),
        ]
    )
    mod.empty = RouteTable([])  # type: ignore[attr-defined]
    mod.build = lambda: RouteTable([Registration(("/built",), key="Built")])  # type: ignore[attr-defined]
    mod.not_a_table = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_wayfinder_routes", mod)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0

    def test_resolve_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_routes_missing_table(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_resolve_missing_target(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "_fake_wayfinder_routes:table"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "wayfinder" in captured.out


@pytest.mark.usefixtures("_fake_routes_module")
class TestRoutesCommand:
    def test_lists_routes(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_wayfinder_routes:table"])
        out = capsys.readouterr().out
        assert out.splitlines()[0].split() == ["TARGET", "PRIMARY", "TEMPLATES"]
        assert "PostViewModel" in out
        assert "/posts, /posts/{postId}" in out
        assert "key 'Counter'" in out

    def test_default_attribute(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_wayfinder_routes"])
        assert "/fu/bar/counter" in capsys.readouterr().out

    def test_factory(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_wayfinder_routes:build"])
        assert "/built" in capsys.readouterr().out

    def test_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_wayfinder_routes:empty"])
        assert "No routes registered." in capsys.readouterr().out

    def test_wrong_type(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_fake_wayfinder_routes:not_a_table"])
        assert exc_info.value.code == 1
        assert "not a wayfinder RouteTable" in capsys.readouterr().err

    def test_missing_module(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "nonexistent_module_xyz:table"])
        assert exc_info.value.code == 1


@pytest.mark.usefixtures("_fake_routes_module")
class TestResolveCommand:
    def test_key(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "_fake_wayfinder_routes:table", "Counter", "--base-uri", "https://host/fu/bar/"])
        assert capsys.readouterr().out.strip() == "counter"

    def test_view_model_with_parameters(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "_fake_wayfinder_routes:table", "_fake_wayfinder_routes:PostViewModel", "7?tab=comments"])
        assert capsys.readouterr().out.strip() == "posts/7?tab=comments"

    def test_base_path(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "_fake_wayfinder_routes:table", "Counter", "--base-path", "/fu/bar"])
        assert capsys.readouterr().out.strip() == "counter"

    def test_unknown_key(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "_fake_wayfinder_routes:table", "Missing"])
        assert exc_info.value.code == 1
        assert "No route registered for key 'Missing'" in capsys.readouterr().err

    def test_key_containing_colon(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "_fake_wayfinder_routes:table", "admin:settings", "--key"])
        assert capsys.readouterr().out.strip() == "admin/settings"

    def test_key_with_path_values(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "_fake_wayfinder_routes:table", "Counter", "users/7", "--base-uri", "https://host/fu/bar"])
        assert capsys.readouterr().out.strip() == "counter/users/7"

    def test_target_not_a_class(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "_fake_wayfinder_routes:table", "_fake_wayfinder_routes:not_a_table"])
        assert exc_info.value.code == 1
        assert "not a view-model class" in capsys.readouterr().err
