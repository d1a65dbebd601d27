"""Tests for roost.routing.loader: importing route modules from a directory."""

from pathlib import Path

import pytest

from roost.errors import ConfigurationError
from roost.routing.loader import discover_route_files, load_route_modules
from roost.routing.table import RouteTable

ROUTE_MODULE = '''
def respond(request, response, services):
    return {name!r}

routes = {{
    {key!r}: {{"respond": respond}},
}}
'''


def _write_route(path: Path, key: str, name: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(ROUTE_MODULE.format(key=key, name=name), encoding="utf-8")


class TestDiscoverRouteFiles:
    def test_recursive_sorted(self, tmp_path: Path) -> None:
        _write_route(tmp_path / "b.py", "GET /b", "b")
        _write_route(tmp_path / "a.py", "GET /a", "a")
        _write_route(tmp_path / "nested" / "c.py", "GET /c", "c")

        names = [p.relative_to(tmp_path.resolve()).as_posix() for p in discover_route_files(tmp_path)]
        assert names == ["a.py", "b.py", "nested/c.py"]

    def test_skips_private_and_non_python(self, tmp_path: Path) -> None:
        _write_route(tmp_path / "a.py", "GET /a", "a")
        _write_route(tmp_path / "_helpers.py", "GET /h", "h")
        _write_route(tmp_path / "_private" / "x.py", "GET /x", "x")
        (tmp_path / "notes.txt").write_text("not python", encoding="utf-8")
        (tmp_path / ".hidden").mkdir()

        assert [p.name for p in discover_route_files(tmp_path)] == ["a.py"]

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Routes directory not found"):
            discover_route_files(tmp_path / "nope")


class TestLoadRouteModules:
    def test_collects_mappings(self, tmp_path: Path) -> None:
        _write_route(tmp_path / "a.py", "GET /a", "a")
        _write_route(tmp_path / "sub" / "b.py", "POST /b", "b")

        mappings = load_route_modules(tmp_path)

        assert [list(m) for m in mappings] == [["GET /a"], ["POST /b"]]
        assert mappings[0]["GET /a"]["respond"](None, None, None) == "a"

    def test_module_without_routes_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "util.py").write_text("VALUE = 1\n", encoding="utf-8")
        assert load_route_modules(tmp_path) == []

    def test_non_mapping_routes_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "bad.py").write_text("routes = ['GET /a']\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            load_route_modules(tmp_path)

    def test_custom_attribute(self, tmp_path: Path) -> None:
        (tmp_path / "api.py").write_text(
            "endpoints = {'GET /x': {'respond': lambda q, r, s: 1}}\n", encoding="utf-8"
        )
        assert load_route_modules(tmp_path) == []
        assert list(load_route_modules(tmp_path, attribute="endpoints")[0]) == ["GET /x"]

    def test_import_errors_propagate(self, tmp_path: Path) -> None:
        (tmp_path / "broken.py").write_text("raise RuntimeError('boom')\n", encoding="utf-8")
        with pytest.raises(RuntimeError, match="boom"):
            load_route_modules(tmp_path)

    def test_later_file_wins_on_collision(self, tmp_path: Path) -> None:
        _write_route(tmp_path / "a.py", "GET /same", "from-a")
        _write_route(tmp_path / "b.py", "GET /same", "from-b")

        table = RouteTable.from_mappings(load_route_modules(tmp_path))
        entry = table.lookup("GET", "/same")
        assert entry is not None
        assert entry.route.respond(None, None, None) == "from-b"
