"""
Tests for the route CLI script.
"""

import importlib.util

import pytest


@pytest.fixture
def route(project_root):
    """Load scripts/route.py as a module."""
    spec = importlib.util.spec_from_file_location("route", project_root / "scripts" / "route.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestBuildGraph:
    """Test graph construction from arguments."""

    def test_edges_create_vertices(self, route):
        """Vertices named by edges are created once."""
        graph = route.build_graph([["A", "B"], ["B", "C", "2.5"]], [])
        assert list(graph) == ["A", "B", "C"]
        assert graph.weight_of("A", "B") == 1.0
        assert graph.weight_of("B", "C") == 2.5

    def test_isolated_vertices(self, route):
        """--vertex adds an unconnected vertex."""
        graph = route.build_graph([["X", "Y"]], ["Z"])
        assert graph.degree("Z") == 0
        assert graph.edge_count == 1

    def test_bad_edge_arguments(self, route):
        """An edge needs two or three values."""
        with pytest.raises(ValueError):
            route.build_graph([["A"]], [])


class TestMain:
    """Test the end-to-end command."""

    def test_prints_both_paths(self, route, capsys):
        """Weighted and unweighted routes are printed."""
        argv = [
            "--edge", "A", "B", "1",
            "--edge", "A", "C", "2",
            "--edge", "B", "D", "5",
            "--edge", "C", "D", "1",
            "--origin", "A",
            "--destination", "D",
        ]
        assert route.main(argv) == 0

        out = capsys.readouterr().out
        assert "Breadth-first    A B C D" in out
        assert "A -> C -> D  [2 edges, weight 3]" in out

    def test_no_path(self, route, capsys):
        """Disconnected endpoints print a placeholder, not an error."""
        argv = ["--edge", "X", "Y", "--vertex", "Z", "-o", "X", "-d", "Z"]
        assert route.main(argv) == 0
        assert "(no path)" in capsys.readouterr().out

    def test_unknown_origin(self, route, capsys):
        """An unknown origin is reported on stderr with a non-zero exit."""
        argv = ["--edge", "A", "B", "-o", "Q", "-d", "A"]
        assert route.main(argv) == 1
        assert "Error:" in capsys.readouterr().err

    def test_self_loop(self, route, capsys):
        """A self-loop edge is rejected."""
        argv = ["--edge", "A", "A", "-o", "A", "-d", "A"]
        assert route.main(argv) == 1
        assert "itself" in capsys.readouterr().err
