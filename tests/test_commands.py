import json
import logging
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError


def run_command(*args, **kwargs) -> str:
    out = StringIO()
    call_command(*args, stdout=out, **kwargs)
    return out.getvalue()


class TestSccCommand:
    def test_default_view(self):
        output = run_command("scc")

        assert "SCCSCOPE v" in output
        assert "Triangle" in output
        assert "Algorithm: Kosaraju's    Graph: 1/5" in output
        assert "Time:" in output
        assert "SCC 0: {0, 1, 2}" in output

    def test_algorithm_and_graph(self):
        output = run_command("scc", "--algorithm", "tarjan", "--graph", "4")

        assert "Algorithm: Tarjan's    Graph: 4/5" in output
        assert "(disc,low)" in output
        assert "SCC 0: {4}" in output

    def test_default_algorithm_setting(self, settings):
        settings.SCCSCOPE_DEFAULT_ALGORITHM = "tarjan"

        output = run_command("scc")

        assert "Algorithm: Tarjan's" in output

    def test_unknown_graph(self):
        with pytest.raises(CommandError):
            run_command("scc", "--graph", "9")

    def test_graph_file(self, tmp_path):
        path = tmp_path / "pair.json"
        path.write_text(json.dumps({"nodes": 3, "edges": [[0, 1], [1, 0]]}))

        output = run_command("scc", "--file", str(path))

        assert "pair" in output
        assert "Graph: 1/1" in output
        assert "SCC 0: {2}" in output
        assert "SCC 1: {0, 1}" in output

    def test_malformed_graph_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text(json.dumps({"adjacency": [[5]]}))

        with pytest.raises(CommandError):
            run_command("scc", "--file", str(path))

    def test_unreadable_graph_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(CommandError):
            run_command("scc", "--file", str(path))

        with pytest.raises(CommandError):
            run_command("scc", "--file", str(tmp_path / "missing.json"))

    @pytest.mark.parametrize(
        "payload",
        [
            {"adjacency": [1, 0]},
            {"nodes": "3"},
            {"adjacency": [[1], [0]], "positions": [[0, 0], 5]},
            7,
        ],
    )
    def test_badly_shaped_graph_file(self, tmp_path, payload):
        path = tmp_path / "shape.json"
        path.write_text(json.dumps(payload))

        with pytest.raises(CommandError):
            run_command("scc", "--file", str(path))

    def test_starting_graph_is_the_only_one_computed(self, caplog):
        with caplog.at_level(logging.INFO, logger="sccscope.demos"):
            output = run_command("scc", "--graph", "3")

        assert "Graph: 3/5" in output
        computed = [r.getMessage() for r in caplog.records]
        assert len(computed) == 1
        assert computed[0].startswith("Two disjoint cycles:")

    def test_interactive(self, monkeypatch):
        inputs = iter(["a", "n", "x", "q"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))

        output = run_command("scc", "--interactive")

        assert "Algorithm: Kosaraju's    Graph: 1/5" in output
        assert "Algorithm: Tarjan's    Graph: 1/5" in output
        assert "Algorithm: Tarjan's    Graph: 2/5" in output
        assert "Unknown command: x" in output

    def test_interactive_stops_at_end_of_input(self, monkeypatch):
        def no_input(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", no_input)

        output = run_command("scc", "--interactive")

        assert output.count("Algorithm:") == 1


class TestSccCompareCommand:
    def test_compare(self):
        output = run_command("scc_compare")

        assert "Two disjoint cycles" in output
        assert "Compared 5 graphs" in output
        assert "agree on every graph" in output
