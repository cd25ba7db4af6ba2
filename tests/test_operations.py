from sccscope.demos import BUILTIN_GRAPHS, DemoGraph
from sccscope.operations import compare
from sccscope.operations.compare import is_partition
from sccscope.types import Algorithm, Graph, SccResult


class TestCompare:
    def test_builtin_graphs_agree(self):
        outcome = compare()

        assert outcome.result == "success"
        assert outcome.messages[0] == "Compared 5 graphs"
        names = {demo.name for demo in BUILTIN_GRAPHS}
        assert set(outcome.metadata["timings"]) == names

        timing = outcome.metadata["timings"]["Two disjoint cycles"]
        assert timing["components"] == 2
        assert timing["tarjan"] >= 0
        assert timing["kosaraju"] >= 0

    def test_given_graphs(self):
        graphs = [DemoGraph(name="Loop", graph=Graph([[0]]))]

        outcome = compare(graphs, verbose=True)

        assert outcome.result == "success"
        assert outcome.metadata["timings"]["Loop"]["components"] == 1


class TestIsPartition:
    def result(self, components):
        return SccResult(
            algorithm=Algorithm.KOSARAJU,
            components=tuple(frozenset(c) for c in components),
            groups=(),
        )

    def test_valid(self):
        graph = Graph([[1], [0], []])

        assert is_partition(graph, self.result([[0, 1], [2]]))

    def test_missing_node(self):
        graph = Graph([[1], [0], []])

        assert not is_partition(graph, self.result([[0, 1]]))

    def test_overlap(self):
        graph = Graph([[1], [0], []])

        assert not is_partition(graph, self.result([[0, 1], [1, 2]]))

    def test_empty_component(self):
        graph = Graph([[]])

        assert not is_partition(graph, self.result([[0], []]))
