import logging
import time

from sccscope.graphs import group_indices, kosaraju_scc, tarjan_scc
from sccscope.types import Algorithm, Graph, SccResult, SccRun

logger = logging.getLogger(__name__)


class SccRunner:
    """
    Runs one SCC algorithm over a graph and times it.

    Every call builds its result from scratch. Nothing from a previous run is
    kept on the runner, so Tarjan diagnostics never leak into a Kosaraju
    result.
    """

    clock = staticmethod(time.perf_counter)

    def run(self, graph: Graph, algorithm: Algorithm | str) -> SccRun:
        algorithm = Algorithm.parse(algorithm)

        logger.debug(f"Running {algorithm.label} algorithm on {graph.n} nodes")

        started = self.clock()
        if algorithm is Algorithm.TARJAN:
            comps, diagnostics = tarjan_scc(graph)
        else:
            comps, diagnostics = kosaraju_scc(graph), None
        elapsed_ms = (self.clock() - started) * 1000.0

        result = SccResult(
            algorithm=algorithm,
            components=tuple(comps),
            groups=group_indices(graph.n, comps),
            diagnostics=diagnostics,
        )

        logger.debug(
            f"{algorithm.label} found {len(result)} components in {elapsed_ms:.3f} ms"
        )

        return SccRun(graph=graph, result=result, elapsed_ms=max(elapsed_ms, 0.0))


def run_scc(graph: Graph, algorithm: Algorithm | str) -> SccRun:
    return SccRunner().run(graph, algorithm)
