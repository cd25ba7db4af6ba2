import logging
from collections.abc import Sequence

from sccscope.demos import DemoGraph, load_demo_graphs
from sccscope.runner import SccRunner
from sccscope.types import Algorithm, Graph, OperationResult, SccResult

logger = logging.getLogger(__name__)


def is_partition(graph: Graph, result: SccResult) -> bool:
    """Checks that every node sits in exactly one non-empty component."""
    seen: set[int] = set()
    for component in result.components:
        if not component or seen & component:
            return False
        seen |= component
    return seen == set(range(graph.n))


def compare(
    graphs: Sequence[DemoGraph] | None = None, verbose: bool = False
) -> OperationResult:
    """Runs both algorithms on every graph and checks that they agree."""
    if verbose:
        logger.setLevel(logging.INFO)

    if graphs is None:
        graphs = load_demo_graphs()

    runner = SccRunner()

    if verbose:
        logger.info(f"Comparing algorithms on {len(graphs)} graphs")

    timings = {}
    failures = []
    for demo in graphs:
        tarjan = runner.run(demo.graph, Algorithm.TARJAN)
        kosaraju = runner.run(demo.graph, Algorithm.KOSARAJU)

        timings[demo.name] = {
            "components": len(tarjan.result),
            Algorithm.TARJAN.value: tarjan.elapsed_ms,
            Algorithm.KOSARAJU.value: kosaraju.elapsed_ms,
        }

        if not is_partition(demo.graph, tarjan.result):
            failures.append(f"{demo.name}: Tarjan's result is not a partition")
        if not is_partition(demo.graph, kosaraju.result):
            failures.append(f"{demo.name}: Kosaraju's result is not a partition")
        if tarjan.result.as_partition() != kosaraju.result.as_partition():
            failures.append(f"{demo.name}: algorithms disagree")

        if verbose:
            logger.info(
                f"{demo.name}: {len(tarjan.result)} components "
                f"(tarjan {tarjan.elapsed_ms:.3f} ms, "
                f"kosaraju {kosaraju.elapsed_ms:.3f} ms)"
            )

    for failure in failures:
        logger.error(failure)

    messages = [f"Compared {len(graphs)} graphs"]
    if failures:
        messages.extend(failures)
    else:
        messages.append("Tarjan's and Kosaraju's algorithms agree on every graph")

    return OperationResult(
        result="success" if not failures else "failure",
        messages=messages,
        metadata={"timings": timings},
    )
