import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from sccscope.runner import SccRunner
from sccscope.types import Algorithm, Graph, SccRun
from sccscope.utils.core import get_graph_payloads

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DemoGraph:
    """A graph plus the layout metadata a viewer needs to draw it."""

    name: str
    graph: Graph
    positions: tuple[tuple[float, float], ...] = field(default=())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], default_name: str = "") -> "DemoGraph":
        graph = Graph.from_dict(data)

        raw_positions = data.get("positions", ())
        if not isinstance(raw_positions, list | tuple):
            raise ValueError("'positions' must be a list of [x, y] pairs.")

        positions = []
        for position in raw_positions:
            if not isinstance(position, list | tuple) or len(position) != 2:
                raise ValueError(
                    f"Node position must be an [x, y] pair, got {position!r}."
                )
            positions.append(tuple(position))

        if positions and len(positions) != graph.n:
            raise ValueError(
                f"Expected {graph.n} node positions, got {len(positions)}."
            )

        name = data.get("name", default_name)
        if not isinstance(name, str):
            raise ValueError(f"Graph name must be a string, got {name!r}.")

        return cls(
            name=name,
            graph=graph,
            positions=tuple(positions),  # type: ignore[arg-type]
        )


BUILTIN_GRAPHS: tuple[DemoGraph, ...] = (
    DemoGraph(
        name="Triangle",
        graph=Graph([[1], [2], [0]]),
        positions=((200, 150), (350, 150), (275, 300)),
    ),
    DemoGraph(
        name="Tail into cycle",
        graph=Graph([[1], [2], [3], [1]]),
        positions=((150, 200), (300, 100), (450, 200), (300, 300)),
    ),
    DemoGraph(
        name="Two disjoint cycles",
        graph=Graph([[1], [2], [0], [4], [5], [3]]),
        positions=(
            (200, 150),
            (300, 100),
            (400, 150),
            (200, 300),
            (300, 350),
            (400, 300),
        ),
    ),
    DemoGraph(
        name="Cycle with exit",
        graph=Graph([[1], [2], [3, 4], [1], []]),
        positions=((150, 150), (300, 80), (450, 150), (300, 220), (550, 300)),
    ),
    DemoGraph(
        name="Chained cycles",
        graph=Graph([[1], [2], [0, 3], [4], [5], [3]]),
        positions=(
            (100, 100),
            (200, 50),
            (300, 100),
            (300, 250),
            (180, 320),
            (420, 320),
        ),
    ),
)


def load_demo_graphs() -> list[DemoGraph]:
    """Returns the graphs from ``SCCSCOPE_GRAPHS``, or the built-in ones."""
    payloads = get_graph_payloads()
    if payloads is None:
        return list(BUILTIN_GRAPHS)

    graphs = [
        DemoGraph.from_dict(payload, default_name=f"Graph {i + 1}")
        for i, payload in enumerate(payloads)
    ]
    if not graphs:
        raise ValueError("SCCSCOPE_GRAPHS must contain at least one graph.")
    return graphs


class Explorer:
    """
    Tracks which graph and algorithm are selected, and recomputes the SCCs
    whenever either one changes. The previous run is discarded, never merged.
    """

    def __init__(
        self,
        graphs: Sequence[DemoGraph],
        algorithm: Algorithm | str = Algorithm.KOSARAJU,
        runner: SccRunner | None = None,
        index: int = 0,
    ):
        if not graphs:
            raise ValueError("Explorer needs at least one graph.")

        self.graphs = list(graphs)
        self.algorithm = Algorithm.parse(algorithm)
        self.runner = runner or SccRunner()
        self.index = self._check_index(index)
        self.run: SccRun = self.recompute()

    @property
    def current(self) -> DemoGraph:
        return self.graphs[self.index]

    def recompute(self) -> SccRun:
        self.run = self.runner.run(self.current.graph, self.algorithm)
        logger.info(
            f"{self.current.name}: {len(self.run.result)} components with "
            f"{self.algorithm.label} algorithm ({self.run.elapsed_ms:.3f} ms)"
        )
        return self.run

    def toggle_algorithm(self) -> SccRun:
        self.algorithm = self.algorithm.toggled()
        return self.recompute()

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self.graphs):
            raise IndexError(
                f"Graph {index + 1} does not exist (there are {len(self.graphs)})."
            )
        return index

    def select_graph(self, index: int) -> SccRun:
        self.index = self._check_index(index)
        return self.recompute()

    def next_graph(self) -> SccRun:
        return self.select_graph((self.index + 1) % len(self.graphs))
