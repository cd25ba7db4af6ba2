from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal


# Exceptions
class SccError(Exception):
    pass


class MalformedGraphError(SccError, IndexError):
    pass


class InvalidAlgorithmError(SccError, ValueError):
    pass


def is_node_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class Graph:
    """
    A directed graph over the nodes ``0..n-1``.

    ``adjacency[u]`` holds the successors of ``u`` in insertion order. That
    order decides DFS visitation order, so it is kept exactly as given,
    parallel edges and self-loops included.
    """

    adjacency: tuple[tuple[int, ...], ...]

    def __post_init__(self):
        try:
            adjacency = tuple(tuple(successors) for successors in self.adjacency)
        except TypeError as err:
            raise MalformedGraphError(
                f"Adjacency must be a sequence of successor lists: {err}"
            ) from err
        n = len(adjacency)

        for u, successors in enumerate(adjacency):
            for v in successors:
                if not is_node_index(v) or not 0 <= v < n:
                    raise MalformedGraphError(
                        f"Edge {u} -> {v!r} points outside of the graph (n={n})."
                    )

        object.__setattr__(self, "adjacency", adjacency)

    @property
    def n(self) -> int:
        return len(self.adjacency)

    def __len__(self) -> int:
        return len(self.adjacency)

    def successors(self, node: int) -> tuple[int, ...]:
        return self.adjacency[node]

    def edges(self) -> Iterator[tuple[int, int]]:
        for u, successors in enumerate(self.adjacency):
            for v in successors:
                yield u, v

    def transpose(self) -> "Graph":
        """
        Returns a new graph with every edge reversed.
        """
        reverse: list[list[int]] = [[] for _ in range(self.n)]
        for u, v in self.edges():
            reverse[v].append(u)
        return Graph(reverse)

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[tuple[int, int]]) -> "Graph":
        if not is_node_index(n) or n < 0:
            raise MalformedGraphError(
                f"Node count must be a non-negative int, got {n!r}."
            )

        adjacency: list[list[int]] = [[] for _ in range(n)]
        for u, v in edges:
            if not is_node_index(u) or not 0 <= u < n:
                raise MalformedGraphError(
                    f"Edge {u} -> {v} starts outside of the graph (n={n})."
                )
            adjacency[u].append(v)
        return cls(adjacency)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Graph":
        """
        Builds a graph from either ``{"adjacency": [[...], ...]}`` or
        ``{"nodes": n, "edges": [[u, v], ...]}``.
        """
        if not isinstance(data, Mapping):
            raise ValueError(
                f"Graph data must be a mapping, got {type(data).__name__}."
            )

        if "adjacency" in data:
            return cls(data["adjacency"])

        if "nodes" in data:
            nodes = data["nodes"]
            if not is_node_index(nodes):
                raise ValueError(f"'nodes' must be an int, got {nodes!r}.")

            edges = data.get("edges", [])
            if not isinstance(edges, list | tuple) or not all(
                isinstance(edge, list | tuple) and len(edge) == 2 for edge in edges
            ):
                raise ValueError("'edges' must be a list of [source, target] pairs.")

            return cls.from_edges(nodes, [(u, v) for u, v in edges])

        raise ValueError("Graph data needs either 'adjacency' or 'nodes'.")

    def to_dict(self) -> dict[str, Any]:
        return {"adjacency": [list(successors) for successors in self.adjacency]}


class Algorithm(str, Enum):
    TARJAN = "tarjan"
    KOSARAJU = "kosaraju"

    @classmethod
    def parse(cls, value: "Algorithm | str") -> "Algorithm":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidAlgorithmError(
            f"Unknown algorithm {value!r}. "
            f"Choose one of: {', '.join(a.value for a in cls)}."
        )

    @property
    def label(self) -> str:
        return "Tarjan's" if self is Algorithm.TARJAN else "Kosaraju's"

    def toggled(self) -> "Algorithm":
        return Algorithm.KOSARAJU if self is Algorithm.TARJAN else Algorithm.TARJAN


@dataclass(frozen=True, slots=True)
class TarjanDiagnostics:
    discovery: tuple[int, ...]
    lowlink: tuple[int, ...]

    def label(self, node: int) -> str:
        return f"({self.discovery[node]},{self.lowlink[node]})"


Component = frozenset[int]


@dataclass(frozen=True, slots=True)
class SccResult:
    """
    The strongly connected components of one graph, in the order the
    algorithm produced them.

    ``groups[u]`` is the position of the component holding ``u``.
    ``diagnostics`` is only set for Tarjan runs.
    """

    algorithm: Algorithm
    components: tuple[Component, ...]
    groups: tuple[int, ...]
    diagnostics: TarjanDiagnostics | None = None

    def __len__(self) -> int:
        return len(self.components)

    def component_of(self, node: int) -> Component:
        return self.components[self.groups[node]]

    def as_partition(self) -> set[Component]:
        return set(self.components)


@dataclass(frozen=True, slots=True)
class SccRun:
    graph: Graph
    result: SccResult
    elapsed_ms: float


@dataclass
class OperationResult:
    result: Literal["success", "partial_success", "failure"]
    messages: list[str]
    metadata: dict[str, Any] = field(default_factory=dict)

