from collections.abc import Sequence
from dataclasses import dataclass, field

from sccscope.types import Component, Graph, TarjanDiagnostics

UNVISITED = -1


@dataclass(slots=True)
class _Frame:
    node: int
    next_edge: int = 0


@dataclass
class _TarjanState:
    """Traversal state owned by a single Tarjan run."""

    graph: Graph
    discovery: list[int] = field(init=False)
    lowlink: list[int] = field(init=False)
    on_stack: list[bool] = field(init=False)
    stack: list[int] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)
    time: int = 0

    def __post_init__(self):
        n = self.graph.n
        self.discovery = [UNVISITED] * n
        self.lowlink = [UNVISITED] * n
        self.on_stack = [False] * n

    def enter(self, node: int) -> _Frame:
        self.discovery[node] = self.lowlink[node] = self.time
        self.time += 1
        self.stack.append(node)
        self.on_stack[node] = True
        return _Frame(node)

    def close(self, root: int) -> None:
        members = []
        while True:
            w = self.stack.pop()
            self.on_stack[w] = False
            members.append(w)
            if w == root:
                break
        self.components.append(frozenset(members))

    def strongconnect(self, root: int) -> None:
        frames = [self.enter(root)]

        while frames:
            frame = frames[-1]
            u = frame.node
            successors = self.graph.successors(u)

            if frame.next_edge < len(successors):
                v = successors[frame.next_edge]
                frame.next_edge += 1

                if self.discovery[v] == UNVISITED:
                    frames.append(self.enter(v))
                elif self.on_stack[v]:
                    self.lowlink[u] = min(self.lowlink[u], self.discovery[v])
                continue

            # All successors explored, u is finished
            frames.pop()
            if self.lowlink[u] == self.discovery[u]:
                self.close(u)

            if frames:
                parent = frames[-1].node
                self.lowlink[parent] = min(self.lowlink[parent], self.lowlink[u])


def tarjan_scc(graph: Graph) -> tuple[list[Component], TarjanDiagnostics]:
    """
    Tarjan's algorithm (O(V+E)) to compute strongly connected components.

    Returns:
      - comps: list of components, in the order their roots were finalized
      - diagnostics: the discovery time and low-link value of every node
    Notes:
      - Fresh explorations start from the lowest unvisited node index, and
        successors are visited in adjacency order.
    """
    state = _TarjanState(graph)

    # Cover disconnected graphs and isolated nodes
    for v in range(graph.n):
        if state.discovery[v] == UNVISITED:
            state.strongconnect(v)

    diagnostics = TarjanDiagnostics(
        discovery=tuple(state.discovery), lowlink=tuple(state.lowlink)
    )
    return state.components, diagnostics


def _explore(
    graph: Graph, root: int, visited: list[bool]
) -> tuple[list[int], list[int]]:
    """
    Depth-first search from ``root`` over nodes not yet in ``visited``.

    Returns the reached nodes in pre-order and in post-order (finish order).
    """
    preorder = [root]
    postorder = []
    visited[root] = True
    frames = [_Frame(root)]

    while frames:
        frame = frames[-1]
        successors = graph.successors(frame.node)

        if frame.next_edge < len(successors):
            v = successors[frame.next_edge]
            frame.next_edge += 1
            if not visited[v]:
                visited[v] = True
                preorder.append(v)
                frames.append(_Frame(v))
            continue

        frames.pop()
        postorder.append(frame.node)

    return preorder, postorder


def finish_order(graph: Graph) -> list[int]:
    """
    Returns every node in the order its DFS visit completed. The last
    element finished latest.
    """
    visited = [False] * graph.n
    order: list[int] = []
    for u in range(graph.n):
        if not visited[u]:
            _, finished = _explore(graph, u, visited)
            order.extend(finished)
    return order


def kosaraju_scc(graph: Graph) -> list[Component]:
    """
    Kosaraju's algorithm (O(V+E)) to compute strongly connected components.

    The first pass records finish order on ``graph``; the second pops nodes
    off that order (latest finish first) and collects everything reachable
    from each unvisited seed in the transposed graph.
    """
    stack = finish_order(graph)
    reverse = graph.transpose()

    visited = [False] * graph.n
    comps: list[Component] = []
    while stack:
        u = stack.pop()
        if not visited[u]:
            reached, _ = _explore(reverse, u, visited)
            comps.append(frozenset(reached))

    return comps


def group_indices(n: int, comps: Sequence[Component]) -> tuple[int, ...]:
    """Maps every node to the position of its component in ``comps``."""
    groups = [UNVISITED] * n
    for cid, comp in enumerate(comps):
        for v in comp:
            groups[v] = cid
    return tuple(groups)
