from collections.abc import Sequence

from rich import box
from rich.console import Group
from rich.table import Table
from rich.text import Text

from sccscope.types import SccRun


def node_style(group: int, palette: Sequence[str]) -> str:
    """Picks a colour for a group; the palette may be shorter than the groups."""
    return palette[group % len(palette)]


def status_text(
    run: SccRun, position: int | None = None, total: int | None = None
) -> Text:
    status = f"Algorithm: {run.result.algorithm.label}"
    if position is not None and total is not None:
        status += f"    Graph: {position}/{total}"
    return Text(status, style="yellow")


def time_text(run: SccRun) -> Text:
    return Text(f"Time: {run.elapsed_ms:.3f} ms", style="yellow")


def node_table(run: SccRun, palette: Sequence[str]) -> Table:
    result = run.result
    diagnostics = result.diagnostics

    table = Table(show_header=True, header_style="bold", box=box.SQUARE)
    table.add_column("Node", no_wrap=True)
    table.add_column("Group", justify="right")
    table.add_column("Successors", style="white")
    if diagnostics is not None:
        # Overlay values only exist right after a Tarjan run
        table.add_column("(disc,low)", style="cyan")

    for node in range(run.graph.n):
        group = result.groups[node]
        successors = ", ".join(str(v) for v in run.graph.successors(node))
        row = [
            Text(str(node), style=f"bold {node_style(group, palette)}"),
            str(group),
            successors or "[dim]None[/dim]",
        ]
        if diagnostics is not None:
            row.append(diagnostics.label(node))
        table.add_row(*row)

    return table


def component_lines(run: SccRun, palette: Sequence[str]) -> Text:
    text = Text()
    for group, component in enumerate(run.result.components):
        members = ", ".join(str(v) for v in sorted(component))
        text.append(f"SCC {group}: ", style="bold")
        text.append(f"{{{members}}}", style=node_style(group, palette))
        text.append("\n")
    text.rstrip()
    return text


def render_run(
    run: SccRun,
    palette: Sequence[str],
    *,
    title: str | None = None,
    position: int | None = None,
    total: int | None = None,
) -> Group:
    """Builds the full view of one run: status, timing, nodes, and components."""
    parts = []
    if title:
        parts.append(Text(title, style="bold"))
    parts.extend(
        [
            status_text(run, position, total),
            time_text(run),
            node_table(run, palette),
            component_lines(run, palette),
        ]
    )
    return Group(*parts)
