import json
import logging
from pathlib import Path
from typing import Any

from django.core.management.base import BaseCommand, CommandError, CommandParser
from rich.console import Console

import sccscope
from sccscope.demos import DemoGraph, Explorer, load_demo_graphs
from sccscope.rendering import render_run
from sccscope.types import Algorithm, SccError
from sccscope.utils.core import get_default_algorithm, get_palette

PROMPT = "[a] toggle algorithm, [n] next graph, [q] quit: "


class Command(BaseCommand):
    help = "Compute and display the strongly connected components of a graph"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "--graph",
            type=int,
            default=1,
            help="Number of the demo graph to start with (1-based)",
        )
        parser.add_argument(
            "--algorithm",
            choices=[algorithm.value for algorithm in Algorithm],
            help="Algorithm to start with (defaults to SCCSCOPE_DEFAULT_ALGORITHM)",
        )
        parser.add_argument(
            "--file",
            help="JSON file with a graph to use instead of the demo graphs",
        )
        parser.add_argument(
            "--interactive",
            action="store_true",
            help="Keep prompting to toggle the algorithm or switch graphs",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Enable verbose logging output",
        )

    def handle(self, *args: Any, **options: Any) -> None:
        if options["verbose"]:
            # Configure logging to output to console
            logging.basicConfig(
                level=logging.INFO,
                format="%(levelname)s: %(message)s",
                force=True,
            )

        header = f"SCCSCOPE v{sccscope.__version__}"
        self.stdout.write(header)
        self.stdout.write("─" * len(header))
        self.stdout.write("")

        try:
            graphs = self.load_graphs(options.get("file"))
            algorithm = options.get("algorithm") or get_default_algorithm()
            explorer = Explorer(graphs, algorithm, index=options["graph"] - 1)
        except (SccError, IndexError, ValueError) as e:
            raise CommandError(str(e)) from e

        console = Console(file=self.stdout)
        palette = get_palette()

        self.display(console, explorer, palette)

        if options["interactive"]:
            self.explore(console, explorer, palette)

    def load_graphs(self, filename: str | None) -> list[DemoGraph]:
        if filename is None:
            return load_demo_graphs()

        path = Path(filename)
        try:
            data = json.loads(path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise CommandError(f"Could not read graph from {filename}: {e}") from e

        return [DemoGraph.from_dict(data, default_name=path.stem)]

    def display(self, console: Console, explorer: Explorer, palette: list[str]) -> None:
        console.print(
            render_run(
                explorer.run,
                palette,
                title=explorer.current.name,
                position=explorer.index + 1,
                total=len(explorer.graphs),
            )
        )
        console.print()

    def explore(self, console: Console, explorer: Explorer, palette: list[str]) -> None:
        while True:
            try:
                command = input(PROMPT).strip().lower()
            except EOFError:
                break

            if command == "q":
                break
            elif command == "a":
                explorer.toggle_algorithm()
            elif command in ("", "n"):
                explorer.next_graph()
            else:
                self.stdout.write(f"Unknown command: {command}")
                continue

            self.display(console, explorer, palette)
