import logging
from typing import Any

from django.core.management.base import BaseCommand, CommandError, CommandParser
from rich import box
from rich.console import Console
from rich.table import Table

from sccscope.operations import compare


class Command(BaseCommand):
    help = "Run Tarjan's and Kosaraju's algorithms on every graph and compare them"

    def add_arguments(self, parser: CommandParser) -> None:
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

        outcome = compare(verbose=options["verbose"])

        console = Console(file=self.stdout)
        table = Table(show_header=True, header_style="bold", box=box.SQUARE)
        table.add_column("Graph", style="cyan", no_wrap=True)
        table.add_column("SCCs", justify="right")
        table.add_column("Tarjan (ms)", justify="right")
        table.add_column("Kosaraju (ms)", justify="right")

        for name, timing in outcome.metadata["timings"].items():
            table.add_row(
                name,
                str(timing["components"]),
                f"{timing['tarjan']:.3f}",
                f"{timing['kosaraju']:.3f}",
            )

        console.print(table)

        for message in outcome.messages:
            self.stdout.write(message)

        if outcome.result == "failure":
            raise CommandError("Algorithms did not agree")
