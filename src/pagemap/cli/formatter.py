# src/pagemap/cli/formatter.py
from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from pagemap.core.sitemap import Sitemap
from pagemap.parsing.context import LoaderContext

console = Console()


class PageMapFormatter:
    """
    Renders loader output for the terminal: the text report, a per-source
    diagnostics table and the exported tree.
    """

    def show_report(self, report: str, failed: bool):
        border = "red" if failed else "green"
        console.print(Panel(report.rstrip(), title="Sitemap Report", border_style=border))

    def print_diagnostics_table(self, contexts: List[LoaderContext]):
        table = Table(title="PageMap Diagnostics", show_header=True, header_style="bold magenta")
        table.add_column("Source", style="cyan")
        table.add_column("Errors", justify="right")
        table.add_column("Warnings", justify="right")
        table.add_column("Result", justify="center")

        for c in contexts:
            source = str(c.source) if c.source else "<text>"
            if c.load_failure:
                table.add_row(source, "-", "-", "[bold red]UNREADABLE[/bold red]")
                continue
            errors = c.error_sum()
            status = "[green]PASSED[/green]" if errors == 0 else "[red]FAILED[/red]"
            table.add_row(source, str(errors), str(c.warning_sum()), status)

        console.print(table)

    def show_tree(self, yaml_text: str, sitemap: Sitemap):
        syntax = Syntax(yaml_text, "yaml", theme="monokai", line_numbers=False)
        console.print(Panel(syntax, title=f"Sitemap: {sitemap.node_count} pages", border_style="cyan"))
