#!/usr/bin/env python3
"""
PAGEMAP CLI - Sitemap Checker
-----------------------------
Command line front end for the loader:

    pagemap check sitemap.txt --module myapp.views --module myapp.i18n
    pagemap check pagemap.yaml
    pagemap export pagemap.yaml
    pagemap check sitemap.txt --module views --path ./myapp

A '.yaml'/'.yml' path is read as loader configuration; anything else is
treated as a single sitemap source. Host modules must be importable:
installed, on PYTHONPATH, or in a directory given with --path.

Author: PageMap Team
Date: 2026-10-18
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel

from pagemap.cli.formatter import PageMapFormatter
from pagemap.core.config import ConfigError, LoaderConfig, load_config
from pagemap.core.engine import SitemapLoader
from pagemap.registry.capabilities import CurrentLocale
from pagemap.registry.catalog import TypeCatalog
from pagemap.report.exporter import SitemapExporter

console = Console()

CONFIG_SUFFIXES = (".yaml", ".yml")


class PageMapCLI:
    """
    Translates user commands into SitemapLoader actions.
    """

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="pagemap",
            description="PageMap - site map definition loader and checker",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self.formatter = PageMapFormatter()
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("-v", "--version", action="version", version="pagemap v1.0.0")
        self.parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        for name, help_text in (("check", "Load a sitemap and report its diagnostics"),
                                ("export", "Load a sitemap and print its tree as YAML")):
            sub = subparsers.add_parser(name, help=help_text)
            sub.add_argument("path", help="Sitemap source file, or a pagemap YAML config")
            sub.add_argument("-m", "--module", action="append", default=[],
                             help="Module whose classes are registered in the type catalog (repeatable)")
            sub.add_argument("--locale", default="en", help="Locale used for label translation (default: en)")
            sub.add_argument("-p", "--path", action="append", default=[], dest="paths",
                             help="Directory prepended to sys.path before importing modules (repeatable)")

    def _build_loader(self, args: argparse.Namespace) -> SitemapLoader:
        path = Path(args.path)
        if path.suffix.lower() in CONFIG_SUFFIXES:
            config = load_config(path)
        else:
            config = LoaderConfig(sources={path.stem: path.resolve()})

        for extra in reversed(args.paths):
            if extra not in sys.path:
                sys.path.insert(0, extra)
        catalog = TypeCatalog().import_modules(config.modules + args.module)
        return SitemapLoader(catalog, config, current_locale=CurrentLocale(args.locale))

    def _run(self, args: argparse.Namespace) -> int:
        try:
            loader = self._build_loader(args)
        except (ConfigError, ImportError) as e:
            console.print(f"[bold red]Error:[/bold red] {e}")
            return 2

        loader.load()
        failed = any(c.load_failure or c.error_sum() > 0 for c in loader.contexts)

        if args.command == "check":
            self.formatter.show_report(loader.report, failed)
            self.formatter.print_diagnostics_table(loader.contexts)
        else:
            self.formatter.show_tree(SitemapExporter().export(loader.sitemap), loader.sitemap)

        summary = loader.generate_summary()
        console.print(Panel(
            f"Sources:    {summary['sources']} ({summary['failed_sources']} unreadable)\n"
            f"Pages:      {summary['pages']}\n"
            f"Redirects:  {summary['redirects']}\n"
            f"Errors:     [red]{summary['errors']}[/red]\n"
            f"Warnings:   [yellow]{summary['warnings']}[/yellow]",
            title="Summary", border_style="dim"
        ))
        return 1 if failed else 0

    def run(self, argv: Optional[List[str]] = None) -> int:
        args = self.parser.parse_args(argv)
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
        if args.command is None:
            self.parser.print_help()
            return 0
        return self._run(args)


def main():
    try:
        sys.exit(PageMapCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
