#!/usr/bin/env python3
"""
PAGEMAP ENGINE - The Loader
---------------------------
The SitemapLoader loads every configured sitemap source into one shared
Sitemap, sequentially, and appends a report segment for each source to
a cumulative report. An unreadable source is logged and skipped; the
remaining sources are still loaded.

Author: PageMap Team
Date: 2026-10-18
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from pagemap.core.config import LoaderConfig
from pagemap.core.sitemap import Sitemap, SitemapError
from pagemap.parsing.context import LoaderContext
from pagemap.parsing.pipeline import SitemapPipeline
from pagemap.registry.capabilities import (
    Collator,
    CurrentLocale,
    Translate,
    default_collator,
    default_translate,
)
from pagemap.registry.catalog import TypeCatalog
from pagemap.report.reporter import REPORT_FOOTER, REPORT_HEADER, ReportBuilder

logger = logging.getLogger("pagemap.engine")


class SitemapLoader:
    """
    Owns the Sitemap and the pipeline that fills it. Holds the context of
    the last parse so that its diagnostics and report can be inspected.
    """

    def __init__(self, catalog: TypeCatalog, config: Optional[LoaderConfig] = None,
                 sitemap: Optional[Sitemap] = None,
                 translate: Translate = default_translate,
                 current_locale: Optional[CurrentLocale] = None,
                 collator: Collator = default_collator):
        self.config = config or LoaderConfig()
        self.sitemap = sitemap if sitemap is not None else Sitemap()
        self.pipeline = SitemapPipeline(
            catalog, self.sitemap, translate, current_locale, collator,
            segment_separator=self.config.segment_separator,
            indent_marker=self.config.indent_marker,
            view_suffix=self.config.view_suffix,
        )
        self.reporter = ReportBuilder(self.sitemap)
        self.context: Optional[LoaderContext] = None
        self.contexts: List[LoaderContext] = []
        self._report: List[str] = []

    @property
    def sources(self) -> Dict[str, Path]:
        return dict(self.config.sources)

    def parse(self, file: Path) -> LoaderContext:
        """
        Reads and parses one sitemap file. I/O and decoding failures are
        logged and recorded on the returned context rather than raised.
        """
        file = Path(file)
        logger.info(f"Loading sitemap from {file.resolve()}")
        try:
            text = file.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Unable to load site map {file}: {e}")
            context = LoaderContext(source=file, load_failure=str(e), parsed=True)
        else:
            context = self.pipeline.run(text, source_path=file)

        self.context = context
        self.contexts.append(context)
        return context

    def parse_text(self, text: str) -> LoaderContext:
        context = self.pipeline.run(text)
        self.context = context
        self.contexts.append(context)
        return context

    def build_report(self, context: Optional[LoaderContext] = None) -> str:
        """
        Renders the report segment for `context` (default: the last parse).
        Only load() adds segments to the cumulative report.
        """
        context = context or self.context
        if context is None:
            raise SitemapError("Sitemap file must be parsed before report is run")
        return self.reporter.build(context)

    def load(self) -> bool:
        """
        Loads every configured source in order. Returns False when there
        is nothing to load.
        """
        if not self.config.sources:
            logger.info("No file based sources for the Sitemap identified, nothing to load")
            return False

        self._report.append(REPORT_HEADER)
        for name, path in self.config.sources.items():
            logger.debug(f"Loading sitemap source '{name}'")
            self._report.append(self.build_report(self.parse(path)))
        self._report.append(REPORT_FOOTER)
        return True

    @property
    def report(self) -> str:
        return "".join(self._report)

    def generate_summary(self) -> Dict[str, int]:
        return {
            "sources": len(self.contexts),
            "failed_sources": sum(1 for c in self.contexts if c.load_failure),
            "pages": self.sitemap.node_count,
            "redirects": len(self.sitemap.redirects),
            "errors": sum(c.error_sum() for c in self.contexts if not c.load_failure),
            "warnings": sum(c.warning_sum() for c in self.contexts),
        }
