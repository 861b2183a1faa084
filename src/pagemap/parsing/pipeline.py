#!/usr/bin/env python3
"""
PAGEMAP PIPELINE - The Section Conductor
----------------------------------------
Runs the processors of a sitemap source in their fixed order:

    classify -> options -> map -> standard pages -> label key check -> redirects

Options go first because the map section depends on them (label key class
and view suffix). Redirects depend on nothing and go last. If a required
section is missing none of the processors run, but the error tally is
still written to the sitemap.

Author: PageMap Team
Date: 2026-10-18
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Union

from pagemap.core.sitemap import Sitemap
from pagemap.parsing.classifier import SectionClassifier
from pagemap.parsing.context import LoaderContext, SectionName
from pagemap.parsing.map_reader import MapLineReader, URITracker
from pagemap.parsing.options import OptionsProcessor
from pagemap.parsing.page_mapping import PageMappingDeconstructor
from pagemap.parsing.redirects import RedirectProcessor
from pagemap.parsing.resolvers import LabelKeyResolver, ViewResolver
from pagemap.registry.capabilities import (
    Collator,
    CurrentLocale,
    Translate,
    default_collator,
    default_translate,
)
from pagemap.registry.catalog import TypeCatalog

logger = logging.getLogger("pagemap.pipeline")


class SitemapPipeline:
    """
    Coordinates the section processors over one shared Sitemap. Every
    call to run() starts from a fresh LoaderContext.
    """

    def __init__(self, catalog: TypeCatalog, sitemap: Optional[Sitemap] = None,
                 translate: Translate = default_translate,
                 current_locale: Optional[CurrentLocale] = None,
                 collator: Collator = default_collator,
                 segment_separator: str = ";", indent_marker: str = "-",
                 view_suffix: str = "View"):
        self.catalog = catalog
        self.sitemap = sitemap if sitemap is not None else Sitemap()
        self.classifier = SectionClassifier()
        self.options = OptionsProcessor(catalog)
        self.reader = MapLineReader(segment_separator, indent_marker)
        self.label_keys = LabelKeyResolver(translate, current_locale, collator)
        self.views = ViewResolver(catalog, view_suffix)
        self.redirects = RedirectProcessor()

    def run(self, source: Union[str, Iterable[str]], source_path: Optional[Path] = None) -> LoaderContext:
        """
        Parses `source` (whole text or a sequence of lines) into the sitemap.
        """
        context = LoaderContext(source=source_path)
        if isinstance(source, str):
            source = self.classifier.clean_artifacts(source).splitlines()

        self.classifier.classify(source, context)

        if not context.missing_sections:
            self.options.process(context.sections[SectionName.options], context)
            self.label_keys.configure(context.label_keys_class)
            self.process_map(context)
            self.process_standard_pages(context)
            self.check_label_keys(context)
            self.redirects.process(context.sections[SectionName.redirects], self.sitemap, context)
            self.sitemap.errors = context.error_sum()
            logger.info("Sitemap loaded successfully")
            logger.debug(str(self.sitemap))
        else:
            logger.error("Site map failed to process, see previous log warnings for details")
            self.sitemap.errors = context.error_sum()

        context.end_time = datetime.now()
        context.parsed = True
        return context

    def process_map(self, context: LoaderContext):
        tracker = URITracker()
        current_indent = 0
        for line_no, line in enumerate(context.sections[SectionName.map], 1):
            record = self.reader.process_line(line_no, line, context.syntax_errors,
                                              context.indentation_errors, current_indent)
            if record is None:
                continue

            tracker.track(record.indent_level, record.segment)
            node = self.sitemap.append(tracker.uri())
            node.uri_segment = record.segment
            self.views.find_view(node, record.segment, record.view_name, context)
            self.label_keys.resolve(record.key_name, node, context)

            node.roles = {role.strip() for role in record.roles.split(",") if role.strip()}
            node.page_access_control = record.page_access_control
            current_indent = record.indent_level

    def process_standard_pages(self, context: LoaderContext):
        lines = context.sections.get(SectionName.standardPages)
        if not lines:
            return
        deconstructor = PageMappingDeconstructor(context.syntax_errors)
        for line_no, line in enumerate(lines, 1):
            record = deconstructor.deconstruct(line, line_no)
            if record is None:
                continue
            node = self.sitemap.append(record.uri)
            node.uri_segment = record.segment
            node.standard_page_key = record.standard_page_key_name
            self.views.find_view(node, record.segment, record.view_class_name, context)
            self.label_keys.resolve(record.label_key_name, node, context)

    def check_label_keys(self, context: LoaderContext):
        """Nodes still without a label key get a second try from their segment."""
        for node in self.sitemap.all_nodes():
            if node.label_key is None:
                self.label_keys.resolve(None, node, context)
