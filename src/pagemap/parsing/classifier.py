#!/usr/bin/env python3
"""
PAGEMAP CLASSIFIER - Section Sorter
-----------------------------------
Decides what each raw line of a sitemap source is (comment, blank,
section header or content) and routes content lines into the buffer of
the section that is currently active.

Author: PageMap Team
Date: 2026-10-18
"""

import logging
import re
from typing import Iterable, Optional

from pagemap.parsing.context import LoaderContext, SectionName

logger = logging.getLogger("pagemap.classifier")

_WHITESPACE = re.compile(r"\s+")


class SectionClassifier:
    """
    Maintains the 'active section' state while walking the source lines.
    """

    def __init__(self):
        self.current_section: Optional[SectionName] = None

    @staticmethod
    def clean_artifacts(text: str) -> str:
        """Removes a UTF-8 BOM and standardises line endings."""
        text = text.lstrip('\ufeff')
        return text.replace('\r\n', '\n').replace('\r', '\n')

    @staticmethod
    def allowed_sections() -> list:
        return sorted(s.name for s in SectionName)

    def classify(self, lines: Iterable[str], context: LoaderContext) -> LoaderContext:
        self.current_section = None
        for line_no, line in enumerate(lines, 1):
            self._classify_line(line, line_no, context)

        missing = context.missing_sections
        if missing:
            msg = f"The site map source is missing these sections: {sorted(missing)}"
            logger.warning(msg)
            context.section_warnings.add(msg)
        return context

    def _classify_line(self, line: str, line_no: int, context: LoaderContext):
        stripped = _WHITESPACE.sub("", line)

        if stripped.startswith("#"):
            context.comment_lines += 1
            return
        if not stripped:
            context.blank_lines += 1
            return

        if stripped.startswith("["):
            if not stripped.endswith("]"):
                msg = f"section requires closing ']' at line {line_no}"
                logger.warning(msg)
                context.section_warnings.add(msg)
                return
            name = stripped[1:-1]
            try:
                key = SectionName[name]
            except KeyError:
                msg = (f"Invalid section '{name}' at line {line_no}, this section has been ignored. "
                       f"Only sections {self.allowed_sections()} are allowed.")
                logger.warning(msg)
                context.section_warnings.add(msg)
                return
            self.current_section = key
            context.sections[key] = []
            return

        if self.current_section is None:
            return
        context.sections[self.current_section].append(line.strip())
