#!/usr/bin/env python3
"""
PAGEMAP LOADER CONTEXT
----------------------
The state record of a single sitemap parse. Every processor receives it,
reads the options it needs and adds its diagnostics to it. A fresh
context is created for each source so parses never share state.

Author: PageMap Team
Date: 2026-10-18
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Set


class SectionName(Enum):
    options = "options"
    viewPackages = "viewPackages"
    map = "map"
    redirects = "redirects"
    standardPages = "standardPages"


REQUIRED_SECTIONS = (SectionName.options, SectionName.viewPackages,
                     SectionName.map, SectionName.redirects)


@dataclass
class LoaderContext:
    """
    Holds section buffers, options and diagnostic sets for one parse.
    Sets (not lists) are used so identical messages collapse.
    """
    source: Optional[Path] = None
    sections: Dict[SectionName, List[str]] = field(default_factory=dict)
    comment_lines: int = 0
    blank_lines: int = 0

    # options
    append_view: bool = False
    label_keys: Optional[str] = None
    label_keys_class: Optional[type] = None

    # label class flags; 'missing' means never specified
    label_class_missing: bool = True
    label_class_non_existent: bool = False
    label_class_not_i18n: bool = False

    missing_enums: Set[str] = field(default_factory=set)
    invalid_view_classes: Set[str] = field(default_factory=set)
    undeclared_view_classes: Set[str] = field(default_factory=set)
    indentation_errors: Set[str] = field(default_factory=set)
    property_errors: Set[str] = field(default_factory=set)
    unrecognised_options: Set[str] = field(default_factory=set)
    syntax_errors: Set[str] = field(default_factory=set)
    section_warnings: Set[str] = field(default_factory=set)
    info_messages: Set[str] = field(default_factory=set)

    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None
    parsed: bool = False
    load_failure: Optional[str] = None

    @property
    def view_packages(self) -> Optional[List[str]]:
        return self.sections.get(SectionName.viewPackages)

    @property
    def missing_sections(self) -> Set[str]:
        return {s.name for s in REQUIRED_SECTIONS if s not in self.sections}

    @property
    def label_class_name(self) -> Optional[str]:
        return self.label_keys

    @property
    def label_class_valid(self) -> bool:
        return not (self.label_class_missing or self.label_class_non_existent
                    or self.label_class_not_i18n)

    def error_sum(self) -> int:
        """Indentation errors and unrecognised options are warnings, not errors."""
        count = len(self.missing_sections) + len(self.missing_enums)
        count += len(self.invalid_view_classes) + len(self.undeclared_view_classes)
        count += len(self.property_errors) + len(self.syntax_errors)
        if not self.view_packages:
            count += 1
        if self.label_class_not_i18n:
            count += 1
        if self.label_class_non_existent:
            count += 1
        if self.label_class_missing:
            count += 1
        return count

    def warning_sum(self) -> int:
        return len(self.unrecognised_options) + len(self.indentation_errors)

    def runtime_ms(self) -> int:
        if self.end_time is None:
            return 0
        return int((self.end_time - self.start_time).total_seconds() * 1000)
