#!/usr/bin/env python3
"""
PAGEMAP CORE MODELS
-------------------
Defines the fundamental data structures used across the PageMap loader.
Records are transient parse results; nodes are owned by the Sitemap.

Author: PageMap Team
Date: 2026-10-18
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Set


class PageAccessControl(Enum):
    """Authorization policy tag attached to a page."""
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    GUEST = "guest"
    ROLES = "roles"
    PERMISSION = "permission"

    @classmethod
    def from_indicator(cls, indicator: Optional[str]) -> Optional["PageAccessControl"]:
        """
        Maps the access indicator of a map line to a member.
        An omitted indicator means PUBLIC; an unknown one returns None.
        """
        if not indicator:
            return cls.PUBLIC
        try:
            return cls[indicator.strip().upper()]
        except KeyError:
            return None


@dataclass
class MapLineRecord:
    """
    The parse result for a single line of the [map] section.
    Discarded once its values have been applied to a SitemapNode.
    """
    line_number: int             # 1-based position within the map section
    indent_level: int            # Count of leading indent markers
    segment: str                 # The URI path component contributed by this line
    view_name: Optional[str] = None
    key_name: Optional[str] = None
    roles: str = ""              # Raw comma separated role list
    page_access_control: PageAccessControl = PageAccessControl.PUBLIC


@dataclass
class PageRecord:
    """
    The parse result for a fixed-layout 'Key=uri : View ~ Label' line.
    """
    standard_page_key_name: str
    uri: str
    view_class_name: str
    label_key_name: str

    @property
    def segment(self) -> str:
        return self.uri.rsplit("/", 1)[-1]


@dataclass
class Redirect:
    from_uri: str
    to_uri: str


@dataclass
class SitemapNode:
    """
    One page of the site, identified by its full URI.
    """
    uri: str
    uri_segment: str = ""
    view_class: Optional[type] = None
    label_key: Optional[Enum] = None
    label: Optional[str] = None
    collation_key: Any = None
    roles: Set[str] = field(default_factory=set)
    page_access_control: PageAccessControl = PageAccessControl.PUBLIC
    standard_page_key: Optional[str] = None

    def set_label_key(self, label_key: Optional[Enum],
                      translate: Callable[[Enum, str], str],
                      locale: str,
                      collator: Callable[[str], Any]):
        """
        Binds the label key and derives the display label and its
        locale-aware sort key. A None key clears all three.
        """
        self.label_key = label_key
        if label_key is None:
            self.label = None
            self.collation_key = None
            return
        self.label = translate(label_key, locale)
        self.collation_key = collator(self.label)
