#!/usr/bin/env python3
"""
PAGEMAP MAP READER - Hierarchy Reconstruction
---------------------------------------------
Parses lines of the [map] section into MapLineRecords and rebuilds the
full URI of each page from its indentation alone.

    home
    -account;AccountView;Account_Label;admin,user;PERMISSION
    --profile

produces 'home', 'home/account' and 'home/account/profile'.

Author: PageMap Team
Date: 2026-10-18
"""

import re
from typing import List, Optional, Set

from pagemap.core.models import MapLineRecord, PageAccessControl

MAX_FIELDS = 5


class URITracker:
    """
    Stack of segments, one per indent level. Entering a line at level N
    discards everything at N and deeper before pushing the new segment.
    """

    def __init__(self):
        self.segments: List[str] = []

    def track(self, indent_level: int, segment: str):
        del self.segments[indent_level:]
        self.segments.append(segment)

    def uri(self) -> str:
        return "/".join(self.segments)

    def reset(self):
        self.segments.clear()


class MapLineReader:
    """
    Splits one map line into its fields and validates the indentation step.
    Syntax problems return None so that no node is created for the line.
    """

    def __init__(self, segment_separator: str = ";", indent_marker: str = "-"):
        self.segment_separator = segment_separator
        self.indent_marker = indent_marker
        self._indent_pattern = re.compile(rf"^({re.escape(indent_marker)}*)(.*)$")

    def process_line(self, line_number: int, line: str, syntax_errors: Set[str],
                     indentation_errors: Set[str], current_indent: int) -> Optional[MapLineRecord]:
        markers, body = self._indent_pattern.match(line.strip()).groups()
        indent = len(markers)

        fields = [f.strip() for f in body.split(self.segment_separator)]
        if len(fields) > MAX_FIELDS:
            syntax_errors.add(
                f"Too many fields at line {line_number} of the map section, "
                f"expected at most {MAX_FIELDS} separated by '{self.segment_separator}'")
            return None
        fields += [""] * (MAX_FIELDS - len(fields))
        segment, view_name, key_name, roles, access = fields

        if not segment:
            syntax_errors.add(f"Missing URI segment at line {line_number} of the map section")
            return None

        access_control = PageAccessControl.from_indicator(access)
        if access_control is None:
            allowed = [p.name for p in PageAccessControl]
            syntax_errors.add(
                f"Invalid access control '{access}' at line {line_number} of the map section, "
                f"must be one of {allowed}")
            return None

        if indent > current_indent + 1:
            indentation_errors.add(
                f"Indentation error at line {line_number}: indent of {indent} "
                f"follows an indent of {current_indent}")

        return MapLineRecord(
            line_number=line_number,
            indent_level=indent,
            segment=segment,
            view_name=view_name or None,
            key_name=key_name or None,
            roles=roles,
            page_access_control=access_control,
        )
