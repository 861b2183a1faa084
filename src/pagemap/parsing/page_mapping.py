#!/usr/bin/env python3
"""
PAGEMAP PAGE MAPPING - Fixed-Layout Deconstructor
-------------------------------------------------
Breaks a standard page line of the form

    Public_Home=public : WigglyHome ~ Yes

into a PageRecord. Each structural problem yields exactly one syntax
error and no record.

Author: PageMap Team
Date: 2026-10-18
"""

from typing import Optional, Set

from pagemap.core.models import PageRecord


class PageMappingDeconstructor:
    missing_uri_msg = "Standard page mapping has no '=' to separate the key from the URI"
    empty_standard_page_key_msg = "Standard page key cannot be empty"
    missing_view_msg = "Standard page mapping has no ':' to separate the URI from the view"
    empty_uri_msg = "Standard page URI cannot be empty"
    missing_label_key_msg = "Standard page mapping has no '~' to separate the view from the label key"
    empty_view_msg = "Standard page view cannot be empty"
    empty_label_key_msg = "Standard page label key cannot be empty"

    def __init__(self, syntax_errors: Optional[Set[str]] = None):
        self.syntax_errors: Set[str] = syntax_errors if syntax_errors is not None else set()

    def _fail(self, message: str, line_number: int) -> None:
        self.syntax_errors.add(f"{message} at line {line_number}")
        return None

    def deconstruct(self, line: str, line_number: int) -> Optional[PageRecord]:
        key_part, has_equals, rest = line.partition("=")
        if not has_equals:
            return self._fail(self.missing_uri_msg, line_number)
        key = key_part.strip()
        if not key:
            return self._fail(self.empty_standard_page_key_msg, line_number)

        uri_part, has_colon, rest = rest.partition(":")
        if not has_colon:
            return self._fail(self.missing_view_msg, line_number)
        uri = uri_part.strip()
        if not uri:
            return self._fail(self.empty_uri_msg, line_number)

        view_part, has_tilde, label_part = rest.partition("~")
        if not has_tilde:
            return self._fail(self.missing_label_key_msg, line_number)
        view = view_part.strip()
        if not view:
            return self._fail(self.empty_view_msg, line_number)
        label = label_part.strip()
        if not label:
            return self._fail(self.empty_label_key_msg, line_number)

        return PageRecord(
            standard_page_key_name=key,
            uri=uri,
            view_class_name=view,
            label_key_name=label,
        )
