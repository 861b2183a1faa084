#!/usr/bin/env python3
"""
PAGEMAP REPORTER - Operator Summary
-----------------------------------
Renders the outcome of a sitemap parse as plain text: timing, counts,
then every diagnostic grouped by category. Intended for people, not for
machines; the CLI wraps it in a rich panel.

Author: PageMap Team
Date: 2026-10-18
"""

from typing import Iterable, List

from pagemap.core.sitemap import Sitemap, SitemapError
from pagemap.parsing.context import LoaderContext

DATE_FORMAT = "%d %b %Y %H:%M:%S"

REPORT_HEADER = "==================== Sitemap reader report ==================== \n\n"
REPORT_FOOTER = "================================================================= "


class ReportBuilder:

    def __init__(self, sitemap: Sitemap):
        self.sitemap = sitemap

    def build(self, context: LoaderContext) -> str:
        if not context.parsed:
            raise SitemapError("Sitemap file must be parsed before report is run")

        out: List[str] = []
        name = context.source.name if context.source else "<text>"
        location = str(context.source.resolve()) if context.source else "<text>"

        out.append(f"------------------------------  {name}  ---------------------- \n\n")
        out.append(f"parsing source from:\t\t{location}\n\n")

        if context.load_failure:
            out.append(f"load failed:\t\t\t{context.load_failure}\n\n")
            return "".join(out)

        out.append(f"start at:\t\t\t{context.start_time.strftime(DATE_FORMAT)}\n")
        out.append(f"end at:\t\t\t\t{context.end_time.strftime(DATE_FORMAT)}\n")
        out.append(f"run time:\t\t\t{context.runtime_ms()} ms\n\n")
        out.append(f"pages defined:\t\t\t{self.sitemap.node_count}\n")
        out.append(f"comment lines:\t\t\t{context.comment_lines}\n")
        out.append(f"blank lines:\t\t\t{context.blank_lines}\n\n")

        if context.view_packages is not None:
            out.append(f"view packages declared:\t\t{context.view_packages}\n\n")

        if context.label_class_valid:
            out.append(f"I18N Label class:\t\t{context.label_class_name}\n\n")

        errors = context.error_sum()
        out.append("parsing status:  ")
        out.append("FAILED" if errors > 0 else "PASSED")
        out.append("\n\n")

        if errors > 0:
            out.append(" -------- errors --------\n\n")

        self._chunk(out, context.missing_sections, "missing sections",
                    "if any section is missing, parsing will fail, and results will be "
                    "indeterminate - correct this first")

        if not context.view_packages:
            out.append("No view packages declared - site map will not build without them\n\n")

        if not context.label_class_valid:
            out.append("I18N Label class:\t\t")
            if context.label_class_missing:
                out.append(" has not been declared, you need to define it using the "
                           "'labelKeys=' property in [options]")
            elif context.label_class_non_existent:
                out.append(f"{context.label_class_name} has been declared but is not a registered type")
            else:
                out.append(f"{context.label_class_name} has been declared, is registered, "
                           "but is not an I18NKey enum, as it should be")
            out.append("\n\n")

        self._chunk(out, context.property_errors, "property errors",
                    "should be key=value, spaces are ignored")
        self._chunk(out, context.missing_enums, "missing enum declarations",
                    "you could just paste these into your enum declaration")
        self._chunk(out, context.invalid_view_classes, "invalid view classes",
                    "invalid because they are not NavigableView subclasses")
        self._chunk(out, context.undeclared_view_classes, "undeclared view classes",
                    "these could not be found in the view packages declared in the [viewPackages] section")
        self._chunk(out, context.syntax_errors, "syntax errors",
                    "these have been ignored, and the system may work, but you may not get "
                    "the intended result", multiline=True)

        if context.warning_sum() > 0:
            out.append(" --------------- warnings ---------\n\n")
            self._chunk(out, context.indentation_errors, "indentation errors",
                        "line indentation should be <= 1 greater than the preceding line.  Parsing "
                        "will still work but you may not get the intended result", multiline=True)
            self._chunk(out, context.unrecognised_options, "unrecognised options",
                        "these have just been ignored, will do no harm")

        if context.info_messages:
            self._chunk(out, context.info_messages, "information", "for information only",
                        multiline=True)

        return "".join(out)

    @staticmethod
    def _chunk(out: List[str], source: Iterable[str], name: str, explain: str,
               multiline: bool = False):
        items = sorted(source)
        if not items:
            return
        out.append(f"{name}\t\t{len(items)}  ({explain})\n")
        if multiline:
            for item in items:
                out.append(f"\t{item}\n")
        else:
            out.append(f"  -- {items}\n")
        out.append("\n")
