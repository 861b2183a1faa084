#!/usr/bin/env python3
"""
PAGEMAP REDIRECTS - Page Moves
------------------------------
Reads the [redirects] section, one 'fromPage : toPage' pair per line, and
appends each pair to the sitemap in source order. Duplicates are kept.

Author: PageMap Team
Date: 2026-10-18
"""

import logging
from typing import List

from pagemap.core.sitemap import Sitemap
from pagemap.parsing.context import LoaderContext

logger = logging.getLogger("pagemap.redirects")


class RedirectProcessor:

    def process(self, lines: List[str], sitemap: Sitemap, context: LoaderContext):
        """
        Lines without ':' are ignored. With more than one ':' only the
        first two parts are used.
        """
        for line in lines:
            if ":" not in line:
                msg = f"Invalid redirect line '{line}' ignored"
                logger.info(msg)
                context.info_messages.add(msg)
                continue
            parts = [p.strip() for p in line.split(":")]
            sitemap.add_redirect(parts[0], parts[1])
