#!/usr/bin/env python3
"""
PAGEMAP SITEMAP - The Navigation Tree
-------------------------------------
Holds every page node keyed by its full URI, together with the redirect
table and the error tally of the most recent load. Parent/child
relationships are derived from the URI paths, not stored.

Author: PageMap Team
Date: 2026-10-18
"""

from typing import Dict, List, Optional

from pagemap.core.models import Redirect, SitemapNode


class SitemapError(Exception):
    """Raised when the sitemap or its report is used out of sequence."""


class Sitemap:
    """
    Insertion-ordered collection of SitemapNodes. Not safe for concurrent
    population; a single loader owns it while a parse is running.
    """

    def __init__(self):
        self._nodes: Dict[str, SitemapNode] = {}
        self.redirects: List[Redirect] = []
        self.errors = 0

    def append(self, uri: str) -> SitemapNode:
        """
        Returns the node for `uri`, creating it when absent. A URI that is
        defined twice resolves to the same node, so later values overwrite
        earlier ones.
        """
        node = self._nodes.get(uri)
        if node is None:
            node = SitemapNode(uri=uri)
            self._nodes[uri] = node
        return node

    def add_redirect(self, from_uri: str, to_uri: str):
        self.redirects.append(Redirect(from_uri, to_uri))

    def redirect_for(self, uri: str) -> str:
        """Follows the first matching redirect, or returns `uri` unchanged."""
        for redirect in self.redirects:
            if redirect.from_uri == uri:
                return redirect.to_uri
        return uri

    @property
    def has_errors(self) -> bool:
        return self.errors > 0

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def node_for_uri(self, uri: str) -> Optional[SitemapNode]:
        return self._nodes.get(uri)

    def all_nodes(self) -> List[SitemapNode]:
        return list(self._nodes.values())

    def uris(self) -> List[str]:
        return list(self._nodes.keys())

    def parent_of(self, node: SitemapNode) -> Optional[SitemapNode]:
        if "/" not in node.uri:
            return None
        return self._nodes.get(node.uri.rsplit("/", 1)[0])

    def children_of(self, node: SitemapNode) -> List[SitemapNode]:
        prefix = node.uri + "/"
        return [n for uri, n in self._nodes.items()
                if uri.startswith(prefix) and "/" not in uri[len(prefix):]]

    def roots(self) -> List[SitemapNode]:
        return [n for n in self._nodes.values() if self.parent_of(n) is None]

    def clear(self):
        self._nodes.clear()
        self.redirects.clear()
        self.errors = 0

    def __contains__(self, uri: str) -> bool:
        return uri in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __str__(self) -> str:
        lines = [f"Sitemap: {self.node_count} pages, {len(self.redirects)} redirects, {self.errors} errors"]
        for node in self._nodes.values():
            view = node.view_class.__name__ if node.view_class else "-"
            key = node.label_key.name if node.label_key is not None else "-"
            lines.append(f"  {node.uri} : {view} ~ {key}")
        return "\n".join(lines)
