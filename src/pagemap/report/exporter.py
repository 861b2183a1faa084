#!/usr/bin/env python3
"""
PAGEMAP EXPORTER - Tree Dump
----------------------------
Renders a loaded Sitemap as nested YAML so the navigation tree can be
reviewed at a glance:

    pages:
      home:
        view: myapp.views.HomeView
        label_key: Home
        access: public
        children:
          account:
            ...
    redirects:
      - from: old-page
        to: new-page

Author: PageMap Team
Date: 2026-10-18
"""

import io

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from pagemap.core.models import SitemapNode
from pagemap.core.sitemap import Sitemap


class SitemapExporter:

    def __init__(self):
        self.yaml = YAML(typ='rt')
        self.yaml.indent(mapping=2, sequence=4, offset=2)
        self.yaml.width = 4096

    def _node_map(self, sitemap: Sitemap, node: SitemapNode) -> CommentedMap:
        entry = CommentedMap()
        if node.view_class is not None:
            entry["view"] = f"{node.view_class.__module__}.{node.view_class.__qualname__}"
        if node.label_key is not None:
            entry["label_key"] = node.label_key.name
        if node.label is not None:
            entry["label"] = node.label
        if node.standard_page_key:
            entry["standard_page"] = node.standard_page_key
        entry["access"] = node.page_access_control.value
        if node.roles:
            entry["roles"] = sorted(node.roles)

        children = sitemap.children_of(node)
        if children:
            child_map = CommentedMap()
            for child in children:
                child_map[child.uri_segment or child.uri] = self._node_map(sitemap, child)
            entry["children"] = child_map
        return entry

    def to_map(self, sitemap: Sitemap) -> CommentedMap:
        doc = CommentedMap()
        pages = CommentedMap()
        for root in sitemap.roots():
            pages[root.uri] = self._node_map(sitemap, root)
        doc["pages"] = pages

        if sitemap.redirects:
            redirects = CommentedSeq()
            for redirect in sitemap.redirects:
                pair = CommentedMap()
                pair["from"] = redirect.from_uri
                pair["to"] = redirect.to_uri
                redirects.append(pair)
            doc["redirects"] = redirects
        doc.yaml_set_start_comment(
            f"{sitemap.node_count} pages, {len(sitemap.redirects)} redirects, {sitemap.errors} errors")
        return doc

    def export(self, sitemap: Sitemap) -> str:
        stream = io.StringIO()
        self.yaml.dump(self.to_map(sitemap), stream)
        return stream.getvalue()
