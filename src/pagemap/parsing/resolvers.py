#!/usr/bin/env python3
"""
PAGEMAP RESOLVERS - Names to Types
----------------------------------
Turns the textual label key and view names found in a sitemap into the
enum members and view classes that a node binds. Every failed lookup is
recorded in the loader context and leaves the node unbound.

Author: PageMap Team
Date: 2026-10-18
"""

import logging
from enum import Enum
from typing import Optional, Set

from pagemap.core.models import SitemapNode
from pagemap.parsing.context import LoaderContext
from pagemap.registry.capabilities import (
    Collator,
    CurrentLocale,
    Translate,
    default_collator,
    default_translate,
    is_navigable_view,
)
from pagemap.registry.catalog import TypeCatalog

logger = logging.getLogger("pagemap.resolvers")


def capitalize_words(text: str) -> str:
    """Upper-cases the first letter of each space separated word, leaving the rest alone."""
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def name_from_segment(segment: str) -> str:
    """
    Derives an identifier-safe name from a URI segment:
    'account-setup' -> 'Account_Setup', 'my_page' -> 'My_Page'.
    """
    name = segment.replace("-", " ").replace("_", " ")
    return capitalize_words(name).replace(" ", "_")


class LabelKeyForName:
    """Member lookup by name within one label key enumeration."""

    def __init__(self, label_keys_class: type):
        self.label_keys_class = label_keys_class

    def key_for_name(self, name: str, missing_enums: Set[str]) -> Optional[Enum]:
        member = self.label_keys_class.__members__.get(name)
        if member is None:
            missing_enums.add(name)
        return member


class LabelKeyResolver:
    """
    Binds label keys to nodes, translating them through the i18n collaborator
    so each node also carries its display label and collation key.
    """

    def __init__(self, translate: Translate = default_translate,
                 current_locale: Optional[CurrentLocale] = None,
                 collator: Collator = default_collator):
        self.translate = translate
        self.current_locale = current_locale or CurrentLocale()
        self.collator = collator
        self.lookup: Optional[LabelKeyForName] = None

    def configure(self, label_keys_class: Optional[type]):
        self.lookup = LabelKeyForName(label_keys_class) if label_keys_class else None

    @staticmethod
    def key_name(label_key_name: Optional[str], node: SitemapNode) -> str:
        if label_key_name:
            return label_key_name
        return name_from_segment(node.uri_segment)

    def resolve(self, label_key_name: Optional[str], node: SitemapNode,
                context: LoaderContext) -> Optional[Enum]:
        key_name = self.key_name(label_key_name, node)
        if self.lookup is None:
            context.missing_enums.add(key_name)
            key = None
        else:
            key = self.lookup.key_for_name(key_name, context.missing_enums)
        node.set_label_key(key, self.translate, self.current_locale.locale, self.collator)
        return key


class ViewResolver:
    """
    Searches the declared view packages, in order, for a class that
    satisfies the NavigableView capability.
    """

    def __init__(self, catalog: TypeCatalog, view_suffix: str = "View"):
        self.catalog = catalog
        self.view_suffix = view_suffix

    def view_name(self, segment: str, view_name: Optional[str], append_view: bool) -> str:
        name = view_name or name_from_segment(segment)
        if append_view:
            name = name + self.view_suffix
        return name

    def find_view(self, node: SitemapNode, segment: str, view_name: Optional[str],
                  context: LoaderContext) -> Optional[type]:
        name = self.view_name(segment, view_name, context.append_view)
        for package in context.view_packages or []:
            full_name = f"{package}.{name}"
            view_class = self.catalog.resolve(full_name)
            if view_class is None:
                continue
            if is_navigable_view(view_class):
                node.view_class = view_class
                return view_class
            logger.debug(f"{full_name} found but is not a NavigableView")
            context.invalid_view_classes.add(full_name)

        context.undeclared_view_classes.add(name)
        node.view_class = None
        return None
