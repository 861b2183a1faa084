#!/usr/bin/env python3
"""
PAGEMAP CAPABILITIES - Collaborator Contracts
---------------------------------------------
The narrow interfaces through which the loader talks to the view layer
and the i18n layer. Nothing here renders a view or translates text; the
host application supplies those behaviours.

Author: PageMap Team
Date: 2026-10-18
"""

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


class NavigableView:
    """Marker base class for any page-rendering type that a node may bind."""


class I18NKey:
    """
    Mixin for label-key enumerations.

    Example:
        class LabelKey(I18NKey, Enum):
            Home = "home"
    """


@dataclass
class CurrentLocale:
    locale: str = "en"


# (key, locale) -> label text
Translate = Callable[[Enum, str], str]
# label text -> sort key
Collator = Callable[[str], Any]


def default_translate(key: Enum, locale: str) -> str:
    """Falls back to the member name with underscores shown as spaces."""
    return key.name.replace("_", " ")


def default_collator(label: str) -> Any:
    return label.casefold()


def is_navigable_view(candidate: Any) -> bool:
    return inspect.isclass(candidate) and issubclass(candidate, NavigableView)


def is_enum_class(candidate: Any) -> bool:
    return inspect.isclass(candidate) and issubclass(candidate, Enum)


def is_label_key_class(candidate: Any) -> bool:
    return is_enum_class(candidate) and issubclass(candidate, I18NKey)
