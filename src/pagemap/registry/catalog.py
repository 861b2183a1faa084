#!/usr/bin/env python3
"""
PAGEMAP TYPE CATALOG - The Registry
-----------------------------------
Resolves dotted identifiers ('com.example.views.HomeView') to types that
the host application registered before parsing. The loader never imports
code by name while a sitemap is being read.

Author: PageMap Team
Date: 2026-10-18
"""

import importlib
import inspect
import logging
from types import ModuleType
from typing import Dict, Iterable, Optional

logger = logging.getLogger("pagemap.registry")


class TypeCatalog:
    """
    Pre-registered mapping of identifier -> type.
    Lookups that miss return None; the caller decides what that means.
    """

    def __init__(self):
        self._types: Dict[str, type] = {}

    def register(self, name: str, cls: type) -> "TypeCatalog":
        self._types[name] = cls
        return self

    def register_class(self, cls: type, namespace: Optional[str] = None) -> "TypeCatalog":
        """Registers `cls` as '<namespace>.<ClassName>', defaulting to its module."""
        prefix = namespace if namespace is not None else cls.__module__
        return self.register(f"{prefix}.{cls.__name__}", cls)

    def register_module(self, module: ModuleType, namespace: Optional[str] = None) -> "TypeCatalog":
        """
        Registers every class defined in `module`. Imported names are skipped
        so that a views module does not re-export its base classes.
        """
        count = 0
        for _, member in inspect.getmembers(module, inspect.isclass):
            if member.__module__ != module.__name__:
                continue
            self.register_class(member, namespace or module.__name__)
            count += 1
        logger.debug(f"Registered {count} types from {module.__name__}")
        return self

    def import_modules(self, module_names: Iterable[str]) -> "TypeCatalog":
        """Imports host modules (e.g. from configuration) and registers their classes."""
        for name in module_names:
            self.register_module(importlib.import_module(name))
        return self

    def resolve(self, name: str) -> Optional[type]:
        return self._types.get(name)

    def names(self):
        return sorted(self._types)

    def __contains__(self, name: str) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)
