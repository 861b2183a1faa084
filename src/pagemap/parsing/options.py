#!/usr/bin/env python3
"""
PAGEMAP OPTIONS - [options] Section Processor
---------------------------------------------
Reads 'key=value' lines, applies the recognised options to the loader
context and validates the label key class named by 'labelKeys'.

Author: PageMap Team
Date: 2026-10-18
"""

import logging
from enum import Enum
from typing import List

from pagemap.parsing.context import LoaderContext, SectionName
from pagemap.registry.capabilities import is_enum_class, is_label_key_class
from pagemap.registry.catalog import TypeCatalog

logger = logging.getLogger("pagemap.options")


class ValidOption(Enum):
    appendView = "appendView"
    labelKeys = "labelKeys"


class OptionsProcessor:

    def __init__(self, catalog: TypeCatalog):
        self.catalog = catalog

    def process(self, lines: List[str], context: LoaderContext):
        section = SectionName.options.name
        for line_no, line in enumerate(lines, 1):
            if "=" not in line:
                context.property_errors.add(
                    f"Property must contain an '=' sign at line {line_no} in the {section} section")
                continue

            key, _, value = line.partition("=")
            key, value = key.strip(), value.strip()
            if not key:
                context.property_errors.add(
                    f"Property must have a key at line {line_no} in the {section} section")
                continue
            if not value:
                context.property_errors.add(f"Property {key} cannot have an empty value")
                continue

            self.set_option(key, value, context)

    def set_option(self, key: str, value: str, context: LoaderContext):
        try:
            option = ValidOption[key]
        except KeyError:
            logger.warning(f"unrecognised option '{key}' in site map")
            context.unrecognised_options.add(key)
            return

        if option is ValidOption.appendView:
            context.append_view = value == "true"
        elif option is ValidOption.labelKeys:
            context.label_keys = value
            if value:
                context.label_class_missing = False
                self.validate_label_keys(value, context)

    def validate_label_keys(self, class_name: str, context: LoaderContext):
        """
        Only an I18NKey enumeration is accepted. Otherwise the context is
        flagged and the label key resolver stays unconfigured.
        """
        context.label_keys_class = None
        context.label_class_non_existent = False
        context.label_class_not_i18n = False

        candidate = self.catalog.resolve(class_name)
        if candidate is None:
            logger.warning(f"{class_name} is not a registered type")
            context.label_class_non_existent = True
            return
        if not is_enum_class(candidate):
            logger.warning(f"{class_name} is not an enum")
            context.label_class_not_i18n = True
            return
        if not is_label_key_class(candidate):
            logger.warning(f"{class_name} does not implement I18NKey")
            context.label_class_not_i18n = True
            return
        context.label_keys_class = candidate
