#!/usr/bin/env python3
"""
PAGEMAP CONFIG - Loader Settings
--------------------------------
Reads the YAML file that tells the loader which sitemap sources to load
and which host modules populate the type catalog:

    sources:
      core: sitemaps/core.txt
      admin: sitemaps/admin.txt
    modules:
      - myapp.views
      - myapp.i18n
    segment_separator: ";"
    indent_marker: "-"
    view_suffix: View

Relative source paths resolve against the directory of the config file.

Author: PageMap Team
Date: 2026-10-18
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from ruamel.yaml import YAML, YAMLError


class ConfigError(Exception):
    """The loader configuration is missing or malformed."""


@dataclass
class LoaderConfig:
    sources: Dict[str, Path] = field(default_factory=dict)
    modules: List[str] = field(default_factory=list)
    segment_separator: str = ";"
    indent_marker: str = "-"
    view_suffix: str = "View"


def load_config(path: Path) -> LoaderConfig:
    path = Path(path)
    try:
        data = YAML(typ="safe").load(path.read_text(encoding="utf-8-sig"))
    except OSError as e:
        raise ConfigError(f"Unable to read config {path}: {e}") from e
    except YAMLError as e:
        raise ConfigError(f"Config {path} is not valid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping at the top level")

    sources = data.get("sources") or {}
    if not isinstance(sources, dict):
        raise ConfigError("'sources' must map a source name to a file path")
    modules = data.get("modules") or []
    if not isinstance(modules, list):
        raise ConfigError("'modules' must be a list of importable module names")

    base = path.resolve().parent
    config = LoaderConfig(
        sources={str(name): (base / str(p)).resolve() for name, p in sources.items()},
        modules=[str(m) for m in modules],
    )
    for key in ("segment_separator", "indent_marker", "view_suffix"):
        if key in data:
            value = data[key]
            if not isinstance(value, str) or not value:
                raise ConfigError(f"'{key}' must be a non-empty string")
            setattr(config, key, value)
    return config
