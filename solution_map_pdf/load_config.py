"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from solution_map_pdf.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "automation": {
        "prog_id": "VisualStudio.DTE.17.0",
    },
    "source_extensions": [".cs"],
    "languages": {
        ".cs": "csharp",
    },
    "dependencies": {
        "tag": "PackageReference",
        "name_attribute": "Include",
        "version_attribute": "Version",
        # None matches the tag in any namespace
        "namespace": None,
    },
    "converter": {
        "enabled": True,
        "executable": "pandoc",
        "pdf_engine": "xelatex",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
            logger.info("Loaded configuration from %s", p)
        else:
            logger.warning("Configuration file %s not found, using defaults", p)
    return config
