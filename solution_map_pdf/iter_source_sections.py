"""Recursive walk of a project's item tree yielding source file sections."""

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Any

from solution_map_pdf.automation_model import ProjectItemNode
from solution_map_pdf.md_codeblock import md_codeblock
from solution_map_pdf.relative_heading import relative_heading

logger = logging.getLogger(__name__)


def _source_language(item: ProjectItemNode, config: dict[str, Any]) -> str | None:
    """Return the code fence language if item is a recognized source file."""
    if not item.is_physical_file or not item.file_path:
        return None
    ext = Path(item.name).suffix
    if ext not in config["source_extensions"]:
        return None
    return config["languages"].get(ext, ext.lstrip("."))


def iter_source_sections(
    items: Sequence[ProjectItemNode],
    root_path: str,
    config: dict[str, Any],
) -> Iterator[str]:
    """Yield one Markdown section per source file, depth-first in exposed order.

    Folders are never headed. Every item is descended into when it has
    children, including files that matched.
    """
    for item in items:
        lang = _source_language(item, config)
        if lang is not None:
            file_path = str(item.file_path)
            heading = relative_heading(file_path, root_path)
            text = Path(file_path).read_text(encoding="utf-8-sig", errors="replace")
            logger.debug("Adding source file %s", heading)
            yield f"### {heading}\n\n{md_codeblock(lang, text)}\n\n"

        children = item.children
        if children:
            yield from iter_source_sections(children, root_path, config)
