"""Utility for writing the solution document next to the solution file."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def markdown_path_for_solution(solution_full_name: str) -> Path:
    """Return <solutionDir>/<solutionName>.md."""
    p = Path(solution_full_name)
    return p.parent / f"{p.stem}.md"


def write_markdown(solution_full_name: str, markdown: str) -> Path:
    """Write the Markdown document and return its path."""
    out_file = markdown_path_for_solution(solution_full_name)
    out_file.write_text(markdown, encoding="utf-8")
    logger.info("Wrote %s", out_file)
    return out_file
