"""Orchestration logic for exporting a solution to Markdown and PDF."""

import argparse
import logging

from solution_map_pdf.dte_session import attach_to_ide, open_solution
from solution_map_pdf.load_config import load_config
from solution_map_pdf.render_solution_document import render_solution_document
from solution_map_pdf.run_converter import run_converter
from solution_map_pdf.validate_solution_path import validate_solution_path
from solution_map_pdf.write_markdown import write_markdown

logger = logging.getLogger(__name__)


def run_export(args: argparse.Namespace) -> int:
    """Execute the full export pipeline."""
    solution_path = validate_solution_path(args.solution)
    if solution_path is None:
        return 0

    config = load_config(args.config)

    dte = attach_to_ide(config["automation"]["prog_id"])
    solution = open_solution(dte, solution_path)

    markdown = render_solution_document(solution, config)
    markdown_path = write_markdown(solution.full_name, markdown)

    if args.markdown_only or not config["converter"]["enabled"]:
        logger.info("Skipping PDF conversion")
        return 0

    run_converter(markdown_path, markdown_path.with_suffix(".pdf"), config["converter"])
    return 0
