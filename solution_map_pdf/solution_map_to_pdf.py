"""Export a Visual Studio solution to a Markdown map and a PDF.

Attaches to a running Visual Studio instance, opens the given solution, lists
each project's package references and the full text of its source files, then
hands the Markdown to pandoc.
"""

import argparse
import logging

from solution_map_pdf.run_export import run_export


def main(argv: list[str] | None = None) -> int:
    """Run the export process."""
    ap = argparse.ArgumentParser(
        description="Export a Visual Studio solution map to Markdown and PDF.",
    )
    # Optional so that a missing path is reported rather than a usage error
    ap.add_argument(
        "solution",
        nargs="?",
        help="Path to the Visual Studio solution (.sln) file",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--markdown-only",
        action="store_true",
        help="Write the Markdown file and skip PDF conversion",
    )
    ap.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return run_export(args)


if __name__ == "__main__":
    raise SystemExit(main())
