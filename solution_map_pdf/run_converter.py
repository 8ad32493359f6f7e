"""Invocation of the external Markdown to PDF converter."""

import logging
import subprocess
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def converter_command(
    markdown_path: Path, pdf_path: Path, converter_cfg: dict[str, Any]
) -> list[str]:
    """Build the converter command line."""
    return [
        converter_cfg["executable"],
        str(markdown_path),
        "-o",
        str(pdf_path),
        f"--pdf-engine={converter_cfg['pdf_engine']}",
    ]


def run_converter(
    markdown_path: Path, pdf_path: Path, converter_cfg: dict[str, Any]
) -> bool:
    """Convert the Markdown file to PDF and report the outcome.

    Failures are reported on stdout and never raised. Blocks until the
    converter exits.
    """
    cmd = converter_command(markdown_path, pdf_path, converter_cfg)
    logger.info("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd, capture_output=True, text=True, errors="replace", check=False
        )
    except Exception as e:
        logger.debug("Converter invocation failed", exc_info=True)
        print(f"Error while calling Pandoc: {e}")
        return False

    if result.returncode != 0:
        print(f"Pandoc Error: {result.stderr}")
        return False

    print("PDF generated successfully.")
    return True
