"""Tests for the export pipeline and CLI."""

import argparse
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import yaml
from fakes import FakeProject, FakeSolution, source_file

from solution_map_pdf.run_export import run_export
from solution_map_pdf.solution_map_to_pdf import main


def _args(solution: str | None, **kwargs: object) -> argparse.Namespace:
    defaults = {"config": None, "markdown_only": False}
    defaults.update(kwargs)
    return argparse.Namespace(solution=solution, **defaults)


def _solution(tmp_path: Path) -> FakeSolution:
    sln = tmp_path / "Shop.sln"
    sln.write_text("")
    project = FakeProject(
        name="Core", items=[source_file(tmp_path / "Core" / "Cart.cs", "class Cart {}")]
    )
    return FakeSolution(full_name=str(sln), projects=[project])


def test_missing_argument_returns_zero(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that the CLI reports a missing argument and exits normally."""
    assert main([]) == 0
    assert "Please provide the path" in capsys.readouterr().out


def test_nonexistent_solution_never_touches_ide(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that validation happens before attaching to the IDE."""
    with patch("solution_map_pdf.run_export.attach_to_ide") as attach:
        assert run_export(_args(str(tmp_path / "Nope.sln"))) == 0
    attach.assert_not_called()
    assert "does not exist" in capsys.readouterr().out


def test_converter_unavailable_still_writes_markdown(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that a missing converter leaves the Markdown file in place."""
    solution = _solution(tmp_path)
    dte = MagicMock()
    with (
        patch("solution_map_pdf.run_export.attach_to_ide", return_value=dte) as attach,
        patch("solution_map_pdf.run_export.open_solution", return_value=solution),
        patch(
            "solution_map_pdf.run_converter.subprocess.run",
            side_effect=FileNotFoundError("pandoc"),
        ),
    ):
        assert run_export(_args(solution.full_name)) == 0

    attach.assert_called_once_with("VisualStudio.DTE.17.0")
    md = tmp_path / "Shop.md"
    assert md.read_text(encoding="utf-8").startswith("# Shop\n\n## Core\n\n")
    assert "### Core/Cart.cs" in md.read_text(encoding="utf-8")
    assert "Error while calling Pandoc:" in capsys.readouterr().out


def test_converter_receives_md_and_pdf_paths(tmp_path: Path) -> None:
    """Verify that the converter is pointed at <name>.md and <name>.pdf."""
    solution = _solution(tmp_path)
    with (
        patch("solution_map_pdf.run_export.attach_to_ide"),
        patch("solution_map_pdf.run_export.open_solution", return_value=solution),
        patch("solution_map_pdf.run_export.run_converter") as convert,
    ):
        run_export(_args(solution.full_name))

    md_path, pdf_path, _ = convert.call_args.args
    assert md_path == tmp_path / "Shop.md"
    assert pdf_path == tmp_path / "Shop.pdf"


def test_markdown_only_skips_converter(tmp_path: Path) -> None:
    """Verify that --markdown-only writes Markdown without converting."""
    solution = _solution(tmp_path)
    with (
        patch("solution_map_pdf.run_export.attach_to_ide"),
        patch("solution_map_pdf.run_export.open_solution", return_value=solution),
        patch("solution_map_pdf.run_export.run_converter") as convert,
    ):
        assert run_export(_args(solution.full_name, markdown_only=True)) == 0

    convert.assert_not_called()
    assert (tmp_path / "Shop.md").exists()


def test_session_errors_propagate(tmp_path: Path) -> None:
    """Verify that a missing IDE instance is not swallowed."""
    sln = tmp_path / "Shop.sln"
    sln.write_text("")
    with (
        patch(
            "solution_map_pdf.run_export.attach_to_ide",
            side_effect=OSError("Operation unavailable"),
        ),
        pytest.raises(OSError),
    ):
        run_export(_args(str(sln)))


def test_config_can_disable_conversion(tmp_path: Path) -> None:
    """Verify that converter.enabled: false in a config file skips the PDF step."""
    solution = _solution(tmp_path)
    config_file = tmp_path / "config.yml"
    config_file.write_text(yaml.dump({"converter": {"enabled": False}}))

    with (
        patch("solution_map_pdf.run_export.attach_to_ide"),
        patch("solution_map_pdf.run_export.open_solution", return_value=solution),
        patch("solution_map_pdf.run_export.run_converter") as convert,
    ):
        assert main([solution.full_name, "--config", str(config_file)]) == 0

    convert.assert_not_called()
    assert (tmp_path / "Shop.md").read_text(encoding="utf-8").startswith("# Shop\n")
