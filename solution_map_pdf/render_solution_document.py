"""Logic for rendering the solution Markdown document."""

import logging
from pathlib import Path
from typing import Any

from solution_map_pdf.automation_model import ProjectNode, SolutionNode
from solution_map_pdf.iter_source_sections import iter_source_sections
from solution_map_pdf.package_reference import PackageReference
from solution_map_pdf.read_package_references import read_package_references

logger = logging.getLogger(__name__)


def render_dependencies(packages: list[PackageReference]) -> str:
    """Render the dependencies section of a project."""
    parts = ["### Dependencies", ""]
    if not packages:
        parts.append("- No dependencies found")
    else:
        parts.extend(f"- {p.name} v{p.version}" for p in packages)
    return "\n".join(parts) + "\n\n"


def render_project_sections(
    project: ProjectNode, root_path: str, config: dict[str, Any]
) -> list[str]:
    """Render a project's heading, dependencies and source file sections."""
    packages = read_package_references(project.full_name, config)
    sections = [f"## {project.name}\n\n", render_dependencies(packages)]
    sections.extend(iter_source_sections(project.items, root_path, config))
    logger.info(
        "Project %s: %d dependencies, %d source files",
        project.name,
        len(packages),
        len(sections) - 2,
    )
    return sections


def render_solution_document(solution: SolutionNode, config: dict[str, Any]) -> str:
    """Render the whole solution as a single Markdown document."""
    solution_path = Path(solution.full_name)
    root_path = str(solution_path.parent)
    sections = [f"# {solution_path.stem}\n\n"]
    for project in solution.projects:
        sections.extend(render_project_sections(project, root_path, config))
    return "".join(sections)
