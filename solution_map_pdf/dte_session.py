"""Adapters over a running Visual Studio instance's DTE automation object."""

import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# EnvDTE.Constants.vsProjectItemKindPhysicalFile
VS_PROJECT_ITEM_KIND_PHYSICAL_FILE = "{6BB5F8EE-4483-11D3-8BCF-00C04F8EC28C}"


def _collection(com_collection: Any) -> list[Any]:
    """Materialize a 1-based COM collection into a list."""
    if com_collection is None:
        return []
    count = com_collection.Count
    return [com_collection.Item(i) for i in range(1, count + 1)]


class DteProjectItem:
    """ProjectItemNode backed by an EnvDTE.ProjectItem."""

    def __init__(self, com_item: Any) -> None:
        self._item = com_item

    @property
    def name(self) -> str:
        """Display name of the item as shown in Solution Explorer."""
        return str(self._item.Name)

    @property
    def is_physical_file(self) -> bool:
        """Whether the item is a file on disk rather than a folder or link."""
        return str(self._item.Kind).upper() == VS_PROJECT_ITEM_KIND_PHYSICAL_FILE

    @property
    def file_path(self) -> str | None:
        """Absolute path of the file; None for non-file items."""
        if not self.is_physical_file:
            return None
        return str(self._item.FileNames(1))

    @property
    def children(self) -> list["DteProjectItem"]:
        """Nested items, such as folder contents or dependent files."""
        return [DteProjectItem(c) for c in _collection(self._item.ProjectItems)]


class DteProject:
    """ProjectNode backed by an EnvDTE.Project."""

    def __init__(self, com_project: Any) -> None:
        self._project = com_project

    @property
    def name(self) -> str:
        """Project name."""
        return str(self._project.Name)

    @property
    def full_name(self) -> str:
        """Manifest path, empty for solution folders and unloaded projects."""
        return str(self._project.FullName or "")

    @property
    def items(self) -> list[DteProjectItem]:
        """Top-level items of the project."""
        return [DteProjectItem(i) for i in _collection(self._project.ProjectItems)]


class DteSolution:
    """SolutionNode backed by an EnvDTE.Solution."""

    def __init__(self, com_solution: Any) -> None:
        self._solution = com_solution

    @property
    def full_name(self) -> str:
        """Absolute path of the .sln file."""
        return str(self._solution.FullName)

    @property
    def projects(self) -> list[DteProject]:
        """Projects in the order the IDE exposes them."""
        return [DteProject(p) for p in _collection(self._solution.Projects)]


def attach_to_ide(prog_id: str) -> Any:
    """Return the DTE object of an already-running IDE registered under prog_id.

    Raises whatever the COM layer raises when no such instance is running.
    """
    import win32com.client  # Windows only

    logger.info("Attaching to running IDE instance %s", prog_id)
    return win32com.client.GetActiveObject(prog_id)


def open_solution(dte: Any, solution_path: Path) -> DteSolution:
    """Open the solution in the attached IDE and return an adapter over it."""
    logger.info("Opening solution %s", solution_path)
    dte.Solution.Open(str(solution_path))
    return DteSolution(dte.Solution)
