"""Structural interface over the IDE automation object model.

The walker and renderer only depend on these protocols. The real
implementation wraps COM objects (see ``dte_session``); tests supply plain
dataclasses with the same attributes.
"""

from collections.abc import Sequence
from typing import Protocol


class ProjectItemNode(Protocol):
    """A file or folder inside a project's item tree."""

    @property
    def name(self) -> str: ...

    @property
    def is_physical_file(self) -> bool: ...

    @property
    def file_path(self) -> str | None: ...

    @property
    def children(self) -> Sequence["ProjectItemNode"]: ...


class ProjectNode(Protocol):
    """A project loaded in the solution."""

    @property
    def name(self) -> str: ...

    @property
    def full_name(self) -> str: ...  # manifest path, empty for solution folders

    @property
    def items(self) -> Sequence[ProjectItemNode]: ...


class SolutionNode(Protocol):
    """The solution currently open in the IDE."""

    @property
    def full_name(self) -> str: ...

    @property
    def projects(self) -> Sequence[ProjectNode]: ...
