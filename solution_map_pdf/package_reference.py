"""Data model for a package dependency declared in a project manifest."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PackageReference:
    """A declared package dependency (name and version)."""

    name: str
    version: str
