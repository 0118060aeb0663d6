"""Data models for the license resolution pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class DependencyDescriptor:
    """A third-party package as reported by ``cargo metadata``.

    Workspace members never become descriptors: :func:`~cargo_3pl.metadata.parse_metadata`
    drops every package whose manifest lies under the workspace root.
    """

    name: str
    version: str
    source_dir: Path
    license: str | None = None
    license_file: str | None = None
    url: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.name} v{self.version}"


@dataclass(frozen=True)
class LicenseFile:
    """A license file on disk, with its path relative to the owning root."""

    path: Path
    relative_path: str

    @classmethod
    def from_root(cls, path: Path, root: Path) -> LicenseFile:
        return cls(path=path, relative_path=str(path.relative_to(root)))


@dataclass(frozen=True)
class ResolvedPackage:
    """A third-party package with its discovered license files."""

    name: str
    version: str
    source_dir: Path
    license: str | None = None
    license_file: str | None = None
    url: str | None = None
    license_files: tuple[LicenseFile, ...] = field(default_factory=tuple)
    multiple_versions: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.name} v{self.version}"

    @property
    def display_name(self) -> str:
        """Name shown in the report; includes the version when the name is ambiguous."""
        return self.full_name if self.multiple_versions else self.name
