"""Workspace scanning - finds project folders and classifies them by marker files."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from fnmatch import fnmatch
from pathlib import Path
from typing import Iterable, Optional


logger = logging.getLogger(__name__)


class ProjectType(str, Enum):
    """Ecosystem tag inferred from a marker file."""
    NODE = "node"
    JAVA_MAVEN = "java-maven"
    PYTHON = "python"


UNKNOWN_TYPE = "unknown"


@dataclass
class ProjectMetadata:
    """Classification of a single workspace directory."""
    name: str
    path: Path
    types: list[ProjectType] = field(default_factory=list)
    docker: bool = False
    readme: bool = False

    def add_type(self, project_type: ProjectType) -> None:
        """Append a type tag, keeping first-seen order and no duplicates."""
        if project_type not in self.types:
            self.types.append(project_type)

    @property
    def type(self) -> str:
        """Pipe-joined type string, e.g. 'node|python', or 'unknown'."""
        if not self.types:
            return UNKNOWN_TYPE
        return "|".join(t.value for t in self.types)

    def to_dict(self) -> dict:
        data = {
            "name": self.name,
            "path": str(self.path),
            "type": self.type,
            "readme": self.readme,
        }
        # 'docker' only appears when a Dockerfile was found
        if self.docker:
            data["docker"] = True
        return data


class WorkspaceScanner:
    """Scans the immediate children of a workspace root for projects."""

    # Marker files that decide the project type, in the order tags are appended
    TYPE_MARKERS = [
        ("package.json", ProjectType.NODE),
        ("pom.xml", ProjectType.JAVA_MAVEN),
        ("requirements.txt", ProjectType.PYTHON),
    ]

    DOCKER_MARKER = "Dockerfile"
    README_MARKER = "README.md"

    # A directory with any of these is a project
    MARKER_FILES = [m for m, _ in TYPE_MARKERS] + [DOCKER_MARKER, README_MARKER]

    # Build and dependency directories never reported as projects
    DEFAULT_EXCLUDE = (
        "node_modules", ".git", "target", "dist", "build", ".next", ".cache",
    )

    def __init__(self, root: str | Path, exclude: Optional[Iterable[str]] = None):
        self.root = Path(root).expanduser().resolve()
        self.exclude = tuple(exclude) if exclude is not None else self.DEFAULT_EXCLUDE

    def scan(self) -> list[ProjectMetadata]:
        """Scan the root and return metadata for every project directory.

        Raises OSError when the root itself cannot be listed (missing,
        permission denied, not a directory). Failures on individual
        entries only drop that entry.
        """
        entries = list(self.root.iterdir())

        projects = []
        for item in entries:
            if item.name.startswith('.') or self.is_excluded(item):
                continue
            if not self._is_dir(item):
                continue
            if not self.is_project(item):
                continue
            projects.append(self.inspect(item))

        return sorted(projects, key=lambda p: p.name.lower())

    def is_excluded(self, path: Path) -> bool:
        """Check every path segment below the root against the exclusion globs."""
        try:
            parts = path.relative_to(self.root).parts
        except ValueError:
            parts = path.parts
        return any(fnmatch(part, pattern) for part in parts for pattern in self.exclude)

    def is_project(self, path: Path) -> bool:
        """A directory counts as a project if any marker file is present."""
        return any(self._has_marker(path, marker) for marker in self.MARKER_FILES)

    def inspect(self, path: Path) -> ProjectMetadata:
        """Build the metadata record for a project directory."""
        meta = ProjectMetadata(name=path.name, path=path)

        for marker, project_type in self.TYPE_MARKERS:
            if self._has_marker(path, marker):
                meta.add_type(project_type)

        meta.docker = self._has_marker(path, self.DOCKER_MARKER)
        meta.readme = self._has_marker(path, self.README_MARKER)
        return meta

    @staticmethod
    def _is_dir(path: Path) -> bool:
        try:
            return path.is_dir()
        except OSError as e:
            logger.debug("Cannot stat %s, skipping: %s", path, e)
            return False

    @staticmethod
    def _has_marker(path: Path, marker: str) -> bool:
        # An unreadable marker counts as absent
        try:
            return (path / marker).exists()
        except OSError as e:
            logger.debug("Cannot check %s in %s: %s", marker, path, e)
            return False


def scan_workspace(root: str | Path, exclude: Optional[Iterable[str]] = None) -> list[ProjectMetadata]:
    """Convenience function to scan a workspace root."""
    scanner = WorkspaceScanner(root, exclude=exclude)
    return scanner.scan()
