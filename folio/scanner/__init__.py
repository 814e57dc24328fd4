"""Scanner module for finding and classifying workspace projects."""

from .detector import ProjectMetadata, ProjectType, WorkspaceScanner, scan_workspace

__all__ = ["ProjectMetadata", "ProjectType", "WorkspaceScanner", "scan_workspace"]
