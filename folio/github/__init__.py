"""GitHub data: offline import and read access to the imported files."""

from .importer import GitHubImporter, GitHubImportError, import_github
from .store import (
    NotImported,
    last_activity,
    load_profile,
    load_repos,
    recently_updated,
    repo_summaries,
    top_languages,
)

__all__ = [
    "GitHubImporter",
    "GitHubImportError",
    "import_github",
    "NotImported",
    "last_activity",
    "load_profile",
    "load_repos",
    "recently_updated",
    "repo_summaries",
    "top_languages",
]
