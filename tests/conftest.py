"""Pytest fixtures for folio tests."""

import json
import tempfile
import shutil
from pathlib import Path
from typing import Generator

import pytest

from folio.config import Settings


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)


def make_project(root: Path, name: str, *markers: str) -> Path:
    """Create a directory under root containing the given marker files."""
    path = root / name
    path.mkdir(parents=True)
    for marker in markers:
        (path / marker).write_text("")
    return path


@pytest.fixture
def workspace(temp_dir: Path) -> Path:
    """A workspace root with a mix of projects and non-projects.

    proj-a: package.json, README.md
    proj-b: only a .git directory
    node_modules: package.json (excluded by pattern)
    proj-c: requirements.txt, Dockerfile
    """
    root = temp_dir / "work"
    root.mkdir()

    make_project(root, "proj-a", "package.json", "README.md")

    proj_b = root / "proj-b"
    (proj_b / ".git").mkdir(parents=True)
    (proj_b / ".git" / "HEAD").write_text("ref: refs/heads/main\n")

    make_project(root, "node_modules", "package.json")
    make_project(root, "proj-c", "requirements.txt", "Dockerfile")

    # Loose files at the root are never projects
    (root / "notes.txt").write_text("not a project")

    return root


@pytest.fixture
def sample_repos() -> list[dict]:
    """Repo records shaped like the GitHub API response."""
    return [
        {
            "name": "portfolio",
            "language": "JavaScript",
            "stargazers_count": 4,
            "forks_count": 1,
            "pushed_at": "2025-09-01T10:00:00Z",
            "html_url": "https://github.com/octocat/portfolio",
        },
        {
            "name": "chatbot",
            "language": "Python",
            "stargazers_count": 2,
            "forks_count": 0,
            "pushed_at": "2025-10-15T08:30:00Z",
            "html_url": "https://github.com/octocat/chatbot",
        },
        {
            "name": "swarm",
            "language": "Python",
            "stargazers_count": 0,
            "forks_count": 0,
            "updated_at": "2024-03-02T12:00:00Z",
            "html_url": "https://github.com/octocat/swarm",
        },
        {
            "name": "dotfiles",
            "language": None,
            "stargazers_count": 0,
            "forks_count": 0,
            "html_url": "https://github.com/octocat/dotfiles",
        },
    ]


@pytest.fixture
def data_dir(temp_dir: Path, sample_repos: list[dict]) -> Path:
    """A data directory holding imported GitHub JSON."""
    path = temp_dir / "data"
    path.mkdir()
    (path / "github_profile.json").write_text(json.dumps({
        "login": "octocat",
        "public_repos": 4,
        "followers": 12,
    }))
    (path / "github_repos.json").write_text(json.dumps(sample_repos))
    return path


@pytest.fixture
def settings(workspace: Path, data_dir: Path) -> Settings:
    """Settings pointing at the sample workspace and data directory."""
    return Settings(
        workspace_dir=workspace,
        data_dir=data_dir,
        github_username="octocat",
        linkedin_url="https://linkedin.com/in/octocat",
    )


@pytest.fixture(name="make_project")
def make_project_fixture():
    """Expose make_project to tests."""
    return make_project
