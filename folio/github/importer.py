"""One-time import of GitHub data to local JSON files.

Nothing here is called while serving requests; the API only ever reads the
files this writes.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import httpx

from .store import PROFILE_FILENAME, REPOS_FILENAME


logger = logging.getLogger(__name__)

GITHUB_BASE = "https://api.github.com"


class GitHubImportError(Exception):
    """Raised when the GitHub import cannot complete."""


class GitHubImporter:
    """Fetches a user's profile and public repos and stores them as JSON."""

    def __init__(
        self,
        username: str,
        token: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
    ):
        if not username:
            raise GitHubImportError("GITHUB_USERNAME missing")
        self.username = username
        self.token = token
        self.timeout = timeout
        self._client = client

    def _headers(self) -> dict:
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(base_url=GITHUB_BASE, timeout=self.timeout)
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "GitHubImporter":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _get_json(self, url: str, params: Optional[dict] = None):
        try:
            response = self._get_client().get(url, params=params, headers=self._headers())
        except httpx.HTTPError as exc:
            raise GitHubImportError(f"Request to {url} failed: {exc}") from exc

        if response.status_code >= 400:
            raise GitHubImportError(f"GitHub returned {response.status_code} for {url}")
        return response.json()

    def fetch_profile(self) -> dict:
        return self._get_json(f"/users/{self.username}")

    def fetch_repos(self) -> list[dict]:
        return self._get_json(
            f"/users/{self.username}/repos",
            params={"per_page": 100, "sort": "updated"},
        )

    def run(self, out_dir: str | Path) -> tuple[Path, Path]:
        """Fetch everything and write it under out_dir.

        Returns the (profile, repos) file paths.
        """
        out_dir = Path(out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)

        profile = self.fetch_profile()
        profile_path = out_dir / PROFILE_FILENAME
        profile_path.write_text(json.dumps(profile, indent=2), encoding="utf-8")
        logger.info("Wrote GitHub profile for %s to %s", self.username, profile_path)

        repos = self.fetch_repos()
        repos_path = out_dir / REPOS_FILENAME
        repos_path.write_text(json.dumps(repos, indent=2), encoding="utf-8")
        logger.info("Wrote %d repos to %s", len(repos), repos_path)

        return profile_path, repos_path


def import_github(username: str, out_dir: str | Path, token: Optional[str] = None) -> tuple[Path, Path]:
    """Convenience function to run a full import."""
    with GitHubImporter(username, token=token) as importer:
        return importer.run(out_dir)
