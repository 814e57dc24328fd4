"""Unit tests for folio.github (store and importer)."""

import json
from datetime import datetime, timezone
import pytest
import httpx
from pathlib import Path

from folio.github.importer import GitHubImporter, GitHubImportError
from folio.github.store import (
    NotImported,
    last_activity,
    load_profile,
    load_repos,
    recently_updated,
    repo_summaries,
    top_languages,
)


class TestStore:
    """Tests for reading imported data."""

    def test_load_profile(self, data_dir: Path):
        assert load_profile(data_dir)["login"] == "octocat"

    def test_load_repos(self, data_dir: Path, sample_repos):
        assert load_repos(data_dir) == sample_repos

    def test_missing_files(self, temp_dir: Path):
        with pytest.raises(NotImported):
            load_profile(temp_dir)
        with pytest.raises(NotImported):
            load_repos(temp_dir)

    def test_corrupt_file(self, data_dir: Path):
        (data_dir / "github_profile.json").write_text("{oops")
        with pytest.raises(ValueError):
            load_profile(data_dir)


class TestTopLanguages:
    def test_counts_and_order(self, sample_repos):
        assert top_languages(sample_repos) == [
            {"language": "Python", "count": 2},
            {"language": "JavaScript", "count": 1},
        ]

    def test_ties_keep_first_seen_order(self):
        repos = [{"language": "Go"}, {"language": "Rust"}, {"language": "Rust"}, {"language": "Go"}, {"language": "C"}]
        assert [l["language"] for l in top_languages(repos)] == ["Go", "Rust", "C"]

    def test_skips_missing_language(self):
        assert top_languages([{"language": None}, {"name": "x"}, {"language": ""}]) == []


class TestRecentlyUpdated:
    def test_newest_first_undated_last(self, sample_repos):
        names = [r["name"] for r in recently_updated(sample_repos)]
        assert names == ["chatbot", "portfolio", "swarm", "dotfiles"]

    def test_limit(self, sample_repos):
        assert [r["name"] for r in recently_updated(sample_repos, limit=2)] == ["chatbot", "portfolio"]

    def test_bad_timestamp_treated_as_undated(self):
        repos = [{"name": "a", "pushed_at": "not a date"}, {"name": "b", "pushed_at": "2025-01-01T00:00:00Z"}]
        assert [r["name"] for r in recently_updated(repos)] == ["b", "a"]


def make_client(handler) -> httpx.Client:
    return httpx.Client(base_url="https://api.github.com", transport=httpx.MockTransport(handler))


class TestGitHubImporter:
    """Tests for the offline GitHub import."""

    def test_requires_username(self):
        with pytest.raises(GitHubImportError):
            GitHubImporter("")

    def test_run_writes_files(self, temp_dir: Path):
        """Test profile and repos are fetched and written as JSON."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if request.url.path == "/users/octocat":
                return httpx.Response(200, json={"login": "octocat"})
            if request.url.path == "/users/octocat/repos":
                return httpx.Response(200, json=[{"name": "hello", "language": "Python"}])
            return httpx.Response(404)

        out = temp_dir / "out"
        importer = GitHubImporter("octocat", client=make_client(handler))
        profile_path, repos_path = importer.run(out)

        assert json.loads(profile_path.read_text()) == {"login": "octocat"}
        assert json.loads(repos_path.read_text()) == [{"name": "hello", "language": "Python"}]
        assert profile_path.name == "github_profile.json"
        assert repos_path.name == "github_repos.json"

        repos_request = seen[1]
        assert repos_request.url.params["per_page"] == "100"
        assert repos_request.url.params["sort"] == "updated"
        assert "authorization" not in repos_request.headers

    def test_token_sent_as_bearer(self, temp_dir: Path):
        auth_headers = []

        def handler(request: httpx.Request) -> httpx.Response:
            auth_headers.append(request.headers.get("authorization"))
            return httpx.Response(200, json=[] if request.url.path.endswith("/repos") else {})

        GitHubImporter("octocat", token="secret", client=make_client(handler)).run(temp_dir)

        assert auth_headers == ["Bearer secret", "Bearer secret"]

    def test_error_status(self, temp_dir: Path):
        """Test a failed request raises and writes nothing."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"message": "Not Found"})

        importer = GitHubImporter("ghost", client=make_client(handler))
        with pytest.raises(GitHubImportError, match="404"):
            importer.run(temp_dir / "out")

        assert not (temp_dir / "out" / "github_profile.json").exists()

    def test_connection_error(self, temp_dir: Path):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("boom", request=request)

        with pytest.raises(GitHubImportError, match="boom"):
            GitHubImporter("octocat", client=make_client(handler)).run(temp_dir)

    def test_context_manager_closes_client(self):
        client = make_client(lambda request: httpx.Response(200, json={}))
        with GitHubImporter("octocat", client=client):
            pass
        assert client.is_closed


class TestLastActivity:
    def test_naive_stamp_taken_as_utc(self):
        dt = last_activity({"pushed_at": "2025-02-01"})
        assert dt == datetime(2025, 2, 1, tzinfo=timezone.utc)

    def test_unparseable_stamp(self):
        assert last_activity({"pushed_at": "not a date"}) is None
        assert last_activity({"pushed_at": 12345}) is None

    def test_mixed_naive_and_aware_stamps_sort(self):
        """Test a date-only stamp sorts alongside full GitHub stamps."""
        repos = [
            {"name": "older", "pushed_at": "2025-01-01T00:00:00Z"},
            {"name": "newer", "pushed_at": "2025-02-01"},
        ]
        assert [r["name"] for r in recently_updated(repos)] == ["newer", "older"]


class TestRepoSummaries:
    """Tests for the per-repo rows shown on the dashboard."""

    NOW = datetime(2025, 10, 20, tzinfo=timezone.utc)

    def test_rows(self, sample_repos):
        rows = repo_summaries(sample_repos, now=self.NOW)

        assert [r["name"] for r in rows] == ["chatbot", "portfolio", "swarm", "dotfiles"]
        assert rows[0] == {
            "name": "chatbot",
            "description": "",
            "language": "Python",
            "stars": 2,
            "forks": 0,
            "days_inactive": 4,
            "url": "https://github.com/octocat/chatbot",
        }
        assert rows[3]["language"] == ""
        assert rows[3]["days_inactive"] is None

    def test_bad_and_naive_stamps(self):
        repos = [
            {"name": "x", "pushed_at": "not a date"},
            {"name": "y", "pushed_at": "2025-10-10"},
        ]
        rows = repo_summaries(repos, now=self.NOW)

        assert [(r["name"], r["days_inactive"]) for r in rows] == [("y", 10), ("x", None)]
