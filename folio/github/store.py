"""Read access to the imported GitHub JSON files."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from dateutil.parser import parse as parse_date


PROFILE_FILENAME = "github_profile.json"
REPOS_FILENAME = "github_repos.json"


class NotImported(Exception):
    """Raised when GitHub data has not been imported yet."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__("Not imported")


def _read_json(path: Path):
    if not path.exists():
        raise NotImported(path)
    return json.loads(path.read_text(encoding="utf-8"))


def load_profile(data_dir: Path) -> dict:
    """Load the imported GitHub user profile."""
    return _read_json(Path(data_dir) / PROFILE_FILENAME)


def load_repos(data_dir: Path) -> list[dict]:
    """Load the imported list of public repositories."""
    return _read_json(Path(data_dir) / REPOS_FILENAME)


def top_languages(repos: list[dict]) -> list[dict]:
    """Count repositories per primary language, most used first."""
    totals: dict[str, int] = {}
    for repo in repos:
        language = repo.get("language")
        if not language:
            continue
        totals[language] = totals.get(language, 0) + 1

    # sorted() is stable, so ties keep first-seen order
    ranked = sorted(totals.items(), key=lambda kv: kv[1], reverse=True)
    return [{"language": language, "count": count} for language, count in ranked]


def last_activity(repo: dict) -> Optional[datetime]:
    """Last push (or update) time of a repo, always timezone-aware.

    Stamps without an offset are taken as UTC. Missing or unparseable
    stamps give None.
    """
    stamp = repo.get("pushed_at") or repo.get("updated_at")
    if not stamp:
        return None
    try:
        dt = parse_date(stamp)
    except (ValueError, OverflowError, TypeError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def recently_updated(repos: list[dict], limit: int = 0) -> list[dict]:
    """Repos ordered by last push (or update), newest first.

    Repos without a usable timestamp go last. ``limit`` of 0 means no limit.
    """
    dated = [(r, last_activity(r)) for r in repos]
    with_date = sorted((d for d in dated if d[1] is not None), key=lambda d: d[1], reverse=True)
    without_date = [d for d in dated if d[1] is None]

    ordered = [r for r, _ in with_date + without_date]
    return ordered[:limit] if limit else ordered


def repo_summaries(repos: list[dict], now: Optional[datetime] = None) -> list[dict]:
    """Flat per-repo rows for display, newest first."""
    now = now or datetime.now(timezone.utc)

    rows = []
    for r in recently_updated(repos):
        activity = last_activity(r)
        rows.append({
            "name": r.get("name", ""),
            "description": r.get("description") or "",
            "language": r.get("language") or "",
            "stars": r.get("stargazers_count", 0),
            "forks": r.get("forks_count", 0),
            "days_inactive": (now - activity).days if activity else None,
            "url": r.get("html_url", ""),
        })
    return rows
