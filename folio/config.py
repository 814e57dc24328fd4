"""Environment-driven settings for the portfolio backend."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .scanner.detector import WorkspaceScanner


DEFAULT_PORT = 5055
DEFAULT_HOST = "0.0.0.0"
DEFAULT_DATA_DIR = "data"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration."""
    workspace_dir: Path
    data_dir: Path
    exclude: tuple[str, ...] = WorkspaceScanner.DEFAULT_EXCLUDE
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    github_username: str = ""
    github_token: Optional[str] = None

    # Profile link overrides
    avatar_url: str = ""
    linkedin_url: Optional[str] = None
    cv_url: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "Settings":
        """Build settings from the environment (and a .env file, if any)."""
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ

        workspace = environ.get("WORKSPACE_DIR") or os.getcwd()
        data_dir = environ.get("FOLIO_DATA_DIR") or DEFAULT_DATA_DIR

        exclude = WorkspaceScanner.DEFAULT_EXCLUDE
        if environ.get("FOLIO_EXCLUDE"):
            exclude = tuple(p.strip() for p in environ["FOLIO_EXCLUDE"].split(",") if p.strip())

        port_str = environ.get("PORT") or str(DEFAULT_PORT)
        try:
            port = int(port_str)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port_str!r}")

        return cls(
            workspace_dir=Path(workspace).expanduser(),
            data_dir=Path(data_dir).expanduser(),
            exclude=exclude,
            host=environ.get("HOST") or DEFAULT_HOST,
            port=port,
            github_username=environ.get("GITHUB_USERNAME", ""),
            github_token=environ.get("GITHUB_TOKEN") or None,
            avatar_url=environ.get("AVATAR_URL", ""),
            linkedin_url=environ.get("LINKEDIN_URL"),
            cv_url=environ.get("CV_URL"),
        )


def get_settings() -> Settings:
    """Settings for the current process, re-read on every call."""
    return Settings.from_env()
