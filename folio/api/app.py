"""FastAPI application for the portfolio backend.

Provides:
- the static portfolio profile
- pre-imported GitHub profile, repos and language totals
- a live scan of local workspace projects
"""

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from ..config import Settings, get_settings
from ..github.store import NotImported, load_profile, load_repos, top_languages
from ..profile import load_profile_data
from ..scanner.detector import WorkspaceScanner


logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


app = FastAPI(
    title="Folio API",
    description="Portfolio backend: profile, imported GitHub data and local projects.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Error bodies are always {"error": message}
# ---------------------------------------------------------------------------


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Anything under /api without a matching route and method is Not Found
    if exc.status_code == 405 and request.url.path.startswith("/api"):
        return _error(404, "Not Found")
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(NotImported)
async def not_imported_handler(_request: Request, exc: NotImported):
    return _error(404, str(exc))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Server error on %s", request.url.path)
    return _error(500, "Internal Server Error")


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.get("/api/health")
def health():
    return {"ok": True}


@app.get("/api/profile")
def profile(settings: Settings = Depends(get_settings)):
    try:
        return load_profile_data(settings)
    except (OSError, ValueError) as e:
        return _error(500, str(e))


@app.get("/api/github/profile")
def github_profile(settings: Settings = Depends(get_settings)):
    try:
        return load_profile(settings.data_dir)
    except (OSError, ValueError) as e:
        return _error(500, str(e))


@app.get("/api/github/repos")
def github_repos(settings: Settings = Depends(get_settings)):
    try:
        return load_repos(settings.data_dir)
    except (OSError, ValueError) as e:
        return _error(500, str(e))


@app.get("/api/github/top-languages")
def github_top_languages(settings: Settings = Depends(get_settings)):
    """Aggregate primary languages across the imported repositories."""
    try:
        repos = load_repos(settings.data_dir)
    except (OSError, ValueError) as e:
        return _error(500, str(e))

    try:
        languages = top_languages(repos)
    except (TypeError, AttributeError) as e:
        return _error(500, str(e))

    return {"username": settings.github_username, "languages": languages}


@app.get("/api/local-projects")
def local_projects(settings: Settings = Depends(get_settings)):
    """Scan the workspace root and list the projects found in it."""
    scanner = WorkspaceScanner(settings.workspace_dir, exclude=settings.exclude)
    try:
        projects = scanner.scan()
    except OSError as e:
        logger.warning("Workspace scan of %s failed: %s", scanner.root, e)
        return _error(500, str(e))

    return {
        "root": str(settings.workspace_dir),
        "count": len(projects),
        "projects": [p.to_dict() for p in projects],
    }
