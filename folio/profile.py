"""Static portfolio profile shipped with the package."""

import json
from importlib import resources

from .config import Settings


PROFILE_RESOURCE = "profile.json"


def load_profile_data(settings: Settings) -> dict:
    """Return the profile with link fields taken from settings."""
    raw = resources.files("folio.data").joinpath(PROFILE_RESOURCE).read_text(encoding="utf-8")
    profile = json.loads(raw)

    profile["avatar"] = settings.avatar_url or profile.get("avatar", "")
    profile["linkedin"] = settings.linkedin_url
    profile["cv"] = settings.cv_url
    return profile
