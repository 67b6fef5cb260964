"""Run configuration for version-vine.

There are no configuration files. The CLI builds one VersionConfig from its
options (which fall back to VERSION_VINE_* environment variables) and passes
it explicitly through the pipeline.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "VERSION_VINE_"

_INVALID_APP_NAME = re.compile(r"[\s/]")


class VersionConfig(BaseModel):
    """Immutable settings of a single run."""

    model_config = ConfigDict(frozen=True)

    # Monorepo application prefix for tags and release/hotfix branches
    app_name: str | None = None
    # Overrides the git commit count when set, e.g. a CI build number
    build_number: int | None = Field(default=None, ge=0)
    skip_fetch: bool = False
    # On main, require HEAD to carry the resolved tag
    require_main_tag: bool = False
    repo_path: Path | None = None

    @field_validator("app_name")
    @classmethod
    def _check_app_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        if _INVALID_APP_NAME.search(value):
            raise ValueError("app name must not contain whitespace or '/'")
        return value
