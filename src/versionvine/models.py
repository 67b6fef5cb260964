"""Data models for version derivation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import semver
from pydantic import BaseModel, ConfigDict


class BranchCategory(Enum):
    """Git-flow branch categories, in classification priority order."""

    MAIN = "main"
    DEVELOP = "develop"
    FEATURE = "feature"
    RELEASE = "release"
    HOTFIX = "hotfix"
    OTHER = "other"

    @property
    def is_release_candidate(self) -> bool:
        """Check if the version comes from the branch name instead of a tag."""
        return self in (BranchCategory.RELEASE, BranchCategory.HOTFIX)


@dataclass(frozen=True)
class BranchInfo:
    """A classified branch and the data extracted from its name.

    ``version`` is set for release and hotfix branches, ``escaped_name`` for
    feature branches.
    """

    name: str
    category: BranchCategory
    version: semver.Version | None = None
    escaped_name: str | None = None


@dataclass(frozen=True)
class ResolvedTag:
    """The base version found in the tag history.

    ``tag`` is the raw tag name (with any app-name prefix) or None when the
    fallback version is used.
    """

    version: semver.Version
    found: bool
    tag: str | None = None


@dataclass(frozen=True)
class VersionContext:
    """Facts gathered once per run and consumed by the composer."""

    branch: BranchInfo
    base: ResolvedTag
    commit_hash: str
    rev_count: int
    app_name: str | None = None


class VersionResult(BaseModel):
    """Terminal output record of a run."""

    model_config = ConfigDict(frozen=True)

    app_version: str
    container_tag: str
    git_branch: str
    git_rev: str
    rev_count: str
