"""Version composition rules per git-flow branch category."""

from __future__ import annotations

import semver

from versionvine.errors import InvalidBranchNameError, UnsupportedBranchError
from versionvine.models import BranchCategory, BranchInfo

# Pre-release label per category; main has none
PRERELEASE_LABELS = {
    BranchCategory.DEVELOP: "beta",
    BranchCategory.FEATURE: "alpha",
    BranchCategory.RELEASE: "rc",
    BranchCategory.HOTFIX: "rc",
}


def compose_version(
    branch: BranchInfo,
    base: semver.Version,
    base_found: bool,
    rev_count: int,
    commit_hash: str,
) -> semver.Version:
    """Compose the final version for a classified branch.

    | Category | core                 | pre-release                  |
    |----------|----------------------|------------------------------|
    | main     | base                 | none                         |
    | develop  | base, patch + 1      | beta.<count>                 |
    | feature  | base, patch + 1      | alpha.<count>.<escaped name> |
    | release  | from the branch name | rc.<count>                   |
    | hotfix   | from the branch name | rc.<count>                   |

    The build metadata is always the commit hash. Only the patch number is
    ever bumped. ``base_found`` does not change the outcome: an untagged main
    is versioned 0.0.0 as is, while develop and feature bump the fallback
    like any other base.

    Args:
        branch: The classified branch.
        base: Base version from the tag history (or the 0.0.0 fallback).
        base_found: Whether ``base`` came from an actual tag.
        rev_count: Build number or commit count.
        commit_hash: Short hash of HEAD.

    Returns:
        The composed version.

    Raises:
        UnsupportedBranchError: If the branch is not in a versionable category.
    """
    category = branch.category
    prerelease: str | None

    if category is BranchCategory.MAIN:
        core = base
        prerelease = None
    elif category.is_release_candidate:
        if branch.version is None:
            raise InvalidBranchNameError(branch.name, "no version in branch name")
        core = branch.version
        prerelease = f"{PRERELEASE_LABELS[category]}.{rev_count}"
    elif category is BranchCategory.DEVELOP:
        core = base.bump_patch()
        prerelease = f"{PRERELEASE_LABELS[category]}.{rev_count}"
    elif category is BranchCategory.FEATURE:
        core = base.bump_patch()
        prerelease = f"{PRERELEASE_LABELS[category]}.{rev_count}.{branch.escaped_name}"
    else:
        raise UnsupportedBranchError(branch.name)

    return semver.Version(
        core.major,
        core.minor,
        core.patch,
        prerelease=prerelease,
        build=commit_hash,
    )
