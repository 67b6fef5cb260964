"""Git-flow branch classification.

Maps the current branch name to a BranchCategory and extracts what the
composer needs from it: the embedded version of release/hotfix branches and
the escaped name of feature branches.
"""

from __future__ import annotations

import logging
import re

import semver

from versionvine.errors import InvalidBranchNameError, UnsupportedBranchError
from versionvine.models import BranchCategory, BranchInfo

logger = logging.getLogger(__name__)

MAIN_BRANCHES = frozenset({"main", "master"})
DEVELOP_BRANCH = "develop"

# Checked in order after the exact matches
PREFIXED_CATEGORIES = (
    ("feature/", BranchCategory.FEATURE),
    ("release/", BranchCategory.RELEASE),
    ("hotfix/", BranchCategory.HOTFIX),
)

_ESCAPE_PATTERN = re.compile(r"[^A-Za-z0-9]")


def escape_branch_name(name: str) -> str:
    """Make a branch name safe for use as a SemVer pre-release identifier.

    Every character outside [A-Za-z0-9] is replaced by a single '-'. Runs are
    not collapsed, so 'My Cool Thing!' becomes 'My-Cool-Thing-'.

    Args:
        name: Branch-local name (without the 'feature/' prefix).

    Returns:
        The escaped name.
    """
    return _ESCAPE_PATTERN.sub("-", name)


def parse_branch_version(
    branch_name: str, remainder: str, app_name: str | None = None
) -> semver.Version:
    """Parse the version embedded in a release or hotfix branch name.

    Args:
        branch_name: Full branch name, used in error messages.
        remainder: Branch name with the 'release/' or 'hotfix/' prefix removed.
        app_name: Application prefix the version must carry, if any.

    Returns:
        The embedded major.minor.patch version.

    Raises:
        InvalidBranchNameError: If the prefix is missing or the version is
            not a plain major.minor.patch.
    """
    if app_name:
        prefix = f"{app_name}-"
        if not remainder.startswith(prefix):
            raise InvalidBranchNameError(
                branch_name, f"expected the application prefix '{prefix}'"
            )
        remainder = remainder[len(prefix) :]

    try:
        version = semver.Version.parse(remainder)
    except ValueError as e:
        raise InvalidBranchNameError(
            branch_name, f"'{remainder}' is not a major.minor.patch version"
        ) from e

    if version.prerelease or version.build:
        raise InvalidBranchNameError(
            branch_name, f"'{remainder}' is not a major.minor.patch version"
        )
    return version


def classify_branch(branch_name: str, app_name: str | None = None) -> BranchInfo:
    """Classify a branch name into its git-flow category.

    Args:
        branch_name: Current branch name as reported by git.
        app_name: Optional application prefix for monorepos. Only the
            version of release and hotfix branches carries it, e.g.
            'release/myapp-1.1.0'.

    Returns:
        The classified branch.

    Raises:
        UnsupportedBranchError: If the branch matches no category.
        InvalidBranchNameError: If a recognised branch has an unusable name.
    """
    if branch_name in MAIN_BRANCHES:
        return BranchInfo(name=branch_name, category=BranchCategory.MAIN)

    if branch_name == DEVELOP_BRANCH:
        return BranchInfo(name=branch_name, category=BranchCategory.DEVELOP)

    for prefix, category in PREFIXED_CATEGORIES:
        if not branch_name.startswith(prefix):
            continue
        remainder = branch_name[len(prefix) :]

        if category is BranchCategory.FEATURE:
            if not remainder:
                raise InvalidBranchNameError(branch_name, "feature name is empty")
            return BranchInfo(
                name=branch_name,
                category=category,
                escaped_name=escape_branch_name(remainder),
            )

        version = parse_branch_version(branch_name, remainder, app_name)
        logger.debug("Branch %s carries version %s", branch_name, version)
        return BranchInfo(name=branch_name, category=category, version=version)

    raise UnsupportedBranchError(branch_name)
