"""Version derivation pipeline.

One run gathers the facts from git, classifies the branch, resolves the base
tag, composes the version and formats the result record.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from versionvine.branches import classify_branch
from versionvine.composer import compose_version
from versionvine.config import VersionConfig
from versionvine.errors import UntaggedReleaseError
from versionvine.models import BranchCategory, VersionContext, VersionResult
from versionvine.output import format_result
from versionvine.tags import resolve_tag

if TYPE_CHECKING:
    from versionvine.git import GitClient

logger = logging.getLogger(__name__)


def build_context(config: VersionConfig, repo: GitClient) -> VersionContext:
    """Gather the facts of a run from the repository.

    Args:
        config: Run configuration.
        repo: Version-control adapter.

    Returns:
        The context for the composer.

    Raises:
        GitError: If any git call fails, including the fetch.
        UnsupportedBranchError: If the branch is not a git-flow branch.
        InvalidBranchNameError: If the branch name cannot be versioned.
        UntaggedReleaseError: If main must be tagged and HEAD is not.
    """
    if config.skip_fetch:
        logger.debug("Skipping tag fetch")
    else:
        repo.fetch_tags()

    branch = classify_branch(repo.current_branch(), config.app_name)
    logger.debug("Branch %s is a %s branch", branch.name, branch.category.value)

    base = resolve_tag(repo.reachable_tags(), config.app_name)

    if config.require_main_tag and branch.category is BranchCategory.MAIN:
        if not base.found or base.tag not in repo.tags_at_head():
            raise UntaggedReleaseError(base.tag)

    if config.build_number is not None:
        rev_count = config.build_number
    else:
        rev_count = repo.count_commits(base.tag)

    return VersionContext(
        branch=branch,
        base=base,
        commit_hash=repo.short_hash(),
        rev_count=rev_count,
        app_name=config.app_name,
    )


def derive_version(config: VersionConfig, repo: GitClient) -> VersionResult:
    """Derive the version of the repository's current HEAD.

    Args:
        config: Run configuration.
        repo: Version-control adapter.

    Returns:
        The result record.
    """
    context = build_context(config, repo)
    version = compose_version(
        context.branch,
        context.base.version,
        context.base.found,
        context.rev_count,
        context.commit_hash,
    )
    logger.debug("Derived version %s", version)
    return format_result(version, context)
