"""version-vine - git-flow SemVer versions for CI pipelines."""

from versionvine._version import __version__
from versionvine.branches import classify_branch, escape_branch_name
from versionvine.composer import compose_version
from versionvine.config import VersionConfig
from versionvine.engine import build_context, derive_version
from versionvine.errors import (
    GitError,
    InvalidBranchNameError,
    UnsupportedBranchError,
    UntaggedReleaseError,
    VersionVineError,
)
from versionvine.models import (
    BranchCategory,
    BranchInfo,
    ResolvedTag,
    VersionContext,
    VersionResult,
)
from versionvine.output import container_tag, format_result
from versionvine.tags import resolve_tag

__all__ = [
    "__version__",
    "BranchCategory",
    "BranchInfo",
    "ResolvedTag",
    "VersionContext",
    "VersionResult",
    "VersionConfig",
    "VersionVineError",
    "UnsupportedBranchError",
    "InvalidBranchNameError",
    "GitError",
    "UntaggedReleaseError",
    "classify_branch",
    "escape_branch_name",
    "resolve_tag",
    "compose_version",
    "container_tag",
    "format_result",
    "build_context",
    "derive_version",
]
