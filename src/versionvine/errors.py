"""Exception hierarchy for version-vine.

Every error raised while deriving a version inherits from VersionVineError,
so the CLI can turn any of them into a one-line message and a non-zero exit.
"""

from __future__ import annotations


class VersionVineError(Exception):
    """Base exception for all version derivation errors."""

    pass


class UnsupportedBranchError(VersionVineError):
    """The current branch matches none of the git-flow branch categories."""

    def __init__(self, branch_name: str) -> None:
        self.branch_name = branch_name
        shown = branch_name or "(detached HEAD)"
        super().__init__(
            f"Branch '{shown}' is not supported. Expected main, master, develop, "
            "feature/*, release/* or hotfix/*"
        )


class InvalidBranchNameError(VersionVineError):
    """A recognised branch carries a name that cannot be versioned."""

    def __init__(self, branch_name: str, reason: str) -> None:
        self.branch_name = branch_name
        self.reason = reason
        super().__init__(f"Invalid branch name '{branch_name}': {reason}")


class GitError(VersionVineError):
    """A git invocation failed.

    Attributes:
        git_args: The git arguments that were run.
        stderr: Whatever git wrote to stderr, if anything.
    """

    def __init__(self, message: str, git_args: list[str] | None = None, stderr: str = "") -> None:
        self.git_args = git_args or []
        self.stderr = stderr
        super().__init__(message)


class UntaggedReleaseError(VersionVineError):
    """A production version was requested from a commit without its tag."""

    def __init__(self, tag: str | None) -> None:
        self.tag = tag
        expected = f" (expected tag '{tag}' on HEAD)" if tag else ""
        super().__init__(
            f"Cannot version a production release from a commit without a tag{expected}"
        )
