"""Git command-line client."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from versionvine.errors import GitError

logger = logging.getLogger(__name__)

TAG_DECORATION_PREFIX = "tag: "


def parse_tag_decorations(output: str) -> list[str]:
    """Extract tag names from `git log --format=%D` output.

    Each line holds the decorations of one commit, e.g.
    'HEAD -> develop, tag: 1.1.0, tag: app-1.1.0'. Lines without tags are
    blank.

    Args:
        output: Raw git log output, one commit per line.

    Returns:
        Tag names in the order they appear.
    """
    tags = []
    for line in output.splitlines():
        for decoration in line.split(", "):
            decoration = decoration.strip()
            if decoration.startswith(TAG_DECORATION_PREFIX):
                tags.append(decoration[len(TAG_DECORATION_PREFIX) :])
    return tags


class GitClient:
    """Client for the git executable of a working copy."""

    DEFAULT_TIMEOUT = 60.0

    def __init__(
        self,
        repo_path: Path | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        executable: str = "git",
    ) -> None:
        """Initialize the git client.

        Args:
            repo_path: Working copy to run git in. Defaults to the current
                working directory.
            timeout: Per-command timeout in seconds.
            executable: Name or path of the git executable.
        """
        self.repo_path = repo_path
        self._timeout = timeout
        self._executable = executable

    def run(self, *args: str) -> str:
        """Run a git command and return its stripped stdout.

        Raises:
            GitError: If git is missing, times out or exits non-zero.
        """
        command = [self._executable, *args]
        logger.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(
                command,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self._timeout,
            )
        except FileNotFoundError as e:
            raise GitError(f"Git executable not found: {self._executable}", list(args)) from e
        except subprocess.TimeoutExpired as e:
            raise GitError(
                f"Git command timed out after {self._timeout}s: git {' '.join(args)}",
                list(args),
            ) from e
        except OSError as e:
            raise GitError(f"Git command failed: {e}", list(args)) from e

        if result.returncode != 0:
            stderr = result.stderr.strip()
            raise GitError(f"Git command failed: {stderr}", list(args), stderr)

        return result.stdout.strip()

    def _lines(self, *args: str) -> list[str]:
        return [line.strip() for line in self.run(*args).splitlines() if line.strip()]

    def fetch_tags(self) -> None:
        """Fetch tags from the default remote."""
        self.run("fetch", "--tags")

    def current_branch(self) -> str:
        """Get the current branch name (empty on a detached HEAD)."""
        return self.run("branch", "--show-current")

    def short_hash(self) -> str:
        """Get the abbreviated hash of HEAD."""
        return self.run("rev-parse", "--short", "HEAD")

    def reachable_tags(self) -> list[str]:
        """Get all tags reachable from HEAD, nearest first.

        Tags are listed in history order walking back from HEAD, so the tag
        on the closest ancestor comes first, like `git describe --tags`. Tags
        on the same commit keep the order git decorates them in.
        """
        output = self.run(
            "log",
            "--topo-order",
            "--decorate=short",
            "--decorate-refs=refs/tags/",
            "--format=%D",
            "HEAD",
        )
        return parse_tag_decorations(output)

    def tags_at_head(self) -> list[str]:
        """Get the tags pointing exactly at HEAD."""
        return self._lines("tag", "--points-at", "HEAD")

    def count_commits(self, since: str | None = None) -> int:
        """Count commits from a tag (exclusive) or the repository root to HEAD.

        Args:
            since: Tag name to count from. None counts all of HEAD's
                history.

        Raises:
            GitError: If git fails or prints something other than a number.
        """
        revision = f"refs/tags/{since}..HEAD" if since else "HEAD"
        output = self.run("rev-list", "--count", revision)
        try:
            return int(output)
        except ValueError as e:
            raise GitError(
                f"Unexpected commit count from git: {output!r}", ["rev-list", "--count", revision]
            ) from e
