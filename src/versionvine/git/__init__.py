"""Git integration."""

from versionvine.errors import GitError
from versionvine.git.client import GitClient

__all__ = [
    "GitClient",
    "GitError",
]
