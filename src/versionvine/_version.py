"""Version of the version-vine package itself."""

from __future__ import annotations

__version__ = "0.1.2"
