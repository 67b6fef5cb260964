"""Base version discovery from the tag history."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

import semver

from versionvine.models import ResolvedTag

logger = logging.getLogger(__name__)

FALLBACK_VERSION = semver.Version(0, 0, 0)


def parse_tag(tag: str, app_name: str | None = None) -> semver.Version | None:
    """Parse a single tag into its major.minor.patch core.

    Pre-release and build parts of the tag are dropped; only the numeric core
    of an existing tag is trusted.

    Args:
        tag: Raw tag name.
        app_name: Application prefix the tag must carry, if any.

    Returns:
        The version core, or None if the tag does not qualify.
    """
    remainder = tag
    if app_name:
        prefix = f"{app_name}-"
        if not tag.startswith(prefix):
            return None
        remainder = tag[len(prefix) :]

    try:
        version = semver.Version.parse(remainder)
    except ValueError:
        return None
    return version.finalize_version()


def iter_candidates(
    tags: Iterable[str], app_name: str | None = None
) -> Iterator[tuple[str, semver.Version]]:
    """Lazily yield (tag, version) for each qualifying tag, in the order given."""
    for tag in tags:
        version = parse_tag(tag, app_name)
        if version is None:
            logger.debug("Skipping tag %s", tag)
            continue
        yield tag, version


def resolve_tag(tags: Sequence[str], app_name: str | None = None) -> ResolvedTag:
    """Find the base version in a newest-first tag list.

    The first tag that parses wins; later tags are never parsed. When no tag
    qualifies the fallback 0.0.0 is returned, which is how the very first
    release of a repository is versioned.

    Args:
        tags: Tag names reachable from HEAD, newest first.
        app_name: Optional application prefix; tags without '<app_name>-'
            are ignored.

    Returns:
        The resolved base version.
    """
    match = next(iter_candidates(tags, app_name), None)
    if match is not None:
        tag, version = match
        logger.debug("Base version %s from tag %s", version, tag)
        return ResolvedTag(version=version, found=True, tag=tag)

    if tags and not app_name:
        logger.warning(
            "None of the %d tags is a SemVer version. Do you have app names in "
            "your tags? Provide the '--app-name' option.",
            len(tags),
        )
    logger.debug("No usable tag found, falling back to %s", FALLBACK_VERSION)
    return ResolvedTag(version=FALLBACK_VERSION, found=False)
