"""Tests for tag resolution."""

import logging

import pytest

from versionvine.tags import FALLBACK_VERSION, iter_candidates, parse_tag, resolve_tag


class TestParseTag:
    """Tests for single tag parsing."""

    def test_plain_version(self) -> None:
        """Test a plain SemVer tag."""
        assert str(parse_tag("1.2.3")) == "1.2.3"

    def test_prerelease_and_build_dropped(self) -> None:
        """Test only the numeric core of a tag is kept."""
        assert str(parse_tag("1.2.3-rc.1+abc")) == "1.2.3"

    @pytest.mark.parametrize("tag", ["v1.2.3", "1.2", "latest", ""])
    def test_invalid(self, tag: str) -> None:
        """Test tags that are not SemVer."""
        assert parse_tag(tag) is None

    def test_app_prefix_stripped(self) -> None:
        """Test app prefix is required and stripped."""
        assert str(parse_tag("app-2.0.0", app_name="app")) == "2.0.0"

    def test_wrong_app_prefix(self) -> None:
        """Test tags of other applications are ignored."""
        assert parse_tag("other-1.0.0", app_name="app") is None
        assert parse_tag("2.0.0", app_name="app") is None

    def test_prefix_needs_dash(self) -> None:
        """Test the prefix must be followed by a dash."""
        assert parse_tag("app2.0.0", app_name="app") is None


class TestResolveTag:
    """Tests for base version resolution."""

    def test_first_valid_tag_wins(self) -> None:
        """Test newest valid tag is used."""
        resolved = resolve_tag(["1.2.3", "1.2.2", "1.0.0"])
        assert resolved.found is True
        assert resolved.tag == "1.2.3"
        assert str(resolved.version) == "1.2.3"

    def test_order_not_version_sorted(self) -> None:
        """Test tags are taken in the given order, not by precedence."""
        resolved = resolve_tag(["1.0.0", "2.0.0"])
        assert str(resolved.version) == "1.0.0"

    def test_malformed_tags_skipped(self) -> None:
        """Test malformed tags are skipped rather than fatal."""
        resolved = resolve_tag(["nightly", "v9", "0.3.1"])
        assert resolved.tag == "0.3.1"

    def test_app_name_filter(self) -> None:
        """Test tags of other applications are skipped."""
        resolved = resolve_tag(["other-1.0.0", "app-2.0.0", "app-1.0.0"], app_name="app")
        assert resolved.found is True
        assert resolved.tag == "app-2.0.0"
        assert str(resolved.version) == "2.0.0"

    def test_no_tags_fallback(self) -> None:
        """Test fallback to 0.0.0 without tags."""
        resolved = resolve_tag([])
        assert resolved.found is False
        assert resolved.tag is None
        assert resolved.version == FALLBACK_VERSION
        assert str(resolved.version) == "0.0.0"

    def test_no_matching_tags_fallback(self) -> None:
        """Test fallback when no tag carries the app prefix."""
        resolved = resolve_tag(["1.0.0", "other-2.0.0"], app_name="app")
        assert resolved.found is False
        assert str(resolved.version) == "0.0.0"

    def test_warns_about_app_names(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test a hint is logged when only prefixed tags exist."""
        with caplog.at_level(logging.WARNING, logger="versionvine"):
            resolve_tag(["app-1.0.0"])
        assert "--app-name" in caplog.text

    def test_no_warning_with_app_name(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test no hint when an app name is already configured."""
        with caplog.at_level(logging.WARNING, logger="versionvine"):
            resolve_tag(["1.0.0"], app_name="app")
        assert "--app-name" not in caplog.text


class TestIterCandidates:
    """Tests for lazy candidate iteration."""

    def test_stops_at_first_match(self) -> None:
        """Test later tags are not consumed once a match is found."""
        consumed: list[str] = []

        def tags():
            for tag in ["junk", "1.0.0", "0.9.0"]:
                consumed.append(tag)
                yield tag

        tag, version = next(iter_candidates(tags()))
        assert tag == "1.0.0"
        assert consumed == ["junk", "1.0.0"]
