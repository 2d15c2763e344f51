"""Tests for version component extraction and classification."""

import pytest

from upgrade_rules.core.dataclasses import Version
from upgrade_rules.core.enums import VersionAction
from upgrade_rules.validation.version_manager import (
    as_version,
    compare_versions,
    extract_patch,
    parse_patch,
    parse_version,
)


class TestExtractPatch:
    @pytest.mark.parametrize(
        "version,expected",
        [
            ("3.12.7", 7),
            ("3.12.7-rc1", 7),
            ("3.12.7rc1", 7),
            ("3.12.007", 7),
            ("3.2.11111", 11111),
            ("3.12.7.1", 7),
            ("3.12.rc7", 0),
            ("3.12.", 0),
            ("3.12", 0),
            ("3", 0),
            ("", 0),
            ("not-a-version", 0),
            ("3.12.99999999999999999999", 0),
        ],
    )
    def test_extract_patch(self, version, expected):
        assert extract_patch(version) == expected

    def test_accepts_version_objects(self):
        assert extract_patch(Version("3.12.8-beta")) == 8

    def test_is_idempotent(self):
        assert extract_patch("3.12.7-rc1") == extract_patch("3.12.7-rc1")


class TestParsePatch:
    def test_missing_component_is_zero(self):
        assert parse_patch("3.12") == 0

    @pytest.mark.parametrize("version", ["3.12.rc7", "3.12.", "3.12.-1"])
    def test_non_numeric_component_is_none(self, version):
        assert parse_patch(version) is None

    def test_patch_at_limit_is_parsed(self):
        assert parse_patch("1.0.9223372036854775807") == 2**63 - 1

    def test_patch_above_limit_is_none(self):
        assert parse_patch("1.0.9223372036854775808") is None


class TestVersion:
    @pytest.mark.parametrize(
        "raw,major,minor",
        [
            ("3.12.7", 3, 12),
            ("3.12.rc7", 3, 12),
            ("4.0", 4, 0),
            ("5", 5, 0),
            ("v3.12.7", 0, 12),
            ("", 0, 0),
        ],
    )
    def test_components(self, raw, major, minor):
        version = Version(raw)
        assert version.major() == major
        assert version.minor() == minor

    def test_string_form_is_stripped_raw_value(self):
        assert str(Version(" 3.12.7-rc1 ")) == "3.12.7-rc1"

    def test_is_immutable(self):
        version = Version("3.12.7")
        with pytest.raises(AttributeError):
            version.raw = "4.0.0"

    def test_as_version_wraps_strings_only(self):
        version = Version("1.2.3")
        assert as_version(version) is version
        assert as_version("1.2.3") == version


class TestParseVersion:
    @pytest.mark.parametrize(
        "version,expected",
        [
            ("3.12.7", (3, 12, 7, "")),
            ("3.12.7-rc1", (3, 12, 7, "-rc1")),
            ("3.12.rc7", (3, 12, 0, "rc7")),
            ("3.12.7-rc.1", (3, 12, 7, "-rc.1")),
            ("4.0", (4, 0, 0, "")),
        ],
    )
    def test_parse_version(self, version, expected):
        assert parse_version(version) == expected


class TestCompareVersions:
    @pytest.mark.parametrize(
        "from_version,to_version,action",
        [
            ("1.2.3", "1.2.3", VersionAction.SAME_VERSION),
            ("3.2.2", "3.2.88", VersionAction.PATCH_UPGRADE),
            ("3.2.88", "3.2.8", VersionAction.PATCH_DOWNGRADE),
            ("3.2.2", "3.3.0", VersionAction.MINOR_UPGRADE),
            ("4.1.0", "4.0.0", VersionAction.MINOR_DOWNGRADE),
            ("3.12.7", "4.0.0", VersionAction.MAJOR_UPGRADE),
            ("2.2.3", "1.2.3", VersionAction.MAJOR_DOWNGRADE),
            ("3.12.7-rc1", "3.12.7", VersionAction.SAME_VERSION),
        ],
    )
    def test_compare_versions(self, from_version, to_version, action):
        assert compare_versions(from_version, to_version) is action
