"""
Application enumerations for type safety and clear intent definitions.

Centralized enum definitions for license tiers, minor-version policies,
denial reasons and version transition types used by the upgrade rules.
"""

from enum import Enum


class License(Enum):
    """License tier attached to a deployment."""

    COMMUNITY = "community"
    ENTERPRISE = "enterprise"

    @classmethod
    def from_string(cls, value: str) -> "License":
        """
        Parse a license name as given on the command line or in an API payload.

        Accepts the enum values plus the short edition markers "ce" and "ee",
        case-insensitively.

        Raises:
            InvalidLicenseError: if the value names no known license tier
        """
        from .exceptions import InvalidLicenseError

        normalized = (value or "").strip().lower()
        aliases = {"ce": cls.COMMUNITY, "ee": cls.ENTERPRISE}
        if normalized in aliases:
            return aliases[normalized]
        for member in cls:
            if member.value == normalized:
                return member
        raise InvalidLicenseError(
            f"Unknown license '{value}'",
            remediation="Use one of: community, enterprise",
        )


class MinorPolicy(Enum):
    """How minor-version steps inside one major line are treated."""

    STRICT = "strict"  # minor may only increment by 1
    PERMISSIVE = "permissive"  # any forward minor jump


class DenialReason(Enum):
    """Reasons an upgrade transition can be rejected."""

    MAJOR_DOWNGRADE = "major_downgrade"
    MAJOR_SKIP = "major_skip"
    MAJOR_UPGRADE_NOT_TO_ZERO = "major_upgrade_not_to_zero"
    MAJOR_UPGRADE_NOT_ALLOWED_FROM_LINE = "major_upgrade_not_allowed_from_line"
    INVALID_SOURCE_VERSION_FORMAT = "invalid_source_version_format"
    PATCH_TOO_LOW_FOR_MAJOR_UPGRADE = "patch_too_low_for_major_upgrade"
    MINOR_DOWNGRADE = "minor_downgrade"
    MINOR_SKIP = "minor_skip"
    LICENSE_DOWNGRADE = "license_downgrade"


class VersionAction(Enum):
    """Types of version changes."""

    SAME_VERSION = "same_version"
    PATCH_UPGRADE = "patch_upgrade"
    PATCH_DOWNGRADE = "patch_downgrade"
    MINOR_UPGRADE = "minor_upgrade"
    MINOR_DOWNGRADE = "minor_downgrade"
    MAJOR_UPGRADE = "major_upgrade"
    MAJOR_DOWNGRADE = "major_downgrade"
