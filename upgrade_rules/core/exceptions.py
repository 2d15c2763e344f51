"""
Custom exception classes for upgrade rule evaluation.

Provides one exception class per denial reason so callers can tell a
malformed source version apart from a deliberate policy rejection. Rule
checks return these as values; only ensure_upgrade_allowed raises them.
"""

from .enums import DenialReason


class UpgradeError(Exception):
    """Base exception for all upgrade-related errors"""

    def __init__(self, message: str, remediation: str = None):
        self.message = message
        self.remediation = remediation
        super().__init__(self.message)


class InvalidLicenseError(UpgradeError, ValueError):
    """Raised when a license name cannot be parsed"""

    pass


class UpgradeRuleViolation(UpgradeError):
    """Base class for a rejected version or license transition"""

    reason: DenialReason = None


class MajorDowngradeError(UpgradeRuleViolation):
    """Target major version is lower than the source major version"""

    reason = DenialReason.MAJOR_DOWNGRADE


class MajorSkipError(UpgradeRuleViolation):
    """Target major version skips one or more major lines"""

    reason = DenialReason.MAJOR_SKIP


class MajorUpgradeNotToZeroError(UpgradeRuleViolation):
    """Major upgrade whose target is not an X.0 release"""

    reason = DenialReason.MAJOR_UPGRADE_NOT_TO_ZERO


class MajorUpgradeNotAllowedFromLineError(UpgradeRuleViolation):
    """Major upgrade from a major.minor line with no minimum-patch rule"""

    reason = DenialReason.MAJOR_UPGRADE_NOT_ALLOWED_FROM_LINE


class InvalidSourceVersionFormatError(UpgradeRuleViolation):
    """Source patch component has no parseable leading digits"""

    reason = DenialReason.INVALID_SOURCE_VERSION_FORMAT


class PatchTooLowForMajorUpgradeError(UpgradeRuleViolation):
    """Source patch is below the minimum required for the major upgrade"""

    reason = DenialReason.PATCH_TOO_LOW_FOR_MAJOR_UPGRADE


class MinorDowngradeError(UpgradeRuleViolation):
    """Target minor version is lower than the source minor version"""

    reason = DenialReason.MINOR_DOWNGRADE


class MinorSkipError(UpgradeRuleViolation):
    """Strict policy only: target minor version skips one or more minors"""

    reason = DenialReason.MINOR_SKIP


class LicenseDowngradeError(UpgradeRuleViolation):
    """Transition from the Enterprise edition to the Community edition"""

    reason = DenialReason.LICENSE_DOWNGRADE
