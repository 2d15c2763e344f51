"""
Core package for the upgrade rules library.

Contains fundamental data structures, constants, enumerations, and exceptions
used throughout the rule engine, the CLI and the HTTP gateway.
"""

from .dataclasses import Verdict, Version
from .enums import DenialReason, License, MinorPolicy, VersionAction
from .exceptions import (
    InvalidLicenseError,
    InvalidSourceVersionFormatError,
    LicenseDowngradeError,
    MajorDowngradeError,
    MajorSkipError,
    MajorUpgradeNotAllowedFromLineError,
    MajorUpgradeNotToZeroError,
    MinorDowngradeError,
    MinorSkipError,
    PatchTooLowForMajorUpgradeError,
    UpgradeError,
    UpgradeRuleViolation,
)
from .constants import (
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    MAX_PATCH_VALUE,
    MIN_PATCH_FOR_MAJOR_UPGRADE,
)

__all__ = [
    # Data classes
    "Verdict",
    "Version",
    # Enums
    "DenialReason",
    "License",
    "MinorPolicy",
    "VersionAction",
    # Exceptions
    "UpgradeError",
    "UpgradeRuleViolation",
    "InvalidLicenseError",
    "MajorDowngradeError",
    "MajorSkipError",
    "MajorUpgradeNotToZeroError",
    "MajorUpgradeNotAllowedFromLineError",
    "InvalidSourceVersionFormatError",
    "PatchTooLowForMajorUpgradeError",
    "MinorDowngradeError",
    "MinorSkipError",
    "LicenseDowngradeError",
    # Constants
    "LOG_FORMAT",
    "LOG_DATE_FORMAT",
    "MAX_PATCH_VALUE",
    "MIN_PATCH_FOR_MAJOR_UPGRADE",
]
