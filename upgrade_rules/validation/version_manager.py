"""
Version component extraction and transition classification.

Handles version string parsing for the upgrade rule engine: pulling the
numeric patch out of "MAJOR.MINOR.PATCH[suffix]" strings and describing what
kind of change a transition is.
"""

import re
import logging
from typing import Any, Optional, Tuple

from ..core.constants import MAX_PATCH_VALUE, VERSION_SEPARATOR
from ..core.dataclasses import Version
from ..core.enums import VersionAction

logger = logging.getLogger(__name__)

_LEADING_DIGITS = re.compile(r"[0-9]*")


def as_version(value: Any):
    """
    Coerce plain strings into Version values.

    Objects that already expose major(), minor() and a string form are
    passed through untouched.
    """
    if isinstance(value, str):
        return Version(value)
    return value


def _patch_segment(version: Any) -> Optional[str]:
    """Return everything from the third component on, or None if absent."""
    parts = str(version).split(VERSION_SEPARATOR)
    if len(parts) < 3:
        return None
    return VERSION_SEPARATOR.join(parts[2:])


def parse_patch(version: Any) -> Optional[int]:
    """
    Parse the numeric patch component of a version.

    Only the leading run of decimal digits of the third component counts,
    so "3.12.7-rc1" and "3.12.7rc1" both give 7.

    Args:
        version: Version value or version string

    Returns:
        The patch number, 0 when the version has no third component, or
        None when the third component has no parseable leading digits
    """
    segment = _patch_segment(version)
    if segment is None:
        return 0

    digits = _LEADING_DIGITS.match(segment).group(0)
    if not digits:
        logger.warning(f"Could not parse patch component of version: {version}")
        return None

    patch = int(digits)
    if patch > MAX_PATCH_VALUE:
        logger.warning(f"Patch component out of range in version: {version}")
        return None
    return patch


def extract_patch(version: Any) -> int:
    """
    Extract the numeric patch component, falling back to 0.

    Examples:
        "3.12.7"     -> 7
        "3.12.7-rc1" -> 7
        "3.12.rc7"   -> 0
        "3.12"       -> 0
    """
    patch = parse_patch(version)
    return patch if patch is not None else 0


def parse_version(version: Any) -> Tuple[int, int, int, str]:
    """
    Split a version into comparable components.

    Args:
        version: Version value or version string

    Returns:
        Tuple of (major, minor, patch, suffix) where suffix is whatever
        follows the patch digits, e.g. "-rc1"
    """
    version = as_version(version)
    segment = _patch_segment(version) or ""
    digits = _LEADING_DIGITS.match(segment).group(0)
    return (
        version.major(),
        version.minor(),
        extract_patch(version),
        segment[len(digits):],
    )


def compare_versions(from_version: Any, to_version: Any) -> VersionAction:
    """
    Compare source and target versions to describe the type of change.

    The classification is informational only; whether the change is
    permitted is decided by the upgrade rules.

    Args:
        from_version: Current deployment version
        to_version: Proposed target version

    Returns:
        VersionAction indicating the type of version change
    """
    current = parse_version(from_version)
    target = parse_version(to_version)

    # Compare major versions
    if current[0] > target[0]:
        return VersionAction.MAJOR_DOWNGRADE
    elif current[0] < target[0]:
        return VersionAction.MAJOR_UPGRADE

    # Same major version, compare minor versions
    if current[1] > target[1]:
        return VersionAction.MINOR_DOWNGRADE
    elif current[1] < target[1]:
        return VersionAction.MINOR_UPGRADE

    # Same major.minor, compare patch numbers
    if current[2] > target[2]:
        return VersionAction.PATCH_DOWNGRADE
    elif current[2] < target[2]:
        return VersionAction.PATCH_UPGRADE

    return VersionAction.SAME_VERSION
