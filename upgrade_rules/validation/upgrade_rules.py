"""
Upgrade path rules for deployment version transitions.

Decides whether moving a deployment from one version to another is allowed.
Major-version rules are the same under every policy: no downgrades, no
skipped majors, and a major upgrade must land on X.0 from a source line that
has reached its minimum patch. The minor policy only changes how minor steps
inside one major line are treated.
"""

import logging
from typing import Any, Optional

from ..core.constants import MIN_PATCH_FOR_MAJOR_UPGRADE
from ..core.dataclasses import Verdict
from ..core.enums import MinorPolicy
from ..core.exceptions import (
    InvalidSourceVersionFormatError,
    MajorDowngradeError,
    MajorSkipError,
    MajorUpgradeNotAllowedFromLineError,
    MajorUpgradeNotToZeroError,
    MinorDowngradeError,
    MinorSkipError,
    PatchTooLowForMajorUpgradeError,
    UpgradeRuleViolation,
)
from .version_manager import as_version, parse_patch

logger = logging.getLogger(__name__)


# =============================================================================
# SECTION 1: MAJOR VERSION RULES
# =============================================================================


def _check_major_upgrade(from_version, to_version) -> Optional[UpgradeRuleViolation]:
    """Validate a transition where the target major is the source major + 1."""
    from_major, from_minor = from_version.major(), from_version.minor()
    to_major = to_version.major()

    # Only allow upgrade to X.0 (e.g. 3.12.x -> 4.0.x)
    if to_version.minor() != 0:
        return MajorUpgradeNotToZeroError(
            f"Major versions are different: major upgrades are only allowed to {to_major}.0",
            remediation=f"Upgrade to {to_major}.0 first, then step through the {to_major}.x minors",
        )

    min_patch = MIN_PATCH_FOR_MAJOR_UPGRADE.get((from_major, from_minor))
    if min_patch is None:
        return MajorUpgradeNotAllowedFromLineError(
            f"Major versions are different: major upgrade from "
            f"{from_major}.{from_minor} to {to_major}.0 is not allowed",
            remediation=_supported_source_lines(from_major),
        )

    patch = parse_patch(from_version)
    if patch is None:
        return InvalidSourceVersionFormatError(
            f"Invalid source version format '{from_version}': "
            f"patch component has no numeric value",
            remediation="Report the source version as MAJOR.MINOR.PATCH, e.g. "
            f"{from_major}.{from_minor}.{min_patch}",
        )

    if patch < min_patch:
        return PatchTooLowForMajorUpgradeError(
            f"Upgrade to {to_major}.0 requires at least "
            f"{from_major}.{from_minor}.{min_patch}",
            remediation=f"Upgrade to {from_major}.{from_minor}.{min_patch} or later first",
        )

    return None


def _supported_source_lines(from_major: int) -> str:
    lines = sorted(
        f"{major}.{minor}.{patch}"
        for (major, minor), patch in MIN_PATCH_FOR_MAJOR_UPGRADE.items()
        if major == from_major
    )
    if not lines:
        return f"No {from_major}.x line may be upgraded to {from_major + 1}.0"
    return f"Upgrade to {' or '.join(lines)} (or later patch) first"


# =============================================================================
# SECTION 2: MINOR VERSION RULES
# =============================================================================


def _check_minor_change(
    from_version, to_version, minor_policy: MinorPolicy
) -> Optional[UpgradeRuleViolation]:
    """Validate a transition inside a single major line."""
    from_minor, to_minor = from_version.minor(), to_version.minor()

    # Patch changes always allowed
    if from_minor == to_minor:
        return None

    if to_minor < from_minor:
        return MinorDowngradeError(
            "Downgrade of minor version is not allowed",
            remediation=f"Choose a target version of {from_version.major()}.{from_minor}.x or later",
        )

    if minor_policy is MinorPolicy.STRICT and to_minor != from_minor + 1:
        return MinorSkipError(
            "Minor versions may only increment by 1",
            remediation=f"Upgrade to {from_version.major()}.{from_minor + 1} first",
        )

    return None


# =============================================================================
# SECTION 3: EVALUATION CORE
# =============================================================================


def evaluate(
    from_version: Any, to_version: Any, minor_policy: MinorPolicy = MinorPolicy.STRICT
) -> Verdict:
    """
    Evaluate a proposed version transition under the given minor policy.

    Args:
        from_version: Current deployment version (Version or string)
        to_version: Proposed target version (Version or string)
        minor_policy: STRICT allows minor +1 only, PERMISSIVE any forward jump

    Returns:
        Verdict that is either allowed or carries the violation found

    Raises:
        ValueError: if minor_policy names no known policy
    """
    if not isinstance(minor_policy, MinorPolicy):
        minor_policy = MinorPolicy(str(minor_policy).strip().lower())

    from_version = as_version(from_version)
    to_version = as_version(to_version)
    from_major, to_major = from_version.major(), to_version.major()

    if from_major == to_major:
        violation = _check_minor_change(from_version, to_version, minor_policy)
    elif to_major < from_major:
        violation = MajorDowngradeError(
            "Major versions are different: downgrade of major version is not allowed",
            remediation="Major downgrades require a restore from backup",
        )
    elif to_major > from_major + 1:
        violation = MajorSkipError(
            "Major versions are different: major versions may only increment by 1",
            remediation=f"Upgrade to {from_major + 1}.0 first",
        )
    else:
        violation = _check_major_upgrade(from_version, to_version)

    if violation is None:
        logger.debug(
            f"Upgrade {from_version} -> {to_version} allowed ({minor_policy.value})"
        )
        return Verdict.allow()

    logger.debug(
        f"Upgrade {from_version} -> {to_version} denied ({minor_policy.value}): "
        f"{violation.reason.value}"
    )
    return Verdict.deny(violation)


# =============================================================================
# SECTION 4: PUBLIC CHECKS
# =============================================================================


def check_upgrade_rules(from_version: Any, to_version: Any) -> Optional[UpgradeRuleViolation]:
    """
    Check if a deployment may be upgraded from `from_version` to `to_version`.

    Returns None when allowed, otherwise the violation describing why not.
    Minor versions may only increment by 1.
    """
    return evaluate(from_version, to_version, MinorPolicy.STRICT).violation


def check_soft_upgrade_rules(
    from_version: Any, to_version: Any
) -> Optional[UpgradeRuleViolation]:
    """
    Same as check_upgrade_rules, but allows jumping more than one minor version.
    """
    return evaluate(from_version, to_version, MinorPolicy.PERMISSIVE).violation
