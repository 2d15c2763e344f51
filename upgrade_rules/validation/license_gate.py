"""
License tier gate in front of the upgrade rules.

A deployment can move from Community to Enterprise, but never back. The gate
rejects an Enterprise -> Community transition before any version rule runs
and otherwise defers entirely to the rule engine.
"""

import logging
from typing import Any, Optional

from ..core.dataclasses import Verdict
from ..core.enums import License, MinorPolicy
from ..core.exceptions import LicenseDowngradeError, UpgradeRuleViolation
from .upgrade_rules import evaluate

logger = logging.getLogger(__name__)


def _as_license(value) -> License:
    if isinstance(value, License):
        return value
    return License.from_string(str(value))


def evaluate_with_license(
    from_version: Any,
    to_version: Any,
    from_license: License,
    to_license: License,
    minor_policy: MinorPolicy = MinorPolicy.STRICT,
) -> Verdict:
    """
    Evaluate a version transition together with a license transition.

    Args:
        from_version: Current deployment version
        to_version: Proposed target version
        from_license: Current license tier
        to_license: Proposed license tier
        minor_policy: Minor-version policy handed to the rule engine

    Returns:
        Verdict; a license downgrade is reported regardless of the versions

    Raises:
        InvalidLicenseError: if a license given as a string cannot be parsed
    """
    from_license = _as_license(from_license)
    to_license = _as_license(to_license)

    if from_license != to_license and from_license == License.ENTERPRISE:
        logger.debug(f"License transition {from_license.value} -> {to_license.value} denied")
        return Verdict.deny(
            LicenseDowngradeError(
                "Upgrade from Enterprise to Community edition is not possible",
                remediation="Keep the Enterprise license for the target deployment",
            )
        )
    return evaluate(from_version, to_version, minor_policy)


def check_upgrade_rules_with_license(
    from_version: Any, to_version: Any, from_license: License, to_license: License
) -> Optional[UpgradeRuleViolation]:
    """
    Check a version transition together with a license transition.

    Returns None when allowed, otherwise the violation describing why not.
    Minor versions may only increment by 1.
    """
    return evaluate_with_license(
        from_version, to_version, from_license, to_license, MinorPolicy.STRICT
    ).violation


def check_soft_upgrade_rules_with_license(
    from_version: Any, to_version: Any, from_license: License, to_license: License
) -> Optional[UpgradeRuleViolation]:
    """
    Same as check_upgrade_rules_with_license, but allows jumping more than
    one minor version.
    """
    return evaluate_with_license(
        from_version, to_version, from_license, to_license, MinorPolicy.PERMISSIVE
    ).violation


def ensure_upgrade_allowed(
    from_version: Any,
    to_version: Any,
    from_license: Optional[License] = None,
    to_license: Optional[License] = None,
    minor_policy: MinorPolicy = MinorPolicy.STRICT,
) -> None:
    """
    Raise the violation if the transition is not allowed.

    The license gate applies when both licenses are given; giving only one
    of them is a usage error.

    Raises:
        UpgradeRuleViolation: the specific subclass for the denial reason
        ValueError: if only one of the two licenses is given
    """
    if (from_license is None) != (to_license is None):
        raise ValueError("from_license and to_license must be given together")

    if from_license is not None:
        verdict = evaluate_with_license(
            from_version, to_version, from_license, to_license, minor_policy
        )
    else:
        verdict = evaluate(from_version, to_version, minor_policy)

    if not verdict.allowed:
        raise verdict.violation
