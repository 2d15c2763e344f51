"""
Upgrade rules for clustered deployments.

Decides whether a proposed version transition, and optionally a license
tier transition, is permitted before a rolling upgrade is started.

    >>> from upgrade_rules import check_upgrade_rules
    >>> check_upgrade_rules("3.12.7", "4.0.0") is None
    True
"""

from .core import (
    DenialReason,
    License,
    MinorPolicy,
    UpgradeError,
    UpgradeRuleViolation,
    Verdict,
    Version,
    VersionAction,
)
from .validation import (
    check_soft_upgrade_rules,
    check_soft_upgrade_rules_with_license,
    check_upgrade_rules,
    check_upgrade_rules_with_license,
    compare_versions,
    ensure_upgrade_allowed,
    evaluate,
    evaluate_with_license,
    extract_patch,
)

__version__ = "1.0.0"

__all__ = [
    "DenialReason",
    "License",
    "MinorPolicy",
    "UpgradeError",
    "UpgradeRuleViolation",
    "Verdict",
    "Version",
    "VersionAction",
    "check_soft_upgrade_rules",
    "check_soft_upgrade_rules_with_license",
    "check_upgrade_rules",
    "check_upgrade_rules_with_license",
    "compare_versions",
    "ensure_upgrade_allowed",
    "evaluate",
    "evaluate_with_license",
    "extract_patch",
]
