"""
Validation package for the upgrade rules library.

Contains version component extraction, the transition rule engine and the
license gate that sits in front of it.
"""

from .version_manager import (
    as_version,
    compare_versions,
    extract_patch,
    parse_patch,
    parse_version,
)
from .upgrade_rules import (
    check_soft_upgrade_rules,
    check_upgrade_rules,
    evaluate,
)
from .license_gate import (
    check_soft_upgrade_rules_with_license,
    check_upgrade_rules_with_license,
    ensure_upgrade_allowed,
    evaluate_with_license,
)

__all__ = [
    "as_version",
    "compare_versions",
    "extract_patch",
    "parse_patch",
    "parse_version",
    "check_soft_upgrade_rules",
    "check_upgrade_rules",
    "evaluate",
    "check_soft_upgrade_rules_with_license",
    "check_upgrade_rules_with_license",
    "ensure_upgrade_allowed",
    "evaluate_with_license",
]
