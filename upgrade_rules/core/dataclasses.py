"""
Data classes for upgrade rule evaluation.

Defines the immutable version value consumed by the rule engine and the
verdict it hands back to callers.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .constants import VERSION_SEPARATOR
from .exceptions import UpgradeRuleViolation

_NUMERIC_COMPONENT = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Version:
    """
    Software version in the form "MAJOR.MINOR.PATCH[suffix]".

    The raw string is kept as given; components are parsed on access.
    Components that are missing or not plain decimal numbers read as 0.
    """

    raw: str

    def __post_init__(self):
        object.__setattr__(self, "raw", str(self.raw).strip())

    def __str__(self) -> str:
        return self.raw

    def _component(self, index: int) -> int:
        parts = self.raw.split(VERSION_SEPARATOR)
        if len(parts) <= index:
            return 0
        if not _NUMERIC_COMPONENT.fullmatch(parts[index]):
            return 0
        return int(parts[index])

    def major(self) -> int:
        return self._component(0)

    def minor(self) -> int:
        return self._component(1)


@dataclass(frozen=True)
class Verdict:
    """Outcome of evaluating a single proposed transition."""

    allowed: bool
    violation: Optional[UpgradeRuleViolation] = None

    @classmethod
    def allow(cls) -> "Verdict":
        return cls(allowed=True)

    @classmethod
    def deny(cls, violation: UpgradeRuleViolation) -> "Verdict":
        return cls(allowed=False, violation=violation)

    @property
    def reason(self):
        return self.violation.reason if self.violation else None

    @property
    def message(self) -> Optional[str]:
        return self.violation.message if self.violation else None

    @property
    def remediation(self) -> Optional[str]:
        return self.violation.remediation if self.violation else None

    def to_dict(self) -> Dict[str, Any]:
        """Flatten the verdict into plain values for JSON output."""
        return {
            "allowed": self.allowed,
            "reason": self.reason.value if self.reason else None,
            "message": self.message,
            "remediation": self.remediation,
        }
