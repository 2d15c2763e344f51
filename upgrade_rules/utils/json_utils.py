"""
Safe JSON serialization utilities.

Provides utilities for turning verdicts, enums and version values into
JSON-compatible structures for the CLI and the HTTP gateway.
"""

from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..core.dataclasses import Verdict
from ..core.enums import License, MinorPolicy
from ..validation.version_manager import compare_versions


def safe_json_serialize(obj: Any) -> Any:
    """
    Recursively serialize Python objects to JSON-compatible types.

    Handles Enums, dataclasses, exceptions and nested collections; anything
    else falls back to its string form.

    Args:
        obj: Any Python object to serialize

    Returns:
        JSON-compatible representation of the object
    """
    if obj is None:
        return None
    elif isinstance(obj, (str, int, float, bool)):
        return obj
    elif isinstance(obj, Enum):
        return obj.value
    elif isinstance(obj, Verdict):
        return obj.to_dict()
    elif isinstance(obj, dict):
        return {str(k): safe_json_serialize(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [safe_json_serialize(item) for item in obj]
    elif isinstance(obj, BaseException):
        return str(obj)
    elif is_dataclass(obj) and not isinstance(obj, type):
        return safe_json_serialize(asdict(obj))
    return str(obj)


def verdict_report(
    from_version: Any,
    to_version: Any,
    verdict: Verdict,
    minor_policy: MinorPolicy,
    from_license: Optional[License] = None,
    to_license: Optional[License] = None,
) -> Dict[str, Any]:
    """
    Build the result document shared by the CLI and the HTTP gateway.

    Returns:
        Flat dict with the verdict fields plus the transition that was checked
    """
    report = verdict.to_dict()
    report.update(
        {
            "from_version": str(from_version),
            "to_version": str(to_version),
            "version_action": compare_versions(from_version, to_version),
            "minor_policy": minor_policy,
            "from_license": from_license,
            "to_license": to_license,
        }
    )
    return safe_json_serialize(report)
