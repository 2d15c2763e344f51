"""Utility helpers for the upgrade rules library."""

from .json_utils import safe_json_serialize, verdict_report

__all__ = ["safe_json_serialize", "verdict_report"]
