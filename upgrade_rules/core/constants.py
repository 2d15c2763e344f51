"""
Application-wide constants and configuration parameters.

Static rule configuration shared by the upgrade rule engine. Everything in
this module is built once at import time and never written afterwards.
"""

from types import MappingProxyType
from typing import Final, Mapping, Tuple

# ==============================================================================
# VERSION AND COMPATIBILITY CONSTANTS
# ==============================================================================

# Minimum source patch required for an upgrade to the next major X.0.
# Key is (from_major, from_minor). A line missing here may never cross
# into the next major.
MIN_PATCH_FOR_MAJOR_UPGRADE: Final[Mapping[Tuple[int, int], int]] = MappingProxyType(
    {
        (3, 12): 7,  # 3.12.x -> 4.0 requires at least 3.12.7
    }
)

# Largest patch value accepted when parsing; anything bigger counts as unparseable
MAX_PATCH_VALUE: Final[int] = 2**63 - 1

VERSION_SEPARATOR: Final[str] = "."

# ==============================================================================
# LOGGING CONSTANTS
# ==============================================================================

LOG_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)-8s - [%(filename)s:%(lineno)d] - %(message)s"
)
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
