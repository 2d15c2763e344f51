# File Path: app_gateway/core/config.py
"""
Configuration Module
Defines application-wide settings and environment variables.
"""

import os

# --- Environment Configuration Guide ---
# UPGRADE_RULES_DEFAULT_POLICY: minor-version policy applied when a request
# does not name one. "strict" only allows minor +1 steps, "permissive" allows
# any forward minor jump within a major line.

UPGRADE_RULES_DEFAULT_POLICY: str = os.getenv("UPGRADE_RULES_DEFAULT_POLICY", "strict")

# CORS: comma separated list of frontend origins
CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:5173")


class Settings:
    """Base application settings class."""

    APP_TITLE: str = os.getenv("APP_TITLE", "Upgrade Rules Gateway")
    APP_VERSION: str = "1.0.0"
    UPGRADE_RULES_DEFAULT_POLICY: str = UPGRADE_RULES_DEFAULT_POLICY
    CORS_ORIGINS: list = [
        origin.strip() for origin in CORS_ORIGINS.split(",") if origin.strip()
    ]


# Instantiate settings
settings = Settings()
