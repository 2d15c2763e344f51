"""
================================================================================
FILE:               app_gateway/api/routers/upgrade_rules.py
DESCRIPTION:        FastAPI router for upgrade path validation
================================================================================

ARCHITECTURE:
- Accepts a proposed version (and optional license) transition
- Evaluates it synchronously with the upgrade_rules library
- A denial is a normal result: HTTP 200 with allowed=false and a reason
- Malformed payloads are rejected by pydantic (HTTP 422)
================================================================================
"""

from typing import List, Optional

from fastapi import APIRouter
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from upgrade_rules.core.constants import MIN_PATCH_FOR_MAJOR_UPGRADE
from upgrade_rules.core.enums import License, MinorPolicy
from upgrade_rules.utils.json_utils import verdict_report
from upgrade_rules.validation.license_gate import evaluate_with_license
from upgrade_rules.validation.upgrade_rules import evaluate

from app_gateway.core.config import settings

# ================================================================================
# SECTION 1: REQUEST/RESPONSE MODELS
# ================================================================================


class UpgradeRulesRequestModel(BaseModel):
    """
    Request model for an upgrade path check.

    Licenses are optional, but must be given together; when present the
    license gate runs before the version rules.
    """

    from_version: str = Field(
        ...,
        description="Current deployment version",
        min_length=1,
        examples=["3.12.7", "3.12.7-rc1"],
    )
    to_version: str = Field(
        ...,
        description="Proposed target version",
        min_length=1,
        examples=["4.0.0"],
    )
    from_license: Optional[License] = Field(
        default=None,
        description="Current license tier",
        examples=["community", "enterprise"],
    )
    to_license: Optional[License] = Field(
        default=None,
        description="Target license tier",
        examples=["enterprise"],
    )
    minor_policy: Optional[MinorPolicy] = Field(
        default=None,
        description="strict (minor +1 only) or permissive (any forward minor jump). "
        "Defaults to the gateway's configured policy.",
    )

    @field_validator("from_license", "to_license", mode="before")
    @classmethod
    def parse_license(cls, value):
        if value is None or isinstance(value, License):
            return value
        # InvalidLicenseError is a ValueError, so pydantic reports it as a 422
        return License.from_string(str(value))

    @model_validator(mode="after")
    def licenses_given_together(self):
        if (self.from_license is None) != (self.to_license is None):
            raise ValueError("from_license and to_license must be given together")
        return self

    model_config = ConfigDict(
        extra="forbid",  # Reject any unknown fields for strict validation
        json_schema_extra={
            "example": {
                "from_version": "3.12.7",
                "to_version": "4.0.0",
                "from_license": "community",
                "to_license": "enterprise",
                "minor_policy": "strict",
            }
        },
    )


class UpgradeRulesResponseModel(BaseModel):
    """Verdict for a single transition."""

    allowed: bool
    reason: Optional[str] = None
    message: Optional[str] = None
    remediation: Optional[str] = None
    from_version: str
    to_version: str
    version_action: str
    minor_policy: str
    from_license: Optional[str] = None
    to_license: Optional[str] = None


class MinPatchRuleModel(BaseModel):
    """One entry of the minimum-patch table."""

    from_line: str = Field(..., description="Source major.minor line")
    target_major: str = Field(..., description="Next major release, always X.0")
    min_patch: int = Field(..., description="Minimum source patch required")
    min_version: str = Field(..., description="Lowest source version allowed to upgrade")


# ================================================================================
# SECTION 2: FASTAPI ROUTER SETUP
# ================================================================================

upgrade_rules_router = APIRouter(
    prefix="/api/operations/upgrade-rules",
    tags=["Upgrade Rules"],
    responses={
        422: {"description": "Unprocessable Entity - Invalid payload"},
    },
)

router = upgrade_rules_router


def default_minor_policy() -> MinorPolicy:
    """Minor policy configured for requests that do not name one."""
    try:
        return MinorPolicy(settings.UPGRADE_RULES_DEFAULT_POLICY.strip().lower())
    except ValueError:
        logger.warning(
            f"Unknown UPGRADE_RULES_DEFAULT_POLICY "
            f"'{settings.UPGRADE_RULES_DEFAULT_POLICY}', falling back to strict"
        )
        return MinorPolicy.STRICT


# ================================================================================
# SECTION 3: ENDPOINTS
# ================================================================================


@upgrade_rules_router.post("/check", response_model=UpgradeRulesResponseModel)
async def check_upgrade_path(request: UpgradeRulesRequestModel):
    """
    Validate a proposed version (and license) transition.

    Returns the verdict; a denied transition still answers with HTTP 200.
    """
    minor_policy = request.minor_policy or default_minor_policy()

    if request.from_license is not None:
        verdict = evaluate_with_license(
            request.from_version,
            request.to_version,
            request.from_license,
            request.to_license,
            minor_policy,
        )
    else:
        verdict = evaluate(request.from_version, request.to_version, minor_policy)

    if verdict.allowed:
        logger.info(
            f"Upgrade {request.from_version} -> {request.to_version} allowed "
            f"({minor_policy.value})"
        )
    else:
        logger.info(
            f"Upgrade {request.from_version} -> {request.to_version} denied "
            f"({minor_policy.value}): {verdict.message}"
        )

    return verdict_report(
        request.from_version,
        request.to_version,
        verdict,
        minor_policy,
        request.from_license,
        request.to_license,
    )


@upgrade_rules_router.get("/min-patch", response_model=List[MinPatchRuleModel])
async def list_min_patch_rules():
    """
    Returns the source lines that may upgrade to the next major release.
    """
    rules = [
        {
            "from_line": f"{major}.{minor}",
            "target_major": f"{major + 1}.0",
            "min_patch": patch,
            "min_version": f"{major}.{minor}.{patch}",
        }
        for (major, minor), patch in sorted(MIN_PATCH_FOR_MAJOR_UPGRADE.items())
    ]
    logger.debug(f"Returning {len(rules)} minimum-patch rules")
    return rules
