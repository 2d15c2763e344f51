"""Tests for the license gate and exception-style checks."""

import pytest

from upgrade_rules import (
    DenialReason,
    License,
    MinorPolicy,
    check_soft_upgrade_rules_with_license,
    check_upgrade_rules_with_license,
    ensure_upgrade_allowed,
    evaluate,
    evaluate_with_license,
)
from upgrade_rules.core.exceptions import (
    InvalidLicenseError,
    LicenseDowngradeError,
    MajorSkipError,
    MinorSkipError,
    UpgradeError,
    UpgradeRuleViolation,
)


class TestLicenseGate:
    def test_enterprise_to_community_denied_for_identical_versions(self):
        verdict = evaluate_with_license(
            "1.2.3", "1.2.3", License.ENTERPRISE, License.COMMUNITY, MinorPolicy.STRICT
        )
        assert not verdict.allowed
        assert verdict.reason is DenialReason.LICENSE_DOWNGRADE
        assert isinstance(verdict.violation, LicenseDowngradeError)

    def test_license_check_runs_before_version_rules(self):
        # Version transition alone would be a major downgrade
        verdict = evaluate_with_license(
            "4.0.0", "2.0.0", License.ENTERPRISE, License.COMMUNITY
        )
        assert verdict.reason is DenialReason.LICENSE_DOWNGRADE

    @pytest.mark.parametrize("policy", [MinorPolicy.STRICT, MinorPolicy.PERMISSIVE])
    @pytest.mark.parametrize(
        "from_version,to_version",
        [("1.2.3", "1.2.3"), ("3.12.7", "4.0.0"), ("4.1.0", "4.0.0"), ("4.0.0", "4.3.0")],
    )
    def test_community_to_enterprise_defers_to_rule_engine(
        self, from_version, to_version, policy
    ):
        verdict = evaluate_with_license(
            from_version, to_version, License.COMMUNITY, License.ENTERPRISE, policy
        )
        expected = evaluate(from_version, to_version, policy)
        assert verdict.allowed is expected.allowed
        assert verdict.reason is expected.reason

    @pytest.mark.parametrize("license_", list(License))
    def test_same_license_defers_to_rule_engine(self, license_):
        verdict = evaluate_with_license(
            "4.0.0", "4.2.0", license_, license_, MinorPolicy.STRICT
        )
        assert verdict.reason is DenialReason.MINOR_SKIP


class TestEnsureUpgradeAllowed:
    def test_allowed_returns_none(self):
        assert ensure_upgrade_allowed("3.12.7", "4.0.0") is None

    def test_raises_specific_violation(self):
        with pytest.raises(MajorSkipError) as exc_info:
            ensure_upgrade_allowed("3.12.7", "5.0.0")
        assert exc_info.value.reason is DenialReason.MAJOR_SKIP
        assert exc_info.value.remediation == "Upgrade to 4.0 first"

    def test_respects_minor_policy(self):
        with pytest.raises(MinorSkipError):
            ensure_upgrade_allowed("4.0.0", "4.2.0")
        ensure_upgrade_allowed("4.0.0", "4.2.0", minor_policy=MinorPolicy.PERMISSIVE)

    def test_applies_license_gate_when_both_given(self):
        with pytest.raises(LicenseDowngradeError):
            ensure_upgrade_allowed(
                "1.2.3", "1.2.3", License.ENTERPRISE, License.COMMUNITY
            )

    @pytest.mark.parametrize(
        "from_license,to_license",
        [(License.ENTERPRISE, None), (None, License.COMMUNITY)],
    )
    def test_single_license_is_rejected(self, from_license, to_license):
        with pytest.raises(ValueError, match="must be given together"):
            ensure_upgrade_allowed("1.2.3", "1.2.3", from_license, to_license)

    def test_accepts_license_and_policy_names(self):
        with pytest.raises(LicenseDowngradeError):
            ensure_upgrade_allowed("1.2.3", "1.2.3", "enterprise", "community")
        ensure_upgrade_allowed("4.0.0", "4.2.0", minor_policy="permissive")

    def test_violations_share_base_class(self):
        with pytest.raises(UpgradeRuleViolation):
            ensure_upgrade_allowed("2.0.0", "1.0.0")
        with pytest.raises(UpgradeError):
            ensure_upgrade_allowed("2.0.0", "1.0.0")


class TestLicenseParsing:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("community", License.COMMUNITY),
            ("Enterprise", License.ENTERPRISE),
            (" CE ", License.COMMUNITY),
            ("ee", License.ENTERPRISE),
        ],
    )
    def test_from_string(self, value, expected):
        assert License.from_string(value) is expected

    @pytest.mark.parametrize("value", ["", "pro", None])
    def test_unknown_license(self, value):
        with pytest.raises(InvalidLicenseError) as exc_info:
            License.from_string(value)
        assert isinstance(exc_info.value, ValueError)
        assert "community, enterprise" in exc_info.value.remediation


class TestLicenseNames:
    @pytest.mark.parametrize(
        "from_license,to_license",
        [("enterprise", "community"), ("EE", "ce"), (License.ENTERPRISE, "community")],
    )
    def test_downgrade_by_name_is_denied(self, from_license, to_license):
        verdict = evaluate_with_license("1.2.3", "1.2.3", from_license, to_license)
        assert verdict.reason is DenialReason.LICENSE_DOWNGRADE

    def test_soft_check_denies_downgrade_by_name(self):
        violation = check_soft_upgrade_rules_with_license(
            "3.12.7", "4.0.0", "enterprise", "community"
        )
        assert isinstance(violation, LicenseDowngradeError)

    def test_strict_check_denies_downgrade_by_name(self):
        violation = check_upgrade_rules_with_license(
            "1.2.3", "1.2.3", "enterprise", "community"
        )
        assert isinstance(violation, LicenseDowngradeError)

    def test_upgrade_by_name_defers_to_rule_engine(self):
        assert check_upgrade_rules_with_license("3.12.7", "4.0.0", "community", "enterprise") is None

    def test_unknown_license_name(self):
        with pytest.raises(InvalidLicenseError):
            evaluate_with_license("1.2.3", "1.2.3", "gold", "community")
