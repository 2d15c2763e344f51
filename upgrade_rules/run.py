"""
Upgrade rules check - command line entry point.

Validates a single proposed transition and prints the verdict as one JSON
document on stdout. Log output goes to stderr so stdout stays parseable.

Exit codes:
    0  transition allowed
    1  transition denied
    2  invalid arguments
"""

import sys
import argparse
import logging
import json
from typing import List, Optional

from .core.constants import LOG_DATE_FORMAT, LOG_FORMAT
from .core.enums import License, MinorPolicy
from .core.exceptions import InvalidLicenseError
from .utils.json_utils import verdict_report
from .validation.license_gate import evaluate_with_license
from .validation.upgrade_rules import evaluate

logger = logging.getLogger(__name__)


def _license_argument(value: str) -> License:
    try:
        return License.from_string(value)
    except InvalidLicenseError as e:
        raise argparse.ArgumentTypeError(f"{e.message}. {e.remediation}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="upgrade-rules",
        description="Check whether a deployment version/license transition is allowed",
    )
    parser.add_argument("--from-version", dest="from_version", required=True)
    parser.add_argument("--to-version", dest="to_version", required=True)
    parser.add_argument(
        "--from-license", dest="from_license", type=_license_argument, default=None
    )
    parser.add_argument(
        "--to-license", dest="to_license", type=_license_argument, default=None
    )
    policy_group = parser.add_mutually_exclusive_group()
    policy_group.add_argument(
        "--minor-policy",
        dest="minor_policy",
        choices=[policy.value for policy in MinorPolicy],
        default=MinorPolicy.STRICT.value,
    )
    policy_group.add_argument(
        "--soft",
        action="store_true",
        help="Allow jumping more than one minor version (same as --minor-policy permissive)",
    )
    parser.add_argument("--pretty", action="store_true", help="Indent JSON output")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, evaluate the transition and print the verdict."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
    )

    if (args.from_license is None) != (args.to_license is None):
        parser.error("--from-license and --to-license must be given together")

    minor_policy = MinorPolicy.PERMISSIVE if args.soft else MinorPolicy(args.minor_policy)

    logger.info(
        f"[MAIN] Checking {args.from_version} -> {args.to_version} ({minor_policy.value})"
    )

    if args.from_license is not None:
        verdict = evaluate_with_license(
            args.from_version,
            args.to_version,
            args.from_license,
            args.to_license,
            minor_policy,
        )
    else:
        verdict = evaluate(args.from_version, args.to_version, minor_policy)

    report = verdict_report(
        args.from_version,
        args.to_version,
        verdict,
        minor_policy,
        args.from_license,
        args.to_license,
    )
    print(json.dumps(report, indent=2 if args.pretty else None), flush=True)

    if not verdict.allowed:
        logger.info(f"[MAIN] Denied: {verdict.message}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
