# tag_hunter.py
import argparse
import logging
import sys

from compliance.errors import TagHunterError
from compliance.rule_config import load_rule_config, split_names
from compliance.tag_checker import check_missing_tags
from reporting.report_builder import build_json_report, build_report
from scanner.plan_scanner import scan_plan
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def run(plan_path, config, as_json=False):
    """Check one Terraform plan. Configuration and evaluation errors propagate."""
    logger.info(f"Tag Hunter started for {plan_path}")

    resources = scan_plan(plan_path)
    issues = check_missing_tags(resources, config)

    if as_json:
        report = build_json_report(issues, len(resources))
    else:
        report = build_report(issues, len(resources))

    result = {
        "status": "ok" if not issues else "issues",
        "resources": len(resources),
        "issues": issues,
        "report": report,
    }

    logger.info(f"Tag Hunter completed: {result['status']}, {len(issues)} issues")
    return result


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Report azurerm resources in a Terraform JSON plan that are missing required tags.",
        epilog="Environment: REQUIRED_TAGS, EXCLUDE_RESOURCE_TYPES, LOG_LEVEL.",
    )
    parser.add_argument("plan_file", help="Path to `terraform show -json` output.")
    parser.add_argument("--tags", type=split_names, help="Comma-separated required tag names.")
    parser.add_argument("--exclude", type=split_names, help="Comma-separated resource types to skip.")
    parser.add_argument("--json", action="store_true", help="Output report in JSON format.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.debug else None)

    try:
        config = load_rule_config(tags=args.tags, exclude=args.exclude)
        result = run(args.plan_file, config, as_json=args.json)
    except TagHunterError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 2

    print(result["report"])
    return 1 if result["issues"] else 0


if __name__ == "__main__":
    sys.exit(main())
