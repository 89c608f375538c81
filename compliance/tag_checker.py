# compliance/tag_checker.py
import logging

from compliance.tag_tree import Grouping, to_tag_value
from scanner.resource_types import AZURERM_TAGGABLE_RESOURCES

logger = logging.getLogger(__name__)

RULE_NAME = "azurerm_resource_missing_tags"
RULE_SEVERITY = "notice"

ISSUE_MESSAGE = "The resource is missing the following tags: {}."


def leaf_names(root):
    """Collect the name of every leaf at any depth. Grouping names are containers, not tags."""
    found = set()
    if not isinstance(root, Grouping):
        return found

    pending = [root]
    while pending:
        grouping = pending.pop()
        for name, entry in grouping.entries.items():
            if isinstance(entry, Grouping):
                pending.append(entry)
            else:
                found.add(name)
    return found


def find_missing_tags(required, root):
    """
    Return the required tag names that no leaf in the tree satisfies.

    Names keep the order of ``required``; duplicates are dropped. An absent
    attribute or a non-grouping root satisfies nothing.
    """
    present = leaf_names(root)
    missing = []
    for name in required:
        if name not in present and name not in missing:
            missing.append(name)
    return missing


def format_issue_message(missing):
    return ISSUE_MESSAGE.format(", ".join(missing))


def check_missing_tags(resources, config, resource_types=None):
    """Check resources for required tags, one issue per offending resource."""
    taggable = set(AZURERM_TAGGABLE_RESOURCES if resource_types is None else resource_types)
    excluded = set(config.exclude)
    issues = []

    logger.info(f"Checking {len(resources)} resources for missing tags")
    logger.info(f"Required tags: {config.tags}")

    for r in resources:
        resource_type = r.get("type")
        if resource_type in excluded or resource_type not in taggable:
            logger.debug(f"Skipping `{r.get('address')}` ({resource_type})")
            continue

        logger.debug(f"Walk `{r.get('address')}` resource")
        tags = to_tag_value(r.get("tags"), r.get("tags_unknown", False), r.get("address"))
        missing = find_missing_tags(config.tags, tags)

        if missing:
            issues.append({
                "rule": RULE_NAME,
                "severity": RULE_SEVERITY,
                "type": resource_type,
                "address": r.get("address"),
                "missing_tags": missing,
                "message": format_issue_message(missing),
                "location": r.get("location"),
            })

    logger.info(f"Found {len(issues)} resources with missing tags")
    return issues
