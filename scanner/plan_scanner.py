# scanner/plan_scanner.py
import json
import logging
from dataclasses import dataclass

from compliance.errors import EvaluationError

logger = logging.getLogger(__name__)

TAGS_ATTRIBUTE = "tags"


@dataclass(frozen=True)
class Location:
    """Where an issue is anchored: a resource declaration or one of its attributes."""

    filename: str
    address: str
    attribute: str = None

    def __str__(self):
        target = f"{self.address}.{self.attribute}" if self.attribute else self.address
        return f"{self.filename}:{target}"


def _is_deleted(actions):
    # create_before_destroy replacements still produce a resource
    return "delete" in actions and "create" not in actions and "update" not in actions


def _planned(change):
    planned = change.get("change")
    return planned if isinstance(planned, dict) else {}


def _resource_from_change(change, filename):
    address = change.get("address", "unknown")
    planned = _planned(change)
    values = planned.get("after") or {}
    unknown = planned.get("after_unknown") or {}
    if not isinstance(values, dict):
        values = {}
    if not isinstance(unknown, dict):
        unknown = {}

    tags = values.get(TAGS_ATTRIBUTE)
    tags_unknown = unknown.get(TAGS_ATTRIBUTE, False)
    has_tags = tags is not None or bool(tags_unknown)

    return {
        "type": change.get("type", ""),
        "name": change.get("name", ""),
        "address": address,
        "tags": tags,
        "tags_unknown": tags_unknown,
        "location": Location(filename, address, TAGS_ATTRIBUTE if has_tags else None),
    }


def scan_plan_data(data, filename="plan.json"):
    """Extract managed resources and their evaluated tags from a Terraform JSON plan."""
    if not isinstance(data, dict):
        raise EvaluationError(f"{filename} is not a Terraform JSON plan")

    resources = []
    for change in data.get("resource_changes") or []:
        if not isinstance(change, dict):
            logger.debug(f"Skipping malformed resource change: {change!r}")
            continue
        address = change.get("address", "unknown")
        if change.get("mode", "managed") != "managed":
            logger.debug(f"Skipping data source {address}")
            continue
        actions = _planned(change).get("actions") or []
        if _is_deleted(actions):
            logger.debug(f"Skipping {address} (actions: {actions})")
            continue
        resources.append(_resource_from_change(change, filename))

    logger.info(f"Found {len(resources)} managed resources in {filename}")
    return resources


def scan_plan(path):
    """Load a plan produced by `terraform show -json` and scan it."""
    logger.info(f"Reading Terraform plan {path}")
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise EvaluationError(f"Plan file not found: {path}") from e
    except OSError as e:
        raise EvaluationError(f"Could not read plan file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise EvaluationError(f"Plan file {path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise EvaluationError(f"Could not parse JSON from plan file {path}: {e}") from e

    return scan_plan_data(data, filename=str(path))
