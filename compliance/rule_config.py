# compliance/rule_config.py
import logging
import os
from dataclasses import dataclass, field

from compliance.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleConfig:
    tags: tuple
    exclude: tuple = field(default_factory=tuple)


def split_names(value):
    """Split a comma-separated list of names, dropping blanks."""
    return [t.strip() for t in value.split(",") if t.strip()]


def _split_env(name):
    """Read a comma-separated env var. Returns None when unset."""
    if name not in os.environ:
        return None
    return split_names(os.environ[name])


def _string_list(raw, key):
    if isinstance(raw, str) or not isinstance(raw, (list, tuple)):
        raise ConfigurationError(f"`{key}` must be a list of strings, got {type(raw).__name__}")
    for item in raw:
        if not isinstance(item, str) or not item.strip():
            raise ConfigurationError(f"`{key}` contains an invalid entry: {item!r}")
    return tuple(item.strip() for item in raw)


def decode_rule_config(raw):
    """Validate a rule configuration mapping with `tags` and optional `exclude`."""
    if not isinstance(raw, dict):
        raise ConfigurationError("Rule configuration must be a mapping")

    unknown = set(raw) - {"tags", "exclude"}
    if unknown:
        raise ConfigurationError(f"Unsupported rule configuration keys: {sorted(unknown)}")

    if raw.get("tags") is None:
        raise ConfigurationError("`tags` is required")
    tags = _string_list(raw["tags"], "tags")
    if not tags:
        raise ConfigurationError("`tags` must list at least one tag name")

    exclude = raw.get("exclude")
    exclude = () if exclude is None else _string_list(exclude, "exclude")

    # duplicates would only repeat names in the issue message
    tags = tuple(dict.fromkeys(tags))
    return RuleConfig(tags=tags, exclude=exclude)


def load_rule_config(tags=None, exclude=None):
    """Build the rule configuration from explicit values or the environment."""
    if tags is None:
        tags = _split_env("REQUIRED_TAGS")
        if tags is not None:
            logger.info(f"Using required tags from env: {tags}")
    if exclude is None:
        exclude = _split_env("EXCLUDE_RESOURCE_TYPES")

    return decode_rule_config({"tags": tags, "exclude": exclude})
