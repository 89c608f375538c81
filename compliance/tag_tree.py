# compliance/tag_tree.py
"""
Uniform shape for a resource's evaluated ``tags`` attribute.

Every value is one of:

- ``ABSENT``: the resource declares no tags attribute.
- ``Leaf``: a primitive (or any non-mapping) value bound to a name.
- ``Grouping``: a mapping of name -> ``Leaf`` | ``Grouping``.
"""
from collections.abc import Mapping
from dataclasses import dataclass, field

from compliance.errors import EvaluationError


class Absent:
    """Marker for a resource without a tags attribute. Use the ``ABSENT`` instance."""

    def __repr__(self):
        return "ABSENT"


ABSENT = Absent()


@dataclass(frozen=True)
class Leaf:
    name: str
    value: object = None


@dataclass(frozen=True)
class Grouping:
    entries: dict = field(default_factory=dict)


def _contains_unknown(marker):
    """Terraform marks unknown values with ``true`` at any depth of ``after_unknown``."""
    if marker is True:
        return True
    if isinstance(marker, Mapping):
        return any(_contains_unknown(v) for v in marker.values())
    if isinstance(marker, (list, tuple)):
        return any(_contains_unknown(v) for v in marker)
    return False


def classify(name, value):
    """Classify one entry of a grouping."""
    if isinstance(value, Mapping):
        return Grouping({str(k): classify(str(k), v) for k, v in value.items()})
    return Leaf(name, value)


def to_tag_value(raw, unknown=False, address=None):
    """
    Convert an evaluated tags attribute into ``ABSENT``, ``Leaf`` or ``Grouping``.

    Raises EvaluationError if any part of the value is still unknown.
    """
    if _contains_unknown(unknown):
        raise EvaluationError(
            f"Tags of {address or 'resource'} could not be evaluated to a known value",
            address=address,
        )
    if raw is None:
        return ABSENT
    return classify("tags", raw)
