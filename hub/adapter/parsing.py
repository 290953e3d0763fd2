"""Lenient readers for provider catalog payloads.

Catalog bodies come from third parties and drift over time. These
helpers keep what is usable and ignore the rest, so one odd record never
costs a user the rest of their library.
"""

from typing import Any


def as_dict(value: Any) -> dict:
    """The value if it is a dict, else an empty one."""
    return value if isinstance(value, dict) else {}


def labels(values: Any, key: str) -> list[str]:
    """Non-empty strings from a list of labels.

    Dict items contribute their ``key`` entry (Steam uses
    ``description``, Epic ``path``). Anything else is skipped.
    """
    if not isinstance(values, list):
        return []

    result = []
    for value in values:
        if isinstance(value, dict):
            value = value.get(key)
        if isinstance(value, str) and value:
            result.append(value)
    return result
