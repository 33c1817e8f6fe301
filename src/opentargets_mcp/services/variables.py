"""
Query variable helpers.

GraphQL treats an explicit null differently from an omitted variable, so
unset tool inputs are removed before a request is sent.
"""

from typing import Any


def drop_unset(variables: dict[str, Any]) -> dict[str, Any]:
    """
    Return a copy of ``variables`` without entries whose value is None.

    Falsy values (``False``, ``0``, ``""``, ``[]``) are kept; only unset
    entries are removed.

    Args:
        variables: Mapping from GraphQL variable name to value

    Returns:
        New dict with every None-valued entry removed
    """
    return {key: value for key, value in variables.items() if value is not None}
