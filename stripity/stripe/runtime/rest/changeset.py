"""Parameter casting for create and update requests.

A changeset is the caller's dict of changes filtered against the keys an
endpoint accepts. Unknown keys are dropped rather than sent, so a typo never
reaches the API as an unexpected parameter.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any, Literal

Action = Literal["create", "update"]


def cast(
    changes: Mapping[str, Any],
    valid_keys: Collection[str] | Mapping[str, Any],
    action: Action,
    nullable_keys: Collection[str] = (),
) -> dict[str, Any]:
    """Filter ``changes`` down to the keys an endpoint accepts.

    Args:
        changes: Caller-supplied parameters
        valid_keys: Accepted keys. A mapping may give a nested schema for a key,
            which is applied recursively when the value is itself a mapping.
        action: "create" drops every None; "update" keeps None for nullable keys
        nullable_keys: Keys that may be cleared on update by sending None

    Returns:
        New dict with only accepted keys, in the caller's order
    """
    if action not in ("create", "update"):
        raise ValueError(f"Unknown changeset action: {action}")

    out: dict[str, Any] = {}
    for key, value in changes.items():
        if key not in valid_keys:
            continue
        if value is None:
            if action == "update" and key in nullable_keys:
                out[key] = None
            continue
        schema = valid_keys.get(key) if isinstance(valid_keys, Mapping) else None
        if schema and isinstance(value, Mapping):
            value = cast(value, schema, action)
        out[key] = value
    return out
