"""Form encoding for request bodies and query strings.

The API takes ``application/x-www-form-urlencoded`` parameters with a
bracket convention for nesting:

    {"card": {"number": "4242"}}          -> card[number]=4242
    {"expand": ["customer", "invoice"]}   -> expand[]=customer&expand[]=invoice
    {"items": [{"plan": "gold"}]}         -> items[0][plan]=gold
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any
from urllib.parse import urlencode


def _scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return str(int(value.timestamp()))
    return str(value)


def _flatten(prefix: str, value: Any, out: list[tuple[str, str]]) -> None:
    if isinstance(value, Mapping):
        for key, sub in value.items():
            _flatten(f"{prefix}[{key}]" if prefix else str(key), sub, out)
    elif isinstance(value, (list, tuple)):
        for index, sub in enumerate(value):
            if isinstance(sub, Mapping):
                _flatten(f"{prefix}[{index}]", sub, out)
            else:
                _flatten(f"{prefix}[]", sub, out)
    else:
        out.append((prefix, _scalar(value)))


def flatten_params(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Flatten nested params into ordered ``(key, value)`` pairs.

    ``None`` becomes an empty value, which the API reads as "unset".
    """
    out: list[tuple[str, str]] = []
    if params:
        _flatten("", params, out)
    return out


def encode_query(params: Mapping[str, Any] | None) -> str:
    """Encode params as a form/query string."""
    return urlencode(flatten_params(params))
