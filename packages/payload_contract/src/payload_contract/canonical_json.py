from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def decode(text: str | bytes) -> tuple[Any, str | None]:
    """Decode a JSON document, returning ``(value, error)`` instead of raising."""
    try:
        return json.loads(text, parse_constant=_reject_constant), None
    except (ValueError, TypeError) as exc:
        return None, str(exc)


def _normalize(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k): _normalize(value[k]) for k in sorted(value, key=str)}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [_normalize(v) for v in value]
    if isinstance(value, float) and value.is_integer():
        # 5 and 5.0 are the same JSON number.
        return int(value)
    if isinstance(value, Decimal):
        return str(value)
    return value


def canonical_json_dumps(value: Any) -> str:
    """Serialize JSON with sorted keys and no insignificant whitespace."""
    return json.dumps(_normalize(value), sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def canonicalize(value: Any) -> bytes:
    return canonical_json_dumps(value).encode("utf-8")


def same_value(left: Any, right: Any) -> bool:
    return canonicalize(left) == canonicalize(right)
