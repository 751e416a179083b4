from __future__ import annotations

import re
from functools import lru_cache

from .errors import InvalidPatternError


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidPatternError(pattern, str(exc)) from exc


def matches(text: str, pattern: str) -> bool:
    """Unanchored search, as JSON Schema defines ``pattern``."""
    return _compile(pattern).search(text) is not None
