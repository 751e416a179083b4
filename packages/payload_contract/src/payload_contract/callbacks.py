from __future__ import annotations

import logging
import re
from typing import Any

from .types import ValidationContext

logger = logging.getLogger(__name__)

ROOT_MARKER = "root"

_ANNOTATION = re.compile(r"\{[^}]*\}")
_ROOT = re.compile(rf"^{ROOT_MARKER}")


def callback_template(path: str) -> str:
    """Turn a content path like ``root[hooks][0][url]`` into ``{$request.body#/hooks/0/url}``."""
    template = _ANNOTATION.sub("", path)
    template = _ROOT.sub("{$request.body#", template)
    template = template.replace("]", "").replace("[", "/")
    return template + "}"


def register_callback(value: Any, path: str, context: ValidationContext) -> None:
    if not isinstance(value, str) or not context.callback_spec:
        return

    template = callback_template(path)
    schema = context.callback_spec.get(template)
    if schema is not None:
        logger.debug("Registered callback %s for %s", value, template)
        context.callback_map[value] = schema
