from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .canonical_json import decode
from .config import ValidatorSettings
from .dispatcher import ValidationRun
from .errors import SchemaAuthoringError, SchemaDepthExceededError
from .schema_access import SchemaAccessor
from .types import SchemaNode, ValidationContext, ValidationResult

logger = logging.getLogger(__name__)


class PayloadValidator:
    """Validates raw JSON payloads against schema nodes drawn from one component table."""

    def __init__(self, components: Mapping[str, SchemaNode], settings: ValidatorSettings | None = None) -> None:
        self.accessor = SchemaAccessor(components)
        self.settings = settings or ValidatorSettings.from_env()

    def validate(
        self,
        raw_json: str | bytes,
        schema: Mapping[str, Any],
        path: str,
        context: ValidationContext,
    ) -> ValidationResult:
        errors: list[str] = []

        content, decode_error = decode(raw_json)
        if decode_error is not None:
            logger.debug("Unable to decode json data at %s: %s", path, decode_error)
            return ValidationResult(valid=False, errors=["Unable to decode json data"])

        run = ValidationRun(self.accessor, context, self.settings)
        try:
            try:
                valid = run.validate(content, schema, path, errors)
            except RecursionError as exc:
                raise SchemaDepthExceededError(path, self.settings.max_depth) from exc
        except SchemaAuthoringError as exc:
            logger.error("Validation of %s aborted: %s", path, exc)
            errors.append(str(exc))
            return ValidationResult(valid=False, errors=errors, fatal=True)

        return ValidationResult(valid=valid, errors=errors)


def validate_raw_json(
    raw_json: str | bytes,
    schema: Mapping[str, Any],
    path: str,
    context: ValidationContext,
    *,
    components: Mapping[str, SchemaNode],
    settings: ValidatorSettings | None = None,
) -> ValidationResult:
    return PayloadValidator(components, settings).validate(raw_json, schema, path, context)
