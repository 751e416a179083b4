from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from typing import Any

from .canonical_json import same_value
from .combinators import COMBINATORS, CombinatorKind, evaluate
from .config import ValidatorSettings
from .containers import validate_array, validate_object
from .errors import SchemaDepthExceededError
from .scalars import (
    validate_boolean,
    validate_integer,
    validate_null,
    validate_number,
    validate_string,
)
from .schema_access import Enclosing, SchemaAccessor
from .types import ErrorEntry, ErrorGroup, SchemaKind, ValidationContext

logger = logging.getLogger(__name__)

TypeValidator = Callable[[Any, dict[str, Any], str, list[str], "ValidationRun"], bool]


def flatten_suberrors(suberrors: Iterable[ErrorEntry]) -> list[str]:
    lines: list[str] = []
    for entry in suberrors:
        if isinstance(entry, ErrorGroup):
            lines.append(f">> # {entry.key}")
            lines.extend(f">> {err}" for err in entry.errors)
        else:
            lines.append(f">> {entry}")
    return lines


def _type_validator(kind: SchemaKind) -> TypeValidator:
    match kind:
        case SchemaKind.OBJECT:
            return validate_object
        case SchemaKind.ARRAY:
            return validate_array
        case SchemaKind.STRING:
            return validate_string
        case SchemaKind.NUMBER:
            return validate_number
        case SchemaKind.INTEGER:
            return validate_integer
        case SchemaKind.BOOLEAN:
            return validate_boolean
        case SchemaKind.NULL:
            return validate_null


class ValidationRun:
    """
    One recursive validation pass over a decoded document.

    Holds everything the validators share for the duration of a single top-level
    call: the schema accessor, the request/response context and the settings.
    Schema nodes are never modified; the enclosing combinator schema is passed
    along explicitly as ``parent``.
    """

    def __init__(self, accessor: SchemaAccessor, context: ValidationContext, settings: ValidatorSettings) -> None:
        self.accessor = accessor
        self.context = context
        self.settings = settings
        self._depth = 0
        self._detached = 0

    @property
    def records_callbacks(self) -> bool:
        return self._detached == 0

    @contextmanager
    def detached(self) -> Iterator[None]:
        """Validate without touching the context's callback map."""
        self._detached += 1
        try:
            yield
        finally:
            self._detached -= 1

    def validate(
        self,
        value: Any,
        schema: dict[str, Any],
        path: str,
        errors: list[str],
        parent: Enclosing | None = None,
    ) -> bool:
        if self._depth >= self.settings.max_depth:
            raise SchemaDepthExceededError(path, self.settings.max_depth)
        self._depth += 1
        try:
            return self._dispatch(value, schema, path, errors, parent)
        except RecursionError as exc:
            raise SchemaDepthExceededError(path, self._depth) from exc
        finally:
            self._depth -= 1

    def _dispatch(
        self,
        value: Any,
        schema: dict[str, Any],
        path: str,
        errors: list[str],
        parent: Enclosing | None,
    ) -> bool:
        get = self.accessor.get
        enum = get(schema, "enum")

        if value is None and get(schema, "nullable") and enum is None:
            return True

        if enum is not None:
            if any(same_value(value, member) for member in enum):
                return True
            errors.append(f"Value at {path} does not match any entry in enumeration")
            return False

        declared: list[CombinatorKind] = [kind for kind in COMBINATORS if get(schema, kind) is not None]
        if len(declared) > 1:
            logger.warning("Multiple combinators %s declared at %s", declared, path)
            errors.append(f"Multiple combinators ({', '.join(declared)}) declared at {path}")
            return False

        if declared:
            if not self._combine(value, schema, declared[0], path, errors, parent):
                return False
            # A combinator settles the value unless the schema also states a type of its own.
            own_type = get(schema, "type")
            if own_type is None:
                return True
            return self._validate_type(value, schema, own_type, path, errors)

        return self._validate_type(value, schema, get(schema, "type", parent), path, errors)

    def _combine(
        self,
        value: Any,
        schema: dict[str, Any],
        kind: CombinatorKind,
        path: str,
        errors: list[str],
        parent: Enclosing | None,
    ) -> bool:
        suberrors: list[ErrorEntry] = []
        tally = evaluate(value, schema, kind, path, suberrors, self, parent)
        summary = f"{kind} criterium failed on {path}: {tally.valid} valid, {tally.invalid} invalid"

        if kind == "oneOf" and tally.valid != 1:
            errors.append(summary)
            if tally.valid > 1:
                errors.append(">> Multiple valid in oneOf criterium: " + ", ".join(tally.matched))
            else:
                errors.extend(flatten_suberrors(suberrors))
            return False

        if kind == "anyOf" and tally.valid == 0:
            errors.append(summary)
            errors.extend(flatten_suberrors(suberrors))
            return False

        if kind == "allOf" and tally.invalid > 0:
            errors.append(summary)
            return False

        return True

    def _validate_type(self, value: Any, schema: dict[str, Any], schema_type: Any, path: str, errors: list[str]) -> bool:
        if schema_type is None:
            logger.warning("No schema type found at %s", path)
            errors.append(f"No schema type found at {path}")
            return False

        try:
            kind = SchemaKind(schema_type)
        except ValueError:
            logger.warning("Unknown schema type %r at %s", schema_type, path)
            errors.append(f"Unknown schema type '{schema_type}' at {path}")
            return False

        logger.debug("Entering %s validation at %s", kind.value, path)
        valid = _type_validator(kind)(value, schema, path, errors, self)
        logger.debug("Left %s validation at %s (%s)", kind.value, path, "success" if valid else "fail")
        return valid
