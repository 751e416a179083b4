from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .canonical_json import canonicalize

if TYPE_CHECKING:
    from .dispatcher import ValidationRun

logger = logging.getLogger(__name__)


def validate_array(value: Any, schema: dict[str, Any], path: str, errors: list[str], run: ValidationRun) -> bool:
    if isinstance(value, dict):
        errors.append(f"Object at {path} doesn't seem to be an array (non-numeric index).")
        return False
    if not isinstance(value, list):
        errors.append(f"Object at {path} doesn't seem to be an array.")
        return False

    get = run.accessor.get
    valid = True

    min_items = get(schema, "minItems")
    if min_items is not None and len(value) < min_items:
        errors.append(f"Array at {path} contains fewer items than allowed.")
        valid = False

    max_items = get(schema, "maxItems")
    if max_items is not None and len(value) > max_items:
        errors.append(f"Array at {path} contains more items than allowed.")
        valid = False

    if get(schema, "uniqueItems"):
        seen: set[bytes] = set()
        for item in value:
            marker = canonicalize(item)
            if marker in seen:
                errors.append(f"Array at {path} contains non-unique items.")
                valid = False
                break
            seen.add(marker)

    items = get(schema, "items")
    if items is not None:
        for idx, item in enumerate(value):
            if not run.validate(item, items, f"{path}[{idx}]", errors):
                valid = False

    return valid


def _wrong_direction(subschema: Any, run: ValidationRun) -> str | None:
    """Name the flag that keeps this property out of the current payload direction."""
    get = run.accessor.get
    if run.context.is_request and get(subschema, "readOnly"):
        return "readOnly"
    if run.context.is_response and get(subschema, "writeOnly"):
        return "writeOnly"
    return None


def _check_required(value: dict[str, Any], schema: dict[str, Any], path: str, errors: list[str], run: ValidationRun) -> bool:
    get = run.accessor.get
    properties = get(schema, "properties")
    valid = True

    for key in get(schema, "required") or []:
        flag = _wrong_direction(get(properties, key), run)
        if key not in value:
            if flag is None:
                errors.append(f"Missing required argument '{key}' at {path}")
                valid = False
        elif flag is not None:
            direction = "request" if flag == "readOnly" else "response"
            errors.append(f"Sending {flag} argument '{key}' in {direction} at {path}")
            valid = False

    return valid


def _check_not(value: dict[str, Any], schema: dict[str, Any], path: str, errors: list[str], run: ValidationRun) -> bool:
    get = run.accessor.get
    forbidden = get(schema, "not")
    if forbidden is None:
        return True

    not_type = get(forbidden, "type")
    if not_type not in (None, "object"):
        logger.debug("'not' with type %s at %s is not enforced", not_type, path)
        return True

    valid = True
    for key in get(forbidden, "required") or []:
        if key in value:
            errors.append(f"Object contains forbidden argument '{key}' at {path}")
            valid = False

    for key, subschema in (get(forbidden, "properties") or {}).items():
        if key not in value:
            continue
        # Only the verdict matters; a rejected shape leaves no errors or callbacks behind.
        with run.detached():
            matched = run.validate(value[key], subschema, f"{path}[{key}]", [])
        if matched:
            errors.append(f"Object argument '{key}' matches unallowed properties at {path}")
            valid = False

    return valid


def validate_object(value: Any, schema: dict[str, Any], path: str, errors: list[str], run: ValidationRun) -> bool:
    if not isinstance(value, dict):
        errors.append(f"Object at {path} doesn't seem to be an object.")
        return False

    get = run.accessor.get
    properties = get(schema, "properties") or {}

    valid = _check_required(value, schema, path, errors, run)

    for key, subschema in properties.items():
        if key in value and not run.validate(value[key], subschema, f"{path}[{key}]", errors):
            valid = False

    if not _check_not(value, schema, path, errors, run):
        valid = False

    min_properties = get(schema, "minProperties")
    if min_properties is not None and len(value) < min_properties:
        errors.append(f"Object at {path} contains fewer properties than allowed.")
        valid = False

    max_properties = get(schema, "maxProperties")
    if max_properties is not None and len(value) > max_properties:
        errors.append(f"Object at {path} contains more properties than allowed.")
        valid = False

    additional = get(schema, "additionalProperties")
    if additional is False:
        for key in value:
            if key not in properties:
                errors.append(f"Disallowed additional property '{key}' at {path}")
                valid = False
    elif isinstance(additional, dict):
        # Declared properties are checked here a second time.
        for key, item in value.items():
            if not run.validate(item, additional, f"{path}[{key}]", errors):
                valid = False

    return valid
