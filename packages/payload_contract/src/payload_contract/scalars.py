from __future__ import annotations

import math
from fractions import Fraction
from typing import TYPE_CHECKING, Any

from jsonschema import FormatChecker

from .callbacks import register_callback
from .errors import InvalidKeywordError
from .patterns import matches

if TYPE_CHECKING:
    from .dispatcher import ValidationRun

_FORMAT_CHECKER = FormatChecker()


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_null(value: Any, schema: dict[str, Any], path: str, errors: list[str], run: ValidationRun) -> bool:
    if value is None:
        return True
    errors.append(f"Object at {path} doesn't seem to be null.")
    return False


def validate_boolean(value: Any, schema: dict[str, Any], path: str, errors: list[str], run: ValidationRun) -> bool:
    if isinstance(value, bool):
        return True
    errors.append(f"Object at {path} doesn't seem to be boolean.")
    return False


def _lower_bound_ok(value: float, minimum: Any, exclusive: Any) -> bool:
    # OpenAPI 3.1 states the exclusive bound as a number of its own.
    if is_number(exclusive) and not value > exclusive:
        return False
    if minimum is None:
        return True
    return value > minimum if exclusive is True else value >= minimum


def _upper_bound_ok(value: float, maximum: Any, exclusive: Any) -> bool:
    if is_number(exclusive) and not value < exclusive:
        return False
    if maximum is None:
        return True
    return value < maximum if exclusive is True else value <= maximum


def _is_multiple(value: float, divisor: float, tolerance: float) -> bool:
    if isinstance(value, int) and isinstance(divisor, int):
        return value % divisor == 0
    if isinstance(value, float) and not math.isfinite(value):
        return False
    try:
        if tolerance == 0:
            return math.fmod(value, divisor) == 0.0
        quotient = value / divisor
        return abs(quotient - round(quotient)) <= tolerance * max(1.0, abs(quotient))
    except OverflowError:
        # Integers beyond float range; the float divisor is exact as a fraction.
        return Fraction(value) % Fraction(divisor) == 0


def validate_number(value: Any, schema: dict[str, Any], path: str, errors: list[str], run: ValidationRun) -> bool:
    if not is_number(value):
        errors.append(f"Object at {path} doesn't seem to be a number.")
        return False

    get = run.accessor.get
    valid = True

    if not _lower_bound_ok(value, get(schema, "minimum"), get(schema, "exclusiveMinimum")):
        errors.append(f"Number at {path} is outside of minimum boundary.")
        valid = False

    if not _upper_bound_ok(value, get(schema, "maximum"), get(schema, "exclusiveMaximum")):
        errors.append(f"Number at {path} is outside of maximum boundary.")
        valid = False

    multiple_of = get(schema, "multipleOf")
    if multiple_of is not None and not (is_number(multiple_of) and multiple_of > 0):
        raise InvalidKeywordError("multipleOf", multiple_of, path, "must be a positive number")
    if multiple_of is not None and not _is_multiple(value, multiple_of, run.settings.multiple_of_tolerance):
        errors.append(f"Number at {path} violates defined multipleOf policy.")
        valid = False

    return valid


def validate_integer(value: Any, schema: dict[str, Any], path: str, errors: list[str], run: ValidationRun) -> bool:
    if not validate_number(value, schema, path, errors, run):
        errors.append(f"Object at {path} doesn't seem to be a number, so it also can't be an integer.")
        return False
    if isinstance(value, float) and not value.is_integer():
        errors.append(f"Object at {path} doesn't seem to be an integer.")
        return False
    return True


def validate_string(value: Any, schema: dict[str, Any], path: str, errors: list[str], run: ValidationRun) -> bool:
    if run.records_callbacks:
        register_callback(value, path, run.context)

    if not isinstance(value, str):
        errors.append(f"Object at {path} doesn't seem to be a string.")
        return False

    get = run.accessor.get
    valid = True

    pattern = get(schema, "pattern")
    if pattern is not None and not matches(value, pattern):
        errors.append(f"String at {path} does not match given pattern {pattern}")
        valid = False

    min_length = get(schema, "minLength")
    if min_length is not None and len(value) < min_length:
        errors.append(f"String at {path} contains fewer characters than allowed.")
        valid = False

    max_length = get(schema, "maxLength")
    if max_length is not None and len(value) > max_length:
        errors.append(f"String at {path} contains more characters than allowed.")
        valid = False

    fmt = get(schema, "format")
    if fmt is not None and not _FORMAT_CHECKER.conforms(value, fmt):
        errors.append(f"String at {path} does not match format '{fmt}'.")
        valid = False

    return valid
