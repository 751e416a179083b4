import json
from typing import Any

import pytest
from payload_contract import ValidationContext, ValidationResult, ValidatorSettings, validate_raw_json

BOUNDED_INTEGER = {"type": "integer", "minimum": 1, "maximum": 10}


def _check(value: Any, schema: dict[str, Any], settings: ValidatorSettings | None = None) -> ValidationResult:
    return validate_raw_json(
        json.dumps(value),
        schema,
        "root",
        ValidationContext(kind="request"),
        components={},
        settings=settings or ValidatorSettings(),
    )


@pytest.mark.parametrize("value", [1, 5, 10, 5.0])
def test_integer_inside_bounds_passes(value: Any) -> None:
    result = _check(value, BOUNDED_INTEGER)
    assert result.valid
    assert result.errors == []


def test_integer_outside_bounds_fails_with_boundary_error() -> None:
    low = _check(0, BOUNDED_INTEGER)
    assert not low.valid
    assert low.errors == [
        "Number at root is outside of minimum boundary.",
        "Object at root doesn't seem to be a number, so it also can't be an integer.",
    ]

    high = _check(11, BOUNDED_INTEGER)
    assert not high.valid
    assert high.errors[0] == "Number at root is outside of maximum boundary."


def test_fractional_value_is_not_an_integer() -> None:
    result = _check(5.5, BOUNDED_INTEGER)
    assert not result.valid
    assert result.errors == ["Object at root doesn't seem to be an integer."]


def test_non_numbers_fail_number_and_integer() -> None:
    assert _check("5", {"type": "number"}).errors == ["Object at root doesn't seem to be a number."]
    assert _check(True, {"type": "integer"}).errors == [
        "Object at root doesn't seem to be a number.",
        "Object at root doesn't seem to be a number, so it also can't be an integer.",
    ]


def test_exclusive_bounds_in_both_styles() -> None:
    boolean_style = {"type": "number", "minimum": 0, "exclusiveMinimum": True}
    assert not _check(0, boolean_style).valid
    assert _check(0.1, boolean_style).valid

    numeric_style = {"type": "number", "exclusiveMaximum": 10}
    assert _check(10, numeric_style).errors == ["Number at root is outside of maximum boundary."]
    assert _check(9.99, numeric_style).valid


def test_number_violations_accumulate() -> None:
    result = _check(4, {"type": "number", "minimum": 10, "multipleOf": 3})
    assert result.errors == [
        "Number at root is outside of minimum boundary.",
        "Number at root violates defined multipleOf policy.",
    ]


def test_multiple_of_tolerates_float_rounding() -> None:
    cents = {"type": "number", "multipleOf": 0.01}
    assert _check(0.29, cents).valid
    assert _check(19.99, cents).valid
    assert not _check(0.295, cents).valid

    whole = {"type": "integer", "multipleOf": 5}
    assert _check(15, whole).valid
    assert not _check(16, whole).valid


def test_zero_tolerance_keeps_exact_remainder() -> None:
    result = _check(0.29, {"type": "number", "multipleOf": 0.01}, ValidatorSettings(multiple_of_tolerance=0))
    assert result.errors == ["Number at root violates defined multipleOf policy."]


def test_string_pattern_is_a_search() -> None:
    assert _check("abc", {"type": "string", "pattern": "^[a-z]+$"}).valid
    assert _check("abc", {"type": "string", "pattern": "b"}).valid

    result = _check("ABC", {"type": "string", "pattern": "^[a-z]+$"})
    assert result.errors == ["String at root does not match given pattern ^[a-z]+$"]


def test_non_string_fails_without_pattern_detail() -> None:
    result = _check(12, {"type": "string", "pattern": "^[0-9]+$"})
    assert result.errors == ["Object at root doesn't seem to be a string."]


def test_string_length_and_format() -> None:
    bounded = {"type": "string", "minLength": 2, "maxLength": 4}
    assert _check("abc", bounded).valid
    assert _check("a", bounded).errors == ["String at root contains fewer characters than allowed."]
    assert _check("abcde", bounded).errors == ["String at root contains more characters than allowed."]

    address = {"type": "string", "format": "ipv4"}
    assert _check("10.0.0.1", address).valid
    assert _check("999.1.1.1", address).errors == ["String at root does not match format 'ipv4'."]
    assert _check("anything", {"type": "string", "format": "house-style"}).valid


def test_multiple_of_must_be_positive() -> None:
    zero = _check(3, {"type": "number", "multipleOf": 0})
    assert zero.fatal
    assert zero.errors == ["Invalid multipleOf 0 at root: must be a positive number"]

    negative = _check(4, {"type": "integer", "multipleOf": -2})
    assert negative.fatal
    assert negative.errors == ["Invalid multipleOf -2 at root: must be a positive number"]


def test_multiple_of_on_integers_beyond_float_range() -> None:
    huge = 10**400
    halves = {"type": "number", "multipleOf": 2.5}
    exact = ValidatorSettings(multiple_of_tolerance=0)

    assert _check(huge, halves).valid
    assert _check(huge, halves, exact).valid
    assert _check(huge + 1, halves).errors == ["Number at root violates defined multipleOf policy."]
    assert _check(huge + 1, halves, exact).errors == ["Number at root violates defined multipleOf policy."]


def test_broken_pattern_aborts_the_run() -> None:
    result = _check("abc", {"type": "string", "pattern": "("})
    assert not result.valid
    assert result.fatal
    assert result.errors[-1].startswith("Invalid pattern '('")


def test_boolean_and_null() -> None:
    assert _check(False, {"type": "boolean"}).valid
    assert _check("true", {"type": "boolean"}).errors == ["Object at root doesn't seem to be boolean."]

    assert _check(None, {"type": "null"}).valid
    assert _check(0, {"type": "null"}).errors == ["Object at root doesn't seem to be null."]
