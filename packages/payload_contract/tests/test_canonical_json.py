from payload_contract import canonical_json_dumps, canonicalize, decode, same_value


def test_canonical_json_is_deterministic() -> None:
    a = {"z": 1, "a": {"y": 2, "x": 3}, "list": [{"b": 2, "a": 1}]}
    b = {"list": [{"a": 1, "b": 2}], "a": {"x": 3, "y": 2}, "z": 1}

    assert canonicalize(a) == canonicalize(b)
    assert canonical_json_dumps(a) == '{"a":{"x":3,"y":2},"list":[{"a":1,"b":2}],"z":1}'


def test_integral_floats_equal_ints_but_booleans_do_not() -> None:
    assert same_value(5, 5.0)
    assert same_value({"n": [1.0]}, {"n": [1]})
    assert not same_value(True, 1)
    assert not same_value([1, 2], [2, 1])


def test_decode_reports_errors_instead_of_raising() -> None:
    assert decode('{"a": [1, 2]}') == ({"a": [1, 2]}, None)
    assert decode(b"null") == (None, None)

    value, error = decode("{not json")
    assert value is None
    assert error

    _, error = decode("NaN")
    assert error
