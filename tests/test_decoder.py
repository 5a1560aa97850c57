from typing import Any

import pytest

from scilladec.core.errors import ArityMismatch, MalformedType, NumericParseError, UnexpectedValue, UnknownConstructor
from scilladec.core.models import AdtValue, BigInt
from scilladec.decoding.decoder import decode
from scilladec.decoding.types import parse_type


def adt(constructor: str, argtypes: list[str] | None = None, arguments: list[Any] | None = None) -> dict[str, Any]:
    return {"constructor": constructor, "argtypes": argtypes or [], "arguments": arguments or []}


def some(t: str, v: Any) -> dict[str, Any]:
    return adt("Some", [t], [v])


NONE = adt("None")


# ---------- primitives ----------


@pytest.mark.parametrize("t", ["Uint32", "Uint64", "Int32", "Int64"])
def test_native_integers(t: str) -> None:
    value = decode(t, "12")
    assert value == 12
    assert type(value) is int


@pytest.mark.parametrize("t", ["Uint128", "Uint256", "Int128", "Int256"])
def test_wide_integers_are_bigint(t: str) -> None:
    value = decode(t, "12")
    assert isinstance(value, BigInt)
    assert value == 12


def test_wide_integer_keeps_precision() -> None:
    s = "115792089237316195423570985008687907853269984665640564039457584007913129639935"
    value = decode("Uint256", s)
    assert isinstance(value, BigInt)
    assert str(value) == s


def test_signed_negative() -> None:
    assert decode("Int64", "-5") == -5
    assert decode("Int128", "-5") == BigInt(-5)


@pytest.mark.parametrize("t,raw", [("Uint64", "12a"), ("Uint64", ""), ("Uint64", "-1"), ("Uint128", "1.5"), ("Uint32", " 1"), ("Int32", True), ("Uint64", None)])
def test_numeric_parse_error(t: str, raw: Any) -> None:
    with pytest.raises(NumericParseError):
        decode(t, raw)


def test_non_integer_passthrough() -> None:
    addr = "0xec902fe17d90203d0bddd943d97b29576ece3177"
    assert decode("ByStr20", addr) == addr
    assert decode("String", "hello") == "hello"
    assert decode("BNum", "100") == "100"
    assert decode("SomeFutureScalar", "x") == "x"


def test_primitive_user_adt_decodes_generically() -> None:
    assert decode("Color", adt("Red")) == AdtValue("Red", ())


# ---------- Bool ----------


def test_bool() -> None:
    assert decode("Bool", adt("True")) is True
    assert decode("Bool", adt("False")) is False


def test_bool_unknown_constructor() -> None:
    with pytest.raises(UnknownConstructor):
        decode("Bool", adt("Maybe"))


def test_bool_with_arguments() -> None:
    with pytest.raises(ArityMismatch):
        decode("Bool", adt("True", ["Uint32"], ["1"]))


def test_bool_scalar_string() -> None:
    with pytest.raises(UnexpectedValue):
        decode("Bool", "True")


# ---------- Option ----------


def test_option_some_unwraps_with_inner_type() -> None:
    assert decode("Option (Uint64)", some("Uint64", "123")) == 123
    assert isinstance(decode("Option (Uint128)", some("Uint128", "123")), BigInt)


def test_option_none() -> None:
    assert decode("Option (Uint64)", NONE) is None
    assert decode("Option (String)", NONE) is None


def test_nested_options() -> None:
    t = "Option (Option (Uint64))"
    assert decode(t, some("Option (Uint64)", some("Uint64", "5"))) == 5
    assert decode(t, some("Option (Uint64)", NONE)) is None
    assert decode(t, NONE) is None


def test_option_of_bool() -> None:
    assert decode("Option (Bool)", some("Bool", adt("True"))) is True


def test_option_unknown_constructor() -> None:
    with pytest.raises(UnknownConstructor):
        decode("Option (Uint64)", adt("Just", ["Uint64"], ["1"]))


def test_option_some_with_two_arguments() -> None:
    with pytest.raises(ArityMismatch):
        decode("Option (Uint64)", adt("Some", ["Uint64", "Uint64"], ["1", "2"]))


def test_option_none_with_arguments() -> None:
    with pytest.raises(ArityMismatch):
        decode("Option (Uint64)", adt("None", ["Uint64"], ["1"]))


# ---------- generic ADTs ----------


def test_generic_pair() -> None:
    value = adt("Pair", ["Uint32", "String"], ["1", "x"])
    assert decode("Pair (Uint32) (String)", value) == AdtValue("Pair", (1, "x"))


def test_generic_nested_recursion() -> None:
    inner = adt("Pair", ["Uint128", "Bool"], ["7", adt("False")])
    value = adt("Wrap", ["Pair (Uint128) (Bool)", "Option (Uint32)"], [inner, some("Uint32", "3")])
    decoded = decode("Wrap (Pair (Uint128) (Bool)) (Option (Uint32))", value)
    assert decoded == AdtValue("Wrap", (AdtValue("Pair", (BigInt(7), False)), 3))
    assert isinstance(decoded.arguments[0].arguments[0], BigInt)


def test_generic_adt_scalar_value() -> None:
    with pytest.raises(UnexpectedValue):
        decode("Pair (Uint32) (String)", "1")


def test_list_json_array() -> None:
    assert decode("List (Uint128)", ["1", "2"]) == [BigInt(1), BigInt(2)]
    assert decode("List (Option (Uint32))", [some("Uint32", "4"), NONE]) == [4, None]


def test_map_json_entries() -> None:
    raw = [
        {"key": "0xec902fe17d90203d0bddd943d97b29576ece3177", "val": "10"},
        {"key": "0xb943f467a0159ee133618c1836a027ccecc62e28", "val": "20"},
    ]
    assert decode("Map (ByStr20) (Uint128)", raw) == {
        "0xec902fe17d90203d0bddd943d97b29576ece3177": BigInt(10),
        "0xb943f467a0159ee133618c1836a027ccecc62e28": BigInt(20),
    }


def test_map_bad_entry() -> None:
    with pytest.raises(UnexpectedValue):
        decode("Map (ByStr20) (Uint128)", [{"k": "a", "v": "1"}])


# ---------- arity / input immutability ----------


@pytest.mark.parametrize(
    "t,value",
    [
        ("Pair (Uint32) (String)", adt("Pair", ["Uint32"], ["1", "x"])),
        ("Option (Uint64)", adt("Some", [], ["1"])),
        ("Bool", adt("True", ["Uint32"], [])),
        ("Color", adt("Red", [], ["1"])),
    ],
)
def test_arity_mismatch(t: str, value: dict[str, Any]) -> None:
    with pytest.raises(ArityMismatch):
        decode(t, value)


def test_malformed_argtype_inside_value() -> None:
    with pytest.raises(MalformedType):
        decode("Option (Uint64)", some("Uint64 (", "1"))


def test_decode_does_not_mutate_input() -> None:
    value = adt("Pair", ["Uint32", "List (Uint64)"], ["1", ["2", "3"]])
    before = repr(value)
    decode(parse_type("Pair (Uint32) (List (Uint64))"), value)
    assert repr(value) == before


# ---------- already-decoded values ----------


def test_already_native_values_are_stable() -> None:
    assert decode("Uint64", 12) == 12
    assert isinstance(decode("Uint128", 12), BigInt)
    assert decode("Bool", True) is True
    assert decode("Option (Uint64)", None) is None
    assert decode("Option (Uint64)", 123) == 123
    assert decode("List (Uint32)", [1, 2]) == [1, 2]


# ---------- width bounds / text form ----------


def test_bigint_text_form() -> None:
    value = decode("Uint128", "12")
    assert str(value) == "12"
    assert f"{value}" == "12"
    assert repr(value) == "BigInt(12)"


@pytest.mark.parametrize(
    "t,raw",
    [
        ("Uint32", str(2**32)),
        ("Uint32", str(2**40)),
        ("Int32", str(2**31)),
        ("Int32", str(-(2**31) - 1)),
        ("Uint64", 2**64),
        ("Uint256", str(2**256)),
        ("Uint256", "9" * 5000),
        ("Int256", "-" + "9" * 5000),
    ],
)
def test_out_of_range_is_numeric_parse_error(t: str, raw: Any) -> None:
    with pytest.raises(NumericParseError):
        decode(t, raw)


def test_width_bounds_are_inclusive() -> None:
    assert decode("Uint32", str(2**32 - 1)) == 2**32 - 1
    assert decode("Int64", str(-(2**63))) == -(2**63)
    assert decode("Uint256", str(2**256 - 1)) == 2**256 - 1
    assert decode("Uint64", "0" * 5000 + "7") == 7


def test_non_string_argtype_is_malformed() -> None:
    with pytest.raises(MalformedType):
        decode("Option (Uint64)", some({"x": 1}, "1"))  # type: ignore[arg-type]
