import pytest

from jsonmodel.flags import ToStringFlag
from jsonmodel.integers import JsonInt
from jsonmodel.types import JsonType
from jsonmodel.values import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN, UINT64_MAX


def test_type_and_value():
    n = JsonInt(42)
    assert n.json_type == JsonType.INT
    assert n.value == 42
    assert n.is_unsigned is False


def test_serialization():
    assert JsonInt(42).to_json_string() == "42"
    assert JsonInt(-7).to_json_string(ToStringFlag.PLAIN) == "-7"
    assert JsonInt(UINT64_MAX, unsigned=True).to_json_string() == str(UINT64_MAX)


def test_range_checks():
    with pytest.raises(ValueError):
        JsonInt(INT64_MAX + 1)
    with pytest.raises(ValueError):
        JsonInt(-1, unsigned=True)
    with pytest.raises(ValueError):
        JsonInt(UINT64_MAX + 1, unsigned=True)


def test_assign_switches_kind():
    n = JsonInt(1)
    n.assign(UINT64_MAX, unsigned=True)
    assert n.value == UINT64_MAX
    assert n.is_unsigned
    n.assign(-3)
    assert n.value == -3
    assert not n.is_unsigned


def test_assign_out_of_range_keeps_old_value():
    n = JsonInt(5)
    with pytest.raises(ValueError):
        n.assign(-1, unsigned=True)
    assert n.value == 5


def test_increment_simple():
    n = JsonInt(10)
    n.increment(-15)
    assert n.value == -5


def test_increment_signed_overflow_becomes_unsigned():
    n = JsonInt(INT64_MAX)
    n.increment(1)
    assert n.is_unsigned
    assert n.value == INT64_MAX + 1


def test_increment_signed_underflow_saturates():
    n = JsonInt(INT64_MIN)
    n.increment(-1)
    assert n.value == INT64_MIN
    assert not n.is_unsigned


def test_increment_unsigned_saturates():
    n = JsonInt(UINT64_MAX, unsigned=True)
    n.increment(1)
    assert n.value == UINT64_MAX


def test_increment_unsigned_below_zero_turns_signed():
    n = JsonInt(5, unsigned=True)
    n.increment(-10)
    assert n.value == -5
    assert not n.is_unsigned


def test_increment_unsigned_stays_unsigned():
    n = JsonInt(10, unsigned=True)
    n.increment(-3)
    assert n.value == 7
    assert n.is_unsigned


def test_increment_rejects_large_delta():
    with pytest.raises(ValueError):
        JsonInt(0).increment(INT64_MAX + 1)


def test_int32_clamping():
    assert JsonInt(INT64_MAX).as_int32() == INT32_MAX
    assert JsonInt(INT64_MIN).as_int32() == INT32_MIN
    assert JsonInt(UINT64_MAX, unsigned=True).as_int32() == INT32_MAX
    assert JsonInt(123).as_int32() == 123


def test_int64_and_uint64_conversions():
    assert JsonInt(UINT64_MAX, unsigned=True).as_int64() == INT64_MAX
    assert JsonInt(-1).as_uint64() == 0
    assert JsonInt(UINT64_MAX, unsigned=True).as_uint64() == UINT64_MAX


def test_bool_and_float():
    assert JsonInt(0).as_bool() is False
    assert JsonInt(-2).as_bool() is True
    assert JsonInt(3).as_float() == 3.0


def test_as_str_is_json_text():
    assert JsonInt(42).as_str() == "42"


def test_equality_across_signedness():
    assert JsonInt(5).equals(JsonInt(5, unsigned=True))
    assert not JsonInt(-1).equals(JsonInt(UINT64_MAX, unsigned=True))
    assert not JsonInt(1).equals(JsonInt(2))