import math

import pytest

from jsonmodel.flags import ToStringFlag
from jsonmodel.scalars import JsonBoolean, JsonDouble, double_to_json_string
from jsonmodel.serialize import COLOR_FG_MAGENTA, COLOR_RESET
from jsonmodel.values import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN, UINT64_MAX


def test_boolean_text():
    assert JsonBoolean(True).to_json_string() == "true"
    assert JsonBoolean(False).to_json_string() == "false"


def test_boolean_color():
    text = JsonBoolean(True).to_json_string(ToStringFlag.COLOR)
    assert text == COLOR_FG_MAGENTA + "true" + COLOR_RESET


def test_boolean_set_value():
    b = JsonBoolean(False)
    b.value = True
    assert b.value is True
    assert b.as_bool() is True
    assert b.to_json_string() == "true"


def test_boolean_conversions():
    t = JsonBoolean(True)
    f = JsonBoolean(False)
    assert t.as_int32() == 1
    assert t.as_int64() == t.as_int32() == t.as_uint64()
    assert t.as_float() == 1.0
    assert f.as_int64() == 0
    assert f.as_float() == 0.0


@pytest.mark.parametrize("value", [0.1, -2.5, 1e300, 123456789.0, 5e-324])
def test_double_round_trip(value):
    assert float(JsonDouble(value).to_json_string()) == value


def test_whole_double_looks_like_float():
    text = JsonDouble(3.0).to_json_string()
    assert "." in text
    assert float(text) == 3.0


@pytest.mark.parametrize(
    "value, text",
    [(math.nan, "NaN"), (math.inf, "Infinity"), (-math.inf, "-Infinity")],
)
def test_double_special_values(value, text):
    assert JsonDouble(value).to_json_string() == text


def test_double_verbatim_text_until_changed():
    d = JsonDouble(12.3, "12.3")
    assert d.to_json_string() == "12.3"
    assert d.text == "12.3"
    assert d.as_str() == "12.3"
    d.value = 4.5
    assert d.text is None
    assert float(d.to_json_string()) == 4.5


def test_double_custom_format():
    d = JsonDouble(2.0)
    d.set_serializer(double_to_json_string, "%.3f")
    text = d.to_json_string()
    whole, frac = text.split(".")
    assert len(frac) == 3
    assert float(text) == 2.0


def test_double_nozero():
    d = JsonDouble(1.5)
    d.set_serializer(double_to_json_string, "%.6f")
    assert d.to_json_string(ToStringFlag.NOZERO) == "1.5"


def test_double_int_clamping():
    assert JsonDouble(1e20).as_int32() == INT32_MAX
    assert JsonDouble(-1e20).as_int32() == INT32_MIN
    assert JsonDouble(math.nan).as_int32() == INT32_MIN
    assert JsonDouble(1e30).as_int64() == INT64_MAX
    assert JsonDouble(-1e30).as_int64() == INT64_MIN
    assert JsonDouble(math.nan).as_int64() == INT64_MIN
    assert JsonDouble(1e30).as_uint64() == UINT64_MAX
    assert JsonDouble(-1.0).as_uint64() == 0
    assert JsonDouble(math.nan).as_uint64() == 0


def test_double_truncates_toward_zero():
    assert JsonDouble(-3.9).as_int32() == -3
    assert JsonDouble(-3.9).as_int64() == JsonDouble(-3.9).as_int32()


def test_double_as_bool_and_float():
    assert JsonDouble(0.0).as_bool() is False
    assert JsonDouble(0.5).as_bool() is True
    assert JsonDouble(0.25).as_float() == 0.25


def test_double_equality():
    nan = JsonDouble(math.nan)
    assert nan.equals(nan)
    assert not nan.equals(JsonDouble(math.nan))
    assert JsonDouble(0.5).equals(JsonDouble(0.5))
    assert not JsonDouble(0.5).equals(JsonDouble(0.25))
    assert not JsonDouble(1.0).equals(JsonBoolean(True))