# jsonmodel

`jsonmodel` is a small JSON value model for Python with no dependencies.
Each JSON scalar has its own type: `JsonString`, `JsonInt`, `JsonDouble` and
`JsonBoolean`. JSON `null` is plain `None`. Values can be changed in place,
read back through coercing accessors, and written out as JSON text under a
choice of formatting flags.

## Installation

```
pip install jsonmodel
```

To run the test suite:

```
pip install "jsonmodel[test]"
pytest
```

## Values

```python
from jsonmodel.strings import JsonString
from jsonmodel.integers import JsonInt
from jsonmodel.scalars import JsonBoolean, JsonDouble
from jsonmodel.values import to_json_string

JsonString("a/b").to_json_string()     # '"a\\/b"'
JsonInt(3).to_json_string()            # '3'
JsonDouble(1.0).to_json_string()       # '1.0'
JsonDouble(0.1, "0.1").to_json_string()  # '0.1' (kept verbatim)
JsonBoolean(True).to_json_string()     # 'true'
to_json_string(None)                   # 'null'
```

All values derive from `jsonmodel.values.JsonObject`. The module-level
helpers `get_type`, `is_type`, `to_json_string` and `equal` also accept
`None` and treat it as null. `get_type` returns a member of
`jsonmodel.types.JsonType`.

A `JsonDouble` built with a text representation writes that text as it is.
Assigning a new `value` drops the text and returns to normal formatting.
NaN and the infinities are written as `NaN`, `Infinity` and `-Infinity`.

`JsonInt` holds a signed or unsigned 64-bit integer; see `is_unsigned` and
`assign(value, unsigned)`. A value outside the chosen range raises
`ValueError`. `increment(delta)` works as follows:

- A signed value that would overflow becomes unsigned.
- A signed value that would underflow stays at the signed minimum.
- An unsigned value saturates at the unsigned maximum.
- An unsigned value that would drop below zero becomes signed.

## Reading values

Every value has `as_bool()`, `as_int32()`, `as_int64()`, `as_uint64()`,
`as_float()`, `as_str()` and `string_length()`. Numbers out of range are
clamped to the target range. Strings that hold a number are parsed, and
anything else gives zero. NaN gives the minimum of a signed target and 0 for
`as_uint64()`.

```python
from jsonmodel.strings import JsonString
from jsonmodel.scalars import JsonDouble

JsonString("42").as_int64()    # 42
JsonString("abc").as_int64()   # 0
JsonString("").as_bool()       # False
JsonDouble(1e20).as_int32()    # 2147483647
```

## Serialization flags

`jsonmodel.flags.ToStringFlag` values can be combined with `|`:

- `PLAIN`: no extra whitespace.
- `SPACED`: minimal spacing. This is the default for `to_json_string`.
- `PRETTY`, `PRETTY_TAB`: control the indentation given by
  `jsonmodel.serialize.indent`.
- `NOZERO`: drop trailing zeros after the decimal point of a double.
- `NOSLASHESCAPE`: leave `/` unescaped.
- `COLOR`: wrap strings and booleans in ANSI colour codes.

`jsonmodel.serialize` also provides `escape_str` and `format_double`. You can
change the printf-style format used for doubles with
`set_serialization_double_format(fmt, scope)`, where `scope` is
`OptionScope.GLOBAL` or `OptionScope.THREAD`. Passing `None` restores the
default `%.17g`. Setting the global format also clears the calling thread's
own format. Any other scope raises `jsonmodel.types.JsonError`.
`get_serialization_double_format()` returns the format in effect.

## Userdata, custom serializers and lifetime

`set_userdata(data, user_delete)` attaches any object to a value.
`set_serializer(func, data, user_delete)` replaces the value's JSON output
with `func(obj, level, flags)`; passing `None` restores the default output.
`jsonmodel.values.userdata_to_json_string` is a ready-made serializer that
writes the userdata string as it is. `jsonmodel.scalars.double_to_json_string`
formats a double with the printf format stored in its userdata.

Values are reference counted. `retain()` adds a reference. `release()` drops
one and returns `True` when the value is freed, which also calls the
userdata deleter. Serializing a freed value raises `JsonError`.

## ArrayList

`jsonmodel.arraylist.ArrayList` is a list of slots that may be empty. It
takes an optional destructor that is called on values when they are replaced
or deleted. It provides:

- `put(idx, data)`, which fills any gap with `None`.
- `insert`, `append`, `delete(idx, count)` and `free()`.
- `sort` and `bsearch`, both taking a three-way comparison function.
- `capacity()` and `shrink(empty_slots)` to manage the reserved capacity.

## Diagnostics and version

`jsonmodel.debug` has `set_debug`, `get_debug`, `set_syslog`, `debug`, `info`
and `error`, which take printf-style messages. Debug messages go to standard
output, and only when debugging is on. Info and error messages go to
standard error. When syslog is on, and the platform supports it, all three
go to the system log instead.

`jsonmodel.version.version()` returns `"0.18.99"`. `version_num()` returns
the same version packed as major<<16 | minor<<8 | micro.

## What this package does not do

- It has no JSON object or array value types, so values cannot be nested.
- It has no deep copy of value trees.
- It has no parser. It produces JSON text for single values but does not
  read JSON text back.
- It has no command-line tool.