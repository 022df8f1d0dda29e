# ipmeter

An in-memory JSON item tree for Python, with structural comparison, deep
copying and JSON string-literal escaping. A small helper also turns
DSCP/TOS names into values and back.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## JSON items

`ipmeter.json_item.JsonItem` is one node of a JSON tree. Its kind is an
`ItemType` flag (`NULL`, `TRUE`, `FALSE`, `NUMBER`, `STRING`, `RAW`,
`ARRAY`, `OBJECT`, or `INVALID`). A node keeps its data in plain
attributes: `type`, `value_string`, `value_number`, `name` (the member
name inside an object) and `children`.

```python
from ipmeter.json_item import JsonItem

doc = JsonItem.object({"name": JsonItem.string("test")})
doc.add("ports", JsonItem.number_array([5201, 5202]))
doc.add("verbose", JsonItem.true())

doc.get("NAME").value_string             # "test": names match ignoring ASCII case
doc.get("NAME", case_sensitive=True)     # None
doc["ports"][1].int_value()              # 5202
len(doc)                                 # 3
```

The constructors are `null`, `true`, `false`, `boolean`, `number`,
`string`, `raw`, `array`, `object`, `number_array` and `string_array`.
A `raw` item holds text that is meant to be emitted verbatim.

You edit containers in place with `append`, `add`, `insert`, `detach`,
`detach_index`, `detach_name`, `replace`, `replace_index` and
`replace_name`. `has(name)` tells whether a member exists. If `insert`
gets an index past the end, it appends the item. A missing index raises
`IndexError`, a missing name raises `KeyError`, and adding a member to an
item that is not an array or object raises `TypeError`. Arrays and
objects support `len()`, iteration and indexing by position or by member
name.

For values, `int_value()` truncates the number to a signed 64-bit
integer, saturating at the limits. NaN gives 0. `set_number` sets the
number. `set_string` only works on string items and raises `TypeError`
otherwise. `set_bool` changes a boolean item and returns its new type,
or `ItemType.INVALID` when the item is not a boolean. `version()`
returns the item model's version string, `"1.7.15"`.

## Comparing and copying

```python
from ipmeter.json_compare import compare, duplicate, numbers_equal

copy = duplicate(doc, True)
compare(doc, copy, True)          # True
numbers_equal(0.1 + 0.2, 0.3)     # True: equal within one relative epsilon
```

`compare` returns False when either side is missing or of an invalid
type. Numbers are compared with `numbers_equal`. Objects are equal when
every member on each side has an equal counterpart on the other side,
matched by name, either case-sensitively or ignoring ASCII case.
`duplicate(item, recurse=False)` copies only the node itself and leaves
out its children.

## Escaping string literals

`ipmeter.json_escape` works on the text of JSON string literals:

- `escape_string(text)` returns the quoted literal. `"`, `\` and the
  control characters are escaped: `\b \f \n \r \t` get their short forms
  and the others become `\u00XX`. `None` becomes `""`.
- `unescape_string(body)` resolves the escapes in the text between the
  quotes, including `\uXXXX` and surrogate pairs.
- `decode_utf16_literal(text, position)` decodes one `\uXXXX` escape, or
  a surrogate pair, and returns the character and the number of
  characters it consumed (6 or 12).
- `parse_hex4(text)` reads four hex digits. Any non-hex digit among them
  gives 0.

Malformed input raises `JsonEscapeError`, which is a subclass of
`ValueError`.

## DSCP / TOS values

```python
from ipmeter.dscp import parse_qos, iptos_to_str

parse_qos("af11")      # 0x28
parse_qos("EF")        # 0xb8, names are matched ignoring case
parse_qos("46")        # 46 << 2 == 0xb8
parse_qos("0x2e")      # also 0xb8; hex and leading-zero octal are accepted
iptos_to_str(0x04)     # "reliability"
iptos_to_str(0x2c)     # "0x2c"
iptos_to_str(200)      # "cs0": values outside 0..64 count as 0
```

`parse_qos` shifts DSCP numbers 0..63 into TOS position. It raises
`ValueError` when the name is unknown or the number is out of range. The
full name table is `QOS_NAMES`.

## What this package does not do

The package has no reader for JSON text and no writer for it. You build
trees with the constructors and editing methods above, and there is no
function that turns a tree into a JSON document or parses a document
into a tree. Only individual string literals can be escaped and
unescaped. Nor does the package strip comments or whitespace from JSON
text. It has no command-line program and does no network measurement.