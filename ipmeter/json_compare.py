"""Structural equality and copying of JSON item trees."""

from __future__ import annotations

import sys

from ipmeter.json_item import ItemType, JsonItem

_VALID_TYPES = frozenset(
    {
        ItemType.FALSE,
        ItemType.TRUE,
        ItemType.NULL,
        ItemType.NUMBER,
        ItemType.STRING,
        ItemType.RAW,
        ItemType.ARRAY,
        ItemType.OBJECT,
    }
)


def numbers_equal(a: float, b: float) -> bool:
    """True when ``a`` and ``b`` differ by at most one epsilon relative to the larger."""
    larger = max(abs(a), abs(b))
    return abs(a - b) <= larger * sys.float_info.epsilon


def _members_match(
    left: JsonItem, right: JsonItem, case_sensitive: bool
) -> bool:
    for member in left:
        if member.name is None:
            return False
        counterpart = right.get(member.name, case_sensitive)
        if counterpart is None or not compare(member, counterpart, case_sensitive):
            return False
    return True


def compare(
    a: JsonItem | None, b: JsonItem | None, case_sensitive: bool = False
) -> bool:
    """Recursively compare two items; missing or invalid items are never equal.

    ``case_sensitive`` decides whether object member names must match exactly
    or only up to ASCII case.
    """
    if a is None or b is None or a.type != b.type:
        return False
    if a.type not in _VALID_TYPES:
        return False
    if a is b:
        return True

    kind = a.type
    if kind in (ItemType.FALSE, ItemType.TRUE, ItemType.NULL):
        return True
    if kind == ItemType.NUMBER:
        return numbers_equal(a.value_number, b.value_number)
    if kind in (ItemType.STRING, ItemType.RAW):
        if a.value_string is None or b.value_string is None:
            return False
        return a.value_string == b.value_string
    if kind == ItemType.ARRAY:
        if len(a) != len(b):
            return False
        return all(compare(x, y, case_sensitive) for x, y in zip(a, b))
    # Objects: every member of each side must have an equal counterpart.
    return _members_match(a, b, case_sensitive) and _members_match(
        b, a, case_sensitive
    )


def duplicate(item: JsonItem, recurse: bool = True) -> JsonItem:
    """Return a new item equal to ``item``; children are copied only when ``recurse``."""
    if item is None:
        raise ValueError("cannot duplicate a missing item")
    copy = JsonItem(
        type=item.type,
        value_string=item.value_string,
        value_number=item.value_number,
        name=item.name,
    )
    if recurse:
        copy.children = [duplicate(child, True) for child in item.children]
    return copy