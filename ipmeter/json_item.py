"""JSON value tree: typed items, containers and the operations that edit them."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from string import ascii_lowercase, ascii_uppercase

VERSION_MAJOR = 1
VERSION_MINOR = 7
VERSION_PATCH = 15

NESTING_LIMIT = 1000

INT64_MAX = 9223372036854775807
INT64_MIN = -INT64_MAX - 1

_ASCII_LOWER = str.maketrans(ascii_uppercase, ascii_lowercase)


def version() -> str:
    """Return the version of the JSON item model as "major.minor.patch"."""
    return f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"


class ItemType(enum.IntFlag):
    """Kind of a JSON item; values are single bits so they can be masked."""

    INVALID = 0
    FALSE = 1 << 0
    TRUE = 1 << 1
    NULL = 1 << 2
    NUMBER = 1 << 3
    STRING = 1 << 4
    ARRAY = 1 << 5
    OBJECT = 1 << 6
    RAW = 1 << 7


def _saturate(value: float) -> int:
    if math.isnan(value):
        return 0
    if value >= INT64_MAX:
        return INT64_MAX
    if value <= INT64_MIN:
        return INT64_MIN
    return int(value)


def _names_match(wanted: str, candidate: str | None, case_sensitive: bool) -> bool:
    if candidate is None:
        return False
    if case_sensitive:
        return wanted == candidate
    return wanted.translate(_ASCII_LOWER) == candidate.translate(_ASCII_LOWER)


@dataclass(eq=False)
class JsonItem:
    """One JSON value; arrays and objects hold their members in ``children``."""

    type: ItemType = ItemType.INVALID
    value_string: str | None = None
    value_number: float = 0.0
    name: str | None = None
    children: list[JsonItem] = field(default_factory=list)

    # -- construction -------------------------------------------------------

    @classmethod
    def null(cls) -> JsonItem:
        return cls(type=ItemType.NULL)

    @classmethod
    def true(cls) -> JsonItem:
        return cls(type=ItemType.TRUE)

    @classmethod
    def false(cls) -> JsonItem:
        return cls(type=ItemType.FALSE)

    @classmethod
    def boolean(cls, value: object) -> JsonItem:
        return cls(type=ItemType.TRUE if value else ItemType.FALSE)

    @classmethod
    def number(cls, value: float) -> JsonItem:
        return cls(type=ItemType.NUMBER, value_number=float(value))

    @classmethod
    def string(cls, value: str) -> JsonItem:
        if value is None:
            raise ValueError("string value must not be None")
        return cls(type=ItemType.STRING, value_string=value)

    @classmethod
    def raw(cls, value: str) -> JsonItem:
        """Create an item whose text is emitted verbatim when rendered."""
        if value is None:
            raise ValueError("raw value must not be None")
        return cls(type=ItemType.RAW, value_string=value)

    @classmethod
    def array(cls, items: Iterable[JsonItem] = ()) -> JsonItem:
        result = cls(type=ItemType.ARRAY)
        for item in items:
            result.append(item)
        return result

    @classmethod
    def object(
        cls, members: Mapping[str, JsonItem] | Iterable[tuple[str, JsonItem]] = ()
    ) -> JsonItem:
        result = cls(type=ItemType.OBJECT)
        pairs = members.items() if isinstance(members, Mapping) else members
        for name, item in pairs:
            result.add(name, item)
        return result

    @classmethod
    def number_array(cls, numbers: Iterable[float]) -> JsonItem:
        return cls.array(cls.number(n) for n in numbers)

    @classmethod
    def string_array(cls, strings: Iterable[str]) -> JsonItem:
        return cls.array(cls.string(s) for s in strings)

    # -- values -------------------------------------------------------------

    def is_bool(self) -> bool:
        return bool(self.type & (ItemType.TRUE | ItemType.FALSE))

    def int_value(self) -> int:
        """The number truncated to a signed 64-bit integer, saturating at the limits."""
        return _saturate(self.value_number)

    def set_number(self, value: float) -> float:
        self.value_number = float(value)
        return self.value_number

    def set_string(self, value: str) -> str:
        if self.type != ItemType.STRING:
            raise TypeError("only string items can take a new string value")
        if value is None:
            raise ValueError("string value must not be None")
        self.value_string = value
        return value

    def set_bool(self, value: object) -> ItemType:
        """Flip a boolean item; returns the new type, or INVALID for non-booleans."""
        if not self.is_bool():
            return ItemType.INVALID
        self.type = ItemType.TRUE if value else ItemType.FALSE
        return self.type

    # -- container editing --------------------------------------------------

    def _check_child(self, item: JsonItem | None) -> JsonItem:
        if self.type not in (ItemType.ARRAY, ItemType.OBJECT):
            raise TypeError("only arrays and objects hold members")
        if item is None:
            raise ValueError("item must not be None")
        if item is self:
            raise ValueError("an item cannot contain itself")
        return item

    def append(self, item: JsonItem) -> JsonItem:
        self.children.append(self._check_child(item))
        return item

    def add(self, name: str, item: JsonItem) -> JsonItem:
        if name is None:
            raise ValueError("member name must not be None")
        self._check_child(item)
        item.name = name
        self.children.append(item)
        return item

    def get(self, name: str, case_sensitive: bool = False) -> JsonItem | None:
        if name is None:
            return None
        return next(
            (c for c in self.children if _names_match(name, c.name, case_sensitive)),
            None,
        )

    def has(self, name: str) -> bool:
        return self.get(name) is not None

    def insert(self, index: int, item: JsonItem) -> JsonItem:
        """Insert before position ``index``; an index past the end appends."""
        if index < 0:
            raise IndexError("index must not be negative")
        self._check_child(item)
        if index >= len(self.children):
            self.children.append(item)
        else:
            self.children.insert(index, item)
        return item

    def _position(self, item: JsonItem) -> int:
        for position, child in enumerate(self.children):
            if child is item:
                return position
        raise ValueError("item is not a member of this container")

    def detach(self, item: JsonItem) -> JsonItem:
        del self.children[self._position(item)]
        return item

    def _checked_index(self, index: int) -> int:
        if index < 0 or index >= len(self.children):
            raise IndexError(f"no member at index {index}")
        return index

    def detach_index(self, index: int) -> JsonItem:
        return self.children.pop(self._checked_index(index))

    def detach_name(self, name: str, case_sensitive: bool = False) -> JsonItem:
        target = self.get(name, case_sensitive)
        if target is None:
            raise KeyError(name)
        return self.detach(target)

    def replace(self, item: JsonItem, replacement: JsonItem) -> JsonItem:
        if replacement is None:
            raise ValueError("replacement must not be None")
        if replacement is item:
            return replacement
        self.children[self._position(item)] = replacement
        return replacement

    def replace_index(self, index: int, replacement: JsonItem) -> JsonItem:
        if replacement is None:
            raise ValueError("replacement must not be None")
        self.children[self._checked_index(index)] = replacement
        return replacement

    def replace_name(
        self, name: str, replacement: JsonItem, case_sensitive: bool = False
    ) -> JsonItem:
        if replacement is None or name is None:
            raise ValueError("name and replacement must not be None")
        replacement.name = name
        target = self.get(name, case_sensitive)
        if target is None:
            raise KeyError(name)
        return self.replace(target, replacement)

    # -- container protocol -------------------------------------------------

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[JsonItem]:
        return iter(self.children)

    def __getitem__(self, index: int | str) -> JsonItem:
        if isinstance(index, str):
            found = self.get(index)
            if found is None:
                raise KeyError(index)
            return found
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError("index must be an int or a member name")
        return self.children[self._checked_index(index)]