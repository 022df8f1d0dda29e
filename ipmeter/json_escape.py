"""Escaping and unescaping of JSON string literals."""

from __future__ import annotations

from string import hexdigits

__all__ = [
    "JsonEscapeError",
    "parse_hex4",
    "decode_utf16_literal",
    "unescape_string",
    "escape_string",
]

_HEX_DIGITS = frozenset(hexdigits)

_SIMPLE_ESCAPES = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "\\": "\\",
    "/": "/",
}

# Control characters without a short form are written as \u00XX.
_ESCAPE_TABLE = {code: f"\\u{code:04x}" for code in range(32)}
_ESCAPE_TABLE.update(
    {
        ord('"'): '\\"',
        ord("\\"): "\\\\",
        ord("\b"): "\\b",
        ord("\f"): "\\f",
        ord("\n"): "\\n",
        ord("\r"): "\\r",
        ord("\t"): "\\t",
    }
)


class JsonEscapeError(ValueError):
    """Raised for a malformed escape sequence in a JSON string literal."""


def parse_hex4(text: str) -> int:
    """Read the first four characters of ``text`` as a hex number.

    Any character that is not a hex digit makes the whole value 0.
    """
    if len(text) < 4:
        raise JsonEscapeError("expected four hex digits")
    value = 0
    for digit in text[:4]:
        if digit not in _HEX_DIGITS:
            return 0
        value = value * 16 + int(digit, 16)
    return value


def decode_utf16_literal(text: str, position: int) -> tuple[str, int]:
    r"""Decode the ``\uXXXX`` (or surrogate pair) starting at ``position``.

    Returns the decoded character and the number of characters consumed.
    """
    if len(text) - position < 6 or text[position : position + 2] != "\\u":
        raise JsonEscapeError("truncated \\u escape")

    first = parse_hex4(text[position + 2 : position + 6])
    if 0xDC00 <= first <= 0xDFFF:
        raise JsonEscapeError("unpaired low surrogate")

    if 0xD800 <= first <= 0xDBFF:
        second_at = position + 6
        if len(text) - second_at < 6:
            raise JsonEscapeError("high surrogate at end of input")
        if text[second_at : second_at + 2] != "\\u":
            raise JsonEscapeError("missing second half of surrogate pair")
        second = parse_hex4(text[second_at + 2 : second_at + 6])
        if not 0xDC00 <= second <= 0xDFFF:
            raise JsonEscapeError("invalid second half of surrogate pair")
        codepoint = 0x10000 + (((first & 0x3FF) << 10) | (second & 0x3FF))
        return chr(codepoint), 12

    return chr(first), 6


def unescape_string(body: str) -> str:
    """Resolve the escape sequences in the text between a literal's quotes."""
    parts: list[str] = []
    position = 0
    while position < len(body):
        backslash = body.find("\\", position)
        if backslash < 0:
            parts.append(body[position:])
            break
        parts.append(body[position:backslash])
        if backslash + 1 >= len(body):
            raise JsonEscapeError("string ends with a lone backslash")
        code = body[backslash + 1]
        if code == "u":
            char, length = decode_utf16_literal(body, backslash)
        elif code in _SIMPLE_ESCAPES:
            char, length = _SIMPLE_ESCAPES[code], 2
        else:
            raise JsonEscapeError(f"unknown escape sequence \\{code}")
        parts.append(char)
        position = backslash + length
    return "".join(parts)


def escape_string(text: str | None) -> str:
    """Return ``text`` as a quoted JSON literal; ``None`` becomes ``""``."""
    if text is None:
        return '""'
    return '"' + text.translate(_ESCAPE_TABLE) + '"'