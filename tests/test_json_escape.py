import pytest

from ipmeter.json_escape import (
    JsonEscapeError,
    decode_utf16_literal,
    escape_string,
    parse_hex4,
    unescape_string,
)


def test_parse_hex4_ignores_case():
    assert parse_hex4("ABCD") == parse_hex4("abcd") == 0xABCD


def test_parse_hex4_invalid_digit_gives_zero():
    assert parse_hex4("12g4") == 0


def test_parse_hex4_reads_only_four_digits():
    assert parse_hex4("00417777") == parse_hex4("0041")


def test_parse_hex4_too_short():
    with pytest.raises(JsonEscapeError):
        parse_hex4("12")


def test_decode_basic_escape_consumes_six():
    char, length = decode_utf16_literal("\\u0041rest", 0)
    assert char == "A"
    assert length == 6


def test_decode_at_offset():
    char, length = decode_utf16_literal("xy\\u00e9", 2)
    assert char == "\u00e9"
    assert length == 6


def test_decode_surrogate_pair_consumes_twelve():
    expected = "\ud83d\ude00".encode("utf-16", "surrogatepass").decode("utf-16")
    char, length = decode_utf16_literal("\\ud83d\\ude00", 0)
    assert char == expected
    assert length == 12


@pytest.mark.parametrize(
    "text",
    [
        "\\u12",
        "\\udc00",
        "\\ud83d",
        "\\ud83dabcdef",
        "\\ud83d\\u0041",
    ],
)
def test_decode_rejects_bad_sequences(text):
    with pytest.raises(JsonEscapeError):
        decode_utf16_literal(text, 0)


@pytest.mark.parametrize(
    "escaped, plain",
    [
        ("\\n", "\n"),
        ("\\t", "\t"),
        ("\\b", "\b"),
        ("\\f", "\f"),
        ("\\r", "\r"),
        ('\\"', '"'),
        ("\\\\", "\\"),
        ("\\/", "/"),
    ],
)
def test_unescape_simple_sequences(escaped, plain):
    assert unescape_string("a" + escaped + "b") == "a" + plain + "b"


def test_unescape_plain_text_unchanged():
    assert unescape_string("hello world") == "hello world"


def test_unescape_unicode_escape():
    assert unescape_string("caf\\u00e9") == "caf\u00e9"


def test_unescape_unknown_escape():
    with pytest.raises(JsonEscapeError):
        unescape_string("a\\qb")


def test_unescape_trailing_backslash():
    with pytest.raises(JsonEscapeError):
        unescape_string("abc\\")


def test_escape_none_is_empty_literal():
    assert escape_string(None) == '""'


def test_escape_plain_text_only_quoted():
    assert escape_string("plain/text") == '"plain/text"'


def test_escape_control_character_uses_unicode_form():
    assert escape_string("\x01") == '"\\u0001"'


def test_escape_newline_short_form():
    assert escape_string("a\nb") == '"a\\nb"'


def test_escape_leaves_non_ascii():
    assert escape_string("\u00e9") == '"\u00e9"'


@pytest.mark.parametrize(
    "text",
    [
        "",
        "simple",
        'quote " and \\ backslash',
        "tabs\tnew\nlines\rfeeds\f\b",
        "".join(chr(c) for c in range(40)),
        "unicode \u00e9\u4e2d\U0001f600",
    ],
)
def test_round_trip(text):
    literal = escape_string(text)
    assert literal.startswith('"') and literal.endswith('"')
    assert unescape_string(literal[1:-1]) == text


def test_escaped_output_has_no_raw_controls():
    literal = escape_string("".join(chr(c) for c in range(32)))
    assert all(ord(c) >= 32 for c in literal)