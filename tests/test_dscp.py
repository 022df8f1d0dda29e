import pytest

from ipmeter.dscp import QOS_NAMES, iptos_to_str, parse_qos


@pytest.mark.parametrize(
    "name, value",
    [("af11", 0x28), ("ef", 0xB8), ("cs0", 0x00), ("lowdelay", 0x10)],
)
def test_named_values(name, value):
    assert parse_qos(name) == value


def test_names_are_case_insensitive():
    assert parse_qos("AF41") == parse_qos("af41") == parse_qos("Af41")


@pytest.mark.parametrize("name, value", QOS_NAMES)
def test_every_table_entry_parses(name, value):
    assert parse_qos(name) == value


def test_number_is_shifted_into_tos():
    for dscp in (0, 1, 10, 46, 63):
        assert parse_qos(str(dscp)) == dscp << 2


def test_hex_and_octal_match_decimal():
    for dscp in (0, 7, 8, 46, 63):
        assert parse_qos(hex(dscp)) == parse_qos(str(dscp))
        assert parse_qos("0" + format(dscp, "o")) == parse_qos(str(dscp))


def test_uppercase_hex_prefix():
    assert parse_qos("0X2E") == parse_qos("0x2e")


@pytest.mark.parametrize(
    "text",
    ["", "64", "-1", "abc", "12abc", "0x", "08", "af1", "1.5", "4 "],
)
def test_invalid_values_raise(text):
    with pytest.raises(ValueError):
        parse_qos(text)


def test_none_raises():
    with pytest.raises(ValueError):
        parse_qos(None)


@pytest.mark.parametrize(
    "name",
    [n for n, v in QOS_NAMES if 0 <= v <= 64],
)
def test_name_round_trip_in_range(name):
    assert iptos_to_str(parse_qos(name)) == name


def test_unnamed_value_formatted_as_hex():
    assert iptos_to_str(1) == "0x01"


def test_hex_format_round_trips_through_parse():
    text = iptos_to_str(0x3C)
    assert text.startswith("0x")
    assert int(text, 16) == 0x3C


def test_out_of_range_treated_as_zero():
    assert iptos_to_str(-5) == iptos_to_str(0) == "cs0"
    assert iptos_to_str(0xB8) == "cs0"


def test_first_table_match_wins():
    assert iptos_to_str(0x20) == "cs1"