"""Names and numbers for IP type-of-service and DiffServ code points."""

from __future__ import annotations

import re

__all__ = ["QOS_NAMES", "parse_qos", "iptos_to_str"]

IPTOS_LOWDELAY = 0x10
IPTOS_THROUGHPUT = 0x08
IPTOS_RELIABILITY = 0x04

MAX_DSCP = 63

# Name lookups go through this table in order; the first match wins.
QOS_NAMES: tuple[tuple[str, int], ...] = (
    ("af11", 0x28),
    ("af12", 0x30),
    ("af13", 0x38),
    ("af21", 0x48),
    ("af22", 0x50),
    ("af23", 0x58),
    ("af31", 0x68),
    ("af32", 0x70),
    ("af33", 0x78),
    ("af41", 0x88),
    ("af42", 0x90),
    ("af43", 0x98),
    ("cs0", 0x00),
    ("cs1", 0x20),
    ("cs2", 0x40),
    ("cs3", 0x60),
    ("cs4", 0x80),
    ("cs5", 0xA0),
    ("cs6", 0xC0),
    ("cs7", 0xE0),
    ("ef", 0xB8),
    ("lowdelay", IPTOS_LOWDELAY),
    ("throughput", IPTOS_THROUGHPUT),
    ("reliability", IPTOS_RELIABILITY),
)

_INTEGER = re.compile(
    r"\s*(?P<sign>[+-]?)(?:0[xX](?P<hex>[0-9a-fA-F]+)|(?P<oct>0[0-7]*)|(?P<dec>[1-9][0-9]*))"
)


def _parse_c_integer(text: str) -> int:
    """Parse an integer the way a base-0 C conversion does, requiring all of ``text``."""
    match = _INTEGER.fullmatch(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    if match["hex"] is not None:
        value = int(match["hex"], 16)
    elif match["oct"] is not None:
        value = int(match["oct"], 8)
    else:
        value = int(match["dec"], 10)
    return -value if match["sign"] == "-" else value


def parse_qos(text: str) -> int:
    """Turn a QoS name or a DSCP number (0-63) into a TOS byte value."""
    if text is None:
        raise ValueError("no QoS value given")
    if text.isascii():
        wanted = text.lower()
        for name, value in QOS_NAMES:
            if name == wanted:
                return value
    try:
        dscp = _parse_c_integer(text)
    except ValueError:
        raise ValueError(f"unknown QoS value: {text!r}") from None
    if not 0 <= dscp <= MAX_DSCP:
        raise ValueError(f"DSCP value out of range 0-{MAX_DSCP}: {text!r}")
    return dscp << 2


def iptos_to_str(iptos: int) -> str:
    """Name a TOS value, or format it in hex; out-of-range values count as 0."""
    if iptos < 0 or iptos > 64:
        iptos = 0
    for name, value in QOS_NAMES:
        if value == iptos:
            return name
    return f"0x{iptos:02x}"