"""JSON item tree with comparison, copying and string escaping, plus DSCP/TOS helpers."""

__version__ = "0.1.0"

__all__ = [
    "dscp",
    "json_compare",
    "json_escape",
    "json_item",
]