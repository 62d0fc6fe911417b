"""
Shared helpers for reading loosely typed card configuration.
"""
from typing import Any

TRUTHY_TOKENS = frozenset({'1', 'true', 't', 'yes', 'y', 'on'})


def parse_boolean(value: Any) -> bool:
    """
    Interpret a configuration flag.

    Booleans pass through unchanged. Strings are stripped and compared
    case-insensitively against ``TRUTHY_TOKENS``. Everything else, including
    ``None`` and numbers, is false.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_TOKENS
    return False
