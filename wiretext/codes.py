"""Status codes returned by the quoting operations."""

from __future__ import annotations

from enum import IntEnum


class Status(IntEnum):
    """Result codes. Error codes are negative so they never collide with counts."""

    OK = 0
    ERR = -2
    OVERFLOW = -3
    ARG_ERR = -6
    OUT_OF_MEMORY = -10


def describe(code: int) -> str:
    """Return the name of a status code, or ``UNKNOWN(<code>)``."""
    try:
        return Status(code).name
    except ValueError:
        return f"UNKNOWN({code})"
