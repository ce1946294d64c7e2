"""String and environment helpers."""

from __future__ import annotations

import os
from typing import Mapping

_TRUE_VALUES = ("true", "1", "yes", "on")


def _lower(ch: str) -> int:
    code = ord(ch)
    # ASCII only, like tolower() in the C locale
    if 0x41 <= code <= 0x5A:
        return code + 0x20
    return code


def strcasecmp(a: str, b: str) -> int:
    """Compare ``a`` with ``b`` ignoring ASCII case.

    Returns 0 when equal, otherwise a value whose sign orders ``a`` against
    ``b``. When ``b`` is a prefix of ``a`` the code of the next character of
    ``a`` is returned.
    """
    for i, ch in enumerate(b):
        diff = (_lower(a[i]) if i < len(a) else 0) - _lower(ch)
        if diff != 0:
            return diff
    return ord(a[len(b)]) if len(a) > len(b) else 0


def strncasecmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b`` ignoring ASCII case."""
    diff = 0
    i = 0
    while i < len(b) and n > 0:
        diff = (_lower(a[i]) if i < len(a) else 0) - _lower(b[i])
        if diff != 0:
            return diff
        i += 1
        n -= 1
    if n == 0:
        return diff
    return ord(a[i]) if i < len(a) else 0


def parse_bool(value: str) -> bool:
    """True for ``true``, ``1``, ``yes`` and ``on`` in any case."""
    return any(strcasecmp(value, candidate) == 0 for candidate in _TRUE_VALUES)


def env_bool(name: str, environ: Mapping[str, str] | None = None) -> bool:
    """Read a boolean flag from the environment.

    ``true``, ``1``, ``yes`` and ``on`` (any case) are true; anything else,
    including an unset variable, is false.
    """
    if environ is None:
        environ = os.environ
    value = environ.get(name)
    if value is None:
        return False
    return parse_bool(value)
