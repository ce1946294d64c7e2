"""Function entry/data/exit tracing.

A :class:`Tracer` is passed explicitly to the calls that should report
through it; there is no process-wide tracer to install or replace.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from wiretext.quote import quote_bytes

logger = logging.getLogger(__name__)

TraceHook = Callable[[str, Optional[str]], None]
F = TypeVar("F", bound=Callable[..., Any])

NULL_TEXT = "<null>"
STRING_LIMIT = 16


def format_value(value: Any, *, limit: int = STRING_LIMIT) -> str:
    """Render a traced value as text.

    - ``None``: ``"<null>"``
    - bool: ``"true"`` / ``"false"``
    - int: decimal
    - float: ``%.18g``
    - str: first ``limit`` characters
    - bytes: first ``limit`` bytes, quoted so control bytes never reach a log
    - anything else: ``0x`` followed by the object's id in hex
    """
    if value is None:
        return NULL_TEXT
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return "%d" % value
    if isinstance(value, float):
        return "%.18g" % value
    if isinstance(value, str):
        return value[:limit]
    if isinstance(value, (bytes, bytearray, memoryview)):
        return quote_bytes(bytes(value[:limit]))
    return "0x%x" % id(value)


@dataclass
class Tracer:
    """Callbacks invoked on function entry, for traced data, and on exit."""

    entry: TraceHook | None = None
    data: TraceHook | None = None
    exit: TraceHook | None = None

    def enter(self, name: str) -> None:
        if self.entry:
            self.entry(name, None)

    def record(self, prefix: str, value: Any) -> None:
        if self.data:
            self.data(prefix, format_value(value))

    def leave(self, name: str, rc: Any = None) -> Any:
        """Report the return value of ``name`` and hand it back unchanged."""
        if self.exit:
            self.exit(name, "" if rc is None else format_value(rc))
        return rc

    def wrap(self, func: F) -> F:
        """Decorate ``func`` so every call is reported on entry and exit."""
        name = func.__qualname__

        @functools.wraps(func)
        def traced(*args: Any, **kwargs: Any) -> Any:
            self.enter(name)
            return self.leave(name, func(*args, **kwargs))

        return traced  # type: ignore[return-value]


def logging_tracer(target: logging.Logger | None = None) -> Tracer:
    """Create a tracer that emits DEBUG records on ``target``."""
    log = target or logger

    def on_entry(name: str, _: str | None) -> None:
        log.debug(f"-> {name}")

    def on_data(prefix: str, text: str | None) -> None:
        log.debug(f"   {prefix}: {text}")

    def on_exit(name: str, text: str | None) -> None:
        log.debug(f"<- {name}: {text}")

    return Tracer(entry=on_entry, data=on_data, exit=on_exit)
