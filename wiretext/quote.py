"""Printable quoting of binary data for logs and diagnostics.

Printable ASCII bytes are copied verbatim; every other byte is rendered as a
four character ``\\xHH`` escape with lowercase hex digits. The encoding is
one-way: it is meant for humans reading protocol traces, not for round trips.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO, Union

from wiretext.buffer import DEFAULT_MAX_CAPACITY, StringBuffer
from wiretext.codes import Status, describe
from wiretext.exceptions import BufferAllocationError, QuoteError

if TYPE_CHECKING:
    from wiretext.trace import Tracer

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

ESCAPE_WIDTH = 4
MIN_GROWTH = 16
RENDER_BUFFER_SIZE = 256
TRUNCATED_MARKER = "... (truncated)"


def is_printable(byte: int) -> bool:
    """Locale-independent printable test (``isprint`` in the C locale)."""
    return 0x20 <= byte <= 0x7E


def quote_data(
    dst: bytearray | memoryview,
    src: BytesLike,
    *,
    capacity: int | None = None,
    size: int | None = None,
) -> int:
    """Quote ``src`` into the fixed region ``dst``.

    Args:
        dst: Writable destination region
        src: Bytes to quote
        capacity: Usable bytes of ``dst``, terminator included (default: all)
        size: Number of bytes of ``src`` to quote (default: all)

    Returns:
        Characters written (terminator excluded), ``Status.OVERFLOW`` if
        ``dst`` is too small, or ``Status.ARG_ERR`` for an out-of-range
        ``capacity``/``size``. On overflow the output written so far is cut
        back by one byte and terminated, so ``dst`` always holds valid text.
    """
    if capacity is None:
        capacity = len(dst)
    if size is None:
        size = len(src)
    if not 0 <= capacity <= len(dst) or not 0 <= size <= len(src):
        return Status.ARG_ERR
    if capacity == 0:
        return Status.OVERFLOW

    idx = 0
    for c in memoryview(src)[:size].tobytes():
        if is_printable(c):
            if idx < capacity - 1:
                dst[idx] = c
                idx += 1
                continue
        elif idx < capacity - ESCAPE_WIDTH:
            dst[idx : idx + ESCAPE_WIDTH] = b"\\x%02x" % c
            idx += ESCAPE_WIDTH
            continue
        dst[max(idx - 1, 0)] = 0
        return Status.OVERFLOW

    dst[idx] = 0
    return idx


def quote(
    dst: StringBuffer,
    src: BytesLike,
    *,
    size: int | None = None,
    tracer: Tracer | None = None,
) -> Status:
    """Append the quoted form of ``src`` to ``dst``, growing it as needed.

    Each overflow doubles the buffer (16 bytes minimum, capped at the buffer's
    ``max_capacity``) and quotes the whole input again.

    Returns:
        ``Status.OK`` on success, ``Status.OUT_OF_MEMORY`` if the buffer
        cannot grow any further, or the error status from :func:`quote_data`.
    """
    if tracer:
        tracer.enter("quote")
        tracer.record("src", bytes(src))

    while True:
        used = dst.size
        spare = dst.capacity - used
        with dst.spare() as region:
            n = quote_data(region, src, size=size)

        if n == Status.OVERFLOW:
            wanted = 2 * (used + spare) if used + spare else MIN_GROWTH
            target = min(wanted, dst.max_capacity)
            logger.debug(f"Quoted output overflowed {spare} spare bytes, growing to {target}")
            try:
                if target <= dst.capacity:
                    raise BufferAllocationError(wanted, dst.max_capacity)
                dst.grow(target)
            except BufferAllocationError as e:
                logger.debug(str(e))
                # partial output may have overwritten the terminator
                if dst.capacity:
                    dst.resize(used)
                status = Status.OUT_OF_MEMORY
                break
        elif n >= 0:
            dst.resize(used + n)
            status = Status.OK
            break
        else:
            status = Status(n)
            break

    if tracer:
        tracer.leave("quote", status.name)
    return status


def quote_bytes(
    src: BytesLike,
    *,
    max_capacity: int = DEFAULT_MAX_CAPACITY,
    tracer: Tracer | None = None,
) -> str:
    """Return the complete quoted form of ``src``.

    Raises:
        QuoteError: If the output would exceed ``max_capacity``
    """
    buf = StringBuffer(max_capacity=max_capacity)
    status = quote(buf, src, tracer=tracer)
    if status != Status.OK:
        raise QuoteError(status)
    return str(buf)


def _terminated_text(buf: bytearray) -> str:
    end = buf.find(0)
    if end < 0:
        end = len(buf)
    return buf[:end].decode("ascii")


def fprint_data(
    stream: TextIO,
    data: BytesLike,
    *,
    buffer_size: int = RENDER_BUFFER_SIZE,
    capacity: int | None = None,
    error_stream: TextIO | None = None,
) -> None:
    """Write a best-effort quoted rendering of ``data`` to ``stream``.

    Output longer than the fixed ``buffer_size`` is cut short and followed
    by ``"... (truncated)"``. Other failures are reported on
    ``error_stream`` (stderr by default) instead.
    """
    buf = bytearray(buffer_size)
    n = quote_data(buf, data, capacity=capacity)
    if n >= 0:
        stream.write(_terminated_text(buf))
    elif n == Status.OVERFLOW:
        stream.write(_terminated_text(buf))
        stream.write(TRUNCATED_MARKER)
    else:
        if error_stream is None:
            error_stream = sys.stderr
        error_stream.write(f"quote_data: {describe(n)}\n")


def print_data(data: BytesLike) -> None:
    """Write a best-effort quoted rendering of ``data`` to stdout."""
    fprint_data(sys.stdout, data)
