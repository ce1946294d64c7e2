"""Exception classes for wiretext."""

from __future__ import annotations

from wiretext.codes import Status, describe


class WiretextError(Exception):
    """Base exception for wiretext errors."""

    pass


class BufferAllocationError(WiretextError):
    """A buffer could not grow to the requested capacity."""

    def __init__(self, requested: int, limit: int):
        super().__init__(
            f"Cannot grow buffer to {requested} bytes (limit {limit} bytes)"
        )
        self.requested = requested
        self.limit = limit


class QuoteError(WiretextError):
    """Quoting failed with a non-recoverable status."""

    def __init__(self, status: int):
        super().__init__(f"Quoting failed: {describe(status)}")
        self.status = status

    @property
    def out_of_memory(self) -> bool:
        return self.status == Status.OUT_OF_MEMORY


class ConfigError(WiretextError):
    """Invalid configuration value."""

    pass
