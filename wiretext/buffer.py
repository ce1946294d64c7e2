"""Growable null-terminated byte buffer."""

from __future__ import annotations

from wiretext.exceptions import BufferAllocationError

# Upper bound on growth; keeps retry loops over a buffer finite.
DEFAULT_MAX_CAPACITY = 64 * 1024 * 1024


class StringBuffer:
    """A byte buffer with a logical size and a larger allocated capacity.

    The byte at ``size`` is always a terminator (``0``) once anything has been
    committed, so ``size`` never exceeds ``capacity - 1``. Writers fill the
    region returned by :meth:`spare` and then commit with :meth:`resize`.
    """

    def __init__(self, capacity: int = 0, max_capacity: int = DEFAULT_MAX_CAPACITY):
        """Initialize an empty buffer.

        Args:
            capacity: Bytes to allocate up front
            max_capacity: Largest capacity :meth:`grow` will accept
        """
        if capacity < 0:
            raise ValueError(f"Capacity must not be negative, got {capacity}")
        if capacity > max_capacity:
            raise BufferAllocationError(capacity, max_capacity)
        self.max_capacity = max_capacity
        self._data = bytearray(capacity)
        self._size = 0

    @property
    def size(self) -> int:
        """Logical size in bytes, excluding the terminator."""
        return self._size

    @property
    def capacity(self) -> int:
        """Allocated size in bytes."""
        return len(self._data)

    @property
    def value(self) -> bytes:
        """Committed contents."""
        return bytes(self._data[: self._size])

    def spare(self) -> memoryview:
        """Return a writable view from the logical size to the capacity.

        Release the view (``with buf.spare() as region:``) before growing.
        """
        view = memoryview(self._data)
        try:
            return view[self._size :]
        finally:
            view.release()

    def grow(self, capacity: int) -> None:
        """Grow the allocation to at least ``capacity`` bytes.

        Raises:
            BufferAllocationError: If ``capacity`` exceeds ``max_capacity``
        """
        if capacity <= len(self._data):
            return
        if capacity > self.max_capacity:
            raise BufferAllocationError(capacity, self.max_capacity)
        self._data.extend(bytes(capacity - len(self._data)))

    def resize(self, size: int) -> None:
        """Commit a new logical size and terminate the contents there."""
        if not 0 <= size < len(self._data):
            raise ValueError(
                f"Size must be between 0 and {len(self._data) - 1}, got {size}"
            )
        self._data[size] = 0
        self._size = size

    def clear(self) -> None:
        """Drop the contents, keeping the allocation."""
        if self._data:
            self._data[0] = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return self.value.decode("ascii", "backslashreplace")

    def __repr__(self) -> str:
        return f"StringBuffer(size={self._size}, capacity={self.capacity})"
