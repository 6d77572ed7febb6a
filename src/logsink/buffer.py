"""Growable byte-span formatter used by Logger.vprintf().

A FormatBuffer starts on preallocated storage sized for the common message.
When rendered output does not fit, the storage is replaced once by a larger
allocation that holds the whole output, so long messages are never truncated.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

DEFAULT_CAPACITY = 4096

Format = Union[str, bytes]


def render(fmt: Format, args: tuple[Any, ...] | Mapping[str, Any] = ()) -> bytes:
    """Render a printf-style template to bytes.

    ``str`` templates are encoded as UTF-8 after formatting.  An empty
    ``args`` leaves the template untouched, so literal ``%`` signs survive
    when there is nothing to substitute.
    """
    if isinstance(fmt, str):
        text = fmt % args if args else fmt
        return text.encode("utf-8", "replace")
    return bytes(fmt % args) if args else bytes(fmt)


class FormatBuffer:
    """Byte buffer with preallocated storage and single-step growth.

    Usage::

        with FormatBuffer() as buf:
            buf.printf("%d-%s", 42, "ok")
            sink.write(buf.data)
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._initial = capacity
        self._storage = bytearray(capacity)
        self._length = 0
        self._grown = False

    @property
    def capacity(self) -> int:
        return len(self._storage)

    @property
    def initial_capacity(self) -> int:
        """Size of the preallocated storage dispose() returns to."""
        return self._initial

    @property
    def length(self) -> int:
        return self._length

    @property
    def grown(self) -> bool:
        """True once the preallocated storage was replaced."""
        return self._grown

    @property
    def data(self) -> bytes:
        return bytes(self._storage[: self._length])

    def __len__(self) -> int:
        return self._length

    def _reserve(self, needed: int) -> None:
        if needed <= len(self._storage):
            return
        # One reallocation: at least double, at least enough for this append.
        storage = bytearray(max(needed, 2 * len(self._storage)))
        storage[: self._length] = self._storage[: self._length]
        self._storage = storage
        self._grown = True

    def append(self, data: bytes | bytearray | memoryview) -> int:
        """Append raw bytes, growing if needed. Returns the new length."""
        end = self._length + len(data)
        self._reserve(end)
        self._storage[self._length : end] = data
        self._length = end
        return end

    def append_formatted(
        self, fmt: Format, args: tuple[Any, ...] | Mapping[str, Any] = ()
    ) -> int:
        """Render ``fmt % args`` and append it. Returns the new length."""
        return self.append(render(fmt, args))

    def printf(self, fmt: Format, *args: Any) -> int:
        return self.append_formatted(fmt, args)

    def reset(self) -> None:
        """Forget the content but keep the current storage."""
        self._length = 0

    def dispose(self) -> None:
        """Release grown storage and return to the preallocated size."""
        if self._grown:
            self._storage = bytearray(self._initial)
            self._grown = False
        self._length = 0

    def __enter__(self) -> FormatBuffer:
        return self

    def __exit__(self, *exc: object) -> None:
        self.dispose()

    def __repr__(self) -> str:
        return (
            f"FormatBuffer(length={self._length}, capacity={self.capacity}, "
            f"grown={self._grown})"
        )
