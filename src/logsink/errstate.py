"""Ambient error-code preservation for the logging write path.

The register preserved here is the C ``errno`` value ctypes exposes through
``ctypes.get_errno()`` / ``ctypes.set_errno()``; it is what foreign calls made
with ``use_errno=True`` report back to Python.  A caller that reads it to
describe a failure and then logs the failure must see the same value after the
log call returns.
"""

from __future__ import annotations

import ctypes
from collections.abc import Iterator
from contextlib import contextmanager


def get_errno() -> int:
    """Return the current ambient error code."""
    return ctypes.get_errno()


def set_errno(value: int) -> int:
    """Set the ambient error code, returning the previous value."""
    return ctypes.set_errno(value)


@contextmanager
def preserved_errno() -> Iterator[int]:
    """Snapshot the error code on entry and restore it on exit.

    Yields the saved value.  The restore also runs when the body raises.
    """
    saved = ctypes.get_errno()
    try:
        yield saved
    finally:
        ctypes.set_errno(saved)
