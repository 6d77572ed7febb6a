"""Memory duplication helpers.

Small stateless copies used around the logger: clone a byte span, clone a
string, turn a byte span into a string, and copy into a fixed-size buffer with
truncation.  All of them map ``None`` input to ``None`` output instead of
raising.
"""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def memdup(data: BytesLike | None, n: int) -> bytes | None:
    """Return an owned copy of the first ``n`` bytes of ``data``.

    A negative ``n`` yields an empty copy.
    """
    if data is None:
        return None
    return bytes(memoryview(data)[: max(n, 0)])


def strdup(s: str | None) -> str | None:
    """Return ``s`` as a plain str, or None if ``s`` is None."""
    if s is None:
        return None
    return str(s)


def strmemdup(data: BytesLike | None, n: int) -> str | None:
    """Convert the first ``n`` bytes of ``data`` into a string.

    Bytes are decoded as UTF-8; undecodable sequences are replaced.
    """
    if data is None:
        return None
    return bytes(memoryview(data)[: max(n, 0)]).decode("utf-8", "replace")


def strmemcpy(
    dest: bytearray | None,
    dest_size: int,
    src: BytesLike | None,
    n: int,
) -> int:
    """Copy at most ``dest_size - 1`` bytes of ``src`` into ``dest``.

    ``dest`` is always NUL-terminated after the copied bytes.  Oversized input
    is truncated silently.  ``dest_size`` is clamped to ``len(dest)`` and a
    negative ``n`` copies nothing.

    Returns the number of bytes copied (the terminator not included).
    """
    if dest is None or dest_size <= 0:
        return 0

    dest_size = min(dest_size, len(dest))
    if dest_size == 0:
        return 0

    if src is None:
        n = 0
    else:
        n = max(0, min(n, len(src), dest_size - 1))
        if n > 0:
            dest[:n] = memoryview(src)[:n]
    dest[n] = 0
    return n
