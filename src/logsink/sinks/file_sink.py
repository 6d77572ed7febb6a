"""File-path sink: reopen the file in append mode on every write."""

from __future__ import annotations

import os
from typing import Union

from logsink.sinks.base import SinkKind

PathLike = Union[str, "os.PathLike[str]"]


class FilePathSink:
    """Append to ``path`` with an open/write/close cycle per call.

    The path is only read, never copied or normalized.  When the file cannot
    be opened or written the data is dropped without a trace: reporting it
    through the logging system could recurse.
    """

    kind = SinkKind.FILE_PATH

    def __init__(self, path: PathLike) -> None:
        self._path = path

    @property
    def path(self) -> PathLike:
        return self._path

    def write(self, data: bytes) -> None:
        try:
            with open(self._path, "ab") as f:
                f.write(data)
        except OSError:
            pass
