"""Files addressed by path, opened and read or written as bytes."""

from __future__ import annotations

import io
import os
from types import TracebackType
from typing import BinaryIO, Union

from .bytearray import ByteArray

PathSource = Union[str, "os.PathLike[str]"]
DataSource = Union[ByteArray, bytes, bytearray, memoryview, str]


def file_exists(path: PathSource) -> bool:
    """True when ``path`` names an existing regular file."""
    return os.path.isfile(path)


def file_size(path: PathSource) -> int:
    """Size of the file in bytes; raises ``OSError`` when it cannot be read."""
    return os.path.getsize(path)


def _binary_mode(mode: str) -> str:
    if "b" in mode:
        return mode
    return mode.replace("t", "") + "b"


class File:
    """A file on disk that can be opened, read, written and removed."""

    def __init__(self, path: PathSource) -> None:
        self._path = os.fspath(path)
        self._stream: BinaryIO | None = None

    @property
    def path(self) -> str:
        return self._path

    def exists(self) -> bool:
        return file_exists(self._path)

    def open(self, mode: str = "r") -> bool:
        """Open in ``mode`` (always binary), closing any previous stream first.

        Returns False when the file cannot be opened.
        """
        if self.is_open():
            self.close()
        try:
            self._stream = io.open(self._path, _binary_mode(mode))
        except OSError:
            self._stream = None
            return False
        return True

    def is_open(self) -> bool:
        return self._stream is not None

    def flush(self) -> None:
        if self._stream is not None:
            self._stream.flush()

    def close(self) -> None:
        if self._stream is not None:
            self._stream.flush()
            self._stream.close()
            self._stream = None

    def remove(self) -> bool:
        """Delete the file; False if it does not exist or cannot be removed."""
        if not self.exists():
            return False
        try:
            os.remove(self._path)
        except OSError:
            return False
        return True

    def read_all(self) -> ByteArray:
        """Read the whole file from the start; empty when not open."""
        if self._stream is None:
            return ByteArray()
        self._stream.seek(0)
        return ByteArray(self._stream.read())

    def write(self, data: DataSource) -> None:
        """Write ``data``; does nothing when the file is not open."""
        if self._stream is not None:
            self._stream.write(bytes(ByteArray(data)))

    def file_name(self) -> str:
        return os.path.basename(self._path)

    def size(self) -> int:
        return file_size(self._path)

    def __enter__(self) -> File:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"File({self._path!r})"