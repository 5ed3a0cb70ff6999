"""Memory mapping of files, read-only or writable."""

from __future__ import annotations

import errno
import logging
import mmap
import os
from types import TracebackType
from typing import Union

from .file import File

_log = logging.getLogger(__name__)

PathSource = Union[File, str, "os.PathLike[str]"]


class FileMapper:
    """Maps a file, or a range of it, into memory.

    Only one mapping is held at a time. Mappings are handed out as
    ``memoryview`` objects that become invalid once the mapping is closed.
    """

    def __init__(self, file: PathSource) -> None:
        if isinstance(file, File):
            if file.is_open():
                file.close()
            self._path = file.path
        else:
            self._path = os.fspath(file)
        self._mmap: mmap.mmap | None = None
        self._view: memoryview | None = None
        self._writable = False
        self._map_requested = False

    @property
    def path(self) -> str:
        return self._path

    def map(self, offset: int = 0, length: int = 0, writable: bool = False) -> memoryview:
        """Map ``length`` bytes from ``offset``; a length of 0 maps to the end.

        A writable mapping writes through to the file. If a mapping of the
        same kind already exists it is returned unchanged; a mapping of the
        other kind is closed and replaced. Raises ``OSError`` on failure.
        """
        if offset < 0 or length < 0:
            raise ValueError("offset and length must not be negative")
        self._map_requested = True
        if self._view is not None:
            if self._writable == writable:
                _log.warning("Requested map data from a FileMapper which was already mapped.")
                return self._view
            self._release()

        access = mmap.ACCESS_WRITE if writable else mmap.ACCESS_READ
        with open(self._path, "r+b" if writable else "rb") as handle:
            file_size = os.fstat(handle.fileno()).st_size
            if offset > file_size:
                raise OSError(errno.EINVAL, "mapping offset lies beyond the end of the file", self._path)
            if length == 0:
                length = file_size - offset
            if length == 0 or offset + length > file_size:
                raise OSError(errno.EINVAL, "invalid mapping range", self._path)
            aligned = offset - offset % mmap.ALLOCATIONGRANULARITY
            delta = offset - aligned
            try:
                mapped = mmap.mmap(handle.fileno(), delta + length, access=access, offset=aligned)
            except ValueError as exc:
                raise OSError(errno.EINVAL, str(exc), self._path) from exc

        self._mmap = mapped
        self._view = memoryview(mapped)[delta : delta + length]
        self._writable = writable
        return self._view

    def unmap(self, mapping: memoryview | None = None) -> bool:
        """Close the current mapping; False if there was none or it could not be closed."""
        if self._view is None:
            _log.warning("Requested an unmap of a FileMapper which is not mapped.")
            return False
        if mapping is not None and mapping is not self._view:
            _log.warning("Mapping passed to FileMapper.unmap does not match the existing one.")
        return self._release()

    def _release(self) -> bool:
        mapped, view, writable = self._mmap, self._view, self._writable
        self._mmap = None
        self._view = None
        self._writable = False
        if mapped is None or view is None:
            return False
        try:
            if writable:
                mapped.flush()
            view.release()
            mapped.close()
        except BufferError:
            _log.error("Cannot close a mapping that is still referenced by other views.")
            return False
        except OSError as exc:
            _log.error("File mapping error %s: %s", exc.errno, exc.strerror)
            return False
        return True

    def size(self) -> int:
        """Size of the current mapping in bytes; 0 when nothing is mapped."""
        if self._view is None:
            if not self._map_requested:
                _log.warning("Queried the size of a FileMapper that was never mapped.")
            return 0
        return self._view.nbytes

    @property
    def writable(self) -> bool:
        return self._view is not None and self._writable

    def close(self) -> None:
        """Close the current mapping, if any."""
        if self._view is not None:
            self._release()

    def __enter__(self) -> FileMapper:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"FileMapper({self._path!r})"