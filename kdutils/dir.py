"""Directory paths with creation, removal and lookup helpers."""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path, PurePath
from typing import Union

PathSource = Union[str, "os.PathLike[str]"]


def from_native_separators(path: PathSource) -> str:
    """Return ``path`` with the platform's separators replaced by ``/``."""
    text = os.fspath(path)
    for separator in (os.sep, os.altsep):
        if separator and separator != "/":
            text = text.replace(separator, "/")
    return text


def _strip_trailing_separator(path: str) -> str:
    if not path.endswith("/"):
        return path
    stripped = path.rstrip("/")
    return stripped if stripped else path[:1]


class Dir:
    """A directory path, kept with ``/`` separators and no trailing separator."""

    __slots__ = ("_path",)

    def __init__(self, path: PathSource = "") -> None:
        self._path = _strip_trailing_separator(from_native_separators(path))

    @property
    def path(self) -> str:
        return self._path

    def exists(self) -> bool:
        """True when the path names an existing directory."""
        return bool(self._path) and os.path.isdir(self._path)

    def mkdir(self) -> bool:
        """Create the directory; False if it already exists or cannot be made."""
        try:
            os.mkdir(self._path)
        except OSError:
            return False
        return True

    def rmdir(self) -> bool:
        """Remove the directory and everything below it; False if nothing was removed."""
        if not self._path or not os.path.lexists(self._path):
            return False
        target = Path(self._path)
        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()
        except OSError:
            return False
        return True

    def dir_name(self) -> str:
        """The last component of the path."""
        return os.path.basename(self._path)

    def absolute_file_path(self, file: PathSource) -> str:
        """Absolute path of ``file`` taken relative to this directory."""
        return (Path(self._path) / os.fspath(file)).absolute().as_posix()

    @classmethod
    def application_dir(cls) -> Dir:
        """The directory holding the running interpreter's executable."""
        executable = sys.executable
        if not executable:
            return cls()
        return cls(Path(executable).parent)

    def _key(self) -> tuple[bool, tuple[str, ...]]:
        return (bool(self._path), PurePath(self._path).parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dir):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __fspath__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"Dir({self._path!r})"