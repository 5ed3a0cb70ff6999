"""A minimal URL splitter for schemes, paths and file names."""

from __future__ import annotations

import re

from .dir import from_native_separators

# A repeated "(.*/)*" group always settles on a single greedy iteration,
# so an optional group captures the same text without runaway backtracking.
_URL_PATTERN = re.compile(r"(?:([^/]{2,})?:(?://)?)?(.*/)?(.+\..+)?")


class Url:
    """A URL split into scheme, path and file name."""

    __slots__ = ("_url", "_scheme", "_path", "_file_name")

    def __init__(self, url: str = "") -> None:
        self._url = url
        self._scheme = self._path = self._file_name = ""
        match = _URL_PATTERN.fullmatch(url)
        if match:
            self._scheme, self._path, self._file_name = (group or "" for group in match.groups())

    @property
    def url(self) -> str:
        return self._url

    @property
    def scheme(self) -> str:
        return self._scheme

    @property
    def path(self) -> str:
        return self._path

    @property
    def file_name(self) -> str:
        return self._file_name

    def is_local_file(self) -> bool:
        return self._scheme.startswith("file")

    def to_local_file(self) -> str:
        """The local path for a ``file`` URL, or an empty string otherwise."""
        if not self.is_local_file():
            return ""
        return self._path + self._file_name

    def is_empty(self) -> bool:
        return not self._url

    @classmethod
    def from_local_file(cls, url: str) -> Url:
        """Build a ``file`` URL from a local path; URLs with a scheme pass through."""
        path = from_native_separators(url)
        parsed = cls(path)
        if parsed.scheme:
            return parsed
        if not parsed.path:
            return cls("file:" + path)
        if len(path) > 1 and path[1] == ":" and path[0] != "/":
            path = "/" + path
        return cls("file://" + path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Url):
            return NotImplemented
        return self._url == other._url

    def __hash__(self) -> int:
        return hash(self._url)

    def __repr__(self) -> str:
        return f"Url({self._url!r})"