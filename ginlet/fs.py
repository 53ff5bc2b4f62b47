"""File systems rooted at a directory, optionally without directory listings."""

from __future__ import annotations

import os
import posixpath


class _DirFile:
    """A file or directory opened from a :class:`_Dir`."""

    def __init__(self, path: str):
        os.stat(path)
        self._path = path
        self._closed = False

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("I/O operation on closed file")

    def read(self) -> bytes:
        self._check_open()
        if os.path.isdir(self._path):
            raise IsADirectoryError(self._path)
        with open(self._path, "rb") as handle:
            return handle.read()

    def readdir(self, count: int = 0) -> list[str]:
        self._check_open()
        if not os.path.isdir(self._path):
            raise NotADirectoryError(self._path)
        names = sorted(os.listdir(self._path))
        return names if count <= 0 else names[:count]

    def stat(self) -> os.stat_result:
        self._check_open()
        return os.stat(self._path)

    def close(self) -> None:
        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class _Dir:
    """A file system confined to ``root``; names use forward slashes."""

    def __init__(self, root: str):
        self._root = root or "."

    def open(self, name: str) -> _DirFile:
        if "\x00" in name or (os.sep != "/" and os.sep in name):
            raise ValueError("invalid character in file path")
        cleaned = posixpath.normpath("/" + name).lstrip("/")
        parts = [part for part in cleaned.split("/") if part]
        return _DirFile(os.path.join(self._root, *parts))


class NeuteredFile:
    """A file whose directory listing is always empty."""

    def __init__(self, file):
        self._file = file

    def readdir(self, count: int = 0) -> list:
        return []

    def read(self) -> bytes:
        return self._file.read()

    def stat(self) -> os.stat_result:
        return self._file.stat()

    def close(self) -> None:
        self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class OnlyFilesFS:
    """Wraps a file system so that opened files never list directories."""

    def __init__(self, fs):
        self._fs = fs

    def open(self, name: str) -> NeuteredFile:
        return NeuteredFile(self._fs.open(name))


def directory(root: str, list_directory: bool):
    """Return a file system rooted at ``root``, listing directories only if asked."""
    fs = _Dir(root)
    if list_directory:
        return fs
    return OnlyFilesFS(fs)