"""Directory listing with file kind detection and extension lookup."""

from __future__ import annotations

import errno
import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass

PATH_MAX = 4096
FILENAME_MAX = 256


@dataclass(frozen=True)
class FileInfo:
    """One directory entry."""

    path: str
    name: str
    is_dir: bool
    is_reg: bool

    @property
    def extension(self) -> str:
        """Text after the last dot of the name, or an empty string."""
        _, dot, ext = self.name.rpartition(".")
        return ext if dot else ""


def _check_path(path: str) -> str:
    path = os.fspath(path)
    if not path:
        raise ValueError("path must not be empty")
    if len(path) >= PATH_MAX:
        raise OSError(errno.ENAMETOOLONG, os.strerror(errno.ENAMETOOLONG), path)
    return path


def _strip_trailing_slashes(path: str) -> str:
    stripped = path.rstrip("/\\")
    return stripped or path[0]


def _entry(directory: str, name: str) -> FileInfo:
    if len(directory) + len(name) + 1 >= PATH_MAX or len(name) >= FILENAME_MAX:
        raise OSError(errno.ENAMETOOLONG, os.strerror(errno.ENAMETOOLONG), name)
    full = directory + name if directory == "/" else f"{directory}/{name}"
    mode = os.lstat(full).st_mode
    return FileInfo(
        path=full,
        name=name,
        is_dir=stat.S_ISDIR(mode),
        is_reg=stat.S_ISREG(mode),
    )


def iter_dir(path: str) -> Iterator[FileInfo]:
    """Yield every entry of a directory, including "." and "..", unsorted."""
    directory = _strip_trailing_slashes(_check_path(path))
    with os.scandir(directory) as entries:
        names = [".", ".."] + [entry.name for entry in entries]
    for name in names:
        yield _entry(directory, name)


def _sort_key(info: FileInfo) -> tuple[bool, bytes]:
    return (not info.is_dir, os.fsencode(info.name))


def list_dir_sorted(path: str) -> list[FileInfo]:
    """List a directory with directories first, each group ordered by name bytes."""
    return sorted(iter_dir(path), key=_sort_key)


def file_info(path: str) -> FileInfo:
    """Describe a single file by looking it up in its parent directory."""
    path = _check_path(path)
    stripped = path.rstrip("/")
    if not stripped:
        return FileInfo(path="/", name="", is_dir=True, is_reg=False)
    head, base = os.path.split(stripped)
    parent = head.rstrip("/") or ("/" if head else ".")
    for info in iter_dir(parent):
        if info.name == base:
            return info
    raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)