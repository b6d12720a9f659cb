"""Common file and directory operations."""

from __future__ import annotations

import errno
import logging
import os
import shutil
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator, Union

from xtoolkit.stack import Stack

IO_BUFFER_SIZE = 4096

PathLike = Union[str, "os.PathLike[str]"]

_log = logging.getLogger(__name__)


class EmptyArgumentsError(ValueError):
    """Raised when a required path argument is empty."""

    def __init__(self) -> None:
        super().__init__("argument Can't be empty")


def _require(path: PathLike) -> str:
    text = os.fspath(path)
    if not text:
        raise EmptyArgumentsError()
    return text


def file_exists(filename: PathLike) -> bool:
    """True unless the path is known not to exist; files, directories and links all count."""
    try:
        os.stat(filename)
    except FileNotFoundError:
        return False
    except OSError:
        return True
    return True


def is_file(filename: PathLike) -> bool:
    """True when the path exists and is not a directory; stat errors propagate."""
    return not os.path.isdir(_require(filename)) if os.stat(_require(filename)) else False


def file_size(filename: PathLike) -> int:
    """Size in bytes of a file; raises OSError for a directory."""
    path = _require(filename)
    stat = os.stat(path)
    if os.path.isdir(path):
        raise OSError(errno.EINVAL, "invalid argument", path)
    return stat.st_size


def copy_file(src: PathLike, dst: PathLike) -> None:
    """Copy src over dst, creating dst if needed; dst is not truncated first."""
    with open(src, "rb") as source:
        fd = os.open(dst, os.O_CREAT | os.O_WRONLY, 0o644)
        with os.fdopen(fd, "wb") as target:
            shutil.copyfileobj(source, target, IO_BUFFER_SIZE)


def file_modify_time(filename: PathLike) -> datetime:
    """Last modification time as local time."""
    return datetime.fromtimestamp(os.stat(filename).st_mtime)


def search_file_in_dir(filename: str, *dirs: str) -> str:
    """Path of filename in the first of dirs that holds it; FileNotFoundError otherwise."""
    for directory in dirs:
        full_path = directory + filename if directory.endswith("/") else directory + "/" + filename
        if file_exists(full_path):
            return full_path
    raise FileNotFoundError(errno.ENOENT, "file does not exist", filename)


def line_count(pathname: PathLike) -> int:
    """Number of newline bytes in the file."""
    count = 0
    with open(pathname, "rb") as handle:
        while chunk := handle.read(IO_BUFFER_SIZE):
            count += chunk.count(b"\n")
    return count


def each_line(pathname: PathLike, callback: Callable[[str], bool], skip_empty: bool = False) -> None:
    """Call callback on each newline-terminated line, without trailing CR/LF.

    A final line with no newline is not passed on. Iteration stops when the
    callback returns a false value.
    """
    with open(pathname, encoding="utf-8", newline="") as handle:
        for raw in handle:
            if not raw.endswith("\n"):
                break
            line = raw.rstrip("\r\n")
            if skip_empty and not line:
                continue
            if not callback(line):
                break


def read_all(path: PathLike) -> bytes:
    return Path(path).read_bytes()


def write_all(path: PathLike, data: bytes) -> None:
    Path(path).write_bytes(bytes(data))


def read_all_string(path: PathLike) -> str:
    return read_all(path).decode("utf-8", "surrogateescape")


def read_lines(path: PathLike) -> Iterator[str]:
    """Yield each non-empty newline-terminated line with its final newline removed.

    A final line with no newline is not yielded. Closing the generator stops reading.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        for raw in handle:
            if not raw.endswith("\n"):
                return
            line = raw[:-1]
            if line:
                yield line


def put_file(path: PathLike, contents: bytes, append: bool = False) -> None:
    """Write contents to path, appending when asked and the file exists."""
    mode = "ab" if append and file_exists(path) else "wb"
    with open(path, mode) as handle:
        handle.write(bytes(contents))


def dir_exists(path: PathLike) -> bool:
    """True when the path exists and is a directory."""
    try:
        return os.path.isdir(path) and bool(os.stat(path))
    except OSError:
        return False


def is_dir(filename: PathLike) -> bool:
    """True when the path is a directory; stat errors propagate."""
    path = _require(filename)
    os.stat(path)
    return os.path.isdir(path)


def dir_empty(path: PathLike) -> bool:
    """True when the directory can be read and holds no entries."""
    try:
        return not os.listdir(path)
    except OSError:
        return False


def dir_append_file_name(directory: str, name: str) -> str:
    """Join directory and name with exactly one slash between them."""
    if not directory or not name:
        raise EmptyArgumentsError()
    if directory.endswith("/"):
        return directory + name[1:] if name.startswith("/") else directory + name
    if name.startswith("/"):
        return directory + name
    return directory + "/" + name


def each_file(path: PathLike, callback: Callable[[str, os.DirEntry], object]) -> None:
    """Walk the tree under a directory, calling callback(pathname, entry) for every entry.

    Directories that cannot be read are logged and skipped. An exception from
    the callback stops the walk and propagates.
    """
    root = _require(path)
    os.stat(root)
    if not os.path.isdir(root):
        raise NotADirectoryError(errno.ENOTDIR, "filepath is not dir", root)
    stack = Stack()
    stack.push(root)
    while len(stack):
        current = stack.pop()
        try:
            with os.scandir(current) as scanner:
                entries = list(scanner)
        except OSError as exc:
            _log.warning("try to read %s sub items but failed, error is: %r", current, exc)
            continue
        for entry in entries:
            pathname = dir_append_file_name(current, entry.name)
            if entry.is_dir(follow_symlinks=False):
                stack.push(pathname)
            callback(pathname, entry)


def dir_size(path: PathLike) -> int:
    """Total size of every non-directory entry in the tree under path."""
    total = 0

    def add(pathname: str, entry: os.DirEntry) -> None:
        nonlocal total
        if not entry.is_dir(follow_symlinks=False):
            total += file_size(pathname)

    each_file(path, add)
    return total