# src/reposcope/core/walker.py
import os
import stat
from typing import Iterator, List, Optional

from reposcope.core.ignore import IgnoreSet

_DIR = "dir"
_FILE = "file"


def list_entries(directory: str) -> Optional[List[str]]:
    """Entry names in listing order, or None if the directory can't be listed."""
    try:
        return os.listdir(directory)
    except OSError:
        return None


def classify(path: str) -> Optional[str]:
    """
    'dir' or 'file' (symlinks followed), None for special files
    and for entries whose stat fails.
    """
    try:
        mode = os.stat(path).st_mode
    except OSError:
        return None
    if stat.S_ISDIR(mode):
        return _DIR
    if stat.S_ISREG(mode):
        return _FILE
    return None


class FileWalker:
    """
    Lazy depth-first file enumeration backed by an explicit stack.

    Directories are pushed onto the frontier and explored later (LIFO),
    files are yielded as soon as they are seen. Order follows the
    file system listing and is not sorted.

    Once `max_files` paths have been yielded the frontier is dropped; the
    walker is exhausted and cannot be restarted.
    """

    def __init__(self, root: str, max_files: int, ignore: Optional[IgnoreSet] = None):
        self.root = root
        self.max_files = max_files
        self.ignore = ignore if ignore is not None else IgnoreSet()
        self.yielded = 0
        self.skipped_dirs = 0
        self._stack: List[str] = [root]
        self._pending: List[str] = []  # entries of the directory being expanded, reversed

    def __iter__(self) -> "FileWalker":
        return self

    def __next__(self) -> str:
        while self.yielded < self.max_files:
            if not self._pending:
                if not self._stack:
                    break
                self._expand(self._stack.pop())
                continue

            full = self._pending.pop()
            kind = classify(full)
            if kind == _DIR:
                self._stack.append(full)
            elif kind == _FILE:
                self.yielded += 1
                return full

        self._stack.clear()
        self._pending.clear()
        raise StopIteration

    def _expand(self, directory: str) -> None:
        names = list_entries(directory)
        if names is None:
            self.skipped_dirs += 1
            return
        self._pending = [
            os.path.join(directory, name)
            for name in reversed(names)
            if not self.ignore.matches(name)
        ]


def walk(root: str, max_files: int, ignore: Optional[IgnoreSet] = None) -> Iterator[str]:
    """Absolute file paths under `root`, at most `max_files` of them."""
    return FileWalker(root, max_files, ignore)
