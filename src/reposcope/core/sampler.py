# src/reposcope/core/sampler.py
import os
from typing import Union

from reposcope.config import BINARY_EXTENSIONS
from reposcope.models import SkipReason


def file_extension(path: str) -> str:
    """Lowercased substring from the last '.' of the basename, or '' if none."""
    name = os.path.basename(path)
    i = name.rfind(".")
    if i < 0:
        return ""
    return name[i:].lower()


def is_binary_by_extension(path: str) -> bool:
    ext = file_extension(path)
    return bool(ext) and ext in BINARY_EXTENSIONS


def looks_binary(path: str) -> bool:
    """Opt-in content check used by --sniff-binary: a NUL byte in the first KB."""
    try:
        with open(path, "rb") as f:
            return b"\0" in f.read(1024)
    except OSError:
        # unreadable files never reach the excerpt list
        return True


def read_sample(path: str, max_chars: int, sniff_binary: bool = False) -> Union[str, SkipReason]:
    """
    Returns the first `max_chars` characters of the file, or a SkipReason.

    Binary detection is by extension only unless `sniff_binary` is set.
    Malformed UTF-8 is replaced, never fatal.
    """
    if is_binary_by_extension(path):
        return SkipReason.BINARY
    if sniff_binary and looks_binary(path):
        return SkipReason.BINARY

    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError:
        return SkipReason.UNREADABLE

    text = data.decode("utf-8", errors="replace")
    return text[:max_chars]
