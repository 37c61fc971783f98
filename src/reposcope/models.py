# src/reposcope/models.py
from dataclasses import dataclass
from enum import Enum

from reposcope.config import DEFAULT_MAX_CHARS, DEFAULT_MAX_FILES


@dataclass(frozen=True)
class ScanConfig:
    """Caps for one scan. Zero is allowed, negatives are not."""
    root_path: str
    max_files: int = DEFAULT_MAX_FILES
    max_chars_per_file: int = DEFAULT_MAX_CHARS
    sniff_binary: bool = False

    def __post_init__(self):
        if self.max_files < 0:
            raise ValueError(f"max_files must be >= 0, got {self.max_files}")
        if self.max_chars_per_file < 0:
            raise ValueError(f"max_chars_per_file must be >= 0, got {self.max_chars_per_file}")


@dataclass(frozen=True)
class FileExcerpt:
    """Immutable data class holding one sampled file."""
    rel_path: str
    text: str


class SkipReason(str, Enum):
    BINARY = "binary"
    UNREADABLE = "unreadable"
