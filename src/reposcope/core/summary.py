# src/reposcope/core/summary.py
import sys
from typing import Iterator, List, Optional

from reposcope.config import DEFAULT_MAX_CHARS, DEFAULT_MAX_FILES
from reposcope.core.ignore import IgnoreSet
from reposcope.core.sampler import read_sample
from reposcope.core.walker import walk
from reposcope.models import FileExcerpt, ScanConfig, SkipReason

NO_FILES_SENTINEL = "No readable source files found."


def relative_path(path: str, root: str) -> str:
    """
    Strips `root` and exactly one separator from `path`.
    Falls back to `path` itself when it is not under `root`.
    """
    if not path.startswith(root):
        return path
    skip = 0 if root.endswith(("/", "\\")) else 1
    return path[len(root) + skip:]


def format_excerpt(excerpt: FileExcerpt) -> str:
    return (
        f"\n--- BEGIN FILE: {excerpt.rel_path} ---\n"
        f"{excerpt.text}\n"
        f"--- END FILE: {excerpt.rel_path} ---"
    )


class RepoSampler:
    def __init__(self, config: ScanConfig, ignore: Optional[IgnoreSet] = None, verbose: bool = False):
        self.config = config
        self.ignore = ignore
        self.verbose = verbose
        self.included = 0
        self.skipped = 0
        self.included_paths: List[str] = []

    def excerpts(self) -> Iterator[FileExcerpt]:
        """
        Pulls candidates from the walker one at a time and yields the
        readable ones, stopping after `max_files` inclusions.
        """
        cfg = self.config
        self.included = 0
        self.skipped = 0
        self.included_paths = []
        for path in walk(cfg.root_path, cfg.max_files, self.ignore):
            if self.included >= cfg.max_files:
                break

            sample = read_sample(path, cfg.max_chars_per_file, cfg.sniff_binary)
            rel_path = relative_path(path, cfg.root_path)
            if isinstance(sample, SkipReason):
                self.skipped += 1
                if self.verbose:
                    print(f"  > [Skip] {rel_path} ({sample.value})", file=sys.stderr)
                continue

            self.included += 1
            self.included_paths.append(rel_path)
            yield FileExcerpt(rel_path=rel_path, text=sample)

    def summarize(self) -> str:
        """Builds the RepoSummary string: header, excerpt blocks or the sentinel."""
        parts: List[str] = [f"Root: {self.config.root_path}"]
        blocks = [format_excerpt(excerpt) for excerpt in self.excerpts()]
        parts.extend(blocks)
        if not blocks:
            parts.append(NO_FILES_SENTINEL)
        return "\n".join(parts)


def summarize_repo(root: str, max_files: int = DEFAULT_MAX_FILES, max_chars: int = DEFAULT_MAX_CHARS) -> str:
    return RepoSampler(ScanConfig(root, max_files, max_chars)).summarize()
