# src/reposcope/core/ignore.py
import re
from typing import Iterable, Optional

import pathspec

from reposcope.config import DEFAULT_IGNORE_NAMES

# Characters with special meaning in gitwildmatch patterns
_WILDMATCH_SPECIAL = re.compile(r"([\\*?\[\]!#])")


def _literal_pattern(name: str) -> str:
    return _WILDMATCH_SPECIAL.sub(r"\\\1", name)


class IgnoreSet:
    """
    Fixed set of basenames excluded from traversal.

    Names are compiled into a gitwildmatch PathSpec as literal patterns
    without a slash, so they only ever match a whole basename:
    '.git' matches '.git' but not '.github'.
    """

    def __init__(self, names: Optional[Iterable[str]] = None):
        self.names = frozenset(DEFAULT_IGNORE_NAMES if names is None else names)
        self._spec = pathspec.PathSpec.from_lines(
            "gitwildmatch", [_literal_pattern(n) for n in sorted(self.names)]
        )

    def matches(self, name: str) -> bool:
        """True if the basename `name` must be skipped."""
        if not name or "/" in name:
            return False
        return self._spec.match_file(name)

    def __contains__(self, name: str) -> bool:
        return self.matches(name)
