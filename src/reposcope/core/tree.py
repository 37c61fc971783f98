# src/reposcope/core/tree.py
from typing import Dict, List, Tuple

_BRANCH, _LAST = "├── ", "└── "
_PIPE, _GAP = "│   ", "    "


def _entries(node: Dict, prefix: str) -> List[Tuple[str, Dict, str, bool]]:
    """Children of `node` in reverse, ready to be pushed onto a stack."""
    items = list(node.items())
    return [
        (name, children, prefix, i == len(items) - 1)
        for i, (name, children) in reversed(list(enumerate(items)))
    ]


def render_tree(rel_paths: List[str], root_name: str) -> str:
    """
    Tree view of the included files for --dry-run. Entries keep the order
    in which the sampler included them, so the tree mirrors the summary.
    """
    nested: Dict = {}
    for rel in rel_paths:
        node = nested
        for part in rel.replace("\\", "/").strip("/").split("/"):
            node = node.setdefault(part, {})

    lines = [f"{root_name}/"]
    stack = _entries(nested, "")
    while stack:
        name, children, prefix, last = stack.pop()
        lines.append(prefix + (_LAST if last else _BRANCH) + name)
        stack.extend(_entries(children, prefix + (_GAP if last else _PIPE)))
    return "\n".join(lines) + "\n"
