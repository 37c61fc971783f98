# src/reposcope/analysis/prompt.py
from typing import Optional

SYSTEM_MESSAGE = "You are a helpful, expert code reviewer and architect."

PREAMBLE = """You are a senior code analysis agent.
You will analyze a codebase snapshot provided as a compact summary of files and selected excerpts.

Goals:
- Identify architecture, main technologies, and structure.
- Highlight potential issues, dead code, security risks, and obvious improvements.
- Suggest a prioritized action plan.

Constraints:
- Be concise but actionable.
- Quote filenames when referencing.
- Only infer from provided content.

Repository Summary:
-------------------
"""


def build_prompt(summary: str, user_prompt: Optional[str] = None) -> str:
    """Embeds the repo summary under the fixed preamble, plus an optional focus line."""
    base = f"{PREAMBLE}{summary}\n"
    if user_prompt and user_prompt.strip():
        return f"{base}\nUser focus: {user_prompt.strip()}"
    return base
