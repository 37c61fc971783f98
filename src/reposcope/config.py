# src/reposcope/config.py
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_MAX_FILES = 60
DEFAULT_MAX_CHARS = 4000

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.2

# Directory (and file) basenames never descended into or sampled
DEFAULT_IGNORE_NAMES = [
    "node_modules",
    ".git",
    "dist",
    "build",
    ".next",
    ".turbo",
    "coverage",
    ".venv",
    "venv",
    "out",
]

BINARY_EXTENSIONS = frozenset({
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".webp",
    ".ico",
    ".pdf",
    ".zip",
    ".gz",
    ".tar",
    ".rar",
    ".7z",
    ".exe",
    ".dll",
    ".bin",
})


@dataclass(frozen=True)
class Settings:
    """Process-wide settings for the model call, resolved once at startup."""
    api_key: Optional[str]
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    base_url: Optional[str] = None


def load_settings(model: Optional[str] = None, temperature: Optional[float] = None) -> Settings:
    """
    Reads OPENAI_API_KEY / OPENAI_BASE_URL from the environment (a local
    .env file is honoured). CLI overrides win over defaults.
    """
    load_dotenv()
    return Settings(
        api_key=os.environ.get("OPENAI_API_KEY") or None,
        model=model or DEFAULT_MODEL,
        temperature=DEFAULT_TEMPERATURE if temperature is None else temperature,
        base_url=os.environ.get("OPENAI_BASE_URL") or None,
    )
