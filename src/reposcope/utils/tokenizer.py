# src/reposcope/utils/tokenizer.py
from functools import lru_cache

import tiktoken

ENCODING_NAME = "cl100k_base"


@lru_cache(maxsize=None)
def _encoding(name: str):
    return tiktoken.get_encoding(name)


def estimate_tokens(text: str, encoding_name: str = ENCODING_NAME) -> int:
    """Token count of `text`; ~4 chars per token if the encoding is unavailable."""
    try:
        return len(_encoding(encoding_name).encode(text, disallowed_special=()))
    except Exception:
        # tiktoken fetches encodings on first use, which fails offline
        return len(text) // 4
