# src/reposcope/analysis/llm.py
from typing import Any, Optional

import openai

from reposcope.analysis.prompt import SYSTEM_MESSAGE, build_prompt
from reposcope.config import Settings
from reposcope.errors import AnalysisError, ConfigurationError

EMPTY_REPORT = "No report produced."


def _content_text(content: Any) -> str:
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    # Some compatible servers return a list of content parts
    parts = []
    for part in content:
        if isinstance(part, dict):
            parts.append(str(part.get("text", part)))
        else:
            parts.append(str(getattr(part, "text", part)))
    return "\n".join(parts)


class ReportGenerator:
    """One chat completion per report: system message + the built prompt."""

    def __init__(self, settings: Settings, client: Optional[Any] = None):
        if client is None:
            if not settings.api_key:
                raise ConfigurationError("OPENAI_API_KEY is not set. Add it to .env or your environment.")
            client = openai.OpenAI(api_key=settings.api_key, base_url=settings.base_url)
        self.settings = settings
        self.client = client

    def generate(self, summary: str, user_prompt: Optional[str] = None) -> str:
        messages = [
            {"role": "system", "content": SYSTEM_MESSAGE},
            {"role": "user", "content": build_prompt(summary, user_prompt)},
        ]
        try:
            response = self.client.chat.completions.create(
                model=self.settings.model,
                messages=messages,
                temperature=self.settings.temperature,
            )
        except openai.OpenAIError as e:
            raise AnalysisError(f"Model call failed: {e}") from e

        if not response.choices:
            return EMPTY_REPORT
        text = _content_text(response.choices[0].message.content)
        return text or EMPTY_REPORT
