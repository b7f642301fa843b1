"""Thin wrapper around an OpenAI-compatible Chat Completions API."""

from __future__ import annotations

from typing import Optional

from openai import OpenAI

from completion_api.config import settings


class OpenAIChatClient:
    """Talks to OpenRouter through the OpenAI Python SDK."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        api_key = api_key or settings.openrouter_api_key
        if not api_key:
            raise ValueError("OPENROUTER_API_KEY is not configured in the environment.")
        self.model = model if model is not None else settings.model
        self.client = OpenAI(
            api_key=api_key,
            base_url=base_url if base_url is not None else settings.openrouter_base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
            max_retries=0,
        )

    def complete(self, prompt: str) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
        )
        return self._extract_text(response)

    @staticmethod
    def _extract_text(response) -> str:
        choices = getattr(response, "choices", None) or []
        if not choices:
            return ""
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if isinstance(message, dict):
            content = message.get("content", content)
        return str(content).strip() if content else ""
