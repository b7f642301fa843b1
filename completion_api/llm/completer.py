"""The single capability the HTTP layer needs: turn a question into an answer."""

from __future__ import annotations

import logging
from typing import Protocol

from openai import OpenAIError

from completion_api.llm.openai_client import OpenAIChatClient
from completion_api.llm.prompts import build_prompt

logger = logging.getLogger(__name__)

NO_ANSWER = "No answer received"


class CompletionError(Exception):
    """Raised when the upstream completion call fails."""


class Completer(Protocol):
    def complete(self, question: str) -> str:
        ...


class LLMCompleter:
    """Answers questions with one chat-completion call."""

    def __init__(self, client: OpenAIChatClient | None = None) -> None:
        self.client = client or OpenAIChatClient()

    def complete(self, question: str) -> str:
        prompt = build_prompt(question)
        try:
            answer = self.client.complete(prompt)
        except OpenAIError as exc:
            logger.error("Upstream completion failed: %s", exc)
            raise CompletionError(str(exc)) from exc
        return answer or NO_ANSWER
