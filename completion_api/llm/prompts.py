"""Prompt template for the completion endpoint."""

from __future__ import annotations

PROMPT_TEMPLATE = "You are a helpful assistant. Answer concisely:\n{question}"


def build_prompt(question: str) -> str:
    return PROMPT_TEMPLATE.format(question=question.strip())
