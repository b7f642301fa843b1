"""Request/response models for the public API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class CompletionRequest(BaseModel):
    """Incoming question payload."""

    question: str = Field(..., min_length=1)

    @field_validator("question")
    @classmethod
    def _strip_question(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("question must not be blank")
        return value


class CompletionResponse(BaseModel):
    """Answer returned to the caller."""

    answer: str
