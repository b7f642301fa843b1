"""Typed models shared across the application."""

from .completion import CompletionRequest, CompletionResponse

__all__ = ["CompletionRequest", "CompletionResponse"]
