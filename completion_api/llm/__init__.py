"""LLM integration helpers."""

from .completer import Completer, CompletionError, LLMCompleter
from .openai_client import OpenAIChatClient

__all__ = ["Completer", "CompletionError", "LLMCompleter", "OpenAIChatClient"]
