"""Completion service adapters."""

from taskboard.infrastructure.external.completion.factory import CompletionClientFactory
from taskboard.infrastructure.external.completion.gemini_client import (
    GeminiCompletionClient,
)

__all__ = ["CompletionClientFactory", "GeminiCompletionClient"]
