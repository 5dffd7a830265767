"""Completion client factory: creates the configured provider's client from settings."""

from typing import ClassVar

import httpx

from taskboard.application.interfaces.services import ICompletionClient
from taskboard.core.config import Settings
from taskboard.infrastructure.external.completion.gemini_client import (
    GeminiCompletionClient,
)
from taskboard.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class CompletionClientFactory:
    """Factory for completion clients by COMPLETION_PROVIDER."""

    _providers: ClassVar[dict[str, type[GeminiCompletionClient]]] = {
        "gemini": GeminiCompletionClient,
    }

    @classmethod
    def create_client(
        cls,
        settings: Settings,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> ICompletionClient:
        """Create a completion client for settings.completion_provider.

        Args:
            settings: Application settings (provider, model, key, sampling).
            http_client: Optional shared httpx.AsyncClient for connection reuse.

        Raises:
            ValueError: If the provider is not supported.
        """
        provider = settings.completion_provider.lower()
        client_class = cls._providers.get(provider)
        if not client_class:
            raise ValueError(
                f"Unsupported completion provider: {settings.completion_provider}. "
                f"Supported: {list(cls._providers.keys())}"
            )
        api_key = (
            settings.completion_api_key.get_secret_value()
            if settings.completion_api_key
            else None
        )
        logger.debug("Creating %s for %s", client_class.__name__, settings.completion_model)
        return client_class(
            api_key=api_key,
            model=settings.completion_model,
            base_url=settings.completion_base_url,
            timeout=settings.completion_timeout_seconds,
            temperature=settings.completion_temperature,
            top_k=settings.completion_top_k,
            top_p=settings.completion_top_p,
            max_output_tokens=settings.completion_max_output_tokens,
            http_client=http_client,
        )

    @classmethod
    def list_supported_providers(cls) -> list[str]:
        return list(cls._providers.keys())
