"""Gemini completion client (Generative Language REST API over httpx)."""

from contextlib import asynccontextmanager
from typing import Any

import httpx

from taskboard.domain.exceptions import UpstreamError, UpstreamUnavailable
from taskboard.shared.telemetry import traced
from taskboard.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_SAFETY_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)
_RETRYABLE_STATUS = frozenset({408, 429, 500, 502, 503, 504})


class GeminiCompletionClient:
    """ICompletionClient for Gemini generateContent. Single attempt, no retries."""

    def __init__(
        self,
        *,
        api_key: str | None,
        model: str = "models/gemini-2.0-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 30.0,
        temperature: float = 0.3,
        top_k: int = 1,
        top_p: float = 1.0,
        max_output_tokens: int = 4096,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model if model.startswith("models/") else f"models/{model}"
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._generation_config = {
            "temperature": temperature,
            "topK": top_k,
            "topP": top_p,
            "maxOutputTokens": max_output_tokens,
        }
        self._shared_http = http_client

    @asynccontextmanager
    async def _http_cm(self):
        """Yield shared HTTP client or a short-lived one (connection reuse when shared)."""
        if self._shared_http is not None:
            yield self._shared_http
            return
        async with httpx.AsyncClient() as client:
            yield client

    def _body(self, prompt: str) -> dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": self._generation_config,
            "safetySettings": [
                {"category": c, "threshold": "BLOCK_MEDIUM_AND_ABOVE"}
                for c in _SAFETY_CATEGORIES
            ],
        }

    @traced("completion.generate")
    async def complete(self, prompt: str) -> str:
        if not self._api_key:
            raise UpstreamUnavailable("API key not configured")
        url = f"{self._base_url}/{self._model}:generateContent"
        try:
            async with self._http_cm() as client:
                response = await client.post(
                    url,
                    params={"key": self._api_key},
                    json=self._body(prompt),
                    timeout=self._timeout,
                )
        except httpx.TimeoutException as e:
            raise UpstreamUnavailable("request timed out") from e
        except httpx.HTTPError as e:
            raise UpstreamUnavailable(f"transport error: {type(e).__name__}") from e

        if response.status_code in _RETRYABLE_STATUS:
            logger.warning("Completion service returned %s", response.status_code)
            raise UpstreamUnavailable(f"HTTP {response.status_code}")
        if response.status_code != 200:
            logger.error(
                "Completion service error %s: %s", response.status_code, response.text[:500]
            )
            raise UpstreamError(f"HTTP {response.status_code}", response.status_code)
        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError("response is not JSON", response.status_code) from e
        return self._extract_text(data)

    @staticmethod
    def _extract_text(data: dict[str, Any]) -> str:
        candidates = data.get("candidates") or []
        if not candidates:
            block_reason = (data.get("promptFeedback") or {}).get("blockReason")
            if block_reason:
                raise UpstreamError(f"prompt blocked ({block_reason})")
            raise UpstreamError("no candidates in response")
        candidate = candidates[0]
        parts = (candidate.get("content") or {}).get("parts") or []
        text = "".join(p.get("text", "") for p in parts if isinstance(p, dict))
        if not text.strip():
            reason = candidate.get("finishReason") or "empty"
            raise UpstreamError(f"empty completion ({reason})")
        return text
