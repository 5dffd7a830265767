"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import Protocol


# Completion service interface
class ICompletionClient(Protocol):
    """Protocol for the text-completion collaborator (language model)."""

    async def complete(self, prompt: str) -> str:
        """Return raw completion text for prompt.

        Raises UpstreamUnavailable on transport/quota failure and UpstreamError
        on any other unusable reply.
        """
