"""HMAC signatures for proposals echoed back by the chat client.

The server keeps no session state between proposing and confirming; when a
signing secret is configured the proposal is signed on the way out and
verified on confirm so a client cannot alter what gets executed.
"""

from __future__ import annotations

import hashlib
import hmac
import json

from pydantic import BaseModel

from taskboard.application.dtos.assistant import to_wire


class ProposalSigner:
    """HMAC-SHA256 over the canonical JSON of a proposal."""

    def __init__(self, secret: str) -> None:
        self._key = secret.encode()

    @staticmethod
    def canonical_json(proposal: BaseModel) -> str:
        return json.dumps(to_wire(proposal), sort_keys=True, separators=(",", ":"))

    def sign(self, proposal: BaseModel) -> str:
        return hmac.new(
            self._key, self.canonical_json(proposal).encode(), hashlib.sha256
        ).hexdigest()

    def verify(self, proposal: BaseModel, signature: str | None) -> bool:
        if not signature:
            return False
        return hmac.compare_digest(self.sign(proposal), signature)
