"""Free text -> structured action: prompt, complete, extract, normalize.

Any stage failing fails the whole request; there is no partial credit for a
malformed completion.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from taskboard.application.services.action_normalizer import NormalizedAction, normalize
from taskboard.application.services.prompt_builder import (
    DEFAULT_ASSISTANT_NAME,
    build_prompt,
    compose_prompt,
)
from taskboard.application.services.response_extractor import extract_json
from taskboard.shared.telemetry import add_span_attributes, traced
from taskboard.shared.telemetry.logging import get_logger
from taskboard.shared.utils.datetime import today_in

if TYPE_CHECKING:
    from datetime import date

    from taskboard.application.interfaces.services import ICompletionClient
    from taskboard.domain.value_objects import Taxonomy

logger = get_logger(__name__)


class MessageInterpreter:
    """Turn a user message into a proposal or a direct response."""

    def __init__(
        self,
        completion_client: ICompletionClient,
        taxonomy: Taxonomy,
        timezone: str = "UTC",
        assistant_name: str = DEFAULT_ASSISTANT_NAME,
    ) -> None:
        self.completion_client = completion_client
        self.taxonomy = taxonomy
        self.timezone = timezone
        self.assistant_name = assistant_name

    def today(self) -> date:
        return today_in(self.timezone)

    @traced("assistant.interpret_message")
    async def interpret(self, message: str, speaking_user: str) -> NormalizedAction:
        """Raises UpstreamUnavailable, UpstreamError or MalformedCompletion (and subclasses)."""
        system_prompt = build_prompt(
            speaking_user, self.taxonomy, self.today(), self.assistant_name
        )
        raw_text = await self.completion_client.complete(
            compose_prompt(system_prompt, message)
        )
        action = normalize(extract_json(raw_text), speaking_user, raw_text)
        add_span_attributes(action=action.action)
        return action
