"""Assistant API: conversational endpoint for natural-language task operations."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from taskboard.api.v1.dependencies import get_assistant_service
from taskboard.application.use_cases.assistant import AssistantService, ChatTurn
from taskboard.core.config import Settings, get_settings
from taskboard.core.limiter import limit_chat
from taskboard.schemas.assistant import ChatRequest, ChatResponse

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
@limit_chat
async def chat(
    request: Request,
    body: ChatRequest,
    assistant: Annotated[AssistantService, Depends(get_assistant_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> JSONResponse:
    """Handle one chat turn.

    Free text is interpreted into a proposal (held by the client until it
    sends the confirm or cancel sentinel) or answered directly. Pipeline
    failures come back as a normal reply with HTTP 200.
    """
    turn = ChatTurn(
        message=body.message,
        speaking_user=(body.current_user or "").strip() or settings.default_speaking_user,
        pending_proposal=body.proposal_to_confirm,
        proposal_signature=body.proposal_signature,
    )
    reply = await assistant.chat(turn)
    return JSONResponse(content=ChatResponse.from_reply(reply).to_content())
