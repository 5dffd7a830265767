"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and application use cases.
All use cases are built from infrastructure implementations here;
routes depend only on these dependencies, not on infra directly.

The taxonomy is built from settings per request and handed to the services
that need it; nothing below reads a process-wide taxonomy.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.application.interfaces.services import ICompletionClient
from taskboard.application.services.proposal_signer import ProposalSigner
from taskboard.application.services.task_query import TaskQueryService
from taskboard.application.services.task_reference_resolver import TaskReferenceResolver
from taskboard.application.use_cases.assistant import (
    AssistantService,
    ConfirmationGate,
    MessageInterpreter,
    OperationExecutor,
)
from taskboard.application.use_cases.tasks import TaskService
from taskboard.core.config import Settings, get_settings
from taskboard.domain.value_objects import Taxonomy
from taskboard.infrastructure.external.completion import CompletionClientFactory
from taskboard.infrastructure.persistence.database import get_db, get_db_transactional
from taskboard.infrastructure.persistence.repositories import TaskRepository


def get_taxonomy(
    settings: Annotated[Settings, Depends(get_settings)],
) -> Taxonomy:
    """Taxonomy for this request (from TAXONOMY_* settings)."""
    return Taxonomy.from_settings(settings)


def get_task_repo(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TaskRepository:
    """Task repository on a transactional session (writes)."""
    return TaskRepository(db)


def get_task_repo_for_read(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskRepository:
    """Task repository on a read-only session."""
    return TaskRepository(db)


def get_task_service(
    task_repo: Annotated[TaskRepository, Depends(get_task_repo)],
    taxonomy: Annotated[Taxonomy, Depends(get_taxonomy)],
) -> TaskService:
    """Task service for REST writes (taxonomy always enforced)."""
    return TaskService(task_repo, taxonomy)


def get_task_service_for_read(
    task_repo: Annotated[TaskRepository, Depends(get_task_repo_for_read)],
    taxonomy: Annotated[Taxonomy, Depends(get_taxonomy)],
) -> TaskService:
    return TaskService(task_repo, taxonomy)


def get_task_query_service(
    task_repo: Annotated[TaskRepository, Depends(get_task_repo_for_read)],
    taxonomy: Annotated[Taxonomy, Depends(get_taxonomy)],
) -> TaskQueryService:
    return TaskQueryService(task_repo, taxonomy.closed_statuses)


def get_completion_client(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ICompletionClient:
    """Completion client for the configured provider; reuses the app's shared HTTP client."""
    return CompletionClientFactory.create_client(
        settings, http_client=getattr(request.app.state, "http_client", None)
    )


def get_proposal_signer(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ProposalSigner | None:
    """Signer when PROPOSAL_SIGNING_SECRET is set; otherwise proposals are unsigned."""
    if settings.proposal_signing_secret is None:
        return None
    return ProposalSigner(settings.proposal_signing_secret.get_secret_value())


def get_assistant_service(
    task_repo: Annotated[TaskRepository, Depends(get_task_repo)],
    taxonomy: Annotated[Taxonomy, Depends(get_taxonomy)],
    completion_client: Annotated[ICompletionClient, Depends(get_completion_client)],
    signer: Annotated[ProposalSigner | None, Depends(get_proposal_signer)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AssistantService:
    """Assistant pipeline wired to one transactional session."""
    task_service = TaskService(
        task_repo, taxonomy, enforce_taxonomy=settings.strict_taxonomy
    )
    gate = ConfirmationGate(
        interpreter=MessageInterpreter(
            completion_client,
            taxonomy,
            timezone=settings.timezone,
            assistant_name=settings.assistant_name,
        ),
        executor=OperationExecutor(
            task_service,
            TaskReferenceResolver(task_repo),
            taxonomy,
            strict_taxonomy=settings.strict_taxonomy,
        ),
        query_service=TaskQueryService(task_repo, taxonomy.closed_statuses),
        signer=signer,
    )
    return AssistantService(gate)
