"""Task API: thin routes delegating to TaskService and TaskQueryService."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from taskboard.api.v1.dependencies import (
    get_task_query_service,
    get_task_service,
    get_task_service_for_read,
    get_taxonomy,
)
from taskboard.application.dtos.task import TaskCreate, TaskFilter
from taskboard.application.services.task_query import TaskQueryService
from taskboard.application.use_cases.tasks import TaskService
from taskboard.core.config import get_settings
from taskboard.core.limiter import limit_writes
from taskboard.domain.value_objects import Taxonomy
from taskboard.schemas.task import (
    DependencyRequest,
    TaskCreateRequest,
    TaskMoveRequest,
    TaskResponse,
    TaskUpdate,
)
from taskboard.shared.utils.datetime import today_in

router = APIRouter()


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    query_svc: Annotated[TaskQueryService, Depends(get_task_query_service)],
    status: str | None = None,
    priority: str | None = None,
    assignee: str | None = None,
    assignees_include_any: Annotated[list[str] | None, Query()] = None,
    due_date_equals: date | None = None,
    due_date_before: date | None = None,
    due_date_after: date | None = None,
    start_date_equals: date | None = None,
    title_contains: str | None = None,
    description_contains: str | None = None,
    product_area: str | None = None,
    is_overdue: bool = False,
):
    """List tasks matching every given filter, by due date (no due date last)."""
    criteria = TaskFilter(
        status=status,
        priority=priority,
        assignee=assignee,
        assignees_include_any=assignees_include_any or [],
        due_date_equals=due_date_equals,
        due_date_before=due_date_before,
        due_date_after=due_date_after,
        start_date_equals=start_date_equals,
        title_contains=title_contains,
        description_contains=description_contains,
        product_area=product_area,
        is_overdue=is_overdue,
    )
    tasks = await query_svc.query(criteria, today_in(get_settings().timezone))
    return [TaskResponse.model_validate(t) for t in tasks]


@router.post("", response_model=TaskResponse, status_code=201)
@limit_writes
async def create_task(
    request: Request,
    body: TaskCreateRequest,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
    taxonomy: Annotated[Taxonomy, Depends(get_taxonomy)],
):
    """Create a task at the end of its status lane."""
    created = await task_svc.create_task(
        TaskCreate(
            title=body.title,
            description=body.description,
            status=body.status or taxonomy.default_status,
            priority=body.priority or taxonomy.default_priority,
            assignees=body.assignees,
            start_date=body.start_date,
            due_date=body.due_date,
            effort=body.effort,
            product_area=body.product_area,
            depends_on=body.depends_on,
            reporter=body.reporter,
            parent_id=body.parent_id,
            tags=body.tags,
        )
    )
    return TaskResponse.model_validate(created)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    task_svc: Annotated[TaskService, Depends(get_task_service_for_read)],
):
    return TaskResponse.model_validate(await task_svc.get_task(task_id))


@router.get("/{task_id}/subtasks", response_model=list[TaskResponse])
async def list_subtasks(
    task_id: str,
    task_svc: Annotated[TaskService, Depends(get_task_service_for_read)],
):
    return [TaskResponse.model_validate(t) for t in await task_svc.list_subtasks(task_id)]


@router.patch("/{task_id}", response_model=TaskResponse)
@limit_writes
async def update_task(
    request: Request,
    task_id: str,
    body: TaskUpdate,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Partial update; only fields present in the body change."""
    return TaskResponse.model_validate(await task_svc.update_task(task_id, body.patch()))


@router.delete("/{task_id}", status_code=204)
@limit_writes
async def delete_task(
    request: Request,
    task_id: str,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
) -> Response:
    """Delete a task; other tasks' references to it are pruned."""
    await task_svc.delete_task(task_id)
    return Response(status_code=204)


@router.post("/{task_id}/dependencies", response_model=TaskResponse)
@limit_writes
async def add_dependency(
    request: Request,
    task_id: str,
    body: DependencyRequest,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Add a prerequisite; 409 if it would create a circular dependency."""
    return TaskResponse.model_validate(
        await task_svc.add_dependency(task_id, body.dependency_id)
    )


@router.delete("/{task_id}/dependencies/{dependency_id}", response_model=TaskResponse)
@limit_writes
async def remove_dependency(
    request: Request,
    task_id: str,
    dependency_id: str,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    return TaskResponse.model_validate(
        await task_svc.remove_dependency(task_id, dependency_id)
    )


@router.post("/{task_id}/move", response_model=TaskResponse)
@limit_writes
async def move_task(
    request: Request,
    task_id: str,
    body: TaskMoveRequest,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    return TaskResponse.model_validate(
        await task_svc.move_task(task_id, body.status, body.order)
    )


@router.post("/{task_id}/toggle-completion", response_model=TaskResponse)
@limit_writes
async def toggle_completion(
    request: Request,
    task_id: str,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    return TaskResponse.model_validate(await task_svc.toggle_completion(task_id))
