"""Execute a confirmed proposal.

Task operations run in submission order, one at a time, each in its own
savepoint: a failure is recorded for that operation and the batch continues.
Earlier operations are never rolled back. Configuration changes are only
noted for an administrator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from taskboard.application.dtos.assistant import (
    ConfigurationChangeProposal,
    CreateOperation,
    DeleteOperation,
    ExecutionSummary,
    OperationResult,
    TaskOperationsProposal,
    UpdateOperation,
)
from taskboard.application.dtos.task import TaskCreate, TaskResult
from taskboard.application.services.task_reference_resolver import SingleMatch
from taskboard.domain.enums import ConfigChangeType, OperationType
from taskboard.domain.exceptions import TaskboardException
from taskboard.shared.telemetry import add_span_attributes, traced
from taskboard.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from taskboard.application.services.task_reference_resolver import (
        TaskReferenceResolver,
    )
    from taskboard.application.use_cases.tasks.task_operations import TaskService
    from taskboard.domain.value_objects import Taxonomy

logger = get_logger(__name__)


class OperationExecutor:
    """Apply confirmed proposals through TaskService.

    Values are matched to the configured taxonomy case-insensitively. With
    strict_taxonomy, a CREATE replaces what still does not match (defaults
    for status/priority, null for effort/product area); an UPDATE leaves it
    out of the patch and says so in the result message. Unknown assignees
    are dropped.
    """

    def __init__(
        self,
        task_service: TaskService,
        resolver: TaskReferenceResolver,
        taxonomy: Taxonomy,
        strict_taxonomy: bool = True,
    ) -> None:
        self.task_service = task_service
        self.resolver = resolver
        self.taxonomy = taxonomy
        self.strict_taxonomy = strict_taxonomy

    @traced("assistant.execute_proposal")
    async def execute(
        self,
        proposal: TaskOperationsProposal | ConfigurationChangeProposal,
        speaking_user: str,
    ) -> ExecutionSummary:
        if isinstance(proposal, ConfigurationChangeProposal):
            return ExecutionSummary(results=[self._note_config_change(proposal)])

        summary = ExecutionSummary()
        for op in proposal.operations:
            if isinstance(op, CreateOperation):
                result = await self._create(op, speaking_user)
            elif isinstance(op, UpdateOperation):
                result = await self._update(op)
            else:
                result = await self._delete(op)
            summary.results.append(result)
        add_span_attributes(
            count=len(summary.results), all_successful=summary.all_successful
        )
        logger.info(
            "Executed %d operations (%d failed)",
            len(summary.results),
            sum(1 for r in summary.results if not r.success),
        )
        return summary

    def _note_config_change(self, proposal: ConfigurationChangeProposal) -> OperationResult:
        verb = "add" if proposal.change_type == ConfigChangeType.ADD else "remove"
        target = proposal.target.value.lower().replace("_", " ")
        logger.warning(
            "Configuration change noted for an administrator: %s %s %r",
            verb,
            target,
            proposal.item_name,
        )
        return OperationResult(
            success=True,
            message=(
                f'Noted the request to {verb} {target} "{proposal.item_name}". '
                "An administrator will apply configuration changes."
            ),
        )

    def _downgrade(
        self, values: dict[str, Any], creating: bool
    ) -> tuple[dict[str, Any], list[str]]:
        """Fit values to the taxonomy; returns the values and any ignored fields.

        Values are first matched case-insensitively. When strict, a value that
        still does not match is replaced (status/priority by the default,
        effort/product area by null) on CREATE, and left out of the patch on
        UPDATE so the stored value is kept.
        """
        tax = self.taxonomy
        out = dict(values)
        ignored: list[str] = []
        for field, default, options in (
            ("status", tax.default_status, tax.statuses),
            ("priority", tax.default_priority, tax.priorities),
            ("effort", None, tax.effort_sizes),
            ("product_area", None, tax.product_areas),
        ):
            value = out.get(field)
            if value is None:
                if field in ("status", "priority"):
                    if creating:
                        out[field] = default
                    else:
                        out.pop(field, None)
                continue
            matched = tax.match(value, options)
            if matched is not None:
                out[field] = matched
            elif not self.strict_taxonomy:
                continue
            elif creating:
                logger.warning("Replacing unknown %s %r with %r", field, value, default)
                out[field] = default
            else:
                logger.warning("Ignoring unknown %s %r in update", field, value)
                del out[field]
                ignored.append(f'unknown {field.replace("_", " ")} "{value}"')

        if self.strict_taxonomy and out.get("assignees"):
            requested = out["assignees"]
            known = tax.known_members(requested)
            unknown = [a for a in requested if tax.match(a, tax.team_members) is None]
            if unknown:
                logger.warning("Dropping unknown assignees %s", unknown)
                ignored.extend(f'unknown assignee "{a}"' for a in unknown)
            if known or creating:
                out["assignees"] = known
            else:
                del out["assignees"]
        return out, ignored

    async def _create(self, op: CreateOperation, speaking_user: str) -> OperationResult:
        details = op.task_details.model_dump()
        details["reporter"] = details.get("reporter") or speaking_user
        values, _ = self._downgrade(details, creating=True)
        data = TaskCreate(
            title=values["title"],
            status=values["status"],
            priority=values["priority"],
            description=values.get("description") or "",
            assignees=values.get("assignees") or [],
            start_date=values.get("start_date"),
            due_date=values.get("due_date"),
            effort=values.get("effort"),
            product_area=values.get("product_area"),
            depends_on=values.get("depends_on") or [],
            reporter=values.get("reporter"),
            parent_id=values.get("parent_id"),
            tags=values.get("tags") or [],
        )
        try:
            async with self.task_service.task_repo.savepoint():
                created = await self.task_service.create_task(data)
        except TaskboardException as e:
            logger.warning("CREATE %r failed: %s", data.title, e.message)
            return OperationResult(
                success=False,
                message=f'Failed to create task "{data.title}": {e.message}',
                operation=OperationType.CREATE,
            )
        return OperationResult(
            success=True,
            message=f'Created task "{created.title}".',
            operation=OperationType.CREATE,
            task_id=created.id,
        )

    async def _update(self, op: UpdateOperation) -> OperationResult:
        task: TaskResult | None = None
        try:
            async with self.task_service.task_repo.savepoint():
                resolution = await self.resolver.resolve(op.task_identifier)
                if not isinstance(resolution, SingleMatch):
                    return OperationResult(
                        success=False,
                        message=resolution.message(),
                        operation=OperationType.UPDATE,
                    )
                task = resolution.task
                patch, ignored = self._downgrade(op.updates.patch(), creating=False)
                updated = await self.task_service.update_task(task.id, patch)
        except TaskboardException as e:
            label = task.title if task else op.task_identifier
            logger.warning("UPDATE %s failed: %s", label, e.message)
            return OperationResult(
                success=False,
                message=f'Failed to update task "{label}": {e.message}',
                operation=OperationType.UPDATE,
                task_id=task.id if task else None,
            )
        message = f'Updated task "{updated.title}".'
        if ignored:
            message += f" Ignored {', '.join(ignored)}."
        return OperationResult(
            success=True,
            message=message,
            operation=OperationType.UPDATE,
            task_id=updated.id,
        )

    async def _delete(self, op: DeleteOperation) -> OperationResult:
        task: TaskResult | None = None
        try:
            async with self.task_service.task_repo.savepoint():
                resolution = await self.resolver.resolve(op.task_identifier)
                if not isinstance(resolution, SingleMatch):
                    return OperationResult(
                        success=False,
                        message=resolution.message(),
                        operation=OperationType.DELETE,
                    )
                task = resolution.task
                await self.task_service.delete_task(task.id)
        except TaskboardException as e:
            label = task.title if task else op.task_identifier
            logger.warning("DELETE %s failed: %s", label, e.message)
            return OperationResult(
                success=False,
                message=f'Failed to delete task "{label}": {e.message}',
                operation=OperationType.DELETE,
                task_id=task.id if task else None,
            )
        return OperationResult(
            success=True,
            message=f'Deleted task "{task.title}".',
            operation=OperationType.DELETE,
            task_id=task.id,
        )
