"""TaskService: lane order, taxonomy checks, dependencies, delete pruning."""

from datetime import date

import pytest

from taskboard.application.dtos.task import TaskCreate
from taskboard.application.use_cases.tasks import TaskService
from taskboard.domain.exceptions import (
    CircularDependencyException,
    ResourceNotFoundException,
    ValidationException,
)


def _create(title: str, status: str = "To Do", **kwargs) -> TaskCreate:
    return TaskCreate(title=title, status=status, priority="Medium", **kwargs)


async def test_create_appends_to_lane(task_service: TaskService, task_repo, make_task) -> None:
    for i in range(3):
        task_repo.add(make_task(f"t{i}", f"Task {i}", order=i))
    created = await task_service.create_task(_create("Fourth"))
    assert created.order == 3
    first_in_empty_lane = await task_service.create_task(_create("New one", status="In Progress"))
    assert first_in_empty_lane.order == 0


async def test_create_strips_title_and_rejects_blank(task_service: TaskService) -> None:
    created = await task_service.create_task(_create("  Padded  "))
    assert created.title == "Padded"
    with pytest.raises(ValidationException):
        await task_service.create_task(_create("   "))


async def test_create_rejects_values_outside_taxonomy(task_service: TaskService) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await task_service.create_task(_create("X", status="Someday"))
    assert exc_info.value.details == {"field": "status"}
    with pytest.raises(ValidationException):
        await task_service.create_task(_create("X", effort="XXL"))


async def test_unenforced_taxonomy_accepts_any_value(task_repo, taxonomy) -> None:
    service = TaskService(task_repo, taxonomy, enforce_taxonomy=False)
    created = await service.create_task(_create("X", status="Someday"))
    assert created.status == "Someday"


async def test_create_checks_references(task_service: TaskService, task_repo, make_task) -> None:
    task_repo.add(make_task("p", "Parent"))
    child = await task_service.create_task(_create("Child", parent_id="p", depends_on=["p", "p"]))
    assert child.parent_id == "p"
    assert child.depends_on == ["p"]
    with pytest.raises(ValidationException):
        await task_service.create_task(_create("Orphan", parent_id="missing"))
    with pytest.raises(ValidationException):
        await task_service.create_task(_create("Dangling", depends_on=["missing"]))


async def test_update_patch_and_status_change_moves_to_lane_end(
    task_service: TaskService, task_repo, make_task
) -> None:
    task_repo.add(make_task("a", "A"))
    task_repo.add(make_task("b", "B", status="In Progress", order=0))
    task_repo.add(make_task("c", "C", status="In Progress", order=1))
    updated = await task_service.update_task(
        "a", {"status": "In Progress", "due_date": date(2025, 1, 2), "bogus": 1}
    )
    assert updated.status == "In Progress"
    assert updated.order == 2
    assert updated.due_date == date(2025, 1, 2)


async def test_update_clears_lists_and_rejects_empty_status(
    task_service: TaskService, task_repo, make_task
) -> None:
    task_repo.add(make_task("a", "A", assignees=["Alice"]))
    updated = await task_service.update_task("a", {"assignees": None})
    assert updated.assignees == []
    with pytest.raises(ValidationException):
        await task_service.update_task("a", {"status": None})
    with pytest.raises(ValidationException):
        await task_service.update_task("a", {"parent_id": "a"})


async def test_update_missing_task(task_service: TaskService) -> None:
    with pytest.raises(ResourceNotFoundException):
        await task_service.update_task("nope", {"title": "X"})


async def test_add_dependency_rejects_cycle_and_leaves_graph_unchanged(
    task_service: TaskService, task_repo, make_task
) -> None:
    # a depends on b, b depends on c
    task_repo.add(make_task("a", "A", depends_on=["b"]))
    task_repo.add(make_task("b", "B", depends_on=["c"]))
    task_repo.add(make_task("c", "C"))
    with pytest.raises(CircularDependencyException):
        await task_service.add_dependency("c", "a")
    assert (await task_repo.get_by_id("c")).depends_on == []
    with pytest.raises(CircularDependencyException):
        await task_service.update_task("c", {"depends_on": ["a"]})
    assert (await task_repo.get_by_id("c")).depends_on == []


async def test_add_and_remove_dependency(task_service: TaskService, task_repo, make_task) -> None:
    task_repo.add(make_task("a", "A"))
    task_repo.add(make_task("b", "B"))
    assert (await task_service.add_dependency("a", "b")).depends_on == ["b"]
    assert (await task_service.add_dependency("a", "b")).depends_on == ["b"]
    assert (await task_service.remove_dependency("a", "b")).depends_on == []
    with pytest.raises(CircularDependencyException):
        await task_service.add_dependency("a", "a")


async def test_delete_prunes_references(task_service: TaskService, task_repo, make_task) -> None:
    task_repo.add(make_task("a", "A"))
    task_repo.add(make_task("b", "B", depends_on=["a"]))
    task_repo.add(make_task("c", "C", parent_id="a"))
    await task_service.delete_task("a")
    assert await task_repo.get_by_id("a") is None
    assert (await task_repo.get_by_id("b")).depends_on == []
    assert (await task_repo.get_by_id("c")).parent_id is None
    with pytest.raises(ResourceNotFoundException):
        await task_service.delete_task("a")


async def test_move_task_with_explicit_order(task_service: TaskService, task_repo, make_task) -> None:
    task_repo.add(make_task("a", "A"))
    moved = await task_service.move_task("a", "Done", order=7)
    assert (moved.status, moved.order) == ("Done", 7)


async def test_toggle_completion(task_service: TaskService, task_repo, make_task) -> None:
    task_repo.add(make_task("a", "A", status="In Progress"))
    assert (await task_service.toggle_completion("a")).status == "Completed"
    assert (await task_service.toggle_completion("a")).status == "New"


async def test_list_subtasks(task_service: TaskService, task_repo, make_task) -> None:
    task_repo.add(make_task("p", "Parent"))
    task_repo.add(make_task("c1", "Child", parent_id="p"))
    task_repo.add(make_task("x", "Other"))
    assert [t.id for t in await task_service.list_subtasks("p")] == ["c1"]
    with pytest.raises(ResourceNotFoundException):
        await task_service.list_subtasks("missing")
