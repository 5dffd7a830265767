"""Prompt construction is a pure function of user, taxonomy and date."""

from datetime import date

from taskboard.application.services.prompt_builder import build_prompt, compose_prompt
from taskboard.domain.enums import ActionType
from taskboard.domain.value_objects import Taxonomy


def test_prompt_lists_taxonomy_and_defaults(taxonomy: Taxonomy) -> None:
    prompt = build_prompt("Alice", taxonomy, date(2025, 3, 14))
    assert "Available statuses: New, To Do, In Progress, Done, Completed" in prompt
    assert "Available priorities: High, Medium, Low" in prompt
    assert "Available assignees: Alice, Bob, Zonaid" in prompt
    assert "Available product areas: API, Portal" in prompt
    assert "Available effort sizes: S, M, L" in prompt
    assert "status is 'To Do'" in prompt
    assert "priority is 'Medium'" in prompt
    assert "Today's date is: 2025-03-14." in prompt
    assert "You are currently speaking with Alice." in prompt


def test_prompt_names_every_action(taxonomy: Taxonomy) -> None:
    prompt = build_prompt("Alice", taxonomy, date(2025, 3, 14))
    for action in ActionType:
        assert action.value in prompt
    assert "assigneesIncludeAny" in prompt
    assert "isOverdue" in prompt


def test_prompt_is_deterministic(taxonomy: Taxonomy) -> None:
    first = build_prompt("Bob", taxonomy, date(2025, 1, 1), assistant_name="Helper")
    second = build_prompt("Bob", taxonomy, date(2025, 1, 1), assistant_name="Helper")
    assert first == second
    assert "You are Helper" in first


def test_empty_optional_lists_are_marked() -> None:
    tax = Taxonomy(statuses=("To Do",), priorities=("Medium",))
    prompt = build_prompt("Bob", tax, date(2025, 1, 1))
    assert "Available product areas: (none configured)" in prompt


def test_compose_prompt_quotes_message() -> None:
    composed = compose_prompt("SYSTEM", "add a task")
    assert composed.startswith("SYSTEM\n\nUser message:\n")
    assert '"""\nadd a task\n"""' in composed
    assert composed.endswith("JSON Response:\n")
