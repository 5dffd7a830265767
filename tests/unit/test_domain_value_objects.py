"""Tests for Taxonomy and DependencyGraph."""

import pytest

from taskboard.core.config import Settings
from taskboard.domain.entities import DependencyGraph
from taskboard.domain.value_objects import Taxonomy


def test_taxonomy_requires_statuses_and_priorities() -> None:
    with pytest.raises(ValueError):
        Taxonomy(statuses=(), priorities=("High",))
    with pytest.raises(ValueError):
        Taxonomy(statuses=("To Do",), priorities=())


def test_default_status_prefers_configured_value(taxonomy: Taxonomy) -> None:
    assert taxonomy.default_status == "To Do"


def test_default_status_falls_back_to_first_open_status() -> None:
    tax = Taxonomy(
        statuses=("Done", "Backlog", "Doing"),
        priorities=("Medium",),
        preferred_default_status="To Do",
    )
    assert tax.default_status == "Backlog"


def test_completed_status(taxonomy: Taxonomy) -> None:
    assert taxonomy.completed_status == "Completed"
    tax = Taxonomy(statuses=("Open", "Done"), priorities=("Medium",))
    assert tax.completed_status == "Done"


def test_known_members_keeps_order(taxonomy: Taxonomy) -> None:
    assert taxonomy.known_members(["Bob", "Mallory", "Alice"]) == ["Bob", "Alice"]


def test_from_settings() -> None:
    settings = Settings(
        taxonomy_statuses=["A", "B"],
        taxonomy_priorities=["P1", "P2"],
        taxonomy_default_priority="P2",
        taxonomy_team_members=["Zed"],
    )
    tax = Taxonomy.from_settings(settings)
    assert tax.statuses == ("A", "B")
    assert tax.default_priority == "P2"
    assert tax.team_members == ("Zed",)


def test_settings_reject_unknown_default_priority() -> None:
    with pytest.raises(ValueError):
        Settings(taxonomy_priorities=["High"], taxonomy_default_priority="Medium")


def test_would_create_cycle_detects_transitive_loop() -> None:
    # a -> b -> c ; adding c -> a closes a loop
    graph = DependencyGraph.from_mapping({"a": ["b"], "b": ["c"], "c": []})
    assert graph.would_create_cycle("c", "a") is True
    assert graph.would_create_cycle("a", "c") is False


def test_self_edge_is_a_cycle() -> None:
    assert DependencyGraph().would_create_cycle("a", "a") is True


def test_from_tasks_and_add_edge(make_task) -> None:
    graph = DependencyGraph.from_tasks(
        [make_task("a", "A", depends_on=["b"]), make_task("b", "B")]
    )
    assert graph.edges == {"a": ["b"], "b": []}
    graph.add_edge("b", "c")
    graph.add_edge("b", "c")
    assert graph.edges["b"] == ["c"]
