"""Task dependency graph.

Tasks form a directed graph through depends_on (task -> prerequisite). The
graph must stay acyclic: before an edge is added the graph is walked from the
prospective prerequisite to see whether it already reaches the task.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field


@dataclass
class DependencyGraph:
    """Adjacency view of depends_on edges keyed by task id."""

    edges: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def from_tasks(cls, tasks: Iterable[object]) -> "DependencyGraph":
        """Build from any objects exposing id and depends_on."""
        return cls(
            edges={
                getattr(t, "id"): list(getattr(t, "depends_on", None) or [])
                for t in tasks
            }
        )

    @classmethod
    def from_mapping(cls, edges: Mapping[str, Iterable[str]]) -> "DependencyGraph":
        return cls(edges={k: list(v) for k, v in edges.items()})

    def would_create_cycle(self, task_id: str, dependency_id: str) -> bool:
        """Return True if adding task_id -> dependency_id would close a cycle.

        Depth-first walk from dependency_id through existing prerequisites;
        reaching task_id means the new edge closes a loop. A self edge is a cycle.
        """
        visited: set[str] = set()
        stack = [dependency_id]
        while stack:
            current = stack.pop()
            if current == task_id:
                return True
            if current in visited:
                continue
            visited.add(current)
            stack.extend(self.edges.get(current, ()))
        return False

    def add_edge(self, task_id: str, dependency_id: str) -> None:
        deps = self.edges.setdefault(task_id, [])
        if dependency_id not in deps:
            deps.append(dependency_id)
