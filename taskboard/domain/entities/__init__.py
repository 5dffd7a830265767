"""Domain entities."""

from taskboard.domain.entities.dependency_graph import DependencyGraph

__all__ = ["DependencyGraph"]
