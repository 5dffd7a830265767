"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from taskboard.domain.entities import DependencyGraph
from taskboard.domain.enums import (
    ActionType,
    ConfigChangeType,
    ConfigTarget,
    OperationType,
)
from taskboard.domain.exceptions import (
    AssistantException,
    CircularDependencyException,
    DataAccessError,
    MalformedCompletion,
    MissingRequiredField,
    ResourceNotFoundException,
    TaskboardException,
    UnknownAction,
    UpstreamError,
    UpstreamUnavailable,
    ValidationException,
)
from taskboard.domain.value_objects import Taxonomy

__all__ = [
    # Entities
    "DependencyGraph",
    # Enums
    "ActionType",
    "ConfigChangeType",
    "ConfigTarget",
    "OperationType",
    # Exceptions
    "AssistantException",
    "CircularDependencyException",
    "DataAccessError",
    "MalformedCompletion",
    "MissingRequiredField",
    "ResourceNotFoundException",
    "TaskboardException",
    "UnknownAction",
    "UpstreamError",
    "UpstreamUnavailable",
    "ValidationException",
    # Value objects
    "Taxonomy",
]
