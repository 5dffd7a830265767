"""Taxonomy value object: the configured enumerations that constrain task fields.

Built per request from settings and passed explicitly to the prompt builder
and the operation executor; nothing in the core reads a global taxonomy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from taskboard.core.config import Settings


@dataclass(frozen=True)
class Taxonomy:
    """Statuses, priorities, product areas, effort sizes and team members.

    statuses is ordered (board lane order). closed_statuses are the statuses
    that count as finished for overdue checks and completion toggles.
    """

    statuses: tuple[str, ...]
    priorities: tuple[str, ...]
    product_areas: tuple[str, ...] = ()
    effort_sizes: tuple[str, ...] = ()
    team_members: tuple[str, ...] = ()
    closed_statuses: frozenset[str] = frozenset({"Done", "Completed"})
    preferred_default_status: str = "To Do"
    default_priority: str = "Medium"

    def __post_init__(self) -> None:
        if not self.statuses:
            raise ValueError("Taxonomy requires at least one status")
        if not self.priorities:
            raise ValueError("Taxonomy requires at least one priority")

    @classmethod
    def from_settings(cls, settings: Settings) -> Taxonomy:
        """Build the taxonomy from TAXONOMY_* settings."""
        return cls(
            statuses=tuple(settings.taxonomy_statuses),
            priorities=tuple(settings.taxonomy_priorities),
            product_areas=tuple(settings.taxonomy_product_areas),
            effort_sizes=tuple(settings.taxonomy_effort_sizes),
            team_members=tuple(settings.taxonomy_team_members),
            closed_statuses=frozenset(settings.taxonomy_closed_statuses),
            preferred_default_status=settings.taxonomy_default_status,
            default_priority=settings.taxonomy_default_priority,
        )

    @property
    def default_status(self) -> str:
        """Status for new tasks when none is given.

        The configured preference when it is a configured status, otherwise
        the first status that is not closed, otherwise the first status.
        """
        if self.preferred_default_status in self.statuses:
            return self.preferred_default_status
        for status in self.statuses:
            if status not in self.closed_statuses:
                return status
        return self.statuses[0]

    @property
    def completed_status(self) -> str:
        """Status used when toggling a task to complete."""
        for status in self.statuses:
            if status.lower() == "completed":
                return status
        for status in self.statuses:
            if status in self.closed_statuses:
                return status
        return self.statuses[-1]

    @staticmethod
    def match(value: str, options: tuple[str, ...]) -> str | None:
        """Return the configured spelling of value (case-insensitive), or None."""
        if value in options:
            return value
        folded = value.casefold()
        return next((o for o in options if o.casefold() == folded), None)

    def known_members(self, names: list[str]) -> list[str]:
        """Configured team members among names (case-insensitive), keeping order."""
        matched = (self.match(n, self.team_members) for n in names)
        return [m for m in matched if m is not None]
