"""Taxonomy API schemas."""

from pydantic import BaseModel


class TaxonomyResponse(BaseModel):
    """Configured enumerations that constrain task fields."""

    statuses: list[str]
    closed_statuses: list[str]
    default_status: str
    priorities: list[str]
    default_priority: str
    product_areas: list[str]
    effort_sizes: list[str]
    team_members: list[str]
