"""Taxonomy API: the configured statuses, priorities, areas, sizes and members."""

from typing import Annotated

from fastapi import APIRouter, Depends

from taskboard.api.v1.dependencies import get_taxonomy
from taskboard.domain.value_objects import Taxonomy
from taskboard.schemas.taxonomy import TaxonomyResponse

router = APIRouter()


@router.get("", response_model=TaxonomyResponse)
def read_taxonomy(
    taxonomy: Annotated[Taxonomy, Depends(get_taxonomy)],
) -> TaxonomyResponse:
    return TaxonomyResponse(
        statuses=list(taxonomy.statuses),
        closed_statuses=sorted(taxonomy.closed_statuses),
        default_status=taxonomy.default_status,
        priorities=list(taxonomy.priorities),
        default_priority=taxonomy.default_priority,
        product_areas=list(taxonomy.product_areas),
        effort_sizes=list(taxonomy.effort_sizes),
        team_members=list(taxonomy.team_members),
    )
