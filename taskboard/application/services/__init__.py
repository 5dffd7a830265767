"""Application services: assistant pipeline stages and task queries."""

from taskboard.application.services.action_normalizer import normalize, parse_action
from taskboard.application.services.prompt_builder import build_prompt, compose_prompt
from taskboard.application.services.proposal_signer import ProposalSigner
from taskboard.application.services.response_extractor import extract_json
from taskboard.application.services.task_query import TaskQueryService, summarize
from taskboard.application.services.task_reference_resolver import (
    AmbiguousMatch,
    NoMatch,
    SingleMatch,
    TaskReferenceResolver,
)

__all__ = [
    "AmbiguousMatch",
    "NoMatch",
    "ProposalSigner",
    "SingleMatch",
    "TaskQueryService",
    "TaskReferenceResolver",
    "build_prompt",
    "compose_prompt",
    "extract_json",
    "normalize",
    "parse_action",
    "summarize",
]
