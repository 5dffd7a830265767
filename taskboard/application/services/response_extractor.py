"""Locate the JSON object in a completion's raw text."""

from __future__ import annotations

import json
import re
from typing import Any

from taskboard.domain.exceptions import MalformedCompletion

# First fenced block, with or without a "json" language tag.
_FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)


def extract_json(raw_text: str) -> dict[str, Any]:
    """Return the single JSON object in raw_text.

    A fenced code block is preferred unless the text is itself a bare object
    (whose strings may contain fences); the whole text is the fallback.
    Truncated or otherwise invalid JSON is never repaired.

    Raises:
        MalformedCompletion: No parseable JSON object was found.
    """
    if not raw_text or not raw_text.strip():
        raise MalformedCompletion("empty completion", raw_text or "")
    whole = raw_text.strip()
    match = _FENCED_BLOCK.search(raw_text)
    candidates = [whole]
    if match:
        fenced = match.group(1)
        candidates = [whole, fenced] if whole.startswith("{") else [fenced, whole]
    error: json.JSONDecodeError | None = None
    for candidate in candidates:
        try:
            value = json.loads(candidate)
            break
        except json.JSONDecodeError as e:
            error = error or e
    else:
        raise MalformedCompletion(f"invalid JSON ({error.msg})", raw_text) from error
    if not isinstance(value, dict):
        raise MalformedCompletion(
            f"expected a JSON object, got {type(value).__name__}", raw_text
        )
    return value
