"""JSON extraction from raw completion text."""

import pytest

from taskboard.application.services.response_extractor import extract_json
from taskboard.domain.exceptions import MalformedCompletion

_BODY = '{"action": "GENERAL_CHAT", "responseText": "Hi"}'


def test_fenced_and_bare_text_extract_the_same_object() -> None:
    fenced = f"Sure! Here you go:\n```json\n{_BODY}\n```\nAnything else?"
    assert extract_json(fenced) == extract_json(_BODY)


def test_untagged_fence() -> None:
    assert extract_json(f"```\n{_BODY}\n```")["action"] == "GENERAL_CHAT"


def test_surrounding_whitespace_is_ignored() -> None:
    assert extract_json(f"\n\n  {_BODY}  \n")["responseText"] == "Hi"


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "I think you want a task.",
        '{"action": "GENERAL_CHAT", "responseText": "Hi"',
        '["GENERAL_CHAT"]',
    ],
)
def test_malformed_text_raises(raw: str) -> None:
    with pytest.raises(MalformedCompletion) as exc_info:
        extract_json(raw)
    assert exc_info.value.raw_text == raw


def test_truncated_fenced_json_is_not_repaired() -> None:
    with pytest.raises(MalformedCompletion):
        extract_json('```json\n{"action": "GENERAL_CHAT", "responseText": \n```')


def test_bare_object_with_fences_in_a_string_value() -> None:
    raw = (
        '{"action": "GENERAL_CHAT", '
        '"responseText": "Run this:\\n```python\\nprint(1)\\n```"}'
    )
    assert extract_json(raw)["responseText"] == "Run this:\n```python\nprint(1)\n```"


def test_bare_object_whose_string_holds_a_json_fence() -> None:
    raw = '{"action": "GENERAL_CHAT", "responseText": "Example: ```json {\\"a\\": 1}```"}'
    assert extract_json(raw)["action"] == "GENERAL_CHAT"
