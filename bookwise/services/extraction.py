"""Best-effort recovery of a JSON array embedded in free-form model output."""

import json
from typing import Any

_decoder = json.JSONDecoder()


def extract_json_array(text: str | None) -> list[Any] | None:
    """
    Return the first JSON array literal found in ``text``.

    Models often wrap their JSON in prose or code fences, so the whole string
    is never parsed. Each ``[`` is tried in order as the start of an array and
    decoded up to its matching ``]``; the first start that decodes to a list
    wins. Returns None when nothing decodes. Never raises.
    """
    if not text:
        return None

    start = text.find("[")
    while start != -1:
        try:
            value, _end = _decoder.raw_decode(text, start)
        except (ValueError, RecursionError):
            value = None
        if isinstance(value, list):
            return value
        start = text.find("[", start + 1)
    return None
