"""Utility to extract a JSON object from LLM responses."""

from __future__ import annotations

import json


def extract_json_object(text: str) -> dict:
    """Extract a single JSON object from an LLM response, handling ```json blocks.

    Tries in order:
    1. Direct json.loads on the full text
    2. Strip fenced code block markers and parse
    3. Find first '{' to last '}' and parse

    Truncated or otherwise broken JSON is not repaired.

    Raises:
        ValueError: if no JSON object can be found.
    """
    text = text.strip()

    # 1) Direct parse
    try:
        return _require_object(json.loads(text))
    except json.JSONDecodeError:
        pass

    # 2) Strip fenced code block markers
    stripped = _strip_code_fences(text)
    if stripped != text:
        try:
            return _require_object(json.loads(stripped))
        except json.JSONDecodeError:
            pass

    # 3) First '{' to last '}'
    result = _extract_braces(stripped)
    if result is not None:
        return result

    raise ValueError(f"Could not extract JSON from text: {text[:200]}...")


def _require_object(value: object) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"Expected a JSON object, got {type(value).__name__}")
    return value


def _strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers from text."""
    lines = text.split("\n")

    # Remove opening fence (```json, ```, etc.)
    if lines and lines[0].strip().startswith("```"):
        lines = lines[1:]

    # Remove closing fence
    while lines and lines[-1].strip() in ("```", ""):
        lines = lines[:-1]

    return "\n".join(lines).strip()


def _extract_braces(text: str) -> dict | None:
    """Try to extract JSON object from first '{' to last '}'."""
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end != -1 and end > start:
        try:
            value = json.loads(text[start : end + 1])
        except json.JSONDecodeError:
            return None
        if isinstance(value, dict):
            return value
    return None
