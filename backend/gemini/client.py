"""
Gemini-backed commit-message suggestions.

The pet "speaks" in the voice of its evolution. Without GEMINI_API_KEY, or
when the call fails for any reason, generate_suggestions() returns None and
the caller falls back to the built-in templates.
"""

import logging
import os
import re
from typing import Optional

from google import genai
from google.genai import types

from gemini.config import MAX_OUTPUT_TOKENS, TEMPERATURE
from gemini.fallback import generate_with_fallback

logger = logging.getLogger(__name__)

_client: Optional[genai.Client] = None
_configured_key: Optional[str] = None

_LIST_MARKER = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s*")


def _get_client() -> Optional[genai.Client]:
    global _client, _configured_key
    api_key = os.environ.get("GEMINI_API_KEY")
    if not api_key:
        return None
    if api_key != _configured_key:
        _client = genai.Client(api_key=api_key)
        _configured_key = api_key
    return _client


def build_prompt(personality: str, mood: str, count: int) -> str:
    return (
        f"Generate {count} creative git commit messages in the voice of the "
        f"{personality} GitPet. Mood: {mood}. Be supportive and witty, one line each. "
        "Use conventional-commit prefixes. Return only the messages, one per line."
    )


def _parse_lines(text: str, count: int) -> list[str]:
    lines = []
    for line in text.splitlines():
        line = _LIST_MARKER.sub("", line).strip()
        if line:
            lines.append(line)
    return lines[:count]


async def generate_suggestions(personality: str, mood: str, count: int) -> Optional[list[str]]:
    client = _get_client()
    if client is None:
        return None

    config = types.GenerateContentConfig(
        max_output_tokens=MAX_OUTPUT_TOKENS,
        temperature=TEMPERATURE,
    )
    try:
        response = await generate_with_fallback(
            client,
            contents=build_prompt(personality, mood, count),
            config=config,
        )
    except Exception:
        logger.exception("Gemini suggestion call failed")
        return None
    if response is None or not response.text:
        return None

    lines = _parse_lines(response.text, count)
    return lines or None
