"""
Gemini settings for commit-message suggestions.

GEMINI_MODEL (env or .env) picks the first model tried; the fast tiers
follow as quota fallbacks.
"""

import os

# Suggestions are short one-liners, so the fast tier leads
_primary = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_MODEL_CHAIN = list(dict.fromkeys([_primary, "gemini-2.5-flash", "gemini-2.0-flash"]))

MAX_OUTPUT_TOKENS = 512
TEMPERATURE = 0.9
