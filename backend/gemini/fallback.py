"""
Model fallback for suggestion calls.

Quota errors (429 / RESOURCE_EXHAUSTED) move on to the next model in the
chain; anything else propagates to the caller.
"""

import logging
from typing import Any, Optional, Sequence

from gemini.config import GEMINI_MODEL_CHAIN

logger = logging.getLogger(__name__)


def is_quota_error(exc: Exception) -> bool:
    text = str(exc)
    return "429" in text or "RESOURCE_EXHAUSTED" in text


async def generate_with_fallback(
    client,
    *,
    contents,
    config,
    models: Optional[Sequence[str]] = None,
) -> Optional[Any]:
    """
    Return the first response from `models` (default GEMINI_MODEL_CHAIN), or
    None when every model is out of quota.
    """
    chain = list(models or GEMINI_MODEL_CHAIN)
    for model in chain:
        try:
            response = await client.aio.models.generate_content(
                model=model,
                contents=contents,
                config=config,
            )
        except Exception as e:
            if not is_quota_error(e):
                raise
            logger.warning("Model %r out of quota, trying the next one", model)
            continue
        logger.debug("Suggestions generated by %s", model)
        return response

    logger.error("Every suggestion model is out of quota: %s", chain)
    return None
