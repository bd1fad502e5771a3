"""
Groq LLM client for SoulPrint narratives.
Uses Llama 3.3 70B Versatile via Groq for fast inference.
"""
import logging
import re

import groq
from groq import AsyncGroq

import config

logger = logging.getLogger(__name__)

_client = None


def _get_client(use_backup: bool = False) -> AsyncGroq:
    global _client
    if use_backup and config.GROQ_BACKUP_API_KEY:
        _client = AsyncGroq(api_key=config.GROQ_BACKUP_API_KEY)
    elif _client is None:
        _client = AsyncGroq(api_key=config.GROQ_API_KEY)
    return _client


MAX_RETRIES = 3


def _strip_fences(text: str) -> str:
    """Strip markdown code fences (```text ... ```) that Llama sometimes wraps around output."""
    text = text.strip()
    text = re.sub(r"^```(?:\w+)?\s*\n?", "", text)
    text = re.sub(r"\n?```\s*$", "", text)
    return text.strip()


async def generate_text(
    system_prompt: str,
    user_prompt: str,
    model: str = config.NARRATIVE_MODEL,
) -> str:
    """
    Generate free-form text (narratives).

    Rate limits switch to the backup key and retry, up to MAX_RETRIES.
    Returns an empty string on failure so callers can fall back.
    """
    client = _get_client()
    for attempt in range(1, MAX_RETRIES + 1):
        try:
            response = await client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=0.7,
                max_tokens=1024,
            )
            return _strip_fences(response.choices[0].message.content or "")
        except groq.RateLimitError:
            logger.warning("[LLM] Rate limit exceeded, retrying with backup key (attempt %d/%d)", attempt, MAX_RETRIES)
            client = _get_client(use_backup=True)
        except groq.APIError as e:
            logger.error("[LLM] generate_text error: %s", e)
            return ""
    return ""
