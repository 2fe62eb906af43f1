from __future__ import annotations

from typing import Optional

import httpx
from openai import AsyncOpenAI

from trip_calendar.core.config import settings


def get_client() -> Optional[AsyncOpenAI]:
    """Returns a fresh AsyncOpenAI client built from the current credential, or None if unset."""
    if not settings.openai_api_key:
        return None
    return AsyncOpenAI(
        api_key=settings.openai_api_key,
        timeout=httpx.Timeout(settings.openai_timeout_seconds, connect=10.0),
    )
