import datetime
import logging
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from fastapi import Request

from journal_prompts.core import config
from journal_prompts.core.database import Base, SessionLocal, engine
from journal_prompts.prompts.ai_providers.base import TextGenerationBackend
from journal_prompts.prompts.ai_providers.openai import OpenAIChatBackend
from journal_prompts.prompts.cache import InMemoryPromptCache, KeyValueCache, SqlPromptCache
from journal_prompts.prompts.connectivity import StaticConnectivityProbe
from journal_prompts.prompts.service import PromptEngine

logger = logging.getLogger(__name__)


def build_backend(api_key: str = config.OPENAI_API_KEY) -> Optional[TextGenerationBackend]:
    """Returns the OpenAI backend, or None when no API key is configured."""
    if not api_key or api_key == "REPLACE_WITH_YOUR_API_KEY":
        logger.warning("OPENAI_API_KEY not set. Prompts will come from the offline banks.")
        return None
    return OpenAIChatBackend(api_key=api_key)


def build_cache(kind: str = config.PROMPT_CACHE_BACKEND) -> KeyValueCache:
    if kind == "memory":
        return InMemoryPromptCache()
    if kind != "sql":
        logger.warning(f"Unknown cache backend '{kind}'. Falling back to 'sql'.")
    Base.metadata.create_all(bind=engine)
    return SqlPromptCache(SessionLocal)


def build_clock(tz_name: str = config.PROMPT_TIMEZONE) -> Callable[[], datetime.datetime]:
    """Returns a clock reading the current time in the configured zone."""
    tz = ZoneInfo(tz_name)

    def clock() -> datetime.datetime:
        return datetime.datetime.now(tz)

    return clock


def build_prompt_engine() -> PromptEngine:
    """Constructs the engine and its collaborators from configuration."""
    return PromptEngine(
        backend=build_backend(),
        connectivity=StaticConnectivityProbe(config.NETWORK_AVAILABLE),
        cache=build_cache(),
        model=config.OPENAI_CHAT_MODEL,
        clock=build_clock(),
    )


def get_prompt_engine(request: Request) -> PromptEngine:
    """
    FastAPI dependency returning the engine built once at application startup.
    """
    return request.app.state.prompt_engine
