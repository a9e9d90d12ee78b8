from __future__ import annotations

import logging
from typing import Any, Optional

import openai
from openai import AsyncOpenAI

from journal_prompts.prompts.ai_providers.base import (
    BackendConnectivityError,
    BackendDecodeError,
    BackendStatusError,
    ChatChoice,
    ChatQuery,
    ChatResult,
    TextGenerationBackend,
)

logger = logging.getLogger(__name__)


class OpenAIChatBackend(TextGenerationBackend):
    """Chat completions over the OpenAI API, translated into backend errors."""

    def __init__(self, api_key: Optional[str] = None, client: Optional[Any] = None):
        if client is None:
            if not api_key:
                raise RuntimeError("Missing OPENAI_API_KEY in environment")
            client = AsyncOpenAI(api_key=api_key, max_retries=0)
        self.client = client

    async def complete(self, query: ChatQuery) -> ChatResult:
        try:
            resp = await self.client.chat.completions.create(
                model=query.model,
                messages=[m.model_dump() for m in query.messages],
                max_tokens=query.max_tokens,
            )
        except openai.APIConnectionError as e:
            raise BackendConnectivityError(str(e)) from e
        except openai.APIStatusError as e:
            body = e.response.text if e.response is not None else str(e)
            raise BackendStatusError(e.status_code, body) from e
        except openai.OpenAIError as e:
            raise BackendDecodeError(str(e)) from e

        try:
            choices = [ChatChoice(content=c.message.content or "") for c in resp.choices]
        except (AttributeError, TypeError) as e:
            logger.warning(f"Unexpected chat completion payload: {e}")
            raise BackendDecodeError(f"Malformed chat completion: {e}") from e
        return ChatResult(choices=choices)
