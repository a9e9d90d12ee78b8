import datetime
import logging
import random
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Sequence

from journal_prompts.goals.schemas import Goal
from journal_prompts.interests.schemas import UserInterest
from journal_prompts.journals.schemas import JournalSession
from journal_prompts.prompts import fallbacks, progression, summaries
from journal_prompts.prompts.ai_providers.base import (
    BackendConnectivityError,
    ChatMessage,
    ChatQuery,
    PromptBackendError,
    TextGenerationBackend,
)
from journal_prompts.prompts.cache import KeyValueCache
from journal_prompts.prompts.connectivity import ConnectivityProbe
import journal_prompts.prompts.templates.openai_prompts_templates as prompts

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o"
VISION_TAIL = 1000
VISUALIZATION_MAX_TOKENS = 150
BASELINE_MAX_TOKENS = 200
CONTEXTUAL_MAX_TOKENS = 150
MORNING_START_HOUR = 4
EVENING_START_HOUR = 16

NO_CONNECTIVITY_MESSAGE = "No internet connection. Using offline prompt."
EMPTY_RESPONSE_MESSAGE = "Received empty response from AI service."
SERVICE_ERROR_MESSAGE = "Failed to generate prompt. Using offline prompt."


class EmptyResponseError(PromptBackendError):
    """The backend answered without any usable text."""


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def time_of_day_for(moment: datetime.datetime) -> str:
    if MORNING_START_HOUR <= moment.hour < EVENING_START_HOUR:
        return fallbacks.MORNING
    return fallbacks.EVENING


def format_target_date(target: Optional[datetime.date]) -> str:
    if target is None:
        return prompts.TARGET_DATE_SENTINEL
    return f"{target:%B} {target.day}, {target.year}"


def visualization_cache_key(goal: Goal, timestamp: float) -> str:
    return f"goal_{goal.id}_{timestamp}"


class PromptEngine:
    """
    Builds journal prompts, preferring the generative backend and falling back
    to static prompt banks whenever generation is unavailable or fails.
    """

    def __init__(
        self,
        backend: Optional[TextGenerationBackend],
        connectivity: ConnectivityProbe,
        cache: KeyValueCache,
        model: str = DEFAULT_MODEL,
        clock: Callable[[], datetime.datetime] = _utcnow,
        rng: Optional[random.Random] = None,
    ):
        self.backend = backend
        self.connectivity = connectivity
        self.cache = cache
        self.model = model
        self.clock = clock
        self.rng = rng or random.Random()

        self.error_message: Optional[str] = None
        self._in_flight: int = 0

    @property
    def is_loading(self) -> bool:
        """True while any generation call on this engine is still running."""
        return self._in_flight > 0

    @contextmanager
    def _busy(self) -> Iterator[None]:
        self._in_flight += 1
        try:
            yield
        finally:
            self._in_flight -= 1

    # State helpers
    def reset_error(self) -> None:
        self.error_message = None

    def clear_cache(self) -> None:
        self.cache.clear()

    def cached_prompt(self, cache_key: str) -> Optional[str]:
        return self.cache.get(cache_key)

    def _backend_ready(self) -> bool:
        return self.backend is not None and self.connectivity.is_connected()

    def _record_failure(self, error: Exception, context: str) -> None:
        if isinstance(error, BackendConnectivityError):
            self.error_message = NO_CONNECTIVITY_MESSAGE
        elif isinstance(error, EmptyResponseError):
            self.error_message = EMPTY_RESPONSE_MESSAGE
        else:
            self.error_message = SERVICE_ERROR_MESSAGE
        logger.warning(f"Prompt generation failed ({context}): {error}")

    async def _generate(self, messages: List[ChatMessage], max_tokens: int) -> str:
        query = ChatQuery(model=self.model, messages=messages, max_tokens=max_tokens)
        result = await self.backend.complete(query)
        text = (result.first_text or "").strip()
        if not text:
            raise EmptyResponseError("Backend returned no text")
        return text

    # 1. Goal visualization
    async def generate_visualization_prompt(self, goal: Goal, time_of_day: Optional[str] = None) -> str:
        """
        Returns a vivid visualization prompt for the goal. Falls back to the
        morning or evening pool when offline, unconfigured, missing a vision,
        or when the backend fails.
        """
        with self._busy():
            now = self.clock()
            time_of_day = time_of_day or time_of_day_for(now)

            if not self.connectivity.is_connected():
                return fallbacks.random_visualization_prompt(time_of_day, self.rng)

            if self.backend is None:
                self.error_message = NO_CONNECTIVITY_MESSAGE
                return fallbacks.random_visualization_prompt(time_of_day, self.rng)

            if not goal.has_vision:
                return fallbacks.random_visualization_prompt(time_of_day, self.rng)

            cache_key = visualization_cache_key(goal, now.timestamp())
            cached = self.cache.get(cache_key)
            if cached is not None:
                return cached

            user_prompt = prompts.VISUALIZATION_USER_TEMPLATE.format(
                goal_text=goal.text,
                target_date=format_target_date(goal.target_date),
                vision=goal.user_vision[-VISION_TAIL:],
                time_of_day=time_of_day,
                time_of_day_guidance=prompts.TIME_OF_DAY_GUIDANCE[time_of_day],
            )
            try:
                text = await self._generate(
                    [
                        ChatMessage(role="system", content=prompts.VISUALIZATION_SYSTEM_PROMPT),
                        ChatMessage(role="user", content=user_prompt),
                    ],
                    VISUALIZATION_MAX_TOKENS,
                )
            except Exception as e:
                self._record_failure(e, f"visualization for goal {goal.id}")
                return fallbacks.random_visualization_prompt(time_of_day, self.rng)

            try:
                self.cache.set(cache_key, text)
            except Exception as e:
                logger.warning(f"Failed to cache prompt {cache_key}: {e}")
            self.error_message = None
            return text

    # 2. Offline goal prompt
    def generate_offline_prompt(self, goal: Goal, time_of_day: Optional[str] = None) -> str:
        time_of_day = time_of_day or time_of_day_for(self.clock())
        return fallbacks.offline_prompt(goal, time_of_day, self.rng)

    # 3. Baseline question
    async def generate_baseline_prompt(self, interest: UserInterest) -> str:
        """Returns an opening self-reflection question for a newly chosen interest."""
        with self._busy():
            if not self._backend_ready():
                return fallbacks.baseline_fallback(interest)

            user_prompt = prompts.BASELINE_USER_TEMPLATE.format(
                interest_description=summaries.interest_description(interest),
            )
            try:
                text = await self._generate(
                    [
                        ChatMessage(role="system", content=prompts.BASELINE_SYSTEM_PROMPT),
                        ChatMessage(role="user", content=user_prompt),
                    ],
                    BASELINE_MAX_TOKENS,
                )
            except Exception as e:
                self._record_failure(e, f"baseline for interest {interest.id}")
                return fallbacks.baseline_fallback(interest)

            self.error_message = None
            return text

    # 4. Contextual daily prompt
    async def generate_contextual_prompt(
        self,
        interest: UserInterest,
        previous_session: Optional[JournalSession] = None,
        all_sessions: Sequence[JournalSession] = (),
        is_evening: bool = False,
    ) -> str:
        """
        Builds a daily prompt from the interest's history, progression level
        and recurring themes. Falls back to the category's static prompt.
        """
        with self._busy():
            if not self._backend_ready():
                return fallbacks.contextual_fallback(interest, is_evening)

            now = self.clock()
            time_of_day = fallbacks.EVENING if is_evening else fallbacks.MORNING
            user_prompt = prompts.CONTEXTUAL_USER_TEMPLATE.format(
                interest_description=summaries.interest_description(interest),
                context_summary=summaries.context_summary(interest, previous_session, all_sessions, now),
                progression_summary=summaries.progression_summary(interest),
                learning_insights=summaries.learning_insights(interest, all_sessions, now),
                session_label=time_of_day,
                tone_guidance=prompts.CONTEXTUAL_TONE_GUIDANCE[time_of_day],
            )
            try:
                text = await self._generate(
                    [
                        ChatMessage(role="system", content=prompts.CONTEXTUAL_SYSTEM_PROMPT),
                        ChatMessage(role="user", content=user_prompt),
                    ],
                    CONTEXTUAL_MAX_TOKENS,
                )
            except Exception as e:
                self._record_failure(e, f"contextual for interest {interest.id}")
                return fallbacks.contextual_fallback(interest, is_evening)

            self.error_message = None
            return text

    # 5. Progression
    def check_and_advance_level(self, interest: UserInterest, current_score: int) -> bool:
        return progression.check_and_advance_level(interest, current_score)
