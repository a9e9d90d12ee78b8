import asyncio
import datetime
import os
import random

# Keep tests off the network and the on-disk cache
os.environ["PROMPT_CACHE_BACKEND"] = "memory"
os.environ["OPENAI_API_KEY"] = ""

import pytest

from journal_prompts.goals.schemas import Goal
from journal_prompts.interests.schemas import InterestType, UserInterest
from journal_prompts.journals.schemas import JournalSession, JournalSessionType
from journal_prompts.prompts.ai_providers.base import (
    ChatChoice,
    ChatQuery,
    ChatResult,
    TextGenerationBackend,
)
from journal_prompts.prompts.cache import InMemoryPromptCache
from journal_prompts.prompts.connectivity import StaticConnectivityProbe
from journal_prompts.prompts.service import PromptEngine

MORNING_NOW = datetime.datetime(2026, 10, 18, 8, 30, tzinfo=datetime.timezone.utc)
EVENING_NOW = datetime.datetime(2026, 10, 18, 20, 15, tzinfo=datetime.timezone.utc)


class FakeBackend(TextGenerationBackend):
    def __init__(self, reply="  Imagine you are standing on the summit.  ", error=None):
        self.reply = reply
        self.error = error
        self.queries: list[ChatQuery] = []

    async def complete(self, query: ChatQuery) -> ChatResult:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        if self.reply is None:
            return ChatResult(choices=[])
        return ChatResult(choices=[ChatChoice(content=self.reply)])


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def make_engine():
    def _make(backend=None, connected=True, cache=None, now=MORNING_NOW, seed=7):
        return PromptEngine(
            backend=backend,
            connectivity=StaticConnectivityProbe(connected),
            cache=cache if cache is not None else InMemoryPromptCache(),
            model="gpt-test",
            clock=lambda: now,
            rng=random.Random(seed),
        )

    return _make


@pytest.fixture
def goal():
    return Goal(
        text="Run a marathon",
        target_date=datetime.date(2027, 4, 12),
        user_vision="Crossing the finish line with my family cheering.",
    )


@pytest.fixture
def diet_interest():
    return UserInterest(
        type=InterestType.HEALTH,
        subcategory="Diet",
        current_level=3,
        diet_goals=["More vegetables", "Less sugar"],
        nutrition_focus=["energy"],
        weekly_progress_scores=[6, 7, 8],
        baseline_responses=["I snack a lot in the afternoon and skip breakfast most days."],
    )


def make_session(interest, days_ago, kind=JournalSessionType.DAILY_REVIEW, response="", score=None, now=MORNING_NOW):
    return JournalSession(
        interest_id=interest.id,
        date=now - datetime.timedelta(days=days_ago),
        type=kind,
        prompt="How did today go?",
        response=response,
        progress_score=score,
        completed=True,
    )
