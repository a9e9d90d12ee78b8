import asyncio

from journal_prompts.interests.schemas import InterestType, UserInterest
from journal_prompts.prompts.ai_providers.base import BackendStatusError
from journal_prompts.prompts.service import SERVICE_ERROR_MESSAGE

from conftest import FakeBackend, run


class GatedBackend(FakeBackend):
    """Holds its first call open until the gate is set."""

    def __init__(self):
        super().__init__()
        self.gate = None
        self.held = False

    async def complete(self, query):
        if self.gate is not None and not self.held:
            self.held = True
            await self.gate.wait()
        return await super().complete(query)


def test_baseline_request_is_seeded_with_interest_description(make_engine, backend):
    interest = UserInterest(type=InterestType.STRESS, subcategory="Work stress", custom_description="Deadlines pile up")
    engine = make_engine(backend=backend)

    prompt = run(engine.generate_baseline_prompt(interest))

    assert prompt == "Imagine you are standing on the summit."
    query = backend.queries[0]
    assert query.max_tokens == 200
    user = query.messages[1].content
    assert "Manage stress - specifically Work stress - Deadlines pile up" in user


def test_baseline_failure_returns_first_category_question(make_engine):
    engine = make_engine(backend=FakeBackend(error=BackendStatusError(503, "down")))
    interest = UserInterest(type=InterestType.PRODUCTIVITY)

    prompt = run(engine.generate_baseline_prompt(interest))

    assert prompt == "How satisfied are you with your current productivity levels?"
    assert engine.error_message == SERVICE_ERROR_MESSAGE
    assert engine.is_loading is False


def test_baseline_health_subcategory_questions(make_engine):
    engine = make_engine(connected=False)
    interest = UserInterest(type=InterestType.HEALTH, subcategory="Sleep")
    assert run(engine.generate_baseline_prompt(interest)) == "How would you rate your current sleep quality?"


def test_baseline_generic_question_for_other_categories(make_engine, backend):
    engine = make_engine(backend=backend, connected=False)
    interest = UserInterest(type=InterestType.GRATITUDE)
    assert run(engine.generate_baseline_prompt(interest)) == "How do you feel about your current progress in this area?"
    assert backend.queries == []


def test_loading_stays_set_while_another_call_is_running(make_engine):
    backend = GatedBackend()
    engine = make_engine(backend=backend)
    interest = UserInterest(type=InterestType.FOCUS)

    async def overlapping_calls():
        backend.gate = asyncio.Event()
        slow = asyncio.create_task(engine.generate_baseline_prompt(interest))
        await asyncio.sleep(0)
        assert engine.is_loading is True

        await engine.generate_baseline_prompt(interest)
        assert engine.is_loading is True

        backend.gate.set()
        await slow
        assert engine.is_loading is False

    run(overlapping_calls())
