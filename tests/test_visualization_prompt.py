from journal_prompts.goals.schemas import Goal
from journal_prompts.prompts.ai_providers.base import (
    BackendConnectivityError,
    BackendDecodeError,
    BackendStatusError,
)
from journal_prompts.prompts.cache import InMemoryPromptCache
from journal_prompts.prompts.service import (
    EMPTY_RESPONSE_MESSAGE,
    NO_CONNECTIVITY_MESSAGE,
    SERVICE_ERROR_MESSAGE,
    visualization_cache_key,
)
import journal_prompts.prompts.templates.static_prompts_templates as static_prompts

from conftest import EVENING_NOW, MORNING_NOW, FakeBackend, run


def test_success_trims_caches_and_clears_error(make_engine, backend, goal):
    cache = InMemoryPromptCache()
    engine = make_engine(backend=backend, cache=cache)
    engine.error_message = "stale"

    prompt = run(engine.generate_visualization_prompt(goal, "morning"))

    assert prompt == "Imagine you are standing on the summit."
    assert engine.error_message is None
    assert engine.is_loading is False
    assert cache.get(visualization_cache_key(goal, MORNING_NOW.timestamp())) == prompt


def test_request_embeds_goal_details(make_engine, backend, goal):
    goal.user_vision = "x" * 1200 + "the ending"
    engine = make_engine(backend=backend)
    run(engine.generate_visualization_prompt(goal, "evening"))

    query = backend.queries[0]
    assert query.model == "gpt-test"
    assert query.max_tokens == 150
    assert [m.role for m in query.messages] == ["system", "user"]
    user = query.messages[1].content
    assert "Goal: Run a marathon" in user
    assert "Target date: April 12, 2027" in user
    assert "Time of day: evening" in user
    vision_line = next(line for line in user.splitlines() if line.startswith("User's vision: "))
    vision = vision_line[len("User's vision: "):]
    assert len(vision) == 1000
    assert vision.endswith("the ending")


def test_missing_target_date_uses_sentinel(make_engine, backend, goal):
    goal.target_date = None
    engine = make_engine(backend=backend)
    run(engine.generate_visualization_prompt(goal, "morning"))
    assert "Target date: the future" in backend.queries[0].messages[1].content


def test_offline_never_calls_backend(make_engine, backend, goal):
    engine = make_engine(backend=backend, connected=False)

    morning = run(engine.generate_visualization_prompt(goal, "morning"))
    evening = run(engine.generate_visualization_prompt(goal, "evening"))

    assert backend.queries == []
    assert morning in static_prompts.MORNING_VISUALIZATION_PROMPTS
    assert evening in static_prompts.EVENING_VISUALIZATION_PROMPTS
    assert engine.error_message is None
    assert engine.is_loading is False


def test_time_of_day_defaults_to_clock(make_engine, goal):
    engine = make_engine(connected=False, now=EVENING_NOW)
    prompt = run(engine.generate_visualization_prompt(goal))
    assert prompt in static_prompts.EVENING_VISUALIZATION_PROMPTS


def test_empty_vision_never_calls_backend(make_engine, backend):
    for vision in (None, "", "   "):
        engine = make_engine(backend=backend)
        prompt = run(engine.generate_visualization_prompt(Goal(text="Travel", user_vision=vision), "morning"))
        assert prompt in static_prompts.MORNING_VISUALIZATION_PROMPTS
    assert backend.queries == []


def test_unconfigured_backend_reports_no_connectivity(make_engine, goal):
    engine = make_engine(backend=None)
    prompt = run(engine.generate_visualization_prompt(goal, "morning"))
    assert prompt in static_prompts.MORNING_VISUALIZATION_PROMPTS
    assert engine.error_message == NO_CONNECTIVITY_MESSAGE


def test_same_cache_key_returns_identical_text_without_second_call(make_engine, goal):
    backend = FakeBackend(reply="First generated prompt")
    engine = make_engine(backend=backend)

    first = run(engine.generate_visualization_prompt(goal, "morning"))
    backend.reply = "Second generated prompt"
    second = run(engine.generate_visualization_prompt(goal, "morning"))

    assert first == second == "First generated prompt"
    assert len(backend.queries) == 1
    assert engine.cached_prompt(visualization_cache_key(goal, MORNING_NOW.timestamp())) == first


def test_clear_cache_drops_entries(make_engine, backend, goal):
    cache = InMemoryPromptCache()
    engine = make_engine(backend=backend, cache=cache)
    run(engine.generate_visualization_prompt(goal, "morning"))
    assert len(cache) == 1

    engine.clear_cache()

    assert len(cache) == 0
    run(engine.generate_visualization_prompt(goal, "morning"))
    assert len(backend.queries) == 2


def test_empty_response_falls_back_with_message(make_engine, goal):
    for reply in (None, "   \n"):
        engine = make_engine(backend=FakeBackend(reply=reply))
        prompt = run(engine.generate_visualization_prompt(goal, "evening"))
        assert prompt in static_prompts.EVENING_VISUALIZATION_PROMPTS
        assert engine.error_message == EMPTY_RESPONSE_MESSAGE
        assert engine.is_loading is False


def test_backend_errors_fall_back_with_messages(make_engine, goal):
    cases = [
        (BackendConnectivityError("offline"), NO_CONNECTIVITY_MESSAGE),
        (BackendStatusError(500, "boom"), SERVICE_ERROR_MESSAGE),
        (BackendDecodeError("bad json"), SERVICE_ERROR_MESSAGE),
        (ValueError("unexpected"), SERVICE_ERROR_MESSAGE),
    ]
    for error, message in cases:
        cache = InMemoryPromptCache()
        engine = make_engine(backend=FakeBackend(error=error), cache=cache)
        prompt = run(engine.generate_visualization_prompt(goal, "morning"))
        assert prompt in static_prompts.MORNING_VISUALIZATION_PROMPTS
        assert engine.error_message == message
        assert engine.is_loading is False
        assert len(cache) == 0


def test_fallback_covers_whole_pool(make_engine, goal):
    engine = make_engine(connected=False)
    seen = {run(engine.generate_visualization_prompt(goal, "morning")) for _ in range(60)}
    assert len(seen) > 1
    assert seen <= set(static_prompts.MORNING_VISUALIZATION_PROMPTS)
