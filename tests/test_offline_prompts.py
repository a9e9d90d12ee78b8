import pytest

from journal_prompts.goals.schemas import Goal
from journal_prompts.prompts import fallbacks
import journal_prompts.prompts.templates.static_prompts_templates as static_prompts


@pytest.mark.parametrize(
    "goal_text, expected_terms",
    [
        ("Move to a new home by the coast", ["home"]),
        ("Get a new JOB in tech", ["job", "work"]),
        ("Improve my relationship with my partner", ["relationship", "partner"]),
        ("Get my health back on track", ["health", "fitness"]),
        ("Make more money from side projects", ["money", "financial"]),
    ],
)
def test_keyword_goals_get_domain_prompt(make_engine, goal_text, expected_terms):
    engine = make_engine()
    prompt = engine.generate_offline_prompt(Goal(text=goal_text))
    assert any(term in prompt.lower() for term in expected_terms)


def test_keyword_groups_are_matched_in_order():
    # "work" (career) and "weight" (health) both match; career comes first
    name, _ = fallbacks.match_offline_group("Work out and lose weight")
    assert name == "career"


def test_unmatched_goal_uses_time_of_day_pool(make_engine):
    engine = make_engine()
    prompt = engine.generate_offline_prompt(Goal(text="Learn to play the guitar"))
    assert prompt
    assert prompt in static_prompts.MORNING_VISUALIZATION_PROMPTS


def test_offline_prompt_never_calls_backend(make_engine, backend):
    engine = make_engine(backend=backend)
    engine.generate_offline_prompt(Goal(text="Buy a home"))
    assert backend.queries == []


def test_save_alone_is_not_a_finances_keyword():
    assert fallbacks.match_offline_group("Save the reef") is None


def test_requested_time_of_day_overrides_clock(make_engine):
    engine = make_engine()  # morning clock
    prompt = engine.generate_offline_prompt(Goal(text="Learn to play the guitar"), "evening")
    assert prompt in static_prompts.EVENING_VISUALIZATION_PROMPTS
