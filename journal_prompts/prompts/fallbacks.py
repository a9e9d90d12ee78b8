"""
Static prompt selection used whenever generation is unavailable.

Each interest category maps to a handler in a dispatch table so that the
prompt set for one category can be read and tested on its own.
"""

import random
from typing import Callable, Dict, List, Optional, Tuple

from journal_prompts.goals.schemas import Goal
from journal_prompts.interests.schemas import (
    MAX_LEVEL,
    MIN_LEVEL,
    HealthSubcategory,
    InterestType,
    UserInterest,
)
import journal_prompts.prompts.templates.static_prompts_templates as static_prompts

MORNING = "morning"
EVENING = "evening"

ContextualHandler = Callable[[UserInterest, bool], str]


# Visualization
def visualization_pool(time_of_day: str) -> List[str]:
    if time_of_day == EVENING:
        return static_prompts.EVENING_VISUALIZATION_PROMPTS
    return static_prompts.MORNING_VISUALIZATION_PROMPTS


def random_visualization_prompt(time_of_day: str, rng: Optional[random.Random] = None) -> str:
    pool = visualization_pool(time_of_day)
    return (rng or random).choice(pool)


def match_offline_group(goal_text: str) -> Optional[Tuple[str, str]]:
    """Return (group name, template) for the first keyword group found in the goal text."""
    text = goal_text.lower()
    for name, keywords, template in static_prompts.OFFLINE_KEYWORD_GROUPS:
        if any(kw in text for kw in keywords):
            return name, template
    return None


def offline_prompt(goal: Goal, time_of_day: str, rng: Optional[random.Random] = None) -> str:
    match = match_offline_group(goal.text)
    if match:
        return match[1]
    return random_visualization_prompt(time_of_day, rng)


# Baseline
def baseline_questions(interest: UserInterest) -> List[str]:
    subcategory = interest.health_subcategory
    if subcategory is not None:
        return static_prompts.HEALTH_BASELINE_QUESTIONS[subcategory.value]
    return static_prompts.BASELINE_QUESTIONS.get(
        interest.type.value, static_prompts.GENERIC_BASELINE_QUESTIONS
    )


def baseline_fallback(interest: UserInterest) -> str:
    questions = baseline_questions(interest)
    return questions[0] if questions else static_prompts.GENERIC_BASELINE_QUESTIONS[0]


# Contextual
def _pick(pair: Tuple[str, str], is_evening: bool) -> str:
    return pair[1] if is_evening else pair[0]


def diet_prompt_for_level(level: int, is_evening: bool) -> str:
    bank = static_prompts.DIET_EVENING_PROMPTS if is_evening else static_prompts.DIET_MORNING_PROMPTS
    if MIN_LEVEL <= level <= MAX_LEVEL:
        return bank[level]
    return _pick(static_prompts.DIET_GENERIC_PROMPTS, is_evening)


def _static_handler(category: str) -> ContextualHandler:
    pair = static_prompts.CONTEXTUAL_PROMPTS[category]

    def handler(interest: UserInterest, is_evening: bool) -> str:
        return _pick(pair, is_evening)

    return handler


def _health_handler(interest: UserInterest, is_evening: bool) -> str:
    subcategory = interest.health_subcategory
    if subcategory == HealthSubcategory.DIET:
        return diet_prompt_for_level(interest.current_level, is_evening)
    if subcategory is not None and subcategory.value in static_prompts.HEALTH_CONTEXTUAL_PROMPTS:
        return _pick(static_prompts.HEALTH_CONTEXTUAL_PROMPTS[subcategory.value], is_evening)
    return _pick(static_prompts.CONTEXTUAL_PROMPTS["health"], is_evening)


def _generic_handler(interest: UserInterest, is_evening: bool) -> str:
    return _pick(static_prompts.GENERIC_CONTEXTUAL_PROMPTS, is_evening)


CONTEXTUAL_HANDLERS: Dict[InterestType, ContextualHandler] = {
    interest_type: _static_handler(interest_type.value)
    for interest_type in InterestType
    if interest_type.value in static_prompts.CONTEXTUAL_PROMPTS
}
CONTEXTUAL_HANDLERS[InterestType.HEALTH] = _health_handler
CONTEXTUAL_HANDLERS[InterestType.OTHER] = _generic_handler


def contextual_fallback(interest: UserInterest, is_evening: bool) -> str:
    handler = CONTEXTUAL_HANDLERS.get(interest.type, _generic_handler)
    return handler(interest, is_evening)
