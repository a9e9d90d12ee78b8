"""
Progression level rules for user interests.

A level moves from 1 to 10. The engine only ever recommends an advance;
callers decide whether to apply it with `advance_level`.
"""

import datetime
import logging
from typing import Iterable, List, Optional, Sequence

from journal_prompts.interests.schemas import MAX_LEVEL, UserInterest
from journal_prompts.journals.schemas import JournalSession, JournalSessionType
import journal_prompts.prompts.templates.static_prompts_templates as static_prompts

logger = logging.getLogger(__name__)

SCORE_WINDOW = 7
MIN_SCORES_FOR_ADVANCE = 5
ADVANCE_THRESHOLD = 7
RECENT_SCORES = 5
RECENT_HITS_REQUIRED = 4
TREND_THRESHOLD = 0.5
MIN_SCORES_FOR_TREND = 5


def record_score(scores: List[int], score: int) -> List[int]:
    """Append a score and keep only the most recent window."""
    if not 1 <= score <= 10:
        raise ValueError(f"Progress score must be between 1 and 10, got {score}")
    scores.append(score)
    del scores[:-SCORE_WINDOW]
    return scores


def should_advance(scores: Sequence[int], level: int) -> bool:
    if level >= MAX_LEVEL or len(scores) < MIN_SCORES_FOR_ADVANCE:
        return False
    average = sum(scores) / len(scores)
    recent_hits = sum(1 for s in scores[-RECENT_SCORES:] if s >= ADVANCE_THRESHOLD)
    return average >= ADVANCE_THRESHOLD and recent_hits >= RECENT_HITS_REQUIRED


def check_and_advance_level(interest: UserInterest, current_score: int) -> bool:
    """
    Records the score in the interest's rolling window and reports whether
    the interest has earned the next level. The level itself is untouched.
    """
    record_score(interest.weekly_progress_scores, current_score)
    advanced = should_advance(interest.weekly_progress_scores, interest.current_level)
    if advanced:
        logger.info(
            f"Interest {interest.id} ready to advance from level {interest.current_level}"
        )
    return advanced


def advance_level(interest: UserInterest, now: Optional[datetime.datetime] = None) -> UserInterest:
    """Applies an advancement recommendation, capped at the top level."""
    if interest.current_level < MAX_LEVEL:
        interest.current_level += 1
        interest.last_progress_update = now or datetime.datetime.now(datetime.timezone.utc)
    return interest


def weekly_average(scores: Sequence[int]) -> float:
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def trend_label(scores: Sequence[int]) -> Optional[str]:
    """
    Compares the first and second half of the trailing window.
    Returns None until enough scores exist to call a trend.
    """
    window = list(scores)[-SCORE_WINDOW:]
    if len(window) < MIN_SCORES_FOR_TREND:
        return None
    half = len(window) // 2
    first = weekly_average(window[:half])
    second = weekly_average(window[half:])
    diff = second - first
    if diff > TREND_THRESHOLD:
        return "improving"
    if diff < -TREND_THRESHOLD:
        return "declining"
    return "stable"


def _band_lookup(bands, level: int, default):
    for low, high, value in bands:
        if low <= level <= high:
            return value
    return default


def level_description(level: int) -> str:
    return _band_lookup(static_prompts.LEVEL_DESCRIPTIONS, level, static_prompts.DEFAULT_LEVEL_DESCRIPTION)


def level_tips(level: int) -> List[str]:
    return _band_lookup(static_prompts.LEVEL_TIPS, level, static_prompts.DEFAULT_LEVEL_TIPS)


def current_streak(sessions: Iterable[JournalSession], today: datetime.date) -> int:
    """
    Counts consecutive days with a scored daily review, ending today or yesterday.
    """
    days = {
        s.date.date()
        for s in sessions
        if s.type == JournalSessionType.DAILY_REVIEW and s.progress_score is not None
    }
    cursor = today if today in days else today - datetime.timedelta(days=1)
    streak = 0
    while cursor in days:
        streak += 1
        cursor -= datetime.timedelta(days=1)
    return streak
