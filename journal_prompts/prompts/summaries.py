import datetime
import re
from collections import Counter
from typing import List, Optional, Sequence

from journal_prompts.interests.schemas import MAX_LEVEL, UserInterest
from journal_prompts.journals.schemas import JournalSession, JournalSessionType
from journal_prompts.prompts.progression import (
    SCORE_WINDOW,
    current_streak,
    level_description,
    trend_label,
    weekly_average,
)
import journal_prompts.prompts.templates.static_prompts_templates as static_prompts

BASELINE_SNIPPET = 200
HISTORY_SNIPPET = 100
PREVIOUS_SNIPPET = 150
HISTORY_SESSIONS = 3
TOP_WORDS = 3
MIN_WORD_LENGTH = 4

NEW_FOCUS_SUMMARY = "This is a new area of focus for the user. There is no baseline or journaling history yet."

_WORD_RE = re.compile(r"[a-z']+")


def truncate(text: str, limit: int) -> str:
    text = (text or "").strip()
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + "..."


def relative_day(when: datetime.datetime, now: datetime.datetime) -> str:
    days = (now.date() - when.date()).days
    if days <= 0:
        return "today"
    if days == 1:
        return "yesterday"
    return f"{days} days ago"


def sessions_for_interest(interest: UserInterest, sessions: Sequence[JournalSession]) -> List[JournalSession]:
    """Sessions belonging to the interest, newest first."""
    own = [s for s in sessions if s.interest_id == interest.id]
    return sorted(own, key=lambda s: s.date, reverse=True)


def interest_description(interest: UserInterest) -> str:
    parts = [interest.type.label]
    if interest.subcategory:
        parts.append(f"specifically {interest.subcategory}")
    if interest.custom_description:
        parts.append(interest.custom_description.strip())
    return " - ".join(parts)


def context_summary(
    interest: UserInterest,
    previous_session: Optional[JournalSession],
    sessions: Sequence[JournalSession],
    now: datetime.datetime,
) -> str:
    baseline_text = " ".join(r.strip() for r in interest.baseline_responses if r and r.strip())
    history = [s for s in sessions_for_interest(interest, sessions) if s.response.strip()]

    if not baseline_text and not history and previous_session is None:
        return NEW_FOCUS_SUMMARY

    lines: List[str] = []
    if baseline_text:
        lines.append(f"Baseline: {truncate(baseline_text, BASELINE_SNIPPET)}")

    if history:
        lines.append("Recent entries:")
        for s in history[:HISTORY_SESSIONS]:
            line = f"- {relative_day(s.date, now)}: \"{truncate(s.response, HISTORY_SNIPPET)}\""
            if s.progress_score is not None:
                line += f" (score: {s.progress_score}/10)"
            lines.append(line)

    if previous_session is not None and previous_session.response.strip():
        lines.append(
            f"Previous {previous_session.type.label} session: "
            f"\"{truncate(previous_session.response, PREVIOUS_SNIPPET)}\""
        )

    return "\n".join(lines)


def progression_summary(interest: UserInterest) -> str:
    level = interest.current_level
    lines = [f"Level {level}/{MAX_LEVEL} ({level_description(level)})"]

    if interest.is_diet:
        if interest.diet_goals:
            lines.append(f"Diet goals: {', '.join(interest.diet_goals)}")
        if interest.nutrition_focus:
            lines.append(f"Nutrition focus: {', '.join(interest.nutrition_focus)}")
        if interest.weekly_progress_scores:
            avg = weekly_average(interest.weekly_progress_scores)
            lines.append(f"Weekly average score: {avg:.1f}/10")

    return "\n".join(lines)


def top_words(responses: Sequence[str], k: int = TOP_WORDS) -> List[str]:
    counts: Counter = Counter()
    for text in responses:
        for word in _WORD_RE.findall((text or "").lower()):
            word = word.strip("'")
            if len(word) >= MIN_WORD_LENGTH and word not in static_prompts.STOP_WORDS:
                counts[word] += 1
    return [w for w, _ in counts.most_common(k)]


def learning_insights(
    interest: UserInterest,
    sessions: Sequence[JournalSession],
    now: datetime.datetime,
) -> str:
    own = sessions_for_interest(interest, sessions)
    # Oldest to newest so the trend reads left to right
    scores = [s.progress_score for s in reversed(own) if s.progress_score is not None][-SCORE_WINDOW:]

    lines: List[str] = []
    if scores:
        line = f"Average score over last {len(scores)} entries: {weekly_average(scores):.1f}/10"
        trend = trend_label(scores)
        if trend:
            line += f" (trend: {trend})"
        lines.append(line)
    else:
        lines.append("No scores recorded yet.")

    themes = top_words([s.response for s in own])
    if themes:
        lines.append(f"Recurring themes: {', '.join(themes)}")

    morning = sum(1 for s in own if s.type == JournalSessionType.DAILY_ALIGNMENT)
    evening = sum(1 for s in own if s.type == JournalSessionType.DAILY_REVIEW)
    lines.append(f"Morning sessions: {morning}, evening sessions: {evening}")

    streak = current_streak(own, now.date())
    if streak:
        lines.append(f"Current streak: {streak} day{'s' if streak != 1 else ''}")

    return "\n".join(lines)
