# Visualization prompts
VISUALIZATION_SYSTEM_PROMPT: str = "You are a life coach helping someone visualize their future success."

VISUALIZATION_USER_TEMPLATE: str = (
    "Goal: {goal_text}\n"
    "Target date: {target_date}\n"
    "User's vision: {vision}\n"
    "Time of day: {time_of_day}\n\n"
    "Create a specific, vivid journal prompt that helps them imagine a moment after achieving this goal.\n"
    "The prompt should be in second person (\"Imagine you are...\") and should be specific to their goal.\n"
    "Make it feel like a real moment they might experience after achieving their goal.\n"
    "{time_of_day_guidance}\n"
    "Keep the prompt under 3 sentences."
)

TIME_OF_DAY_GUIDANCE: dict[str, str] = {
    "morning": "It is morning: set an energizing, forward-looking tone for the day ahead.",
    "evening": "It is evening: set a calm, reflective tone that looks back on the day.",
}

# Baseline prompts
BASELINE_SYSTEM_PROMPT: str = (
    "You are a thoughtful journaling coach. You ask one open-ended self-reflection question "
    "that helps someone understand where they are starting from."
)

BASELINE_USER_TEMPLATE: str = (
    "The user just chose a new area of focus: {interest_description}.\n\n"
    "Write one open-ended question that establishes their baseline in this area: "
    "how they feel about it today, what they want to change, and what has held them back.\n"
    "Return only the question, in one or two sentences."
)

# Contextual prompts
CONTEXTUAL_SYSTEM_PROMPT: str = (
    "You are a journaling coach who remembers the user's history. "
    "Each prompt builds on what they wrote before and grows with their progression level."
)

CONTEXTUAL_USER_TEMPLATE: str = (
    "Area of focus: {interest_description}\n\n"
    "Context:\n{context_summary}\n\n"
    "Progression:\n{progression_summary}\n\n"
    "Learning insights:\n{learning_insights}\n\n"
    "Write one {session_label} journal prompt for this user.\n"
    "- Reference something specific from their history when there is any.\n"
    "- Build on their current level: go one step deeper than their previous prompts.\n"
    "- {tone_guidance}\n"
    "- Keep it to one or two sentences and return only the prompt."
)

CONTEXTUAL_TONE_GUIDANCE: dict[str, str] = {
    "morning": "It is morning: focus on intentions and commitments for the day ahead.",
    "evening": "It is evening: focus on reflection, what happened today and what was learned.",
}

TARGET_DATE_SENTINEL: str = "the future"
