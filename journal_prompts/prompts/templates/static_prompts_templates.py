# 🌅 Visualization fallbacks, split by time of day
MORNING_VISUALIZATION_PROMPTS = [
    "Imagine it's a Saturday morning after you've achieved your goal. Write a journal entry describing what your day looks like.",
    "Think about the first morning after you've achieved your goal. Write a journal entry describing your thoughts and feelings.",
    "Visualize a typical day in your life after you've reached your goal. Write about what you see, feel, and experience.",
    "Picture yourself waking up as the person who has already reached this goal. What is the first thing you do today?",
    "Imagine running into an old friend after achieving your goal. They ask how you're doing. Write a journal entry about this encounter.",
]

EVENING_VISUALIZATION_PROMPTS = [
    "Picture yourself celebrating the achievement of your goal. What does that moment feel like? Write a journal entry about it.",
    "Imagine it's the evening of the day you reached your goal. Write about how the day unfolded and who you shared it with.",
    "Visualize yourself looking back on the journey to your goal from the other side. What are you most proud of?",
    "Imagine winding down tonight in the life you've been working toward. Describe the room, the people, and how you feel.",
    "Picture writing a thank-you note to your past self for the choices that got you to your goal. What do you say?",
]

# 🔑 Keyword groups for offline goal prompts, matched in order
OFFLINE_KEYWORD_GROUPS = [
    (
        "home",
        ["live", "move", "home"],
        "Imagine it's your first morning waking up in your new home. Write a journal entry about how it feels to finally be living where you've always wanted to be.",
    ),
    (
        "career",
        ["job", "career", "work", "business"],
        "Imagine it's the end of a fulfilling day at your dream job or business. Write about what made today special and how it feels to be doing work you love.",
    ),
    (
        "relationship",
        ["relationship", "partner", "love", "marriage"],
        "Picture a perfect day spent with your partner, now that you've built the relationship you've always wanted. Write about the moments that make you feel most connected and fulfilled.",
    ),
    (
        "health",
        ["health", "fitness", "weight", "exercise"],
        "Imagine looking in the mirror and feeling completely satisfied with your health and fitness. Write about how your daily routine has changed and how your body feels now.",
    ),
    (
        "finances",
        ["money", "financial", "income", "earn"],
        "Visualize checking your bank account and seeing that you've reached your financial goal. Write about what this means for your life and the sense of security it brings with your money.",
    ),
]

# ❓ Baseline questions
GENERIC_BASELINE_QUESTIONS = [
    "How do you feel about your current progress in this area?",
    "What do you want to improve or change?",
    "What's been holding you back from making the progress you want?",
]

BASELINE_QUESTIONS = {
    "health": [
        "How do you feel about your current health?",
        "What specific aspect of your health do you want to improve most?",
        "What's holding you back from consistently maintaining the health habits you want?",
    ],
    "productivity": [
        "How satisfied are you with your current productivity levels?",
        "What's your biggest productivity challenge right now?",
        "What would being more productive mean for your life?",
    ],
    "stress": [
        "How would you rate your current stress levels on a scale of 1-10?",
        "What are the main sources of stress in your life?",
        "What stress management techniques have you tried before?",
    ],
    "anxiety": [
        "How often do you experience anxiety in your daily life?",
        "What situations or thoughts tend to trigger your anxiety?",
        "What would your life look like if you felt more calm and centered?",
    ],
}

HEALTH_BASELINE_QUESTIONS = {
    "Diet": [
        "How do you feel about your current diet and relationship with food?",
        "What specific eating habits or nutrition goals do you want to improve?",
        "What are your biggest challenges when it comes to eating consistently well?",
        "What does your ideal eating pattern look like on a typical day?",
        "How do you currently plan and prepare your meals?",
    ],
    "Sleep": [
        "How would you rate your current sleep quality?",
        "What sleep habits would you like to improve?",
        "What prevents you from getting the sleep you need?",
    ],
    "Exercise": [
        "How do you feel about your current exercise routine?",
        "What type of physical activity do you want to do more of?",
        "What's been stopping you from exercising consistently?",
    ],
    "Light diet": [
        "What does 'eating lighter' mean to you?",
        "What changes would you like to make to feel lighter and more energized?",
        "What challenges do you face with portion control or food choices?",
    ],
    "Other": [
        "What specific health area would you like to focus on?",
        "How do you currently feel about this aspect of your health?",
        "What would improvement in this area mean for your daily life?",
    ],
}

# 🌗 Contextual fallbacks: (morning, evening) per category
GENERIC_CONTEXTUAL_PROMPTS = (
    "What are your intentions for today? How do you want to show up?",
    "How did today go for the area you're focusing on? What did you learn about yourself?",
)

CONTEXTUAL_PROMPTS = {
    "motivation": (
        "What is one thing you're excited to move forward on today, and why does it matter to you?",
        "When did you feel most driven today? What sparked that feeling?",
    ),
    "focus": (
        "What is the single most important thing you want to give your full attention to today?",
        "When was your attention strongest today, and what pulled it away?",
    ),
    "health": (
        "What is one choice you can make today that your body will thank you for?",
        "How did you take care of your body today?",
    ),
    "consistency": (
        "Which habit are you committing to show up for today, no matter what?",
        "Did you keep today's commitments? What made it easier or harder?",
    ),
    "confidence": (
        "Where will you give yourself permission to be bold today?",
        "When did you trust yourself today? How did it feel?",
    ),
    "goal_achievement": (
        "What is one concrete step toward your goals that you'll complete today?",
        "What progress did you make toward your goals today, however small?",
    ),
    "mental_health": (
        "What do you need today to feel steady and supported?",
        "How would you describe your emotional state today, and what influenced it?",
    ),
    "gratitude": (
        "What are you looking forward to today that you're already grateful for?",
        "What are three things from today you're grateful for?",
    ),
    "happiness": (
        "What small thing could you do today purely because it brings you joy?",
        "What moment today made you smile?",
    ),
    "anxiety": (
        "What might feel challenging today, and how can you meet it with calm?",
        "What worried you today, and how did it compare to what actually happened?",
    ),
    "depression": (
        "What is one gentle, achievable thing you can do for yourself today?",
        "What is one thing, however small, that you managed today?",
    ),
    "stress": (
        "What can you let go of today to make room for what matters?",
        "What caused you stress today, and how did you respond to it?",
    ),
    "productivity": (
        "What are your top three priorities today, and when will you work on them?",
        "What did you accomplish today, and what got in the way?",
    ),
    "time_management": (
        "How will you protect your time today? What will you say no to?",
        "Where did your time actually go today compared to your plan?",
    ),
    "meditation": (
        "When will you pause today for a few mindful breaths?",
        "How did taking time to be still affect your day?",
    ),
    "phone_usage": (
        "When will you put your phone away today, and what will you do instead?",
        "How did your phone use today affect your mood and focus?",
    ),
}

HEALTH_CONTEXTUAL_PROMPTS = {
    "Sleep": (
        "What will you do this evening to set yourself up for a restful night?",
        "How are you winding down tonight, and how rested did you feel today?",
    ),
    "Exercise": (
        "How will you move your body today?",
        "How did your body feel during today's movement?",
    ),
    "Light diet": (
        "What will help you eat lighter and feel more energized today?",
        "How did your portions and food choices make you feel today?",
    ),
}

# 🥗 Diet prompts indexed by progression level (1-10)
DIET_MORNING_PROMPTS = {
    1: "What is one healthy food choice you can commit to making today?",
    2: "How do you want your meals to make you feel today?",
    3: "What specific nutrients or food groups do you want to focus on today?",
    4: "Which meals can you plan or prepare ahead today to stay on track?",
    5: "How will you fit your nutrition goals around today's schedule and social plans?",
    6: "What strategy will you use if today's eating gets off track?",
    7: "How can you practice mindful eating at your meals today?",
    8: "How will you use food to support your energy and performance today?",
    9: "How does today's nutrition plan connect to your broader health goals?",
    10: "What refinement to your eating approach will you experiment with today, based on what your body has been telling you?",
}

DIET_EVENING_PROMPTS = {
    1: "What healthy food choice did you make today, and how did it feel?",
    2: "How did different foods affect your mood and energy today?",
    3: "Which nutrients or food groups did you get enough of today, and which were missing?",
    4: "How well did planning ahead support your meals today?",
    5: "How did your eating fit with your schedule and social situations today?",
    6: "What challenged your eating today, and how did you respond?",
    7: "When did you notice your hunger and fullness cues today?",
    8: "How did your food choices influence your energy and performance today?",
    9: "How did today's nutrition support your overall health goals?",
    10: "Looking at everything your body told you today, how will you optimize tomorrow's nutrition?",
}

DIET_GENERIC_PROMPTS = (
    "What is one intention you want to set for your eating today?",
    "How did your eating today line up with your intentions?",
)

# 📈 Progression bands (inclusive level ranges)
LEVEL_DESCRIPTIONS = [
    (1, 2, "Basic Awareness"),
    (3, 4, "Structured Approach"),
    (5, 6, "Lifestyle Integration"),
    (7, 8, "Mindful Mastery"),
    (9, 10, "Holistic Optimization"),
]
DEFAULT_LEVEL_DESCRIPTION = "Getting Started"

LEVEL_TIPS = [
    (1, 2, [
        "Focus on making one healthy food choice each day",
        "Start noticing how different foods make you feel",
        "Keep a simple food diary to build awareness",
    ]),
    (3, 4, [
        "Plan your meals ahead of time",
        "Focus on getting a variety of nutrients",
        "Prepare healthy snacks in advance",
    ]),
    (5, 6, [
        "Create eating patterns that fit your lifestyle",
        "Balance nutrition goals with social situations",
        "Develop strategies for challenging days",
    ]),
    (7, 8, [
        "Practice mindful eating techniques",
        "Use food to optimize your energy and performance",
        "Listen to your body's hunger and fullness cues",
    ]),
    (9, 10, [
        "Integrate nutrition with your broader health goals",
        "Share your knowledge to help others",
        "Continue refining your approach based on your body's feedback",
    ]),
]
DEFAULT_LEVEL_TIPS = ["Start your journey with small, consistent steps"]

# 🚫 Words skipped when looking for recurring themes in responses
STOP_WORDS = {
    "about", "after", "again", "also", "because", "been", "before", "being", "could",
    "didn't", "does", "doing", "don't", "each", "even", "from", "have", "having", "here",
    "into", "just", "like", "made", "make", "more", "most", "much", "myself", "only",
    "other", "over", "really", "same", "should", "some", "such", "than", "that", "their",
    "them", "then", "there", "these", "they", "thing", "things", "think", "this", "those",
    "through", "today", "very", "want", "was", "were", "what", "when", "where", "which",
    "while", "will", "with", "would", "your", "yours",
}
