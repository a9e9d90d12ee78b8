from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import UUID, uuid4
from pydantic import BaseModel, Field

MIN_LEVEL = 1
MAX_LEVEL = 10


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class InterestType(str, Enum):
    MOTIVATION = "motivation"
    FOCUS = "focus"
    HEALTH = "health"
    CONSISTENCY = "consistency"
    CONFIDENCE = "confidence"
    GOAL_ACHIEVEMENT = "goal_achievement"
    MENTAL_HEALTH = "mental_health"
    GRATITUDE = "gratitude"
    HAPPINESS = "happiness"
    ANXIETY = "anxiety"
    DEPRESSION = "depression"
    STRESS = "stress"
    PRODUCTIVITY = "productivity"
    TIME_MANAGEMENT = "time_management"
    MEDITATION = "meditation"
    PHONE_USAGE = "phone_usage"
    OTHER = "other"

    @property
    def label(self) -> str:
        return INTEREST_LABELS[self]


INTEREST_LABELS = {
    InterestType.MOTIVATION: "Become more motivated",
    InterestType.FOCUS: "Become more focused",
    InterestType.HEALTH: "Become healthier",
    InterestType.CONSISTENCY: "Become more consistent",
    InterestType.CONFIDENCE: "Become more confident",
    InterestType.GOAL_ACHIEVEMENT: "Become better equipped to reach my goals",
    InterestType.MENTAL_HEALTH: "Improve mental health",
    InterestType.GRATITUDE: "Become more grateful",
    InterestType.HAPPINESS: "Become happier",
    InterestType.ANXIETY: "Reduce anxiety",
    InterestType.DEPRESSION: "Manage depression",
    InterestType.STRESS: "Manage stress",
    InterestType.PRODUCTIVITY: "Become more productive",
    InterestType.TIME_MANAGEMENT: "Improve time management",
    InterestType.MEDITATION: "Meditate more",
    InterestType.PHONE_USAGE: "Use phone/social media less",
    InterestType.OTHER: "Other",
}


class HealthSubcategory(str, Enum):
    DIET = "Diet"
    SLEEP = "Sleep"
    EXERCISE = "Exercise"
    LIGHT_DIET = "Light diet"
    OTHER = "Other"


class UserInterest(BaseSchema):
    id: UUID = Field(default_factory=uuid4)
    type: InterestType
    subcategory: Optional[str] = None
    custom_description: Optional[str] = None
    is_active: bool = True
    priority: int = Field(default=5, ge=1, le=10)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    baseline_responses: List[str] = []
    baseline_completed: bool = False

    current_level: int = Field(default=MIN_LEVEL, ge=MIN_LEVEL, le=MAX_LEVEL)
    last_progress_update: Optional[datetime] = None

    # Diet tracking
    diet_goals: List[str] = []
    meal_planning_frequency: Optional[str] = None
    nutrition_focus: List[str] = []
    dietary_restrictions: List[str] = []
    weekly_progress_scores: List[int] = []

    @property
    def health_subcategory(self) -> Optional[HealthSubcategory]:
        if self.type != InterestType.HEALTH or not self.subcategory:
            return None
        try:
            return HealthSubcategory(self.subcategory)
        except ValueError:
            return None

    @property
    def is_diet(self) -> bool:
        return self.health_subcategory == HealthSubcategory.DIET

    @property
    def display_name(self) -> str:
        if self.subcategory:
            return self.subcategory
        return self.type.label
