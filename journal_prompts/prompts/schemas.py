from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from journal_prompts.goals.schemas import Goal
from journal_prompts.interests.schemas import UserInterest
from journal_prompts.journals.schemas import JournalSession


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class VisualizationPromptRequest(BaseSchema):
    goal: Goal
    time_of_day: Optional[Literal["morning", "evening"]] = None


class OfflinePromptRequest(BaseSchema):
    goal: Goal
    time_of_day: Optional[Literal["morning", "evening"]] = None


class BaselinePromptRequest(BaseSchema):
    interest: UserInterest


class ContextualPromptRequest(BaseSchema):
    interest: UserInterest
    previous_session: Optional[JournalSession] = None
    sessions: List[JournalSession] = []
    is_evening: bool = False


class PromptResponse(BaseSchema):
    prompt: str
    error_message: Optional[str] = None


class ProgressionRequest(BaseSchema):
    interest: UserInterest
    score: int = Field(ge=1, le=10)


class ProgressionResponse(BaseSchema):
    advanced: bool
    level_description: str
    level_tips: List[str]
    interest: UserInterest
