from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4
from pydantic import BaseModel, Field


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class JournalSessionType(str, Enum):
    BASELINE = "baseline"
    DAILY_ALIGNMENT = "daily_alignment"
    DAILY_REVIEW = "daily_review"
    WEEKLY_REVIEW = "weekly_review"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")


class JournalSession(BaseSchema):
    id: UUID = Field(default_factory=uuid4)
    interest_id: Optional[UUID] = None
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    type: JournalSessionType
    prompt: str
    response: str = ""
    progress_score: Optional[int] = Field(default=None, ge=1, le=10)
    ai_generated: bool = False
    completed: bool = False
