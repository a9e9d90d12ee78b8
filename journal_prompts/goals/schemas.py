from datetime import date, datetime, timezone
from typing import Optional
from uuid import UUID, uuid4
from pydantic import BaseModel, Field


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class Goal(BaseSchema):
    id: UUID = Field(default_factory=uuid4)
    text: str
    target_date: Optional[date] = None
    user_vision: Optional[str] = None
    current_prompt: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def has_vision(self) -> bool:
        return bool(self.user_vision and self.user_vision.strip())
