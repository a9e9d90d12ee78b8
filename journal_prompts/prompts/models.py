from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime
from journal_prompts.core.database import Base


class PromptCacheEntry(Base):
    __tablename__ = "prompt_cache"

    cache_key = Column(String, primary_key=True)
    prompt_text = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
