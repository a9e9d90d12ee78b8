from typing import Optional

from sqlalchemy.orm import Session
from journal_prompts.prompts.models import PromptCacheEntry


def get_cache_entry(db: Session, cache_key: str) -> Optional[PromptCacheEntry]:
    """
    Retrieves a cached prompt by key.

    Args:
        db (Session): SQLAlchemy session.
        cache_key (str): Key the prompt was stored under.

    Returns:
        Optional[PromptCacheEntry]: The entry if present, else None.
    """
    return db.query(PromptCacheEntry).filter(PromptCacheEntry.cache_key == cache_key).first()


def upsert_cache_entry(db: Session, cache_key: str, prompt_text: str) -> PromptCacheEntry:
    """
    Inserts or replaces the prompt stored under a key.
    """
    existing = get_cache_entry(db, cache_key)
    if existing:
        existing.prompt_text = prompt_text
    else:
        existing = PromptCacheEntry(cache_key=cache_key, prompt_text=prompt_text)
        db.add(existing)

    db.commit()
    db.refresh(existing)
    return existing


def delete_all_cache_entries(db: Session) -> int:
    """
    Deletes every cached prompt.

    ⚠️ Irreversible operation.

    Returns:
        int: Number of deleted rows.
    """
    deleted = db.query(PromptCacheEntry).delete(synchronize_session=False)
    db.commit()
    return deleted
