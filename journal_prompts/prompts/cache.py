import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional

from sqlalchemy.orm import Session

from journal_prompts.prompts.db import (
    delete_all_cache_entries,
    get_cache_entry,
    upsert_cache_entry,
)

logger = logging.getLogger(__name__)


class KeyValueCache(ABC):
    """String-keyed store for generated prompt text."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...


class InMemoryPromptCache(KeyValueCache):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._entries: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._entries.get(key)

    def set(self, key: str, value: str) -> None:
        self._entries[key] = value

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class SqlPromptCache(KeyValueCache):
    """Prompt cache persisted in the `prompt_cache` table so it survives restarts."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        with self.session_factory() as db:
            entry = get_cache_entry(db, key)
            return entry.prompt_text if entry else None

    def set(self, key: str, value: str) -> None:
        with self.session_factory() as db:
            upsert_cache_entry(db, key, value)

    def clear(self) -> None:
        with self.session_factory() as db:
            deleted = delete_all_cache_entries(db)
        logger.info(f"Cleared {deleted} cached prompts")
