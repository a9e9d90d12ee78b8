from abc import ABC, abstractmethod
from typing import List, Literal, Optional

from pydantic import BaseModel


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatQuery(BaseModel):
    model: str
    messages: List[ChatMessage]
    max_tokens: int


class ChatChoice(BaseModel):
    content: str


class ChatResult(BaseModel):
    choices: List[ChatChoice] = []

    @property
    def first_text(self) -> Optional[str]:
        return self.choices[0].content if self.choices else None


class PromptBackendError(RuntimeError):
    """Base class for any failure talking to a text generation backend."""


class BackendConnectivityError(PromptBackendError):
    """The backend could not be reached."""


class BackendStatusError(PromptBackendError):
    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"API error {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class BackendDecodeError(PromptBackendError):
    """The backend answered but the payload could not be read."""


class TextGenerationBackend(ABC):
    """Request/response text completion capability used by the prompt engine."""

    @abstractmethod
    async def complete(self, query: ChatQuery) -> ChatResult:
        """Submit a chat query. Raises PromptBackendError subclasses on failure."""
