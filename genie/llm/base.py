"""LLM Base Classes and Shared Code"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

QUOTE_CHARS = "\"'"


def clean_commit_message(text: str) -> str:
    """Trim whitespace and strip one layer of wrapping quotes.

    Models sometimes answer with "feat: add x" instead of feat: add x.
    """
    message = text.strip()
    if message[:1] in QUOTE_CHARS:
        message = message[1:]
    if message[-1:] in QUOTE_CHARS:
        message = message[:-1]
    return message.strip()


@dataclass
class LLMResponse:
    """Structured response from the completion endpoint."""
    content: str
    model: str = ""
    tokens_used: int = 0


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class MissingAPIKeyError(LLMError):
    """Raised before any request when no API key is configured."""
    pass


class APIError(LLMError):
    """The provider answered with an explicit error object."""

    def __init__(self, message: str, code: int | None = None):
        super().__init__(message)
        self.message = message
        self.code = code


class EmptyResponseError(LLMError):
    """The provider answered successfully but without any text."""
    pass


class LLMClient(ABC):
    """Abstract base for LLM clients."""

    @abstractmethod
    def generate(self, prompt: str) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
