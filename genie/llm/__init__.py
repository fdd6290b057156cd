"""LLM Client Package"""

from genie.llm.base import (
    LLMClient, LLMResponse, LLMError, MissingAPIKeyError,
    APIError, EmptyResponseError, clean_commit_message,
)
from genie.llm.gemini import GeminiClient, API_KEY_ENV, build_request_body, parse_response


def get_client(environ, model: str | None = None, api_url: str | None = None) -> LLMClient:
    """Build the Gemini client from the API key in ``environ``.

    Raises MissingAPIKeyError without touching the network when the key is absent.
    """
    return GeminiClient(api_key=environ.get(API_KEY_ENV), model=model, api_url=api_url)


__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMError",
    "MissingAPIKeyError",
    "APIError",
    "EmptyResponseError",
    "GeminiClient",
    "API_KEY_ENV",
    "get_client",
    "build_request_body",
    "parse_response",
    "clean_commit_message",
]
