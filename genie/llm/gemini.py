"""Google Gemini LLM Client"""

import json
import http.client
import socket
import urllib.error
import urllib.parse
import urllib.request

from genie.config import DEFAULT_API_URL, DEFAULT_MODEL
from genie.llm.base import (
    LLMClient, LLMResponse, LLMError, MissingAPIKeyError,
    APIError, EmptyResponseError, clean_commit_message,
)

API_KEY_ENV = "GOOGLE_AI_TOKEN"
API_KEY_URL = "https://aistudio.google.com/apikey"


def build_request_body(prompt: str) -> dict:
    """Wrap the prompt in the generateContent request envelope."""
    return {"contents": [{"parts": [{"text": prompt}]}]}


def parse_response(data: dict) -> str:
    """Extract the first candidate's first text part.

    An error object wins over any candidates that came with it.
    """
    error = data.get("error")
    if error:
        if not isinstance(error, dict):
            # Some gateways send a bare string instead of {code, message}
            raise APIError(str(error))
        raise APIError(error.get("message", "Unknown error"), error.get("code"))

    candidates = data.get("candidates") or []
    if not candidates:
        raise EmptyResponseError("No response from Gemini API")

    candidate = candidates[0] if isinstance(candidates, list) else None
    if not isinstance(candidate, dict):
        raise LLMError("Invalid response from Gemini API: malformed candidate")
    content = candidate.get("content") or {}
    if not isinstance(content, dict):
        raise LLMError("Invalid response from Gemini API: malformed content")

    parts = content.get("parts") or []
    if not parts:
        raise EmptyResponseError("Empty response from Gemini API")
    if not isinstance(parts, list) or not isinstance(parts[0], dict):
        raise LLMError("Invalid response from Gemini API: malformed parts")

    text = parts[0].get("text", "")
    if not isinstance(text, str):
        raise LLMError("Invalid response from Gemini API: text is not a string")
    return text


class GeminiClient(LLMClient):
    """Gemini generateContent client. One request per generate(), no retries."""

    DEFAULT_TIMEOUT = 30

    def __init__(self, api_key: str | None, model: str | None = None,
                 api_url: str | None = None, timeout: int | None = None):
        if not api_key or not api_key.strip():
            raise MissingAPIKeyError(
                f"{API_KEY_ENV} environment variable not set\n"
                f"   Get your API key from: {API_KEY_URL}\n"
                f"   Then run: export {API_KEY_ENV}=your_api_key_here"
            )
        self.api_key = api_key.strip()
        self.model = model or DEFAULT_MODEL
        self.api_url = (api_url or DEFAULT_API_URL).rstrip('/')
        self.timeout = timeout or self.DEFAULT_TIMEOUT

    @property
    def name(self) -> str:
        return f"Gemini ({self.model})"

    @property
    def endpoint(self) -> str:
        """Request URL; the key travels as a query parameter, not a header."""
        query = urllib.parse.urlencode({"key": self.api_key})
        return f"{self.api_url}/models/{self.model}:generateContent?{query}"

    def _call_api(self, prompt: str) -> dict:
        """Make a single API call to Gemini."""
        data = json.dumps(build_request_body(prompt)).encode('utf-8')
        req = urllib.request.Request(
            self.endpoint,
            data=data,
            headers={"Content-Type": "application/json"},
            method="POST",
        )

        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                body = response.read()
        except urllib.error.HTTPError as e:
            # Gemini reports failures as a JSON error object on 4xx/5xx
            try:
                payload = json.loads(e.read().decode('utf-8'))
            except (json.JSONDecodeError, UnicodeDecodeError):
                payload = None
            if isinstance(payload, dict) and payload.get("error"):
                return payload
            raise LLMError(f"Gemini error ({e.code}): {e.reason}")

        try:
            return json.loads(body.decode('utf-8'))
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise LLMError("Invalid response from Gemini API: body is not JSON")

    def generate(self, prompt: str) -> LLMResponse:
        """Send the prompt and return the cleaned commit message."""
        try:
            result = self._call_api(prompt)
        except urllib.error.URLError as e:
            if isinstance(e.reason, socket.timeout):
                raise LLMError(f"Request timed out after {self.timeout}s")
            raise LLMError(f"Gemini request failed: {e.reason}")
        except socket.timeout:
            raise LLMError(f"Request timed out after {self.timeout}s")
        except http.client.HTTPException as e:
            raise LLMError(f"Incomplete response from Gemini: {e}")
        except OSError as e:
            raise LLMError(f"Connection to Gemini lost: {e}")

        if not isinstance(result, dict):
            raise LLMError("Invalid response from Gemini API: expected a JSON object")

        content = clean_commit_message(parse_response(result))
        if not content:
            raise EmptyResponseError("Empty response from Gemini API")
        usage = result.get("usageMetadata") or {}
        if not isinstance(usage, dict):
            usage = {}

        return LLMResponse(
            content=content,
            model=self.model,
            tokens_used=usage.get("totalTokenCount", 0),
        )
