"""
Tests for the Gemini client: request envelope, response parsing, cleanup.

urllib.request.urlopen is replaced so no test touches the network.
"""

import io
import json
import socket
import urllib.error
import urllib.parse
import urllib.request

import pytest

from genie.llm import (
    APIError, EmptyResponseError, GeminiClient, LLMError, MissingAPIKeyError,
    build_request_body, clean_commit_message, get_client, parse_response,
)


def gemini_reply(text, tokens=None):
    data = {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}
    if tokens is not None:
        data["usageMetadata"] = {"totalTokenCount": tokens}
    return data


class FakeResponse(io.BytesIO):
    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


@pytest.fixture
def urlopen(monkeypatch):
    """Replace urlopen; set .reply (dict/bytes) or .error before calling."""
    class Recorder:
        reply = gemini_reply("feat: add x")
        error = None
        requests = []

        def __call__(self, req, timeout=None):
            self.requests.append((req, timeout))
            if self.error is not None:
                raise self.error
            body = self.reply if isinstance(self.reply, bytes) else json.dumps(self.reply).encode()
            return FakeResponse(body)

    recorder = Recorder()
    recorder.requests = []
    monkeypatch.setattr(urllib.request, "urlopen", recorder)
    return recorder


# ---------------------------------------------------------------------------
# Response parsing
# ---------------------------------------------------------------------------

class TestParseResponse:

    def test_first_candidate_first_part(self):
        data = {"candidates": [
            {"content": {"parts": [{"text": "first"}, {"text": "second"}]}},
            {"content": {"parts": [{"text": "other"}]}},
        ]}
        assert parse_response(data) == "first"

    def test_error_object_message(self):
        data = {"error": {"code": 400, "message": "API key not valid."}}
        with pytest.raises(APIError) as exc_info:
            parse_response(data)
        assert str(exc_info.value) == "API key not valid."
        assert exc_info.value.code == 400

    def test_error_wins_over_candidates(self):
        data = {"error": {"code": 429, "message": "Quota exceeded"}, **gemini_reply("feat: x")}
        with pytest.raises(APIError, match="Quota exceeded"):
            parse_response(data)

    @pytest.mark.parametrize("data", [
        {"candidates": []},
        {},
    ])
    def test_no_candidates(self, data):
        with pytest.raises(EmptyResponseError, match="No response"):
            parse_response(data)

    def test_candidate_without_parts(self):
        with pytest.raises(EmptyResponseError, match="Empty response"):
            parse_response({"candidates": [{"content": {"parts": []}}]})

    def test_empty_response_is_not_api_error(self):
        with pytest.raises(EmptyResponseError) as exc_info:
            parse_response({"candidates": []})
        assert not isinstance(exc_info.value, APIError)

    def test_bare_string_error(self):
        with pytest.raises(APIError) as exc_info:
            parse_response({"error": "quota exceeded"})
        assert str(exc_info.value) == "quota exceeded"
        assert exc_info.value.code is None

    @pytest.mark.parametrize("data", [
        {"candidates": ["oops"]},
        {"candidates": "oops"},
        {"candidates": [{"content": "x"}]},
        {"candidates": [{"content": {"parts": "x"}}]},
        {"candidates": [{"content": {"parts": ["x"]}}]},
        {"candidates": [{"content": {"parts": [{"text": 7}]}}]},
    ])
    def test_malformed_shapes(self, data):
        with pytest.raises(LLMError, match="Invalid response") as exc_info:
            parse_response(data)
        assert not isinstance(exc_info.value, (APIError, EmptyResponseError))


class TestCleanCommitMessage:

    @pytest.mark.parametrize("raw, expected", [
        ('"fix: correct bug"', "fix: correct bug"),
        ("'fix: correct bug'", "fix: correct bug"),
        ("  feat: add x  ", "feat: add x"),
        ('\n  "✨ feat(auth): add login"\n', "✨ feat(auth): add login"),
        ("chore: bump version", "chore: bump version"),
    ])
    def test_cleanup(self, raw, expected):
        assert clean_commit_message(raw) == expected

    def test_strips_only_one_layer(self):
        assert clean_commit_message('""fix: x""') == '"fix: x"'

    def test_inner_quotes_kept(self):
        assert clean_commit_message('fix: handle "null" input') == 'fix: handle "null" input'


# ---------------------------------------------------------------------------
# GeminiClient
# ---------------------------------------------------------------------------

class TestGeminiClient:

    def test_request_envelope(self):
        assert build_request_body("hi") == {"contents": [{"parts": [{"text": "hi"}]}]}

    def test_missing_key_raises_before_network(self, urlopen):
        with pytest.raises(MissingAPIKeyError, match="GOOGLE_AI_TOKEN"):
            get_client({})
        with pytest.raises(MissingAPIKeyError):
            get_client({"GOOGLE_AI_TOKEN": "   "})
        assert urlopen.requests == []

    def test_get_client_reads_key(self):
        client = get_client({"GOOGLE_AI_TOKEN": "secret"}, model="gemini-pro")
        assert client.api_key == "secret"
        assert client.model == "gemini-pro"

    def test_generate_posts_prompt_with_key_in_query(self, urlopen):
        client = GeminiClient(api_key="secret", model="gemini-1.5-flash-latest")
        client.generate("the prompt")

        assert len(urlopen.requests) == 1
        req, timeout = urlopen.requests[0]
        assert timeout == 30
        assert req.get_method() == "POST"
        assert json.loads(req.data) == {"contents": [{"parts": [{"text": "the prompt"}]}]}
        assert req.get_header("Content-type") == "application/json"

        url = urllib.parse.urlsplit(req.full_url)
        assert url.path.endswith("/models/gemini-1.5-flash-latest:generateContent")
        assert urllib.parse.parse_qs(url.query) == {"key": ["secret"]}
        assert not any("secret" in value for value in req.headers.values())

    def test_generate_cleans_message(self, urlopen):
        urlopen.reply = gemini_reply('  "🐛 fix(api): handle null response"  \n', tokens=321)
        response = GeminiClient(api_key="k").generate("p")

        assert response.content == "🐛 fix(api): handle null response"
        assert response.tokens_used == 321
        assert response.model == GeminiClient(api_key="k").model

    @pytest.mark.parametrize("text", ["", "   ", '  ""  ', "''", "\n\"\n"])
    def test_blank_message_is_empty_response(self, urlopen, text):
        urlopen.reply = gemini_reply(text)
        with pytest.raises(EmptyResponseError, match="Empty response from Gemini API"):
            GeminiClient(api_key="k").generate("p")

    def test_bare_string_error_body(self, urlopen):
        urlopen.reply = {"error": "quota exceeded"}
        with pytest.raises(APIError, match="quota exceeded"):
            GeminiClient(api_key="k").generate("p")

    def test_name_includes_model(self):
        assert GeminiClient(api_key="k", model="gemini-2.0-flash").name == "Gemini (gemini-2.0-flash)"

    def test_api_error_in_http_error_body(self, urlopen):
        body = json.dumps({"error": {"code": 400, "message": "API key not valid. Please pass a valid API key."}})
        urlopen.error = urllib.error.HTTPError(
            "https://example.invalid", 400, "Bad Request", {}, io.BytesIO(body.encode()))

        with pytest.raises(APIError) as exc_info:
            GeminiClient(api_key="bad").generate("p")
        assert str(exc_info.value) == "API key not valid. Please pass a valid API key."

    def test_http_error_without_json(self, urlopen):
        urlopen.error = urllib.error.HTTPError(
            "https://example.invalid", 502, "Bad Gateway", {}, io.BytesIO(b"<html>"))

        with pytest.raises(LLMError, match="502") as exc_info:
            GeminiClient(api_key="k").generate("p")
        assert not isinstance(exc_info.value, (APIError, EmptyResponseError))

    def test_timeout(self, urlopen):
        urlopen.error = urllib.error.URLError(socket.timeout("timed out"))
        with pytest.raises(LLMError, match="timed out after 30s"):
            GeminiClient(api_key="k").generate("p")

    def test_connection_refused(self, urlopen):
        urlopen.error = urllib.error.URLError(ConnectionRefusedError(111, "Connection refused"))
        with pytest.raises(LLMError, match="request failed"):
            GeminiClient(api_key="k").generate("p")

    def test_non_json_body(self, urlopen):
        urlopen.reply = b"not json"
        with pytest.raises(LLMError, match="Invalid response"):
            GeminiClient(api_key="k").generate("p")

    def test_empty_candidates(self, urlopen):
        urlopen.reply = {"candidates": []}
        with pytest.raises(EmptyResponseError):
            GeminiClient(api_key="k").generate("p")

    def test_no_retries(self, urlopen):
        urlopen.reply = {"candidates": []}
        with pytest.raises(EmptyResponseError):
            GeminiClient(api_key="k").generate("p")
        assert len(urlopen.requests) == 1
