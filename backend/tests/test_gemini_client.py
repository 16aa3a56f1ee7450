"""Tests for refigma.generation.gemini_client and response parsing.

Covers:
- Request shape: endpoint, key parameter, contents / generationConfig body
- Candidate text extraction (multi-part, missing pieces)
- Error mapping: error.message, reason phrase fallback, timeouts, empty text
- parse_content_payload: greedy brace extraction, parse failures, dropped sections
"""

from __future__ import annotations

import json

import httpx
import pytest

from refigma import settings
from refigma.generation import (
    ContentFormatError,
    ProviderError,
    build_prompt,
    extract_candidate_text,
    extract_json_object,
    parse_content_payload,
)
from refigma.generation.parsing import NO_JSON_MESSAGE, PARSE_FAILED_MESSAGE
from tests.conftest import gemini_body


class TestRequest:

    @pytest.mark.asyncio
    async def test_posts_generate_content(self, make_gemini_client, gemini_requests):
        client = make_gemini_client(json=gemini_body('{"hero": {}}'))

        text = await client.generate_content("hello")

        assert text == '{"hero": {}}'
        request = gemini_requests[0]
        assert request.method == "POST"
        assert request.url.path == "/v1beta/models/gemini-test:generateContent"
        assert request.url.params["key"] == "test-key"
        body = json.loads(request.content)
        assert body["contents"] == [{"role": "user", "parts": [{"text": "hello"}]}]
        assert body["generationConfig"] == {
            "temperature": settings.GEMINI_TEMPERATURE,
            "maxOutputTokens": settings.GEMINI_MAX_OUTPUT_TOKENS,
        }
        await client.close()

    def test_configured_flag(self, make_gemini_client):
        assert make_gemini_client().configured
        assert not make_gemini_client(api_key="").configured

    def test_prompt_embeds_user_input_and_schema(self):
        prompt = build_prompt("Coffee shop in Jakarta")
        assert '"Coffee shop in Jakarta"' in prompt
        assert '"primaryCta": string' in prompt
        assert "ONLY in JSON" in prompt


class TestCandidateText:

    def test_parts_joined_with_newline_and_stripped(self):
        assert extract_candidate_text(gemini_body("  {", '"a": 1}  ')) == '{\n"a": 1}'

    def test_only_first_candidate_used(self):
        data = {"candidates": [
            {"content": {"parts": [{"text": "first"}]}},
            {"content": {"parts": [{"text": "second"}]}},
        ]}
        assert extract_candidate_text(data) == "first"

    @pytest.mark.parametrize("data", [
        {},
        {"candidates": []},
        {"candidates": [{}]},
        {"candidates": [{"content": {"parts": "nope"}}]},
        {"candidates": [{"content": {"parts": [{"inlineData": {}}]}}]},
    ])
    def test_missing_pieces_give_empty_text(self, data):
        assert extract_candidate_text(data) == ""


class TestErrors:

    @pytest.mark.asyncio
    async def test_error_message_from_body(self, make_gemini_client):
        client = make_gemini_client(status_code=429, json={"error": {"message": "quota exceeded"}})

        with pytest.raises(ProviderError) as exc_info:
            await client.generate_content("x")

        assert str(exc_info.value) == "quota exceeded"
        assert exc_info.value.status_code == 429

    @pytest.mark.asyncio
    async def test_reason_phrase_when_body_not_json(self, make_gemini_client):
        client = make_gemini_client(status_code=503, text="<html>down</html>")

        with pytest.raises(ProviderError, match="Gemini API error: Service Unavailable"):
            await client.generate_content("x")

    @pytest.mark.asyncio
    async def test_reason_phrase_when_message_missing(self, make_gemini_client):
        client = make_gemini_client(status_code=400, json={"error": {"code": 400}})

        with pytest.raises(ProviderError, match="Gemini API error: Bad Request"):
            await client.generate_content("x")

    @pytest.mark.asyncio
    async def test_timeout(self, make_gemini_client):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        client = make_gemini_client(handler=handler)
        with pytest.raises(ProviderError, match="timeout"):
            await client.generate_content("x")

    @pytest.mark.asyncio
    async def test_connection_error(self, make_gemini_client):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        client = make_gemini_client(handler=handler)
        with pytest.raises(ProviderError, match="connection error"):
            await client.generate_content("x")

    @pytest.mark.asyncio
    async def test_empty_candidate_text(self, make_gemini_client):
        client = make_gemini_client(json=gemini_body("   "))
        with pytest.raises(ContentFormatError, match="no content"):
            await client.generate_content("x")

    @pytest.mark.asyncio
    async def test_success_body_not_json(self, make_gemini_client):
        client = make_gemini_client(text="not json")
        with pytest.raises(ContentFormatError):
            await client.generate_content("x")


class TestParsing:

    def test_extracts_fenced_json(self):
        text = 'Sure! ```json\n{"hero": {"title": "Hi"}}\n``` Enjoy.'
        assert parse_content_payload(text).hero.title == "Hi"

    def test_greedy_leftmost_to_rightmost(self):
        text = 'a {"x": 1} b {"y": 2} c'
        assert extract_json_object(text) == '{"x": 1} b {"y": 2}'

    def test_greedy_span_that_is_not_json_fails(self):
        with pytest.raises(ContentFormatError) as exc_info:
            parse_content_payload('a {"x": 1} b {"y": 2} c')
        assert str(exc_info.value) == PARSE_FAILED_MESSAGE

    def test_spans_newlines(self):
        assert extract_json_object('{\n  "cta": {}\n}') == '{\n  "cta": {}\n}'

    @pytest.mark.parametrize("text", ["no braces here", "only { open", "} reversed {"])
    def test_no_json_region(self, text):
        with pytest.raises(ContentFormatError) as exc_info:
            parse_content_payload(text)
        assert str(exc_info.value) == NO_JSON_MESSAGE

    def test_wrong_shape_section_is_dropped(self):
        payload = parse_content_payload('{"hero": "not an object", "cta": {"title": "Go"}}')
        assert payload.hero is None
        assert payload.cta.title == "Go"
