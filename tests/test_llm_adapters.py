"""Tests for the generative backend adapters, with fake transports and clients."""

import io
import json
from types import SimpleNamespace

import httpx
import pytest
from botocore.exceptions import ClientError
from openai import OpenAIError

from bookwise.adapters.llm.bedrock import BedrockLLMAdapter
from bookwise.adapters.llm.mock import MockLLMAdapter
from bookwise.adapters.llm.ollama import OllamaLLMAdapter
from bookwise.adapters.llm.openai_adapter import OpenAILLMAdapter
from bookwise.adapters.recommender.keyword import KeywordRecommender
from bookwise.domain import catalog
from bookwise.domain.errors import BackendUnavailableError, MalformedModelOutputError
from bookwise.services.recommendation import RecommendationService

ANSWER = '[{"id": "1", "bookId": "2", "reason": "Space.", "confidence": 0.9}]'


class FakeBedrockClient:
    def __init__(self, body: bytes | None = None, error: Exception | None = None):
        self.body = body
        self.error = error
        self.requests: list[dict] = []

    def invoke_model(self, **kwargs):
        self.requests.append(kwargs)
        if self.error is not None:
            raise self.error
        return {"body": io.BytesIO(self.body)}


def _bedrock(client: FakeBedrockClient) -> BedrockLLMAdapter:
    return BedrockLLMAdapter(
        model_id="anthropic.claude-3-haiku-20240307-v1:0",
        region="us-east-1",
        client=client,
    )


# ── Bedrock ────────────────────────────────────────


async def test_bedrock_sends_anthropic_messages_body():
    client = FakeBedrockClient(
        body=json.dumps({"content": [{"type": "text", "text": ANSWER}]}).encode()
    )
    answer = await _bedrock(client).recommend_books(catalog.BOOKS, "space")

    assert answer == ANSWER
    request = client.requests[0]
    assert request["modelId"] == "anthropic.claude-3-haiku-20240307-v1:0"
    body = json.loads(request["body"])
    assert body["anthropic_version"] == "bedrock-2023-05-31"
    assert body["max_tokens"] == 1500
    assert body["messages"][0]["role"] == "user"
    assert 'User Request: "space"' in body["messages"][0]["content"]
    assert body["system"]


async def test_bedrock_client_error_is_unavailable():
    error = ClientError(
        {"Error": {"Code": "ThrottlingException", "Message": "Rate exceeded"}},
        "InvokeModel",
    )
    with pytest.raises(BackendUnavailableError) as info:
        await _bedrock(FakeBedrockClient(error=error)).recommend_books(catalog.BOOKS, "x")
    assert info.value.provider == "bedrock"


async def test_bedrock_undecodable_body_is_unavailable():
    with pytest.raises(BackendUnavailableError):
        await _bedrock(FakeBedrockClient(body=b"<html>")).recommend_books(catalog.BOOKS, "x")


@pytest.mark.parametrize("payload", [{}, {"content": []}, {"content": [{"type": "image"}]}])
async def test_bedrock_missing_text_block_is_malformed(payload):
    client = FakeBedrockClient(body=json.dumps(payload).encode())
    with pytest.raises(MalformedModelOutputError):
        await _bedrock(client).recommend_books(catalog.BOOKS, "x")


# ── Ollama ─────────────────────────────────────────


async def test_ollama_posts_chat_request():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"message": {"role": "assistant", "content": ANSWER}})

    adapter = OllamaLLMAdapter(
        base_url="http://ollama:11434/",
        model="llama3.1",
        transport=httpx.MockTransport(handler),
    )
    answer = await adapter.recommend_books(catalog.BOOKS, "space")

    assert answer == ANSWER
    assert str(seen[0].url) == "http://ollama:11434/api/chat"
    payload = json.loads(seen[0].content)
    assert payload["model"] == "llama3.1"
    assert payload["stream"] is False
    assert "format" not in payload


async def test_ollama_http_error_is_unavailable():
    adapter = OllamaLLMAdapter(
        base_url="http://ollama:11434",
        model="llama3.1",
        transport=httpx.MockTransport(lambda request: httpx.Response(503)),
    )
    with pytest.raises(BackendUnavailableError) as info:
        await adapter.recommend_books(catalog.BOOKS, "space")
    assert info.value.provider == "ollama"


async def test_ollama_missing_message_is_malformed():
    adapter = OllamaLLMAdapter(
        base_url="http://ollama:11434",
        model="llama3.1",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"done": True})),
    )
    with pytest.raises(MalformedModelOutputError):
        await adapter.recommend_books(catalog.BOOKS, "space")


# ── OpenAI ─────────────────────────────────────────


def _openai_client(create) -> SimpleNamespace:
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


async def test_openai_returns_message_content():
    requests: list[dict] = []

    async def create(**kwargs):
        requests.append(kwargs)
        message = SimpleNamespace(content=ANSWER)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    adapter = OpenAILLMAdapter(api_key=None, model="gpt-4o-mini", client=_openai_client(create))

    assert await adapter.recommend_books(catalog.BOOKS, "space") == ANSWER
    assert requests[0]["model"] == "gpt-4o-mini"
    assert [m["role"] for m in requests[0]["messages"]] == ["system", "user"]


async def test_openai_error_is_unavailable():
    async def create(**kwargs):
        raise OpenAIError("quota exceeded")

    adapter = OpenAILLMAdapter(api_key=None, model="gpt-4o-mini", client=_openai_client(create))
    with pytest.raises(BackendUnavailableError):
        await adapter.recommend_books(catalog.BOOKS, "space")


async def test_openai_empty_content_is_malformed():
    async def create(**kwargs):
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=None))])

    adapter = OpenAILLMAdapter(api_key=None, model="gpt-4o-mini", client=_openai_client(create))
    with pytest.raises(MalformedModelOutputError):
        await adapter.recommend_books(catalog.BOOKS, "space")


# ── Mock ───────────────────────────────────────────


async def test_mock_prefers_books_of_named_genre():
    answer = await MockLLMAdapter().recommend_books(catalog.BOOKS, "a gripping mystery")
    items = json.loads(answer[answer.index("[") :])

    assert len(items) == 3
    assert all(catalog.get_book(i["bookId"]).genre == "Mystery" for i in items)
    assert [i["confidence"] for i in items] == [0.95, 0.90, 0.85]


async def test_mock_answer_passes_validation():
    service = RecommendationService(llm=MockLLMAdapter(), fallback=KeywordRecommender())
    outcome = await service.recommend("xyz123")

    assert outcome.source is None
    assert [r.book_id for r in outcome.recommendations] == ["1", "2", "3"]
