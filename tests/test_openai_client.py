"""Tests for the chat-completion adapter, against a mocked transport."""

import httpx
import pytest

from research_assistant.config import settings
from research_assistant.errors import ResearchAPIError
from research_assistant.openai_client import ChatCompletionClient
from research_assistant.prompts import TITLE_SYSTEM_PROMPT
from research_assistant.research_types import RESEARCH_TYPES


@pytest.mark.asyncio
async def test_generate_title_request_and_cleanup(chat_client, fake_api):
    title = await chat_client.generate_title("how to evaluate LLMs", "sk-test")

    assert title == "Evaluating Large Language Models"
    body = fake_api.requests[0]
    assert body["model"] == settings.basic_model
    assert body["max_tokens"] == 100
    assert body["temperature"] == 0.7
    assert body["messages"][0] == {"role": "system", "content": TITLE_SYSTEM_PROMPT}
    assert body["messages"][1]["content"] == "Generate a title for a research paper about: how to evaluate LLMs"
    assert fake_api.headers[0]["authorization"] == "Bearer sk-test"


@pytest.mark.asyncio
@pytest.mark.parametrize("mode,model_setting", [("basic", "basic_model"), ("advanced", "advanced_model")])
async def test_section_research_uses_model_tier(chat_client, fake_api, mode, model_setting):
    section = RESEARCH_TYPES["general"].sections[0]
    result = await chat_client.conduct_section_research(
        "A Title", section, "sk-test", "academic", mode, "general"
    )

    assert fake_api.requests[0]["model"] == getattr(settings, model_setting)
    assert fake_api.requests[0]["max_tokens"] == 2000
    assert "specializing in General Research" in fake_api.requests[0]["messages"][0]["content"]
    assert result.title == section.title
    assert result.content.endswith("(Lee, 2021).")
    assert result.citations == [
        "Smith, J. (2020). Language models. Journal of AI, 1(2), 3-4.",
        "Lee, K. (2021). Evaluating models. AI Review, 5, 10-20.",
    ]
    assert result.id


@pytest.mark.asyncio
async def test_provider_error_message_is_surfaced(chat_client, fake_api):
    fake_api.fail_on_call = 1
    fake_api.error_status = 401
    fake_api.error_body = {"error": {"message": "Incorrect API key provided"}}

    with pytest.raises(ResearchAPIError) as excinfo:
        await chat_client.generate_title("query", "sk-bad")
    assert excinfo.value.message == "Incorrect API key provided"
    assert excinfo.value.status_code == 401


@pytest.mark.asyncio
async def test_fallback_messages_without_provider_message(chat_client, fake_api):
    fake_api.fail_on_call = 1
    fake_api.error_status = 500
    fake_api.error_body = {}
    with pytest.raises(ResearchAPIError, match="Failed to generate title"):
        await chat_client.generate_title("query", "sk-test")

    fake_api.fail_on_call = 2
    section = RESEARCH_TYPES["general"].sections[0]
    with pytest.raises(ResearchAPIError, match="API request failed"):
        await chat_client.conduct_section_research("T", section, "sk-test", "web", "basic", "general")


@pytest.mark.asyncio
async def test_transport_error_is_wrapped():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = ChatCompletionClient(transport=httpx.MockTransport(handler))
    with pytest.raises(ResearchAPIError, match="Failed to generate title"):
        await client.generate_title("query", "sk-test")


@pytest.mark.asyncio
async def test_malformed_success_body():
    client = ChatCompletionClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"choices": []}))
    )
    with pytest.raises(ResearchAPIError, match="Unexpected API response"):
        await client.generate_title("query", "sk-test")
