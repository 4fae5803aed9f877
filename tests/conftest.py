"""Shared fixtures: a fake chat-completion API and clean in-memory stores."""

import json
from typing import List

import httpx
import pytest

from research_assistant.agent import history_store, research_agent, task_store
from research_assistant.config import settings
from research_assistant.openai_client import ChatCompletionClient


SECTION_ANSWER = """Large language models are widely studied (Smith, 2020). Their evaluation is an open problem (Lee, 2021).

REFERENCES:
1. Smith, J. (2020). Language models. Journal of AI, 1(2), 3-4.
2. Lee, K. (2021). Evaluating models. AI Review, 5, 10-20.
3. [Third reference]
"""


def completion(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class FakeChatAPI:
    """Records requests and answers like the chat-completion endpoint."""

    def __init__(self) -> None:
        self.requests: List[dict] = []
        self.headers: List[httpx.Headers] = []
        self.fail_on_call: int = 0
        self.error_status: int = 429
        self.error_body: dict = {"error": {"message": "Rate limit reached for requests"}}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        self.headers.append(request.headers)
        if self.fail_on_call and len(self.requests) == self.fail_on_call:
            return httpx.Response(self.error_status, json=self.error_body)
        if body["max_tokens"] == settings.title_max_tokens:
            return httpx.Response(200, json=completion('  "Evaluating Large Language Models"\n'))
        return httpx.Response(200, json=completion(SECTION_ANSWER))


@pytest.fixture
def fake_api() -> FakeChatAPI:
    return FakeChatAPI()


@pytest.fixture
def chat_client(fake_api: FakeChatAPI) -> ChatCompletionClient:
    return ChatCompletionClient(transport=httpx.MockTransport(fake_api))


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, chat_client: ChatCompletionClient):
    """Route the shared agent through the fake API and start from empty stores."""
    monkeypatch.setattr(settings, "openai_api_key", None)
    monkeypatch.setattr(research_agent, "client", chat_client)
    task_store.tasks.clear()
    history_store.clear()
    yield
    task_store.tasks.clear()
    history_store.clear()
