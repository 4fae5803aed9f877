"""
Adapter for the OpenAI-compatible chat-completion API.

Every request is a single ``POST /chat/completions`` with a bearer token,
a system message and a user message. Failures are re-raised as
``ResearchAPIError`` carrying the provider's own error message so the UI
can show it verbatim. There are no retries.
"""

import logging
from typing import Any, Optional

import httpx

from .citations import parse_section_response
from .config import Settings, settings as default_settings
from .errors import ResearchAPIError
from .models import SectionResult
from .prompts import (
    TITLE_SYSTEM_PROMPT,
    construct_prompt,
    section_system_prompt,
    title_user_prompt,
)
from .research_types import ResearchSectionTemplate, get_research_type_config


logger = logging.getLogger(__name__)


def _provider_message(response: httpx.Response) -> Optional[str]:
    """Pull ``error.message`` out of an error body, if there is one."""
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        return error.get("message") or None
    return None


class ChatCompletionClient:
    """
    Thin async client for the chat-completion endpoint.

    ``transport`` lets callers swap the network layer (tests use
    ``httpx.MockTransport``).
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or default_settings
        self._transport = transport

    def model_for_mode(self, research_mode: str) -> str:
        return self.config.advanced_model if research_mode == "advanced" else self.config.basic_model

    async def complete(
        self,
        api_key: str,
        model: str,
        system: str,
        user: str,
        max_tokens: int,
        fallback_error: str = "API request failed",
    ) -> str:
        """Send one chat completion request and return the message content."""
        body = {
            "model": model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "temperature": self.config.temperature,
            "max_tokens": max_tokens,
        }
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

        logger.debug("POST %s model=%s max_tokens=%d", self.config.chat_completions_url, model, max_tokens)
        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self.config.request_timeout
            ) as client:
                resp = await client.post(self.config.chat_completions_url, json=body, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("Chat completion request failed: %s", exc)
            raise ResearchAPIError(fallback_error) from exc

        if resp.is_error:
            message = _provider_message(resp) or fallback_error
            logger.warning("Chat completion returned %d: %s", resp.status_code, message)
            raise ResearchAPIError(message, status_code=resp.status_code)

        return self._message_content(resp)

    @staticmethod
    def _message_content(resp: httpx.Response) -> str:
        try:
            data: Any = resp.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise ResearchAPIError("Unexpected API response", status_code=resp.status_code) from exc
        if not isinstance(content, str):
            raise ResearchAPIError("Unexpected API response", status_code=resp.status_code)
        return content

    async def generate_title(self, query: str, api_key: str) -> str:
        """Ask the basic model for a concise academic title for ``query``."""
        content = await self.complete(
            api_key,
            self.config.basic_model,
            TITLE_SYSTEM_PROMPT,
            title_user_prompt(query),
            max_tokens=self.config.title_max_tokens,
            fallback_error="Failed to generate title",
        )
        return content.strip().strip('"').strip()

    async def conduct_section_research(
        self,
        title: str,
        section: ResearchSectionTemplate,
        api_key: str,
        citation_style: str,
        research_mode: str,
        research_type: str,
    ) -> SectionResult:
        """Research one section and split the answer into content and citations."""
        config = get_research_type_config(research_type, research_mode)
        content = await self.complete(
            api_key,
            self.model_for_mode(research_mode),
            section_system_prompt(config.title, citation_style),
            construct_prompt(title, section, citation_style),
            max_tokens=self.config.section_max_tokens,
        )
        body, citations = parse_section_response(content)
        return SectionResult(title=section.title, content=body, citations=citations)
