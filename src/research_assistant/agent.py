"""
Research agent that drives the section-by-section workflow.

The agent:
- Suggests a title for a user query.
- Expands an accepted title into the sections of the chosen research
  type and mode.
- Researches the sections one after another, publishing each result on
  the task status as soon as it arrives.
- Stops at the first error and records the provider's message.
- Stores completed research in an in-memory history.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .config import settings
from .errors import MissingAPIKeyError, ResearchError
from .models import ResearchRecord, ResearchRequest, ResearchStatus, SectionResult
from .openai_client import ChatCompletionClient
from .research_types import get_research_type_config


logger = logging.getLogger(__name__)


@dataclass
class InMemoryTaskStore:
    """Simple in-memory store for task status. Not for production use."""

    tasks: Dict[str, ResearchStatus] = field(default_factory=dict)

    def create(self, task_id: str, **kwargs) -> ResearchStatus:
        status = ResearchStatus(task_id=task_id, status="pending", **kwargs)
        self.tasks[task_id] = status
        return status

    def get(self, task_id: str) -> Optional[ResearchStatus]:
        return self.tasks.get(task_id)

    def update(self, task_id: str, **kwargs) -> ResearchStatus:
        status = self.tasks[task_id]
        for key, value in kwargs.items():
            setattr(status, key, value)
        self.tasks[task_id] = status
        return status


@dataclass
class HistoryStore:
    """Completed research, newest first."""

    records: List[ResearchRecord] = field(default_factory=list)

    def add(self, record: ResearchRecord) -> ResearchRecord:
        self.records.insert(0, record)
        return record

    def all_records(self) -> List[ResearchRecord]:
        return list(self.records)

    def get(self, record_id: str) -> Optional[ResearchRecord]:
        for record in self.records:
            if record.id == record_id:
                return record
        return None

    def clear(self) -> None:
        self.records.clear()


task_store = InMemoryTaskStore()
history_store = HistoryStore()


def resolve_api_key(api_key: Optional[str]) -> str:
    """Prefer the caller's key, fall back to the server's configured key."""
    key = (api_key or "").strip() or (settings.openai_api_key or "")
    if not key:
        raise MissingAPIKeyError()
    return key


class ResearchAgent:
    """
    Orchestrates one research run against the chat-completion API.

    All model calls go through ``ChatCompletionClient``; requests are
    issued strictly one after another.
    """

    def __init__(
        self,
        client: Optional[ChatCompletionClient] = None,
        tasks: Optional[InMemoryTaskStore] = None,
        history: Optional[HistoryStore] = None,
    ) -> None:
        self.client = client or ChatCompletionClient()
        self.tasks = tasks if tasks is not None else task_store
        self.history = history if history is not None else history_store

    def _log(self, status: ResearchStatus, message: str) -> None:
        logger.info("[%s] %s", status.task_id, message)
        status.progress_log.append(message)
        self.tasks.tasks[status.task_id] = status

    async def suggest_title(self, query: str, api_key: Optional[str] = None) -> str:
        key = resolve_api_key(api_key)
        title = await self.client.generate_title(query.strip(), key)
        logger.info("Suggested title %r for query %r", title, query)
        return title

    def create_task(self, task_id: str, payload: ResearchRequest) -> ResearchStatus:
        """Register a pending task; raises before any work if the request is unusable."""
        resolve_api_key(payload.api_key)
        config = get_research_type_config(payload.research_type, payload.research_mode)
        return self.tasks.create(
            task_id,
            query=payload.query,
            title=payload.title,
            total_sections=len(config.sections),
        )

    async def run_task(self, task_id: str, payload: ResearchRequest) -> None:
        status = self.tasks.get(task_id)
        if status is None:
            status = self.create_task(task_id, payload)
        status.status = "running"
        self.tasks.tasks[task_id] = status

        try:
            api_key = resolve_api_key(payload.api_key)
            config = get_research_type_config(payload.research_type, payload.research_mode)
            model = self.client.model_for_mode(payload.research_mode)
            self._log(
                status,
                f"Researching {len(config.sections)} sections of {config.title!r} with {model}.",
            )

            results: List[SectionResult] = []
            for idx, section in enumerate(config.sections, start=1):
                self._log(status, f"[{idx}/{len(config.sections)}] Researching {section.title}")
                result = await self.client.conduct_section_research(
                    payload.title,
                    section,
                    api_key,
                    payload.citation_style,
                    payload.research_mode,
                    payload.research_type,
                )
                results.append(result)
                status.sections = list(results)
                self._log(
                    status,
                    f"[{idx}/{len(config.sections)}] Received {len(result.citations)} citations.",
                )

            record = self.history.add(
                ResearchRecord(
                    query=payload.query,
                    title=payload.title,
                    research_type=payload.research_type,
                    research_mode=payload.research_mode,
                    citation_style=payload.citation_style,
                    sections=results,
                )
            )
            status.record_id = record.id
            status.status = "completed"
            self._log(status, "Research completed.")
        except ResearchError as exc:
            logger.warning("[%s] Research failed: %s", task_id, exc.message)
            self.tasks.update(task_id, status="error", error_message=exc.message)
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("[%s] Unexpected error during research", task_id)
            self.tasks.update(
                task_id,
                status="error",
                error_message=str(exc) or "An error occurred during research",
            )


research_agent = ResearchAgent()
