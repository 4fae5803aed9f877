"""Pydantic models shared by the agent, the backend and the export helpers."""

import uuid
from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


ResearchType = Literal["general", "literature", "experimental"]
ResearchMode = Literal["basic", "advanced"]
CitationStyle = Literal["academic", "web", "informal"]


def _new_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SectionResult(BaseModel):
    id: str = Field(default_factory=_new_id)
    title: str
    content: str
    citations: List[str] = []


class TitleRequest(BaseModel):
    query: str
    api_key: Optional[str] = None


class TitleResponse(BaseModel):
    query: str
    title: str


class ResearchRequest(BaseModel):
    query: str
    title: str
    research_type: ResearchType = "general"
    research_mode: ResearchMode = "basic"
    citation_style: CitationStyle = "academic"
    api_key: Optional[str] = None


class ResearchRecord(BaseModel):
    id: str = Field(default_factory=_new_id)
    query: str
    title: str
    timestamp: str = Field(default_factory=_utc_now)
    research_type: ResearchType
    research_mode: ResearchMode
    citation_style: CitationStyle
    sections: List[SectionResult] = []


class ResearchStatus(BaseModel):
    task_id: str
    status: str  # pending, running, completed, error
    query: str = ""
    title: str = ""
    total_sections: int = 0
    sections: List[SectionResult] = []
    progress_log: List[str] = []
    record_id: Optional[str] = None
    error_message: Optional[str] = None
