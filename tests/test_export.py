"""Tests for Markdown export."""

from research_assistant.export import export_filename, render_markdown
from research_assistant.models import ResearchRecord, SectionResult


def _record() -> ResearchRecord:
    return ResearchRecord(
        query="sleep and memory",
        title="Sleep & Memory: A Review",
        timestamp="2024-01-01T00:00:00+00:00",
        research_type="literature",
        research_mode="advanced",
        citation_style="academic",
        sections=[
            SectionResult(title="Introduction", content="Sleep matters (Walker, 2017).", citations=["Walker, M. (2017). Why We Sleep."]),
            SectionResult(title="Gaps", content="Few studies exist.", citations=[]),
        ],
    )


def test_render_markdown():
    text = render_markdown(_record())
    assert text.startswith("# Sleep & Memory: A Review\n\n**Query:** sleep and memory\n")
    assert "*Advanced literature research, academic citations, generated 2024-01-01T00:00:00+00:00*" in text
    assert "## Introduction\n\nSleep matters (Walker, 2017).\n\n### References\n\n1. Walker, M. (2017). Why We Sleep." in text
    assert text.endswith("## Gaps\n\nFew studies exist.\n")


def test_export_filename():
    assert export_filename("Sleep & Memory: A Review") == "sleep-memory-a-review.md"
    assert export_filename("???") == "research.md"
