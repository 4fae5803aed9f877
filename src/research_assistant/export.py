"""Markdown export of finished research."""

import re
from typing import List

from .models import ResearchRecord


def export_filename(title: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return f"{slug[:80].rstrip('-') or 'research'}.md"


def render_markdown(record: ResearchRecord) -> str:
    """Render a research record as a standalone Markdown document."""
    lines: List[str] = [
        f"# {record.title}",
        "",
        f"**Query:** {record.query}",
        "",
        f"*{record.research_mode.capitalize()} {record.research_type} research, "
        f"{record.citation_style} citations, generated {record.timestamp}*",
        "",
    ]
    for section in record.sections:
        lines += [f"## {section.title}", "", section.content, ""]
        if section.citations:
            lines += ["### References", ""]
            lines += [f"{idx}. {citation}" for idx, citation in enumerate(section.citations, start=1)]
            lines.append("")
    return "\n".join(lines).rstrip() + "\n"
