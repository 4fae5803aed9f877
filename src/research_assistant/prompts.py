"""
Prompt templates for title generation and section research.

The section prompt asks the model to end its answer with a numbered
``REFERENCES:`` list; ``citations.parse_section_response`` relies on that
marker to separate body text from the citation list.
"""

from typing import Dict, List

from .research_types import ResearchSectionTemplate


CITATION_INSTRUCTIONS: Dict[str, str] = {
    "academic": "Use APA format for citations (Author, Year). Include full references at the end.",
    "web": (
        "Include URLs and access dates for web sources. "
        "List full references with titles and URLs at the end."
    ),
    "informal": "Use in-text mentions of sources. Include a simplified reference list at the end.",
}

RESEARCH_GUIDELINES = [
    "Provide a comprehensive response addressing all requirements",
    "Use academic language and proper structure",
    "Support ALL claims with citations",
    "Include at least 3-5 relevant citations",
    "Add citations throughout the text, not just at the end",
    "Conclude with a complete REFERENCES section",
]

TITLE_SYSTEM_PROMPT = (
    "Generate a professional, academic title for a research paper based on the given query. "
    "The title should be concise but descriptive."
)


def format_requirements(requirements: List[str]) -> str:
    return "\n".join(f"{index}. {req}" for index, req in enumerate(requirements, start=1))


def title_user_prompt(query: str) -> str:
    return f"Generate a title for a research paper about: {query}"


def section_system_prompt(research_type_title: str, citation_style: str) -> str:
    return (
        f"You are an expert research assistant specializing in {research_type_title}.\n"
        f"Provide detailed, well-structured content with appropriate citations in {citation_style} format.\n"
        "Every paragraph must include at least one citation.\n"
        "Ensure all claims are supported by references.\n"
        "Always include a numbered REFERENCES section at the end.\n"
        "Keep the original formatting exactly as requested."
    )


def construct_prompt(title: str, section: ResearchSectionTemplate, citation_style: str) -> str:
    """Build the user prompt for one section of the research."""
    instructions = CITATION_INSTRUCTIONS.get(citation_style, CITATION_INSTRUCTIONS["academic"])

    prompt = (
        f'Research Title: "{title}"\n\n'
        f"Section: {section.title}\n\n"
        f"Task: {section.prompt}\n\n"
        "Requirements:\n"
        f"{format_requirements(section.requirements)}\n\n"
        "Citation Instructions:\n"
        f"{instructions}\n\n"
        "Research Guidelines:\n"
        f"{format_requirements(RESEARCH_GUIDELINES)}\n\n"
        "Format your response EXACTLY as follows:\n\n"
        "[Content with in-text citations]\n\n"
        "REFERENCES:\n"
        "1. [First reference]\n"
        "2. [Second reference]\n"
        "(etc.)\n\n"
        "Note: Do not include any other text or formatting instructions in your response."
    )
    return prompt.strip()
