"""
Research Paper Assistant package.

Turns a free-text query into a titled, sectioned research document by
driving an OpenAI-compatible chat-completion API one section at a time.
"""

from .citations import extract_citations, split_content_and_references
from .openai_client import ChatCompletionClient
from .research_types import RESEARCH_TYPES, get_research_type_config

__all__ = [
    "ChatCompletionClient",
    "RESEARCH_TYPES",
    "extract_citations",
    "get_research_type_config",
    "split_content_and_references",
]
