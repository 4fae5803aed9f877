"""Tests for research type presets and prompt construction."""

import pytest

from research_assistant.errors import UnknownResearchTypeError
from research_assistant.prompts import (
    CITATION_INSTRUCTIONS,
    construct_prompt,
    format_requirements,
    section_system_prompt,
)
from research_assistant.research_types import (
    RESEARCH_TYPES,
    ResearchSectionTemplate,
    base_research_types,
    get_research_type_config,
    total_sections,
)


def test_research_type_keys():
    assert set(RESEARCH_TYPES) == {
        "general",
        "literature",
        "experimental",
        "advanced_general",
        "advanced_literature",
        "advanced_experimental",
    }
    assert list(base_research_types()) == ["general", "literature", "experimental"]


def test_advanced_mode_selects_deeper_config():
    basic = get_research_type_config("literature", "basic")
    advanced = get_research_type_config("literature", "advanced")
    assert basic is RESEARCH_TYPES["literature"]
    assert advanced is RESEARCH_TYPES["advanced_literature"]
    assert advanced.title == basic.title
    assert len(advanced.sections) > len(basic.sections)
    for plain, deep in zip(basic.sections, advanced.sections):
        assert deep.title == plain.title
        assert deep.requirements[: len(plain.requirements)] == plain.requirements
        assert len(deep.requirements) > len(plain.requirements)


def test_advanced_falls_back_to_basic_when_missing(monkeypatch):
    monkeypatch.delitem(RESEARCH_TYPES, "advanced_general")
    assert get_research_type_config("general", "advanced") is RESEARCH_TYPES["general"]


def test_unknown_research_type():
    with pytest.raises(UnknownResearchTypeError):
        get_research_type_config("astrology", "basic")


def test_total_sections():
    assert total_sections("general", "basic") == len(RESEARCH_TYPES["general"].sections)
    assert total_sections("general", "advanced") == len(RESEARCH_TYPES["advanced_general"].sections)


def test_format_requirements():
    assert format_requirements(["a", "b"]) == "1. a\n2. b"
    assert format_requirements([]) == ""


def test_construct_prompt_contents():
    section = ResearchSectionTemplate(
        title="Methods", prompt="Describe the methods.", requirements=["Be precise", "Be brief"]
    )
    prompt = construct_prompt("My Title", section, "web")

    assert prompt.startswith('Research Title: "My Title"')
    assert "Section: Methods" in prompt
    assert "Task: Describe the methods." in prompt
    assert "Requirements:\n1. Be precise\n2. Be brief" in prompt
    assert CITATION_INSTRUCTIONS["web"] in prompt
    assert "6. Conclude with a complete REFERENCES section" in prompt
    assert "REFERENCES:\n1. [First reference]\n2. [Second reference]" in prompt
    assert prompt.endswith("formatting instructions in your response.")


def test_section_system_prompt_mentions_type_and_style():
    text = section_system_prompt("Literature Review", "academic")
    assert "specializing in Literature Review" in text
    assert "academic format" in text
    assert "REFERENCES" in text
