"""
Research type presets.

A research type is a bundle of section templates. Each template carries the
section title, the task given to the model and a list of requirements that
end up numbered in the prompt. Advanced mode reuses the basic sections with
stricter requirements and appends a few deeper sections.
"""

from typing import Dict, List

from pydantic import BaseModel

from .errors import UnknownResearchTypeError


RESEARCH_TYPE_NAMES = ("general", "literature", "experimental")
RESEARCH_MODES = ("basic", "advanced")


class ResearchSectionTemplate(BaseModel):
    title: str
    prompt: str
    requirements: List[str] = []


class ResearchTypeConfig(BaseModel):
    title: str
    description: str
    sections: List[ResearchSectionTemplate]


general_research = ResearchTypeConfig(
    title="General Research",
    description="Broad overview of a topic with background, findings and implications.",
    sections=[
        ResearchSectionTemplate(
            title="Introduction and Background",
            prompt="Introduce the research topic and the context in which it matters.",
            requirements=[
                "Define the key concepts and terminology",
                "Explain the historical background of the topic",
                "State the research problem and its significance",
            ],
        ),
        ResearchSectionTemplate(
            title="Current State of Knowledge",
            prompt="Summarise what is currently known about the topic.",
            requirements=[
                "Describe the main schools of thought",
                "Identify the most influential studies and sources",
                "Highlight areas of consensus and disagreement",
            ],
        ),
        ResearchSectionTemplate(
            title="Key Findings and Analysis",
            prompt="Analyse the most important findings related to the research title.",
            requirements=[
                "Present the key findings with supporting evidence",
                "Compare and contrast competing explanations",
                "Evaluate the strength of the available evidence",
            ],
        ),
        ResearchSectionTemplate(
            title="Implications and Applications",
            prompt="Discuss the practical and theoretical implications of the findings.",
            requirements=[
                "Describe real-world applications",
                "Discuss implications for policy or practice",
                "Identify stakeholders affected by the findings",
            ],
        ),
        ResearchSectionTemplate(
            title="Conclusions and Future Directions",
            prompt="Conclude the research and outline directions for further work.",
            requirements=[
                "Summarise the main arguments",
                "Acknowledge limitations of current knowledge",
                "Propose specific questions for future research",
            ],
        ),
    ],
)

literature_research = ResearchTypeConfig(
    title="Literature Review",
    description="Structured review and synthesis of the published literature.",
    sections=[
        ResearchSectionTemplate(
            title="Introduction and Scope",
            prompt="Introduce the review and define its scope.",
            requirements=[
                "State the objectives of the review",
                "Define inclusion boundaries such as period, field and source types",
                "Explain why a review of this topic is needed now",
            ],
        ),
        ResearchSectionTemplate(
            title="Review Methodology",
            prompt="Describe how the literature was identified and assessed.",
            requirements=[
                "Name the databases and search strategies typically used for this topic",
                "Describe selection and quality appraisal criteria",
                "Explain how findings were grouped and synthesised",
            ],
        ),
        ResearchSectionTemplate(
            title="Thematic Analysis",
            prompt="Organise the literature into its major themes and analyse each one.",
            requirements=[
                "Identify at least three recurring themes",
                "Discuss seminal and recent works for each theme",
                "Show how the themes relate to each other",
            ],
        ),
        ResearchSectionTemplate(
            title="Research Gaps and Debates",
            prompt="Identify unresolved debates and gaps in the literature.",
            requirements=[
                "Describe open controversies and conflicting results",
                "Point out under-studied populations, methods or contexts",
                "Explain the consequences of these gaps",
            ],
        ),
        ResearchSectionTemplate(
            title="Synthesis and Conclusions",
            prompt="Synthesise the reviewed literature into overall conclusions.",
            requirements=[
                "Summarise what the literature collectively shows",
                "Propose a research agenda addressing the identified gaps",
                "State the limitations of this review",
            ],
        ),
    ],
)

experimental_research = ResearchTypeConfig(
    title="Experimental Research",
    description="Design of an experiment with hypotheses, methods and analysis plan.",
    sections=[
        ResearchSectionTemplate(
            title="Introduction and Hypotheses",
            prompt="Introduce the research question and state testable hypotheses.",
            requirements=[
                "Motivate the research question with prior work",
                "State null and alternative hypotheses",
                "Define the independent and dependent variables",
            ],
        ),
        ResearchSectionTemplate(
            title="Experimental Design and Methods",
            prompt="Describe the design of an experiment that tests the hypotheses.",
            requirements=[
                "Describe participants, samples or materials",
                "Explain the procedure and controls",
                "Justify the sample size and measurement instruments",
            ],
        ),
        ResearchSectionTemplate(
            title="Data Analysis Plan",
            prompt="Explain how the experimental data will be analysed.",
            requirements=[
                "Name the statistical tests and why they fit the design",
                "Describe how assumptions will be checked",
                "Explain how effect sizes will be reported",
            ],
        ),
        ResearchSectionTemplate(
            title="Expected Results",
            prompt="Describe the expected results and how they would be interpreted.",
            requirements=[
                "Describe outcomes that support or refute each hypothesis",
                "Relate expected results to previous findings",
                "Discuss alternative explanations",
            ],
        ),
        ResearchSectionTemplate(
            title="Limitations and Conclusions",
            prompt="Discuss the limitations of the experiment and conclude.",
            requirements=[
                "Identify threats to internal and external validity",
                "Discuss ethical considerations",
                "Summarise the expected contribution of the study",
            ],
        ),
    ],
)


ADVANCED_REQUIREMENTS = [
    "Critically evaluate the methodological quality of the cited sources",
    "Discuss at least one counter-argument or conflicting study",
]


def _advanced(config: ResearchTypeConfig, extra_sections: List[ResearchSectionTemplate]) -> ResearchTypeConfig:
    """Deepen a basic config: stricter requirements plus additional sections."""
    sections = [
        section.model_copy(update={"requirements": section.requirements + ADVANCED_REQUIREMENTS})
        for section in config.sections
    ]
    return ResearchTypeConfig(
        title=config.title,
        description=f"{config.description} Advanced mode adds critical appraisal and deeper sections.",
        sections=sections + extra_sections,
    )


RESEARCH_TYPES: Dict[str, ResearchTypeConfig] = {
    "general": general_research,
    "literature": literature_research,
    "experimental": experimental_research,
    "advanced_general": _advanced(
        general_research,
        [
            ResearchSectionTemplate(
                title="Interdisciplinary Perspectives",
                prompt="Examine the topic from the perspective of neighbouring disciplines.",
                requirements=[
                    "Cover at least two disciplines beyond the primary field",
                    "Explain how each perspective changes the interpretation of the findings",
                ],
            ),
            ResearchSectionTemplate(
                title="Critical Evaluation",
                prompt="Critically evaluate the overall body of evidence on the topic.",
                requirements=[
                    "Assess bias, reproducibility and generalisability",
                    "Weigh the strongest and weakest lines of evidence",
                ],
            ),
        ],
    ),
    "advanced_literature": _advanced(
        literature_research,
        [
            ResearchSectionTemplate(
                title="Methodological Trends",
                prompt="Analyse how research methods on this topic have evolved.",
                requirements=[
                    "Compare qualitative and quantitative approaches used",
                    "Identify methodological weaknesses shared across studies",
                ],
            ),
            ResearchSectionTemplate(
                title="Theoretical Frameworks",
                prompt="Describe the theoretical frameworks underpinning the literature.",
                requirements=[
                    "Explain each major framework and its origins",
                    "Evaluate how well each framework is supported by evidence",
                ],
            ),
        ],
    ),
    "advanced_experimental": _advanced(
        experimental_research,
        [
            ResearchSectionTemplate(
                title="Pilot Study and Power Analysis",
                prompt="Plan a pilot study and a formal power analysis for the experiment.",
                requirements=[
                    "State the assumed effect size and its source",
                    "Report the target power and significance level",
                ],
            ),
            ResearchSectionTemplate(
                title="Reproducibility and Data Management",
                prompt="Describe how the experiment will be made reproducible.",
                requirements=[
                    "Describe pre-registration and data sharing plans",
                    "Explain how code, materials and raw data will be archived",
                ],
            ),
        ],
    ),
}


def get_research_type_config(research_type: str, research_mode: str) -> ResearchTypeConfig:
    """Return the section bundle for a type and mode.

    Advanced mode looks up ``advanced_<type>`` and falls back to the basic
    bundle when no advanced variant exists.
    """
    key = f"advanced_{research_type}" if research_mode == "advanced" else research_type
    config = RESEARCH_TYPES.get(key) or RESEARCH_TYPES.get(research_type)
    if config is None:
        raise UnknownResearchTypeError(f"Unknown research type: {research_type!r}")
    return config


def base_research_types() -> Dict[str, ResearchTypeConfig]:
    """Selectable research types, without the advanced duplicates."""
    return {name: RESEARCH_TYPES[name] for name in RESEARCH_TYPE_NAMES}


def total_sections(research_type: str, research_mode: str) -> int:
    return len(get_research_type_config(research_type, research_mode).sections)
