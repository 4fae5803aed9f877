"""Splitting model answers into body text and a citation list."""

import re
from typing import List, Tuple


# Unanchored: the word "references" in body prose also splits the answer.
REFERENCES_MARKER = re.compile(r"REFERENCES:?", re.IGNORECASE)
NUMERIC_PREFIX = re.compile(r"^\d+\.\s*")


def split_content_and_references(text: str) -> Tuple[str, str]:
    """Split ``text`` at the first ``REFERENCES`` marker.

    Returns ``(content, references)`` where ``references`` runs up to the next
    marker, if any, and is empty when the marker is missing.
    """
    parts = REFERENCES_MARKER.split(text)
    if len(parts) > 1:
        return parts[0].strip(), parts[1].strip()
    return text.strip(), ""


def extract_citations(references: str) -> List[str]:
    """Turn a numbered reference block into a list of citation strings.

    Numeric ``1.`` prefixes are stripped and bracketed placeholder lines such
    as ``[First reference]`` are dropped.
    """
    if not references:
        return []

    citations: List[str] = []
    for line in references.splitlines():
        line = line.strip()
        if not line:
            continue
        citation = NUMERIC_PREFIX.sub("", line).strip()
        if not citation or "[" in citation or "]" in citation:
            continue
        citations.append(citation)
    return citations


def parse_section_response(text: str) -> Tuple[str, List[str]]:
    content, references = split_content_and_references(text)
    return content, extract_citations(references)
