"""Existing-documentation analysis: locate a README and find missing sections.

Section detection is a heuristic: each section is covered when any of its
marker substrings appears in the lower-cased document body.  The marker table
is data, so new sections or markers never touch the control flow below.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from readme_synth.domain.entities import RepoFile, Section

SECTION_MARKERS: Mapping[Section, tuple[str, ...]] = {
    Section.INSTALLATION: ("# install", "## instal", "getting started"),
    Section.USAGE: ("# usage", "## us", "how to use"),
    Section.FEATURES: ("# feature", "## feature"),
    Section.CONTRIBUTING: ("# contribut", "## contribut"),
    Section.LICENSE: ("# licens", "## licens"),
    Section.ACKNOWLEDGEMENTS: ("# acknowledg", "# thank"),
}


def find_readme(files: Sequence[RepoFile]) -> RepoFile | None:
    """Return the top-level README among *files*, if any.

    A path equal to ``readme.md`` (any case) wins; otherwise the first
    markdown file whose path mentions "readme" is used.
    """
    candidates = [
        f
        for f in files
        if f.has_content
        and "readme" in f.path.lower()
        and f.path.lower().endswith(".md")
    ]
    for candidate in candidates:
        if candidate.path.lower() == "readme.md":
            return candidate
    return candidates[0] if candidates else None


def section_status(body: str) -> dict[Section, bool]:
    """Evaluate every standard section against *body*."""
    text = body.lower()
    return {
        section: any(marker in text for marker in SECTION_MARKERS[section])
        for section in Section
    }


def detect_missing_sections(body: str, files: Sequence[RepoFile]) -> list[str]:
    """Return names of sections absent from *body*, in enumeration order.

    *files* is accepted for callers that have the file list at hand but does
    not influence the result; detection is driven by the document body only.
    """
    del files
    return [section.value for section, present in section_status(body).items() if not present]
