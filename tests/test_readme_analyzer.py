"""Tests for README location and missing-section detection."""

from __future__ import annotations

import pytest

from readme_synth.domain.entities import RepoFile, Section
from readme_synth.services.readme_analyzer import (
    SECTION_MARKERS,
    detect_missing_sections,
    find_readme,
    section_status,
)

ALL_SECTIONS = [
    "Installation",
    "Usage",
    "Features",
    "Contributing",
    "License",
    "Acknowledgements",
]


def _file(path: str, content: str | None = "text") -> RepoFile:
    return RepoFile.from_path(path, content)


class TestFindReadme:
    def test_exact_readme_md_wins(self) -> None:
        files = [_file("docs/info.md"), _file("README.md"), _file("Readme.MD")]
        assert find_readme(files).path == "README.md"

    def test_exact_match_is_case_insensitive(self) -> None:
        files = [_file("docs/README.md"), _file("readme.MD")]
        assert find_readme(files).path == "readme.MD"

    def test_first_candidate_when_no_exact_match(self) -> None:
        files = [_file("src/main.py"), _file("docs/readme-dev.md"), _file("pkg/README.md")]
        assert find_readme(files).path == "docs/readme-dev.md"

    def test_requires_markdown_extension(self) -> None:
        assert find_readme([_file("README.rst"), _file("README")]) is None

    def test_ignores_files_without_content(self) -> None:
        files = [_file("README.md", content=None), _file("docs/README.md")]
        assert find_readme(files).path == "docs/README.md"

    def test_empty_content_is_not_a_candidate(self) -> None:
        assert find_readme([_file("README.md", content="")]) is None

    def test_none_found(self) -> None:
        assert find_readme([_file("package.json"), _file("src/app.js")]) is None
        assert find_readme([]) is None


class TestDetectMissingSections:
    def test_license_heading_is_detected_in_any_case(self) -> None:
        for body in ("## License\nMIT", "## LICENSE\nMIT", "# license"):
            assert "License" not in detect_missing_sections(body, [])

    def test_no_markers_reports_everything_in_enumeration_order(self) -> None:
        assert detect_missing_sections("# My project\n\nJust some prose.", []) == ALL_SECTIONS

    def test_complete_readme_reports_nothing(self) -> None:
        body = (
            "# Tool\n\n## Installation\n\n## Usage\n\n## Features\n\n"
            "## Contributing\n\n## License\n\n## Acknowledgements\n"
        )
        assert detect_missing_sections(body, []) == []

    @pytest.mark.parametrize(
        ("body", "present"),
        [
            ("## Getting Started\nrun it", "Installation"),
            ("Here is how to use the thing", "Usage"),
            ("## Usage", "Usage"),
            ("# Features", "Features"),
            ("## Contributors welcome", "Contributing"),
            ("# Thanks to everyone", "Acknowledgements"),
        ],
    )
    def test_individual_markers(self, body: str, present: str) -> None:
        missing = detect_missing_sections(body, [])
        assert present not in missing
        assert len(missing) == 5

    def test_order_follows_enumeration_not_document(self) -> None:
        body = "## License\n\n## Usage\n"
        assert detect_missing_sections(body, []) == [
            "Installation",
            "Features",
            "Contributing",
            "Acknowledgements",
        ]

    def test_file_list_does_not_influence_result(self) -> None:
        body = "# Project"
        files = [_file("LICENSE", "MIT License"), _file("CONTRIBUTING.md", "# Contributing")]
        assert detect_missing_sections(body, files) == detect_missing_sections(body, [])


class TestSectionStatus:
    def test_covers_every_section(self) -> None:
        status = section_status("")
        assert list(status) == list(Section)
        assert not any(status.values())

    def test_marker_table_covers_every_section(self) -> None:
        assert set(SECTION_MARKERS) == set(Section)
        assert all(SECTION_MARKERS[section] for section in Section)
