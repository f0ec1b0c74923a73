"""Shared fixtures for the readme_synth test suite."""

from __future__ import annotations

import pytest

from fakes import SAMPLE_APP_JS, SAMPLE_PACKAGE_JSON

from readme_synth.domain.value_objects import RepositoryIdentity


@pytest.fixture
def identity() -> RepositoryIdentity:
    return RepositoryIdentity(owner="octo", name="widgets")


@pytest.fixture
def sample_files() -> list[dict[str, str]]:
    """The two-file fixture used by the AutoDoc demo: package.json + src/app.js."""
    return [
        {"path": "package.json", "content": SAMPLE_PACKAGE_JSON},
        {"path": "src/app.js", "content": SAMPLE_APP_JS},
    ]
