"""Process-repository use case: the main orchestration pipeline.

This is the single entry point for the repository flow.  It depends only on
the :class:`RepoHost` port, the content fetcher and the synthesizer; the
interface layer injects concrete adapters at runtime.

Stages run in a fixed order and every failure is terminal::

    PARSE_URL → VERIFY_EXISTS → FETCH → ANALYZE → SYNTHESIZE → DONE
"""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum

from readme_synth.domain.entities import RepoFile, RepositoryReport, Section
from readme_synth.domain.exceptions import (
    InvalidRepositoryUrlError,
    NoEligibleFilesError,
    RepositoryNotFoundError,
)
from readme_synth.domain.ports.repo_host import RepoHost
from readme_synth.domain.value_objects import RepositoryIdentity
from readme_synth.services.content_fetcher import RemoteContentFetcher
from readme_synth.services.document_synthesizer import DocumentSynthesizer
from readme_synth.services.readme_analyzer import detect_missing_sections, find_readme
from readme_synth.services.section_templates import assemble_document

logger = logging.getLogger(__name__)

CANONICAL_MISSING: tuple[str, ...] = (
    Section.INSTALLATION.value,
    Section.USAGE.value,
    Section.LICENSE.value,
)


class PipelineStage(str, Enum):
    PARSE_URL = "parse_url"
    VERIFY_EXISTS = "verify_exists"
    FETCH = "fetch"
    ANALYZE = "analyze"
    SYNTHESIZE = "synthesize"
    DONE = "done"


class ProcessRepositoryUseCase:
    """Orchestrates the full repository URL → README pipeline.

    Parameters
    ----------
    host:
        Adapter used for the existence probe.
    fetcher:
        Bounded content fetcher over the same host.
    synthesizer:
        Prompt builder and generation front-end.
    """

    def __init__(
        self,
        host: RepoHost,
        fetcher: RemoteContentFetcher,
        synthesizer: DocumentSynthesizer,
    ) -> None:
        self._host = host
        self._fetcher = fetcher
        self._synthesizer = synthesizer

    # ── Public entry point ──────────────────────────────────────────────

    async def execute(self, url: str) -> RepositoryReport:
        """Run every stage and return the structured report."""
        self._enter(PipelineStage.PARSE_URL, url)
        identity = RepositoryIdentity.parse(url)
        if identity is None:
            raise InvalidRepositoryUrlError(
                f"Invalid GitHub URL: '{url}'. "
                "Expected format: https://github.com/<owner>/<repo>"
            )

        self._enter(PipelineStage.VERIFY_EXISTS, identity.full_name)
        if not await self._host.repository_exists(identity):
            raise RepositoryNotFoundError(
                f"Repository {identity.full_name} not found or access denied."
            )

        self._enter(PipelineStage.FETCH, identity.full_name)
        fetched = await self._fetcher.fetch(identity)
        if not fetched.files:
            raise NoEligibleFilesError(f"No files found in repository {identity.full_name}.")

        self._enter(PipelineStage.ANALYZE, identity.full_name)
        readme = find_readme(fetched.files)

        if readme is not None:
            report = await self._complete_existing(identity, readme, fetched.files)
        else:
            report = await self._generate_new(identity, fetched.files)

        self._enter(PipelineStage.DONE, identity.full_name)
        return replace(report, omitted_files=len(fetched.omitted))

    # ── Branches ────────────────────────────────────────────────────────

    async def _complete_existing(
        self,
        identity: RepositoryIdentity,
        readme: RepoFile,
        files: list[RepoFile],
    ) -> RepositoryReport:
        """Keep the existing README and backfill whatever sections it lacks."""
        body = readme.content or ""
        missing = detect_missing_sections(body, files)
        logger.info(
            "Found %s in %s; missing sections: %s",
            readme.path,
            identity.full_name,
            ", ".join(missing) or "none",
        )

        generated = body
        if missing:
            self._enter(PipelineStage.SYNTHESIZE, identity.full_name)
            addition = await self._synthesizer.backfill_sections(body, missing)
            if addition.strip():
                generated = f"{body.rstrip()}\n\n{addition.strip()}\n"

        return RepositoryReport(
            repository=identity.full_name,
            summary=body,
            existing_readme=body,
            missing_sections=missing,
            generated_readme=generated,
        )

    async def _generate_new(
        self, identity: RepositoryIdentity, files: list[RepoFile]
    ) -> RepositoryReport:
        """No README exists: summarize the code and assemble one from templates."""
        self._enter(PipelineStage.SYNTHESIZE, identity.full_name)
        summary = await self._synthesizer.summarize_project(files)
        missing = list(CANONICAL_MISSING)
        return RepositoryReport(
            repository=identity.full_name,
            summary=summary,
            existing_readme=None,
            missing_sections=missing,
            generated_readme=assemble_document(identity.name, summary, missing),
        )

    @staticmethod
    def _enter(stage: PipelineStage, subject: str) -> None:
        logger.info("[%s] %s", stage.value, subject)
