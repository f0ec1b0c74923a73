"""FastAPI dependency injection wiring."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from readme_synth.domain.value_objects import CredentialChain
from readme_synth.infrastructure.config import Settings, get_settings
from readme_synth.infrastructure.github_rest_adapter import GitHubRestAdapter
from readme_synth.infrastructure.openai_adapter import OpenAIAdapter
from readme_synth.services.content_fetcher import RemoteContentFetcher
from readme_synth.services.document_synthesizer import DocumentSynthesizer
from readme_synth.services.generate_docs import GenerateDocumentationUseCase
from readme_synth.services.generation_client import CredentialedGenerationClient
from readme_synth.services.process_repo import ProcessRepositoryUseCase

logger = logging.getLogger(__name__)

_http_client: httpx.AsyncClient | None = None
_openai_adapter: OpenAIAdapter | None = None
_credential_chain: CredentialChain | None = None


async def startup() -> None:
    """Initialise shared resources; run by :func:`lifespan`.

    Fails fast with :class:`CredentialChainEmptyError` when no generation
    credential is configured.
    """
    global _http_client, _openai_adapter, _credential_chain  # noqa: PLW0603

    settings = get_settings()
    _credential_chain = settings.credential_chain()
    logger.info(
        "Generation credentials: %s",
        ", ".join(c.source for c in _credential_chain),
    )
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout_seconds))
    _openai_adapter = OpenAIAdapter(
        model=settings.openai_model,
        base_url=settings.openai_base_url,
        timeout=settings.generation_timeout_seconds,
    )


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _openai_adapter, _credential_chain  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None
    if _openai_adapter:
        await _openai_adapter.close()
        _openai_adapter = None
    _credential_chain = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    await startup()
    try:
        yield
    finally:
        await shutdown()


def _synthesizer(settings: Settings) -> DocumentSynthesizer:
    assert _openai_adapter is not None, "startup() was not called"
    assert _credential_chain is not None, "startup() was not called"

    return DocumentSynthesizer(
        CredentialedGenerationClient(_credential_chain, _openai_adapter),
        summary_max_tokens=settings.summary_max_tokens,
        backfill_max_tokens=settings.backfill_max_tokens,
        autodoc_max_tokens=settings.autodoc_max_tokens,
        autodoc_temperature=settings.autodoc_temperature,
        redact_secrets=settings.redact_secrets,
    )


def get_process_use_case() -> ProcessRepositoryUseCase:
    """Build the repository use case with injected adapters."""
    settings = get_settings()

    assert _http_client is not None, "startup() was not called"

    host = GitHubRestAdapter(
        client=_http_client,
        token=settings.github_token(),
        max_content_bytes=settings.max_file_size_bytes,
    )
    return ProcessRepositoryUseCase(
        host=host,
        fetcher=RemoteContentFetcher(
            host,
            max_file_bytes=settings.max_file_size_bytes,
            max_files=settings.max_files_to_fetch,
            batch_size=settings.fetch_batch_size,
        ),
        synthesizer=_synthesizer(settings),
    )


def get_generate_use_case() -> GenerateDocumentationUseCase:
    """Build the file-list use case with injected adapters."""
    return GenerateDocumentationUseCase(_synthesizer(get_settings()))
