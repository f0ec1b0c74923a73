"""API routes: thin controllers that delegate to the use cases."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from readme_synth.interface.dependencies import (
    get_generate_use_case,
    get_process_use_case,
)
from readme_synth.interface.schemas import (
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
    ProcessRepoRequest,
    ProcessRepoResponse,
)
from readme_synth.services.generate_docs import GenerateDocumentationUseCase
from readme_synth.services.process_repo import ProcessRepositoryUseCase

router = APIRouter()


@router.post(
    "/process-repo",
    response_model=ProcessRepoResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid URL or no files in repository"},
        404: {"model": ErrorResponse, "description": "Repository not found"},
        500: {"model": ErrorResponse, "description": "Fetch or generation failure"},
    },
)
async def process_repo(
    body: ProcessRepoRequest,
    use_case: ProcessRepositoryUseCase = Depends(get_process_use_case),
) -> ProcessRepoResponse:
    """Analyse a GitHub repository's README and fill in what is missing."""
    report = await use_case.execute(body.url)
    return ProcessRepoResponse(
        repository=report.repository,
        summary=report.summary,
        existing_readme=report.existing_readme,
        missing_sections=report.missing_sections,
        generated_readme=report.generated_readme,
    )


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed file list"},
        500: {"model": ErrorResponse, "description": "Generation failure"},
    },
)
async def generate(
    body: GenerateRequest,
    use_case: GenerateDocumentationUseCase = Depends(get_generate_use_case),
) -> GenerateResponse:
    """Write a beginner-friendly README from the supplied source files."""
    readme = await use_case.execute([f.model_dump() for f in body.files])
    return GenerateResponse(readme=readme)


@router.get("/health", include_in_schema=False)
async def health() -> dict[str, str]:
    return {"status": "ok"}
