"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ProcessRepoRequest(BaseModel):
    """Request body for ``POST /process-repo``."""

    url: str

    @field_validator("url")
    @classmethod
    def _must_not_be_blank(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            msg = "url must not be empty."
            raise ValueError(msg)
        return stripped


class ProcessRepoResponse(BaseModel):
    """Successful response from ``POST /process-repo``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    repository: str
    summary: str
    existing_readme: str | None
    missing_sections: list[str]
    generated_readme: str


class SourceFile(BaseModel):
    """One caller-supplied file."""

    path: str = Field(min_length=1)
    content: str = Field(min_length=1)


class GenerateRequest(BaseModel):
    """Request body for ``POST /generate``."""

    files: list[SourceFile] = Field(min_length=1)


class GenerateResponse(BaseModel):
    """Successful response from ``POST /generate``."""

    readme: str


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    code: str
    message: str
