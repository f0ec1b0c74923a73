"""Generate-documentation use case: AutoDoc README from a supplied file list."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Sequence

from readme_synth.domain.entities import RepoFile
from readme_synth.domain.exceptions import InvalidFileListError
from readme_synth.services.document_synthesizer import DocumentSynthesizer

logger = logging.getLogger(__name__)


class GenerateDocumentationUseCase:
    """Validate caller-supplied files and run the AutoDoc generation mode."""

    def __init__(self, synthesizer: DocumentSynthesizer) -> None:
        self._synthesizer = synthesizer

    async def execute(self, files: Sequence[Mapping[str, object]]) -> str:
        repo_files = to_repo_files(files)
        logger.info("Generating AutoDoc README from %d file(s)", len(repo_files))
        return await self._synthesizer.generate_autodoc(repo_files)


def to_repo_files(files: Sequence[Mapping[str, object]]) -> list[RepoFile]:
    """Convert ``[{path, content}]`` records, rejecting malformed input."""
    if not files:
        raise InvalidFileListError("Repository source files are required.")

    repo_files: list[RepoFile] = []
    for index, item in enumerate(files):
        path = item.get("path") if isinstance(item, Mapping) else None
        content = item.get("content") if isinstance(item, Mapping) else None
        if not isinstance(path, str) or not path or not isinstance(content, str) or not content:
            raise InvalidFileListError(
                f'Each file must have "path" and "content" properties (element {index}).'
            )
        repo_files.append(RepoFile.from_path(path, content))
    return repo_files
