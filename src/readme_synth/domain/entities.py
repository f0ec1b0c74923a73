"""Domain entities: pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class EntryKind(str, Enum):
    """Whether a retrieved entry is a file or a directory."""

    FILE = "file"
    DIRECTORY = "dir"


class Section(str, Enum):
    """Standard README sections, in the order they are always reported."""

    INSTALLATION = "Installation"
    USAGE = "Usage"
    FEATURES = "Features"
    CONTRIBUTING = "Contributing"
    LICENSE = "License"
    ACKNOWLEDGEMENTS = "Acknowledgements"


@dataclass(frozen=True, slots=True)
class TreeEntry:
    """A single row from the GitHub tree API (blob, sub-tree or submodule)."""

    path: str
    type: str  # "blob", "tree" or "commit"
    size: int | None = None


@dataclass(frozen=True, slots=True)
class RepoFile:
    """A repository file; ``content`` is set only when it was fetched."""

    name: str
    kind: EntryKind
    path: str
    content: str | None = None

    @classmethod
    def from_path(cls, path: str, content: str | None = None) -> RepoFile:
        return cls(
            name=path.rsplit("/", maxsplit=1)[-1],
            kind=EntryKind.FILE,
            path=path,
            content=content,
        )

    @property
    def has_content(self) -> bool:
        return bool(self.content)


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Files retrieved from a repository plus the admitted paths that failed."""

    files: list[RepoFile] = field(default_factory=list)
    omitted: list[str] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return bool(self.omitted)


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    """One single-turn prompt for the text-generation service."""

    prompt: str
    max_tokens: int
    temperature: float | None = None


class AttemptKind(str, Enum):
    """Classification of a single credential attempt."""

    SUCCESS = "success"
    AUTH_FAILURE = "auth_failure"
    FATAL_FAILURE = "fatal_failure"


@dataclass(frozen=True, slots=True)
class AttemptOutcome:
    """Typed result of sending a request with one credential."""

    kind: AttemptKind
    text: str = ""
    error: BaseException | None = None

    @classmethod
    def success(cls, text: str | None) -> AttemptOutcome:
        return cls(kind=AttemptKind.SUCCESS, text=text or "")

    @classmethod
    def auth_failure(cls, error: BaseException) -> AttemptOutcome:
        return cls(kind=AttemptKind.AUTH_FAILURE, error=error)

    @classmethod
    def fatal(cls, error: BaseException) -> AttemptOutcome:
        return cls(kind=AttemptKind.FATAL_FAILURE, error=error)


@dataclass(frozen=True, slots=True)
class RepositoryReport:
    """The final structured output of the repository pipeline."""

    repository: str
    summary: str
    existing_readme: str | None
    missing_sections: list[str]
    generated_readme: str
    omitted_files: int = 0
