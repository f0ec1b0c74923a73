"""Domain exception hierarchy.

Each exception carries a stable machine-checkable ``code`` and maps to a
specific HTTP status code at the interface layer.  Inner layers raise these;
the outermost error-handler translates them.
"""

from __future__ import annotations


class ReadmeSynthError(Exception):
    """Base exception for the entire application."""

    code = "internal-error"


# ── Configuration ───────────────────────────────────────────────────────────


class ConfigurationError(ReadmeSynthError):
    """The process was started with an unusable configuration."""

    code = "configuration-error"


class CredentialChainEmptyError(ConfigurationError):
    """No generation credential is configured."""

    code = "no-credentials"


# ── Input validation ────────────────────────────────────────────────────────


class InvalidRepositoryUrlError(ReadmeSynthError):
    """The supplied URL does not name an owner/repository pair."""

    code = "invalid-url"


class InvalidFileListError(ReadmeSynthError):
    """The supplied file list is empty or has elements without path/content."""

    code = "invalid-files"


# ── GitHub API errors ───────────────────────────────────────────────────────


class RepositoryNotFoundError(ReadmeSynthError):
    """The repository does not exist or is not accessible (404)."""

    code = "not-found"


class RepositoryAccessDeniedError(ReadmeSynthError):
    """Access to the repository was denied (403)."""

    code = "access-denied"


class RepositoryAuthorizationError(ReadmeSynthError):
    """The GitHub credential was rejected (401)."""

    code = "github-unauthorized"


class EmptyRepositoryError(ReadmeSynthError):
    """The repository exists but has no content (empty tree)."""

    code = "empty-repository"


class GitHubRateLimitError(ReadmeSynthError):
    """GitHub API rate limit exceeded (429 / 403 with rate-limit header)."""

    code = "rate-limited"


class ContentExtractionError(ReadmeSynthError):
    """A single file could not be retrieved as admissible text."""

    code = "content-error"


class FetchFailedError(ReadmeSynthError):
    """The repository listing itself could not be retrieved."""

    code = "fetch-failed"


class NoEligibleFilesError(ReadmeSynthError):
    """The repository yielded no file content worth documenting."""

    code = "no-files"


# ── Generation errors ───────────────────────────────────────────────────────


class GenerationError(ReadmeSynthError):
    """Non-authorization failure from the text-generation service."""

    code = "generation-failed"


class CredentialsExhaustedError(ReadmeSynthError):
    """Every credential in the chain was rejected by the generation service."""

    code = "credentials-exhausted"
