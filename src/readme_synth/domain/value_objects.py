"""Value objects: self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from readme_synth.domain.exceptions import CredentialChainEmptyError

_GITHUB_PATH_RE = re.compile(r"github\.com/(?P<owner>[^/?#\s]+)/(?P<name>[^/?#\s]+)")


@dataclass(frozen=True, slots=True)
class RepositoryIdentity:
    """Owner/name pair identifying a GitHub repository.

    Derived once per request from a free-form URL such as
    ``https://github.com/psf/requests.git`` and used as the key for every
    remote lookup.
    """

    owner: str
    name: str

    @classmethod
    def parse(cls, url: object) -> RepositoryIdentity | None:
        """Extract the identity from *url*, or return ``None`` if it has none.

        Only the first two path segments after ``github.com/`` matter; any
        deeper path (``/tree/main``), query string or fragment is ignored.
        """
        if not isinstance(url, str):
            return None
        match = _GITHUB_PATH_RE.search(url.strip())
        if not match:
            return None
        name = match["name"].removesuffix(".git")
        if not name:
            return None
        return cls(owner=match["owner"], name=name)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True, slots=True)
class Credential:
    """A generation-service API key tagged with the setting it came from."""

    source: str
    secret: str

    def __repr__(self) -> str:
        return f"Credential(source={self.source!r}, secret='**********')"

    __str__ = __repr__


@dataclass(frozen=True, slots=True)
class CredentialChain:
    """Ordered, non-empty list of equivalent generation credentials.

    Order defines fallback priority.  The chain is built once at startup and
    never mutated.
    """

    credentials: tuple[Credential, ...]

    def __post_init__(self) -> None:
        if not self.credentials:
            raise CredentialChainEmptyError(
                "No generation credential configured. "
                "Set OPENAI_API_KEY (and optionally OPENAI_BACKUP_API_KEY)."
            )

    @classmethod
    def from_sources(cls, sources: Iterable[tuple[str, str | None]]) -> CredentialChain:
        """Build a chain from ``(source, secret)`` pairs, dropping blank secrets."""
        return cls(
            credentials=tuple(
                Credential(source=source, secret=secret.strip())
                for source, secret in sources
                if secret and secret.strip()
            )
        )

    def __iter__(self) -> Iterator[Credential]:
        return iter(self.credentials)

    def __len__(self) -> int:
        return len(self.credentials)
