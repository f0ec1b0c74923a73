"""Port for the repository host, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from readme_synth.domain.entities import TreeEntry
from readme_synth.domain.value_objects import RepositoryIdentity


class RepoHost(Protocol):
    """Abstract contract for reading repository data from a source-control host."""

    async def repository_exists(self, identity: RepositoryIdentity) -> bool:
        """Return whether the repository exists and is readable."""
        ...

    async def fetch_tree(self, identity: RepositoryIdentity) -> list[TreeEntry]:
        """Return the recursive file tree of the default branch."""
        ...

    async def fetch_file_content(self, identity: RepositoryIdentity, path: str) -> str:
        """Return the decoded text content of a single file."""
        ...
