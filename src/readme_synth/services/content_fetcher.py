"""Remote content fetcher: bounded, batched download of repository files."""

from __future__ import annotations

import asyncio
import logging

from readme_synth.domain.entities import FetchResult, RepoFile, TreeEntry
from readme_synth.domain.exceptions import EmptyRepositoryError, FetchFailedError
from readme_synth.domain.ports.repo_host import RepoHost
from readme_synth.domain.value_objects import RepositoryIdentity
from readme_synth.services.file_filter import MAX_FILE_BYTES, MAX_FILES, admit_entries

logger = logging.getLogger(__name__)

BATCH_SIZE = 5


class RemoteContentFetcher:
    """Retrieves a size-filtered, capped set of files from a repository host.

    Parameters
    ----------
    host:
        Adapter that can list the tree and download single files.
    max_file_bytes:
        Admission threshold; larger blobs are never requested.
    max_files:
        Cap on the number of admitted blobs.
    batch_size:
        Number of downloads in flight at once.  Batches run one after another.
    """

    def __init__(
        self,
        host: RepoHost,
        max_file_bytes: int = MAX_FILE_BYTES,
        max_files: int = MAX_FILES,
        batch_size: int = BATCH_SIZE,
    ) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self._host = host
        self._max_file_bytes = max_file_bytes
        self._max_files = max_files
        self._batch_size = batch_size

    async def fetch(self, identity: RepositoryIdentity) -> FetchResult:
        """List, admit and download files; per-file failures are dropped."""
        try:
            tree = await self._host.fetch_tree(identity)
        except EmptyRepositoryError:
            logger.info("Repository %s is empty", identity.full_name)
            return FetchResult()
        except Exception as exc:
            raise FetchFailedError(
                f"Failed to fetch repository contents for {identity.full_name}: {exc}"
            ) from exc

        admitted = admit_entries(tree, self._max_file_bytes, self._max_files)
        logger.info(
            "Fetching %d of %d tree entries from %s",
            len(admitted),
            len(tree),
            identity.full_name,
        )

        files: list[RepoFile] = []
        omitted: list[str] = []
        for start in range(0, len(admitted), self._batch_size):
            batch = admitted[start : start + self._batch_size]
            results = await asyncio.gather(
                *(self._fetch_one(identity, entry) for entry in batch)
            )
            for entry, result in zip(batch, results):
                if result is None:
                    omitted.append(entry.path)
                else:
                    files.append(result)

        if omitted:
            logger.warning(
                "Omitted %d file(s) from %s after fetch errors",
                len(omitted),
                identity.full_name,
            )
        return FetchResult(files=files, omitted=omitted)

    async def _fetch_one(
        self, identity: RepositoryIdentity, entry: TreeEntry
    ) -> RepoFile | None:
        try:
            content = await self._host.fetch_file_content(identity, entry.path)
        except Exception:
            logger.debug("Skipping %s after fetch failure", entry.path, exc_info=True)
            return None
        return RepoFile.from_path(entry.path, content)
