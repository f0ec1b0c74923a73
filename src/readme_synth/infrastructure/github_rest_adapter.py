"""GitHub REST API adapter: implements the RepoHost port."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from urllib.parse import quote

import httpx

from readme_synth.domain.entities import TreeEntry
from readme_synth.domain.exceptions import (
    ContentExtractionError,
    EmptyRepositoryError,
    GitHubRateLimitError,
    ReadmeSynthError,
    RepositoryAccessDeniedError,
    RepositoryAuthorizationError,
    RepositoryNotFoundError,
)
from readme_synth.domain.value_objects import RepositoryIdentity

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
_USER_AGENT = "readme-synth/1.0"
_RAW_MEDIA_TYPE = "application/vnd.github.raw"


class GitHubRestAdapter:
    """Concrete RepoHost backed by the GitHub v3 REST API.

    Parameters
    ----------
    client:
        Shared ``httpx.AsyncClient``; its timeout bounds every call.
    token:
        Optional bearer token.  Anonymous access works for public repositories.
    max_content_bytes:
        Any file body larger than this is rejected even if the tree listing
        under-reported its size.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str | None = None,
        max_content_bytes: int = 100_000,
        api_base: str = _GITHUB_API,
    ) -> None:
        self._client = client
        self._api_base = api_base.rstrip("/")
        self._max_content_bytes = max_content_bytes
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": _USER_AGENT,
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def repository_exists(self, identity: RepositoryIdentity) -> bool:
        """GET /repos/{owner}/{repo} → True unless the host says 404/403."""
        try:
            await self._api_get(f"/repos/{identity.owner}/{identity.name}")
        except (RepositoryNotFoundError, RepositoryAccessDeniedError):
            logger.info("Repository %s is not accessible", identity.full_name)
            return False
        return True

    async def fetch_tree(self, identity: RepositoryIdentity) -> list[TreeEntry]:
        """GET /repos/{owner}/{repo}/git/trees/HEAD?recursive=1 → [TreeEntry]."""
        resp = await self._api_get(
            f"/repos/{identity.owner}/{identity.name}/git/trees/HEAD",
            params={"recursive": "1"},
        )
        data = resp.json()
        if data.get("truncated"):
            logger.info("Tree listing for %s was truncated by GitHub", identity.full_name)

        return [
            TreeEntry(
                path=item["path"],
                type=item.get("type", "blob"),
                size=item.get("size"),
            )
            for item in data.get("tree", [])
            if item.get("path")
        ]

    async def fetch_file_content(self, identity: RepositoryIdentity, path: str) -> str:
        """GET /repos/{owner}/{repo}/contents/{path} as raw text."""
        resp = await self._api_get(
            f"/repos/{identity.owner}/{identity.name}/contents/{quote(path)}",
            accept=_RAW_MEDIA_TYPE,
        )
        body = resp.content
        if len(body) > self._max_content_bytes:
            raise ContentExtractionError(
                f"{path} is {len(body)} bytes, above the {self._max_content_bytes} byte limit"
            )
        if b"\x00" in body:
            raise ContentExtractionError(f"{path} is not a text file")
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ContentExtractionError(f"{path} is not valid UTF-8 text") from exc

    async def _api_get(
        self,
        endpoint: str,
        params: dict[str, str] | None = None,
        accept: str | None = None,
    ) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{self._api_base}{endpoint}"
        headers = dict(self._api_headers)
        if accept:
            headers["Accept"] = accept
        try:
            resp = await self._client.get(url, headers=headers, params=params)
        except httpx.HTTPError as exc:
            raise ContentExtractionError(
                f"Network error fetching {url}: {exc}"
            ) from exc

        if resp.status_code == 200:
            return resp

        raise _translate_status(resp, url)


def _translate_status(resp: httpx.Response, url: str) -> ReadmeSynthError:
    """Map a non-200 GitHub response onto the domain exception hierarchy."""
    if resp.status_code == 401:
        return RepositoryAuthorizationError(
            "GitHub rejected the configured token. Check GITHUB_ACCESS_TOKEN."
        )

    if resp.status_code == 404:
        return RepositoryNotFoundError(
            "Repository not found. Make sure the URL points to a public repository."
        )

    if resp.status_code == 409:
        return EmptyRepositoryError("Repository is empty.")

    if resp.status_code == 403:
        if resp.headers.get("x-ratelimit-remaining", "") == "0":
            reset_raw = resp.headers.get("x-ratelimit-reset", "")
            try:
                reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                    "%Y-%m-%d %H:%M:%S UTC"
                )
            except (ValueError, OSError):
                reset_str = reset_raw or "unknown"
            return GitHubRateLimitError(
                f"GitHub API rate limit exceeded. Resets at {reset_str}. "
                "Set the GITHUB_ACCESS_TOKEN environment variable to increase the limit."
            )
        return RepositoryAccessDeniedError("Access denied. The repository may be private.")

    if resp.status_code == 429:
        return GitHubRateLimitError("GitHub API rate limit exceeded (HTTP 429).")

    return ContentExtractionError(f"GitHub API returned HTTP {resp.status_code} for {url}")
