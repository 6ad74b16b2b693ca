"""
DocSync — GitHub REST API client.

Key endpoints used:
  GET /repos/{owner}/{repo}/branches          — list branches (paginated)
  GET /repos/{owner}/{repo}/branches/{branch} — single branch + head commit
  GET /repos/{owner}/{repo}/releases/tags/{tag} — release metadata + assets
  GET /repos/{owner}/{repo}/tarball/{ref}     — source archive (redirects)

Calls are sequential and not retried; HTTP errors propagate.
"""

from __future__ import annotations

from typing import Any

import httpx

from docsync.github.auth import GitHubCredentials
from docsync.models.release import BranchModel, ReleaseModel
from docsync.utils.logging import logger, step_timer

PER_PAGE = 100


class GitHubClient:
    """Thin async wrapper around the GitHub REST API for one repository."""

    def __init__(
        self,
        owner: str,
        repo: str,
        credentials: GitHubCredentials | None = None,
        base_url: str = "https://api.github.com",
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.owner = owner
        self.repo = repo
        self.credentials = credentials or GitHubCredentials()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=f"{self.base_url}/repos/{self.owner}/{self.repo}",
            headers=self.credentials.as_headers(),
            timeout=self.timeout,
            follow_redirects=True,
            transport=self.transport,
        )

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        async with self._client() as client:
            resp = await client.get(path, params=params)
            if not resp.is_success:
                logger.error("  GitHub %s%s returned %d: %s", self.slug, path, resp.status_code, resp.text[:200])
            resp.raise_for_status()
            return resp.json()

    async def list_branches(self) -> list[BranchModel]:
        """Return every branch of the repository, following pagination."""
        branches: list[BranchModel] = []
        page = 1
        while True:
            data = await self._get_json("/branches", {"per_page": PER_PAGE, "page": page})
            branches.extend(BranchModel.model_validate(b) for b in data)
            if len(data) < PER_PAGE:
                break
            page += 1
        logger.info("  Listed %d branches of %s", len(branches), self.slug)
        return branches

    async def get_branch(self, branch: str) -> BranchModel:
        data = await self._get_json(f"/branches/{branch}")
        return BranchModel.model_validate(data)

    async def get_release_by_tag(self, tag: str) -> ReleaseModel:
        data = await self._get_json(f"/releases/tags/{tag}")
        return ReleaseModel.model_validate(data)

    async def download_tarball(self, ref: str) -> bytes:
        """Download the gzipped source archive of ``ref``."""
        with step_timer(f"GitHub — download {self.slug}@{ref} tarball"):
            async with self._client() as client:
                resp = await client.get(f"/tarball/{ref}")
                resp.raise_for_status()
                logger.info("  Downloaded %d bytes", len(resp.content))
                return resp.content
