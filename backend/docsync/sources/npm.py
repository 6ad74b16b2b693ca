"""
DocSync — npm registry lookup for the latest stable version.
"""

from __future__ import annotations

import httpx

from docsync.errors import NpmVersionNotFoundError
from docsync.utils.logging import logger


class NpmRegistryClient:
    def __init__(
        self,
        registry_url: str = "https://registry.npmjs.org",
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.registry_url = registry_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def dist_tags(self, package: str) -> dict[str, str]:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.get(f"{self.registry_url}/-/package/{package}/dist-tags")
            resp.raise_for_status()
            return resp.json()

    async def latest_version(self, package: str) -> str:
        """Return the version the ``latest`` dist-tag points at."""
        version = (await self.dist_tags(package)).get("latest")
        if not version:
            raise NpmVersionNotFoundError(package)
        logger.info("  npm %s@latest is %s", package, version)
        return version
