"""
DocSync — Website content download.
"""

from __future__ import annotations

from pathlib import Path

import httpx

from docsync.pipeline.writer import write_file
from docsync.utils.logging import logger


async def fetch_website_content(
    url: str,
    base: Path,
    timeout: float = 60.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Path:
    """Save the website locale.yml as-is under ``base/website/``."""
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True, transport=transport) as client:
        resp = await client.get(url)
        resp.raise_for_status()

    target = Path(base) / "website" / "locale.yml"
    logger.info("  - Writing %s", target.relative_to(base))
    return write_file(target, resp.content)
