"""
DocSync — Release asset download.

electron-api.json is authoritative reference data: if the release does
not carry it the whole sync fails.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx

from docsync.errors import ReleaseAssetNotFoundError
from docsync.models.release import ReleaseAssetModel, ReleaseModel
from docsync.pipeline.writer import write_file
from docsync.utils.logging import logger, step_timer

API_DATA_ASSET = "electron-api.json"


def find_asset(release: ReleaseModel, name: str = API_DATA_ASSET) -> ReleaseAssetModel:
    for asset in release.assets:
        if asset.name == name:
            return asset
    raise ReleaseAssetNotFoundError(name, release.tag_name, release.asset_names())


async def fetch_api_data(
    release: ReleaseModel,
    base: Path,
    timeout: float = 60.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Download electron-api.json and write it pretty-printed into ``base``."""
    asset = find_asset(release)
    with step_timer(f"Download {asset.name}"):
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True, transport=transport) as client:
            resp = await client.get(asset.browser_download_url)
            resp.raise_for_status()
            apis = resp.json()

    filename = Path(base) / API_DATA_ASSET
    logger.info("  - Writing %s (without changes)", filename.relative_to(base))
    write_file(filename, json.dumps(apis, indent=2, ensure_ascii=False))
    return apis
