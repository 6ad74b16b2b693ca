"""
DocSync — Content pruning.

Deletes version folders that fell out of the supported set and clears the
English folders that are about to be re-fetched. Deletion is permanent.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from docsync.pipeline.writer import CURRENT, english_base
from docsync.utils.logging import logger


def list_version_dirs(content_dir: Path) -> list[str]:
    """Version folders on disk, without ``current``."""
    content_dir = Path(content_dir)
    if not content_dir.is_dir():
        return []
    return sorted(p.name for p in content_dir.iterdir() if p.is_dir() and p.name != CURRENT)


def delete_unsupported_versions(content_dir: Path, supported: list[str]) -> list[str]:
    """
    Remove version folders that are no longer supported.

    Only runs when the number of folders on disk differs from the number
    of supported versions; ``current`` is never removed. Returns the
    names that were deleted.
    """
    on_disk = list_version_dirs(content_dir)
    if len(on_disk) == len(supported):
        return []

    keep = set(supported) | {CURRENT}
    removed = [name for name in on_disk if name not in keep]
    for name in removed:
        logger.info("  - Deleting unsupported version %s", name)
        shutil.rmtree(Path(content_dir) / name)
    return removed


def _reset_dir(path: Path) -> None:
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True)


def clear_content(content_dir: Path, versions: list[str]) -> list[Path]:
    """Delete and recreate the English folders of ``current`` and each version."""
    cleared: list[Path] = []
    logger.info("  - Deleting current content")
    target = english_base(content_dir)
    _reset_dir(target)
    cleared.append(target)
    for version in versions:
        logger.info("  - Deleting content for %s", version)
        target = english_base(content_dir, version)
        _reset_dir(target)
        cleared.append(target)
    return cleared
