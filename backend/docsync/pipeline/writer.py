"""
DocSync — Content tree writer.

Layout: content/<version>/<locale>/...
"""

from __future__ import annotations

from pathlib import Path

CURRENT = "current"
ENGLISH = "en-US"


def english_base(content_dir: Path, version: str = CURRENT) -> Path:
    """Return ``content/<version>/en-US``."""
    return Path(content_dir) / version / ENGLISH


def write_file(path: Path, content: str | bytes) -> Path:
    """Create missing parent directories, then overwrite ``path``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    return path
