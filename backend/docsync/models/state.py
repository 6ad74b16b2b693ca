"""
DocSync — Persisted sync state.

The state lives inside a larger JSON file (package.json). It is read once
at the start of a run, carried through the pipeline, and merged back by
key once at the end so unrelated keys survive untouched.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from docsync.errors import StateFileError
from docsync.utils.logging import logger


class SyncState(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    supported_versions: list[str] = Field(default_factory=list, alias="supportedVersions")
    electron_latest_stable_tag: str = Field(default="", alias="electronLatestStableTag")
    electron_master_branch_commit: str = Field(default="", alias="electronMasterBranchCommit")

    @classmethod
    def load(cls, path: Path) -> "SyncState":
        """Read the state keys from ``path``; a missing file yields empty state."""
        return cls.model_validate(_read_json_object(path))

    def save(self, path: Path) -> bool:
        """
        Merge the state keys into the JSON object at ``path``.

        Returns False (and leaves the file alone) when nothing changed.
        """
        data = _read_json_object(path)
        updates = self.model_dump(by_alias=True)
        if all(data.get(k) == v for k, v in updates.items()):
            logger.info("  State unchanged: %s", path)
            return False

        data.update(updates)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        logger.info("  Wrote %s into %s", ", ".join(updates), path.name)
        return True


def _read_json_object(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise StateFileError(str(path), str(exc)) from exc
    if not isinstance(data, dict):
        raise StateFileError(str(path), f"expected an object, got {type(data).__name__}")
    return data
