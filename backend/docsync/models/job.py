"""
DocSync — Sync result contract.

Every run returns a SyncResult with full traceability: per-step timings,
the versions it synced, and how many files it wrote.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class SyncStage(str, enum.Enum):
    RECEIVED = "RECEIVED"
    RELEASE_RESOLVED = "RELEASE_RESOLVED"
    BRANCHES_SELECTED = "BRANCHES_SELECTED"
    CONTENT_PRUNED = "CONTENT_PRUNED"
    DOCS_FETCHED = "DOCS_FETCHED"
    ASSETS_FETCHED = "ASSETS_FETCHED"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class StepTiming(BaseModel):
    step: str
    duration_ms: int
    status: str = "ok"  # ok | skipped | failed
    detail: str = ""


class SyncResult(BaseModel):
    """Complete report of one sync run."""

    sync_id: str
    release_tag: str
    supported_versions: list[str] = Field(default_factory=list)
    removed_versions: list[str] = Field(default_factory=list)
    master_commit: str = ""
    documents_written: int = 0
    state_changed: bool = False
    timings: list[StepTiming] = Field(default_factory=list)
