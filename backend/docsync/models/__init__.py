"""DocSync data models — typed contracts for the entire pipeline."""

from docsync.models.release import (
    ReleaseModel,
    ReleaseAssetModel,
    BranchModel,
    CommitRefModel,
)
from docsync.models.document import DocumentModel, DocumentPartition
from docsync.models.state import SyncState
from docsync.models.job import SyncStage, StepTiming, SyncResult

__all__ = [
    "ReleaseModel",
    "ReleaseAssetModel",
    "BranchModel",
    "CommitRefModel",
    "DocumentModel",
    "DocumentPartition",
    "SyncState",
    "SyncStage",
    "StepTiming",
    "SyncResult",
]
