"""
DocSync — Typed GitHub data models.

Only the fields the sync reads are declared; everything else in the
GitHub payloads is ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ReleaseAssetModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    browser_download_url: str


class ReleaseModel(BaseModel):
    """A GitHub release, fetched once per run and not modified afterwards."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    tag_name: str = Field(min_length=1)
    assets: list[ReleaseAssetModel] = Field(default_factory=list)

    def asset_names(self) -> list[str]:
        return [a.name for a in self.assets]


class CommitRefModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sha: str


class BranchModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    protected: bool = False
    commit: CommitRefModel | None = None
