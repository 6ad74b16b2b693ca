"""
DocSync — Document records produced by the docs source.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DocumentModel(BaseModel):
    """One Markdown file from a repository's docs/ folder."""

    slug: str
    filename: str = Field(min_length=1)  # relative to docs/, e.g. "api/app.md"
    markdown_content: str = ""

    @property
    def is_api(self) -> bool:
        return self.filename.startswith("api/")

    @property
    def is_image(self) -> bool:
        return "images/" in self.filename


class DocumentPartition(BaseModel):
    """Disjoint split of one document set into API, tutorial and image files."""

    api: list[DocumentModel] = Field(default_factory=list)
    tutorials: list[DocumentModel] = Field(default_factory=list)
    images: list[DocumentModel] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.api) + len(self.tutorials) + len(self.images)
