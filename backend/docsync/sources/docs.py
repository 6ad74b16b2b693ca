"""
DocSync — Documentation source.

Extracts every Markdown file under ``docs/`` from a repository tarball
and returns it as a DocumentModel. Content is decoded but not otherwise
touched.
"""

from __future__ import annotations

import io
import posixpath
import tarfile

from docsync.github.client import GitHubClient
from docsync.models.document import DocumentModel
from docsync.utils.logging import logger

DOCS_ROOT = "docs/"


def extract_documents(archive: bytes) -> list[DocumentModel]:
    """Read Markdown documents from a gzipped GitHub source tarball."""
    docs: list[DocumentModel] = []
    with tarfile.open(fileobj=io.BytesIO(archive), mode="r:gz") as tar:
        for member in tar:
            if not member.isfile():
                continue
            # GitHub prefixes every entry with "<owner>-<repo>-<sha>/"
            _, _, path = member.name.partition("/")
            if not path.startswith(DOCS_ROOT) or not path.endswith(".md"):
                continue
            filename = path[len(DOCS_ROOT):]
            fh = tar.extractfile(member)
            if fh is None:
                continue
            docs.append(
                DocumentModel(
                    slug=posixpath.basename(filename)[: -len(".md")],
                    filename=filename,
                    markdown_content=fh.read().decode("utf-8"),
                )
            )
    docs.sort(key=lambda d: d.filename)
    return docs


class DocsClient:
    """Fetches the document set of a repository ref, at most once per ref."""

    def __init__(self, github: GitHubClient):
        self.github = github
        self._cache: dict[str, list[DocumentModel]] = {}

    async def fetch_docs(self, ref: str) -> list[DocumentModel]:
        if ref not in self._cache:
            archive = await self.github.download_tarball(ref)
            self._cache[ref] = extract_documents(archive)
            logger.info("  Extracted %d documents from %s@%s", len(self._cache[ref]), self.github.slug, ref)
        return self._cache[ref]
