"""
DocSync — Document partitioning and writing.

API reference files live under ``api/``; everything else except image
folders is tutorial content. Files are written byte-for-byte under
``<base>/docs/<filename>``.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Iterable

from docsync.errors import DocumentPathError
from docsync.models.document import DocumentModel, DocumentPartition
from docsync.pipeline.writer import write_file


def partition_documents(docs: Iterable[DocumentModel]) -> DocumentPartition:
    part = DocumentPartition()
    for doc in docs:
        if doc.is_api:
            part.api.append(doc)
        elif doc.is_image:
            part.images.append(doc)
        else:
            part.tutorials.append(doc)
    return part


def document_path(filename: str, docs_dir: Path) -> Path:
    """Resolve ``filename`` under ``docs_dir``, refusing anything that escapes it."""
    rel = PurePosixPath(filename)
    if rel.is_absolute() or ".." in rel.parts:
        raise DocumentPathError(filename)

    root = Path(docs_dir).resolve()
    target = (root / rel).resolve()
    if not target.is_relative_to(root) or target == root:
        raise DocumentPathError(filename)
    return target


def write_documents(docs: Iterable[DocumentModel], base: Path) -> int:
    """Write each document to ``base/docs/<filename>``; returns the count."""
    docs_dir = Path(base) / "docs"
    count = 0
    for doc in docs:
        write_file(document_path(doc.filename, docs_dir), doc.markdown_content)
        count += 1
    return count
