"""
DocSync — Structured error catalog.

Every error has a code, human message, and suggested fix.
Remote (httpx) and filesystem errors are not wrapped; they propagate
to the top-level handler as-is.
"""

from __future__ import annotations

from typing import Any


class DocSyncError(Exception):
    """Base error with structured code + suggestion."""

    def __init__(self, code: str, message: str, suggestion: str = "", detail: Any = None):
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "error_code": self.code,
            "message": self.message,
        }
        if self.suggestion:
            d["suggestion"] = self.suggestion
        if self.detail:
            d["detail"] = self.detail
        return d


class ReleaseAssetNotFoundError(DocSyncError):
    def __init__(self, asset_name: str, tag: str, available: list[str] | None = None):
        super().__init__(
            code="RELEASE_ASSET_NOT_FOUND",
            message=f"No {asset_name} asset found for {tag}",
            suggestion="Wait for the release CI to upload its assets, then re-run the sync.",
            detail=available,
        )


class InvalidReleaseTagError(DocSyncError):
    def __init__(self, tag: str):
        super().__init__(
            code="INVALID_RELEASE_TAG",
            message=f"Cannot derive a release branch from tag: {tag!r}",
            suggestion="Release tags must look like v<major>.<minor>.<patch>.",
        )


class NpmVersionNotFoundError(DocSyncError):
    def __init__(self, package: str, dist_tag: str = "latest"):
        super().__init__(
            code="NPM_VERSION_NOT_FOUND",
            message=f"npm package {package} has no '{dist_tag}' dist-tag",
            suggestion="Check DOCSYNC_NPM_PACKAGE and DOCSYNC_NPM_REGISTRY.",
        )


class StateFileError(DocSyncError):
    def __init__(self, path: str, message: str):
        super().__init__(
            code="STATE_FILE_INVALID",
            message=f"Cannot use state file {path}: {message}",
            suggestion="The state file must contain a JSON object.",
        )


class ConfigError(DocSyncError):
    def __init__(self, name: str, value: str, expected: str):
        super().__init__(
            code="CONFIG_INVALID",
            message=f"{name}={value!r} is not {expected}",
            suggestion=f"Fix {name} in the environment or in .env.",
        )


class BranchCommitMissingError(DocSyncError):
    def __init__(self, branch: str):
        super().__init__(
            code="BRANCH_COMMIT_MISSING",
            message=f"GitHub returned no head commit for branch {branch}",
            suggestion="Check DOCSYNC_MASTER_BRANCH and the GitHub token's repository access.",
        )


class DocumentPathError(DocSyncError):
    def __init__(self, filename: str):
        super().__init__(
            code="DOCUMENT_PATH_TRAVERSAL",
            message=f"Document path escapes the docs folder: {filename}",
            suggestion="Document filenames must be relative paths without '..'.",
        )
