"""Unit tests for the structured error catalog."""

from docsync.errors import (
    BranchCommitMissingError, ConfigError, DocSyncError, DocumentPathError,
    InvalidReleaseTagError, NpmVersionNotFoundError,
    ReleaseAssetNotFoundError, StateFileError,
)


class TestErrorCatalog:
    def test_base_error(self):
        e = DocSyncError(code="TEST", message="test msg", suggestion="try this")
        d = e.to_dict()
        assert d["error_code"] == "TEST"
        assert d["message"] == "test msg"
        assert d["suggestion"] == "try this"
        assert "detail" not in d

    def test_release_asset_not_found(self):
        e = ReleaseAssetNotFoundError("electron-api.json", "v10.1.0", ["a.zip"])
        assert e.code == "RELEASE_ASSET_NOT_FOUND"
        assert str(e) == "No electron-api.json asset found for v10.1.0"
        assert e.to_dict()["detail"] == ["a.zip"]

    def test_invalid_release_tag(self):
        e = InvalidReleaseTagError("nightly")
        assert e.code == "INVALID_RELEASE_TAG"
        assert "nightly" in e.message

    def test_npm_version_not_found(self):
        e = NpmVersionNotFoundError("electron")
        assert e.code == "NPM_VERSION_NOT_FOUND"
        assert "latest" in e.message

    def test_state_file_error(self):
        e = StateFileError("package.json", "expected an object")
        assert e.code == "STATE_FILE_INVALID"

    def test_all_errors_are_exceptions(self):
        for cls in (ReleaseAssetNotFoundError, InvalidReleaseTagError, NpmVersionNotFoundError, StateFileError):
            assert issubclass(cls, DocSyncError)
            assert issubclass(cls, Exception)

    def test_config_error(self):
        e = ConfigError("DOCSYNC_HTTP_TIMEOUT", "soon", "a number of seconds")
        assert e.code == "CONFIG_INVALID"
        assert str(e) == "DOCSYNC_HTTP_TIMEOUT='soon' is not a number of seconds"

    def test_branch_commit_missing(self):
        e = BranchCommitMissingError("master")
        assert e.code == "BRANCH_COMMIT_MISSING"
        assert "master" in e.message

    def test_document_path_error(self):
        e = DocumentPathError("../evil.md")
        assert e.code == "DOCUMENT_PATH_TRAVERSAL"
