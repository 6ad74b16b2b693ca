"""Shared test configuration and fixtures for DocSync test suite."""

import io
import json
import sys
import tarfile
from pathlib import Path

import httpx
import pytest

# Add backend to Python path so imports work
backend_dir = str(Path(__file__).parent.parent / "backend")
if backend_dir not in sys.path:
    sys.path.insert(0, backend_dir)

from docsync.core.config import AppConfig, GitHubConfig, NpmConfig, get_settings  # noqa: E402

LOCALE_URL = "https://cdn.jsdelivr.net/gh/electron/electronjs.org@master/data/locale.yml"
ASSET_URL = "https://github.com/electron/electron/releases/download/v10.1.0/electron-api.json"
MASTER_SHA = "0123456789abcdef0123456789abcdef01234567"


def make_tarball(files: dict[str, str], prefix: str = "electron-electron-abc1234") -> bytes:
    """Build a gzipped tarball shaped like a GitHub source archive."""
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tar:
        root = tarfile.TarInfo(prefix)
        root.type = tarfile.DIRTYPE
        tar.addfile(root)
        for name, text in files.items():
            data = text.encode("utf-8")
            info = tarfile.TarInfo(f"{prefix}/{name}")
            info.size = len(data)
            tar.addfile(info, io.BytesIO(data))
    return buf.getvalue()


def docs_for(ref: str) -> dict[str, str]:
    return {
        "README.md": f"# electron {ref}\n",
        "docs/README.md": f"# Docs index {ref}\n",
        "docs/api/app.md": f"# app ({ref})\r\n\nControls the application.\n",
        "docs/tutorial/quick-start.md": f"# Quick start ({ref})\n",
        "docs/images/notes.md": "image notes\n",
        "docs/images/logo.png": "\x89PNG",
    }


class FakeRemote:
    """Routes httpx requests to canned npm, GitHub and CDN responses."""

    def __init__(self, branches=None, assets=None, latest="10.1.0", master_sha=MASTER_SHA):
        self.latest = latest
        self.master_sha = master_sha
        self.branches = branches if branches is not None else [
            {"name": "master", "protected": True},
            {"name": "1-8-x", "protected": True},
            {"name": "10-1-x", "protected": True},
            {"name": "7-1-x", "protected": True},
            {"name": "8-2-x", "protected": True},
            {"name": "8-3-x", "protected": True},
            {"name": "9-0-x", "protected": True},
            {"name": "9-1-x", "protected": False},
        ]
        self.assets = assets if assets is not None else [
            {"name": "electron-api.json", "browser_download_url": ASSET_URL},
            {"name": "electron-v10.1.0-linux-x64.zip", "browser_download_url": "https://example.invalid/x.zip"},
        ]
        self.tarball_refs: list[str] = []
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        host, path = request.url.host, request.url.path
        if host == "registry.npmjs.org":
            return httpx.Response(200, json={"latest": self.latest, "beta": "11.0.0-beta.1"})
        if host == "cdn.jsdelivr.net":
            return httpx.Response(200, content=b"en-US:\n  home: Home\n")
        if host == "github.com" and path.endswith("/electron-api.json"):
            return httpx.Response(200, json=[{"name": "app", "type": "Module"}])
        if host == "api.github.com":
            repo = "/repos/electron/electron"
            if path == f"{repo}/branches":
                page = int(request.url.params.get("page", "1"))
                return httpx.Response(200, json=self.branches if page == 1 else [])
            if path == f"{repo}/branches/master":
                branch = {"name": "master", "protected": True}
                if self.master_sha is not None:
                    branch["commit"] = {"sha": self.master_sha}
                return httpx.Response(200, json=branch)
            if path.startswith(f"{repo}/releases/tags/"):
                tag = path.rsplit("/", 1)[-1]
                return httpx.Response(200, json={"tag_name": tag, "id": 1, "assets": self.assets})
            if path.startswith(f"{repo}/tarball/"):
                ref = path.rsplit("/", 1)[-1]
                self.tarball_refs.append(ref)
                return httpx.Response(200, content=make_tarball(docs_for(ref)))
        return httpx.Response(404, json={"message": "Not Found"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_remote():
    return FakeRemote()


@pytest.fixture
def content_dir(tmp_path):
    return tmp_path / "content"


@pytest.fixture
def state_file(tmp_path):
    path = tmp_path / "package.json"
    path.write_text(json.dumps({"name": "electron-i18n", "supportedVersions": ["5-0-x", "7-1-x"]}, indent=2))
    return path


@pytest.fixture
def app_config(content_dir, state_file):
    return AppConfig(
        github=GitHubConfig(
            api_url="https://api.github.com",
            owner="electron",
            repo="electron",
            master_branch="master",
            token="test-token",
        ),
        npm=NpmConfig(registry_url="https://registry.npmjs.org", package="electron"),
        crowdin_key="",
        content_dir=content_dir,
        state_file=state_file,
        num_supported_versions=4,
        website_locale_url=LOCALE_URL,
        http_timeout=60.0,
    )


@pytest.fixture
def fresh_settings():
    """Drop cached settings before and after a test that changes the environment."""
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()
