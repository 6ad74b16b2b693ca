"""
DocSync — Configuration
Loads .env only when the credential variables are not already exported,
then reads all settings from environment variables.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Callable, TypeVar

from dotenv import load_dotenv

from docsync.errors import ConfigError
from docsync.utils.logging import logger

_project_root = Path(__file__).resolve().parent.parent.parent.parent
_env_path = _project_root / ".env"

CREDENTIAL_VARS = ("GH_TOKEN", "CROWDIN_KEY")

T = TypeVar("T")

DEFAULT_LOCALE_URL = (
    "https://cdn.jsdelivr.net/gh/electron/electronjs.org@master/data/locale.yml"
)


@dataclass(frozen=True)
class GitHubConfig:
    """GitHub REST API location, repository and credentials."""
    api_url: str
    owner: str
    repo: str
    master_branch: str
    token: str


@dataclass(frozen=True)
class NpmConfig:
    """npm registry used to resolve the latest stable version."""
    registry_url: str
    package: str


@dataclass(frozen=True)
class AppConfig:
    """Top-level sync configuration."""
    github: GitHubConfig
    npm: NpmConfig
    crowdin_key: str
    content_dir: Path
    state_file: Path
    num_supported_versions: int
    website_locale_url: str
    http_timeout: float


def _load_env_file() -> bool:
    """Load developer secrets from .env unless CI already exported them."""
    if all(os.getenv(name) for name in CREDENTIAL_VARS):
        return False
    return load_dotenv(_env_path)


def _env_number(name: str, default: str, cast: Callable[[str], T], expected: str) -> T:
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(name, raw, expected) from None


def _load_config() -> AppConfig:
    return AppConfig(
        github=GitHubConfig(
            api_url=os.getenv("DOCSYNC_GITHUB_API_URL", "https://api.github.com"),
            owner=os.getenv("DOCSYNC_REPO_OWNER", "electron"),
            repo=os.getenv("DOCSYNC_REPO_NAME", "electron"),
            master_branch=os.getenv("DOCSYNC_MASTER_BRANCH", "master"),
            token=os.getenv("GH_TOKEN", ""),
        ),
        npm=NpmConfig(
            registry_url=os.getenv("DOCSYNC_NPM_REGISTRY", "https://registry.npmjs.org"),
            package=os.getenv("DOCSYNC_NPM_PACKAGE", "electron"),
        ),
        crowdin_key=os.getenv("CROWDIN_KEY", ""),
        content_dir=Path(os.getenv("DOCSYNC_CONTENT_DIR", str(_project_root / "content"))),
        state_file=Path(os.getenv("DOCSYNC_STATE_FILE", str(_project_root / "package.json"))),
        num_supported_versions=_env_number(
            "DOCSYNC_NUM_SUPPORTED_VERSIONS", "4", int, "an integer",
        ),
        website_locale_url=os.getenv("DOCSYNC_WEBSITE_LOCALE_URL", DEFAULT_LOCALE_URL),
        http_timeout=_env_number("DOCSYNC_HTTP_TIMEOUT", "60.0", float, "a number of seconds"),
    )


def _validate_config(cfg: AppConfig) -> None:
    """Warn about missing credentials; remote calls degrade instead of failing here."""
    if not cfg.github.token:
        logger.warning("GH_TOKEN is not set; GitHub requests will be unauthenticated")
    if cfg.num_supported_versions < 1:
        raise ConfigError(
            "DOCSYNC_NUM_SUPPORTED_VERSIONS", str(cfg.num_supported_versions), "at least 1",
        )


@lru_cache(maxsize=1)
def get_settings() -> AppConfig:
    """Load, validate and cache the settings on first use."""
    _load_env_file()
    cfg = _load_config()
    _validate_config(cfg)
    return cfg
