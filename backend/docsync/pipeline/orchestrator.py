"""
DocSync — Sync Orchestrator.

Runs the full content sync strictly in sequence:

  RECEIVED → RELEASE_RESOLVED → BRANCHES_SELECTED → CONTENT_PRUNED
  → DOCS_FETCHED → ASSETS_FETCHED → COMPLETED

Each step is timed, logged, and recorded in the SyncResult. Nothing is
rolled back on failure; the next run clears and re-fetches everything.
"""

from __future__ import annotations

import time
import uuid
from pathlib import Path

import httpx

from docsync.core.config import AppConfig, get_settings
from docsync.errors import BranchCommitMissingError
from docsync.github.auth import GitHubCredentials
from docsync.github.client import GitHubClient
from docsync.models.job import StepTiming, SyncResult, SyncStage
from docsync.models.release import ReleaseModel
from docsync.models.state import SyncState
from docsync.pipeline.assets import fetch_api_data
from docsync.pipeline.branches import select_supported_branches
from docsync.pipeline.docs import partition_documents, write_documents
from docsync.pipeline.prune import clear_content, delete_unsupported_versions
from docsync.pipeline.website import fetch_website_content
from docsync.pipeline.writer import CURRENT, english_base
from docsync.sources.docs import DocsClient
from docsync.sources.npm import NpmRegistryClient
from docsync.utils.logging import logger


class SyncContext:
    """Mutable context passed through pipeline steps."""

    def __init__(self, state: SyncState):
        self.state = state
        self.release: ReleaseModel | None = None
        self.removed_versions: list[str] = []
        self.documents_written = 0


class SyncOrchestrator:
    """
    Sequential orchestrator for one content sync.

    The state file is read once here and written once at the end of a
    successful run.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        github: GitHubClient | None = None,
        npm: NpmRegistryClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or get_settings()
        cfg = self.config
        self.sync_id = uuid.uuid4().hex[:12]
        self.transport = transport
        self.github = github or GitHubClient(
            owner=cfg.github.owner,
            repo=cfg.github.repo,
            credentials=GitHubCredentials(cfg.github.token),
            base_url=cfg.github.api_url,
            timeout=cfg.http_timeout,
            transport=transport,
        )
        self.npm = npm or NpmRegistryClient(
            registry_url=cfg.npm.registry_url,
            timeout=cfg.http_timeout,
            transport=transport,
        )
        self.docs = DocsClient(self.github)
        self.stage = SyncStage.RECEIVED
        self.ctx = SyncContext(SyncState.load(cfg.state_file))
        self.timings: list[StepTiming] = []

    @property
    def content_dir(self) -> Path:
        return self.config.content_dir

    def _record_step(self, name: str, start: float, status: str = "ok", detail: str = ""):
        ms = int((time.perf_counter() - start) * 1000)
        self.timings.append(StepTiming(step=name, duration_ms=ms, status=status, detail=detail))
        symbol = "✓" if status == "ok" else ("⊘" if status == "skipped" else "✗")
        logger.info("  %s %s — %dms %s", symbol, name, ms, detail)

    async def run(self) -> SyncResult:
        """Execute the full sync. Returns a complete SyncResult."""
        logger.info("=" * 60)
        logger.info("[%s] Sync starting (%s)", self.sync_id, self.github.slug)
        logger.info("=" * 60)
        sync_start = time.perf_counter()

        try:
            await self._step_fetch_release()
            await self._step_select_branches()
            await self._step_prune_unsupported()
            await self._step_clear_content()
            await self._step_fetch_release_api_docs()
            await self._step_fetch_supported_api_docs()
            await self._step_fetch_api_data()
            await self._step_fetch_master_commit()
            await self._step_fetch_master_tutorials()
            await self._step_fetch_supported_tutorials()
            await self._step_fetch_website_content()
            changed = self._step_save_state()
            self.stage = SyncStage.COMPLETED
        except Exception:
            self.stage = SyncStage.FAILED
            raise

        state = self.ctx.state
        total_ms = int((time.perf_counter() - sync_start) * 1000)
        logger.info("=" * 60)
        logger.info(
            "[%s] Sync complete — %s + %d supported versions, %d documents, %dms",
            self.sync_id, state.electron_latest_stable_tag,
            len(state.supported_versions), self.ctx.documents_written, total_ms,
        )
        logger.info("=" * 60)

        return SyncResult(
            sync_id=self.sync_id,
            release_tag=state.electron_latest_stable_tag,
            supported_versions=list(state.supported_versions),
            removed_versions=self.ctx.removed_versions,
            master_commit=state.electron_master_branch_commit,
            documents_written=self.ctx.documents_written,
            state_changed=changed,
            timings=self.timings,
        )

    async def _step_fetch_release(self):
        t = time.perf_counter()
        logger.info("Determining 'latest' version dist-tag on npm")
        version = await self.npm.latest_version(self.config.npm.package)
        logger.info("  - Fetching release data from GitHub")
        self.ctx.release = await self.github.get_release_by_tag(f"v{version}")
        self.stage = SyncStage.RELEASE_RESOLVED
        self._record_step("fetch_release", t, detail=self.ctx.release.tag_name)

    async def _step_select_branches(self):
        t = time.perf_counter()
        limit = self.config.num_supported_versions
        logger.info("Fetching latest %d supported versions", limit)
        branches = await self.github.list_branches()
        self.ctx.state.supported_versions = select_supported_branches(
            self.ctx.release.tag_name, branches, limit,
        )
        self.stage = SyncStage.BRANCHES_SELECTED
        self._record_step("select_branches", t, detail=", ".join(self.ctx.state.supported_versions))

    async def _step_prune_unsupported(self):
        t = time.perf_counter()
        removed = delete_unsupported_versions(self.content_dir, self.ctx.state.supported_versions)
        self.ctx.removed_versions = removed
        if removed:
            self._record_step("prune_unsupported", t, detail=", ".join(removed))
        else:
            self._record_step("prune_unsupported", t, "skipped", "nothing to remove")

    async def _step_clear_content(self):
        t = time.perf_counter()
        logger.info("Deleting content")
        clear_content(self.content_dir, self.ctx.state.supported_versions)
        self.stage = SyncStage.CONTENT_PRUNED
        self._record_step("clear_content", t)

    async def _write_api_docs(self, ref: str, version: str | None = None) -> int:
        docs = await self.docs.fetch_docs(ref)
        base = english_base(self.content_dir, version or CURRENT)
        count = write_documents(partition_documents(docs).api, base)
        self.ctx.documents_written += count
        return count

    async def _write_tutorials(self, ref: str, version: str | None = None) -> int:
        docs = await self.docs.fetch_docs(ref)
        base = english_base(self.content_dir, version or CURRENT)
        count = write_documents(partition_documents(docs).tutorials, base)
        self.ctx.documents_written += count
        return count

    async def _step_fetch_release_api_docs(self):
        t = time.perf_counter()
        tag = self.ctx.release.tag_name
        logger.info("Fetching API docs from %s#%s", self.github.slug, tag)
        self.ctx.state.electron_latest_stable_tag = tag
        count = await self._write_api_docs(tag)
        self._record_step("fetch_release_api_docs", t, detail=f"{count} files")

    async def _step_fetch_supported_api_docs(self):
        t = time.perf_counter()
        logger.info("Fetching API docs from supported branches")
        count = 0
        for version in self.ctx.state.supported_versions:
            logger.info("  - from %s#%s", self.github.slug, version)
            count += await self._write_api_docs(version, version)
        self._record_step("fetch_supported_api_docs", t, detail=f"{count} files")

    async def _step_fetch_api_data(self):
        t = time.perf_counter()
        logger.info("Fetching API definitions from %s#%s", self.github.slug, self.ctx.release.tag_name)
        await fetch_api_data(
            self.ctx.release,
            english_base(self.content_dir),
            timeout=self.config.http_timeout,
            transport=self.transport,
        )
        self._record_step("fetch_api_data", t)

    async def _step_fetch_master_commit(self):
        t = time.perf_counter()
        master = self.config.github.master_branch
        logger.info("Fetching %s branch commit SHA", master)
        branch = await self.github.get_branch(master)
        if branch.commit is None or not branch.commit.sha:
            raise BranchCommitMissingError(master)
        self.ctx.state.electron_master_branch_commit = branch.commit.sha
        self._record_step("fetch_master_commit", t, detail=self.ctx.state.electron_master_branch_commit[:12])

    async def _step_fetch_master_tutorials(self):
        t = time.perf_counter()
        master = self.config.github.master_branch
        logger.info("Fetching tutorial docs from %s#%s", self.github.slug, master)
        count = await self._write_tutorials(master)
        self.stage = SyncStage.DOCS_FETCHED
        self._record_step("fetch_master_tutorials", t, detail=f"{count} files")

    async def _step_fetch_supported_tutorials(self):
        t = time.perf_counter()
        logger.info("Fetching tutorial docs from supported branches")
        count = 0
        for version in self.ctx.state.supported_versions:
            logger.info("  - from %s#%s", self.github.slug, version)
            count += await self._write_tutorials(version, version)
        self._record_step("fetch_supported_tutorials", t, detail=f"{count} files")

    async def _step_fetch_website_content(self):
        t = time.perf_counter()
        logger.info("Fetching locale.yml from %s", self.config.website_locale_url)
        await fetch_website_content(
            self.config.website_locale_url,
            english_base(self.content_dir),
            timeout=self.config.http_timeout,
            transport=self.transport,
        )
        self.stage = SyncStage.ASSETS_FETCHED
        self._record_step("fetch_website_content", t)

    def _step_save_state(self) -> bool:
        t = time.perf_counter()
        changed = self.ctx.state.save(self.config.state_file)
        self._record_step("save_state", t, "ok" if changed else "skipped")
        return changed


async def run_sync(config: AppConfig | None = None) -> SyncResult:
    """Convenience wrapper: build an orchestrator from settings and run it."""
    return await SyncOrchestrator(config=config).run()
