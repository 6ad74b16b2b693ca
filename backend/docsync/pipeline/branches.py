"""
DocSync — Supported branch selection.

Release branches are named ``<major>-<minor>-x``. The newest branch of
each major line is kept, where "newest" means the lexicographically last
name sharing the same first character, and only the last ``limit``
lines survive. The branch of the current stable release is dropped
because the ``current`` content folder already covers it.
"""

from __future__ import annotations

import re
from typing import Iterable

from docsync.errors import InvalidReleaseTagError
from docsync.models.release import BranchModel
from docsync.pipeline.writer import CURRENT

NUM_SUPPORTED_VERSIONS = 4

BRANCH_PATTERN = re.compile(r"[0-9]-[0-9]-x")
_TAG_PATTERN = re.compile(r"^v?(\d+)[.-](\d+)")


def normalize_version(tag: str) -> str:
    """``v10.1.0`` → ``10-1-x``."""
    match = _TAG_PATTERN.match(tag.strip())
    if not match:
        raise InvalidReleaseTagError(tag)
    major, minor = match.groups()
    return f"{major}-{minor}-x"


def is_release_branch(branch: BranchModel) -> bool:
    return branch.protected and BRANCH_PATTERN.search(branch.name) is not None


def select_supported_branches(
    current_tag: str,
    branches: Iterable[BranchModel],
    limit: int = NUM_SUPPORTED_VERSIONS,
) -> list[str]:
    """
    Pick the supported release branches, oldest first.

    Grouping is by the first character of the branch name and ordering
    is plain string ordering, so ``10-1-x`` shares a group with ``1-8-x``
    and ``9-10-x`` sorts before ``9-2-x``.
    """
    current = normalize_version(current_tag)
    names = sorted(b.name for b in branches if is_release_branch(b))

    newest: dict[str, str] = {}
    for name in names:
        newest[name[0]] = name

    kept = [newest[key] for key in sorted(newest)][-limit:]
    return [name for name in kept if name not in (current, CURRENT)]
