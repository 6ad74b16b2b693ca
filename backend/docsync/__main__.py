"""
DocSync — command-line entry point.

  python -m docsync [--content-dir DIR] [--state-file FILE] [--num-versions N]

Any failure, including invalid settings, is logged and the process exits
with status 1.
"""

import argparse
import asyncio
import dataclasses
import sys
from pathlib import Path

from docsync.core.config import AppConfig, get_settings
from docsync.pipeline.orchestrator import run_sync
from docsync.utils.logging import logger


def build_config(argv: list[str] | None = None, base: AppConfig | None = None) -> AppConfig:
    base = base or get_settings()
    parser = argparse.ArgumentParser(
        prog="docsync",
        description="Sync Electron docs, API data and website strings into the content tree.",
    )
    parser.add_argument("--content-dir", type=Path, help="content tree root (default: %(default)s)",
                        default=base.content_dir)
    parser.add_argument("--state-file", type=Path, help="JSON file holding the sync state",
                        default=base.state_file)
    parser.add_argument("--num-versions", type=int, help="supported release lines to keep",
                        default=base.num_supported_versions)
    args = parser.parse_args(argv)
    if args.num_versions < 1:
        parser.error("--num-versions must be at least 1")
    return dataclasses.replace(
        base,
        content_dir=args.content_dir,
        state_file=args.state_file,
        num_supported_versions=args.num_versions,
    )


def main(argv: list[str] | None = None) -> int:
    try:
        config = build_config(argv)
        asyncio.run(run_sync(config))
    except Exception as exc:
        logger.error("Something went wrong. Error: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
