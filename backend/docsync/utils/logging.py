"""
DocSync — Sync logger.

Everything goes to stdout so the sync log and the final error line of a
failed run end up in the same CI output.
"""

import logging
import sys
import time
from contextlib import contextmanager
from typing import Generator

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-7s | %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stdout,
)

logger = logging.getLogger("docsync")


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


@contextmanager
def step_timer(step_name: str) -> Generator[None, None, None]:
    """Log the start of a remote step, then its duration or its failure."""
    logger.info("▶ %s", step_name)
    start = time.perf_counter()
    try:
        yield
    except Exception as exc:
        logger.error("✘ %s — failed after %.0f ms: %s", step_name, _elapsed_ms(start), exc)
        raise
    logger.info("✔ %s — %.0f ms", step_name, _elapsed_ms(start))
