"""
Sequential download loop: for each pid build the image URL, fetch it,
save 200 responses and sleep before the next request.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List

from .config import Settings
from .fetcher import HTTPFetcher
from .storage import ImageStore
from .urls import build_image_url, image_filename

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    processed: int = 0
    saved: int = 0
    skipped: int = 0
    saved_paths: List[Path] = field(default_factory=list)


class Downloader:
    """Fetches one image per pid, strictly one at a time and in list order."""

    def __init__(self, settings: Settings, fetcher: HTTPFetcher, storage: ImageStore,
                 sleep: Callable[[float], None] = time.sleep):
        self.settings = settings
        self.fetcher = fetcher
        self.storage = storage
        self.sleep = sleep

    def run(self, pids: List[str]) -> RunSummary:
        """Process every pid. A transport error from the fetcher aborts the remaining pids."""
        summary = RunSummary()
        logger.info(f"Processing started, {len(pids)} pids.")

        for pid in pids:
            saved_path = self._process_pid(pid)
            summary.processed += 1
            if saved_path is None:
                summary.skipped += 1
            else:
                summary.saved += 1
                summary.saved_paths.append(saved_path)

            logger.info(f"Sleeping for {self.settings.delay_in_ms}ms")
            # a negative delay means no pause
            self.sleep(max(self.settings.delay_in_ms, 0) / 1000.0)

        logger.info(
            f"Processing finished: {summary.processed} pids, "
            f"{summary.saved} images saved, {summary.skipped} skipped."
        )
        return summary

    def _process_pid(self, pid: str):
        """Fetch a single pid; return the saved path, or None for a non-200 answer."""
        logger.info(f"About to process pid {pid}")

        image_url = build_image_url(self.settings, pid)
        logger.info(image_url)

        result = self.fetcher.fetch(image_url)
        logger.info(result.status)
        logger.debug(f"Received {result.size} bytes in {result.fetch_time:.3f}s")

        if not result.success:
            logger.info("File not created due to non-200 status code")
            return None

        image_path = self.storage.save(image_filename(pid), result.content)
        logger.info(f"Generated file: {image_path}")
        return image_path
