"""
Entrypoint: load config, set up the run timestamp and log file,
read the pids, create the image directory and run the download loop.
Any failure is logged here and turned into exit status 1.
"""

import logging
import sys
from datetime import datetime

from dotenv import load_dotenv

from .config import Config, log_settings
from .fetcher import HTTPFetcher
from .pids import read_pids
from .run_context import LOG_FORMAT, create_image_dir, make_timestamp, setup_logging
from .storage import ImageStore
from .worker import Downloader, RunSummary


class GetJpgApp:
    """Wires the components of a single download run together."""

    def __init__(self, config_path: str = None, now: datetime = None, sleep=None):
        self.config_path = config_path
        self.now = now
        self.sleep = sleep
        self.config = None
        self.settings = None
        self.timestamp = None
        self.log_path = None
        self.image_dir = None
        self.logger = None

    def _load_config(self):
        self.config = Config(self.config_path)
        self.settings = self.config.settings

    def _setup_logging(self):
        """Create the log file named after the run timestamp."""
        log_config = self.config.logging

        self.timestamp = make_timestamp(self.now)
        self.log_path = setup_logging(
            self.timestamp,
            log_dir=log_config.get('dir', 'logs'),
            level=log_config.get('level', 'INFO'),
            fmt=log_config.get('format', LOG_FORMAT),
        )
        # fixed name: under "python -m getjpg.app" __name__ is "__main__"
        self.logger = logging.getLogger("getjpg.app")

    def start_app(self) -> RunSummary:
        """Run all steps in order; exceptions propagate to main()."""
        self._load_config()
        self._setup_logging()
        log_settings(self.settings)

        pids = read_pids(self.settings.pid_file)

        self.image_dir = create_image_dir(self.settings.image_dir, self.timestamp)
        self.logger.info(f"Images will be saved in {self.image_dir}/")

        fetcher_config = self.config.fetcher
        with HTTPFetcher(
            timeout=fetcher_config.get('timeout', 30.0),
            user_agent=fetcher_config.get('user_agent', 'getjpg/1.0'),
        ) as fetcher:
            kwargs = {} if self.sleep is None else {'sleep': self.sleep}
            downloader = Downloader(self.settings, fetcher, ImageStore(self.image_dir), **kwargs)
            return downloader.run(pids)


def main(config_path: str = None) -> int:
    """Main entry point; returns the process exit status."""
    load_dotenv()
    app = GetJpgApp(config_path)

    try:
        app.start_app()
    except KeyboardInterrupt:
        if app.logger:
            app.logger.error("Interrupted, aborting run")
        else:
            print("Interrupted, aborting run", file=sys.stderr)
        return 1
    except Exception as e:
        if app.logger:
            app.logger.error(f"Fatal error: {e}")
        else:
            print(f"Fatal error during startup: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
