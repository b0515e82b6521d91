#!/usr/bin/env python3
"""
clipstack Main Entry Point
Wires the history services together and polls the clipboard until stopped
"""
import atexit
import logging
import signal
import sys
import threading

from clipstack.config.paths import AppPaths
from clipstack.config.settings import SettingsManager
from clipstack.infrastructure.command_clipboard import CommandClipboard
from clipstack.services.history_handler import HistoryHandler
from clipstack.services.scheduler_service import ThreadingScheduler
from clipstack.services.thumbnail_service import PillowImageResizer

logger = logging.getLogger(__name__)


class ClipstackDaemon:
    """Clipboard history daemon with dependency injection"""

    def __init__(self, paths: AppPaths = None, clipboard=None, register_shutdown=atexit.register):
        """
        Initialize daemon with all services

        Args:
            paths: File locations; defaults to the XDG directories
            clipboard: Clipboard service; defaults to the wl-clipboard/xclip adapter
            register_shutdown: Registers the final history flush at process exit
        """
        logger.info("Initializing services...")

        self.paths = paths or AppPaths.default()
        self.settings_manager = SettingsManager(self.paths.config_path)
        self.clipboard = clipboard or CommandClipboard()
        self.history_handler = HistoryHandler(
            clipboard=self.clipboard,
            resizer=PillowImageResizer(),
            settings=self.settings_manager,
            scheduler=ThreadingScheduler(),
            history_path=self.paths.history_path,
            register_shutdown=register_shutdown,
        )
        self._stopped = threading.Event()

        logger.info("All services initialized successfully")

    def signal_handler(self, sig, frame):
        """Save history and stop on SIGTERM/SIGINT"""
        logger.info(f"Received signal {sig}, shutting down...")
        self.stop()
        sys.exit(0)

    def stop(self):
        self.history_handler.close()
        self._stopped.set()

    def start(self):
        """Run until a termination signal arrives"""
        signal.signal(signal.SIGTERM, self.signal_handler)
        signal.signal(signal.SIGINT, self.signal_handler)
        # SIGHUP re-reads settings.yml
        signal.signal(signal.SIGHUP, lambda sig, frame: self.settings_manager.reload())

        logger.info(f"Recording clipboard history to {self.paths.history_path}")
        while not self._stopped.wait(1):
            pass


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    daemon = ClipstackDaemon()
    daemon.start()


if __name__ == "__main__":
    main()
