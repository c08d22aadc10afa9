"""
File watcher for the tile gaps configuration file.

Monitors config.toml for changes and triggers a debounced reload.
"""

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable, Optional

from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler, FileSystemEvent

logger = logging.getLogger(__name__)


class ConfigFileHandler(FileSystemEventHandler):
    """Handles file system events for the configuration file."""

    def __init__(
        self,
        config_path: Path,
        callback: Callable[[], Awaitable[None]],
        loop: asyncio.AbstractEventLoop,
        debounce_ms: int = 500,
    ):
        """
        Initialize file handler.

        Args:
            config_path: Configuration file to react to
            callback: Async function to call after the file changed
            loop: Event loop the callback runs on (events arrive on the observer thread)
            debounce_ms: Debounce delay in milliseconds
        """
        super().__init__()
        self.config_path = config_path
        self.callback = callback
        self.loop = loop
        self.debounce_ms = debounce_ms
        self.debounce_task: Optional[asyncio.Task] = None

    def on_modified(self, event: FileSystemEvent):
        """Handle file modification event."""
        self._handle(event.src_path, event.is_directory)

    def on_created(self, event: FileSystemEvent):
        """Handle file creation event (editors that write a new file)."""
        self._handle(event.src_path, event.is_directory)

    def on_moved(self, event: FileSystemEvent):
        """Handle atomic rename onto the configuration file."""
        self._handle(event.dest_path, event.is_directory)

    def _handle(self, src_path, is_directory: bool) -> None:
        if is_directory:
            return
        if Path(src_path).name != self.config_path.name:
            return

        logger.debug(f"File modified: {src_path}")
        self.loop.call_soon_threadsafe(self.schedule_reload)

    def schedule_reload(self) -> None:
        """Restart the debounce timer; must run on the event loop."""
        if self.debounce_task:
            self.debounce_task.cancel()

        self.debounce_task = self.loop.create_task(self._debounced_reload())

    async def _debounced_reload(self):
        """Execute debounced reload after delay."""
        try:
            await asyncio.sleep(self.debounce_ms / 1000.0)
            logger.info(f"Configuration file changed: {self.config_path}")
            await self.callback()

        except asyncio.CancelledError:
            # Debounce was cancelled - another event came in
            pass
        except Exception as e:
            logger.error(f"Error in debounced reload: {e}")


class ConfigFileWatcher:
    """Watches the configuration file and triggers reloads."""

    def __init__(
        self,
        config_path: Path,
        reload_callback: Callable[[], Awaitable[None]],
        debounce_ms: int = 500,
    ):
        """
        Initialize file watcher.

        Args:
            config_path: Configuration file to watch
            reload_callback: Async function to call on file changes
            debounce_ms: Debounce delay in milliseconds
        """
        self.config_path = config_path
        self.reload_callback = reload_callback
        self.debounce_ms = debounce_ms

        self.observer: Optional[Observer] = None
        self.handler: Optional[ConfigFileHandler] = None
        self.running = False

    def start(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        """Start file watcher."""
        if self.running:
            logger.warning("File watcher already running")
            return

        watch_dir = self.config_path.parent
        if not watch_dir.is_dir():
            logger.info(f"Configuration directory {watch_dir} missing, hot reload disabled")
            return

        logger.info(f"Starting file watcher for {self.config_path}")

        self.handler = ConfigFileHandler(
            config_path=self.config_path,
            callback=self.reload_callback,
            loop=loop or asyncio.get_running_loop(),
            debounce_ms=self.debounce_ms,
        )

        self.observer = Observer()
        self.observer.schedule(self.handler, path=str(watch_dir), recursive=False)
        self.observer.start()
        self.running = True

        logger.info("File watcher started")

    def stop(self):
        """Stop file watcher."""
        if not self.running:
            return

        logger.info("Stopping file watcher")

        if self.observer:
            self.observer.stop()
            self.observer.join()

        self.running = False
        logger.info("File watcher stopped")

    def is_running(self) -> bool:
        return self.running
