"""
Tile Gaps Daemon

Connects to Sway, binds window and layout events to snap passes, and
hot-reloads the configuration file.
"""
# Module can be run with: python -m tile_gaps

import asyncio
import logging
import signal
import sys
from pathlib import Path
from typing import Optional

from i3ipc.aio import Connection

from .config import ConfigFileWatcher, ConfigLoader
from .errors import ConfigLoadError, SwayIPCError
from .models import TileGapsConfig
from .orchestrator import GapOrchestrator
from .sway_host import SwayWindowHost

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# window events carrying the affected container; window::move is not
# relied on after a mouse drag, focus changes re-run the pass as well
WINDOW_EVENTS = (
    "window::new",
    "window::focus",
    "window::move",
    "window::floating",
    "window::fullscreen_mode",
)

# global layout changes, re-applied to every window
LAYOUT_EVENTS = (
    "workspace::focus",
    "workspace::init",
    "output",
)


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    logging.getLogger().setLevel(logging.DEBUG if debug else logging.INFO)


class TileGapsDaemon:
    """Main daemon for tile gaps."""

    def __init__(self, config_path: Optional[Path] = None, debug: bool = False):
        """
        Initialize tile gaps daemon.

        Args:
            config_path: Configuration file (defaults to ~/.config/tile-gaps/config.toml)
            debug: Force debug logging regardless of configuration
        """
        self.loader = ConfigLoader(config_path)
        self.config_path = self.loader.config_path
        self.debug = debug
        self.config = TileGapsConfig()

        self.sway: Optional[Connection] = None
        self.orchestrator: Optional[GapOrchestrator] = None
        self.file_watcher: Optional[ConfigFileWatcher] = None
        self.running = False

    def load_configuration(self) -> bool:
        """
        Load configuration, keeping the previous one on failure.

        Returns:
            True if the configuration was (re)loaded
        """
        try:
            config = self.loader.load()
        except ConfigLoadError as e:
            logger.error(f"{e.message} - keeping previous configuration")
            return False

        self.config = config
        logging.getLogger().setLevel(
            logging.DEBUG if (self.debug or config.debug_mode) else logging.INFO
        )
        if self.orchestrator:
            self.orchestrator.update_config(config)
        return True

    async def start(self):
        """Start the daemon."""
        logger.info("Starting Tile Gaps Daemon")

        self.load_configuration()

        try:
            self.sway = await Connection(auto_reconnect=True).connect()
        except Exception as e:
            raise SwayIPCError("connect", str(e))
        logger.info("Connected to Sway IPC")

        self.orchestrator = GapOrchestrator(SwayWindowHost(self.sway), self.config)
        self.orchestrator.update_config(self.config)

        self.file_watcher = ConfigFileWatcher(
            config_path=self.config_path,
            reload_callback=self._on_config_file_changed,
            debounce_ms=500,
        )
        self.file_watcher.start()

        self._subscribe_events()

        # gap windows already present at startup
        await self.orchestrator.apply_gaps_all()

        self.running = True
        logger.info("Daemon started successfully")

        await self._run_event_loop()

    async def stop(self):
        """Stop the daemon."""
        logger.info("Stopping daemon...")
        self.running = False

        if self.file_watcher:
            self.file_watcher.stop()

        if self.sway:
            self.sway.main_quit()

        logger.info("Daemon stopped")

    def _subscribe_events(self):
        """Subscribe to Sway events."""
        for event_name in WINDOW_EVENTS:
            self.sway.on(event_name, self._on_window_event)
        for event_name in LAYOUT_EVENTS:
            self.sway.on(event_name, self._on_layout_event)

        logger.info("Subscribed to Sway events")

    async def _on_window_event(self, sway, event):
        """Handle a window event by running a pass for its container."""
        try:
            container = getattr(event, "container", None)
            if container is None:
                return
            logger.debug(f"{event.change} {container.app_id or container.window_class}")
            await self.orchestrator.apply_gaps(container.id)

        except Exception as e:
            logger.error(f"Error handling window::{getattr(event, 'change', '?')} event: {e}")

    async def _on_layout_event(self, sway, event):
        """Handle a global layout change by re-applying gaps to all windows."""
        try:
            logger.debug(f"layout changed: {getattr(event, 'change', '?')}")
            await self.orchestrator.apply_gaps_all()

        except Exception as e:
            logger.error(f"Error handling layout change: {e}")

    async def _on_config_file_changed(self):
        """Reload configuration and re-apply gaps with the new sizes."""
        if self.load_configuration() and self.orchestrator:
            logger.info("Configuration reloaded")
            await self.orchestrator.apply_gaps_all()

    async def _run_event_loop(self):
        """Run main event loop."""
        try:
            await self.sway.main()
        except asyncio.CancelledError:
            logger.info("Event loop cancelled")
        except Exception as e:
            logger.error(f"Event loop error: {e}")


async def main(config_path: Optional[Path] = None, debug: bool = False):
    """Main entry point."""
    configure_logging(debug)
    daemon = TileGapsDaemon(config_path, debug=debug)

    # Setup signal handlers
    loop = asyncio.get_running_loop()

    def signal_handler():
        logger.info("Received shutdown signal")
        asyncio.create_task(daemon.stop())

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, signal_handler)

    try:
        await daemon.start()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except SwayIPCError as e:
        logger.error(f"Fatal error: {e.message}")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
