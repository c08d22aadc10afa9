#!/usr/bin/env python3
"""
Tile Gaps CLI

Runs the daemon, previews the snap anchor grid for a screen, and shows
the effective configuration.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from .config import ConfigLoader
from .errors import TileGapsError
from .grid import build_grid, compute_available_region
from .models import Edge, Region


def grid_table(grid, edge: Edge) -> Table:
    """Render one grid edge as a Rich table."""
    table = Table(title=f"{edge.value} edge", show_header=True, header_style="bold")
    table.add_column("Anchor")
    table.add_column("Closed", justify="right")
    table.add_column("Gapped", justify="right")
    for name, anchor in grid.edge(edge):
        table.add_row(name, str(anchor.closed), str(anchor.gapped))
    return table


class TileGapsCLI:
    """Command-line front end for tile gaps."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def cmd_run(self, args) -> int:
        """Start the daemon in the foreground."""
        from .daemon import main as daemon_main

        asyncio.run(daemon_main(args.config, debug=args.debug))
        return 0

    def _load(self, args):
        """Load configuration, reporting fields that fell back to defaults."""
        loader = ConfigLoader(args.config)
        config = loader.load()
        for issue in loader.issues:
            self.console.print(f"[yellow]Warning {issue.code.value}:[/yellow] {issue.message}")
        return config, loader.issues

    def cmd_grid(self, args) -> int:
        """Print the snap anchor grid for a screen area."""
        config, _ = self._load(args)
        screen = Region(x=args.x, y=args.y, width=args.width, height=args.height)
        region = compute_available_region(screen, config.gaps)
        grid = build_grid(region, config.gaps)

        self.console.print(f"Available region: {region} (right={region.right}, bottom={region.bottom})")
        for edge in Edge:
            self.console.print(grid_table(grid, edge))
        return 0

    def cmd_config(self, args) -> int:
        """Print the effective configuration and rejected values as JSON."""
        config, issues = self._load(args)
        self.console.print_json(data={
            "config": config.model_dump(),
            "invalid_values": [issue.to_dict() for issue in issues],
        }, default=str)
        return 0

    def run(self, argv=None) -> int:
        """Parse arguments and dispatch."""
        parser = argparse.ArgumentParser(
            prog="tile-gaps",
            description="Uniform gaps between floating Sway windows"
        )
        parser.add_argument("--config", type=Path, default=None, help="Path to config.toml")

        subparsers = parser.add_subparsers(dest="command", help="Command to execute")

        run_parser = subparsers.add_parser("run", help="Run the daemon")
        run_parser.add_argument("--debug", action="store_true", help="Enable debug logging")

        grid_parser = subparsers.add_parser("grid", help="Show snap anchors for a screen")
        grid_parser.add_argument("--width", type=int, required=True)
        grid_parser.add_argument("--height", type=int, required=True)
        grid_parser.add_argument("--x", type=int, default=0)
        grid_parser.add_argument("--y", type=int, default=0)

        subparsers.add_parser("config", help="Show effective configuration")

        args = parser.parse_args(argv)

        if not args.command:
            parser.print_help()
            return 1

        handlers = {
            "run": self.cmd_run,
            "grid": self.cmd_grid,
            "config": self.cmd_config,
        }

        try:
            return handlers[args.command](args)
        except TileGapsError as e:
            self.console.print(f"[red]Error {e.code.value}:[/red] {e.message}")
            if e.suggestion:
                self.console.print(f"  → {e.suggestion}")
            return 1


def main():
    """Main entry point."""
    sys.exit(TileGapsCLI().run())


if __name__ == "__main__":
    main()
