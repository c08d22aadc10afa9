"""Entry point for the tile-gaps daemon when run as a module."""

import asyncio

from .daemon import main

if __name__ == "__main__":
    asyncio.run(main())
