"""
Tile Gaps

Keeps uniform gaps between floating windows and the screen edges, and
between neighbouring floating windows, on the Sway window manager.
"""

__version__ = "1.0.0"
__author__ = "NixOS Configuration Team"
