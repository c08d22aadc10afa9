"""
Unit tests for window eligibility filtering.
"""

from tile_gaps.filtering import is_ignored_peer, is_ignored_window, is_maximized
from tile_gaps.models import Region, TileGapsConfig

SMALL = Region(x=100, y=100, width=400, height=300)
FULL = Region(x=0, y=0, width=1920, height=1080)


class TestIgnoredWindow:
    """Test which windows are never gapped."""

    def test_regular_window_accepted(self, make_window, default_config):
        assert not is_ignored_window(make_window(1, SMALL), default_config)

    def test_none_ignored(self, default_config):
        assert is_ignored_window(None, default_config)

    def test_non_normal_ignored(self, make_window, default_config):
        assert is_ignored_window(make_window(1, SMALL, normal=False), default_config)

    def test_moving_ignored(self, make_window, default_config):
        assert is_ignored_window(make_window(1, SMALL, moving=True), default_config)

    def test_fullscreen_ignored(self, make_window, default_config):
        assert is_ignored_window(make_window(1, SMALL, fullscreen=True), default_config)

    def test_minimized_ignored(self, make_window, default_config):
        assert is_ignored_window(make_window(1, SMALL, minimized=True), default_config)

    def test_maximized_by_geometry_ignored(self, make_window, default_config):
        window = make_window(1, FULL)

        assert is_maximized(window)
        assert is_ignored_window(window, default_config)

    def test_maximized_flag_ignored(self, make_window, default_config):
        assert is_ignored_window(make_window(1, SMALL, maximized=True), default_config)

    def test_maximized_included_when_configured(self, make_window):
        config = TileGapsConfig(include_maximized=True)

        assert not is_ignored_window(make_window(1, FULL), config)


class TestIgnoredPeer:
    """Test which windows count as neighbours."""

    def test_same_workspace_and_output(self, make_window, default_config):
        window = make_window(1, SMALL)
        other = make_window(2, SMALL)

        assert not is_ignored_peer(window, other, default_config)

    def test_self_ignored(self, make_window, default_config):
        window = make_window(1, SMALL)

        assert is_ignored_peer(window, window, default_config)

    def test_other_workspace_ignored(self, make_window, default_config):
        window = make_window(1, SMALL)
        other = make_window(2, SMALL, workspace="2")

        assert is_ignored_peer(window, other, default_config)

    def test_sticky_spans_workspaces(self, make_window, default_config):
        window = make_window(1, SMALL)

        assert not is_ignored_peer(window, make_window(2, SMALL, workspace="2", sticky=True), default_config)
        assert not is_ignored_peer(make_window(3, SMALL, sticky=True), make_window(4, SMALL, workspace="2"), default_config)

    def test_other_output_ignored(self, make_window, default_config):
        window = make_window(1, SMALL)
        other = make_window(2, SMALL, output="HDMI-A-1")

        assert is_ignored_peer(window, other, default_config)

    def test_minimized_ignored(self, make_window, default_config):
        window = make_window(1, SMALL)
        other = make_window(2, SMALL, minimized=True)

        assert is_ignored_peer(window, other, default_config)

    def test_ignored_window_is_ignored_peer(self, make_window, default_config):
        window = make_window(1, SMALL)
        other = make_window(2, SMALL, fullscreen=True)

        assert is_ignored_peer(window, other, default_config)
