"""
Unit tests for the Sway host adapter.

Trees are built from get_tree-shaped JSON into real i3ipc containers; only
the connection is mocked. Tests check snapshot translation and the exact
IPC command emitted for a geometry write.
"""

from unittest.mock import AsyncMock, Mock

import pytest
from i3ipc.aio import Con

from tile_gaps.models import Region
from tile_gaps.sway_host import SCRATCHPAD_WORKSPACE, SwayWindowHost, get_app_id, rect_to_region

SCREEN_RECT = {"x": 0, "y": 0, "width": 1920, "height": 1080}


def rect(x, y, width, height):
    return {"x": x, "y": y, "width": width, "height": height}


def floating_con(con_id, geometry, **props):
    """Floating container node as Sway reports it."""
    node = {
        "id": con_id,
        "type": "floating_con",
        "rect": geometry,
        "app_id": "firefox",
        "fullscreen_mode": 0,
        "sticky": False,
        "nodes": [],
        "floating_nodes": [],
    }
    node.update(props)
    return node


def workspace(name, floating, output="DP-1", tiled=None):
    return {
        "id": 100 + len(name),
        "type": "workspace",
        "name": name,
        "output": output,
        "rect": SCREEN_RECT,
        "nodes": tiled or [],
        "floating_nodes": floating,
    }


def tree(*workspaces, output="DP-1"):
    return {
        "id": 1,
        "type": "root",
        "name": "root",
        "rect": SCREEN_RECT,
        "floating_nodes": [],
        "nodes": [{
            "id": 2,
            "type": "output",
            "name": output,
            "rect": SCREEN_RECT,
            "floating_nodes": [],
            "nodes": list(workspaces),
        }],
    }


@pytest.fixture
def mock_conn():
    """Mock async i3ipc connection."""
    conn = AsyncMock()
    conn.command.return_value = [Mock(success=True)]
    return conn


def set_tree(conn, data):
    conn.get_tree.return_value = Con(data, None, conn)


class TestHelpers:
    """Test rect and app id helpers."""

    def test_rect_to_region(self):
        assert rect_to_region(Mock(x=10, y=20, width=300, height=400)) == Region(x=10, y=20, width=300, height=400)

    def test_app_id_falls_back_to_window_class(self, mock_conn):
        node = floating_con(1, rect(0, 0, 10, 10), app_id=None, window_properties={"class": "Gimp"})

        assert get_app_id(Con(node, None, mock_conn)) == "Gimp"

    def test_no_app_id(self, mock_conn):
        node = floating_con(1, rect(0, 0, 10, 10), app_id=None)

        assert get_app_id(Con(node, None, mock_conn)) is None


class TestListWindows:
    """Test snapshot translation from the Sway tree."""

    @pytest.mark.asyncio
    async def test_floating_container_snapshot(self, mock_conn):
        set_tree(mock_conn, tree(
            workspace("3", [floating_con(42, rect(100, 50, 800, 600))], output="HDMI-A-1"),
            output="HDMI-A-1",
        ))

        windows = await SwayWindowHost(mock_conn).list_windows()

        assert len(windows) == 1
        window = windows[0]
        assert window.id == 42
        assert window.app_id == "firefox"
        assert window.geometry == Region(x=100, y=50, width=800, height=600)
        assert window.screen_area == Region(x=0, y=0, width=1920, height=1080)
        assert window.workspace == "3"
        assert window.output == "HDMI-A-1"
        assert window.normal
        assert not window.fullscreen
        assert not window.minimized

    @pytest.mark.asyncio
    async def test_tiled_containers_skipped(self, mock_conn):
        tiled = {"id": 1, "type": "con", "rect": rect(0, 0, 960, 1080), "app_id": "foot",
                 "nodes": [], "floating_nodes": []}
        set_tree(mock_conn, tree(workspace("1", [floating_con(2, rect(100, 100, 400, 300))], tiled=[tiled])))

        windows = await SwayWindowHost(mock_conn).list_windows()

        assert [w.id for w in windows] == [2]

    @pytest.mark.asyncio
    async def test_x11_window_types(self, mock_conn):
        """Dialog and utility windows are not normal; an explicit normal type is."""
        set_tree(mock_conn, tree(workspace("1", [
            floating_con(1, rect(0, 0, 400, 300), app_id=None,
                         window_properties={"class": "Gimp"}, window_type="dialog"),
            floating_con(2, rect(0, 0, 400, 300), window_type="utility"),
            floating_con(3, rect(0, 0, 400, 300), window_type="normal"),
        ])))

        windows = {w.id: w for w in await SwayWindowHost(mock_conn).list_windows()}

        assert not windows[1].normal
        assert not windows[2].normal
        assert windows[3].normal

    @pytest.mark.asyncio
    async def test_window_flags(self, mock_conn):
        set_tree(mock_conn, tree(workspace("1", [
            floating_con(1, rect(0, 0, 400, 300), fullscreen_mode=1),
            floating_con(3, rect(0, 0, 400, 300), sticky=True),
            floating_con(4, rect(0, 0, 400, 300), app_id=None),
        ])))

        windows = {w.id: w for w in await SwayWindowHost(mock_conn).list_windows()}

        assert windows[1].fullscreen
        assert windows[3].sticky
        assert not windows[4].normal

    @pytest.mark.asyncio
    async def test_scratchpad_window_minimized(self, mock_conn):
        set_tree(mock_conn, tree(
            workspace(SCRATCHPAD_WORKSPACE, [floating_con(7, rect(0, 0, 400, 300))], output="__i3"),
            output="__i3",
        ))

        windows = await SwayWindowHost(mock_conn).list_windows()

        assert windows[0].minimized


class TestSetGeometry:
    """Test geometry writes."""

    @pytest.mark.asyncio
    async def test_command_string(self, mock_conn):
        host = SwayWindowHost(mock_conn)

        result = await host.set_geometry(42, Region(x=12, y=12, width=942, height=1056))

        assert result is True
        mock_conn.command.assert_awaited_once_with(
            "[con_id=42] move absolute position 12 12, resize set 942 1056"
        )

    @pytest.mark.asyncio
    async def test_failed_reply(self, mock_conn):
        mock_conn.command.return_value = [Mock(success=True), Mock(success=False, error="No matching node")]

        assert await SwayWindowHost(mock_conn).set_geometry(42, Region(x=0, y=0, width=10, height=10)) is False

    @pytest.mark.asyncio
    async def test_empty_reply(self, mock_conn):
        mock_conn.command.return_value = []

        assert await SwayWindowHost(mock_conn).set_geometry(42, Region(x=0, y=0, width=10, height=10)) is False
