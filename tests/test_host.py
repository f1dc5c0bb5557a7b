"""
Unit tests for the in-memory host.
"""

import pytest
from pubsub import pub

from ptile import topics
from ptile.geometry import Area, Edge


@pytest.mark.unit
class TestMemoryHost:
    def test_create_frame_opens_panes_in_order(self, host):
        frame = host.create_frame("f", 100, 80, panes=["a", "b", "c"])

        assert host.list_panes(frame) == ["a", "b", "c"]
        # Newly opened panes take focus
        assert host.focused_pane(frame) == "c"

    def test_open_pane_splits_focused_region(self, host):
        frame = host.create_frame("f", 100, 80, panes=["a"])

        host.open_pane(frame, "b", notify=False)

        assert host.areas(frame) == {
            "a": Area(0, 0, 100, 40),
            "b": Area(0, 40, 100, 40),
        }

    def test_open_duplicate_pane_rejected(self, host):
        frame = host.create_frame("f", 100, 80, panes=["a"])

        with pytest.raises(ValueError):
            host.open_pane(frame, "a")

    def test_open_and_close_publish_events(self, host):
        frame = host.create_frame("f", 100, 80)
        received = []

        def listener(frame, pane):
            received.append(pane)

        pub.subscribe(listener, topics.PANE_OPENED)
        pub.subscribe(listener, topics.PANE_CLOSED)

        host.open_pane(frame, "a")
        host.close_pane(frame, "a")

        assert received == ["a", "a"]

    def test_close_focused_pane_moves_focus(self, host):
        frame = host.create_frame("f", 100, 80, panes=["a", "b", "c"])
        host.focus(host.region_of(frame, "b"))

        host.close_pane(frame, "b", notify=False)

        assert host.list_panes(frame) == ["a", "c"]
        assert host.focused_pane(frame) == "c"

    def test_close_last_pane_clears_focus(self, host):
        frame = host.create_frame("f", 100, 80, panes=["a"])

        host.close_pane(frame, "a", notify=False)

        assert host.list_regions(frame) == []
        assert host.focused_region(frame) is None

    def test_close_unknown_pane_rejected(self, host):
        frame = host.create_frame("f", 100, 80, panes=["a"])

        with pytest.raises(ValueError):
            host.close_pane(frame, "z")

    def test_destroy_all_regions_except(self, host):
        frame = host.create_frame("f", 100, 80, panes=["a", "b", "c"])
        old = host.list_regions(frame)

        root = host.destroy_all_regions_except(frame, "b")

        assert host.list_regions(frame) == [root]
        assert root.area == Area(0, 0, 100, 80)
        assert host.focused_pane(frame) == "b"
        assert not any(region.live for region in old)

    def test_destroyed_region_cannot_be_used(self, host):
        frame = host.create_frame("f", 100, 80, panes=["a", "b"])
        old = host.list_regions(frame)[0]
        host.destroy_all_regions_except(frame, "a")

        with pytest.raises(ValueError):
            host.split(old, 10, Edge.TOP)
        with pytest.raises(ValueError):
            host.focus(old)

    def test_split_keeps_layout_order(self, host):
        """The part adjoining the split edge is listed first for every edge."""
        frame = host.create_frame("f", 100, 80, panes=["a"])
        root = host.list_regions(frame)[0]

        first, second = host.split(root, 30, Edge.RIGHT)

        assert first is root
        assert host.list_regions(frame) == [first, second]
        assert second.area == Area(0, 0, 70, 80)
        assert first.area == Area(70, 0, 30, 80)
