"""
Shared pytest fixtures for ptile tests.
"""

import pytest
from pubsub import pub

from ptile.geometry import Area
from ptile.host import MemoryHost


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a real host")


@pytest.fixture(autouse=True)
def clean_bus():
    """Drop all bus listeners after each test."""
    yield
    pub.unsubAll()


@pytest.fixture
def mock_pane():
    """Factory fixture for creating mock pane objects."""

    class MockPane:
        def __init__(self, object_id=1, title="test"):
            self.object_id = object_id
            self.title = title

        def __hash__(self):
            return hash(self.object_id)

        def __eq__(self, other):
            if not isinstance(other, MockPane):
                return False
            return self.object_id == other.object_id

        def __repr__(self):
            return f"MockPane({self.object_id})"

    return MockPane


@pytest.fixture
def assert_partition():
    """Check that areas tile a frame exactly."""

    def check(areas, frame_area):
        areas = list(areas)
        for area in areas:
            assert area.x >= frame_area.x
            assert area.y >= frame_area.y
            assert area.x + area.width <= frame_area.x + frame_area.width
            assert area.y + area.height <= frame_area.y + frame_area.height
        for i, a in enumerate(areas):
            for b in areas[i + 1 :]:
                assert not a.overlaps(b), f"{a} overlaps {b}"
        assert sum(area.size for area in areas) == frame_area.size

    return check


@pytest.fixture
def standard_area():
    """Standard 1920x1080 area for layout tests."""
    return Area(0, 0, 1920, 1080)


@pytest.fixture
def narrow_area():
    """Terminal-sized 100x60 area, below the tall threshold."""
    return Area(0, 0, 100, 60)


@pytest.fixture
def host():
    return MemoryHost()


@pytest.fixture
def wide_frame(host):
    """200x60 frame showing panes a, b, c, d with d focused."""
    return host.create_frame("wide", 200, 60, panes=["a", "b", "c", "d"])
