"""
Host Interface

The collaborator that owns frames, regions and panes. The engine drives a
host through this interface; MemoryHost is a complete in-memory host used by
tests and by embedders that apply geometry themselves.
"""

from __future__ import annotations
from abc import abstractmethod
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

from pubsub import pub

from . import topics
from .geometry import Area, Axis, Edge, split
from .layouts.layout_base import Canvas


class Host(Canvas):
    """
    Abstract host.

    Besides the canvas operations layouts use, a host lists the regions of a
    frame in layout order, tracks focus and can collapse a frame to a single
    region.
    """

    @abstractmethod
    def list_regions(self, frame: Any) -> List[Any]:
        """Regions of a frame in layout order."""
        pass

    @abstractmethod
    def focused_region(self, frame: Any) -> Optional[Any]:
        """Currently focused region of a frame."""
        pass

    @abstractmethod
    def pane_of(self, region: Any) -> Hashable:
        """Pane shown in a region."""
        pass

    @abstractmethod
    def destroy_all_regions_except(self, frame: Any, keep: Hashable) -> Any:
        """
        Collapse a frame to one region showing ``keep``.

        Returns:
            The surviving region, covering the whole frame
        """
        pass

    @abstractmethod
    def focus(self, region: Any):
        """Give input focus to a region."""
        pass

    def list_panes(self, frame: Any) -> List[Hashable]:
        """Panes of a frame in layout order."""
        return [self.pane_of(region) for region in self.list_regions(frame)]

    def focused_pane(self, frame: Any) -> Optional[Hashable]:
        region = self.focused_region(frame)
        return self.pane_of(region) if region is not None else None

    def region_of(self, frame: Any, pane: Hashable) -> Optional[Any]:
        """Region showing a pane, or None."""
        for region in self.list_regions(frame):
            if self.pane_of(region) == pane:
                return region
        return None


class MemoryRegion:
    """A rectangle of a MemoryFrame showing one pane."""

    def __init__(self, frame: "MemoryFrame", area: Area, pane: Hashable = None):
        self.frame = frame
        self.area = area
        self.pane = pane
        self.live = True

    def __repr__(self):
        a = self.area
        return f"<MemoryRegion {a.width}x{a.height}+{a.x}+{a.y} pane={self.pane!r}>"


class MemoryFrame:
    """A frame managed by MemoryHost."""

    def __init__(self, name: str = "frame", width: int = 1920, height: int = 1080):
        self.name = name
        self.area = Area(0, 0, width, height)
        self.regions: List[MemoryRegion] = []
        self.focused: Optional[MemoryRegion] = None

    def __repr__(self):
        return f"<MemoryFrame {self.name} {self.area.width}x{self.area.height}>"


class MemoryHost(Host):
    """
    In-memory host.

    Regions are kept in layout order. Splitting replaces a region with its
    two parts, the part adjoining the split edge first.
    """

    def __init__(self):
        self.frames: Dict[str, MemoryFrame] = {}

    def create_frame(
        self,
        name: str = "frame",
        width: int = 1920,
        height: int = 1080,
        panes: Iterable[Hashable] = (),
    ) -> MemoryFrame:
        """Create a frame, optionally opening panes in it without notifying."""
        frame = MemoryFrame(name, width, height)
        self.frames[name] = frame
        for pane in panes:
            self.open_pane(frame, pane, notify=False)
        return frame

    def open_pane(self, frame: MemoryFrame, pane: Hashable, notify: bool = True):
        """
        Show a new pane by splitting the focused region in half.

        The new pane is focused. Publishes PANE_OPENED unless notify is False.

        Raises:
            ValueError: If the pane is already shown in the frame
        """
        if self.region_of(frame, pane) is not None:
            raise ValueError(f"Pane {pane!r} is already in {frame!r}")

        if frame.focused is None:
            region = MemoryRegion(frame, frame.area, pane)
            frame.regions.append(region)
        else:
            current = frame.focused
            _, region = self.split(current, current.area.height // 2, Edge.TOP)
            region.pane = pane
        frame.focused = region

        if notify:
            pub.sendMessage(topics.PANE_OPENED, frame=frame, pane=pane)

    def close_pane(self, frame: MemoryFrame, pane: Hashable, notify: bool = True):
        """
        Remove a pane's region. Focus moves to the region that took its place.

        The freed area stays unassigned until the next arrangement. Publishes
        PANE_CLOSED unless notify is False.

        Raises:
            ValueError: If the pane is not shown in the frame
        """
        region = self.region_of(frame, pane)
        if region is None:
            raise ValueError(f"Pane {pane!r} is not in {frame!r}")

        idx = frame.regions.index(region)
        frame.regions.remove(region)
        region.live = False
        if frame.focused is region:
            if frame.regions:
                frame.focused = frame.regions[min(idx, len(frame.regions) - 1)]
            else:
                frame.focused = None

        if notify:
            pub.sendMessage(topics.PANE_CLOSED, frame=frame, pane=pane)

    def areas(self, frame: MemoryFrame) -> Dict[Hashable, Area]:
        """Current pane geometry of a frame, in layout order."""
        return {region.pane: region.area for region in frame.regions}

    # Host interface

    def list_regions(self, frame: MemoryFrame) -> List[MemoryRegion]:
        return list(frame.regions)

    def focused_region(self, frame: MemoryFrame) -> Optional[MemoryRegion]:
        return frame.focused

    def pane_of(self, region: MemoryRegion) -> Hashable:
        return region.pane

    def destroy_all_regions_except(
        self, frame: MemoryFrame, keep: Hashable
    ) -> MemoryRegion:
        if self.region_of(frame, keep) is None:
            raise ValueError(f"Pane {keep!r} is not in {frame!r}")

        for region in frame.regions:
            region.live = False
        root = MemoryRegion(frame, frame.area, keep)
        frame.regions = [root]
        frame.focused = root
        return root

    def focus(self, region: MemoryRegion):
        self._check_live(region)
        region.frame.focused = region

    def extent(self, region: MemoryRegion, axis: Axis) -> int:
        return region.area.extent(axis)

    def split(
        self, region: MemoryRegion, size: int, edge: Edge
    ) -> Tuple[MemoryRegion, MemoryRegion]:
        self._check_live(region)
        first_area, second_area = split(region.area, size, edge)

        # The existing region becomes the first part so focus stays put
        region.area = first_area
        second = MemoryRegion(region.frame, second_area, region.pane)

        # Listing order follows split order, not screen position, so panes
        # come back in the order layouts bound them for every edge
        regions = region.frame.regions
        regions.insert(regions.index(region) + 1, second)
        return region, second

    def bind_pane(self, region: MemoryRegion, pane: Hashable):
        self._check_live(region)
        region.pane = pane

    def _check_live(self, region: MemoryRegion):
        if not region.live:
            raise ValueError(f"{region!r} has been destroyed")
