"""
Layout Base Classes

Provides the Layout interface and the canvas layouts draw on.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, List, Optional, Tuple, TYPE_CHECKING

from ..geometry import Area, Axis, Edge, split

if TYPE_CHECKING:
    from ..config import LayoutConfig


class Canvas(ABC):
    """
    Surface a layout splits regions on and binds panes to.

    Regions are opaque to layouts: a pure geometry canvas uses Area values,
    a host uses its own window objects.
    """

    @abstractmethod
    def extent(self, region: Any, axis: Axis) -> int:
        """Length of a region along an axis."""
        pass

    @abstractmethod
    def split(self, region: Any, size: int, edge: Edge) -> Tuple[Any, Any]:
        """Split a region, see ptile.geometry.split for the size convention."""
        pass

    @abstractmethod
    def bind_pane(self, region: Any, pane: Hashable):
        """Show a pane in a region."""
        pass


class GeometryCanvas(Canvas):
    """Canvas working on plain Area values, recording pane assignments."""

    def __init__(self):
        self.assignments: Dict[Hashable, Area] = {}

    def extent(self, region: Area, axis: Axis) -> int:
        return region.extent(axis)

    def split(self, region: Area, size: int, edge: Edge) -> Tuple[Area, Area]:
        return split(region, size, edge)

    def bind_pane(self, region: Area, pane: Hashable):
        self.assignments[pane] = region


class Layout(ABC):
    """Abstract base class for tiling layouts."""

    @abstractmethod
    def arrange(
        self,
        panes: List[Hashable],
        region: Any,
        canvas: Canvas,
        config: "LayoutConfig",
    ):
        """
        Split region on canvas and bind every pane to one of the parts.

        Args:
            panes: Non-empty list of panes in layout order
            region: Region to fill
            canvas: Canvas providing split and bind operations
            config: Live layout parameters
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Layout name for display."""
        pass

    def calculate(
        self,
        panes: List[Hashable],
        area: Area,
        config: Optional["LayoutConfig"] = None,
    ) -> Dict[Hashable, Area]:
        """
        Calculate pane geometry without touching a host.

        Returns:
            Dictionary mapping panes to their area, in layout order
        """
        if not panes:
            return {}
        if config is None:
            from ..config import LayoutConfig

            config = LayoutConfig(layout=self)

        canvas = GeometryCanvas()
        self.arrange(list(panes), area, canvas, config)
        return {pane: canvas.assignments[pane] for pane in panes}
