"""
Geometry Primitives

Rectangles, edges and the split operation every layout is built from.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple


class Axis(Enum):
    """Axis along which an area is measured or split."""

    HORIZONTAL = auto()  # width
    VERTICAL = auto()  # height


class Edge(Enum):
    """Side of an area a split is carved from."""

    TOP = auto()
    BOTTOM = auto()
    LEFT = auto()
    RIGHT = auto()

    @property
    def axis(self) -> Axis:
        if self in (Edge.LEFT, Edge.RIGHT):
            return Axis.HORIZONTAL
        return Axis.VERTICAL


@dataclass(frozen=True)
class Area:
    """Area with position and dimensions."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def extent(self, axis: Axis) -> int:
        """Length of the area along an axis."""
        return self.width if axis == Axis.HORIZONTAL else self.height

    def overlaps(self, other: Area) -> bool:
        """Whether the areas share at least one cell."""
        if self.size == 0 or other.size == 0:
            return False
        return (
            self.x < other.x + other.width
            and other.x < self.x + self.width
            and self.y < other.y + other.height
            and other.y < self.y + self.height
        )

    @property
    def size(self) -> int:
        return self.width * self.height


def split(area: Area, size: int, edge: Edge) -> Tuple[Area, Area]:
    """
    Divide an area into two adjoining areas.

    Args:
        area: Area to divide
        size: Length of the first part along the split axis. Negative values
            are measured from the far edge, i.e. the second part gets -size.
        edge: Side the first part adjoins

    Returns:
        (first, second) where first touches ``edge`` and second is the rest

    Neither part is allowed to reach 0 while the extent is at least 2: the
    size is clamped to [1, extent - 1]. An extent of 1 or 0 cannot hold two
    visible parts, so first gets all of it and second is empty.
    """
    extent = area.extent(edge.axis)
    if size < 0:
        size = extent + size

    # Both parts keep at least one cell when the extent allows it
    if extent > 1:
        size = max(1, min(size, extent - 1))
    else:
        size = extent
    rest = extent - size

    if edge == Edge.LEFT:
        return (
            Area(area.x, area.y, size, area.height),
            Area(area.x + size, area.y, rest, area.height),
        )
    if edge == Edge.RIGHT:
        return (
            Area(area.x + rest, area.y, size, area.height),
            Area(area.x, area.y, rest, area.height),
        )
    if edge == Edge.TOP:
        return (
            Area(area.x, area.y, area.width, size),
            Area(area.x, area.y + size, area.width, rest),
        )
    return (
        Area(area.x, area.y + rest, area.width, size),
        Area(area.x, area.y, area.width, rest),
    )
