"""
Mastered Layout

Wraps another layout with a master area on one edge.
"""

from __future__ import annotations
from typing import Any, Hashable, List, Optional, TYPE_CHECKING

from .layout_base import Canvas, Layout
from .layout_stack import StackLayout
from ..geometry import Edge

if TYPE_CHECKING:
    from ..config import LayoutConfig


class MasteredLayout(Layout):
    """
    Master composition.

    The first ``config.nmaster`` panes are stacked in a master area carved
    from ``edge`` and sized by ``config.mfact``; the remaining panes are
    handed to ``inner`` in what is left. Either area takes the whole region
    when the other one has no panes.

    Both parameters are read from the config on every call, so changing them
    takes effect on the next arrangement.
    """

    def __init__(self, edge: Edge = Edge.LEFT, inner: Optional[Layout] = None):
        self.edge = edge
        self.inner = inner if inner is not None else StackLayout()
        self.master_layout = StackLayout()

    @property
    def name(self) -> str:
        return f"mastered-{self.edge.name.lower()}({self.inner.name})"

    def master_size(self, extent: int, config: "LayoutConfig") -> int:
        return round(config.mfact * extent)

    def arrange(
        self,
        panes: List[Hashable],
        region: Any,
        canvas: Canvas,
        config: "LayoutConfig",
    ):
        master = panes[: config.nmaster]
        stack = panes[config.nmaster :]

        master_region = stack_region = region
        if master and stack:
            msize = self.master_size(canvas.extent(region, self.edge.axis), config)
            master_region, stack_region = canvas.split(region, msize, self.edge)

        if stack:
            self.inner.arrange(stack, stack_region, canvas, config)
        if master:
            self.master_layout.arrange(master, master_region, canvas, config)
