"""
Tall Layout

Master beside the stack on wide frames, above it on narrow ones.
"""

from __future__ import annotations
from typing import Any, Hashable, List, TYPE_CHECKING

from .layout_base import Canvas, Layout
from .layout_mastered import MasteredLayout
from .layout_stack import StackLayout
from ..geometry import Axis, Edge

if TYPE_CHECKING:
    from ..config import LayoutConfig


class TallLayout(Layout):
    """
    Tall layout - the default policy.

    Frames at least ``config.tall_threshold`` wide put the master area on the
    left, narrower frames put it on top.
    """

    def __init__(self):
        self.wide = MasteredLayout(Edge.LEFT, StackLayout())
        self.narrow = MasteredLayout(Edge.TOP, StackLayout())

    @property
    def name(self) -> str:
        return "tall"

    def choose(self, width: int, config: "LayoutConfig") -> MasteredLayout:
        """Pick the composition for a frame width."""
        if width >= config.tall_threshold:
            return self.wide
        return self.narrow

    def arrange(
        self,
        panes: List[Hashable],
        region: Any,
        canvas: Canvas,
        config: "LayoutConfig",
    ):
        width = canvas.extent(region, Axis.HORIZONTAL)
        self.choose(width, config).arrange(panes, region, canvas, config)
