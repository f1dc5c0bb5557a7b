"""
Stack Layout

Panes stacked top to bottom in equal strips.
"""

from __future__ import annotations
from typing import Any, Hashable, List, TYPE_CHECKING

from .layout_base import Canvas, Layout
from ..geometry import Axis, Edge

if TYPE_CHECKING:
    from ..config import LayoutConfig


class StackLayout(Layout):
    """
    Stack layout - one full-width strip per pane.

    Strips are ceil(height / n) high; the last one takes what is left.
    """

    @property
    def name(self) -> str:
        return "stack"

    def arrange(
        self,
        panes: List[Hashable],
        region: Any,
        canvas: Canvas,
        config: "LayoutConfig",
    ):
        n = len(panes)
        strip = -(-canvas.extent(region, Axis.VERTICAL) // n)

        rest = region
        for pane in panes[:-1]:
            top, rest = canvas.split(rest, strip, Edge.TOP)
            canvas.bind_pane(top, pane)
        canvas.bind_pane(rest, panes[-1])
