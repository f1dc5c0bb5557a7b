"""
Layout System

Provides the tiling layout algorithms.
"""

from .layout_base import (
    Canvas,
    GeometryCanvas,
    Layout,
)
from .layout_stack import StackLayout
from .layout_mastered import MasteredLayout
from .layout_tall import TallLayout

__all__ = [
    # Base classes
    "Canvas",
    "GeometryCanvas",
    "Layout",
    # Layout implementations
    "StackLayout",
    "MasteredLayout",
    "TallLayout",
]
