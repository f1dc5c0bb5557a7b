"""
ptile - dynamic tiling layouts

A master/stack tiling engine for hosts that show panes in rectangular
frames.

This package provides:
- Geometry primitives (areas, edges, splits)
- Layout algorithms (stack, master composition, tall)
- An arrangement engine that rebuilds a frame's regions while keeping focus
- Navigation and parameter commands, also reachable over the event bus
- An in-memory host

Example usage:
    from ptile import ArrangementEngine, LayoutConfig, MemoryHost

    host = MemoryHost()
    frame = host.create_frame("main", 200, 60, panes=["a", "b", "c"])
    engine = ArrangementEngine(host, LayoutConfig(nmaster=1, mfact=0.6))
    engine.arrange(frame)
    host.areas(frame)
"""

__version__ = "0.1.0"

from .geometry import Area, Axis, Edge, split

from .errors import (
    TilingError,
    ConfigurationError,
    EmptyPaneListError,
    FocusResolutionError,
    HostInteropError,
)

from .layouts import (
    Canvas,
    GeometryCanvas,
    Layout,
    StackLayout,
    MasteredLayout,
    TallLayout,
)

from .config import LayoutConfig

from .host import Host, MemoryHost, MemoryFrame, MemoryRegion

from .engine import ArrangementEngine, enable_event_logging

from . import topics

__all__ = [
    # Version
    "__version__",
    # Geometry
    "Area",
    "Axis",
    "Edge",
    "split",
    # Errors
    "TilingError",
    "ConfigurationError",
    "EmptyPaneListError",
    "FocusResolutionError",
    "HostInteropError",
    # Layouts
    "Canvas",
    "GeometryCanvas",
    "Layout",
    "StackLayout",
    "MasteredLayout",
    "TallLayout",
    # Configuration
    "LayoutConfig",
    # Hosts
    "Host",
    "MemoryHost",
    "MemoryFrame",
    "MemoryRegion",
    # Engine
    "ArrangementEngine",
    "enable_event_logging",
    # Event topics
    "topics",
]
