"""
Arrangement Engine

Runs arrangement passes against a host and implements the navigation and
parameter commands.
"""

from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Any, Hashable, List, Optional, Tuple

from pubsub import pub

from . import topics
from .config import LayoutConfig
from .errors import (
    ConfigurationError,
    EmptyPaneListError,
    FocusResolutionError,
    HostInteropError,
    TilingError,
)
from .host import Host
from .layouts import Layout

logger = logging.getLogger(__name__)


@contextmanager
def host_operation(operation: str):
    """Turn failures raised by host code into HostInteropError."""
    try:
        yield
    except TilingError:
        raise
    except Exception as e:
        raise HostInteropError(f"Host failed during {operation}: {e}", operation) from e


def log_event(topic=pub.AUTO_TOPIC, **kwargs):
    """Log all events published on the event bus."""
    data_str = ", ".join(f"{k}={v!r}" for k, v in kwargs.items())
    logger.debug("EVENT: %s | %s", topic.getName(), data_str)


def enable_event_logging():
    """Log every bus message at DEBUG level."""
    pub.subscribe(log_event, pub.ALL_TOPICS)


class ArrangementEngine:
    """
    Arranges the panes of a host's frames.

    This component subscribes to pane lifecycle events and layout command
    events. It publishes ARRANGED, FOCUS_CHANGED, PARAMS_CHANGED and
    LAYOUT_CHANGED events.

    Responsibilities:
    - arrange(): tear down a frame's regions and rebuild them with the active
      layout, keeping the focused pane focused
    - CMD_SELECT_NEXT/PREV: Cyclic focus movement
    - CMD_SWAP_NEXT/PREV: Swap focused pane with a neighbour
    - CMD_ZOOM: Promote focused pane to master
    - CMD_INC/DEC_MASTER, CMD_INC/DEC_MFACT: Live parameter tuning

    The engine holds no pane or region references between calls.
    """

    def __init__(
        self,
        host: Host,
        config: Optional[LayoutConfig] = None,
        subscribe: bool = True,
    ):
        """Initialize the engine.

        Args:
            host: Host owning the frames to arrange
            config: Layout parameters, a default LayoutConfig if omitted
            subscribe: Whether to listen to pane and command events on the bus
        """
        self.host = host
        self.config = config if config is not None else LayoutConfig()

        if subscribe:
            self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to events the engine cares about."""
        # Notification events
        pub.subscribe(self._on_pane_changed, topics.PANE_OPENED)
        pub.subscribe(self._on_pane_changed, topics.PANE_CLOSED)

        # Command events
        pub.subscribe(self.arrange, topics.CMD_ARRANGE)
        pub.subscribe(self.select_next, topics.CMD_SELECT_NEXT)
        pub.subscribe(self.select_previous, topics.CMD_SELECT_PREV)
        pub.subscribe(self.swap_next, topics.CMD_SWAP_NEXT)
        pub.subscribe(self.swap_previous, topics.CMD_SWAP_PREV)
        pub.subscribe(self.zoom, topics.CMD_ZOOM)
        pub.subscribe(self.inc_master, topics.CMD_INC_MASTER)
        pub.subscribe(self.dec_master, topics.CMD_DEC_MASTER)
        pub.subscribe(self.inc_mfact, topics.CMD_INC_MFACT)
        pub.subscribe(self.dec_mfact, topics.CMD_DEC_MFACT)

    def _on_pane_changed(self, frame, pane):
        """Handle PANE_OPENED and PANE_CLOSED events."""
        with host_operation("list_panes"):
            remaining = self.host.list_panes(frame)
        if remaining:
            self.arrange(frame)

    # Arrangement

    def arrange(self, frame: Any) -> List[Hashable]:
        """
        Rebuild a frame's regions with the active layout.

        Returns:
            The arranged panes in layout order

        Raises:
            ConfigurationError: Parameters are invalid (frame untouched)
            EmptyPaneListError: The frame has no panes (frame untouched)
            FocusResolutionError: The focused pane has no region afterwards;
                the first region has been focused instead
            HostInteropError: A host operation failed
        """
        self.config.validate()

        with host_operation("snapshot"):
            panes = list(self.host.list_panes(frame))
            focused = self.host.focused_pane(frame)

        if not panes:
            raise EmptyPaneListError(f"Nothing to arrange in {frame!r}")
        if len(set(panes)) != len(panes):
            raise HostInteropError(
                f"Host listed duplicate panes for {frame!r}: {panes!r}", "list_panes"
            )
        if focused not in panes:
            logger.debug("No focused pane in %r, keeping %r", frame, panes[0])
            focused = panes[0]

        layout = self.config.layout
        logger.debug(
            "Arranging %d panes in %r with %s, focus %r at %d (nmaster=%d, mfact=%.2f)",
            len(panes),
            frame,
            layout.name,
            focused,
            panes.index(focused),
            self.config.nmaster,
            self.config.mfact,
        )

        with host_operation("teardown"):
            root = self.host.destroy_all_regions_except(frame, focused)
        with host_operation("layout"):
            layout.arrange(panes, root, self.host, self.config)

        resolved = self._restore_focus(frame, focused)
        pub.sendMessage(topics.ARRANGED, frame=frame, panes=panes)

        if not resolved:
            raise FocusResolutionError(
                f"Focused pane {focused!r} lost its region in {frame!r}", focused
            )
        return panes

    def _restore_focus(self, frame: Any, pane: Hashable) -> bool:
        """Focus the region showing pane, or the first region if there is none."""
        with host_operation("focus"):
            region = self.host.region_of(frame, pane)
            if region is not None:
                self.host.focus(region)
                return True

            logger.warning(
                "Focused pane %r disappeared from %r, focusing first region",
                pane,
                frame,
            )
            regions = self.host.list_regions(frame)
            if regions:
                self.host.focus(regions[0])
                fallback = self.host.pane_of(regions[0])
            else:
                fallback = None

        pub.sendMessage(topics.FOCUS_CHANGED, frame=frame, pane=fallback)
        return False

    # Navigation

    def _focus_position(self, frame: Any) -> Tuple[List[Any], Optional[int]]:
        """Regions in layout order and the index of the focused one."""
        with host_operation("list_regions"):
            regions = self.host.list_regions(frame)
            current = self.host.focused_region(frame)

        if not regions:
            raise EmptyPaneListError(f"No regions in {frame!r}")
        if current is None or current not in regions:
            return regions, None
        return regions, regions.index(current)

    def _select(self, frame: Any, step: int):
        regions, idx = self._focus_position(frame)
        if idx is None:
            target = regions[0]
        elif len(regions) < 2:
            return
        else:
            target = regions[(idx + step) % len(regions)]

        with host_operation("focus"):
            self.host.focus(target)
            pane = self.host.pane_of(target)
        pub.sendMessage(topics.FOCUS_CHANGED, frame=frame, pane=pane)

    def select_next(self, frame: Any):
        """Focus the next region, wrapping to the first."""
        self._select(frame, 1)

    def select_previous(self, frame: Any):
        """Focus the previous region, wrapping to the last."""
        self._select(frame, -1)

    def _swap(self, frame: Any, step: int):
        regions, idx = self._focus_position(frame)
        if idx is None or len(regions) < 2:
            return

        current = regions[idx]
        other = regions[(idx + step) % len(regions)]

        # Geometry is untouched; focus follows the pane to its new region
        with host_operation("swap"):
            pane = self.host.pane_of(current)
            self.host.bind_pane(current, self.host.pane_of(other))
            self.host.bind_pane(other, pane)
            self.host.focus(other)
        pub.sendMessage(topics.FOCUS_CHANGED, frame=frame, pane=pane)

    def swap_next(self, frame: Any):
        """Swap the focused pane with the next one."""
        self._swap(frame, 1)

    def swap_previous(self, frame: Any):
        """Swap the focused pane with the previous one."""
        self._swap(frame, -1)

    def zoom(self, frame: Any):
        """
        Promote the focused pane to the master position and re-arrange.

        When the focused pane already is the first one, the second pane is
        promoted instead. Focus moves to the promoted pane.
        """
        regions, idx = self._focus_position(frame)
        if idx is None or len(regions) < 2:
            return

        with host_operation("zoom"):
            panes = [self.host.pane_of(region) for region in regions]
            promoted = panes[1] if idx == 0 else panes[idx]
            order = [promoted] + [p for p in panes if p != promoted]
            for region, pane in zip(regions, order):
                self.host.bind_pane(region, pane)
            self.host.focus(regions[0])

        pub.sendMessage(topics.FOCUS_CHANGED, frame=frame, pane=promoted)
        self.arrange(frame)

    # Parameters

    def _params_changed(self):
        pub.sendMessage(
            topics.PARAMS_CHANGED,
            nmaster=self.config.nmaster,
            mfact=self.config.mfact,
        )

    def set_nmaster(self, nmaster: int, frame: Any = None):
        """
        Set nmaster (floored at 0) and re-arrange frame if given.

        Raises:
            ConfigurationError: If nmaster is not an integer (config unchanged)
        """
        if isinstance(nmaster, bool) or not isinstance(nmaster, int):
            raise ConfigurationError(
                f"Invalid nmaster: {nmaster!r}. Use an integer"
            )
        self.config.nmaster = max(0, nmaster)
        self._params_changed()
        if frame is not None:
            self.arrange(frame)

    def set_mfact(self, mfact: float, frame: Any = None):
        """Set mfact (clamped) and re-arrange frame if given."""
        self.config.mfact = self.config.clamp_mfact(mfact)
        self._params_changed()
        if frame is not None:
            self.arrange(frame)

    def inc_master(self, frame: Any):
        self.set_nmaster(self.config.nmaster + 1, frame)

    def dec_master(self, frame: Any):
        self.set_nmaster(self.config.nmaster - 1, frame)

    def inc_mfact(self, frame: Any):
        self.set_mfact(self.config.mfact + self.config.mfact_step, frame)

    def dec_mfact(self, frame: Any):
        self.set_mfact(self.config.mfact - self.config.mfact_step, frame)

    def set_layout(self, layout: Layout, frame: Any = None):
        """
        Replace the active layout.

        Raises:
            ConfigurationError: If layout is not a Layout
        """
        if not isinstance(layout, Layout):
            raise ConfigurationError(
                f"Invalid layout: {type(layout)}. Use a Layout instance"
            )
        self.config.layout = layout
        pub.sendMessage(topics.LAYOUT_CHANGED, layout_name=layout.name)
        if frame is not None:
            self.arrange(frame)
