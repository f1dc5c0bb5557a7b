"""
Layout Configuration

Parameters shared by all arrangement passes of one engine.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError
from .layouts import Layout, TallLayout


@dataclass
class LayoutConfig:
    """Layout parameters and the active layout."""

    # Number of panes routed to the master area
    nmaster: int = 1

    # Master area share of the split axis
    mfact: float = 0.55
    min_fact: float = 0.05
    max_fact: float = 0.95
    mfact_step: float = 0.05

    # Frames at least this wide put the master area beside the stack
    tall_threshold: int = 132

    # Active layout (defaults to TallLayout)
    layout: Optional[Layout] = None

    def __post_init__(self):
        """Resolve the default layout and check the values."""
        if self.layout is None:
            self.layout = TallLayout()
        self.validate()

    def validate(self):
        """
        Check all parameters.

        Raises:
            ConfigurationError: If any value is out of range
        """
        if not isinstance(self.nmaster, int) or self.nmaster < 0:
            raise ConfigurationError(
                f"Invalid nmaster: {self.nmaster!r}. Use a non-negative integer"
            )
        if not 0 < self.min_fact <= self.max_fact < 1:
            raise ConfigurationError(
                f"Invalid mfact bounds: [{self.min_fact}, {self.max_fact}]. "
                "Use 0 < min_fact <= max_fact < 1"
            )
        if not self.min_fact <= self.mfact <= self.max_fact:
            raise ConfigurationError(
                f"Invalid mfact: {self.mfact!r}. "
                f"Use a value in [{self.min_fact}, {self.max_fact}]"
            )
        if self.mfact_step <= 0:
            raise ConfigurationError(f"Invalid mfact_step: {self.mfact_step!r}")
        if self.tall_threshold < 0:
            raise ConfigurationError(
                f"Invalid tall_threshold: {self.tall_threshold!r}"
            )
        if not isinstance(self.layout, Layout):
            raise ConfigurationError(
                f"Invalid layout: {type(self.layout)}. Use a Layout instance"
            )

    def clamp_mfact(self, value: float) -> float:
        """Clamp a ratio to [min_fact, max_fact]."""
        return min(max(value, self.min_fact), self.max_fact)
