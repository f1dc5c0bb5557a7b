"""
Tiling Errors

Every failure raised by the engine derives from TilingError.
"""


class TilingError(Exception):
    """Base class for layout engine errors."""


class ConfigurationError(TilingError):
    """A layout parameter was set to an invalid value."""


class EmptyPaneListError(TilingError):
    """An arrangement was requested for a frame without panes."""


class FocusResolutionError(TilingError):
    """The previously focused pane could not be found after arranging.

    The engine has already focused the first region when this is raised.
    """

    def __init__(self, message: str, pane=None):
        super().__init__(message)
        self.pane = pane


class HostInteropError(TilingError):
    """A host operation failed while arranging or navigating."""

    def __init__(self, message: str, operation: str = ""):
        super().__init__(message)
        self.operation = operation
