"""Exception types raised by engagement-viz."""


class EngagementVizError(Exception):
    """Base class for all errors raised by this package."""


class LoadError(EngagementVizError):
    """The dataset could not be read (missing, unreadable or empty)."""


class ParseError(LoadError, ValueError):
    """The dataset was read but its header lacks required columns."""

    def __init__(self, missing, found=None):
        self.missing = list(missing)
        self.found = list(found or [])
        super().__init__(
            f"Dataset is missing required columns: {self.missing}. Found: {self.found}"
        )


class ConfigError(EngagementVizError, ValueError):
    """A configuration value is invalid."""
