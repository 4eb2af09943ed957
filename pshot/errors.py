class PshotError(Exception):
    """Base class for every failure that ends a capture run."""


class UsageError(PshotError):
    """The URL argument is missing or unusable."""


class BrowserError(PshotError):
    """Chromium could not be launched or a browser context opened."""


class NavigationError(PshotError):
    """The page failed to load or exceeded the load timeout."""


class CaptureError(PshotError):
    """A scroll, measurement or screenshot step failed."""


class CompositeError(PshotError):
    """Tiles could not be assembled or encoded."""


class OutputError(PshotError):
    """The stitched image could not be written to disk."""


class ConfigError(PshotError):
    """A ``PSHOT_*`` setting could not be parsed."""
