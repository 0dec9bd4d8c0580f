"""
Exceptions raised while resolving or requesting the device timezone.
"""


class TimezoneLookupError(Exception):
    """The system timezone could not be determined."""


class StrategyUnavailable(Exception):
    """A lookup strategy has nothing to offer on this platform."""


class UnsupportedMethodError(Exception):
    """The caller invoked a method the channel does not implement."""

    def __init__(self, method: str):
        super().__init__(f"Method not implemented: {method}")
        self.method = method
