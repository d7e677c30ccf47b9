"""Named failure kinds raised by feedforward."""

from typing import Optional


class FeedforwardError(Exception):
    """Base class for all feedforward errors"""


class DimensionMismatchError(FeedforwardError, ValueError):
    """An input vector's length disagrees with what the receiver expects"""

    def __init__(self, expected: int, actual: int, component: str = "input"):
        self.expected = expected
        self.actual = actual
        self.component = component
        super().__init__(f"Dimension mismatch for {component}: expected {expected} values, got {actual}")


class ArchitectureError(FeedforwardError, ValueError):
    """The requested network architecture cannot be built"""


class SerializationError(FeedforwardError, OSError):
    """A trace record could not be written to its target"""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class NonFiniteValueError(FeedforwardError, ValueError):
    """A value fed into the network is NaN or infinite"""
