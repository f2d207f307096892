"""Exception types raised by the ray tracer.

Scene problems are detected once, when an engine is constructed, and are
reported as a SceneValidationError naming the offending element. Contract
violations inside the math kernel (for example normalizing a zero-length
vector) raise plain ValueError and are not meant to be caught.
"""


class RaytracerError(Exception):
    """Base class for all ray tracer errors."""


class SceneValidationError(RaytracerError, ValueError):
    """A scene element holds an out-of-range or malformed parameter.

    Attributes:
        element: Human-readable label of the offending element
            (its description, or a synthesized "sphere #2" style label).
        reason: What invariant the element violates.
    """

    def __init__(self, element: str, reason: str) -> None:
        self.element = element
        self.reason = reason
        super().__init__(f"{element}: {reason}")
