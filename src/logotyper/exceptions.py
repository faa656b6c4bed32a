"""Exception hierarchy for Logotyper.

The editing engine prefers silent no-ops over exceptions for routine
conditions (missing selection, unknown ids). The classes below cover the
remaining cases: malformed input handed to strict parsers and invalid
interaction surfaces.
"""


class LogotyperError(Exception):
    """Base exception for all Logotyper errors."""

    pass


class GradientError(LogotyperError):
    """Errors related to gradient descriptors."""

    pass


class GradientFormatError(GradientError):
    """Gradient text does not have the linear-gradient shape."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid gradient '{text}': {reason}")


class InteractionError(LogotyperError):
    """Errors in pointer interaction setup."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
