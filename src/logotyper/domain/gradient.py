"""Gradient descriptor types.

A gradient descriptor is the parsed form of a CSS ``linear-gradient(...)``
background: one of eight canonical directions plus an ordered list of two
to four color stops.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from logotyper.exceptions import GradientError

MIN_GRADIENT_COLORS = 2
MAX_GRADIENT_COLORS = 4


class GradientDirection(str, Enum):
    """Canonical gradient angles, measured clockwise from "to top"."""

    TO_TOP = "0deg"
    TO_TOP_RIGHT = "45deg"
    TO_RIGHT = "90deg"
    TO_BOTTOM_RIGHT = "135deg"
    TO_BOTTOM = "180deg"
    TO_BOTTOM_LEFT = "225deg"
    TO_LEFT = "270deg"
    TO_TOP_LEFT = "315deg"


@dataclass(frozen=True, slots=True)
class Gradient:
    """A linear gradient descriptor.

    Attributes:
        direction: Gradient direction
        colors: Ordered color stops (2 to 4 entries)
    """

    direction: GradientDirection
    colors: tuple[str, ...]

    def __post_init__(self) -> None:
        if not MIN_GRADIENT_COLORS <= len(self.colors) <= MAX_GRADIENT_COLORS:
            raise GradientError(
                f"Gradient needs {MIN_GRADIENT_COLORS}-{MAX_GRADIENT_COLORS} colors, "
                f"got {len(self.colors)}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with direction and colors fields
        """
        return {"direction": self.direction.value, "colors": list(self.colors)}
