"""Decorative primitives: dots and lines.

Coordinates are percentages of the composition's bounding box, so that the
same decoration scales with whatever surface a renderer paints onto.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ControlPoint:
    """A user-placed point that bends a line's path.

    Attributes:
        x: X coordinate in percent (0 - 100)
        y: Y coordinate in percent (0 - 100)
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Dot:
    """A decorative disc or rounded rectangle.

    Attributes:
        id: Unique identifier within the composition
        x: Center X in percent
        y: Center Y in percent
        size: Diameter in px
        corner_radius: Corner rounding in percent (0 = square, 100 = circle)
        rotation: Rotation in degrees
        color: Fill color
        border_width: Outline width in px
        border_color: Outline color
        opacity: Opacity in percent
        eraser: Render as a subtractive outline instead of a filled shape
    """

    id: str
    x: float = 50.0
    y: float = 50.0
    size: float = 8.0
    corner_radius: float = 100.0
    rotation: float = 0.0
    color: str = "#FFFFFF"
    border_width: float = 0.0
    border_color: str = "#000000"
    opacity: float = 100.0
    eraser: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary for renderers."""
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "size": self.size,
            "corner_radius": self.corner_radius,
            "rotation": self.rotation,
            "color": self.color,
            "border_width": self.border_width,
            "border_color": self.border_color,
            "opacity": self.opacity,
            "eraser": self.eraser,
        }


@dataclass(frozen=True, slots=True)
class Line:
    """A stroke from a start point to an end point.

    The stroke is straight unless ``control_points`` is non-empty, in which
    case the points bend it in order (see ``logotyper.core.paths``).

    Attributes:
        id: Unique identifier within the composition
        x1: Start X in percent
        y1: Start Y in percent
        x2: End X in percent
        y2: End Y in percent
        width: Stroke width in px
        color: Stroke color
        control_points: Ordered control points
        eraser: Render as a subtractive stroke
        border_width: Outline width drawn beneath the stroke
        border_color: Outline color
        corner_radius: Cap/join rounding in percent
    """

    id: str
    x1: float = 20.0
    y1: float = 50.0
    x2: float = 80.0
    y2: float = 50.0
    width: float = 2.0
    color: str = "#FFFFFF"
    control_points: tuple[ControlPoint, ...] = ()
    eraser: bool = False
    border_width: float = 0.0
    border_color: str = "#000000"
    corner_radius: float = 0.0

    @property
    def start(self) -> ControlPoint:
        """Start point as a ControlPoint."""
        return ControlPoint(self.x1, self.y1)

    @property
    def end(self) -> ControlPoint:
        """End point as a ControlPoint."""
        return ControlPoint(self.x2, self.y2)

    @property
    def is_curved(self) -> bool:
        """True when at least one control point bends the stroke."""
        return len(self.control_points) > 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary for renderers."""
        return {
            "id": self.id,
            "x1": self.x1,
            "y1": self.y1,
            "x2": self.x2,
            "y2": self.y2,
            "width": self.width,
            "color": self.color,
            "control_points": [{"x": p.x, "y": p.y} for p in self.control_points],
            "eraser": self.eraser,
            "border_width": self.border_width,
            "border_color": self.border_color,
            "corner_radius": self.corner_radius,
        }
