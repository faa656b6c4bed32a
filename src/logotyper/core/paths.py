"""Path construction for lines.

A line is drawn from its start point to its end point, bent by its ordered
control points:

- No control points: one straight segment.
- One control point: one quadratic segment using that point as control.
- N >= 2 control points: a chain of quadratic segments. Every control point
  but the last controls a segment ending at the midpoint between it and the
  next control point; the last one controls the segment ending at the
  line's end point.

The chain is smooth in appearance but tangent continuity at the joins is
not guaranteed. Coordinates stay in the stored percent space.

All functions are pure; identical input gives byte-identical SVG output.
"""

from dataclasses import dataclass
from typing import TypeAlias

from logotyper.core._bezier import flatten_quadratic
from logotyper.core.geometry import distance, midpoint
from logotyper.domain import ControlPoint, Line


@dataclass(frozen=True, slots=True)
class LineSegment:
    """Straight segment from the current point to ``end``."""

    end: ControlPoint


@dataclass(frozen=True, slots=True)
class QuadSegment:
    """Quadratic Bezier segment from the current point to ``end``."""

    control: ControlPoint
    end: ControlPoint


Segment: TypeAlias = LineSegment | QuadSegment


def format_number(value: float) -> str:
    """Format a coordinate for path data.

    Uses at most four decimals and strips trailing zeros so that equal
    values always render the same way.

    Examples:
        >>> format_number(50.0)
        '50'
        >>> format_number(12.34567)
        '12.3457'
        >>> format_number(-0.0)
        '0'
    """
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


@dataclass(frozen=True, slots=True)
class LinePath:
    """Renderable path of a line.

    Attributes:
        start: Point the path starts at
        segments: Segments in drawing order
    """

    start: ControlPoint
    segments: tuple[Segment, ...]

    @property
    def end(self) -> ControlPoint:
        """Point the path ends at."""
        if not self.segments:
            return self.start
        return self.segments[-1].end

    def to_commands(self) -> list[tuple[str, tuple[float, ...]]]:
        """Express the path as (command, coordinates) pairs.

        Returns:
            ``[("M", (x, y)), ("L", (x, y)) | ("Q", (cx, cy, x, y)), ...]``
        """
        commands: list[tuple[str, tuple[float, ...]]] = [
            ("M", self.start.to_tuple())
        ]
        for segment in self.segments:
            if isinstance(segment, QuadSegment):
                commands.append(
                    ("Q", (*segment.control.to_tuple(), *segment.end.to_tuple()))
                )
            else:
                commands.append(("L", segment.end.to_tuple()))
        return commands

    def to_svg(self) -> str:
        """Render SVG path data, e.g. ``M 20 50 Q 50 20 80 50``."""
        return " ".join(
            " ".join([name, *(format_number(v) for v in coords)])
            for name, coords in self.to_commands()
        )


def path_for(line: Line) -> LinePath:
    """Derive the path of a line from its endpoints and control points.

    Args:
        line: Line to trace

    Returns:
        LinePath starting at the line's start point

    Examples:
        >>> path_for(Line(id="l", x1=0, y1=0, x2=10, y2=0)).to_svg()
        'M 0 0 L 10 0'
    """
    start = line.start
    end = line.end
    points = line.control_points

    if not points:
        return LinePath(start=start, segments=(LineSegment(end),))

    segments: list[Segment] = []
    for i, control in enumerate(points[:-1]):
        segments.append(QuadSegment(control, midpoint(control, points[i + 1])))
    segments.append(QuadSegment(points[-1], end))

    return LinePath(start=start, segments=tuple(segments))


def flatten_path(path: LinePath, tolerance: float = 0.1) -> list[ControlPoint]:
    """Approximate a path with a polyline.

    Args:
        path: Path to flatten
        tolerance: Maximum distance from the true curve, in percent units

    Returns:
        Polyline vertices from start to end

    Raises:
        ValueError: If tolerance is not positive
    """
    if tolerance <= 0:
        raise ValueError(f"tolerance must be positive, got {tolerance}")

    polyline = [path.start]
    current = path.start
    for segment in path.segments:
        if isinstance(segment, QuadSegment):
            polyline.extend(
                flatten_quadratic(current, segment.control, segment.end, tolerance)[1:]
            )
        else:
            polyline.append(segment.end)
        current = segment.end
    return polyline


def path_length(path: LinePath, tolerance: float = 0.1) -> float:
    """Approximate the length of a path in percent units."""
    polyline = flatten_path(path, tolerance)
    return sum(distance(a, b) for a, b in zip(polyline, polyline[1:]))
