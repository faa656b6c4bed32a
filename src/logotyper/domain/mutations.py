"""Closed mutation types for characters, dots and lines.

Each entity kind has its own set of mutation variants. A mutation knows the
single field it replaces and how to clamp its value, so an invalid
property/value combination cannot be expressed in the first place.

Every variant exposes ``apply(entity, settings) -> entity`` returning a new
entity (or the same one when the mutation does not apply).
"""

from dataclasses import dataclass, replace
from typing import TypeAlias

from logotyper.config import LogotyperSettings, ValueRange
from logotyper.domain.character import Character
from logotyper.domain.elements import ControlPoint, Dot, Line

PERCENT = ValueRange(minimum=0.0, maximum=100.0)


def _percent_point(x: float, y: float) -> ControlPoint:
    return ControlPoint(PERCENT.clamp(x), PERCENT.clamp(y))


# --- Characters -------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SetCharacterColor:
    """Replace a character's color."""

    color: str

    def apply(self, character: Character, settings: LogotyperSettings) -> Character:
        return replace(character, color=self.color)


@dataclass(frozen=True, slots=True)
class SetCharacterScale:
    """Replace a character's scale, clamped to the configured range."""

    value: float

    def apply(self, character: Character, settings: LogotyperSettings) -> Character:
        return replace(character, scale=settings.characters.scale.clamp(self.value))


@dataclass(frozen=True, slots=True)
class SetCharacterRotation:
    """Replace a character's rotation, clamped to the configured range."""

    value: float

    def apply(self, character: Character, settings: LogotyperSettings) -> Character:
        return replace(
            character, rotation=settings.characters.rotation.clamp(self.value)
        )


@dataclass(frozen=True, slots=True)
class SetCharacterGlyph:
    """Substitute the displayed glyph (alternate or ligature)."""

    glyph: str
    is_ligature: bool = False
    replaces_chars: int = 1

    def apply(self, character: Character, settings: LogotyperSettings) -> Character:
        if not self.glyph:
            return character
        return replace(
            character,
            glyph=self.glyph,
            is_ligature=self.is_ligature,
            replaces_chars=max(1, self.replaces_chars),
        )


@dataclass(frozen=True, slots=True)
class ResetCharacterGlyph:
    """Drop a glyph substitution and show the source codepoint again."""

    def apply(self, character: Character, settings: LogotyperSettings) -> Character:
        return replace(
            character, glyph=character.char, is_ligature=False, replaces_chars=1
        )


CharacterMutation: TypeAlias = (
    SetCharacterColor
    | SetCharacterScale
    | SetCharacterRotation
    | SetCharacterGlyph
    | ResetCharacterGlyph
)


# --- Dots -------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SetDotX:
    """Move a dot horizontally (percent)."""

    value: float

    def apply(self, dot: Dot, settings: LogotyperSettings) -> Dot:
        return replace(dot, x=PERCENT.clamp(self.value))


@dataclass(frozen=True, slots=True)
class SetDotY:
    """Move a dot vertically (percent)."""

    value: float

    def apply(self, dot: Dot, settings: LogotyperSettings) -> Dot:
        return replace(dot, y=PERCENT.clamp(self.value))


@dataclass(frozen=True, slots=True)
class SetDotSize:
    value: float

    def apply(self, dot: Dot, settings: LogotyperSettings) -> Dot:
        return replace(dot, size=settings.dots.size_range.clamp(self.value))


@dataclass(frozen=True, slots=True)
class SetDotCornerRadius:
    value: float

    def apply(self, dot: Dot, settings: LogotyperSettings) -> Dot:
        return replace(dot, corner_radius=PERCENT.clamp(self.value))


@dataclass(frozen=True, slots=True)
class SetDotRotation:
    value: float

    def apply(self, dot: Dot, settings: LogotyperSettings) -> Dot:
        return replace(dot, rotation=settings.dots.rotation.clamp(self.value))


@dataclass(frozen=True, slots=True)
class SetDotColor:
    color: str

    def apply(self, dot: Dot, settings: LogotyperSettings) -> Dot:
        return replace(dot, color=self.color)


@dataclass(frozen=True, slots=True)
class SetDotBorderWidth:
    value: float

    def apply(self, dot: Dot, settings: LogotyperSettings) -> Dot:
        return replace(dot, border_width=settings.dots.border_range.clamp(self.value))


@dataclass(frozen=True, slots=True)
class SetDotBorderColor:
    color: str

    def apply(self, dot: Dot, settings: LogotyperSettings) -> Dot:
        return replace(dot, border_color=self.color)


@dataclass(frozen=True, slots=True)
class SetDotOpacity:
    value: float

    def apply(self, dot: Dot, settings: LogotyperSettings) -> Dot:
        return replace(dot, opacity=PERCENT.clamp(self.value))


@dataclass(frozen=True, slots=True)
class SetDotEraser:
    enabled: bool

    def apply(self, dot: Dot, settings: LogotyperSettings) -> Dot:
        return replace(dot, eraser=self.enabled)


DotMutation: TypeAlias = (
    SetDotX
    | SetDotY
    | SetDotSize
    | SetDotCornerRadius
    | SetDotRotation
    | SetDotColor
    | SetDotBorderWidth
    | SetDotBorderColor
    | SetDotOpacity
    | SetDotEraser
)


# --- Lines ------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SetLineStart:
    """Move the start point. Both coordinates change in one step."""

    x: float
    y: float

    def apply(self, line: Line, settings: LogotyperSettings) -> Line:
        return replace(line, x1=PERCENT.clamp(self.x), y1=PERCENT.clamp(self.y))


@dataclass(frozen=True, slots=True)
class SetLineEnd:
    """Move the end point. Both coordinates change in one step."""

    x: float
    y: float

    def apply(self, line: Line, settings: LogotyperSettings) -> Line:
        return replace(line, x2=PERCENT.clamp(self.x), y2=PERCENT.clamp(self.y))


@dataclass(frozen=True, slots=True)
class SetLineWidth:
    value: float

    def apply(self, line: Line, settings: LogotyperSettings) -> Line:
        return replace(line, width=settings.lines.width_range.clamp(self.value))


@dataclass(frozen=True, slots=True)
class SetLineColor:
    color: str

    def apply(self, line: Line, settings: LogotyperSettings) -> Line:
        return replace(line, color=self.color)


@dataclass(frozen=True, slots=True)
class SetLineBorderWidth:
    value: float

    def apply(self, line: Line, settings: LogotyperSettings) -> Line:
        return replace(
            line, border_width=settings.lines.border_range.clamp(self.value)
        )


@dataclass(frozen=True, slots=True)
class SetLineBorderColor:
    color: str

    def apply(self, line: Line, settings: LogotyperSettings) -> Line:
        return replace(line, border_color=self.color)


@dataclass(frozen=True, slots=True)
class SetLineCornerRadius:
    value: float

    def apply(self, line: Line, settings: LogotyperSettings) -> Line:
        return replace(line, corner_radius=PERCENT.clamp(self.value))


@dataclass(frozen=True, slots=True)
class SetLineEraser:
    enabled: bool

    def apply(self, line: Line, settings: LogotyperSettings) -> Line:
        return replace(line, eraser=self.enabled)


@dataclass(frozen=True, slots=True)
class AddControlPoint:
    """Append a control point after the existing ones."""

    x: float
    y: float

    def apply(self, line: Line, settings: LogotyperSettings) -> Line:
        return replace(
            line,
            control_points=(*line.control_points, _percent_point(self.x, self.y)),
        )


@dataclass(frozen=True, slots=True)
class MoveControlPoint:
    """Move one control point. Unknown indices leave the line unchanged."""

    index: int
    x: float
    y: float

    def apply(self, line: Line, settings: LogotyperSettings) -> Line:
        if not 0 <= self.index < len(line.control_points):
            return line
        points = list(line.control_points)
        points[self.index] = _percent_point(self.x, self.y)
        return replace(line, control_points=tuple(points))


@dataclass(frozen=True, slots=True)
class RemoveControlPoint:
    """Remove one control point. Unknown indices leave the line unchanged."""

    index: int

    def apply(self, line: Line, settings: LogotyperSettings) -> Line:
        if not 0 <= self.index < len(line.control_points):
            return line
        points = line.control_points
        return replace(line, control_points=points[: self.index] + points[self.index + 1 :])


@dataclass(frozen=True, slots=True)
class ClearControlPoints:
    """Straighten the line."""

    def apply(self, line: Line, settings: LogotyperSettings) -> Line:
        if not line.control_points:
            return line
        return replace(line, control_points=())


LineMutation: TypeAlias = (
    SetLineStart
    | SetLineEnd
    | SetLineWidth
    | SetLineColor
    | SetLineBorderWidth
    | SetLineBorderColor
    | SetLineCornerRadius
    | SetLineEraser
    | AddControlPoint
    | MoveControlPoint
    | RemoveControlPoint
    | ClearControlPoints
)
