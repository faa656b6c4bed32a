"""Drag interaction state machine.

Pointer gestures are modelled as explicit states with pure transition
functions. A host adapts raw pointer events into four calls:

- ``pointer_down``: Idle -> one of the Dragging states
- ``pointer_move``: translate the pointer into clamped percent coordinates
- ``pointer_up``: any Dragging state -> Idle (drops a dragged layer)
- ``pointer_cancel``: any Dragging state -> Idle, without further edits

Every transition takes the current state and composition and returns the
next state and composition. Edits applied during a drag are kept when the
gesture is cancelled.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from logotyper.core.editor import CompositionEditor
from logotyper.core.geometry import to_percent
from logotyper.core.layers import is_editable
from logotyper.domain import (
    Composition,
    LayerCategory,
    MoveControlPoint,
    SetDotX,
    SetDotY,
    SetLineEnd,
    SetLineStart,
)
from logotyper.exceptions import InteractionError

logger = logging.getLogger(__name__)


class TargetKind(str, Enum):
    """What a pointer-down landed on."""

    DOT = "dot"
    CONTROL_POINT = "control_point"
    LINE_START = "line_start"
    LINE_END = "line_end"
    LAYER = "layer"


class Endpoint(str, Enum):
    """Which end of a line is dragged."""

    START = "start"
    END = "end"


@dataclass(frozen=True, slots=True)
class SurfaceBounds:
    """Size of the editing surface in pixels.

    Attributes:
        width: Surface width (must be positive)
        height: Surface height (must be positive)
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InteractionError(
                f"Surface bounds must be positive, got {self.width}x{self.height}"
            )

    def to_percent(self, x: float, y: float) -> tuple[float, float]:
        """Map surface-relative pixels to clamped percentages."""
        return to_percent(x, self.width), to_percent(y, self.height)


@dataclass(frozen=True, slots=True)
class Idle:
    """No drag in progress."""


@dataclass(frozen=True, slots=True)
class DraggingDot:
    dot_id: str


@dataclass(frozen=True, slots=True)
class DraggingControlPoint:
    line_id: str
    index: int


@dataclass(frozen=True, slots=True)
class DraggingLineEndpoint:
    line_id: str
    which: Endpoint


@dataclass(frozen=True, slots=True)
class DraggingLayer:
    layer_id: str


DragState: TypeAlias = (
    Idle | DraggingDot | DraggingControlPoint | DraggingLineEndpoint | DraggingLayer
)

IDLE = Idle()


def pointer_down(
    state: DragState,
    comp: Composition,
    editor: CompositionEditor,
    kind: TargetKind,
    target_id: str,
    point_index: int | None = None,
) -> tuple[DragState, Composition]:
    """Start a drag session.

    Only an Idle machine starts a drag. Unknown targets, invalid control
    point indices and targets on hidden or locked layers leave the machine
    Idle. Grabbing a dot or a line also selects it.

    Args:
        state: Current drag state
        comp: Current composition
        editor: Editor used to apply the selection
        kind: What the pointer landed on
        target_id: Id of the dot, line or layer
        point_index: Control point index for ``TargetKind.CONTROL_POINT``

    Returns:
        Tuple of (new state, new composition)
    """
    if not isinstance(state, Idle):
        return state, comp

    if kind == TargetKind.LAYER:
        if comp.find_layer(target_id) is None:
            return state, comp
        return DraggingLayer(target_id), comp

    if kind == TargetKind.DOT:
        if comp.find_dot(target_id) is None:
            return state, comp
        if not is_editable(comp.layers, LayerCategory.DOTS):
            logger.debug("Dots layer is not editable, ignoring drag of %s", target_id)
            return state, comp
        return DraggingDot(target_id), editor.select_dot(comp, target_id)

    line = comp.find_line(target_id)
    if line is None:
        return state, comp
    if not is_editable(comp.layers, LayerCategory.LINES):
        logger.debug("Lines layer is not editable, ignoring drag of %s", target_id)
        return state, comp

    next_state: DragState
    if kind == TargetKind.CONTROL_POINT:
        if point_index is None or not 0 <= point_index < len(line.control_points):
            return state, comp
        next_state = DraggingControlPoint(target_id, point_index)
    elif kind == TargetKind.LINE_START:
        next_state = DraggingLineEndpoint(target_id, Endpoint.START)
    else:
        next_state = DraggingLineEndpoint(target_id, Endpoint.END)

    return next_state, editor.select_line(comp, target_id)


def pointer_move(
    state: DragState,
    comp: Composition,
    editor: CompositionEditor,
    x: float,
    y: float,
    surface: SurfaceBounds,
) -> tuple[DragState, Composition]:
    """Move the dragged entity to the pointer position.

    The pointer position is mapped to percentages of the surface and
    clamped to [0, 100]; positions outside the surface are clipped.

    Args:
        state: Current drag state
        comp: Current composition
        editor: Editor applying the coordinate change
        x: Pointer X relative to the surface origin, in px
        y: Pointer Y relative to the surface origin, in px
        surface: Surface size

    Returns:
        Tuple of (state, updated composition)
    """
    px, py = surface.to_percent(x, y)

    if isinstance(state, DraggingDot):
        if comp.find_dot(state.dot_id) is None:
            return state, comp
        comp = editor.select_dot(comp, state.dot_id)
        comp = editor.set_dot_property(comp, SetDotX(px))
        comp = editor.set_dot_property(comp, SetDotY(py))
    elif isinstance(state, DraggingControlPoint):
        if comp.find_line(state.line_id) is None:
            return state, comp
        comp = editor.select_line(comp, state.line_id)
        comp = editor.set_line_property(comp, MoveControlPoint(state.index, px, py))
    elif isinstance(state, DraggingLineEndpoint):
        if comp.find_line(state.line_id) is None:
            return state, comp
        comp = editor.select_line(comp, state.line_id)
        mutation = (
            SetLineStart(px, py) if state.which == Endpoint.START else SetLineEnd(px, py)
        )
        comp = editor.set_line_property(comp, mutation)

    return state, comp


def pointer_up(
    state: DragState,
    comp: Composition,
    editor: CompositionEditor,
    over_layer_id: str | None = None,
) -> tuple[DragState, Composition]:
    """End the drag session.

    Args:
        state: Current drag state
        comp: Current composition
        editor: Editor used to reorder layers
        over_layer_id: Layer row the pointer was released over, if any

    Returns:
        Tuple of (Idle, composition)
    """
    if isinstance(state, DraggingLayer) and over_layer_id is not None:
        comp = editor.reorder_layers(comp, state.layer_id, over_layer_id)
    return IDLE, comp


def pointer_cancel(
    state: DragState, comp: Composition
) -> tuple[DragState, Composition]:
    """Abandon the drag session. Edits already applied are kept."""
    return IDLE, comp


class PointerInteraction:
    """Host adapter holding the drag state between pointer events.

    The composition stays an explicit argument and return value; only the
    drag state lives here.

    Example:
        pointer = PointerInteraction(editor, SurfaceBounds(400, 200))
        comp = pointer.pointer_down(comp, TargetKind.DOT, "dot-1")
        comp = pointer.pointer_move(comp, 120, 40)
        comp = pointer.pointer_up(comp)
    """

    def __init__(self, editor: CompositionEditor, surface: SurfaceBounds) -> None:
        self.editor = editor
        self.surface = surface
        self.state: DragState = IDLE

    @property
    def is_dragging(self) -> bool:
        """True while a drag session is active."""
        return not isinstance(self.state, Idle)

    def resize(self, surface: SurfaceBounds) -> None:
        """Track a new surface size."""
        self.surface = surface

    def pointer_down(
        self,
        comp: Composition,
        kind: TargetKind,
        target_id: str,
        point_index: int | None = None,
    ) -> Composition:
        self.state, comp = pointer_down(
            self.state, comp, self.editor, kind, target_id, point_index
        )
        return comp

    def pointer_move(self, comp: Composition, x: float, y: float) -> Composition:
        self.state, comp = pointer_move(self.state, comp, self.editor, x, y, self.surface)
        return comp

    def pointer_up(
        self, comp: Composition, over_layer_id: str | None = None
    ) -> Composition:
        self.state, comp = pointer_up(self.state, comp, self.editor, over_layer_id)
        return comp

    def pointer_cancel(self, comp: Composition) -> Composition:
        self.state, comp = pointer_cancel(self.state, comp)
        return comp
