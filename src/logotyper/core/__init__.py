"""Core editing engine for logotyper.

This module contains the core algorithms for:

- Path construction (straight and chained quadratic strokes)
- Gradient codec (CSS linear-gradient parse/build)
- Layer system (reordering, visibility, locking)
- OpenType feature switches
- Mutation API (CompositionEditor)
- Drag interaction state machine
- Editing sessions for hosts

All algorithms are pure: they take a composition (or a part of it) and
return a new value, never mutating their input.

Key functions:
- path_for: Derive the path of a line
- parse_gradient / build_gradient: Gradient string codec
- reorder / set_layer_flag / render_order / layer_for: Layer operations
- font_feature_settings: CSS value for the enabled font features
- pointer_down / pointer_move / pointer_up / pointer_cancel: Drag transitions

Key classes:
- CompositionEditor: Applies editing operations to compositions
- PointerInteraction: Keeps drag state between pointer events
- EditingSession: Owns the current composition for a host
"""

from logotyper.core.editor import CompositionEditor
from logotyper.core.features import (
    default_features,
    font_feature_settings,
    toggle_feature,
)
from logotyper.core.gradient import (
    add_color,
    build_gradient,
    css_for,
    css_for_background,
    parse_gradient,
    remove_color,
    set_color,
    set_direction,
)
from logotyper.core.interaction import (
    DraggingControlPoint,
    DraggingDot,
    DraggingLayer,
    DraggingLineEndpoint,
    DragState,
    Endpoint,
    Idle,
    PointerInteraction,
    SurfaceBounds,
    TargetKind,
    pointer_cancel,
    pointer_down,
    pointer_move,
    pointer_up,
)
from logotyper.core.layers import (
    default_layers,
    is_editable,
    layer_for,
    render_order,
    reorder,
    set_layer_flag,
)
from logotyper.core.palette import Palette, generate_palettes, palette_gradient
from logotyper.core.paths import (
    LinePath,
    LineSegment,
    QuadSegment,
    flatten_path,
    path_for,
    path_length,
)
from logotyper.core.session import EditingSession

__all__ = [
    # Editor classes
    "CompositionEditor",
    "EditingSession",
    "PointerInteraction",
    # Interaction states
    "DragState",
    "DraggingControlPoint",
    "DraggingDot",
    "DraggingLayer",
    "DraggingLineEndpoint",
    "Endpoint",
    "Idle",
    "SurfaceBounds",
    "TargetKind",
    # Path types
    "LinePath",
    "LineSegment",
    "QuadSegment",
    # Palettes
    "Palette",
    # Functions
    "add_color",
    "build_gradient",
    "css_for",
    "css_for_background",
    "default_features",
    "default_layers",
    "flatten_path",
    "font_feature_settings",
    "generate_palettes",
    "is_editable",
    "layer_for",
    "palette_gradient",
    "parse_gradient",
    "path_for",
    "path_length",
    "pointer_cancel",
    "pointer_down",
    "pointer_move",
    "pointer_up",
    "remove_color",
    "render_order",
    "reorder",
    "set_color",
    "set_direction",
    "set_layer_flag",
    "toggle_feature",
]
