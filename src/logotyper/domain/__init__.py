"""Domain models for logotyper.

This module contains the domain models representing a logotype composition:
characters, decorations, layers, gradients, the selection union and the
closed mutation types. All models are:

- Immutable (frozen dataclasses), edited by producing new values
- Plain data, independent of any rendering toolkit

Key classes:
- Character: One glyph slot of the logotype text
- Dot / Line / ControlPoint: Decorative primitives
- Layer: Orderable render group for one category
- FontFeature: OpenType feature switch
- Gradient: Linear gradient descriptor
- Composition: The aggregate root
"""

from logotyper.domain.character import Character, characters_from_text
from logotyper.domain.composition import Background, Composition
from logotyper.domain.elements import ControlPoint, Dot, Line
from logotyper.domain.font import FontFeature
from logotyper.domain.gradient import (
    MAX_GRADIENT_COLORS,
    MIN_GRADIENT_COLORS,
    Gradient,
    GradientDirection,
)
from logotyper.domain.layer import Layer, LayerCategory, LayerFlag
from logotyper.domain.mutations import (
    AddControlPoint,
    CharacterMutation,
    ClearControlPoints,
    DotMutation,
    LineMutation,
    MoveControlPoint,
    RemoveControlPoint,
    ResetCharacterGlyph,
    SetCharacterColor,
    SetCharacterGlyph,
    SetCharacterRotation,
    SetCharacterScale,
    SetDotBorderColor,
    SetDotBorderWidth,
    SetDotColor,
    SetDotCornerRadius,
    SetDotEraser,
    SetDotOpacity,
    SetDotRotation,
    SetDotSize,
    SetDotX,
    SetDotY,
    SetLineBorderColor,
    SetLineBorderWidth,
    SetLineColor,
    SetLineCornerRadius,
    SetLineEnd,
    SetLineEraser,
    SetLineStart,
    SetLineWidth,
)
from logotyper.domain.selection import (
    CharacterSelection,
    DotSelection,
    LineSelection,
    Selection,
)

__all__: list[str] = [
    # Enums
    "GradientDirection",
    "LayerCategory",
    "LayerFlag",
    # Core types
    "Background",
    "Character",
    "Composition",
    "ControlPoint",
    "Dot",
    "FontFeature",
    "Gradient",
    "Layer",
    "Line",
    "MAX_GRADIENT_COLORS",
    "MIN_GRADIENT_COLORS",
    "characters_from_text",
    # Selection
    "CharacterSelection",
    "DotSelection",
    "LineSelection",
    "Selection",
    # Mutations
    "AddControlPoint",
    "CharacterMutation",
    "ClearControlPoints",
    "DotMutation",
    "LineMutation",
    "MoveControlPoint",
    "RemoveControlPoint",
    "ResetCharacterGlyph",
    "SetCharacterColor",
    "SetCharacterGlyph",
    "SetCharacterRotation",
    "SetCharacterScale",
    "SetDotBorderColor",
    "SetDotBorderWidth",
    "SetDotColor",
    "SetDotCornerRadius",
    "SetDotEraser",
    "SetDotOpacity",
    "SetDotRotation",
    "SetDotSize",
    "SetDotX",
    "SetDotY",
    "SetLineBorderColor",
    "SetLineBorderWidth",
    "SetLineColor",
    "SetLineCornerRadius",
    "SetLineEnd",
    "SetLineEraser",
    "SetLineStart",
    "SetLineWidth",
]
