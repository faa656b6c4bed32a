"""The composition aggregate.

A Composition is the full editable state of one logotype design. It is an
immutable value: every edit produces a new Composition, so observers only
ever see a state from before or after an operation.
"""

from dataclasses import dataclass, field
from typing import Any

from logotyper.domain.character import Character
from logotyper.domain.elements import Dot, Line
from logotyper.domain.font import FontFeature
from logotyper.domain.gradient import Gradient
from logotyper.domain.layer import Layer
from logotyper.domain.selection import (
    CharacterSelection,
    DotSelection,
    LineSelection,
    Selection,
    selection_to_dict,
)


@dataclass(frozen=True, slots=True)
class Background:
    """Background paint description.

    The solid color is kept as a fallback while a gradient is set, but only
    one of the two is ever painted.

    Attributes:
        color: Solid background color
        gradient: Gradient descriptor, painted instead of ``color`` when set
    """

    color: str
    gradient: Gradient | None = None

    @property
    def is_gradient(self) -> bool:
        """True when the gradient is the effective paint."""
        return self.gradient is not None


@dataclass(frozen=True, slots=True)
class Composition:
    """The editable state of one logotype.

    Attributes:
        id: Composition identifier
        text: Source text the characters were built from
        text_color: Global text color
        characters: One Character per codepoint of ``text``
        background: Background paint
        layers: Render layers in panel sequence
        font_name: Font identifier (resolved by the host)
        slogan: Optional tagline shown with the logotype
        icon: Optional icon identifier
        font_features: OpenType feature switches for the font
        dots: Decorative dots
        lines: Decorative lines
        selection: Current selection (at most one entity)
        next_id: Counter used to mint ids for new dots and lines
    """

    id: str
    text: str
    text_color: str
    characters: tuple[Character, ...]
    background: Background
    layers: tuple[Layer, ...]
    font_name: str = ""
    slogan: str = ""
    icon: str | None = None
    font_features: tuple[FontFeature, ...] = ()
    dots: tuple[Dot, ...] = ()
    lines: tuple[Line, ...] = ()
    selection: Selection = None
    next_id: int = field(default=1, repr=False)

    def find_dot(self, dot_id: str) -> Dot | None:
        """Find a dot by id.

        Args:
            dot_id: Dot identifier

        Returns:
            The dot, or None if no dot has that id
        """
        return next((dot for dot in self.dots if dot.id == dot_id), None)

    def find_line(self, line_id: str) -> Line | None:
        """Find a line by id.

        Args:
            line_id: Line identifier

        Returns:
            The line, or None if no line has that id
        """
        return next((line for line in self.lines if line.id == line_id), None)

    def find_layer(self, layer_id: str) -> Layer | None:
        """Find a layer by id."""
        return next((layer for layer in self.layers if layer.id == layer_id), None)

    @property
    def selected_character(self) -> Character | None:
        """The selected character, if a character is selected."""
        if isinstance(self.selection, CharacterSelection):
            index = self.selection.index
            if 0 <= index < len(self.characters):
                return self.characters[index]
        return None

    @property
    def selected_dot(self) -> Dot | None:
        """The selected dot, if a dot is selected."""
        if isinstance(self.selection, DotSelection):
            return self.find_dot(self.selection.dot_id)
        return None

    @property
    def selected_line(self) -> Line | None:
        """The selected line, if a line is selected."""
        if isinstance(self.selection, LineSelection):
            return self.find_line(self.selection.line_id)
        return None

    def to_dict(self) -> dict[str, Any]:
        """Snapshot the composition as plain data for a renderer.

        Returns:
            Dictionary with characters, font features, dots, lines, layers,
            background and selection
        """
        return {
            "id": self.id,
            "text": self.text,
            "font_name": self.font_name,
            "slogan": self.slogan,
            "icon": self.icon,
            "text_color": self.text_color,
            "font_features": [feature.to_dict() for feature in self.font_features],
            "characters": [
                {
                    "index": c.index,
                    "char": c.char,
                    "glyph": c.glyph,
                    "color": c.color,
                    "scale": c.scale,
                    "rotation": c.rotation,
                    "is_ligature": c.is_ligature,
                    "replaces_chars": c.replaces_chars,
                }
                for c in self.characters
            ],
            "dots": [dot.to_dict() for dot in self.dots],
            "lines": [line.to_dict() for line in self.lines],
            "layers": [layer.to_dict() for layer in self.layers],
            "background": {
                "color": self.background.color,
                "gradient": (
                    self.background.gradient.to_dict()
                    if self.background.gradient is not None
                    else None
                ),
            },
            "selection": selection_to_dict(self.selection),
        }
