"""Mutation API for compositions.

CompositionEditor turns editing requests into new Composition values. It
holds no composition of its own: every method takes the current
composition and returns the next one. When a request does not apply
(nothing suitable selected, unknown id or index) the input composition is
returned unchanged, by identity, so callers can detect no-ops with ``is``.
"""

import logging
from dataclasses import replace

from logotyper.config import LogotyperSettings, get_default_settings
from logotyper.core import layers as layer_ops
from logotyper.core.features import default_features, toggle_feature
from logotyper.domain import (
    Background,
    CharacterMutation,
    CharacterSelection,
    Composition,
    Dot,
    DotMutation,
    DotSelection,
    Gradient,
    LayerFlag,
    Line,
    LineMutation,
    LineSelection,
    Selection,
    characters_from_text,
)

logger = logging.getLogger(__name__)


def composition_id(text: str, font_name: str) -> str:
    """Identifier of a composition: ``"{font}-{text}"``, or the text without a font."""
    return f"{font_name}-{text}" if font_name else text


class CompositionEditor:
    """Applies editing operations to compositions.

    Example:
        editor = CompositionEditor()
        comp = editor.create("LogoType")
        comp = editor.add_dot(comp)
        comp = editor.set_dot_property(comp, SetDotSize(12))
    """

    def __init__(self, settings: LogotyperSettings | None = None) -> None:
        """Initialize editor with settings.

        Args:
            settings: Defaults and clamping ranges (default settings if None)
        """
        self.settings = settings or get_default_settings()

    # --- Lifecycle ------------------------------------------------------

    def create(
        self,
        text: str,
        font_name: str = "",
        slogan: str = "",
        icon: str | None = None,
    ) -> Composition:
        """Create a composition from source text.

        Args:
            text: Source text, one character slot per codepoint
            font_name: Font identifier resolved by the host
            slogan: Optional tagline
            icon: Optional icon identifier

        Returns:
            Composition with default colors and layers and no decorations
        """
        defaults = self.settings.composition
        return Composition(
            id=composition_id(text, font_name),
            text=text,
            font_name=font_name,
            slogan=slogan,
            icon=icon,
            text_color=defaults.text_color,
            characters=characters_from_text(text, defaults.text_color),
            background=Background(color=defaults.background_color),
            layers=layer_ops.default_layers(),
            font_features=default_features(defaults.font_features),
        )

    def set_text(self, comp: Composition, text: str) -> Composition:
        """Rebuild the character sequence from new text.

        Every character takes the current global text color; previous
        per-character styling is discarded and the selection is cleared.
        The identifier follows the new text.
        """
        return replace(
            comp,
            id=composition_id(text, comp.font_name),
            text=text,
            characters=characters_from_text(text, comp.text_color),
            selection=None,
        )

    def set_font(self, comp: Composition, font_name: str) -> Composition:
        """Change the font identifier. The composition id follows the font."""
        return replace(
            comp, id=composition_id(comp.text, font_name), font_name=font_name
        )

    def toggle_font_feature(self, comp: Composition, tag: str) -> Composition:
        """Switch an OpenType feature on or off. Unknown tags are ignored."""
        features = toggle_feature(comp.font_features, tag)
        if features is comp.font_features:
            return comp
        return replace(comp, font_features=features)

    def set_slogan(self, comp: Composition, slogan: str) -> Composition:
        """Change the tagline."""
        return replace(comp, slogan=slogan)

    def set_icon(self, comp: Composition, icon: str | None) -> Composition:
        """Change or clear the icon identifier."""
        return replace(comp, icon=icon)

    # --- Selection ------------------------------------------------------

    def select_character(self, comp: Composition, index: int) -> Composition:
        """Select a character by index. Unknown indices are ignored."""
        if not 0 <= index < len(comp.characters):
            logger.debug("Ignoring selection of unknown character %s", index)
            return comp
        return self._select(comp, CharacterSelection(index))

    def select_dot(self, comp: Composition, dot_id: str) -> Composition:
        """Select a dot by id. Unknown ids are ignored."""
        if comp.find_dot(dot_id) is None:
            logger.debug("Ignoring selection of unknown dot %s", dot_id)
            return comp
        return self._select(comp, DotSelection(dot_id))

    def select_line(self, comp: Composition, line_id: str) -> Composition:
        """Select a line by id. Unknown ids are ignored."""
        if comp.find_line(line_id) is None:
            logger.debug("Ignoring selection of unknown line %s", line_id)
            return comp
        return self._select(comp, LineSelection(line_id))

    def _select(self, comp: Composition, selection: Selection) -> Composition:
        if comp.selection == selection:
            return comp
        return replace(comp, selection=selection)

    def clear_selection(self, comp: Composition) -> Composition:
        """Select nothing."""
        return self._select(comp, None)

    # --- Property changes -----------------------------------------------

    def set_character_property(
        self, comp: Composition, mutation: CharacterMutation
    ) -> Composition:
        """Apply a mutation to the selected character.

        Args:
            comp: Current composition
            mutation: Character mutation to apply

        Returns:
            Updated composition, or ``comp`` if no character is selected or
            the mutation changes nothing
        """
        target = comp.selected_character
        if target is None:
            return comp
        updated = mutation.apply(target, self.settings)
        if updated == target:
            return comp
        characters = list(comp.characters)
        characters[target.index] = updated
        return replace(comp, characters=tuple(characters))

    def set_dot_property(self, comp: Composition, mutation: DotMutation) -> Composition:
        """Apply a mutation to the selected dot.

        Args:
            comp: Current composition
            mutation: Dot mutation to apply

        Returns:
            Updated composition, or ``comp`` if no dot is selected or the
            mutation changes nothing
        """
        target = comp.selected_dot
        if target is None:
            return comp
        updated = mutation.apply(target, self.settings)
        if updated == target:
            return comp
        return replace(
            comp,
            dots=tuple(updated if dot.id == target.id else dot for dot in comp.dots),
        )

    def set_line_property(
        self, comp: Composition, mutation: LineMutation
    ) -> Composition:
        """Apply a mutation to the selected line.

        Args:
            comp: Current composition
            mutation: Line mutation to apply

        Returns:
            Updated composition, or ``comp`` if no line is selected or the
            mutation changes nothing
        """
        target = comp.selected_line
        if target is None:
            return comp
        updated = mutation.apply(target, self.settings)
        if updated == target:
            return comp
        return replace(
            comp,
            lines=tuple(
                updated if line.id == target.id else line for line in comp.lines
            ),
        )

    # --- Decorations ----------------------------------------------------

    def add_dot(self, comp: Composition) -> Composition:
        """Append a default dot and select it."""
        defaults = self.settings.dots
        dot = Dot(
            id=f"dot-{comp.next_id}",
            x=defaults.x,
            y=defaults.y,
            size=defaults.size,
            corner_radius=defaults.corner_radius,
            color=defaults.color,
            border_color=defaults.border_color,
            opacity=defaults.opacity,
        )
        return replace(
            comp,
            dots=(*comp.dots, dot),
            selection=DotSelection(dot.id),
            next_id=comp.next_id + 1,
        )

    def delete_selected_dot(self, comp: Composition) -> Composition:
        """Remove the selected dot and clear the selection."""
        if not isinstance(comp.selection, DotSelection):
            return comp
        dot_id = comp.selection.dot_id
        return replace(
            comp,
            dots=tuple(dot for dot in comp.dots if dot.id != dot_id),
            selection=None,
        )

    def add_line(self, comp: Composition) -> Composition:
        """Append a default horizontal line and select it."""
        defaults = self.settings.lines
        line = Line(
            id=f"line-{comp.next_id}",
            x1=defaults.x1,
            y1=defaults.y1,
            x2=defaults.x2,
            y2=defaults.y2,
            width=defaults.width,
            color=defaults.color,
            border_color=defaults.border_color,
        )
        return replace(
            comp,
            lines=(*comp.lines, line),
            selection=LineSelection(line.id),
            next_id=comp.next_id + 1,
        )

    def delete_selected_line(self, comp: Composition) -> Composition:
        """Remove the selected line and clear the selection."""
        if not isinstance(comp.selection, LineSelection):
            return comp
        line_id = comp.selection.line_id
        return replace(
            comp,
            lines=tuple(line for line in comp.lines if line.id != line_id),
            selection=None,
        )

    # --- Colors and background ------------------------------------------

    def set_background_color(self, comp: Composition, color: str) -> Composition:
        """Paint a solid background, dropping any gradient."""
        return replace(comp, background=Background(color=color))

    def set_background_gradient(
        self, comp: Composition, gradient: Gradient | None
    ) -> Composition:
        """Set or clear the background gradient.

        The solid color is kept and becomes the paint again once the
        gradient is cleared.
        """
        return replace(comp, background=replace(comp.background, gradient=gradient))

    def set_global_text_color(self, comp: Composition, color: str) -> Composition:
        """Set the text color and repaint every character with it."""
        return replace(
            comp,
            text_color=color,
            characters=tuple(replace(c, color=color) for c in comp.characters),
        )

    # --- Layers ---------------------------------------------------------

    def set_layer_flag(
        self, comp: Composition, layer_id: str, flag: LayerFlag, value: bool
    ) -> Composition:
        """Toggle a layer's visible or locked flag."""
        layers = layer_ops.set_layer_flag(comp.layers, layer_id, flag, value)
        if layers is comp.layers:
            return comp
        return replace(comp, layers=layers)

    def reorder_layers(
        self, comp: Composition, dragged_id: str, target_id: str
    ) -> Composition:
        """Move a layer to another layer's position."""
        layers = layer_ops.reorder(comp.layers, dragged_id, target_id)
        if layers is comp.layers:
            return comp
        return replace(comp, layers=layers)
