"""Editing session: the host-facing adapter around the pure engine.

An EditingSession owns the current composition on behalf of a host UI. It
forwards every request to CompositionEditor or the drag state machine,
swaps in the resulting composition and notifies observers once per
effective change. Observers always receive a complete post-operation
composition.

Key components:
- EditingSession: Current composition, observers, drag state, statistics
"""

from collections.abc import Callable
from typing import Any

import structlog

from logotyper.config import LogotyperSettings, get_default_settings
from logotyper.core.editor import CompositionEditor
from logotyper.core.gradient import parse_gradient
from logotyper.core.interaction import PointerInteraction, SurfaceBounds, TargetKind
from logotyper.domain import (
    CharacterMutation,
    Composition,
    DotMutation,
    Gradient,
    LayerFlag,
    LineMutation,
)
from logotyper.utils import EditLogger, EditStats

Observer = Callable[[Composition], None]


class EditingSession:
    """Holds one composition while a host edits it.

    Example:
        session = EditingSession(text="LogoType")
        session.subscribe(render)
        session.add_dot()
        session.pointer_down(TargetKind.DOT, "dot-1")
        session.pointer_move(320, 90)
        session.pointer_up()
    """

    def __init__(
        self,
        settings: LogotyperSettings | None = None,
        text: str = "",
        font_name: str = "",
        surface: SurfaceBounds | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize a session with a fresh composition.

        Args:
            settings: Logotyper settings (defaults if None)
            text: Initial source text
            font_name: Font identifier
            surface: Editing surface size in px (400x200 if None)
            logger: Logger to use (the "logotyper" structlog logger if None).
                Logging output is configured by the host, e.g. with
                ``configure_logging``
        """
        self.settings = settings or get_default_settings()
        self.logger = logger or structlog.get_logger("logotyper")
        self.edit_logger = EditLogger(self.logger)
        self.editor = CompositionEditor(self.settings)
        self.pointer = PointerInteraction(
            self.editor, surface or SurfaceBounds(width=400.0, height=200.0)
        )
        self._composition = self.editor.create(text, font_name=font_name)
        self._observers: list[Observer] = []

    @property
    def composition(self) -> Composition:
        """The current composition."""
        return self._composition

    @property
    def stats(self) -> EditStats:
        """Editing statistics so far."""
        return self.edit_logger.stats

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer called after every effective change.

        Args:
            observer: Callback receiving the new composition

        Returns:
            Function that unregisters the observer
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _commit(self, operation: str, updated: Composition, **details: Any) -> Composition:
        if updated is self._composition:
            self.edit_logger.log_noop(operation, **details)
            return updated
        self._composition = updated
        self.edit_logger.log_applied(operation, **details)
        for observer in list(self._observers):
            observer(updated)
        return updated

    def _run(self, operation: str, *args: Any) -> Composition:
        method = getattr(self.editor, operation)
        return self._commit(operation, method(self._composition, *args))

    # --- Mutation surface ----------------------------------------------

    def set_text(self, text: str) -> Composition:
        """Replace the source text (rebuilds every character)."""
        comp = self._run("set_text", text)
        self.edit_logger.log_text_rebuilt(text, len(comp.characters))
        return comp

    def set_font(self, font_name: str) -> Composition:
        return self._run("set_font", font_name)

    def toggle_font_feature(self, tag: str) -> Composition:
        return self._run("toggle_font_feature", tag)

    def set_slogan(self, slogan: str) -> Composition:
        return self._run("set_slogan", slogan)

    def set_icon(self, icon: str | None) -> Composition:
        return self._run("set_icon", icon)

    def select_character(self, index: int) -> Composition:
        return self._run("select_character", index)

    def select_dot(self, dot_id: str) -> Composition:
        return self._run("select_dot", dot_id)

    def select_line(self, line_id: str) -> Composition:
        return self._run("select_line", line_id)

    def clear_selection(self) -> Composition:
        return self._run("clear_selection")

    def set_character_property(self, mutation: CharacterMutation) -> Composition:
        return self._run("set_character_property", mutation)

    def set_dot_property(self, mutation: DotMutation) -> Composition:
        return self._run("set_dot_property", mutation)

    def set_line_property(self, mutation: LineMutation) -> Composition:
        return self._run("set_line_property", mutation)

    def add_dot(self) -> Composition:
        return self._run("add_dot")

    def delete_selected_dot(self) -> Composition:
        return self._run("delete_selected_dot")

    def add_line(self) -> Composition:
        return self._run("add_line")

    def delete_selected_line(self) -> Composition:
        return self._run("delete_selected_line")

    def set_background_color(self, color: str) -> Composition:
        return self._run("set_background_color", color)

    def set_background_gradient(self, gradient: Gradient | str | None) -> Composition:
        """Set the background gradient from a descriptor or CSS text.

        CSS text goes through the lenient parser, so malformed text sets the
        fallback gradient.
        """
        if isinstance(gradient, str):
            gradient = parse_gradient(gradient, config=self.settings.gradient)
        return self._run("set_background_gradient", gradient)

    def set_global_text_color(self, color: str) -> Composition:
        return self._run("set_global_text_color", color)

    def set_layer_flag(self, layer_id: str, flag: LayerFlag, value: bool) -> Composition:
        return self._run("set_layer_flag", layer_id, flag, value)

    def reorder_layers(self, dragged_id: str, target_id: str) -> Composition:
        return self._run("reorder_layers", dragged_id, target_id)

    # --- Pointer surface -----------------------------------------------

    def resize_surface(self, width: float, height: float) -> None:
        """Track a new editing surface size in px."""
        self.pointer.resize(SurfaceBounds(width=width, height=height))

    def pointer_down(
        self, kind: TargetKind, target_id: str, point_index: int | None = None
    ) -> Composition:
        """Start dragging a dot, control point, line endpoint or layer."""
        updated = self.pointer.pointer_down(
            self._composition, kind, target_id, point_index
        )
        if self.pointer.is_dragging:
            self.edit_logger.log_drag_start(type(self.pointer.state).__name__)
        return self._commit("pointer_down", updated, kind=kind.value, target=target_id)

    def pointer_move(self, x: float, y: float) -> Composition:
        """Move the dragged entity to surface-relative px coordinates."""
        if not self.pointer.is_dragging:
            return self._composition
        updated = self.pointer.pointer_move(self._composition, x, y)
        return self._commit("pointer_move", updated)

    def pointer_up(self, over_layer_id: str | None = None) -> Composition:
        """Finish the drag, dropping a dragged layer over ``over_layer_id``."""
        state_name = type(self.pointer.state).__name__
        was_dragging = self.pointer.is_dragging
        updated = self.pointer.pointer_up(self._composition, over_layer_id)
        if was_dragging:
            self.edit_logger.log_drag_end(state_name, cancelled=False)
        return self._commit("pointer_up", updated)

    def pointer_cancel(self) -> Composition:
        """Abandon the drag; edits made so far are kept."""
        if self.pointer.is_dragging:
            self.edit_logger.log_drag_end(type(self.pointer.state).__name__, cancelled=True)
        self._composition = self.pointer.pointer_cancel(self._composition)
        return self._composition
