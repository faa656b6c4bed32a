"""Selection as a single tagged union.

A composition selects at most one thing at a time: a character by index, a
dot by id or a line by id. ``None`` means nothing is selected.
"""

from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class CharacterSelection:
    """Selected character by index."""

    index: int


@dataclass(frozen=True, slots=True)
class DotSelection:
    """Selected dot by id."""

    dot_id: str


@dataclass(frozen=True, slots=True)
class LineSelection:
    """Selected line by id."""

    line_id: str


Selection: TypeAlias = CharacterSelection | DotSelection | LineSelection | None


def selection_to_dict(selection: Selection) -> dict[str, Any] | None:
    """Serialize a selection for renderers.

    Args:
        selection: Current selection

    Returns:
        ``{"kind": ..., "target": ...}`` or None when nothing is selected
    """
    if isinstance(selection, CharacterSelection):
        return {"kind": "character", "target": selection.index}
    if isinstance(selection, DotSelection):
        return {"kind": "dot", "target": selection.dot_id}
    if isinstance(selection, LineSelection):
        return {"kind": "line", "target": selection.line_id}
    return None
