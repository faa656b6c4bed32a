"""Layer types for render ordering."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class LayerCategory(str, Enum):
    """Fixed render categories a layer can group."""

    TEXT = "text"
    DOTS = "dots"
    LINES = "lines"


class LayerFlag(str, Enum):
    """Boolean layer flags that can be toggled."""

    VISIBLE = "visible"
    LOCKED = "locked"


@dataclass(frozen=True, slots=True)
class Layer:
    """A named, orderable rendering group for one category.

    Attributes:
        id: Unique layer identifier
        name: Display name
        category: Render category the layer groups
        visible: Hidden layers are skipped by renderers
        locked: Locked layers cannot be grabbed by drag interactions
        order: Stacking order, higher values render on top
    """

    id: str
    name: str
    category: LayerCategory
    visible: bool = True
    locked: bool = False
    order: int = 0

    @property
    def is_editable(self) -> bool:
        """True when the layer is visible and not locked."""
        return self.visible and not self.locked

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary for renderers."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "visible": self.visible,
            "locked": self.locked,
            "order": self.order,
        }
