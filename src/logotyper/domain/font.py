"""OpenType feature switches for the logotype font."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class FontFeature:
    """One OpenType feature the host may enable on the font.

    Attributes:
        tag: Four-letter OpenType feature tag (e.g. ``liga``)
        name: Display name
        enabled: Whether the feature is switched on
    """

    tag: str
    name: str
    enabled: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary for renderers."""
        return {"tag": self.tag, "name": self.name, "enabled": self.enabled}
