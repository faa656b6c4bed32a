"""Character slots of the logotype text."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Character:
    """One glyph slot in the logotype text.

    Attributes:
        index: Position in the owning composition's character sequence
        char: Source codepoint
        color: Fill color
        scale: Uniform scale factor (0.5 - 2.0)
        rotation: Rotation in degrees (-180 - 180)
        glyph: Displayed glyph, differs from ``char`` after a substitution
        is_ligature: True when ``glyph`` is a ligature
        replaces_chars: Number of source characters the glyph stands for
    """

    index: int
    char: str
    color: str
    scale: float = 1.0
    rotation: float = 0.0
    glyph: str = ""
    is_ligature: bool = False
    replaces_chars: int = 1

    def __post_init__(self) -> None:
        if not self.glyph:
            object.__setattr__(self, "glyph", self.char)
        if self.replaces_chars < 1:
            object.__setattr__(self, "replaces_chars", 1)

    @property
    def is_substituted(self) -> bool:
        """True when the displayed glyph differs from the source codepoint."""
        return self.glyph != self.char


def characters_from_text(text: str, color: str) -> tuple[Character, ...]:
    """Build a fresh character sequence, one Character per codepoint.

    Args:
        text: Source text
        color: Color given to every character

    Returns:
        Tuple of default-styled characters
    """
    return tuple(
        Character(index=index, char=char, color=color)
        for index, char in enumerate(text)
    )
