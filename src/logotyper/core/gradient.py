"""Gradient codec: descriptors to and from CSS ``linear-gradient`` strings.

The canonical encoding is::

    linear-gradient(<direction>, <color1>, <color2>[, <color3>[, <color4>]])

``parse_gradient`` never fails by default: text that does not have this
shape yields the fallback descriptor (``45deg`` with two default colors).
``build_gradient`` is its inverse and always produces the canonical form,
so ``parse_gradient(build_gradient(d)) == d`` for every valid descriptor.
"""

import logging
import re
from dataclasses import replace

from logotyper.config import GradientConfig
from logotyper.domain import (
    MAX_GRADIENT_COLORS,
    Background,
    MIN_GRADIENT_COLORS,
    Gradient,
    GradientDirection,
)
from logotyper.exceptions import GradientFormatError

logger = logging.getLogger(__name__)

_GRADIENT_RE = re.compile(
    r"^\s*linear-gradient\(\s*(?P<direction>[^,()]+?)\s*,\s*(?P<rest>.+)\)\s*;?\s*$",
    re.IGNORECASE | re.DOTALL,
)

# CSS side/corner keywords mapped onto the canonical angles
_KEYWORD_DIRECTIONS: dict[str, GradientDirection] = {
    "to top": GradientDirection.TO_TOP,
    "to top right": GradientDirection.TO_TOP_RIGHT,
    "to right top": GradientDirection.TO_TOP_RIGHT,
    "to right": GradientDirection.TO_RIGHT,
    "to bottom right": GradientDirection.TO_BOTTOM_RIGHT,
    "to right bottom": GradientDirection.TO_BOTTOM_RIGHT,
    "to bottom": GradientDirection.TO_BOTTOM,
    "to bottom left": GradientDirection.TO_BOTTOM_LEFT,
    "to left bottom": GradientDirection.TO_BOTTOM_LEFT,
    "to left": GradientDirection.TO_LEFT,
    "to top left": GradientDirection.TO_TOP_LEFT,
    "to left top": GradientDirection.TO_TOP_LEFT,
}


def fallback_gradient(config: GradientConfig | None = None) -> Gradient:
    """Return the descriptor used when gradient text cannot be parsed."""
    config = config or GradientConfig()
    return Gradient(
        direction=GradientDirection(config.fallback_direction),
        colors=tuple(config.fallback_colors),
    )


def parse_direction(token: str) -> GradientDirection | None:
    """Resolve a direction token to a canonical direction.

    Args:
        token: Angle (``"45deg"``) or keyword (``"to right"``)

    Returns:
        The direction, or None if the token is not supported

    Examples:
        >>> parse_direction("to right")
        <GradientDirection.TO_RIGHT: '90deg'>
        >>> parse_direction("12deg") is None
        True
    """
    normalized = " ".join(token.lower().split())
    if normalized in _KEYWORD_DIRECTIONS:
        return _KEYWORD_DIRECTIONS[normalized]
    try:
        return GradientDirection(normalized)
    except ValueError:
        return None


def split_colors(text: str) -> list[str]:
    """Split a color list on top-level commas.

    Commas nested inside functional notations such as ``rgb(...)`` or
    ``hsl(...)`` do not split.

    Examples:
        >>> split_colors("#fff, rgb(0, 0, 0)")
        ['#fff', 'rgb(0, 0, 0)']
    """
    colors: list[str] = []
    depth = 0
    current: list[str] = []
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(0, depth - 1)
        elif char == "," and depth == 0:
            colors.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    colors.append("".join(current).strip())
    return colors


def parse_gradient(
    text: str,
    strict: bool = False,
    config: GradientConfig | None = None,
) -> Gradient:
    """Parse a ``linear-gradient(...)`` string into a descriptor.

    Args:
        text: CSS gradient text
        strict: Raise instead of returning the fallback descriptor
        config: Gradient settings providing the fallback descriptor

    Returns:
        Parsed descriptor, or the fallback descriptor when the text is
        malformed and ``strict`` is False. More than four colors are
        truncated to the first four.

    Raises:
        GradientFormatError: If ``strict`` is True and the text is malformed
    """
    try:
        return _parse_strict(text)
    except GradientFormatError as e:
        if strict:
            raise
        logger.debug("Using fallback gradient: %s", e.reason)
        return fallback_gradient(config)


def _parse_strict(text: str) -> Gradient:
    match = _GRADIENT_RE.match(text or "")
    if match is None:
        raise GradientFormatError(text, "expected linear-gradient(<direction>, <colors>)")

    direction = parse_direction(match.group("direction"))
    if direction is None:
        raise GradientFormatError(
            text, f"unsupported direction '{match.group('direction').strip()}'"
        )

    colors = [color for color in split_colors(match.group("rest")) if color]
    if len(colors) < MIN_GRADIENT_COLORS:
        raise GradientFormatError(
            text, f"needs at least {MIN_GRADIENT_COLORS} colors, got {len(colors)}"
        )

    return Gradient(direction=direction, colors=tuple(colors[:MAX_GRADIENT_COLORS]))


def build_gradient(gradient: Gradient) -> str:
    """Encode a descriptor in canonical ``linear-gradient(...)`` form.

    Examples:
        >>> build_gradient(Gradient(GradientDirection.TO_TOP_RIGHT, ("#667eea", "#764ba2")))
        'linear-gradient(45deg, #667eea, #764ba2)'
    """
    return f"linear-gradient({gradient.direction.value}, {', '.join(gradient.colors)})"


css_for = build_gradient


def css_for_background(background: Background) -> str:
    """Effective background paint as a CSS value.

    The gradient wins while one is set; otherwise the solid color is painted.
    """
    if background.gradient is not None:
        return build_gradient(background.gradient)
    return background.color


def add_color(gradient: Gradient, config: GradientConfig | None = None) -> Gradient:
    """Append the default added color if there is room for another stop.

    Args:
        gradient: Descriptor to extend
        config: Gradient settings providing the added color

    Returns:
        Extended descriptor, or the same descriptor at four colors
    """
    if len(gradient.colors) >= MAX_GRADIENT_COLORS:
        return gradient
    config = config or GradientConfig()
    return replace(gradient, colors=(*gradient.colors, config.added_color))


def remove_color(gradient: Gradient, index: int) -> Gradient:
    """Remove a color stop if at least two stops remain afterwards.

    Args:
        gradient: Descriptor to shrink
        index: Index of the stop to remove

    Returns:
        Shrunk descriptor, or the same descriptor if removal is not allowed
    """
    if len(gradient.colors) <= MIN_GRADIENT_COLORS:
        return gradient
    if not 0 <= index < len(gradient.colors):
        return gradient
    colors = gradient.colors[:index] + gradient.colors[index + 1 :]
    return replace(gradient, colors=colors)


def set_color(gradient: Gradient, index: int, color: str) -> Gradient:
    """Replace one color stop. Unknown indices leave the descriptor unchanged."""
    if not 0 <= index < len(gradient.colors):
        return gradient
    colors = list(gradient.colors)
    colors[index] = color
    return replace(gradient, colors=tuple(colors))


def set_direction(gradient: Gradient, direction: GradientDirection) -> Gradient:
    """Replace the gradient direction."""
    return replace(gradient, direction=direction)
