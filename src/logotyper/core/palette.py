"""Color harmony palettes.

Palettes are generated deterministically from an index: the base hue steps
by 31 degrees per palette, saturation by 17 and lightness by 23 within the
ranges of the palette category, and the harmony type cycles through
HARMONY_TYPES. Each palette holds three ``hsl(...)`` colors and can seed a
background gradient.
"""

from dataclasses import dataclass
from enum import Enum

from logotyper.domain import Gradient, GradientDirection


class Harmony(str, Enum):
    """Color harmony rules."""

    TRIADIC = "triadic"
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    SPLIT_COMPLEMENTARY = "split-complementary"
    TETRADIC = "tetradic"
    MONOCHROMATIC = "monochromatic"


HARMONY_TYPES: tuple[Harmony, ...] = tuple(Harmony)


@dataclass(frozen=True, slots=True)
class PaletteCategory:
    """Palette category with its saturation and lightness ranges."""

    id: str
    name: str
    description: str
    saturation_range: tuple[int, int]
    lightness_range: tuple[int, int]


CATEGORIES: dict[str, PaletteCategory] = {
    c.id: c
    for c in (
        PaletteCategory("professional", "Professional", "Business & Corporate", (40, 60), (35, 65)),
        PaletteCategory("creative", "Creative", "Art & Design", (60, 90), (40, 70)),
        PaletteCategory("tech", "Technology", "Modern & Digital", (20, 80), (25, 75)),
        PaletteCategory("nature", "Nature", "Organic & Earth Tones", (50, 80), (30, 60)),
        PaletteCategory("vibrant", "Vibrant", "Bold & Energetic", (80, 100), (45, 65)),
        PaletteCategory("minimal", "Minimal", "Clean & Simple", (0, 30), (20, 80)),
        PaletteCategory("luxury", "Luxury", "Premium & Elegant", (40, 70), (25, 55)),
        PaletteCategory("retro", "Retro", "Vintage & Classic", (60, 85), (40, 70)),
    )
}

DEFAULT_CATEGORY = "professional"


@dataclass(frozen=True, slots=True)
class Palette:
    """A named set of harmonious colors.

    Attributes:
        id: Identifier, ``<category>-<index>-<harmony>``
        name: Display name
        colors: Colors as CSS ``hsl(...)`` strings
        category: Category id
    """

    id: str
    name: str
    colors: tuple[str, ...]
    category: str


def _hsl(hue: float, saturation: float, lightness: float) -> str:
    return f"hsl({hue:g}, {saturation:g}%, {lightness:g}%)"


def harmony_colors(
    base_hue: int,
    harmony: Harmony,
    saturation: float = 70,
    lightness: float = 50,
) -> tuple[str, str, str]:
    """Generate three colors following a harmony rule.

    Args:
        base_hue: Base hue in degrees (0 - 359)
        harmony: Harmony rule
        saturation: Saturation in percent
        lightness: Lightness in percent

    Returns:
        Three ``hsl(...)`` color strings

    Examples:
        >>> harmony_colors(0, Harmony.TRIADIC)
        ('hsl(0, 70%, 50%)', 'hsl(120, 70%, 50%)', 'hsl(240, 70%, 50%)')
    """
    s, lum = saturation, lightness
    if harmony == Harmony.COMPLEMENTARY:
        return (
            _hsl(base_hue, s, lum),
            _hsl((base_hue + 180) % 360, s, lum),
            _hsl(base_hue, s * 0.5, lum + 20),
        )
    if harmony == Harmony.ANALOGOUS:
        return (
            _hsl((base_hue - 30 + 360) % 360, s, lum),
            _hsl(base_hue, s, lum),
            _hsl((base_hue + 30) % 360, s, lum),
        )
    if harmony == Harmony.SPLIT_COMPLEMENTARY:
        return (
            _hsl(base_hue, s, lum),
            _hsl((base_hue + 150) % 360, s, lum),
            _hsl((base_hue + 210) % 360, s, lum),
        )
    if harmony == Harmony.TETRADIC:
        # Square harmony, only the first three corners
        return (
            _hsl(base_hue, s, lum),
            _hsl((base_hue + 90) % 360, s, lum),
            _hsl((base_hue + 180) % 360, s, lum),
        )
    if harmony == Harmony.MONOCHROMATIC:
        return (
            _hsl(base_hue, s, lum - 20),
            _hsl(base_hue, s, lum),
            _hsl(base_hue, s, lum + 20),
        )
    return (
        _hsl(base_hue, s, lum),
        _hsl((base_hue + 120) % 360, s, lum),
        _hsl((base_hue + 240) % 360, s, lum),
    )


def generate_palettes(category: str, offset: int = 0, limit: int = 12) -> list[Palette]:
    """Generate a page of palettes for a category.

    Args:
        category: Category id (unknown ids use the professional ranges)
        offset: Index of the first palette
        limit: Number of palettes to generate

    Returns:
        Palettes ``offset`` .. ``offset + limit - 1``
    """
    settings = CATEGORIES.get(category, CATEGORIES[DEFAULT_CATEGORY])
    sat_min, sat_max = settings.saturation_range
    light_min, light_max = settings.lightness_range

    palettes: list[Palette] = []
    for palette_index in range(offset, offset + limit):
        base_hue = (palette_index * 31) % 360
        harmony = HARMONY_TYPES[palette_index % len(HARMONY_TYPES)]
        saturation = sat_min + (palette_index * 17) % (sat_max - sat_min)
        lightness = light_min + (palette_index * 23) % (light_max - light_min)

        palettes.append(
            Palette(
                id=f"{category}-{palette_index}-{harmony.value}",
                name=f"{category.capitalize()} {harmony.value.capitalize()} {palette_index + 1}",
                colors=harmony_colors(base_hue, harmony, saturation, lightness),
                category=category,
            )
        )
    return palettes


def palette_gradient(
    palette: Palette, direction: GradientDirection = GradientDirection.TO_TOP_RIGHT
) -> Gradient:
    """Use a palette's colors as a gradient background."""
    return Gradient(direction=direction, colors=palette.colors)
