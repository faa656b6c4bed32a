"""Configuration settings for Logotyper."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class ValueRange(BaseModel):
    """Closed numeric range used to clamp editable values."""

    minimum: float
    maximum: float

    @model_validator(mode="after")
    def _check_order(self) -> "ValueRange":
        if self.minimum > self.maximum:
            raise ValueError(
                f"minimum ({self.minimum}) must not exceed maximum ({self.maximum})"
            )
        return self

    def clamp(self, value: float) -> float:
        """Clip a value into the range.

        Args:
            value: Raw input value

        Returns:
            The value, or the nearest bound when it lies outside the range
        """
        return max(self.minimum, min(self.maximum, value))


def _range(minimum: float, maximum: float) -> ValueRange:
    return ValueRange(minimum=minimum, maximum=maximum)


class CharacterLimits(BaseModel):
    """Valid ranges for per-character styling."""

    scale: ValueRange = Field(
        default_factory=lambda: _range(0.5, 2.0),
        description="Uniform scale factor range",
    )
    rotation: ValueRange = Field(
        default_factory=lambda: _range(-180.0, 180.0),
        description="Rotation range in degrees",
    )


class DotDefaults(BaseModel):
    """Defaults and limits for newly added dots."""

    x: float = Field(default=50.0, ge=0.0, le=100.0, description="Initial X (percent)")
    y: float = Field(default=50.0, ge=0.0, le=100.0, description="Initial Y (percent)")
    size: float = Field(default=8.0, gt=0.0, description="Initial diameter in px")
    corner_radius: float = Field(
        default=100.0,
        ge=0.0,
        le=100.0,
        description="Initial corner radius (100 = circle)",
    )
    opacity: float = Field(default=100.0, ge=0.0, le=100.0, description="Initial opacity")
    color: str = Field(default="#FFFFFF", description="Initial fill color")
    border_color: str = Field(default="#000000", description="Initial border color")
    size_range: ValueRange = Field(
        default_factory=lambda: _range(1.0, 200.0),
        description="Allowed diameter range in px",
    )
    border_range: ValueRange = Field(
        default_factory=lambda: _range(0.0, 20.0),
        description="Allowed border width range in px",
    )
    rotation: ValueRange = Field(
        default_factory=lambda: _range(-180.0, 180.0),
        description="Rotation range in degrees",
    )


class LineDefaults(BaseModel):
    """Defaults and limits for newly added lines."""

    x1: float = Field(default=20.0, ge=0.0, le=100.0, description="Initial start X")
    y1: float = Field(default=50.0, ge=0.0, le=100.0, description="Initial start Y")
    x2: float = Field(default=80.0, ge=0.0, le=100.0, description="Initial end X")
    y2: float = Field(default=50.0, ge=0.0, le=100.0, description="Initial end Y")
    width: float = Field(default=2.0, gt=0.0, description="Initial stroke width in px")
    color: str = Field(default="#FFFFFF", description="Initial stroke color")
    border_color: str = Field(default="#000000", description="Initial outline color")
    width_range: ValueRange = Field(
        default_factory=lambda: _range(1.0, 50.0),
        description="Allowed stroke width range in px",
    )
    border_range: ValueRange = Field(
        default_factory=lambda: _range(0.0, 20.0),
        description="Allowed outline width range in px",
    )


class GradientConfig(BaseModel):
    """Gradient codec defaults."""

    fallback_direction: str = Field(
        default="45deg",
        description="Direction used when gradient text cannot be parsed",
    )
    fallback_colors: tuple[str, str] = Field(
        default=("#667eea", "#764ba2"),
        description="Colors used when gradient text cannot be parsed",
    )
    added_color: str = Field(
        default="#f093fb",
        description="Color appended by add_color",
    )


class FontFeatureConfig(BaseModel):
    """An OpenType feature offered on new compositions."""

    tag: str = Field(min_length=4, max_length=4, description="OpenType feature tag")
    name: str = Field(description="Display name")
    enabled: bool = Field(default=False, description="Initially switched on")


def _feature(tag: str, name: str, enabled: bool = False) -> FontFeatureConfig:
    return FontFeatureConfig(tag=tag, name=name, enabled=enabled)


def _default_font_features() -> list[FontFeatureConfig]:
    return [
        _feature("liga", "Standard Ligatures", enabled=True),
        _feature("clig", "Contextual Ligatures", enabled=True),
        _feature("kern", "Kerning", enabled=True),
        _feature("dlig", "Discretionary Ligatures"),
        _feature("swsh", "Swashes"),
        _feature("calt", "Contextual Alternates"),
        _feature("ss01", "Stylistic Set 1"),
        _feature("ss02", "Stylistic Set 2"),
        _feature("ss03", "Stylistic Set 3"),
        _feature("salt", "Stylistic Alternates"),
    ]


class CompositionDefaults(BaseModel):
    """Defaults for freshly created compositions."""

    text_color: str = Field(default="#FFFFFF", description="Global text color")
    background_color: str = Field(default="#1F2937", description="Solid background")
    font_features: list[FontFeatureConfig] = Field(
        default_factory=_default_font_features,
        description="OpenType features offered on new compositions, in panel order",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (None = no file output)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class LogotyperSettings(BaseModel):
    """Main application settings."""

    characters: CharacterLimits = Field(default_factory=CharacterLimits)
    dots: DotDefaults = Field(default_factory=DotDefaults)
    lines: LineDefaults = Field(default_factory=LineDefaults)
    gradient: GradientConfig = Field(default_factory=GradientConfig)
    composition: CompositionDefaults = Field(default_factory=CompositionDefaults)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> LogotyperSettings:
    """Get default application settings."""
    return LogotyperSettings()
