"""Configuration management for logotyper.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CharacterLimits: Scale and rotation ranges for characters
- DotDefaults / LineDefaults: Defaults and limits for decorations
- GradientConfig: Gradient codec fallback and added colors
- CompositionDefaults: Colors and font features of new compositions
- LoggingConfig: Logging settings
- LogotyperSettings: Main application settings
"""

from logotyper.config.settings import (
    CharacterLimits,
    CompositionDefaults,
    DotDefaults,
    FontFeatureConfig,
    GradientConfig,
    LineDefaults,
    LoggingConfig,
    LogotyperSettings,
    ValueRange,
    get_default_settings,
)

__all__ = [
    "CharacterLimits",
    "CompositionDefaults",
    "DotDefaults",
    "FontFeatureConfig",
    "GradientConfig",
    "LineDefaults",
    "LoggingConfig",
    "LogotyperSettings",
    "ValueRange",
    "get_default_settings",
]
