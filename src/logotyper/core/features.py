"""OpenType feature switches.

Features are kept as an ordered tuple on the composition. Hosts render them
through ``font_feature_settings``, which produces a CSS
``font-feature-settings`` value listing every feature as on or off.
"""

import logging
from dataclasses import replace

from logotyper.config import FontFeatureConfig
from logotyper.domain import FontFeature

logger = logging.getLogger(__name__)


def default_features(configs: list[FontFeatureConfig]) -> tuple[FontFeature, ...]:
    """Build the initial feature switches from configuration.

    Args:
        configs: Configured features in panel order

    Returns:
        One FontFeature per configured tag
    """
    return tuple(
        FontFeature(tag=config.tag, name=config.name, enabled=config.enabled)
        for config in configs
    )


def toggle_feature(
    features: tuple[FontFeature, ...], tag: str
) -> tuple[FontFeature, ...]:
    """Flip the enabled flag of one feature.

    Args:
        features: Current features
        tag: Feature tag to toggle

    Returns:
        Updated features, or the same tuple if no feature has that tag
    """
    if not any(feature.tag == tag for feature in features):
        logger.debug("Ignoring toggle of unknown font feature %s", tag)
        return features
    return tuple(
        replace(feature, enabled=not feature.enabled) if feature.tag == tag else feature
        for feature in features
    )


def font_feature_settings(features: tuple[FontFeature, ...]) -> str:
    """Render features as a CSS ``font-feature-settings`` value.

    Examples:
        >>> font_feature_settings((FontFeature("liga", "Ligatures", True),
        ...                        FontFeature("ss01", "Set 1", False)))
        '"liga" 1, "ss01" 0'
    """
    return ", ".join(
        f'"{feature.tag}" {1 if feature.enabled else 0}' for feature in features
    )
