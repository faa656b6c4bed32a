"""Layer ordering, visibility and locking.

Layers are kept in a panel sequence (the composition's ``layers`` tuple).
Reordering moves one layer to another layer's position in that sequence and
then re-derives every ``order`` value from scratch: the front of the
sequence gets the highest value, descending by one with no gaps. This keeps
orders dense and strictly ordered no matter what state came before.

Renderers paint visible layers by descending order.
"""

import logging
from dataclasses import replace

from logotyper.domain import Layer, LayerCategory, LayerFlag

logger = logging.getLogger(__name__)

DEFAULT_LAYER_NAMES: dict[LayerCategory, str] = {
    LayerCategory.TEXT: "Text",
    LayerCategory.DOTS: "Dots",
    LayerCategory.LINES: "Lines",
}


def default_layers() -> tuple[Layer, ...]:
    """Create one layer per category, text at the bottom and lines on top.

    Returns:
        Layers ``layer-text`` (1), ``layer-dots`` (2), ``layer-lines`` (3)
    """
    return tuple(
        Layer(id=f"layer-{category.value}", name=name, category=category, order=order)
        for order, (category, name) in enumerate(DEFAULT_LAYER_NAMES.items(), start=1)
    )


def set_layer_flag(
    layers: tuple[Layer, ...], layer_id: str, flag: LayerFlag, value: bool
) -> tuple[Layer, ...]:
    """Set the visible or locked flag of one layer.

    Args:
        layers: Current layers
        layer_id: Layer to update
        flag: Flag to set
        value: New flag value

    Returns:
        Updated layers, or the same tuple if the id is unknown
    """
    if not any(layer.id == layer_id for layer in layers):
        logger.debug("Ignoring flag change for unknown layer %s", layer_id)
        return layers
    return tuple(
        replace(layer, **{flag.value: value}) if layer.id == layer_id else layer
        for layer in layers
    )


def reorder(
    layers: tuple[Layer, ...], dragged_id: str, target_id: str
) -> tuple[Layer, ...]:
    """Move the dragged layer to the target layer's position.

    Args:
        layers: Current layers in panel sequence
        dragged_id: Layer being moved
        target_id: Layer whose position the dragged layer takes

    Returns:
        Layers in their new sequence with orders N..1 from front to back,
        or the same tuple when either id is unknown or both are equal
    """
    if dragged_id == target_id:
        return layers

    ids = [layer.id for layer in layers]
    if dragged_id not in ids or target_id not in ids:
        logger.debug("Ignoring reorder of %s onto %s", dragged_id, target_id)
        return layers

    dragged_index = ids.index(dragged_id)
    target_index = ids.index(target_id)

    sequence = list(layers)
    dragged = sequence.pop(dragged_index)
    sequence.insert(target_index, dragged)

    return assign_orders(sequence)


def assign_orders(sequence: list[Layer]) -> tuple[Layer, ...]:
    """Give the front of the sequence the highest order, descending by one."""
    count = len(sequence)
    return tuple(
        replace(layer, order=count - position) for position, layer in enumerate(sequence)
    )


def render_order(layers: tuple[Layer, ...]) -> list[Layer]:
    """Visible layers, topmost first."""
    return sorted(
        (layer for layer in layers if layer.visible),
        key=lambda layer: layer.order,
        reverse=True,
    )


def is_editable(layers: tuple[Layer, ...], category: LayerCategory) -> bool:
    """Check whether entities of a category may be grabbed.

    A category is editable while at least one of its layers is visible and
    unlocked. Categories without any layer are editable.
    """
    matching = [layer for layer in layers if layer.category == category]
    if not matching:
        return True
    return any(layer.is_editable for layer in matching)


def layer_for(layers: tuple[Layer, ...], category: LayerCategory) -> Layer | None:
    """Find the topmost layer grouping a category.

    Args:
        layers: Current layers
        category: Render category

    Returns:
        The matching layer with the highest order, or None
    """
    matching = [layer for layer in layers if layer.category == category]
    if not matching:
        return None
    return max(matching, key=lambda layer: layer.order)
