"""Unit tests for layer ordering, visibility and locking."""

import pytest

from logotyper.core.layers import (
    assign_orders,
    default_layers,
    is_editable,
    layer_for,
    render_order,
    reorder,
    set_layer_flag,
)
from logotyper.domain import Layer, LayerCategory, LayerFlag


def orders(layers: tuple[Layer, ...]) -> dict[str, int]:
    """Map layer ids to their order values."""
    return {layer.id: layer.order for layer in layers}


class TestDefaultLayers:
    """Tests for default_layers."""

    def test_one_layer_per_category(self) -> None:
        """Test ids, categories and orders of the default layers."""
        layers = default_layers()
        assert [layer.id for layer in layers] == ["layer-text", "layer-dots", "layer-lines"]
        assert [layer.category for layer in layers] == list(LayerCategory)
        assert orders(layers) == {"layer-text": 1, "layer-dots": 2, "layer-lines": 3}
        assert all(layer.visible and not layer.locked for layer in layers)


class TestReorder:
    """Tests for reorder."""

    @pytest.fixture
    def layers(self) -> tuple[Layer, ...]:
        """Create the default layers."""
        return default_layers()

    def test_move_lines_onto_text(self, layers: tuple[Layer, ...]) -> None:
        """Test dragging the lines layer onto the text layer."""
        result = reorder(layers, "layer-lines", "layer-text")
        assert orders(result) == {"layer-lines": 3, "layer-text": 2, "layer-dots": 1}
        assert [layer.id for layer in result] == ["layer-lines", "layer-text", "layer-dots"]

    def test_move_text_onto_lines(self, layers: tuple[Layer, ...]) -> None:
        """Test dragging the first layer to the back of the sequence."""
        result = reorder(layers, "layer-text", "layer-lines")
        assert [layer.id for layer in result] == ["layer-dots", "layer-lines", "layer-text"]
        assert orders(result) == {"layer-dots": 3, "layer-lines": 2, "layer-text": 1}

    def test_orders_dense_and_distinct(self, layers: tuple[Layer, ...]) -> None:
        """Test that orders are N..1 after any sequence of moves."""
        result = layers
        for dragged, target in [
            ("layer-dots", "layer-text"),
            ("layer-lines", "layer-dots"),
            ("layer-text", "layer-lines"),
        ]:
            result = reorder(result, dragged, target)
            assert sorted(orders(result).values()) == [1, 2, 3]

    def test_same_layer_is_noop(self, layers: tuple[Layer, ...]) -> None:
        """Test that dropping a layer on itself changes nothing."""
        assert reorder(layers, "layer-dots", "layer-dots") is layers

    @pytest.mark.parametrize(
        ("dragged", "target"),
        [("missing", "layer-text"), ("layer-text", "missing")],
    )
    def test_unknown_id_is_noop(
        self, layers: tuple[Layer, ...], dragged: str, target: str
    ) -> None:
        """Test that unknown ids leave layers unchanged."""
        assert reorder(layers, dragged, target) is layers

    def test_assign_orders(self) -> None:
        """Test that order values follow sequence position."""
        sequence = [
            Layer(id="a", name="A", category=LayerCategory.TEXT, order=10),
            Layer(id="b", name="B", category=LayerCategory.DOTS, order=10),
        ]
        assert orders(assign_orders(sequence)) == {"a": 2, "b": 1}


class TestLayerFlags:
    """Tests for visibility and locking."""

    def test_hide_layer(self) -> None:
        """Test hiding one layer leaves the others alone."""
        layers = set_layer_flag(default_layers(), "layer-dots", LayerFlag.VISIBLE, False)
        visible = {layer.id: layer.visible for layer in layers}
        assert visible == {"layer-text": True, "layer-dots": False, "layer-lines": True}

    def test_lock_layer(self) -> None:
        """Test locking a layer."""
        layers = set_layer_flag(default_layers(), "layer-text", LayerFlag.LOCKED, True)
        assert layers[0].locked
        assert not layers[0].is_editable

    def test_unknown_layer_is_noop(self) -> None:
        """Test that unknown ids leave layers unchanged."""
        layers = default_layers()
        assert set_layer_flag(layers, "missing", LayerFlag.LOCKED, True) is layers

    def test_render_order_skips_hidden(self) -> None:
        """Test that renderers see visible layers topmost first."""
        layers = set_layer_flag(default_layers(), "layer-dots", LayerFlag.VISIBLE, False)
        assert [layer.id for layer in render_order(layers)] == ["layer-lines", "layer-text"]

    def test_is_editable(self) -> None:
        """Test editability per category."""
        layers = set_layer_flag(default_layers(), "layer-lines", LayerFlag.LOCKED, True)
        assert is_editable(layers, LayerCategory.DOTS)
        assert not is_editable(layers, LayerCategory.LINES)
        assert is_editable((), LayerCategory.TEXT)


class TestLayerFor:
    """Tests for category lookup."""

    def test_default_layer_per_category(self) -> None:
        """Test that each category resolves to its default layer."""
        layers = default_layers()
        for category in LayerCategory:
            layer = layer_for(layers, category)
            assert layer is not None
            assert layer.id == f"layer-{category.value}"

    def test_missing_category(self) -> None:
        """Test that a category without layers resolves to None."""
        layers = tuple(
            layer for layer in default_layers() if layer.category != LayerCategory.LINES
        )
        assert layer_for(layers, LayerCategory.LINES) is None

    def test_topmost_wins(self) -> None:
        """Test that the highest order wins when a category has several layers."""
        layers = (
            Layer(id="low", name="Low", category=LayerCategory.DOTS, order=1),
            Layer(id="high", name="High", category=LayerCategory.DOTS, order=5),
            Layer(id="text", name="Text", category=LayerCategory.TEXT, order=9),
        )
        layer = layer_for(layers, LayerCategory.DOTS)
        assert layer is not None
        assert layer.id == "high"
