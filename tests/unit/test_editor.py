"""Unit tests for the CompositionEditor mutation API."""

import pytest

from logotyper.config import (
    CompositionDefaults,
    DotDefaults,
    FontFeatureConfig,
    LogotyperSettings,
)
from logotyper.core.editor import CompositionEditor
from logotyper.core.features import font_feature_settings
from logotyper.core.gradient import css_for_background, parse_gradient
from logotyper.domain import (
    AddControlPoint,
    CharacterSelection,
    Composition,
    DotSelection,
    LayerFlag,
    LineSelection,
    SetCharacterColor,
    SetCharacterRotation,
    SetDotColor,
    SetDotSize,
    SetLineWidth,
)


@pytest.fixture
def editor() -> CompositionEditor:
    """Create editor with default settings."""
    return CompositionEditor()


@pytest.fixture
def comp(editor: CompositionEditor) -> Composition:
    """Create a composition for 'LogoType'."""
    return editor.create("LogoType")


class TestCreate:
    """Tests for composition creation."""

    def test_create_defaults(self, comp: Composition) -> None:
        """Test initial state of a new composition."""
        assert comp.text == "LogoType"
        assert len(comp.characters) == 8
        assert comp.text_color == "#FFFFFF"
        assert comp.background.color == "#1F2937"
        assert comp.background.gradient is None
        assert comp.dots == ()
        assert comp.lines == ()
        assert comp.selection is None
        assert len(comp.layers) == 3

    def test_create_id_includes_font(self, editor: CompositionEditor) -> None:
        """Test composition id with and without a font."""
        assert editor.create("Acme", font_name="Inter").id == "Inter-Acme"
        assert editor.create("Acme").id == "Acme"

    def test_create_uses_settings(self) -> None:
        """Test that defaults come from settings."""
        settings = LogotyperSettings(
            composition=CompositionDefaults(text_color="#000000", background_color="#FAFAFA")
        )
        comp = CompositionEditor(settings).create("ab")
        assert comp.text_color == "#000000"
        assert all(c.color == "#000000" for c in comp.characters)
        assert comp.background.color == "#FAFAFA"

    def test_set_text_rebuilds_characters(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test that new text discards per-character styling and selection."""
        comp = editor.select_character(comp, 0)
        comp = editor.set_character_property(comp, SetCharacterColor("#FF0000"))
        comp = editor.set_text(comp, "New")

        assert [c.char for c in comp.characters] == ["N", "e", "w"]
        assert all(c.color == comp.text_color for c in comp.characters)
        assert comp.selection is None

    def test_metadata_setters(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test font, slogan and icon."""
        comp = editor.set_font(comp, "Inter")
        comp = editor.set_slogan(comp, "Since 1999")
        comp = editor.set_icon(comp, "star")
        assert (comp.font_name, comp.slogan, comp.icon) == ("Inter", "Since 1999", "star")

    def test_id_follows_text_and_font(self, editor: CompositionEditor) -> None:
        """Test that the id is rebuilt when the text or the font changes."""
        comp = editor.create("AB", font_name="Inter")
        comp = editor.set_text(comp, "CD")
        assert comp.id == "Inter-CD"
        comp = editor.set_font(comp, "Roboto")
        assert comp.id == "Roboto-CD"

    def test_id_without_font(self, editor: CompositionEditor) -> None:
        """Test that clearing the font leaves the bare text as id."""
        comp = editor.create("AB", font_name="Inter")
        comp = editor.set_font(comp, "")
        assert comp.id == "AB"
        assert editor.set_text(comp, "Brand").id == "Brand"


class TestFontFeatures:
    """Tests for OpenType feature switches."""

    def test_default_features(self, comp: Composition) -> None:
        """Test the features offered on a new composition."""
        assert [f.tag for f in comp.font_features] == [
            "liga",
            "clig",
            "kern",
            "dlig",
            "swsh",
            "calt",
            "ss01",
            "ss02",
            "ss03",
            "salt",
        ]
        enabled = {f.tag for f in comp.font_features if f.enabled}
        assert enabled == {"liga", "clig", "kern"}

    def test_toggle_feature(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test switching a feature on and back off."""
        toggled = editor.toggle_font_feature(comp, "ss01")
        assert next(f for f in toggled.font_features if f.tag == "ss01").enabled
        assert next(f for f in comp.font_features if f.tag == "ss01").enabled is False

        restored = editor.toggle_font_feature(toggled, "ss01")
        assert restored.font_features == comp.font_features

    def test_toggle_unknown_tag_is_noop(
        self, editor: CompositionEditor, comp: Composition
    ) -> None:
        """Test that unknown tags leave the composition unchanged."""
        assert editor.toggle_font_feature(comp, "zzzz") is comp

    def test_feature_settings_string(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test the CSS font-feature-settings value."""
        comp = editor.toggle_font_feature(comp, "kern")
        settings = font_feature_settings(comp.font_features)
        assert settings.startswith('"liga" 1, "clig" 1, "kern" 0, "dlig" 0')
        assert settings.endswith('"salt" 0')

    def test_features_from_settings(self) -> None:
        """Test that the offered features come from settings."""
        settings = LogotyperSettings(
            composition=CompositionDefaults(
                font_features=[FontFeatureConfig(tag="smcp", name="Small Caps", enabled=True)]
            )
        )
        comp = CompositionEditor(settings).create("ab")
        assert [f.to_dict() for f in comp.font_features] == [
            {"tag": "smcp", "name": "Small Caps", "enabled": True}
        ]

    def test_features_survive_text_change(
        self, editor: CompositionEditor, comp: Composition
    ) -> None:
        """Test that a new text keeps the feature switches."""
        comp = editor.toggle_font_feature(comp, "dlig")
        assert editor.set_text(comp, "Other").font_features == comp.font_features


class TestSelection:
    """Tests for selection operations."""

    def test_select_character(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test selecting a character by index."""
        selected = editor.select_character(comp, 3)
        assert selected.selection == CharacterSelection(3)
        assert selected.selected_character is not None
        assert selected.selected_character.char == "o"

    @pytest.mark.parametrize("index", [-1, 8, 100])
    def test_select_unknown_character(
        self, editor: CompositionEditor, comp: Composition, index: int
    ) -> None:
        """Test that out-of-range indices are ignored."""
        assert editor.select_character(comp, index) is comp

    def test_select_unknown_dot_and_line(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test that unknown ids are ignored."""
        assert editor.select_dot(comp, "dot-99") is comp
        assert editor.select_line(comp, "line-99") is comp

    def test_selection_replaces_previous(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test that only one thing is selected at a time."""
        comp = editor.add_dot(comp)
        comp = editor.select_character(comp, 0)
        assert comp.selection == CharacterSelection(0)
        assert comp.selected_dot is None

    def test_clear_selection(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test clearing and clearing again."""
        comp = editor.select_character(comp, 0)
        cleared = editor.clear_selection(comp)
        assert cleared.selection is None
        assert editor.clear_selection(cleared) is cleared


class TestPropertyChanges:
    """Tests for set_*_property operations."""

    def test_character_rotation_clamped(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test that a rotation of 400 is stored as 180."""
        comp = editor.select_character(comp, 0)
        comp = editor.set_character_property(comp, SetCharacterRotation(400))
        assert comp.characters[0].rotation == 180
        assert all(c.rotation == 0 for c in comp.characters[1:])

    def test_character_property_without_selection(
        self, editor: CompositionEditor, comp: Composition
    ) -> None:
        """Test that nothing happens when no character is selected."""
        assert editor.set_character_property(comp, SetCharacterColor("#000")) is comp

    def test_dot_property(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test changing the selected dot only."""
        comp = editor.add_dot(editor.add_dot(comp))
        comp = editor.set_dot_property(comp, SetDotColor("#FF0000"))
        assert comp.dots[0].color == "#FFFFFF"
        assert comp.dots[1].color == "#FF0000"

    def test_dot_property_with_character_selected(
        self, editor: CompositionEditor, comp: Composition
    ) -> None:
        """Test that dot mutations need a dot selection."""
        comp = editor.select_character(editor.add_dot(comp), 0)
        assert editor.set_dot_property(comp, SetDotSize(20)) is comp

    def test_line_property(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test line width and control points on the selected line."""
        comp = editor.add_line(comp)
        comp = editor.set_line_property(comp, SetLineWidth(6))
        comp = editor.set_line_property(comp, AddControlPoint(50, 10))
        line = comp.lines[0]
        assert line.width == 6
        assert line.is_curved

    def test_line_property_without_selection(
        self, editor: CompositionEditor, comp: Composition
    ) -> None:
        """Test that nothing happens when no line is selected."""
        comp = editor.clear_selection(editor.add_line(comp))
        assert editor.set_line_property(comp, SetLineWidth(6)) is comp


class TestDecorations:
    """Tests for adding and deleting dots and lines."""

    def test_add_dot_selects_it(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test that a new dot is appended, selected and gets default values."""
        comp = editor.add_dot(comp)
        dot = comp.dots[0]
        assert dot.id == "dot-1"
        assert (dot.x, dot.y, dot.size) == (50, 50, 8)
        assert comp.selection == DotSelection("dot-1")

    def test_add_twice_then_delete(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test deleting the selected (second) dot."""
        comp = editor.add_dot(editor.add_dot(comp))
        assert [d.id for d in comp.dots] == ["dot-1", "dot-2"]

        comp = editor.delete_selected_dot(comp)
        assert [d.id for d in comp.dots] == ["dot-1"]
        assert comp.selection is None

    def test_ids_never_reused(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test that deleting and adding mints a fresh id."""
        comp = editor.add_dot(comp)
        comp = editor.delete_selected_dot(comp)
        comp = editor.add_line(comp)
        comp = editor.add_dot(comp)
        assert comp.lines[0].id == "line-2"
        assert comp.dots[0].id == "dot-3"

    def test_delete_without_selection(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test that delete needs a matching selection."""
        comp = editor.add_line(comp)
        assert editor.delete_selected_dot(comp) is comp
        comp = editor.clear_selection(comp)
        assert editor.delete_selected_line(comp) is comp

    def test_add_and_delete_line(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test line defaults and deletion."""
        comp = editor.add_line(comp)
        line = comp.lines[0]
        assert (line.x1, line.y1, line.x2, line.y2) == (20, 50, 80, 50)
        assert comp.selection == LineSelection(line.id)

        comp = editor.delete_selected_line(comp)
        assert comp.lines == ()
        assert comp.selection is None

    def test_dot_defaults_from_settings(self) -> None:
        """Test that new dots use configured defaults."""
        settings = LogotyperSettings(dots=DotDefaults(size=16, color="#00FF00"))
        comp = CompositionEditor(settings).add_dot(CompositionEditor(settings).create("A"))
        assert comp.dots[0].size == 16
        assert comp.dots[0].color == "#00FF00"


class TestColorsAndBackground:
    """Tests for colors and background paint."""

    def test_global_text_color_cascades(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test that every character takes the global color."""
        comp = editor.select_character(comp, 2)
        comp = editor.set_character_property(comp, SetCharacterColor("#FF0000"))
        comp = editor.set_global_text_color(comp, "#00FF00")
        assert comp.text_color == "#00FF00"
        assert all(c.color == "#00FF00" for c in comp.characters)

    def test_gradient_then_solid(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test that a solid color drops the gradient."""
        gradient = parse_gradient("linear-gradient(90deg, #000, #fff)")
        comp = editor.set_background_gradient(comp, gradient)
        assert css_for_background(comp.background) == "linear-gradient(90deg, #000, #fff)"

        comp = editor.set_background_color(comp, "#123456")
        assert comp.background.gradient is None
        assert css_for_background(comp.background) == "#123456"

    def test_clear_gradient_restores_solid(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test that clearing the gradient paints the kept solid color."""
        gradient = parse_gradient("linear-gradient(90deg, #000, #fff)")
        comp = editor.set_background_gradient(comp, gradient)
        comp = editor.set_background_gradient(comp, None)
        assert css_for_background(comp.background) == "#1F2937"


class TestLayerOperations:
    """Tests for layer operations through the editor."""

    def test_set_layer_flag(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test hiding a layer."""
        comp = editor.set_layer_flag(comp, "layer-dots", LayerFlag.VISIBLE, False)
        layer = comp.find_layer("layer-dots")
        assert layer is not None
        assert not layer.visible

    def test_unknown_layer_is_noop(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test unknown layer ids."""
        assert editor.set_layer_flag(comp, "nope", LayerFlag.LOCKED, True) is comp
        assert editor.reorder_layers(comp, "nope", "layer-text") is comp

    def test_reorder_layers(self, editor: CompositionEditor, comp: Composition) -> None:
        """Test moving lines onto text."""
        comp = editor.reorder_layers(comp, "layer-lines", "layer-text")
        assert {layer.id: layer.order for layer in comp.layers} == {
            "layer-lines": 3,
            "layer-text": 2,
            "layer-dots": 1,
        }
