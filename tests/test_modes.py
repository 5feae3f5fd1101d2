"""
Tests for the mode controller.
"""

import itertools

import pytest

from pixelpad import ImageObject, Mode, Stroke, TextBox

from .conftest import draw_stroke


def _active_flags(editor):
    state = editor.state
    return [state.is_selecting, state.is_drawing, state.is_erasing]


class TestModeExclusion:
    """Exactly one mode is active after every transition."""

    def test_initial_mode_is_select(self, editor):
        assert editor.mode is Mode.SELECT
        assert _active_flags(editor) == [True, False, False]
        assert not editor.stroke_tool.enabled

    @pytest.mark.parametrize(
        "sequence",
        list(itertools.product(["draw", "erase"], repeat=4)),
    )
    def test_exactly_one_mode_active(self, editor, sequence):
        for step in sequence:
            if step == "draw":
                editor.enter_freehand_draw()
            else:
                editor.enter_erase()
            assert sum(_active_flags(editor)) == 1
            assert editor.stroke_tool.enabled == (editor.mode is not Mode.SELECT)

    def test_draw_toggle_twice_returns_to_select(self, editor):
        assert editor.enter_freehand_draw() is Mode.FREEHAND_DRAW
        assert editor.enter_freehand_draw() is Mode.SELECT

    def test_erase_toggle_twice_returns_to_select(self, editor):
        assert editor.enter_erase() is Mode.ERASE
        assert editor.enter_erase() is Mode.SELECT

    def test_draw_clears_erase(self, editor):
        editor.enter_erase()
        editor.enter_freehand_draw()
        assert editor.mode is Mode.FREEHAND_DRAW
        assert editor.stroke_tool.color == editor.state.brush.color

    def test_erase_clears_draw(self, editor):
        editor.enter_freehand_draw()
        editor.enter_erase()
        assert editor.mode is Mode.ERASE
        assert editor.stroke_tool.color == "#ffffff"

    def test_set_mode_accepts_values(self, editor):
        editor.set_mode("erase")
        assert editor.mode is Mode.ERASE

    def test_set_mode_rejects_unknown(self, editor):
        with pytest.raises(ValueError):
            editor.set_mode("lasso")
        assert editor.mode is Mode.SELECT

    def test_listeners_notified_on_mode_change(self, editor):
        seen = []
        editor.add_change_listener(lambda ed: seen.append(ed.mode))

        editor.enter_freehand_draw()
        editor.enter_freehand_draw()

        assert seen == [Mode.FREEHAND_DRAW, Mode.SELECT]


class TestSelectability:
    def test_draw_disables_all_objects(self, editor, png_bytes):
        box = editor.add_text()
        image = editor.import_image(png_bytes)

        editor.enter_freehand_draw()

        assert not box.selectable and not box.evented
        assert not image.selectable and not image.evented

    def test_return_to_select_reenables_text_and_images(self, editor, png_bytes):
        box = editor.add_text()
        image = editor.import_image(png_bytes)
        editor.enter_freehand_draw()
        stroke = draw_stroke(editor, [(10, 10), (40, 40)])

        editor.enter_freehand_draw()

        assert box.selectable and box.evented
        assert image.selectable and image.evented
        assert isinstance(stroke, Stroke)
        assert not stroke.selectable and not stroke.evented

    def test_erase_leaves_flags_untouched(self, editor):
        box = editor.add_text()
        editor.enter_erase()
        assert box.selectable and box.evented

    def test_image_imported_while_drawing_is_inert(self, editor, png_bytes):
        editor.enter_freehand_draw()
        image = editor.import_image(png_bytes)
        assert isinstance(image, ImageObject)
        assert not image.selectable

    @pytest.mark.parametrize("modes", [["erase"], ["draw", "erase"]])
    def test_image_imported_while_erasing_is_inert(self, editor, png_bytes, modes):
        for mode in modes:
            editor.set_mode(mode)
        image = editor.import_image(png_bytes)
        assert not image.selectable and not image.evented

        editor.set_mode("select")
        assert image.selectable and image.evented

    def test_mode_switch_drops_in_flight_stroke(self, editor):
        editor.enter_freehand_draw()
        editor.pointer_down(5, 5)
        editor.pointer_move(50, 50)

        editor.enter_erase()

        assert editor.stroke_tool.current_path == []
        assert len(editor.scene) == 0


class TestScenarioTextThenDraw:
    def test_scenario(self, editor):
        box = editor.add_text()
        assert len(editor.scene) == 1
        assert editor.selection is box
        assert isinstance(box, TextBox)
        assert (box.font_family, box.font_size) == ("Arial", 20)

        editor.change_font_size(32)
        assert box.font_size == 32
        assert editor.state.text_defaults.font_size == 32

        editor.enter_freehand_draw()
        assert editor.mode is Mode.FREEHAND_DRAW
        assert not box.selectable

        editor.enter_freehand_draw()
        assert editor.mode is Mode.SELECT
        assert box.selectable
