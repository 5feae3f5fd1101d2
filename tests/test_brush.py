"""
Tests for brush configuration and stroke commits.
"""

import pytest

from pixelpad import Mode, Stroke
from pixelpad.interactions.drawing import StrokeTool

from .conftest import draw_stroke


class TestBrushChanges:
    def test_color_applies_live_while_drawing(self, editor):
        editor.enter_freehand_draw()
        editor.change_brush_color("#ff0000")
        assert editor.stroke_tool.color == "#ff0000"
        assert editor.state.brush.color == "#ff0000"

    def test_width_applies_live_while_drawing(self, editor):
        editor.enter_freehand_draw()
        editor.change_brush_width(12)
        assert editor.stroke_tool.width == 12

    @pytest.mark.parametrize("color", ["#ff0000", "#00ff00", "#123456", "#abc"])
    def test_erase_color_pinned_to_background(self, editor, color):
        editor.enter_erase()
        editor.change_brush_color(color)
        assert editor.stroke_tool.color == "#ffffff"
        assert editor.state.brush.color != "#ffffff"

    def test_erase_width_follows_brush(self, editor):
        editor.enter_erase()
        editor.change_brush_width(20)
        assert editor.stroke_tool.width == 20

    def test_changes_in_select_mode_seed_next_stroke(self, editor):
        editor.change_brush_color("#00F")
        editor.change_brush_width(9)
        editor.enter_freehand_draw()
        assert editor.stroke_tool.color == "#0000ff"
        assert editor.stroke_tool.width == 9

    def test_committed_strokes_not_restyled(self, editor):
        editor.enter_freehand_draw()
        stroke = draw_stroke(editor, [(10, 10), (60, 60)])

        editor.change_brush_color("#ff0000")
        editor.change_brush_width(25)

        assert stroke.color == "#000000"
        assert stroke.width == 5

    @pytest.mark.parametrize("color", ["red", "#12345", "000000", ""])
    def test_invalid_color_rejected(self, editor, color):
        with pytest.raises(ValueError):
            editor.change_brush_color(color)
        assert editor.state.brush.color == "#000000"

    @pytest.mark.parametrize("width", [0, 31, -2, "5", True])
    def test_invalid_width_rejected(self, editor, width):
        with pytest.raises(ValueError):
            editor.change_brush_width(width)
        assert editor.state.brush.width == 5


class TestStrokes:
    def test_draw_commits_stroke_on_top(self, editor):
        box = editor.add_text()
        editor.enter_freehand_draw()

        stroke = draw_stroke(editor, [(10, 10), (30, 30), (60, 20)])

        assert isinstance(stroke, Stroke)
        assert editor.scene.objects == (box, stroke)
        assert stroke.points == ((10.0, 10.0), (30.0, 30.0), (60.0, 20.0))

    def test_erase_stroke_paints_background(self, editor):
        editor.change_brush_color("#ff0000")
        editor.enter_erase()
        stroke = draw_stroke(editor, [(10, 10), (60, 60)])
        assert stroke.color == "#ffffff"

    def test_single_point_is_discarded(self, editor):
        editor.enter_freehand_draw()
        assert draw_stroke(editor, [(10, 10)]) is None
        assert len(editor.scene) == 0

    def test_stroke_is_immutable(self, editor):
        editor.enter_freehand_draw()
        stroke = draw_stroke(editor, [(10, 10), (60, 60)])

        with pytest.raises(AttributeError):
            stroke.color = "#ff0000"
        with pytest.raises(AttributeError):
            stroke.points = ()
        with pytest.raises(AttributeError):
            stroke.move_by(5, 5)

    def test_drawing_does_not_select(self, editor):
        editor.enter_freehand_draw()
        draw_stroke(editor, [(10, 10), (60, 60)])
        assert editor.selection is None
        assert editor.mode is Mode.FREEHAND_DRAW


class TestStrokeTool:
    def test_points_closer_than_min_distance_are_skipped(self):
        tool = StrokeTool()
        tool.enable("#000000", 5)
        tool.start_stroke(0, 0)
        tool.add_point(1, 0)
        tool.add_point(10, 0)
        assert tool.current_path == [(0, 0), (10, 0)]

    def test_disabled_tool_ignores_input(self):
        tool = StrokeTool()
        tool.start_stroke(0, 0)
        tool.add_point(10, 10)
        assert tool.current_path == []
        assert tool.end_stroke() is None

    def test_locked_color(self):
        tool = StrokeTool()
        tool.enable("#ffffff", 5, lock_color=True)
        tool.color = "#000000"
        assert tool.color == "#ffffff"
        assert tool.is_eraser
