"""
Tests for the scene model.

A mock surface checks that every mutation is mirrored to the renderer.
"""

import pytest

from pixelpad import EngineUnavailable, ImageObject, ObjectKind, Scene, Stroke, TextBox


class TestScene:
    def test_add_keeps_paint_order(self, mock_surface):
        scene = Scene(mock_surface)
        a, b = TextBox(), TextBox()

        scene.add(a)
        scene.add(b)

        assert scene.objects == (a, b)
        assert mock_surface.add_object.call_count == 2
        mock_surface.request_repaint.assert_called()

    def test_add_twice_rejected(self):
        scene = Scene()
        box = scene.add(TextBox())
        with pytest.raises(ValueError):
            scene.add(box)

    def test_select_unknown_object(self):
        scene = Scene()
        with pytest.raises(ValueError):
            scene.select(TextBox())

    def test_removing_selection_clears_it(self, mock_surface):
        scene = Scene(mock_surface)
        box = scene.add(TextBox())
        scene.select(box)

        scene.remove(box)

        assert scene.selection is None
        assert len(scene) == 0
        mock_surface.remove_object.assert_called_once_with(box)
        mock_surface.set_active_selection.assert_called_with(None)

    def test_removing_other_object_keeps_selection(self):
        scene = Scene()
        a = scene.add(TextBox())
        b = scene.add(TextBox())
        scene.select(a)

        scene.remove(b)

        assert scene.selection is a

    def test_remove_missing_is_noop(self, mock_surface):
        scene = Scene(mock_surface)
        scene.remove(TextBox())
        mock_surface.remove_object.assert_not_called()

    def test_of_kind(self):
        scene = Scene()
        box = scene.add(TextBox())
        stroke = scene.add(Stroke([(0, 0), (1, 1)], "#000000", 2))
        assert scene.of_kind(ObjectKind.TEXT) == [box]
        assert scene.of_kind(ObjectKind.STROKE) == [stroke]

    def test_surface_failure_leaves_scene_unchanged(self, mock_surface):
        scene = Scene(mock_surface)
        box = scene.add(TextBox())
        scene.select(box)
        mock_surface.add_object.side_effect = EngineUnavailable("gone")
        mock_surface.remove_object.side_effect = EngineUnavailable("gone")

        with pytest.raises(EngineUnavailable):
            scene.add(TextBox())
        with pytest.raises(EngineUnavailable):
            scene.remove(box)

        assert scene.objects == (box,)
        assert scene.selection is box


class TestSceneObjects:
    def test_ids_are_unique(self):
        objects = [TextBox(), ImageObject(), Stroke([(0, 0)], "#000000", 1)]
        assert len({o.id for o in objects}) == 3

    def test_identity_equality(self):
        assert TextBox() != TextBox()

    def test_stroke_position_from_points(self):
        stroke = Stroke([(30, 40), (10, 50), (20, 5)], "#000000", 3)
        assert (stroke.x, stroke.y) == (10, 5)
        assert not stroke.selectable

    def test_empty_stroke_rejected(self):
        with pytest.raises(ValueError):
            Stroke([], "#000000", 3)

    def test_image_size(self, editor, png_bytes):
        image = editor.import_image(png_bytes)
        assert image.size == (20, 10)


class TestDeleteSelected:
    def test_no_selection_keeps_count(self, editor):
        editor.add_text()
        editor.scene.clear_selection()

        assert editor.delete_selected() is False
        assert len(editor.scene) == 1

    def test_deletes_selection(self, editor):
        editor.add_text()
        keep = editor.add_text("keep")
        gone = editor.add_text("gone")

        assert editor.delete_selected()
        assert gone not in editor.scene
        assert keep in editor.scene
        assert editor.selection is None
        assert editor.surface.objects == list(editor.scene.objects)
