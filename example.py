"""
PixelPad - drawing studio with a tool sidebar.
"""

import logging
from pathlib import Path

import flet as ft

from pixelpad import FONT_FAMILIES, EditorError, Editor, EditorView, Mode, TextBox
from pixelpad.config import MAX_BRUSH_WIDTH, MIN_BRUSH_WIDTH, PDF_FILENAME, PNG_FILENAME

COLORS = {
    "bg": "#020617",
    "sidebar": "#0f172a",
    "border": "#374151",
    "title": "#a855f7",
    "heading": "#d8b4fe",
    "text": "#ffffff",
    "text_secondary": "#94a3b8",
    "button": "#374151",
    "draw_active": "#9333ea",
    "erase_active": "#dc2626",
}

BRUSH_COLORS = ["#000000", "#ef4444", "#f59e0b", "#22c55e", "#3b82f6", "#a855f7"]


def main(page: ft.Page):
    page.title = "PixelPad"
    page.padding = 0
    page.bgcolor = COLORS["bg"]
    page.theme_mode = ft.ThemeMode.DARK

    def notify(message: str):
        page.open(ft.SnackBar(ft.Text(message)))

    def button(label: str, on_click, bgcolor: str = COLORS["button"], ref=None):
        return ft.Container(
            ref=ref,
            content=ft.Text(label, color=COLORS["text"], weight=ft.FontWeight.W_500),
            bgcolor=bgcolor,
            padding=ft.padding.symmetric(horizontal=16, vertical=12),
            border_radius=8,
            alignment=ft.alignment.center,
            on_click=on_click,
        )

    def heading(text: str):
        return ft.Text(text, size=18, weight=ft.FontWeight.W_600, color=COLORS["heading"])

    draw_btn = ft.Ref[ft.Container]()
    erase_btn = ft.Ref[ft.Container]()
    font_dropdown = ft.Ref[ft.Dropdown]()
    size_field = ft.Ref[ft.TextField]()
    text_field = ft.Ref[ft.TextField]()
    export_row = ft.Ref[ft.Column]()

    def sync_controls(editor: Editor):
        """Reflect editor state in the sidebar."""
        if draw_btn.current:
            drawing = editor.mode is Mode.FREEHAND_DRAW
            draw_btn.current.bgcolor = COLORS["draw_active"] if drawing else COLORS["button"]
            draw_btn.current.content.value = "Drawing Active" if drawing else "Draw Mode"
        if erase_btn.current:
            erasing = editor.mode is Mode.ERASE
            erase_btn.current.bgcolor = COLORS["erase_active"] if erasing else COLORS["button"]
            erase_btn.current.content.value = "Eraser Active" if erasing else "Eraser"
        if font_dropdown.current:
            font_dropdown.current.value = editor.state.text_defaults.font_family
        if size_field.current:
            size_field.current.value = str(editor.state.text_defaults.font_size)
        if page.controls:
            page.update()

    editor = Editor(on_change=sync_controls)
    view = EditorView(editor)

    def on_repaint():
        # Keep the text field in step with the selected text box
        selected = editor.selection
        if text_field.current:
            is_text = isinstance(selected, TextBox)
            text_field.current.value = selected.text if is_text else ""
            text_field.current.disabled = not is_text
            if text_field.current.page:
                text_field.current.update()

    editor.surface.add_repaint_listener(on_repaint)

    # Drawing tools

    def on_toggle_draw(e):
        editor.enter_freehand_draw()

    def on_toggle_erase(e):
        editor.enter_erase()

    def on_brush_color(color: str):
        def handler(e):
            editor.change_brush_color(color)

        return handler

    def on_brush_width(e):
        editor.change_brush_width(int(e.control.value))

    # Text tools

    def on_add_text(e):
        editor.add_text()

    def on_style(kind: str):
        def handler(e):
            editor.update_style(kind)

        return handler

    def on_font_family(e):
        editor.change_font_family(e.control.value)

    def on_font_size(e):
        try:
            editor.change_font_size(int(e.control.value))
        except ValueError:
            notify("Font size must be a positive whole number")

    def on_text_change(e):
        editor.edit_text(e.control.value)

    def on_delete(e):
        editor.delete_selected()

    # Import / export

    def on_image_picked(e: ft.FilePickerResultEvent):
        if not e.files:
            return
        if e.files[0].path is None:
            # Web clients do not expose a local path
            notify("Image import needs the desktop app")
            return
        try:
            editor.import_image(Path(e.files[0].path).read_bytes())
        except (OSError, EditorError) as err:
            notify(f"Could not import image: {err}")

    def on_export_saved(e: ft.FilePickerResultEvent):
        if not e.path:
            return
        try:
            if e.path.lower().endswith(".pdf"):
                editor.save_pdf(e.path)
            else:
                editor.save_png(e.path)
            notify(f"Saved {e.path}")
        except (OSError, EditorError) as err:
            notify(f"Export failed: {err}")

    image_picker = ft.FilePicker(on_result=on_image_picked)
    export_picker = ft.FilePicker(on_result=on_export_saved)
    page.overlay.extend([image_picker, export_picker])

    sidebar = ft.Container(
        content=ft.Column(
            [
                ft.Column(
                    [
                        ft.Text("PixelPad", size=24, weight=ft.FontWeight.BOLD, color=COLORS["title"]),
                        ft.Text("Professional Drawing Studio", size=14, color=COLORS["text_secondary"]),
                    ],
                    spacing=4,
                ),
                heading("Drawing Tools"),
                button("Draw Mode", on_toggle_draw, ref=draw_btn),
                button("Eraser", on_toggle_erase, ref=erase_btn),
                ft.Text("Brush Color", color=COLORS["text_secondary"]),
                ft.Row(
                    [
                        ft.Container(
                            width=24,
                            height=24,
                            border_radius=12,
                            bgcolor=color,
                            border=ft.border.all(1, COLORS["border"]),
                            on_click=on_brush_color(color),
                        )
                        for color in BRUSH_COLORS
                    ],
                    spacing=8,
                ),
                ft.Text("Brush Size", color=COLORS["text_secondary"]),
                ft.Slider(
                    min=MIN_BRUSH_WIDTH,
                    max=MAX_BRUSH_WIDTH,
                    divisions=MAX_BRUSH_WIDTH - MIN_BRUSH_WIDTH,
                    value=editor.state.brush.width,
                    label="{value}",
                    on_change=on_brush_width,
                ),
                heading("Text Tools"),
                button("Add Text", on_add_text),
                ft.Dropdown(
                    ref=font_dropdown,
                    value=editor.state.text_defaults.font_family,
                    options=[ft.dropdown.Option(f) for f in FONT_FAMILIES],
                    on_change=on_font_family,
                ),
                ft.TextField(
                    ref=size_field,
                    label="Font size",
                    value=str(editor.state.text_defaults.font_size),
                    keyboard_type=ft.KeyboardType.NUMBER,
                    on_submit=on_font_size,
                    on_blur=on_font_size,
                ),
                ft.Row(
                    [
                        ft.IconButton(ft.Icons.FORMAT_BOLD, on_click=on_style("bold"), tooltip="Bold"),
                        ft.IconButton(ft.Icons.FORMAT_ITALIC, on_click=on_style("italic"), tooltip="Italic"),
                        ft.IconButton(
                            ft.Icons.FORMAT_UNDERLINED, on_click=on_style("underline"), tooltip="Underline"
                        ),
                        ft.IconButton(ft.Icons.DELETE_OUTLINE, on_click=on_delete, tooltip="Delete selected"),
                    ],
                    spacing=4,
                ),
                ft.TextField(
                    ref=text_field,
                    label="Selected text",
                    multiline=True,
                    disabled=True,
                    on_change=on_text_change,
                ),
                heading("Image"),
                button(
                    "Upload Image",
                    lambda e: image_picker.pick_files(
                        allow_multiple=False, file_type=ft.FilePickerFileType.IMAGE
                    ),
                ),
                heading("Export"),
                ft.Column(
                    [
                        button("Export PNG", lambda e: export_picker.save_file(file_name=PNG_FILENAME)),
                        button("Export PDF", lambda e: export_picker.save_file(file_name=PDF_FILENAME)),
                    ],
                    ref=export_row,
                    disabled=not editor.ready,
                    spacing=12,
                ),
            ],
            spacing=16,
            scroll=ft.ScrollMode.AUTO,
        ),
        width=320,
        padding=24,
        bgcolor=COLORS["sidebar"],
        border=ft.border.only(right=ft.BorderSide(1, COLORS["border"])),
    )

    content = ft.Container(
        content=view.control,
        alignment=ft.alignment.center,
        expand=True,
    )

    def on_disconnect(e):
        view.dispose()

    page.on_disconnect = on_disconnect

    page.add(ft.Row([sidebar, content], spacing=0, expand=True))
    sync_controls(editor)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    ft.app(target=main)
