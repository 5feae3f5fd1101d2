"""
Minimal editor example.
For a complete demo check example.py
"""

import flet as ft

from pixelpad import Editor, EditorView


def main(page: ft.Page):
    page.vertical_alignment = ft.MainAxisAlignment.CENTER
    page.horizontal_alignment = ft.CrossAxisAlignment.CENTER
    page.title = "PixelPad"
    page.padding = 0

    editor = Editor()
    view = EditorView(editor)

    def on_draw(e):
        editor.enter_freehand_draw()

    def on_text(e):
        editor.add_text()

    def on_save(e):
        editor.save_pdf()

    tools = ft.Container(
        content=ft.Row(
            [
                ft.IconButton(icon=ft.Icons.DRAW, icon_size=24, on_click=on_draw),
                ft.IconButton(icon=ft.Icons.TEXT_FIELDS, icon_size=24, on_click=on_text),
                ft.IconButton(icon=ft.Icons.PICTURE_AS_PDF, icon_size=24, on_click=on_save),
            ],
            spacing=4,
        ),
        bgcolor=ft.Colors.with_opacity(0.9, ft.Colors.SURFACE),
        border_radius=8,
        padding=4,
        right=16,
        bottom=16,
    )

    page.add(
        ft.Stack(
            [
                view.control,
                tools,
            ],
            expand=True,
        )
    )


if __name__ == "__main__":
    ft.app(target=main)
