import flet as ft


def open_alert_dialog(
    page: ft.Page,
    *,
    title: str,
    content: ft.Control,
    actions: list[ft.Control],
    on_dismiss=None,
) -> ft.AlertDialog:
    dlg = ft.AlertDialog(
        modal=True,
        title=ft.Text(title),
        content=content,
        actions=actions,
        actions_alignment=ft.MainAxisAlignment.END,
        on_dismiss=on_dismiss,
    )
    page.open(dlg)
    return dlg


def close_alert_dialog(page: ft.Page, dlg: ft.AlertDialog | None):
    if dlg is None:
        return
    page.close(dlg)


def toast(page: ft.Page, text: str):
    page.open(ft.SnackBar(ft.Text(text)))
