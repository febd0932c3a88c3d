import flet as ft

TEXT_ACCEPTS_DECORATION = "decoration" in ft.Text.__init__.__code__.co_varnames


def strike_text(text: str, *, tooltip: str | None = None, strike: bool = False):
    """Text control crossed out when ``strike`` is set (done tasks)."""
    if TEXT_ACCEPTS_DECORATION:
        t = ft.Text(text, tooltip=tooltip)
        if strike:
            t.decoration = ft.TextDecoration.LINE_THROUGH
        return t
    return ft.Text(
        text,
        tooltip=tooltip,
        style=ft.TextStyle(decoration=ft.TextDecoration.LINE_THROUGH if strike else None),
    )
