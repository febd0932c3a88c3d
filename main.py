# main.py
import os, sys
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
import flet as ft

from core.logging_setup import setup_logging
from core.settings import UI
from ui.app_shell import AppShell



def main(page: ft.Page):
    page.title = UI.app_title
    page.theme_mode = ft.ThemeMode(UI.theme_mode)
    page.theme = ft.Theme(color_scheme_seed=UI.color_scheme_seed)
    page.padding = 0
    page.window.width = UI.window_width
    page.window.height = UI.window_height
    page.window.min_width = UI.window_min_width
    page.window.min_height = UI.window_min_height

    shell = AppShell(page)
    page.on_disconnect = lambda e: shell.unmount()
    shell.mount()


if __name__ == "__main__":
    setup_logging()
    ft.app(target=main)
