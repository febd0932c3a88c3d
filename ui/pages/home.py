# ui/pages/home.py
import flet as ft

from core.priorities import (
    DEFAULT_PRIORITY,
    Priority,
    normalize_priority,
    priority_color,
    priority_label,
    priority_options,
)
from core.settings import UI
from models.todo_item import TaskFilter, TodoItem
from services.task_board import TaskBoard
from ui import compat
from ui.dialogs import close_alert_dialog, open_alert_dialog, toast


class HomePage:
    def __init__(self, app):
        self.app = app
        self.board = TaskBoard()
        self.add_dialog: ft.AlertDialog | None = None

        # ---------- Header ----------
        header = ft.Row(
            [
                ft.Column(
                    [
                        ft.Text(UI.app_title, size=24, weight=ft.FontWeight.BOLD, color=UI.theme.primary),
                        ft.Text(UI.subtitle, size=14, color=UI.theme.text_subtle),
                    ],
                    spacing=2,
                ),
                ft.IconButton(
                    icon=ft.Icons.EXIT_TO_APP,
                    tooltip="Sign out",
                    icon_color=UI.theme.text_subtle,
                    on_click=lambda e: self.app.auth.signout(),
                ),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )

        # ---------- Dashboard ----------
        self.pending_count = ft.Text("0", size=20, weight=ft.FontWeight.BOLD)
        self.done_count = ft.Text("0", size=20, weight=ft.FontWeight.BOLD)
        self.completion_text = ft.Text("0%", size=22, weight=ft.FontWeight.BOLD)

        dashboard = ft.Column(
            [
                ft.Row(
                    [
                        self._dashboard_card("Pending", self.pending_count, ft.Icons.PENDING_ACTIONS, UI.theme.pending),
                        self._dashboard_card("Done", self.done_count, ft.Icons.CHECK_CIRCLE_OUTLINE, UI.theme.done),
                    ],
                    spacing=8,
                ),
                ft.Container(
                    content=ft.Row(
                        [
                            ft.Icon(ft.Icons.TIMELINE, color=UI.theme.primary, size=32),
                            ft.Column(
                                [
                                    ft.Text("Completion rate", size=14, color=UI.theme.text_subtle),
                                    self.completion_text,
                                ],
                                spacing=2,
                            ),
                        ],
                        spacing=16,
                        vertical_alignment=ft.CrossAxisAlignment.CENTER,
                    ),
                    bgcolor=UI.theme.card,
                    border_radius=12,
                    padding=16,
                ),
            ],
            spacing=8,
        )

        # ---------- Search + tabs ----------
        self.search_tf = ft.TextField(
            hint_text="Search tasks...",
            prefix_icon=ft.Icons.SEARCH,
            border_radius=12,
            filled=True,
            fill_color=UI.theme.card,
            border_color=ft.Colors.TRANSPARENT,
            focused_border_color=UI.theme.primary,
            on_change=self.on_search,
        )
        self.tabs_row = ft.Row(spacing=8)

        self.task_list = ft.ListView(expand=True, spacing=12, padding=ft.padding.only(bottom=80))

        self.fab = ft.FloatingActionButton(
            icon=ft.Icons.ADD,
            text="New task",
            bgcolor=UI.theme.primary,
            foreground_color=ft.Colors.WHITE,
            on_click=self.open_add_dialog,
        )

        self.view = ft.Container(
            content=ft.Column(
                [
                    header,
                    ft.Container(height=8),
                    dashboard,
                    ft.Container(height=8),
                    self.search_tf,
                    self.tabs_row,
                    self.task_list,
                ],
                spacing=12,
                expand=True,
            ),
            bgcolor=UI.theme.background,
            padding=16,
            expand=True,
        )

        self.refresh()

    # ---------- Intents ----------
    def on_search(self, e: ft.ControlEvent):
        self.board.set_search_query(e.control.value)
        self.refresh()

    def on_filter(self, tab: TaskFilter):
        self.board.set_filter(tab)
        self.refresh()

    def on_toggle_done(self, item_id: int):
        self.board.toggle_done(item_id)
        self.refresh()

    def on_delete(self, item_id: int):
        self.board.remove(item_id)
        self.refresh()

    # ---------- Render ----------
    def refresh(self):
        stats = self.board.stats
        self.pending_count.value = str(stats.pending)
        self.done_count.value = str(stats.done)
        self.completion_text.value = f"{int(stats.completion_percent)}%"

        self.tabs_row.controls = [self._filter_tab(tab) for tab in TaskFilter]

        self.task_list.controls.clear()
        for item in self.board.visible_items:
            self.task_list.controls.append(self._row_for_item(item))
        if self.view.page:
            self.view.update()

    def _dashboard_card(self, title: str, count: ft.Text, icon: str, color: str) -> ft.Control:
        return ft.Container(
            content=ft.Column(
                [
                    ft.Container(
                        content=ft.Icon(icon, color=color),
                        width=40,
                        height=40,
                        border_radius=20,
                        bgcolor=ft.Colors.with_opacity(0.1, color),
                        alignment=ft.alignment.center,
                    ),
                    ft.Container(height=4),
                    ft.Text(title, size=12, color=UI.theme.text_subtle),
                    count,
                ],
                spacing=2,
            ),
            bgcolor=UI.theme.card,
            border_radius=12,
            padding=16,
            expand=True,
        )

    def _filter_tab(self, tab: TaskFilter) -> ft.Control:
        selected = self.board.filter is tab
        return ft.Container(
            content=ft.Text(
                tab.label,
                size=14,
                weight=ft.FontWeight.W_500,
                color=UI.theme.tab_selected_text if selected else UI.theme.tab_text,
            ),
            bgcolor=UI.theme.tab_selected_bg if selected else UI.theme.tab_bg,
            border_radius=20,
            padding=ft.padding.symmetric(horizontal=16, vertical=8),
            on_click=lambda e, t=tab: self.on_filter(t),
        )

    def _row_for_item(self, item: TodoItem) -> ft.Control:
        check_btn = ft.IconButton(
            icon=ft.Icons.CHECK_CIRCLE_OUTLINE if item.is_done else ft.Icons.RADIO_BUTTON_UNCHECKED,
            icon_color=UI.theme.done if item.is_done else UI.theme.text_subtle,
            tooltip="Mark as pending" if item.is_done else "Mark as done",
            on_click=lambda e, iid=item.id: self.on_toggle_done(iid),
        )

        title = compat.strike_text(item.text, tooltip=item.text, strike=item.is_done)
        title.size = 16
        title.max_lines = 2
        title.overflow = ft.TextOverflow.ELLIPSIS
        title.color = UI.theme.text_subtle if item.is_done else ft.Colors.BLACK

        priority_tag = ft.Container(
            content=ft.Text(priority_label(item.priority), size=10, color=ft.Colors.BLACK),
            bgcolor=ft.Colors.with_opacity(0.3, priority_color(item.priority)),
            border_radius=4,
            padding=ft.padding.symmetric(horizontal=6, vertical=2),
        )

        delete_btn = ft.IconButton(
            icon=ft.Icons.DELETE,
            icon_color=UI.theme.delete_icon,
            tooltip="Delete",
            on_click=lambda e, iid=item.id: self.on_delete(iid),
        )

        return ft.Container(
            content=ft.Row(
                [
                    check_btn,
                    ft.Column([title, priority_tag], spacing=4, expand=True),
                    delete_btn,
                ],
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            bgcolor=UI.theme.card,
            border_radius=12,
            padding=ft.padding.symmetric(horizontal=8, vertical=12),
        )

    # ---------- Add dialog ----------
    def open_add_dialog(self, _=None):
        text_tf = ft.TextField(label="What needs to be done?", autofocus=True)
        selected = {"priority": DEFAULT_PRIORITY}
        chips_row = ft.Row(alignment=ft.MainAxisAlignment.SPACE_BETWEEN, wrap=True)

        def render_chips():
            chips_row.controls = [
                ft.Chip(
                    label=ft.Text(label),
                    leading=ft.Container(width=8, height=8, border_radius=4, bgcolor=priority_color(level)),
                    selected=selected["priority"] is level,
                    on_select=lambda e, lv=level: on_pick(lv),
                )
                for level, label in (
                    (normalize_priority(value), label) for value, label in priority_options().items()
                )
            ]

        def on_pick(level: Priority):
            selected["priority"] = level
            render_chips()
            chips_row.update()

        def on_confirm(_):
            item = self.board.add(text_tf.value, selected["priority"])
            if item is None:
                text_tf.error_text = "Enter a task"
                text_tf.update()
                return
            close_alert_dialog(self.app.page, self.add_dialog)
            self.add_dialog = None
            self.refresh()
            toast(self.app.page, "Task added")

        def on_cancel(_):
            close_alert_dialog(self.app.page, self.add_dialog)
            self.add_dialog = None

        render_chips()
        self.add_dialog = open_alert_dialog(
            self.app.page,
            title="New task",
            content=ft.Container(
                width=UI.dialog_width,
                content=ft.Column(
                    [
                        text_tf,
                        ft.Text("Priority", size=12),
                        chips_row,
                    ],
                    spacing=12,
                    tight=True,
                ),
            ),
            actions=[
                ft.TextButton("Cancel", on_click=on_cancel),
                ft.FilledButton("Add", on_click=on_confirm, style=ft.ButtonStyle(bgcolor=UI.theme.primary)),
            ],
        )
        text_tf.on_submit = on_confirm
