"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from diner.aggregation import (
    average_by_course,
    count_by_course,
    filter_by_course,
    has_course_data,
    total_count,
)
from diner.config import resolve_debug_log_path
from diner.confirm_modal import ConfirmDeleteModal
from diner.constant import (
    DESCRIPTION_PLACEHOLDER,
    EMPTY_STATES,
    FILTER_OPTIONS,
    NAME_PLACEHOLDER,
    PRICE_PLACEHOLDER,
    SCREEN_HOTKEYS,
)
from diner.errors import MenuValidationError
from diner.form import ItemForm
from diner.models import ALL_COURSES, CourseFilter, Ingredient, MenuItem, Screen
from diner.rendering import (
    format_averages,
    format_course_badge,
    format_empty_state,
    format_item_card,
    format_item_summary,
    format_nav_bar,
)
from diner.store import MenuStore

_TEXT_FIELDS = {"name": "name", "description": "description", "price": "price_text"}

_HELP_BY_SCREEN: dict[Screen, str] = {
    Screen.HOME: "J/K/↑/↓ select, D delete. H/A/F/V switch screens. Ctrl+Q quit.",
    Screen.ADD: "↑/↓ move, Enter edit/toggle/submit, ←/→ course. J/K select item, D delete.",
    Screen.FILTER: "←/→ change course filter. H/A/F/V switch screens.",
    Screen.AVERAGE: "H/A/F/V switch screens. Ctrl+Q quit.",
}


class DinerApp(App):
    """A Textual app for building a restaurant menu."""

    TITLE = "Chef Chris' Diner"
    SUB_TITLE = "Chef's edge, every plate"

    CSS = """
    Screen {
        layout: vertical;
    }

    #nav-bar {
        height: 1;
        padding: 0 1;
        margin-bottom: 1;
    }

    #main-pane {
        height: 1fr;
        border: round $primary;
        padding: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
    }

    #body {
        height: 1fr;
    }

    #help {
        color: $text-muted;
        padding: 0 1;
    }
    """

    current_view = reactive(Screen.HOME)
    input_state = reactive("normal")
    item_selected_index = reactive(None)
    add_cursor = reactive(0)
    filter_selector = reactive(ALL_COURSES)

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(self, store: MenuStore | None = None) -> None:
        super().__init__()
        self.store = store if store is not None else MenuStore()
        self.form = ItemForm()
        self.system_status = ""
        self.status_is_error = False
        self._debug_log_path = resolve_debug_log_path()
        self._render_dispatch: dict[Screen, Callable[[], Text]] = {
            Screen.HOME: self._render_home,
            Screen.ADD: self._render_add,
            Screen.FILTER: self._render_filter,
            Screen.AVERAGE: self._render_average,
        }
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            return

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="nav-bar")
        with Vertical(id="main-pane"):
            yield Static(id="body")
        yield Static(id="status-bar")
        yield Static(id="help")

    def on_mount(self) -> None:
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, ConfirmDeleteModal):
            return

        self._log_debug(
            f"on_key key={event.key!r} char={event.character!r} screen={self.current_view.value!r} "
            f"state={self.input_state!r}"
        )

        if self.input_state == "editing":
            self._handle_editing_key(event)
            event.stop()
            return

        key = event.key
        if key in SCREEN_HOTKEYS:
            self.select_screen(SCREEN_HOTKEYS[key])
            event.stop()
            return

        handled = False
        if self.current_view == Screen.HOME:
            handled = self._handle_home_key(key)
        elif self.current_view == Screen.ADD:
            handled = self._handle_add_key(key)
        elif self.current_view == Screen.FILTER:
            handled = self._handle_filter_key(key)

        if handled:
            event.stop()

    # Actions

    def select_screen(self, target: Screen) -> None:
        if target == self.current_view:
            return
        self.current_view = target
        self.system_status = ""
        self.status_is_error = False
        self._log_debug(f"screen_select screen={target.value!r}")
        self._refresh_all()

    def select_filter(self, selector: CourseFilter) -> None:
        self.filter_selector = selector
        self._log_debug(f"filter_select selector={str(getattr(selector, 'value', selector))!r}")
        self._refresh_body()

    def submit_form(self) -> MenuItem | None:
        try:
            item = self.form.submit(self.store)
        except MenuValidationError as exc:
            self._set_status(exc.message, error=True)
            self._log_debug(f"submit_rejected error={type(exc).__name__}")
            self._refresh_body()
            return None

        self.item_selected_index = 0
        self.add_cursor = 0
        self._set_status(f'Saved "{item.name}". Menu item added to Home.')
        self._log_debug(f"submit_saved item_id={item.item_id} count={len(self.store)}")
        self._refresh_body()
        return item

    def toggle_form_ingredient(self, ingredient: Ingredient) -> None:
        try:
            self.form.toggle_ingredient(ingredient)
        except MenuValidationError as exc:
            self._set_status(exc.message, error=True)
            self._log_debug(f"toggle_rejected ingredient={ingredient.value!r}")
        else:
            self._set_status("")
        self._refresh_body()

    def request_delete_selected(self) -> None:
        item = self._selected_item()
        if item is None:
            return
        self.push_screen(
            ConfirmDeleteModal(item),
            callback=lambda confirmed: self._finish_delete(item.item_id, bool(confirmed)),
        )

    def _finish_delete(self, item_id: str, confirmed: bool) -> None:
        if not confirmed:
            self._log_debug(f"delete_cancelled item_id={item_id}")
            return

        item = self.store.get(item_id)
        self.store.remove(item_id)
        self._clamp_selection()
        if item is not None:
            self._set_status(f'Removed "{item.name}".')
        self._log_debug(f"delete_confirmed item_id={item_id} count={len(self.store)}")
        self._refresh_all()

    # Key handlers

    def _handle_home_key(self, key: str) -> bool:
        if key in {"j", "down"}:
            self._move_item_selection(1)
            return True
        if key in {"k", "up"}:
            self._move_item_selection(-1)
            return True
        if key == "d":
            self.request_delete_selected()
            return True
        return False

    def _handle_add_key(self, key: str) -> bool:
        rows = self._add_rows()
        if key == "down":
            self.add_cursor = (self.add_cursor + 1) % len(rows)
            self._refresh_body()
            return True
        if key == "up":
            self.add_cursor = (self.add_cursor - 1) % len(rows)
            self._refresh_body()
            return True
        if key == "j":
            self._move_item_selection(1)
            return True
        if key == "k":
            self._move_item_selection(-1)
            return True
        if key == "d":
            self.request_delete_selected()
            return True

        row_kind, row_value = rows[self.add_cursor]
        if row_kind == "course" and key in {"left", "right"}:
            self.form.cycle_course(1 if key == "right" else -1)
            self._refresh_body()
            return True

        if key not in {"enter", "space"}:
            return False

        if row_kind in _TEXT_FIELDS:
            self.input_state = "editing"
            self._refresh_all()
        elif row_kind == "course":
            self.form.cycle_course(1)
            self._refresh_body()
        elif row_kind == "ingredient":
            self.toggle_form_ingredient(Ingredient(row_value))
        elif row_kind == "submit":
            self.submit_form()
        return True

    def _handle_filter_key(self, key: str) -> bool:
        if key not in {"left", "right"}:
            return False
        idx = FILTER_OPTIONS.index(self.filter_selector)
        delta = 1 if key == "right" else -1
        self.select_filter(FILTER_OPTIONS[(idx + delta) % len(FILTER_OPTIONS)])
        return True

    def _handle_editing_key(self, event: Key) -> None:
        row_kind, _ = self._add_rows()[self.add_cursor]
        attr = _TEXT_FIELDS[row_kind]
        value = getattr(self.form, attr)

        if event.key in {"enter", "escape", "ctrl+c"}:
            self.input_state = "normal"
            self._refresh_all()
            return

        if event.key == "backspace":
            setattr(self.form, attr, value[:-1])
        elif event.is_printable and event.character:
            setattr(self.form, attr, value + event.character)
        self._refresh_body()

    # Selection helpers

    def _add_rows(self) -> list[tuple[str, str]]:
        rows: list[tuple[str, str]] = [("name", ""), ("description", ""), ("course", "")]
        rows.extend(("ingredient", ingredient.value) for ingredient in Ingredient)
        rows.append(("price", ""))
        rows.append(("submit", ""))
        return rows

    def _move_item_selection(self, delta: int) -> None:
        count = len(self.store)
        if not count:
            return

        if self.item_selected_index is None:
            self.item_selected_index = 0 if delta > 0 else count - 1
        else:
            self.item_selected_index = (self.item_selected_index + delta) % count
        self._refresh_body()

    def _clamp_selection(self) -> None:
        count = len(self.store)
        if not count:
            self.item_selected_index = None
        elif self.item_selected_index is not None:
            self.item_selected_index = min(self.item_selected_index, count - 1)

    def _selected_item(self) -> MenuItem | None:
        if self.item_selected_index is None:
            return None
        items = self.store.list()
        if not (0 <= self.item_selected_index < len(items)):
            return None
        return items[self.item_selected_index]

    def _set_status(self, message: str, error: bool = False) -> None:
        self.system_status = message
        self.status_is_error = error
        self._refresh_status()

    # Rendering

    def _refresh_all(self) -> None:
        self._refresh_nav()
        self._refresh_body()
        self._refresh_status()
        self._refresh_help()

    def _refresh_nav(self) -> None:
        try:
            nav = self.query_one("#nav-bar", Static)
        except NoMatches:
            return
        nav.update(format_nav_bar(self.current_view))

    def _refresh_body(self) -> None:
        try:
            body = self.query_one("#body", Static)
        except NoMatches:
            return
        body.update(self._render_dispatch[self.current_view]())

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        if self.input_state == "editing":
            bar.update(Text("Editing: type text, Enter/Esc to finish", style="bold"))
            return
        style = "bold #ffb3b3" if self.status_is_error else ""
        bar.update(Text(self.system_status or "Ready", style=style))

    def _refresh_help(self) -> None:
        try:
            help_widget = self.query_one("#help", Static)
        except NoMatches:
            return
        help_widget.update(_HELP_BY_SCREEN[self.current_view])

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            half = rows // 2
            start = selected - half
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)

    def _render_item_list(self, items: list[MenuItem], selectable: bool, compact: bool, rows: int) -> Text:
        start, end = self._window_bounds(len(items), rows, self.item_selected_index if selectable else None)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if selectable and idx == self.item_selected_index else "  "
            lines.append(pointer)
            if compact:
                lines.append_text(format_item_summary(items[idx]))
            else:
                lines.append_text(format_item_card(items[idx]))

        if end < len(items):
            lines.append("\n⋮", style="dim")
        return lines

    def _body_rows(self, lines_per_item: int, reserved: int) -> int:
        try:
            body = self.query_one("#body", Static)
        except NoMatches:
            return 8
        return max(1, (self._visible_rows(body) - reserved) // lines_per_item)

    def _render_home(self) -> Text:
        items = list(self.store.list())
        text = Text()
        text.append("Menu items: ", style="bold")
        text.append(str(total_count(items)))
        text.append("\n\nAverage Prices by Course\n", style="bold underline")
        text.append_text(format_averages(average_by_course(items)))
        text.append("\n\n")

        if not items:
            text.append_text(format_empty_state(*EMPTY_STATES["home"]))
            return text

        text.append_text(self._render_item_list(items, selectable=True, compact=False, rows=self._body_rows(3, 9)))
        return text

    def _render_add(self) -> Text:
        text = Text()
        text.append("Insert a Menu Item\n\n", style="bold underline")
        rows = self._add_rows()

        for idx, (row_kind, row_value) in enumerate(rows):
            if idx > 0:
                text.append("\n")
            is_current = idx == self.add_cursor
            pointer = "➤ " if is_current else "  "
            text.append(pointer)

            if row_kind in _TEXT_FIELDS:
                text.append_text(self._render_text_field(row_kind, is_current))
            elif row_kind == "course":
                text.append("Course: ")
                text.append("◀ ", style="dim")
                text.append_text(format_course_badge(self.form.course))
                text.append(" ▶", style="dim")
            elif row_kind == "ingredient":
                checked = Ingredient(row_value) in self.form.ingredients
                text.append(f"{'[x]' if checked else '[ ]'} {row_value}", style="bold" if checked else "")
            else:
                text.append("[ Add to Menu ]", style="bold reverse" if is_current else "bold")

        items = list(self.store.list())
        if items:
            text.append("\n\nCurrent Menu Items\n", style="bold underline")
            text.append_text(
                self._render_item_list(items, selectable=True, compact=True, rows=self._body_rows(1, len(rows) + 5))
            )
        return text

    def _render_text_field(self, row_kind: str, is_current: bool) -> Text:
        labels = {"name": "Dish Name", "description": "Description", "price": "Price (Rands)"}
        placeholders = {"name": NAME_PLACEHOLDER, "description": DESCRIPTION_PLACEHOLDER, "price": PRICE_PLACEHOLDER}
        value = getattr(self.form, _TEXT_FIELDS[row_kind])

        text = Text()
        text.append(f"{labels[row_kind]}: ")
        if is_current and self.input_state == "editing":
            text.append(f"{value}|", style="bold")
        elif value:
            text.append(value)
        else:
            text.append(placeholders[row_kind], style="dim italic")
        return text

    def _render_filter(self) -> Text:
        text = Text()
        text.append("Filter by Course\n\n", style="bold underline")
        for idx, option in enumerate(FILTER_OPTIONS):
            if idx > 0:
                text.append(" ")
            label = getattr(option, "value", option)
            style = "bold reverse" if option == self.filter_selector else "dim"
            text.append(f" {label} ", style=style)
        text.append("\n\n")

        filtered = filter_by_course(self.store.list(), self.filter_selector)
        if not filtered:
            text.append_text(format_empty_state(*EMPTY_STATES["filter"]))
            return text

        text.append_text(self._render_item_list(filtered, selectable=False, compact=False, rows=self._body_rows(3, 4)))
        return text

    def _render_average(self) -> Text:
        text = Text()
        text.append("Average Price by Course\n\n", style="bold underline")
        averages = average_by_course(self.store)
        if not has_course_data(averages):
            text.append_text(format_empty_state(*EMPTY_STATES["average"]))
            return text
        text.append_text(format_averages(averages, count_by_course(self.store)))
        return text
