import pytest

from diner.confirm_modal import ConfirmDeleteModal
from diner.models import Course, Ingredient, Screen
from diner.menu_app import DinerApp
from diner.store import MenuStore


@pytest.fixture(autouse=True)
def _debug_log_in_tmp(tmp_path, monkeypatch):
    monkeypatch.setenv("DINER_DEBUG_LOG", str(tmp_path / "diner-debug.log"))


def _row_index(app: DinerApp, kind: str, value: str = "") -> int:
    return app._add_rows().index((kind, value))


async def test_hotkeys_switch_screens():
    app = DinerApp()
    async with app.run_test() as pilot:
        assert app.current_view is Screen.HOME
        await pilot.press("a")
        assert app.current_view is Screen.ADD
        await pilot.press("f")
        assert app.current_view is Screen.FILTER
        await pilot.press("4")
        assert app.current_view is Screen.AVERAGE
        await pilot.press("h")
        assert app.current_view is Screen.HOME


async def test_typing_into_name_field():
    app = DinerApp()
    async with app.run_test() as pilot:
        await pilot.press("a", "enter")
        assert app.input_state == "editing"
        await pilot.press("s", "o", "u", "p", "backspace", "p")
        # screen hotkeys are plain text while editing
        await pilot.press("h")
        await pilot.press("enter")

        assert app.input_state == "normal"
        assert app.form.name == "souph"
        assert app.current_view is Screen.ADD


async def test_submit_prepends_and_resets_form():
    store = MenuStore()
    app = DinerApp(store=store)
    async with app.run_test() as pilot:
        await pilot.press("a")
        app.form.name = "Bone Marrow"
        app.form.description = "Roasted"
        app.form.course = Course.MAIN
        app.form.ingredients = [Ingredient.CHEESE]
        app.form.price_text = "89.99"
        app.add_cursor = _row_index(app, "submit")
        await pilot.press("enter")

        assert len(store) == 1
        assert store.list()[0].name == "Bone Marrow"
        assert app.form.name == ""
        assert not app.status_is_error


async def test_invalid_submit_shows_error_and_keeps_form():
    store = MenuStore()
    app = DinerApp(store=store)
    async with app.run_test() as pilot:
        await pilot.press("a")
        app.form.name = "Bone Marrow"
        app.form.description = "Roasted"
        app.form.ingredients = [Ingredient.CHEESE]
        app.form.price_text = "abc"
        app.add_cursor = _row_index(app, "submit")
        await pilot.press("enter")

        assert len(store) == 0
        assert app.status_is_error
        assert app.system_status == "Please enter a valid price (number > 0)."
        assert app.form.name == "Bone Marrow"


async def test_fifth_ingredient_rejected():
    app = DinerApp()
    async with app.run_test() as pilot:
        await pilot.press("a")
        app.form.ingredients = [Ingredient.CHEESE, Ingredient.PEPPERONI, Ingredient.BLACK_PEPPER, Ingredient.BASIL]
        app.add_cursor = _row_index(app, "ingredient", Ingredient.TOMATO.value)
        await pilot.press("enter")

        assert app.form.ingredients == [
            Ingredient.CHEESE,
            Ingredient.PEPPERONI,
            Ingredient.BLACK_PEPPER,
            Ingredient.BASIL,
        ]
        assert app.status_is_error


async def test_course_row_cycles_with_arrows():
    app = DinerApp()
    async with app.run_test() as pilot:
        await pilot.press("a")
        app.add_cursor = _row_index(app, "course")
        await pilot.press("right")
        assert app.form.course is Course.MAIN
        await pilot.press("left", "left")
        assert app.form.course is Course.DRINK


async def test_delete_requires_confirmation(make_item):
    store = MenuStore()
    item = make_item()
    store.add(item)
    app = DinerApp(store=store)
    async with app.run_test() as pilot:
        await pilot.press("j", "d")
        await pilot.pause()
        assert isinstance(app.screen, ConfirmDeleteModal)
        await pilot.press("n")
        await pilot.pause()
        assert store.list() == (item,)

        await pilot.press("d")
        await pilot.pause()
        assert isinstance(app.screen, ConfirmDeleteModal)
        await pilot.press("y")
        await pilot.pause()
        assert store.list() == ()
        assert app.item_selected_index is None


async def test_filter_cycles_through_courses():
    app = DinerApp()
    async with app.run_test() as pilot:
        await pilot.press("f", "right")
        assert app.filter_selector is Course.STARTER
        await pilot.press("left", "left")
        assert app.filter_selector is Course.DRINK


async def test_escape_cancels_delete(make_item):
    store = MenuStore()
    item = make_item()
    store.add(item)
    app = DinerApp(store=store)
    async with app.run_test() as pilot:
        await pilot.press("j", "d")
        await pilot.pause()
        assert isinstance(app.screen, ConfirmDeleteModal)
        await pilot.press("escape")
        await pilot.pause()

        assert not isinstance(app.screen, ConfirmDeleteModal)
        assert store.list() == (item,)


async def test_average_view_empty_then_populated(make_item):
    store = MenuStore()
    app = DinerApp(store=store)
    async with app.run_test() as pilot:
        await pilot.press("v")
        assert "No data yet" in app._render_average().plain

        store.add(make_item(price=100.0))
        store.add(make_item(price=50.0))
        plain = app._render_average().plain

        assert "No data yet" not in plain
        assert "R 75.00" in plain
        assert "(2 items)" in plain
        assert "R 0.00" in plain


async def test_filter_view_lists_matching_items(make_item):
    store = MenuStore()
    app = DinerApp(store=store)
    async with app.run_test() as pilot:
        await pilot.press("f")
        assert "No results" in app._render_filter().plain

        store.add(make_item(name="Lemonade", course=Course.DRINK))
        store.add(make_item(name="Steak", course=Course.MAIN))
        plain = app._render_filter().plain
        assert "Lemonade" in plain
        assert "Steak" in plain

        app.select_filter(Course.DRINK)
        plain = app._render_filter().plain
        assert "Lemonade" in plain
        assert "Steak" not in plain

        app.select_filter(Course.DESSERT)
        assert "No results" in app._render_filter().plain


async def test_home_view_shows_count_and_averages(make_item):
    store = MenuStore()
    app = DinerApp(store=store)
    async with app.run_test():
        plain = app._render_home().plain
        assert "Menu items: 0" in plain
        assert "Average Prices by Course" in plain
        assert "No menu yet" in plain

        store.add(make_item(name="Bone Marrow", price=89.99))
        plain = app._render_home().plain
        assert "Menu items: 1" in plain
        assert "R 89.99" in plain
        assert "Bone Marrow" in plain
        assert "No menu yet" not in plain
