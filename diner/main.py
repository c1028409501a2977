"""Entry point for the diner menu Textual app."""

from __future__ import annotations

from diner.menu_app import DinerApp


def main() -> None:
    """Run the Textual application."""
    DinerApp().run()


if __name__ == "__main__":
    main()
