"""Entry point for the BuffBites Textual app."""

from __future__ import annotations

from buffbites.buffbites_app import BuffBitesApp


def main() -> None:
    """Run the Textual application."""
    BuffBitesApp().run()


if __name__ == "__main__":
    main()
