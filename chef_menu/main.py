"""Entry point for the chef menu Textual app."""

from __future__ import annotations

import logging
from pathlib import Path

from chef_menu.config import DEBUG_LOG_PATH, LOG_LEVEL
from chef_menu.menu_app import MenuApp


def configure_logging(path: str = DEBUG_LOG_PATH, level: str = LOG_LEVEL) -> None:
    """Send logs to a file; the terminal belongs to the TUI."""
    log_file = Path(path)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level, logging.DEBUG),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    MenuApp().run()


if __name__ == "__main__":
    main()
