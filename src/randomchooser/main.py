"""
Application Entry Point
=======================
Sets up logging, builds the window and starts the Qt Event Loop.

Run with: python -m randomchooser
"""
import logging
import sys

from randomchooser.application import create_app, build_main_window
from randomchooser.logging_config import setup_logging


def main() -> int:
    # Use logging.DEBUG to see every spin tick
    setup_logging(level=logging.INFO)

    app = create_app()

    window = build_main_window()
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
