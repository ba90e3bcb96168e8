"""Logging setup.

- ``LOG_LEVEL``: DEBUG, INFO, WARNING (default), ERROR, CRITICAL
- ``LOG_FILE``: write records to this file instead of the default sink

The default sink is the Textual devtools console for the TUI (stderr
would corrupt the screen) and stderr for headless runs.
"""

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(tui: bool = False) -> None:
    level_name = os.environ.get("LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)

    log_file = os.environ.get("LOG_FILE")
    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    elif tui:
        from textual.logging import TextualHandler

        handler = TextualHandler()
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger("repo_pulse")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
